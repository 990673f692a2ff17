import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from products_api.models.product import Product
from products_api.repositories.commands import (
    Command,
    DeleteCommand,
    InsertCommand,
    UpdateCommand,
)

log = logging.getLogger("products_api.repository")


class ProductStoreError(Exception):
    pass


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[Product]:
        # case-insensitive, independent of the backend's default collation
        return (
            self.db.query(Product)
            .order_by(func.lower(Product.product_name), Product.product_name)
            .all()
        )

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def execute(self, *commands: Command) -> List[Optional[Product]]:
        """
        Apply the commands as one unit of work and commit.

        Returns the affected rows in command order (None for deletes). On any
        failure the whole batch is rolled back; storage failures surface as
        ProductStoreError, anything else is re-raised unchanged.
        """
        results = []
        try:
            for command in commands:
                results.append(self._apply(command))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.warning("product batch rolled back: %s", e)
            raise ProductStoreError(f"Failed to save products: {e}") from e
        except Exception as e:
            self.db.rollback()
            log.warning("product batch rolled back: %s", e)
            raise
        log.debug("committed %d product command(s)", len(commands))
        return results

    def _apply(self, command: Command) -> Optional[Product]:
        if isinstance(command, InsertCommand):
            p = Product(
                id=command.id,
                product_name=command.product_name,
                unit_price=command.unit_price,
            )
            self.db.add(p)
            # flush so duplicate ids fail here and generated ids are assigned
            self.db.flush()
            return p
        if isinstance(command, UpdateCommand):
            p = self.db.get(Product, command.id)
            if p is None:
                raise ProductStoreError(
                    f"Update expected 1 row for id={command.id}, found 0"
                )
            p.product_name = command.product_name
            p.unit_price = command.unit_price
            self.db.flush()
            return p
        if isinstance(command, DeleteCommand):
            p = self.db.get(Product, command.id)
            if p is None:
                raise ProductStoreError(
                    f"Delete expected 1 row for id={command.id}, found 0"
                )
            self.db.delete(p)
            self.db.flush()
            return None
        raise TypeError(f"Unsupported command: {command!r}")
