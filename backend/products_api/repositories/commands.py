from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union


@dataclass(frozen=True)
class InsertCommand:
    """Add a new product row. ``id=None`` lets the database assign one."""

    product_name: Optional[str]
    unit_price: Decimal
    id: Optional[int] = None


@dataclass(frozen=True)
class UpdateCommand:
    """Overwrite every column of the row with this id."""

    id: int
    product_name: Optional[str]
    unit_price: Decimal


@dataclass(frozen=True)
class DeleteCommand:
    id: int


Command = Union[InsertCommand, UpdateCommand, DeleteCommand]
