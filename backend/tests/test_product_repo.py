from decimal import Decimal

import pytest

from products_api.db import SessionLocal
from products_api.db.migrations import migrate
from products_api.repositories.commands import DeleteCommand, InsertCommand, UpdateCommand
from products_api.repositories.product_repo import ProductRepository, ProductStoreError


def setup_function(function):
    migrate(reset=True)


def test_list_ordered_by_name():
    db = SessionLocal()
    try:
        repo = ProductRepository(db)
        assert [p.product_name for p in repo.list()] == ["Aniseed Syrup", "Chai", "Chang"]
    finally:
        db.close()


def test_execute_applies_batch():
    db = SessionLocal()
    try:
        repo = ProductRepository(db)
        inserted, updated, deleted = repo.execute(
            InsertCommand(id=4, product_name="Ikura", unit_price=Decimal("31.00")),
            UpdateCommand(id=2, product_name="Chang", unit_price=Decimal("19.00")),
            DeleteCommand(id=1),
        )
        assert inserted.id == 4
        assert updated.unit_price == Decimal("19.00")
        assert deleted is None
    finally:
        db.close()

    db = SessionLocal()
    try:
        repo = ProductRepository(db)
        assert repo.get_by_id(1) is None
        assert repo.get_by_id(2).unit_price == Decimal("19.00")
        assert repo.get_by_id(4).product_name == "Ikura"
    finally:
        db.close()


def test_failed_batch_rolls_back_everything():
    db = SessionLocal()
    try:
        repo = ProductRepository(db)
        with pytest.raises(ProductStoreError):
            repo.execute(
                InsertCommand(id=5, product_name="Konbu", unit_price=Decimal("6")),
                InsertCommand(id=1, product_name="Duplicate", unit_price=Decimal("1")),
            )
        # session usable after rollback
        assert repo.get_by_id(5) is None
        assert repo.get_by_id(1).product_name == "Chai"
    finally:
        db.close()


def test_update_missing_row_fails():
    db = SessionLocal()
    try:
        repo = ProductRepository(db)
        with pytest.raises(ProductStoreError):
            repo.execute(UpdateCommand(id=99, product_name="Ghost", unit_price=Decimal("1")))
    finally:
        db.close()


def test_delete_missing_row_fails():
    db = SessionLocal()
    try:
        repo = ProductRepository(db)
        with pytest.raises(ProductStoreError):
            repo.execute(DeleteCommand(id=99))
        assert len(repo.list()) == 3
    finally:
        db.close()


def test_unknown_command_rejected():
    db = SessionLocal()
    try:
        repo = ProductRepository(db)
        with pytest.raises(TypeError):
            repo.execute("not a command")
    finally:
        db.close()


def test_unsupported_command_rolls_back_batch():
    db = SessionLocal()
    try:
        repo = ProductRepository(db)
        with pytest.raises(TypeError):
            repo.execute(
                InsertCommand(id=6, product_name="Tofu", unit_price=Decimal("23.25")),
                "not a command",
            )
        # nothing left pending for a later commit
        db.commit()
    finally:
        db.close()

    db = SessionLocal()
    try:
        assert ProductRepository(db).get_by_id(6) is None
    finally:
        db.close()
