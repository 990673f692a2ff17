"""
Startup schema migration.

The database is built from the ORM metadata. A fingerprint of that metadata is
stored in the ``schema_version`` table; when the stored value differs from the
current model every table is dropped and recreated and the seed products are
inserted. An unchanged model leaves the database untouched, so seeding happens
exactly once per model version.

The check-and-rebuild runs under a file lock so several workers starting
against the same database do not rebuild it concurrently.
"""
import hashlib
import logging
import os
import tempfile
from typing import Optional

from filelock import FileLock, Timeout
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from products_api.config import settings
from products_api.db import Base, engine as default_engine
from products_api.models.product import Product
from products_api.models.schema_version import SchemaVersion

log = logging.getLogger("products_api.migrations")

SEED_PRODUCTS = [
    {"id": 1, "product_name": "Chai", "unit_price": 10},
    {"id": 2, "product_name": "Chang", "unit_price": 11},
    {"id": 3, "product_name": "Aniseed Syrup", "unit_price": 12},
]

MARKER_ID = 1


class MigrationError(Exception):
    pass


def model_fingerprint(metadata=Base.metadata) -> str:
    parts = []
    for table in sorted(metadata.tables.values(), key=lambda t: t.name):
        if table.name == SchemaVersion.__tablename__:
            continue
        for col in table.columns:
            parts.append(
                f"{table.name}.{col.name}:{col.type}:"
                f"nullable={col.nullable}:pk={col.primary_key}"
            )
    return hashlib.sha256("\n".join(parts).encode("utf-8")).hexdigest()


def stored_fingerprint(engine: Engine) -> Optional[str]:
    if not inspect(engine).has_table(SchemaVersion.__tablename__):
        return None
    with Session(engine) as s:
        marker = s.get(SchemaVersion, MARKER_ID)
        return marker.fingerprint if marker else None


def default_lock_path(url: str) -> str:
    locks_dir = os.path.join(tempfile.gettempdir(), "products_api_locks")
    os.makedirs(locks_dir, exist_ok=True)
    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:16]
    return os.path.join(locks_dir, f"migrate_{digest}.lock")


def rebuild(engine: Engine, fingerprint: str) -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with Session(engine) as s, s.begin():
        for ent in SEED_PRODUCTS:
            s.add(Product(**ent))
        s.add(SchemaVersion(id=MARKER_ID, fingerprint=fingerprint))
    log.info("Seeded %d products.", len(SEED_PRODUCTS))


def migrate(
    engine: Optional[Engine] = None,
    reset: bool = False,
    lock_path: Optional[str] = None,
    timeout: Optional[float] = None,
) -> bool:
    """
    Bring the database in line with the current model.

    Returns True when the schema was (re)created and seeded, False when the
    stored fingerprint already matched.
    """
    engine = engine or default_engine
    lock_path = lock_path or settings.MIGRATION_LOCK_PATH or default_lock_path(
        str(engine.url)
    )
    if timeout is None:
        timeout = settings.MIGRATION_LOCK_TIMEOUT_SECONDS

    lock = FileLock(lock_path)
    try:
        lock.acquire(timeout=timeout)
    except Timeout as e:
        raise MigrationError(
            f"Could not acquire migration lock {lock_path} within {timeout}s"
        ) from e
    try:
        expected = model_fingerprint()
        current = stored_fingerprint(engine)
        if current == expected and not reset:
            log.info("Schema up to date (%s); skipping migration.", expected[:12])
            return False
        if reset:
            log.info("Reset requested; rebuilding database schema.")
        else:
            log.info(
                "Model changed (stored=%s, current=%s); rebuilding database schema.",
                current[:12] if current else None,
                expected[:12],
            )
        rebuild(engine, expected)
        return True
    finally:
        lock.release()
