from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from products_api.db import Base


class SchemaVersion(Base):
    """Single-row marker recording which model fingerprint the database was built from."""

    __tablename__ = "schema_version"

    id = Column(Integer, primary_key=True)
    fingerprint = Column(String(64), nullable=False)
    applied_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
