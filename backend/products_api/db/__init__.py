from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from products_api.config import settings


def build_engine(url: str):
    """
    Create an engine for the configured connection string.

    SQLite connections are opened on FastAPI's worker threads, so the
    same-thread check is disabled for that dialect.
    """
    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(url, future=True, echo=False, connect_args=connect_args)


DATABASE_URL = settings.database_url
engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
