from fastapi import APIRouter
from sqlalchemy import text

from products_api.db import engine
from products_api.db.migrations import stored_fingerprint

router = APIRouter()


@router.get("/health", tags=["health"])
def health():
    db_ok = False
    fingerprint = None
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
        fingerprint = stored_fingerprint(engine)
    except Exception:
        db_ok = False

    return {
        "status": "ok" if db_ok and fingerprint else "degraded",
        "db": db_ok,
        "schema_fingerprint": fingerprint,
    }
