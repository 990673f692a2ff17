import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from products_api.api.health import router as health_router
from products_api.api.routes_products import router as products_router
from products_api.config import settings
from products_api.db import engine
from products_api.db.migrations import migrate

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("products_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup: schema check and seed run once, before requests are served
    migrate(engine, reset=settings.RESET_DB)
    yield


app = FastAPI(title="Products API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(products_router, prefix="/api/products", tags=["products"])


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception):
    log.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})
