# shop_api/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from shop_api.api.errors import register_exception_handlers
from shop_api.api.routers import cart, categories, health, products
from shop_api.data.database import Base, engine
from shop_api.data.seed import seed
from shop_api.utils.logging import get_logger
from shop_api.utils.retry import db_retry
from shop_api.utils.settings import APP_HOST, APP_PORT, SEED_ON_STARTUP

# import modeli przed create_all, zeby byly w Base.metadata
import shop_api.data.models  # noqa: F401

logger = get_logger(__name__)


@db_retry()
def init_db(bind=None):
    bind = bind or engine
    logger.info(f"Tworzenie tabel: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=bind)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if SEED_ON_STARTUP:
        seed()
    logger.info("Shop API gotowe")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shop API",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(categories.router)
    app.include_router(cart.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
