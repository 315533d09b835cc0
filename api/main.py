import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import repository as auth_repository
from auth import router as auth_router
from auth import schemas as auth_schemas
from core import db, settings
from core.errors import register_error_handlers
from core.log import configure_logging
from core.store import RecordStore, open_store
from ohlc import repository as ohlc_repository
from ohlc import router as ohlc_router
from ohlc import schemas as ohlc_schemas

logger = logging.getLogger(__name__)


def build_stores(backend: str) -> dict[str, RecordStore]:
    return {
        ohlc_repository.TABLE_NAME: open_store(backend, ohlc_repository.TABLE_NAME, ohlc_schemas.PriceRecord),
        auth_repository.USERS_TABLE: open_store(backend, auth_repository.USERS_TABLE, auth_schemas.User),
        auth_repository.API_KEYS_TABLE: open_store(backend, auth_repository.API_KEYS_TABLE, auth_schemas.ApiKey),
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Stores passed to create_app() (tests) are used as-is.
    uses_pool = False
    if app.state.stores is None:
        backend = settings.store_backend()
        if backend == "postgres":
            await db.init_pool()
            uses_pool = True
            await db.ensure_kv_schema()
        app.state.stores = build_stores(backend)
        logger.info("stores_ready backend=%s", backend)
    try:
        yield
    finally:
        if uses_pool:
            await db.close_pool()


def create_app(stores: dict[str, RecordStore] | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(title="ohlc-record-service", lifespan=lifespan)
    app.state.stores = stores

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(ohlc_router.router, tags=["ohlc"])
    app.include_router(auth_router.router, tags=["auth"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "ohlc record service api"}

    return app


app = create_app()
