import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cats import repository as cat_repository
from cats import router as cats_router
from cats.schemas import placeholder_cat
from core import db, errors
from core.recent import RecentRecord
from dogs import repository as dog_repository
from dogs import router as dogs_router
from dogs.schemas import placeholder_dog
from pages import router as pages_router

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"

logger = logging.getLogger(__name__)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip() or DEFAULT_CORS_ORIGINS
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        for collection in (cat_repository.collection, dog_repository.collection):
            await collection.ensure()
        logger.info("collections_ready")
        yield
    finally:
        await db.close_pool()


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(lifespan=lifespan)
    app.state.recent_cat = RecentRecord(placeholder_cat())
    app.state.recent_dog = RecentRecord(placeholder_dog())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    errors.install(app)

    app.include_router(pages_router.router, tags=["pages"])
    app.include_router(cats_router.router, tags=["cats"])
    app.include_router(dogs_router.router, tags=["dogs"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
