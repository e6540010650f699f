import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from catshop.config import settings
from catshop.routers.auth import router as auth_router
from catshop.routers.products import router as products_router
from catshop.services.user_store import SqlUserStore, build_user_store
from catshop.utils.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = app.state.user_store
    if isinstance(store, SqlUserStore):
        if settings.database_url.startswith("sqlite"):
            os.makedirs(settings.data_dir, exist_ok=True)
        await store.create_schema()
    logger.info("Server started (environment=%s, user_store=%s)", settings.environment, settings.user_store)
    yield
    if isinstance(store, SqlUserStore):
        await store.dispose()


app = FastAPI(
    title="Cat Shop API",
    description="Каталог котиков, регистрация и вход по cookie",
    version=VERSION,
    lifespan=lifespan,
)
app.state.user_store = build_user_store(settings)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(products_router, prefix="/api")
app.include_router(auth_router, prefix="/api")

app.mount("/images", StaticFiles(directory=settings.images_dir, check_dir=False), name="images")


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "cat-shop-api", "version": VERSION}
