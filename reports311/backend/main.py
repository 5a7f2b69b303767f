from __future__ import annotations

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from database import engine, session_scope
from logging_config import configure_logging, get_logger
from models import Base
from routes import reports as reports_routes
from services.seed_service import SeedService

logger = get_logger(__name__)


def _init_db() -> None:
    if settings.recreate_db_on_startup:
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    # Seed sample data for demo (only if table empty)
    if not settings.seed_sample_data:
        return
    svc = SeedService()
    with session_scope() as db:
        if svc.has_any_data(db):
            return
        if not os.path.exists(settings.sample_csv_path):
            logger.info("No sample CSV at %s; skipping seed.", settings.sample_csv_path)
            return
        svc.ingest_csv_into_db(db, settings.sample_csv_path)


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name)

    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(reports_routes.router)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.on_event("startup")
    def _startup() -> None:
        logger.info("[CONFIG] APP_ENV=%s DATABASE_URL=%s", settings.env, settings.database_url)
        logger.info(
            "[CONFIG] MAX_QUERY_LIMIT=%s STRICT_FILTERS=%s SEED_SAMPLE_DATA=%s",
            settings.max_query_limit,
            settings.strict_filters,
            settings.seed_sample_data,
        )
        _init_db()

    return app


app = create_app()
