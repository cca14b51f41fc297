"""FastAPI application factory."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from profile_analyzer.config import AppConfig, load_config_or_default, validate_config
from profile_analyzer.models import init_db, make_engine, make_session_factory

from .analysis import router as analysis_router

logger = logging.getLogger("profile_analyzer.web")

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: make sure the analysis table exists
    init_db(app.state.engine)
    for warning in validate_config(app.state.config):
        logger.warning("Config: %s", warning)
    yield
    app.state.engine.dispose()


def create_app(config: AppConfig | None = None) -> FastAPI:
    if config is None:
        config = load_config_or_default(os.environ.get("PROFILE_ANALYZER_CONFIG", "config.yaml"))

    app = FastAPI(title="Profile Analyzer", lifespan=lifespan)
    app.state.config = config
    app.state.engine = make_engine(config.database_url)
    app.state.session_factory = make_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=CORS_ALLOW_HEADERS,
    )

    app.include_router(analysis_router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
