"""FastAPI application factory.

Lifespan
--------
On startup the app opens a single SQLite connection, initialises the schema,
connects the optional MongoDB client and wires a
:class:`~backend.summary.pipeline.SummaryPipeline` onto
``app.state.pipeline``.  On shutdown both connections are closed.

A pre-built pipeline can be injected instead (``create_app(pipeline=...)``),
in which case no storage is opened.

Routers
-------
    /api/summarise  — fetch, summarise and gloss a page
    /health         — liveness probe
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import settings
from backend.db import get_connection, init_db
from backend.db.documents import get_document_collection, get_mongo_client
from backend.logging_setup import setup_logging
from backend.summary.pipeline import SummaryPipeline, build_pipeline

from backend.api.routers import summarise as summarise_router

logger = logging.getLogger(__name__)


def create_app(pipeline: Optional[SummaryPipeline] = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    setup_logging(settings.log_level, settings.log_dir or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if pipeline is not None:
            app.state.pipeline = pipeline
            yield
            return

        conn = get_connection()
        init_db(conn)
        mongo = get_mongo_client()
        app.state.pipeline = build_pipeline(conn, get_document_collection(mongo))
        logger.info(
            "Pipeline ready (sinks: %s)",
            ", ".join(s.name for s in app.state.pipeline.sinks) or "none",
        )
        try:
            yield
        finally:
            conn.close()
            if mongo is not None:
                mongo.close()

    app = FastAPI(
        title="Blog Summariser API",
        description=(
            "Fetches a web page, extracts its main text, returns a short "
            "extractive summary and a word-for-word Urdu gloss of it."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(summarise_router.router, prefix="/api", tags=["summarise"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn backend.api.app:app --reload
app = create_app()
