"""HireTrack API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The dataset context is generated once per process in the lifespan and
      published on app.state before the first request
    - Global error handlers map HireTrackError → structured JSON responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event for startup/shutdown
    - create_app() factory so tests can build an app around a fixed dataset
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hiretrack.api.error_handlers import register_error_handlers
from hiretrack.api.routes import (
    applicants, applications, dashboard, health, jobs, reports,
)
from hiretrack.config import Settings, get_settings
from hiretrack.core.context import DatasetContext, create_dataset_context
from hiretrack.infrastructure.observability import setup_logging
from hiretrack.services.recruitment_queries import RecruitmentQueries

logger = logging.getLogger(__name__)


def build_context(settings: Settings) -> DatasetContext:
    context = create_dataset_context(
        seed=settings.dataset_seed,
        job_count=settings.job_count,
        report_count=settings.report_count,
        owner_name=settings.owner_name,
        memoize_applicants=settings.memoize_applicants,
    )
    logger.info(
        f"Generated dataset: {len(context.store.jobs)} jobs, "
        f"{len(context.store.reports)} reports",
        extra={"seed": settings.dataset_seed},
    )
    return context


def create_app(context: DatasetContext | None = None) -> FastAPI:
    """Build the API; a given context replaces the one generated on startup."""
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        if getattr(app.state, "queries", None) is None:
            app.state.queries = RecruitmentQueries(build_context(settings))
        logger.info("HireTrack API started")
        yield
        logger.info("HireTrack API shutting down")

    app = FastAPI(title="HireTrack API", version="1.0.0", lifespan=lifespan)
    if context is not None:
        app.state.queries = RecruitmentQueries(context)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(jobs.router)
    app.include_router(applicants.router)
    app.include_router(applications.router)
    app.include_router(reports.router)
    app.include_router(dashboard.router)

    register_error_handlers(app)
    return app


app = create_app()
