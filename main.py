import asyncio
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sporthive.application.jobs import ExpirationJob
from sporthive.config import get_settings
from sporthive.infrastructure.database import SessionLocal, engine, initialize_database
from sporthive.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize the database, run the expiration sweep and release resources on shutdown."""

    settings = get_settings()
    initialize_database()

    job: ExpirationJob | None = None
    job_task: asyncio.Task | None = None
    if settings.expiration_sweep_enabled:
        job = ExpirationJob(
            SessionLocal, interval_seconds=settings.expiration_sweep_interval_seconds
        )
        job_task = asyncio.create_task(job.run())
    app.state.expiration_job = job

    try:
        yield
    finally:
        if job is not None and job_task is not None:
            job.stop()
            job_task.cancel()
            with suppress(asyncio.CancelledError):
                await job_task
        engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="SportHive API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
