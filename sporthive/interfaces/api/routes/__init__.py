from fastapi import FastAPI

from .activities import router as activities_router
from .auth import router as auth_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(activities_router)
    app.include_router(users_router)
