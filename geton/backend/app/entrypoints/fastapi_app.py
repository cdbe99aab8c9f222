# app/entrypoints/fastapi_app.py
from __future__ import annotations

from fastapi import FastAPI

from .api.routers import health, compatibility


def create_app() -> FastAPI:
    app = FastAPI(title="GetOn - Renter Match Engine")

    # Routers
    app.include_router(health.router)
    app.include_router(compatibility.router)

    return app
