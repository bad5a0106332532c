from fastapi import FastAPI

from src.web.routers.bloom import router as bloom_router
from src.web.routers.actors import router as actors_router
from src.web.routers.startups import router as startups_router
from src.web.routers.investors import router as investors_router
from src.web.routers.ecosystem import router as ecosystem_router
from src.web.routers.config import router as config_router

def register_routers(app: FastAPI):
    """Register all routers with the application."""
    app.include_router(bloom_router)
    app.include_router(actors_router)
    app.include_router(startups_router)
    app.include_router(investors_router)
    app.include_router(ecosystem_router)
    app.include_router(config_router)
