"""
Config Router
Exposes the active scoring catalog and runtime settings.
"""
from fastapi import APIRouter

from src.core.catalog import catalog
from src.core.config import settings

router = APIRouter(
    prefix="/api/config",
    tags=["Config"]
)


@router.get("/catalog")
async def get_catalog_config():
    """
    Get the active scoring catalog.
    Returns problem themes, cluster themes, tag groups and CitObs regions.
    """
    return catalog.to_summary()


@router.get("/settings")
async def get_runtime_settings():
    """Non-secret runtime settings."""
    return {
        "environment": settings.environment,
        "citobs_enabled": settings.citobs_enabled,
        "citobs_regions": sorted(catalog.citobs_regions),
    }
