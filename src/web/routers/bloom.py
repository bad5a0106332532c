"""Bloom router: regions, weekly summaries, bulletins, live data and beaches."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from src.bloom.beaches import build_beach_statuses, search_beaches
from src.bloom.bulletin import generate_bulletin
from src.bloom.recommendations import recommend_actors
from src.bloom.repository import BloomRepository
from src.bloom.service import BloomService
from src.core.exceptions import UnknownRegionError
from src.core.schemas import StandardResponse
from src.web.dependencies import get_bloom_service, get_repo
from src.web.responses import collection
from src.web.serializers import serialize, serialize_list

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/bloom",
    tags=["Bloom"]
)

ACTOR_LIST_FIELDS = ["id", "name", "type", "country", "tags", "description", "url"]


@router.get("/regions", summary="Available Regions")
async def get_regions(repo: BloomRepository = Depends(get_repo)):
    """Regions with at least one observation."""
    return collection(repo.available_regions())


@router.get("/weeks", summary="Available Weeks")
async def get_weeks(region: Optional[str] = None, repo: BloomRepository = Depends(get_repo)):
    """Weeks with observations (most recent first), optionally for one region."""
    return collection(repo.available_weeks(region))


@router.get("/summary", response_model=StandardResponse[dict], summary="Weekly Bloom Summary")
async def get_summary(
    region: str,
    week: int = Query(..., ge=1, le=53),
    repo: BloomRepository = Depends(get_repo),
):
    summary = repo.get_bloom_summary(region, week)
    return StandardResponse(data=serialize(summary))


@router.get("/bulletin", response_model=StandardResponse[dict], summary="Citizen Bulletin & Expert Note")
async def get_bulletin(
    region: str,
    week: int = Query(..., ge=1, le=53),
    repo: BloomRepository = Depends(get_repo),
):
    summary = repo.get_bloom_summary(region, week)
    return StandardResponse(data=serialize(generate_bulletin(summary)))


@router.get("/live/{region_key}", response_model=StandardResponse[dict], summary="Live CitObs Summary")
async def get_live_summary(
    region_key: str,
    week: int = Query(..., ge=1, le=53),
    service: BloomService = Depends(get_bloom_service),
):
    """
    Live citizen-observation summary for a configured region.
    Falls back to the static-data summary when the upstream API is unavailable.
    """
    try:
        result = await service.get_live_summary(region_key, week)
    except UnknownRegionError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return StandardResponse(
        data={"source": result.source, "summary": serialize(result.summary)},
        message=result.error,
    )


@router.get("/beaches", summary="Beach Safety Search")
async def get_beaches(q: Optional[str] = None, repo: BloomRepository = Depends(get_repo)):
    """Beach statuses from the latest observations. Without ``q`` all beaches are listed."""
    statuses = build_beach_statuses(repo.beaches, repo.observations)
    if q is not None:
        statuses = search_beaches(statuses, q)
    return collection([serialize(s, extra={"message": s.message}) for s in statuses])


@router.get("/recommendations", summary="Themed Actor Recommendations")
async def get_recommendations(
    region: str,
    week: int = Query(..., ge=1, le=53),
    repo: BloomRepository = Depends(get_repo),
):
    summary = repo.get_bloom_summary(region, week)
    recommendations = recommend_actors(summary, repo.actors)
    return collection([
        {
            "theme": r.theme,
            "explanation": r.explanation,
            "actors": serialize_list(r.actors, fields=ACTOR_LIST_FIELDS),
        }
        for r in recommendations
    ])
