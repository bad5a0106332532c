"""Ecosystem router: solution gap radar and collaboration clusters."""

from fastapi import APIRouter, Depends, Query

from src.bloom.repository import BloomRepository
from src.core.catalog import catalog
from src.web.dependencies import get_repo
from src.web.responses import collection
from src.web.serializers import serialize, serialize_list
from src.scoring.clusters import build_clusters_for_situation
from src.scoring.gap_radar import build_gap_radar

router = APIRouter(
    prefix="/api",
    tags=["Ecosystem"]
)

MEMBER_FIELDS = ["id", "name", "country", "tags", "url"]


@router.get("/gaps", summary="Solution Gap Radar")
async def get_gaps(
    region: str,
    week: int = Query(..., ge=1, le=53),
    repo: BloomRepository = Depends(get_repo),
):
    """Problem themes where need outstrips startup coverage, largest gap first."""
    summary = repo.get_bloom_summary(region, week)
    gaps = build_gap_radar(summary, repo.startups(), catalog.problem_themes)
    return collection(serialize_list(gaps))


@router.get("/clusters", summary="Collaboration Clusters")
async def get_clusters(
    region: str,
    week: int = Query(..., ge=1, le=53),
    repo: BloomRepository = Depends(get_repo),
):
    summary = repo.get_bloom_summary(region, week)
    clusters = build_clusters_for_situation(summary, repo.startups(), catalog.cluster_themes)
    return collection([
        serialize(c, exclude=["startups"], extra={"startups": serialize_list(c.startups, fields=MEMBER_FIELDS)})
        for c in clusters
    ])
