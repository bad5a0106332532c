"""Investors router: investor view of a bloom situation."""

from fastapi import APIRouter, Depends, Query

from src.bloom.repository import BloomRepository
from src.core.data_types import Actor
from src.core.schemas import StandardResponse
from src.scoring.investor_view import build_investor_view_summary
from src.web.dependencies import get_investor, get_repo
from src.web.serializers import serialize

router = APIRouter(
    prefix="/api/investors",
    tags=["Investors"]
)

STARTUP_FIELDS = ["id", "name", "country", "tags", "description", "url"]


@router.get("/{investor_id}/view", response_model=StandardResponse[dict], summary="Investor View")
async def get_investor_view(
    region: str,
    week: int = Query(..., ge=1, le=53),
    investor: Actor = Depends(get_investor),
    repo: BloomRepository = Depends(get_repo),
):
    """Situation relevance, top deal flow, portfolio insights and under-served themes."""
    summary = repo.get_bloom_summary(region, week)
    view = build_investor_view_summary(summary, investor, repo.actors)

    deal_flow = [
        serialize(item, exclude=["startup"], extra={"startup": serialize(item.startup, fields=STARTUP_FIELDS)})
        for item in view.top_deal_flow
    ]
    data = serialize(view, exclude=["top_deal_flow"], extra={"top_deal_flow": deal_flow})
    data["investor_id"] = investor.id
    return StandardResponse(data=data)
