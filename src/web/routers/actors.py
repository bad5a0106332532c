"""Actors router: startup and investor catalog."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from src.bloom.repository import BloomRepository
from src.core.exceptions import ActorNotFoundError
from src.core.models import ActorType
from src.core.schemas import StandardResponse
from src.web.dependencies import get_repo
from src.web.responses import collection
from src.web.serializers import serialize, serialize_list

router = APIRouter(
    prefix="/api/actors",
    tags=["Actors"]
)


@router.get("", summary="List Actors")
async def list_actors(
    type: Optional[ActorType] = None,
    country: Optional[str] = None,
    tag: Optional[str] = None,
    repo: BloomRepository = Depends(get_repo),
):
    """List startups and investors, optionally filtered by type, country or tag."""
    actors = repo.actors
    if type:
        actors = [a for a in actors if a.type == type]
    if country:
        actors = [a for a in actors if a.country.lower() == country.lower()]
    if tag:
        actors = [a for a in actors if tag.lower() in a.lower_tags]
    return collection(serialize_list(actors))


@router.get("/{actor_id}", response_model=StandardResponse[dict], summary="Get Actor")
async def get_actor(actor_id: str, repo: BloomRepository = Depends(get_repo)):
    try:
        actor = repo.get_actor(actor_id)
    except ActorNotFoundError:
        raise HTTPException(status_code=404, detail=f"Actor {actor_id} not found")
    return StandardResponse(data=serialize(actor))
