"""Shared dependencies for BlueBloom API routers."""

import logging

from fastapi import Depends, HTTPException, status

from src.bloom.repository import BloomRepository, get_repository
from src.bloom.service import BloomService
from src.core.data_types import Actor
from src.core.exceptions import ActorNotFoundError
from src.core.models import ActorType

logger = logging.getLogger(__name__)


# --- Data access ---

def get_repo() -> BloomRepository:
    """Process-wide static data repository. Overridden in tests."""
    return get_repository()


def get_bloom_service(repo: BloomRepository = Depends(get_repo)) -> BloomService:
    return BloomService(repository=repo)


# --- Actor lookups ---

def _lookup(repo: BloomRepository, actor_id: str, expected: ActorType) -> Actor:
    try:
        actor = repo.get_actor(actor_id)
    except ActorNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Actor {actor_id} not found")
    if actor.type != expected:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Actor {actor_id} is not a {expected.value}",
        )
    return actor


def get_startup(startup_id: str, repo: BloomRepository = Depends(get_repo)) -> Actor:
    return _lookup(repo, startup_id, ActorType.STARTUP)


def get_investor(investor_id: str, repo: BloomRepository = Depends(get_repo)) -> Actor:
    return _lookup(repo, investor_id, ActorType.INVESTOR)
