"""
Bloom Service - summary lookups with live CitObs data and static fallback.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from src.bloom.citobs import CitObsClient
from src.bloom.repository import BloomRepository, get_repository
from src.core.config import settings
from src.core.data_types import BloomSummary, CitObsSummary
from src.core.exceptions import CitObsError

logger = logging.getLogger(__name__)


@dataclass
class LiveSummaryResult:
    source: str  # "citobs" or "static"
    summary: Union[CitObsSummary, BloomSummary]
    error: Optional[str] = None


class BloomService:
    def __init__(self, repository: Optional[BloomRepository] = None, client: Optional[CitObsClient] = None):
        self.repository = repository or get_repository()
        self.client = client or CitObsClient()

    def get_summary(self, region: str, week: int) -> BloomSummary:
        return self.repository.get_bloom_summary(region, week)

    async def get_live_summary(self, region_key: str, week: int) -> LiveSummaryResult:
        """
        Live CitObs summary for a region key. Any upstream failure falls back to
        the static-file summary for the region's display name.
        Unknown region keys are raised to the caller.
        """
        region = self.client.get_region(region_key)
        error = None

        if settings.citobs_enabled:
            try:
                summary = await self.client.fetch_summary(region_key, week)
                return LiveSummaryResult(source="citobs", summary=summary)
            except CitObsError as e:
                error = str(e)
                logger.warning(f"CitObs lookup failed for {region_key} w{week}, using static data: {e}")
        else:
            error = "Live lookups disabled"

        return LiveSummaryResult(
            source="static",
            summary=self.repository.get_bloom_summary(region.name, week),
            error=error,
        )
