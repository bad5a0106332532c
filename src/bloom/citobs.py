"""
CitObs Client
Fetches citizen algae observations from the SYKE open-data API and
summarises them for one of the configured archipelago regions.
"""
import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Dict, List, Optional, Tuple

import httpx

from src.core.catalog import CitObsRegion, catalog
from src.core.config import settings
from src.core.data_types import CitObsEvent, CitObsSummary
from src.core.exceptions import CitObsError, UnknownRegionError
from src.core.models import Severity
from src.core.utils import max_severity

logger = logging.getLogger(__name__)

# CitObs severity codes:
# 1 = mass occurrence, 2 = heavy algae, 3 = some algae,
# 4 = other algae observation, 5 = no algae, 6 = multiple types
_CODE_TO_SEVERITY = {
    1: Severity.HIGH,
    2: Severity.MEDIUM,
    6: Severity.MEDIUM,
    3: Severity.LOW,
    4: Severity.LOW,
    5: Severity.NONE,
}


def map_code_to_severity(value: Any) -> Severity:
    """Unknown or missing codes count as low."""
    try:
        return _CODE_TO_SEVERITY.get(int(value), Severity.LOW)
    except (TypeError, ValueError):
        return Severity.LOW


def get_week_date_range(year: int, week: int) -> Tuple[datetime, datetime]:
    """UTC start (Monday 00:00) and end (Sunday 23:59:59.999) of an ISO week."""
    start_day = date.fromisocalendar(year, week, 1)
    start = datetime.combine(start_day, time.min, tzinfo=timezone.utc)
    end = start + timedelta(days=6, hours=23, minutes=59, seconds=59, milliseconds=999)
    return start, end


def _iso(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


class CitObsClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url or settings.citobs_api_url
        self.timeout = timeout or settings.citobs_timeout
        self._transport = transport

    def get_region(self, region_key: str) -> CitObsRegion:
        region = catalog.citobs_regions.get(region_key)
        if region is None:
            raise UnknownRegionError(region_key)
        return region

    async def fetch_raw(self, start: datetime, end: datetime) -> List[Dict[str, Any]]:
        params = {
            "service_code": settings.citobs_service_code,
            "extension": "true",
            "status": "open",
            "start_date": _iso(start),
            "end_date": _iso(end),
        }
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise CitObsError(f"CitObs API error: {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise CitObsError(f"CitObs request failed: {e}") from e

        if not isinstance(data, list):
            raise CitObsError("Unexpected CitObs payload")
        return data

    async def fetch_summary(self, region_key: str, week: int, year: Optional[int] = None) -> CitObsSummary:
        """Summarise one ISO week of observations inside the region's bounding box."""
        region = self.get_region(region_key)
        if year is None:
            year = datetime.now(timezone.utc).year
        try:
            start, end = get_week_date_range(year, week)
        except ValueError as e:
            raise CitObsError(f"Invalid ISO week {week} for {year}") from e

        logger.info(f"Fetching CitObs data for {region.name}, week {week} ({_iso(start)} to {_iso(end)})")

        data = await self.fetch_raw(start, end)
        logger.info(f"Received {len(data)} CitObs observations")

        events: List[CitObsEvent] = []
        counts = {s.value: 0 for s in (Severity.HIGH, Severity.MEDIUM, Severity.LOW, Severity.NONE)}
        for item in data:
            lat, lon = item.get("lat"), item.get("long")
            if lat is None or lon is None or not region.contains(lat, lon):
                continue
            attributes = item.get("extended_attributes") or {}
            severity = map_code_to_severity(attributes.get(settings.citobs_severity_attribute))
            events.append(CitObsEvent(
                id=str(item.get("service_request_id", "")),
                lat=lat,
                lon=lon,
                timestamp=item.get("requested_datetime") or item.get("updated_datetime"),
                severity=severity,
                area_name=item.get("address") or "Unknown location",
            ))
            counts[severity.value] += 1

        logger.info(f"Filtered to {len(events)} events in {region.name}: {counts}")

        return CitObsSummary(
            region_key=region_key,
            region_name=region.name,
            week=week,
            date_from=_iso(start),
            date_to=_iso(end),
            total_observations=len(events),
            severity_counts=counts,
            overall_risk=max_severity(e.severity for e in events),
            sample_events=events[:settings.citobs_sample_size],
        )
