"""
Beach safety status.
Matches each known beach with its most recent bloom observation.
"""
from typing import Dict, Iterable, List

from src.core.data_types import Beach, BeachStatus, Observation
from src.core.models import BeachSafety, Severity

_STATUS_BY_SEVERITY = {
    Severity.HIGH: BeachSafety.DETECTED,
    Severity.MEDIUM: BeachSafety.SUSPECTED,
    Severity.LOW: BeachSafety.CLEAR,
    Severity.NONE: BeachSafety.CLEAR,
}


def build_beach_statuses(beaches: Iterable[Beach], observations: Iterable[Observation]) -> List[BeachStatus]:
    """Status per beach from the latest observation whose area name equals the beach name."""
    latest: Dict[str, Observation] = {}
    for obs in observations:
        current = latest.get(obs.area_name)
        # ISO dates compare correctly as strings
        if current is None or obs.date > current.date:
            latest[obs.area_name] = obs

    statuses = []
    for beach in beaches:
        obs = latest.get(beach.name)
        if obs is None:
            statuses.append(BeachStatus(beach=beach, status=BeachSafety.UNKNOWN))
            continue
        statuses.append(BeachStatus(
            beach=beach,
            status=_STATUS_BY_SEVERITY[obs.severity],
            severity=obs.severity,
            last_updated=obs.date,
            description=f"Week {obs.week} observation",
        ))
    return statuses


def search_beaches(statuses: Iterable[BeachStatus], term: str) -> List[BeachStatus]:
    """Case-insensitive search on beach name or region. A blank term matches nothing."""
    term = (term or "").strip().lower()
    if not term:
        return []
    return [
        s for s in statuses
        if term in s.beach.name.lower() or term in s.beach.region.lower()
    ]
