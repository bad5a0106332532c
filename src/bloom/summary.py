"""
Bloom Summary Builder.
Aggregates raw observations into a regional weekly summary.
"""
import logging
from collections import Counter
from typing import Dict, Iterable, List

from src.bloom.severity import calculate_trend
from src.core.data_types import BloomSummary, Hotspot, Observation
from src.core.models import Severity, Trend
from src.core.utils import max_severity, plural

logger = logging.getLogger(__name__)

MAX_HOTSPOTS = 5


def build_bloom_summary(observations: Iterable[Observation], region: str, week: int) -> BloomSummary:
    """
    Build the summary for ``region`` in ``week``.

    The previous week (week - 1) is used only to classify each area's trend.
    An empty week is a valid summary with zero observations and no risk.
    """
    observations = list(observations)
    current = [o for o in observations if o.region == region and o.week == week]
    previous_counts = Counter(
        o.area_name for o in observations if o.region == region and o.week == week - 1
    )

    # Group by area, preserving first-seen order
    areas: Dict[str, List[Observation]] = {}
    for obs in current:
        areas.setdefault(obs.area_name, []).append(obs)

    area_severity = {name: max_severity(o.severity for o in obs) for name, obs in areas.items()}

    hotspots = [
        Hotspot(
            area_name=name,
            severity=area_severity[name],
            observation_count=len(obs),
            trend=calculate_trend(len(obs), previous_counts.get(name, 0)),
        )
        for name, obs in areas.items()
        if area_severity[name] != Severity.NONE
    ]
    hotspots.sort(key=lambda h: h.severity.rank, reverse=True)

    safe_areas = [
        name for name, sev in area_severity.items()
        if sev in (Severity.NONE, Severity.LOW)
    ]

    overall = max_severity(o.severity for o in current)
    key_messages = generate_key_messages(hotspots, safe_areas, overall)

    logger.debug(
        f"Summary {region} w{week}: {len(current)} observations, "
        f"{len(hotspots)} hotspots, risk {overall.value}"
    )

    return BloomSummary(
        region=region,
        week=week,
        total_observations=len(current),
        hotspots=hotspots[:MAX_HOTSPOTS],
        safe_areas=safe_areas,
        overall_risk_level=overall,
        key_messages=key_messages,
    )


def generate_key_messages(hotspots: List[Hotspot], safe_areas: List[str], overall_risk: Severity) -> List[str]:
    messages = []

    if overall_risk == Severity.HIGH:
        messages.append("⚠️ High cyanobacteria risk detected in the region")
    elif overall_risk == Severity.MEDIUM:
        messages.append("⚡ Moderate cyanobacteria levels present")
    elif overall_risk == Severity.LOW:
        messages.append("✓ Low cyanobacteria levels overall")
    else:
        messages.append("✓ No significant cyanobacteria detected")

    if hotspots:
        n = len(hotspots)
        messages.append(f"{n} hotspot {plural(n, 'area')} require attention")

    if safe_areas:
        n = len(safe_areas)
        messages.append(f"{n} {plural(n, 'area is', 'areas are')} safe for activities")

    increasing = sum(1 for h in hotspots if h.trend == Trend.INCREASING)
    if increasing:
        messages.append(f"{increasing} {plural(increasing, 'area shows', 'areas show')} increasing trends")

    return messages
