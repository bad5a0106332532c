"""
Themed actor recommendations for a bloom situation.

Each theme is triggered by the summary and filled with a mix of startups
and investors. Selection is deterministic: startups first (60% of slots),
then investors, preferring countries not yet represented.
"""
from typing import List

from src.core.catalog import catalog
from src.core.data_types import Actor, BloomSummary, Recommendation
from src.core.models import ActorType, Severity
from src.core.utils import has_any_tag

MAX_ACTORS_PER_THEME = 5
STARTUP_SHARE = 0.6


def recommend_actors(summary: BloomSummary, actors: List[Actor]) -> List[Recommendation]:
    recommendations = []
    risk = summary.overall_risk_level
    hotspot_count = len(summary.hotspots)
    groups = catalog.tag_groups

    if hotspot_count > 2 and risk in (Severity.HIGH, Severity.MEDIUM):
        matched = [a for a in actors if has_any_tag(a.tags, groups.monitoring)]
        recommendations.append(Recommendation(
            theme="Early Warning & Monitoring",
            explanation=(
                "Multiple hotspots detected with elevated severity levels. Enhanced monitoring "
                "infrastructure and early warning systems can help track bloom development and "
                "alert communities proactively."
            ),
            actors=select_diverse_actors(matched, MAX_ACTORS_PER_THEME),
        ))

    if risk == Severity.HIGH or (risk == Severity.MEDIUM and hotspot_count > 3):
        matched = [a for a in actors if has_any_tag(a.tags, groups.remediation)]
        recommendations.append(Recommendation(
            theme="Nutrient Reduction & Remediation",
            explanation=(
                "Persistent high-severity blooms indicate need for active intervention. Solutions "
                "focused on nutrient management and biological remediation can help reduce bloom "
                "intensity over time."
            ),
            actors=select_diverse_actors(matched, MAX_ACTORS_PER_THEME),
        ))

    if summary.total_observations > 10 or hotspot_count > 0:
        # Recommendation vocabulary excludes "apps"
        vocabulary = [t for t in groups.communication if t != "apps"]
        matched = [a for a in actors if has_any_tag(a.tags, vocabulary)]
        recommendations.append(Recommendation(
            theme="Citizen Communication & Decision Support",
            explanation=(
                "Keeping the public informed and engaged is crucial. Tools for clear communication, "
                "data transparency, and decision support help communities make informed choices "
                "about water activities."
            ),
            actors=select_diverse_actors(matched, MAX_ACTORS_PER_THEME),
        ))

    return recommendations


def select_diverse_actors(actors: List[Actor], count: int) -> List[Actor]:
    """Pick up to ``count`` actors: a startup majority, investors for the rest, spread over countries."""
    startups_needed = int(count * STARTUP_SHARE)
    investors_needed = count - startups_needed

    startups = _spread_by_country([a for a in actors if a.type == ActorType.STARTUP])
    investors = _spread_by_country([a for a in actors if a.type == ActorType.INVESTOR])

    selected = startups[:startups_needed] + investors[:investors_needed]
    return selected[:count]


def _spread_by_country(actors: List[Actor]) -> List[Actor]:
    """Reorder so each country appears once before any repeats, keeping input order otherwise."""
    seen = set()
    first, rest = [], []
    for actor in actors:
        if actor.country in seen:
            rest.append(actor)
        else:
            seen.add(actor.country)
            first.append(actor)
    return first + rest
