"""
Pilot Opportunity Builder

Drafts a short pilot sketch for a startup in the current bloom situation:
title, objective, why-now paragraph, key steps and success metrics tailored
to the startup's main capability.
"""
from typing import List, Tuple

from src.core.catalog import catalog
from src.core.data_types import Actor, BloomSummary, PilotOpportunity
from src.core.models import Severity
from src.core.utils import has_any_tag, plural

DEFAULT_PILOT_WEEKS = 8


def _capability(actor: Actor) -> str:
    groups = catalog.tag_groups
    tags = actor.lower_tags
    if has_any_tag(tags, groups.monitoring):
        return "monitoring"
    if has_any_tag(tags, groups.remediation):
        return "remediation"
    if has_any_tag(tags, groups.communication):
        return "communication"
    return "general"


def _focus_areas(summary: BloomSummary, limit: int = 3) -> List[str]:
    """Hotspot names to pilot in, worst first; safe areas when there are no hotspots."""
    names = [h.area_name for h in summary.hotspots[:limit]]
    return names or summary.safe_areas[:limit]


def _why_now(summary: BloomSummary) -> str:
    risk = summary.overall_risk_level
    hotspots = len(summary.hotspots)
    high = len(summary.high_severity_hotspots)
    increasing = len(summary.increasing_hotspots)

    text = (
        f"Week {summary.week} shows {risk.value} cyanobacteria risk in {summary.region} "
        f"with {summary.total_observations} {plural(summary.total_observations, 'observation')} "
        f"and {hotspots} active {plural(hotspots, 'hotspot')}."
    )
    if high:
        text += f" {high} {plural(high, 'area')} already {'is' if high == 1 else 'are'} at high severity."
    if increasing:
        text += f" Bloom activity is increasing in {increasing} {plural(increasing, 'location')}."
    if risk in (Severity.NONE, Severity.LOW):
        text += " Conditions are calm enough to install and calibrate before the peak season."
    else:
        text += " Acting now lets the pilot capture a full bloom cycle with real conditions."
    return text


def _steps_and_metrics(capability: str, actor: Actor, areas: List[str]) -> Tuple[List[str], List[str]]:
    area_text = ", ".join(areas) if areas else "the most visited shoreline sites"
    name = actor.name

    if capability == "monitoring":
        steps = [
            f"Deploy {name} sensors at {area_text}",
            "Calibrate readings against laboratory samples during the first two weeks",
            "Connect automated alerts to the municipal environmental office",
            "Review detection lead times with local authorities at mid-pilot",
        ]
        metrics = [
            "Bloom detection lead time versus manual sampling",
            "Share of hotspots covered by continuous monitoring",
            "False alert rate below 10%",
        ]
    elif capability == "remediation":
        steps = [
            f"Select treatment sites at {area_text} with the regional water authority",
            "Measure baseline nutrient and chlorophyll levels",
            f"Apply {name} treatment in weekly cycles",
            "Compare treated and untreated reference sites",
        ]
        metrics = [
            "Phosphorus reduction at treated sites",
            "Change in bloom severity versus reference sites",
            "Weeks of safe swimming gained",
        ]
    elif capability == "communication":
        steps = [
            f"Launch {name} bulletins for {area_text}",
            "Onboard beach operators and tourism offices as information partners",
            "Publish weekly safety updates in Finnish, Swedish and English",
            "Collect citizen reports to confirm or clear suspected blooms",
        ]
        metrics = [
            "Active users during the pilot period",
            "Citizen reports received per week",
            "Time from observation to public notice",
        ]
    else:
        steps = [
            f"Agree pilot scope for {area_text} with local stakeholders",
            f"Deploy {name} in a limited area",
            "Collect feedback from operators and residents",
            "Decide on scale-up at the end of the pilot",
        ]
        metrics = [
            "Stakeholder satisfaction with the pilot",
            "Operational uptime during the pilot",
            "Cost per covered site",
        ]
    return steps, metrics


def build_pilot_opportunity(summary: BloomSummary, actor: Actor) -> PilotOpportunity:
    capability = _capability(actor)
    areas = _focus_areas(summary)

    scale = ""
    if actor.startup_details and actor.startup_details.deployment_scale:
        scale = f" at {actor.startup_details.deployment_scale}"

    objective = {
        "monitoring": "Detect and track cyanobacteria blooms early enough to warn the public before exposure",
        "remediation": "Reduce bloom intensity at the worst-affected sites and demonstrate measurable nutrient reduction",
        "communication": "Give residents and visitors clear, timely information on where it is safe to swim",
        "general": "Validate the solution against the current bloom situation with local partners",
    }[capability]

    steps, metrics = _steps_and_metrics(capability, actor, areas)

    return PilotOpportunity(
        pilot_title=f"{actor.name} x {summary.region}: {DEFAULT_PILOT_WEEKS}-week bloom pilot",
        objective=f"{objective} in {summary.region}{scale}.",
        why_now=_why_now(summary),
        key_steps=steps,
        success_metrics=metrics,
    )


def pilot_to_text(opportunity: PilotOpportunity, actor_name: str, region: str, week: int) -> str:
    steps = "\n".join(f"{i}. {step}" for i, step in enumerate(opportunity.key_steps, 1))
    metrics = "\n".join(f"• {metric}" for metric in opportunity.success_metrics)
    return (
        f"{opportunity.pilot_title}\n\n"
        f"OBJECTIVE\n{opportunity.objective}\n\n"
        f"WHY NOW IN {region.upper()} (WEEK {week})\n{opportunity.why_now}\n\n"
        f"KEY STEPS\n{steps}\n\n"
        f"SUCCESS METRICS\n{metrics}\n\n"
        f"---\n"
        f"This is a draft pilot sketch generated from the current cyanobacteria situation "
        f"and {actor_name}'s profile."
    )
