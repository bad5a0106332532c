"""
Pitch Snippet Builder

Two-slide pitch (problem / solution) for a startup in a bloom situation,
with plain-text and markdown renderings for copy-paste into decks.
"""
from typing import List, Optional

from src.core.catalog import catalog
from src.core.data_types import Actor, BloomSummary, PitchSnippet, Slide, StartupDetails
from src.core.models import Severity
from src.core.utils import plural

MAX_BULLETS = 5

# Communication apps alone do not make a communication pitch
PITCH_EXCLUDED_TAGS = {"apps"}


def _has_group_tag(tags: List[str], group: List[str]) -> bool:
    vocabulary = {t.lower() for t in group} - PITCH_EXCLUDED_TAGS
    return any(t in vocabulary for t in tags)


def _problem_bullets(summary: BloomSummary) -> List[str]:
    risk = summary.overall_risk_level
    total = summary.total_observations
    hotspots = summary.hotspots
    high = len(summary.high_severity_hotspots)
    increasing = len(summary.increasing_hotspots)
    bullets = []

    # Situation
    if risk == Severity.HIGH:
        bullets.append(f"High cyanobacteria risk detected with {total} observations across the region")
    elif risk == Severity.MEDIUM:
        bullets.append(f"Moderate cyanobacteria levels present with {total} observations")
    elif risk == Severity.LOW:
        bullets.append(f"Low but present cyanobacteria levels detected ({total} observations)")
    else:
        bullets.append(f"Minimal current risk, but monitoring shows {total} observations requiring vigilance")

    # Hotspots
    if hotspots:
        if high > 0:
            bullets.append(
                f"{high} high-severity {plural(high, 'hotspot')} near popular swimming areas "
                f"requiring immediate attention"
            )
        else:
            bullets.append(f"{len(hotspots)} active {plural(len(hotspots), 'hotspot')} detected across the region")

    # Trends
    if increasing > 0:
        bullets.append(
            f"Incidents increasing in {increasing} {plural(increasing, 'location')}, indicating worsening conditions"
        )
    elif len(hotspots) > 2 and risk != Severity.NONE:
        bullets.append("Geographic spread across multiple areas complicates management and public communication")

    # Impact
    if risk == Severity.HIGH or high > 0:
        bullets.append(
            "Beach closures and health advisories create uncertainty for swimmers, families, and tourism operators"
        )
    elif summary.safe_areas and hotspots:
        bullets.append(
            f"Mixed conditions ({len(summary.safe_areas)} safe areas vs {len(hotspots)} hotspots) "
            f"require clear public information to guide decisions"
        )
    elif risk != Severity.NONE:
        bullets.append(
            "Uncertain water conditions affect public confidence in coastal activities "
            "and require proactive monitoring"
        )

    # Need
    if risk == Severity.HIGH or increasing > 2:
        bullets.append("Urgent need for early warning systems and rapid response capabilities to protect public health")
    elif risk == Severity.MEDIUM or len(hotspots) > 2:
        bullets.append("Municipalities need better tools for monitoring, forecasting, and communicating bloom risks")
    else:
        bullets.append("Proactive monitoring and communication can prevent escalation and maintain public trust")

    return bullets[:MAX_BULLETS]


def _pick_benefit(benefits: List[str], keywords: tuple) -> str:
    for benefit in benefits:
        if any(kw in benefit.lower() for kw in keywords):
            return benefit
    return benefits[0]


def _benefit_bullets(summary: BloomSummary, details: Optional[StartupDetails],
                     has_monitoring: bool, has_remediation: bool, has_communication: bool) -> List[str]:
    risk = summary.overall_risk_level
    hotspots = summary.hotspots

    if details and details.key_benefits:
        benefits = details.key_benefits
        if has_monitoring and (risk == Severity.HIGH or summary.increasing_hotspots):
            first = _pick_benefit(benefits, ("early", "detect", "alert"))
        elif has_remediation and (risk == Severity.HIGH or len(hotspots) > 2):
            first = _pick_benefit(benefits, ("reduc", "treat", "remediat"))
        elif has_communication and (summary.safe_areas or hotspots):
            first = _pick_benefit(benefits, ("alert", "inform", "public"))
        else:
            first = benefits[0]
        # Second bullet is always benefits[1], even if it duplicates the first
        return [first] + benefits[1:2]

    if has_monitoring:
        return ["Enables 24-48 hour early warnings to reduce public exposure to toxic blooms"]
    if has_remediation:
        return ["Reduces bloom intensity and duration through targeted interventions"]
    if has_communication:
        return ["Empowers citizens with transparent, real-time information for safer water activities"]
    return []


def _solution_bullets(summary: BloomSummary, actor: Actor) -> List[str]:
    tags = actor.lower_tags
    details = actor.startup_details
    groups = catalog.tag_groups
    has_monitoring = _has_group_tag(tags, groups.monitoring)
    has_remediation = _has_group_tag(tags, groups.remediation)
    has_communication = _has_group_tag(tags, groups.communication)
    bullets = []

    # Capability
    if has_monitoring:
        bullets.append(f"Real-time monitoring and early detection: {actor.description}")
    elif has_remediation:
        bullets.append(f"Active remediation and nutrient reduction: {actor.description}")
    elif has_communication:
        bullets.append(f"Public communication and decision support: {actor.description}")
    else:
        bullets.append(actor.description)

    # Customers and environments
    if details:
        environments = ", ".join(details.target_environments[:3])
        bullets.append(f"Designed for {details.typical_customer} operating in {environments} environments")
    else:
        bullets.append("Serving coastal municipalities, environmental agencies, and water management authorities")

    bullets.extend(_benefit_bullets(summary, details, has_monitoring, has_remediation, has_communication))

    # Maturity
    if details:
        if details.trl_level and details.trl_level >= 7:
            bullets.append(
                f"Proven technology (TRL {details.trl_level}) ready for deployment at {details.deployment_scale}"
            )
        elif details.trl_level:
            bullets.append(
                f"Innovative solution (TRL {details.trl_level}) available for pilot deployment "
                f"at {details.deployment_scale}"
            )
        else:
            bullets.append(f"Ready for deployment at {details.deployment_scale}")

    return bullets[:MAX_BULLETS]


def build_pitch_snippet(summary: BloomSummary, actor: Actor) -> PitchSnippet:
    return PitchSnippet(
        problem_slide=Slide(
            title=f"Cyanobacteria Risk in {summary.region}, Week {summary.week}",
            bullets=_problem_bullets(summary),
        ),
        solution_slide=Slide(
            title=f"How {actor.name} Addresses the Bloom Challenge",
            bullets=_solution_bullets(summary, actor),
        ),
    )


def format_pitch_as_text(pitch: PitchSnippet) -> str:
    lines = [f"Problem Slide: {pitch.problem_slide.title}"]
    lines += [f"• {b}" for b in pitch.problem_slide.bullets]
    lines += ["", f"Solution Slide: {pitch.solution_slide.title}"]
    lines += [f"• {b}" for b in pitch.solution_slide.bullets]
    return "\n".join(lines) + "\n"


def format_pitch_as_markdown(pitch: PitchSnippet) -> str:
    lines = [f"## {pitch.problem_slide.title}", ""]
    lines += [f"- {b}" for b in pitch.problem_slide.bullets]
    lines += ["", f"## {pitch.solution_slide.title}", ""]
    lines += [f"- {b}" for b in pitch.solution_slide.bullets]
    return "\n".join(lines) + "\n"
