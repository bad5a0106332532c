"""
Impact Simulator

Toy model of how deploying a startup's solution could bend the bloom risk
curve over a few weeks. Meant for comparative storytelling, not forecasting.
"""
import math
from typing import List

from src.core.data_types import Actor, BloomSummary, ImpactSimulationInput, ImpactSimulationResult, RiskPoint
from src.core.models import DeploymentIntensity, Severity
from src.core.utils import clamp, plural, round_half_up

BASELINE_RISK = {
    Severity.NONE: 10,
    Severity.LOW: 30,
    Severity.MEDIUM: 60,
    Severity.HIGH: 80,
}

MAX_REDUCTION = {
    DeploymentIntensity.LOW: 0.10,
    DeploymentIntensity.MEDIUM: 0.25,
    DeploymentIntensity.HIGH: 0.40,
}

REMEDIATION_BONUS = 0.05
PEAK_REDUCTION_BONUS = 0.10
PEAK_THRESHOLD = 60
SIGNIFICANT_REDUCTION = 15

BASE_NOTES = [
    "Toy model based on current risk level and startup focus (monitoring/remediation).",
    "Assumes gradual effect over the chosen duration.",
    "Designed for comparative storytelling, not scientific forecasting.",
]


def _has_tag_containing(actor: Actor, *fragments: str) -> bool:
    return any(f in tag for tag in actor.lower_tags for f in fragments)


def simulate_impact(summary: BloomSummary, actor: Actor, sim: ImpactSimulationInput) -> ImpactSimulationResult:
    duration = sim.duration_weeks
    base_risk = BASELINE_RISK[summary.overall_risk_level]
    increasing = len(summary.increasing_hotspots) > len(summary.hotspots) / 2

    has_remediation = _has_tag_containing(actor, "remediation", "nutrient")
    has_monitoring = _has_tag_containing(actor, "monitoring", "sensor")

    max_reduction = MAX_REDUCTION[sim.deployment_intensity]
    if has_remediation:
        max_reduction += REMEDIATION_BONUS

    points: List[RiskPoint] = []
    for offset in range(duration):
        baseline = float(base_risk)
        if increasing:
            if offset < duration / 2:
                baseline += offset * 3
        else:
            baseline += math.sin(offset) * 5
        baseline = clamp(baseline)

        reduction = max_reduction * (offset / (duration - 1)) if duration > 1 else max_reduction
        if has_monitoring and baseline > PEAK_THRESHOLD:
            reduction += PEAK_REDUCTION_BONUS
        with_solution = clamp(baseline * (1 - reduction))

        points.append(RiskPoint(
            week_offset=offset,
            baseline_risk=round_half_up(baseline),
            with_solution_risk=round_half_up(with_solution),
        ))

    avg_baseline = sum(p.baseline_risk for p in points) / len(points)
    avg_with = sum(p.with_solution_risk for p in points) / len(points)
    reduction_pct = round_half_up((avg_baseline - avg_with) / avg_baseline * 100) if avg_baseline else 0
    significant_weeks = sum(
        1 for p in points if p.baseline_risk - p.with_solution_risk >= SIGNIFICANT_REDUCTION
    )

    if reduction_pct >= 25:
        headline = f"~{reduction_pct}% lower average risk over {duration} weeks"
    elif significant_weeks > 0:
        headline = (
            f"{sim.deployment_intensity.value.capitalize()}-intensity deployment avoids {significant_weeks} "
            f"high-risk {plural(significant_weeks, 'week')} in this scenario"
        )
    else:
        headline = f"Modest ~{reduction_pct}% risk reduction over {duration} weeks"

    notes = list(BASE_NOTES)
    if has_remediation:
        notes.append("Remediation solutions show stronger long-term cumulative effects.")
    if has_monitoring:
        notes.append("Monitoring solutions are especially effective at reducing peak risk periods.")

    return ImpactSimulationResult(
        region=sim.region,
        start_week=sim.start_week,
        duration_weeks=duration,
        actor_id=actor.id,
        points=points,
        headline=headline,
        notes=notes,
    )
