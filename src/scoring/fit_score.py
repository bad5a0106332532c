"""Problem-Fit Scoring Algorithm"""
from typing import List

from src.core.catalog import catalog
from src.core.data_types import Actor, BloomSummary, ProblemFitScore
from src.core.models import FitLabel, Severity
from src.core.utils import clamp, has_any_tag, plural, risk_base_score, score_to_label

MAX_DRIVERS = 5


class ProblemFitScorer:
    """
    Scores how well an actor's capabilities match a bloom situation (0-100).

    Additive point system:
      - Base points from overall risk level
      - Capability bonuses (monitoring / remediation / communication tags)
      - Context bonuses (environment, customers, maturity, hotspot spread)
    """

    RISK_DRIVERS = {
        Severity.HIGH: "High overall risk level requiring urgent action",
        Severity.MEDIUM: "Moderate risk level with need for monitoring and intervention",
        Severity.LOW: "Low risk level, preventive measures beneficial",
        Severity.NONE: "Minimal current risk, monitoring still valuable",
    }

    def score(self, summary: BloomSummary, actor: Actor) -> ProblemFitScore:
        risk = summary.overall_risk_level
        hotspots = summary.hotspots
        tags = actor.lower_tags
        details = actor.startup_details
        groups = catalog.tag_groups
        drivers = []

        # 1. Base score from risk level
        score = risk_base_score(risk)
        drivers.append(self.RISK_DRIVERS[risk])

        high_count = len(summary.high_severity_hotspots)
        increasing_count = len(summary.increasing_hotspots)

        # 2. Capability vs problem characteristics
        has_monitoring = has_any_tag(tags, groups.monitoring)
        if has_monitoring and high_count > 0:
            score += 15
            drivers.append("Real-time monitoring crucial for tracking high-severity hotspots")
        elif has_monitoring and len(hotspots) > 2:
            score += 10
            drivers.append("Multiple hotspots benefit from systematic monitoring")

        has_remediation = has_any_tag(tags, groups.remediation)
        if has_remediation and increasing_count > 0:
            score += 10
            drivers.append("Increasing trends indicate need for active remediation")
        elif has_remediation and risk == Severity.HIGH:
            score += 8
            drivers.append("High risk level justifies remediation investments")

        has_communication = has_any_tag(tags, groups.communication)
        if has_communication and summary.safe_areas and hotspots:
            score += 10
            drivers.append("Mixed safe/unsafe areas require clear public communication")
        elif has_communication and risk in (Severity.HIGH, Severity.MEDIUM):
            score += 8
            drivers.append("Elevated risk demands effective citizen information systems")

        # 3. Environment match
        coastal_region = catalog.is_coastal_region(summary.region)
        if details and "coastal" in details.target_environments and coastal_region:
            score += 10
            drivers.append("Startup specializes in coastal environments matching this region")
        elif details and "lakes" in details.target_environments and not coastal_region:
            score += 10
            drivers.append("Startup specializes in lake environments matching this region")

        # 4. Customer match
        if details:
            customer = details.typical_customer.lower()
            if any(kw in customer for kw in catalog.coastal_customer_keywords):
                score += 10
                drivers.append(
                    f"Target customers ({details.typical_customer}) align with stakeholders affected by blooms"
                )

        # 5. Maturity bonus
        if details and details.trl_level and details.trl_level >= 7:
            score += 5
            drivers.append(f"Mature technology (TRL {details.trl_level}) ready for immediate deployment")

        # 6. Spread-specific bonuses
        if "data visualization" in tags and len(hotspots) > 3:
            score += 5
            drivers.append("Data visualization crucial for managing multiple hotspots")
        if "iot" in tags and len(hotspots) > 4:
            score += 5
            drivers.append("IoT sensor networks ideal for distributed monitoring needs")
        if "satellite" in tags and len(hotspots) > 5:
            score += 8
            drivers.append("Satellite coverage essential for large-scale regional monitoring")

        score = int(clamp(score))
        label = score_to_label(score)

        return ProblemFitScore(
            score=score,
            label=label,
            explanation=self.explain(summary, actor, label, tags),
            drivers=drivers[:MAX_DRIVERS],
        )

    @staticmethod
    def explain(summary: BloomSummary, actor: Actor, label: FitLabel, tags: List[str]) -> str:
        region, week, risk = summary.region, summary.week, summary.overall_risk_level
        capability = main_capability(tags)
        high_count = len(summary.high_severity_hotspots)

        if label == FitLabel.HIGH:
            if risk == Severity.HIGH and high_count > 0:
                return (
                    f"Strong fit for {region} in week {week}. High cyanobacteria risk with {high_count} "
                    f"severe {plural(high_count, 'hotspot')} near popular areas. {actor.name}'s {capability} "
                    f"solution addresses critical needs for this situation."
                )
            if risk == Severity.HIGH:
                return (
                    f"Excellent match for {region} in week {week}. High bloom risk across the region creates "
                    f"urgent demand for {capability} capabilities that {actor.name} provides."
                )
            return (
                f"Very good fit for {region} in week {week}. Multiple bloom indicators and {actor.name}'s "
                f"specialized {capability} approach align well with current management priorities."
            )

        if label == FitLabel.MEDIUM:
            if risk in (Severity.MEDIUM, Severity.LOW):
                return (
                    f"Moderate fit for {region} in week {week}. While current risk is {risk.value}, "
                    f"{actor.name}'s {capability} capabilities could strengthen preparedness and response capacity."
                )
            if risk == Severity.HIGH:
                return (
                    f"Reasonable fit for {region} in week {week}. High bloom risk present, though {actor.name}'s "
                    f"{capability} approach may be most effective combined with complementary solutions."
                )
            return (
                f"Moderate alignment for {region} in week {week}. {actor.name}'s solution offers relevant "
                f"capabilities, particularly for {capability}."
            )

        if risk in (Severity.NONE, Severity.LOW):
            return (
                f"Limited immediate need in {region} for week {week}. With {risk.value} risk levels, "
                f"{actor.name}'s {capability} solution may be more valuable for future prevention or different contexts."
            )
        return (
            f"Some mismatch for {region} in week {week}. While {risk.value} risk exists, {actor.name}'s "
            f"{capability} focus may not directly address the most pressing needs right now."
        )


def main_capability(tags: List[str]) -> str:
    """Human-readable label for an actor's strongest capability."""
    if any(t in ("monitoring", "sensors") for t in tags):
        return "real-time monitoring"
    if any(t in ("remediation", "nutrient reduction") for t in tags):
        return "remediation and nutrient management"
    if any(t in ("communication", "apps") for t in tags):
        return "citizen communication and alerts"
    if "data visualization" in tags:
        return "data visualization and analytics"
    if "early warning" in tags:
        return "early warning systems"
    if "decision support" in tags:
        return "decision support"
    return "environmental technology"


_scorer = ProblemFitScorer()


def compute_problem_fit_score(summary: BloomSummary, actor: Actor) -> ProblemFitScore:
    return _scorer.score(summary, actor)
