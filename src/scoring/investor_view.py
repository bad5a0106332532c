"""
Investor View Builder

Turns a bloom situation into an investor-facing summary:
- how relevant the situation is for the investor's thesis
- the top startups ranked for that investor (deal flow)
- what the deal flow would add to the existing portfolio
- problem themes the startup catalog under-serves
"""
import logging
from typing import List

from src.core.catalog import catalog
from src.core.data_types import (
    Actor, BloomSummary, DealFlowItem, InvestorViewSummary, PortfolioFitInsight,
    SituationRelevance, UnderServedTheme,
)
from src.core.models import ActorType, FitLabel, Severity
from src.core.utils import clamp, matching_tags, risk_base_score, score_to_label
from src.scoring.fit_score import compute_problem_fit_score

logger = logging.getLogger(__name__)

MAX_DEAL_FLOW = 8
MAX_REASONS = 3
MAX_INSIGHTS = 3
MAX_UNDER_SERVED = 3


def compute_situation_relevance(summary: BloomSummary, investor: Actor) -> SituationRelevance:
    score = risk_base_score(summary.overall_risk_level)
    details = investor.investor_details

    if details:
        focus = {t.lower() for t in details.focus_tags}
        if focus & {t.lower() for t in catalog.tag_groups.water_tech_focus}:
            score += 15

        region = summary.region.lower()
        is_nordic = any(kw in region for kw in catalog.nordic_region_keywords)
        if is_nordic and "nordics" in details.geography_focus:
            score += 10
        elif "europe" in details.geography_focus:
            score += 5

    if summary.overall_risk_level == Severity.HIGH and len(summary.hotspots) > 3:
        score += 10

    score = int(clamp(score))
    label = score_to_label(score)

    explanation = (
        f"{summary.region} (week {summary.week}) shows {summary.overall_risk_level.value} cyanobacteria risk"
    )
    if label == FitLabel.HIGH:
        explanation += (
            f", representing a significant opportunity for blue economy investments. With "
            f"{len(summary.hotspots)} active hotspots, this situation aligns strongly with water-tech "
            f"and climate solutions."
        )
    elif label == FitLabel.MEDIUM:
        explanation += (
            ", presenting moderate investment opportunities in water quality monitoring "
            "and management solutions."
        )
    else:
        explanation += (
            ", indicating limited immediate investment urgency, though preventative solutions "
            "may still be relevant."
        )

    return SituationRelevance(score=score, label=label, explanation=explanation)


def _deal_reasons(summary: BloomSummary, startup: Actor, investor: Actor, fit_label: FitLabel) -> List[str]:
    reasons = []
    details = investor.investor_details

    if fit_label == FitLabel.HIGH:
        reasons.append("Strong match for current bloom situation")

    if details:
        focus = [f.lower() for f in details.focus_tags]
        if any(f in tag for tag in startup.lower_tags for f in focus):
            reasons.append("Aligned with your investment thesis")
        if any(tag not in details.portfolio_tags for tag in startup.tags):
            reasons.append("Expands portfolio coverage into new areas")

    sd = startup.startup_details
    if sd:
        if sd.trl_level and sd.trl_level >= 6:
            reasons.append("Advanced technology readiness (TRL 6+)")
        if "coastal" in sd.target_environments and "coast" in summary.region.lower():
            reasons.append("Perfect environmental fit for this region")

    if not reasons:
        reasons.append("Relevant solution for water quality challenges")
    return reasons[:MAX_REASONS]


def build_deal_flow(summary: BloomSummary, investor: Actor, actors: List[Actor]) -> List[DealFlowItem]:
    """Top startups for an investor: fit score plus 5 points per focus-tag overlap."""
    details = investor.investor_details
    items = []

    for startup in (a for a in actors if a.type == ActorType.STARTUP):
        fit = compute_problem_fit_score(summary, startup)
        adjusted = fit.score
        if details:
            adjusted += len(matching_tags(startup.tags, details.focus_tags)) * 5
        adjusted = int(clamp(adjusted))

        items.append(DealFlowItem(
            startup=startup,
            fit_score=adjusted,
            fit_label=score_to_label(adjusted),
            reasons=_deal_reasons(summary, startup, investor, fit.label),
        ))

    items.sort(key=lambda item: item.fit_score, reverse=True)
    return items[:MAX_DEAL_FLOW]


def derive_portfolio_insights(investor: Actor, deal_flow: List[DealFlowItem]) -> List[PortfolioFitInsight]:
    details = investor.investor_details
    if not details or not deal_flow:
        return []

    insights = []
    portfolio = details.portfolio_tags
    # dict keeps first-seen order
    deal_tags = list(dict.fromkeys(tag for item in deal_flow for tag in item.startup.tags))

    new_tags = [t for t in deal_tags if t not in portfolio]
    if new_tags:
        examples = " and ".join(new_tags[:2])
        insights.append(PortfolioFitInsight(
            text=f"Extends your portfolio into {examples}, currently under-represented in your holdings."
        ))

    has_monitoring = any("monitor" in t.lower() or "sensor" in t.lower() for t in portfolio)
    has_communication = "communication" in deal_tags or any("app" in t for t in deal_tags)
    if has_monitoring and has_communication:
        insights.append(PortfolioFitInsight(
            text="Complements your existing monitoring/sensor focus with citizen communication and alert capabilities."
        ))

    adds_remediation = any("remediation" in t.lower() or "nutrient" in t.lower() for t in deal_tags)
    portfolio_remediation = any("remediation" in t.lower() for t in portfolio)
    if adds_remediation and not portfolio_remediation:
        insights.append(PortfolioFitInsight(
            text="Adds long-term remediation and nutrient management solutions, moving beyond monitoring "
                 "into active intervention."
        ))

    if not insights:
        insights.append(PortfolioFitInsight(
            text="These startups provide good diversification across monitoring, communication, "
                 "and remediation themes."
        ))
    return insights[:MAX_INSIGHTS]


def find_under_served_themes(summary: BloomSummary, actors: List[Actor]) -> List[UnderServedTheme]:
    """Themes where the catalog has few tags despite the current situation. Counts tags, not startups."""
    tags = [t.lower() for a in actors if a.type == ActorType.STARTUP for t in a.tags]
    themes = []

    remediation_count = sum(1 for t in tags if "remediation" in t or "nutrient" in t)
    if summary.overall_risk_level == Severity.HIGH and remediation_count < 3:
        themes.append(UnderServedTheme(
            theme="Remediation & Nutrient Reduction",
            description="Long-term solutions to reduce nutrient loads and prevent future blooms",
            reason=f"High bloom risk detected, but only {remediation_count} startup(s) focused on active remediation",
        ))

    communication_count = sum(1 for t in tags if "communication" in t or "app" in t or "alert" in t)
    busy_high_hotspot = any(
        h.severity == Severity.HIGH and h.observation_count > 2 for h in summary.hotspots
    )
    if busy_high_hotspot and communication_count < 2:
        themes.append(UnderServedTheme(
            theme="Citizen Communication & Tourism Safety",
            description="Real-time alerts and information systems for beach-goers and tourism operators",
            reason=f"Multiple coastal hotspots affecting public areas, but only {communication_count} "
                   f"startup(s) in citizen communication",
        ))

    prediction_count = sum(1 for t in tags if "ai" in t or "predict" in t or "forecast" in t)
    if prediction_count == 0:
        themes.append(UnderServedTheme(
            theme="AI-Powered Bloom Prediction",
            description="Machine learning models for early warning and risk forecasting",
            reason="No startups currently applying AI/ML to bloom prediction in this dataset",
        ))

    return themes[:MAX_UNDER_SERVED]


def build_investor_view_summary(summary: BloomSummary, investor: Actor, actors: List[Actor]) -> InvestorViewSummary:
    relevance = compute_situation_relevance(summary, investor)
    deal_flow = build_deal_flow(summary, investor, actors)
    logger.debug(f"Investor view for {investor.id}: relevance {relevance.score}, {len(deal_flow)} deals")
    return InvestorViewSummary(
        situation_relevance=relevance,
        top_deal_flow=deal_flow,
        portfolio_insights=derive_portfolio_insights(investor, deal_flow),
        under_served_themes=find_under_served_themes(summary, actors),
    )
