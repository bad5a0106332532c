"""
Collaboration Cluster Builder

Groups 2-4 complementary startups into thematic packs for a bloom situation.
Startups are ranked per theme by tag overlap plus half their problem-fit score.
"""
import logging
from typing import Dict, List, Optional, Tuple

from src.core.catalog import ClusterTheme, catalog
from src.core.data_types import Actor, BloomSummary, CollaborationCluster
from src.core.models import Severity
from src.core.utils import matching_tags, plural, slugify
from src.scoring.fit_score import compute_problem_fit_score

logger = logging.getLogger(__name__)

MAX_CLUSTER_SIZE = 4
MIN_CLUSTER_SIZE = 2
MIN_CANDIDATE_SCORE = 30


def _select_members(theme: ClusterTheme, summary: BloomSummary, startups: List[Actor]) -> List[Actor]:
    scored = []
    for startup in startups:
        tags = startup.lower_tags
        tag_score = len(matching_tags(tags, theme.desired_tags)) * 10
        total = tag_score + compute_problem_fit_score(summary, startup).score * 0.5
        scored.append((total, startup, ",".join(sorted(tags))))

    # Stable sort keeps catalog order for ties
    scored.sort(key=lambda item: item[0], reverse=True)

    selected: List[Actor] = []
    used_signatures = set()
    for total, startup, signature in scored:
        if len(selected) >= MAX_CLUSTER_SIZE or total < MIN_CANDIDATE_SCORE:
            break
        if signature in used_signatures and len(selected) >= MIN_CLUSTER_SIZE:
            continue
        selected.append(startup)
        used_signatures.add(signature)
    return selected


def _theme_text(theme: ClusterTheme, members: List[Actor], summary: BloomSummary) -> Tuple[str, List[str], str]:
    """Summary, theme benefits and suitability note for a known cluster theme."""
    region, week = summary.region, summary.week
    hotspots = summary.hotspots
    risk = summary.overall_risk_level
    high_count = len(summary.high_severity_hotspots)

    if theme.id == "early_warning_pack":
        text = (
            f"This {len(members)}-startup pack combines real-time monitoring, data analytics, and alert "
            f"systems to provide comprehensive early warning for {region}. Together, these solutions create "
            f"a multi-layered detection network that tracks blooms from emergence to resolution."
        )
        benefits = [
            "Comprehensive coverage: sensors, satellite, and citizen reports",
            "Real-time alerts to authorities and citizens",
            "Historical data analysis for trend prediction",
            "Scalable infrastructure from pilot to region-wide deployment",
        ]
        if risk == Severity.HIGH or high_count > 0:
            note = (
                f"Strong match for week {week} with {risk.value} risk and {high_count} severe "
                f"{plural(high_count, 'hotspot')}"
            )
        else:
            note = f"Ideal for establishing proactive monitoring before risks escalate in {region}"
        return text, benefits, note

    if theme.id == "tourism_safety_pack":
        text = (
            f"Protect tourism and beach safety in {region} with this integrated pack. Combining real-time "
            f"bloom data, user-friendly communication tools, and safety guidance systems, this bundle ensures "
            f"tourists and locals can make informed decisions about water activities."
        )
        benefits = [
            "Tourist-friendly apps with real-time beach conditions",
            "Multi-language alerts and safety recommendations",
            "Integration with local tourism boards and beach management",
            "Reduces liability while maintaining recreational access",
        ]
        if hotspots and summary.safe_areas:
            note = (
                f"Perfect for mixed conditions: {len(hotspots)} hotspots but {len(summary.safe_areas)} "
                f"safe areas requiring clear communication"
            )
        else:
            note = f"Essential for maintaining tourism revenue while protecting public health in {region}"
        return text, benefits, note

    if theme.id == "nutrient_management_pack":
        text = (
            f"Address the root cause of blooms in {region} with this nutrient management consortium. By "
            f"combining upstream source reduction, biotech remediation, and farmer decision support, this "
            f"pack tackles nutrient pollution from multiple angles."
        )
        benefits = [
            "Upstream nutrient reduction at agricultural sources",
            "In-situ remediation for acute hotspots",
            "Farmer tools for precision nutrient application",
            "Long-term prevention strategy beyond reactive measures",
        ]
        increasing = len(summary.increasing_hotspots)
        if increasing > 0:
            note = (
                f"Urgent need: {increasing} {plural(increasing, 'area')} showing increasing trends "
                f"requiring root-cause intervention"
            )
        else:
            note = f"Strategic fit for preventing future blooms in {region} through systematic nutrient management"
        return text, benefits, note

    if theme.id == "citizen_comms_pack":
        text = (
            f"Empower citizens in {region} with transparent, accessible bloom information. This pack combines "
            f"data visualization, mobile apps, and community engagement tools to keep everyone informed and "
            f"build public trust in water management."
        )
        benefits = [
            "User-friendly dashboards for non-technical audiences",
            "Mobile apps for on-the-go water quality checks",
            "Community reporting and citizen science integration",
            "Reduces information hotline burden on authorities",
        ]
        note = (
            f"Essential for week {week} with {len(hotspots)} affected {plural(len(hotspots), 'area')} "
            f"requiring clear public communication"
        )
        return text, benefits, note

    if theme.id == "planning_and_policy_pack":
        text = (
            f"Support strategic planning and policy-making in {region} with integrated data platforms and "
            f"decision support tools. This pack helps authorities make evidence-based decisions and track "
            f"progress toward bloom reduction goals."
        )
        benefits = [
            "Centralized data integration from multiple sources",
            "Decision support tools for policy evaluation",
            "Long-term trend analysis and scenario planning",
            "Compliance tracking and reporting capabilities",
        ]
        if len(hotspots) > 3:
            note = (
                f"Highly relevant: {len(hotspots)} hotspots requiring coordinated governance "
                f"and data-driven planning"
            )
        else:
            note = f"Valuable for strategic planning and long-term bloom management in {region}"
        return text, benefits, note

    # Themes added through catalog.yaml
    text = f"{theme.title} for {region}: {theme.description}".rstrip(": ")
    return text, [], f"Assembled for {region} in week {week}"


def build_cluster(theme: ClusterTheme, members: List[Actor], summary: BloomSummary) -> CollaborationCluster:
    text, benefits, note = _theme_text(theme, members, summary)
    benefits = benefits + [
        f"Ready to pilot in {summary.region} starting week {summary.week}",
        f"{len(members)} proven startups working as consortium",
    ]
    return CollaborationCluster(
        id=f"{theme.id}_{slugify(summary.region)}_w{summary.week}",
        theme=theme,
        startups=members,
        summary=text,
        benefits=benefits,
        suitability_note=note,
    )


def build_clusters_for_situation(summary: BloomSummary, startups: List[Actor],
                                 themes: Optional[List[ClusterTheme]] = None) -> List[CollaborationCluster]:
    """Clusters with at least two members, ordered by average member fit score."""
    themes = themes if themes is not None else catalog.cluster_themes
    clusters = []
    for theme in themes:
        members = _select_members(theme, summary, startups)
        if len(members) >= MIN_CLUSTER_SIZE:
            clusters.append(build_cluster(theme, members, summary))
        else:
            logger.debug(f"Skipping cluster {theme.id}: only {len(members)} candidate(s)")

    fit_cache: Dict[str, int] = {}

    def average_fit(cluster: CollaborationCluster) -> float:
        scores = []
        for s in cluster.startups:
            if s.id not in fit_cache:
                fit_cache[s.id] = compute_problem_fit_score(summary, s).score
            scores.append(fit_cache[s.id])
        return sum(scores) / len(scores)

    clusters.sort(key=average_fit, reverse=True)
    return clusters
