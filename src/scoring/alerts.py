"""
Alert rule evaluation and "perfect week" detection.

A rule's conditions are a conjunction of optional predicates over a
BloomSummary. Checks run in a fixed order and the first failing predicate
ends evaluation.
"""
import logging
from typing import Callable, Iterable, List

from src.core.catalog import catalog
from src.core.data_types import (
    BloomSummary, PerfectWeekMatch, PerfectWeekOverview, RuleMatch, StartupAlertRule
)

logger = logging.getLogger(__name__)

DEFAULT_MATCH_REASON = "Matches alert conditions."

SummaryProvider = Callable[[str, int], BloomSummary]


def does_summary_match_rule(summary: BloomSummary, rule: StartupAlertRule) -> RuleMatch:
    conditions = rule.conditions
    risk = summary.overall_risk_level
    clauses = []

    if conditions.min_overall_risk is not None:
        if risk.rank < conditions.min_overall_risk.rank:
            return RuleMatch(False)
        clauses.append(f"{risk.value} overall risk")

    if conditions.max_overall_risk is not None and risk.rank > conditions.max_overall_risk.rank:
        return RuleMatch(False)

    if conditions.min_high_severity_hotspots is not None:
        high_count = len(summary.high_severity_hotspots)
        if high_count < conditions.min_high_severity_hotspots:
            return RuleMatch(False)
        clauses.append(f"{high_count} high-severity hotspot{'s' if high_count > 1 else ''}")

    if conditions.require_increasing_trend:
        if not summary.increasing_hotspots:
            return RuleMatch(False)
        clauses.append("risk trending upwards")

    if conditions.require_tourist_areas_hint:
        if not any(catalog.is_tourist_area(h.area_name) for h in summary.hotspots):
            return RuleMatch(False)
        clauses.append("affecting tourist areas")

    reason = ", ".join(clauses) + "." if clauses else DEFAULT_MATCH_REASON
    return RuleMatch(True, reason)


def find_perfect_weeks_for_startup(summaries: Iterable[BloomSummary], rules: List[StartupAlertRule],
                                   startup_id: str, region: str) -> PerfectWeekOverview:
    """Every (summary, active rule) pair that matches. No de-duplication by week."""
    active = [r for r in rules if r.is_active]
    matches = []
    for summary in summaries:
        for rule in active:
            result = does_summary_match_rule(summary, rule)
            if result.matches:
                matches.append(PerfectWeekMatch(
                    region=summary.region,
                    week=summary.week,
                    rule_id=rule.id,
                    rule_name=rule.name,
                    reason=result.reason or DEFAULT_MATCH_REASON,
                ))
    return PerfectWeekOverview(startup_id=startup_id, region=region, matches=matches)


def week_range(start_week: int, end_week: int) -> List[int]:
    if start_week > end_week:
        raise ValueError(f"start_week ({start_week}) must not be after end_week ({end_week})")
    return list(range(start_week, end_week + 1))


def scan_perfect_weeks(provider: SummaryProvider, rules: List[StartupAlertRule], startup_id: str,
                       region: str, weeks: Iterable[int]) -> PerfectWeekOverview:
    """
    Fetch a summary per week through ``provider(region, week)`` and match rules
    against them. Weeks whose summary cannot be built are logged and skipped.
    """
    summaries = []
    for week in weeks:
        try:
            summaries.append(provider(region, week))
        except Exception as e:
            logger.warning(f"Skipping week {week} for {region}: {e}")
            continue

    overview = find_perfect_weeks_for_startup(summaries, rules, startup_id, region)
    logger.info(f"Perfect-week scan for {startup_id} in {region}: {len(overview.matches)} matches")
    return overview
