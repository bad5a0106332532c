"""
Solution Gap Radar

For each problem theme, compares how badly the current bloom situation needs
it (severity) with how well the startup catalog already covers it (coverage).

    gap = severity * (1 - coverage / 100)

Only gaps of 15 or more are reported, largest first.
"""
import logging
from typing import Callable, Dict, List, Optional

from src.core.catalog import ProblemTheme, catalog
from src.core.data_types import Actor, BloomSummary, SolutionGap
from src.core.models import ActorType, Severity
from src.bloom.severity import severity_to_number
from src.core.utils import clamp, matching_tags, plural, round_half_up

logger = logging.getLogger(__name__)

MIN_GAP_SCORE = 15
MAX_DRIVERS = 5
# Roughly three strong startups saturate a theme
COVERAGE_NORMALISER = 100


class _SituationStats:
    """Counts over a summary shared by every theme formula."""

    def __init__(self, summary: BloomSummary):
        self.risk = severity_to_number(summary.overall_risk_level)
        self.hotspots = len(summary.hotspots)
        self.high = len(summary.high_severity_hotspots)
        self.increasing = len(summary.increasing_hotspots)
        self.tourist_hotspots = [h for h in summary.hotspots if catalog.is_tourist_area(h.area_name)]
        self.tourist = len(self.tourist_hotspots)
        self.observations = summary.total_observations
        self.is_high_risk = summary.overall_risk_level == Severity.HIGH


def _early_warning(s: _SituationStats) -> float:
    return s.risk * 0.6 + s.hotspots * 5 + (20 if s.increasing > 0 else 0)


def _citizen_communication(s: _SituationStats) -> float:
    return s.hotspots * 8 + s.risk * 0.4 + (25 if s.tourist > 0 else 0)


def _tourism_safety(s: _SituationStats) -> float:
    return s.tourist * 20 + s.risk * 0.3 + (20 if s.is_high_risk else 0)


def _nutrient_reduction(s: _SituationStats) -> float:
    return s.increasing * 15 + s.risk * 0.5 + (25 if s.high >= 3 else 0)


def _in_situ_remediation(s: _SituationStats) -> float:
    return s.high * 20 + s.risk * 0.4


def _farmer_tools(s: _SituationStats) -> float:
    return s.increasing * 12 + s.risk * 0.3 + (20 if s.observations > 15 else 0)


def _governance_planning(s: _SituationStats) -> float:
    return s.hotspots * 10 + s.observations * 2 + (20 if s.hotspots > 4 else 0)


def _data_integration(s: _SituationStats) -> float:
    return s.observations * 3 + s.hotspots * 8


SEVERITY_FORMULAS: Dict[str, Callable[[_SituationStats], float]] = {
    "early_warning": _early_warning,
    "citizen_communication": _citizen_communication,
    "tourism_safety": _tourism_safety,
    "nutrient_reduction": _nutrient_reduction,
    "in_situ_remediation": _in_situ_remediation,
    "farmer_tools": _farmer_tools,
    "governance_planning": _governance_planning,
    "data_integration": _data_integration,
}


def compute_theme_severity(theme: ProblemTheme, summary: BloomSummary) -> int:
    """Need for a theme in the current situation, 0-100."""
    formula = SEVERITY_FORMULAS.get(theme.id)
    if formula is None:
        logger.debug(f"No severity formula for theme {theme.id}, scoring 0")
        return 0
    return int(clamp(round_half_up(formula(_SituationStats(summary)))))


def compute_theme_coverage(theme: ProblemTheme, startups: List[Actor]) -> int:
    """Supply of startup capability for a theme, 0-100. Non-startups are ignored."""
    coverage = 0
    for startup in startups:
        if startup.type != ActorType.STARTUP:
            continue
        matches = matching_tags(startup.tags, theme.coverage_tags)
        if not matches:
            continue
        contribution = len(matches) * 10
        details = startup.startup_details
        if details and details.trl_level:
            contribution += details.trl_level * 2
        coverage += contribution

    return round_half_up(min(100, coverage / COVERAGE_NORMALISER * 100))


def _count_theme_startups(theme: ProblemTheme, startups: List[Actor]) -> int:
    # One-directional: the startup tag must contain the coverage tag
    coverage_tags = [c.lower() for c in theme.coverage_tags]
    return sum(
        1 for s in startups
        if s.type == ActorType.STARTUP and any(c in t for t in s.lower_tags for c in coverage_tags)
    )


def _gap_summary(theme: ProblemTheme, summary: BloomSummary, gap: int, coverage: int) -> str:
    title = theme.title.lower()
    if gap > 70:
        text = (
            f"Critical gap: {title} is urgently needed in {summary.region}, "
            f"but startup coverage is minimal ({coverage}%). "
        )
    elif gap > 40:
        text = (
            f"Significant opportunity: {summary.region} shows strong need for {title}, "
            f"with limited current solutions ({coverage}% coverage). "
        )
    else:
        text = f"Moderate gap: {title} could strengthen the ecosystem in {summary.region}. "

    return text + (
        f"Current bloom severity is {summary.overall_risk_level.value} "
        f"with {len(summary.hotspots)} affected areas."
    )


def _gap_drivers(theme: ProblemTheme, summary: BloomSummary, startups: List[Actor],
                 severity: int, coverage: int) -> List[str]:
    drivers = []

    if severity > 70:
        drivers.append(f"High need indicated: severity score {severity}/100 based on current bloom situation")
    elif severity > 40:
        drivers.append(f"Moderate need: severity score {severity}/100 from bloom analysis")

    if coverage < 30:
        count = _count_theme_startups(theme, startups)
        if count == 0:
            drivers.append("No startups currently addressing this theme")
        else:
            drivers.append(f"Only {count} {plural(count, 'startup')} with relevant capabilities")
    elif coverage < 60:
        drivers.append(f"Limited startup coverage ({coverage}%) - room for additional solutions")

    high = summary.high_severity_hotspots
    if len(high) >= 2:
        names = ", ".join(h.area_name for h in high[:2])
        drivers.append(f"{len(high)} high-severity hotspots require attention: {names}")

    increasing = len(summary.increasing_hotspots)
    if increasing > 0:
        verb = "area shows" if increasing == 1 else "areas show"
        drivers.append(f"{increasing} {verb} increasing bloom trends")

    if theme.id in ("tourism_safety", "citizen_communication"):
        tourist = [h.area_name for h in summary.hotspots if catalog.is_tourist_area(h.area_name)]
        if tourist:
            drivers.append(f"Tourist and recreational areas affected: {', '.join(tourist[:2])}")

    return drivers[:MAX_DRIVERS]


def build_solution_gap(theme: ProblemTheme, summary: BloomSummary, startups: List[Actor]) -> SolutionGap:
    severity = compute_theme_severity(theme, summary)
    coverage = compute_theme_coverage(theme, startups)
    gap = round_half_up(severity * (1 - coverage / 100))

    return SolutionGap(
        theme=theme,
        severity_score=severity,
        coverage_score=coverage,
        gap_score=gap,
        summary=_gap_summary(theme, summary, gap, coverage),
        drivers=_gap_drivers(theme, summary, startups, severity, coverage),
    )


def build_gap_radar(summary: BloomSummary, startups: List[Actor],
                    themes: Optional[List[ProblemTheme]] = None) -> List[SolutionGap]:
    """Gaps of at least MIN_GAP_SCORE across all problem themes, largest first."""
    themes = themes if themes is not None else catalog.problem_themes
    gaps = [build_solution_gap(theme, summary, startups) for theme in themes]
    kept = [g for g in gaps if g.gap_score >= MIN_GAP_SCORE]
    kept.sort(key=lambda g: g.gap_score, reverse=True)
    logger.debug(f"Gap radar for {summary.region} w{summary.week}: {len(kept)}/{len(gaps)} themes above threshold")
    return kept
