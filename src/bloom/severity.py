"""
Severity and trend model.

Severity ranks are ordinal (none < low < medium < high). Trends compare an
area's observation count with the previous week's count for the same area.
"""
from src.core.models import Severity, Trend

# Percentage change beyond which a trend is no longer "stable"
TREND_THRESHOLD_PCT = 20.0


def severity_level(severity: Severity) -> int:
    """Ordinal level 0-3 used for rule comparisons."""
    return Severity(severity).rank


def severity_to_number(severity: Severity) -> int:
    """Numeric intensity 0-100 used by the gap radar need formulas."""
    return {
        Severity.NONE: 0,
        Severity.LOW: 25,
        Severity.MEDIUM: 50,
        Severity.HIGH: 100,
    }[Severity(severity)]


def calculate_trend(current: int, previous: int) -> Trend:
    """
    Classify week-over-week change in observation count.

    unknown when there is no previous-week baseline, otherwise
    increasing / decreasing beyond +/-20%, else stable.
    """
    if previous == 0:
        return Trend.UNKNOWN
    change = (current - previous) / previous * 100
    if change > TREND_THRESHOLD_PCT:
        return Trend.INCREASING
    if change < -TREND_THRESHOLD_PCT:
        return Trend.DECREASING
    return Trend.STABLE
