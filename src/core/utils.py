"""
Shared utilities.
"""
import math
from typing import Iterable, List

from src.core.models import FitLabel, Severity


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def score_to_label(score: float) -> FitLabel:
    """
    Map a 0-100 score to the shared High / Medium / Low label.
    - >= 75 High
    - >= 45 Medium
    - otherwise Low
    """
    if score >= 75:
        return FitLabel.HIGH
    if score >= 45:
        return FitLabel.MEDIUM
    return FitLabel.LOW


def risk_base_score(severity: Severity) -> int:
    """Starting score for fit and relevance scoring from the overall risk level."""
    return {
        Severity.HIGH: 70,
        Severity.MEDIUM: 55,
        Severity.LOW: 40,
        Severity.NONE: 20,
    }[Severity(severity)]


def max_severity(severities: Iterable[Severity]) -> Severity:
    """Highest severity by rank, or none for an empty input."""
    return max((Severity(s) for s in severities), key=lambda s: s.rank, default=Severity.NONE)


def tags_match(tag: str, other: str) -> bool:
    """
    Loose tag match: case-insensitive substring containment in either direction.
    "nutrient" matches "nutrient reduction", "app" matches "apps".
    """
    a, b = tag.lower(), other.lower()
    return a in b or b in a


def matching_tags(tags: Iterable[str], vocabulary: Iterable[str]) -> List[str]:
    """Tags that loosely match at least one vocabulary entry."""
    vocab = list(vocabulary)
    return [t for t in tags if any(tags_match(t, v) for v in vocab)]


def has_any_tag(tags: Iterable[str], vocabulary: Iterable[str]) -> bool:
    """Exact (case-insensitive) membership of any tag in a vocabulary."""
    vocab = {v.lower() for v in vocabulary}
    return any(t.lower() in vocab for t in tags)


def plural(count: int, singular: str, plural_form: str = None) -> str:
    if count == 1:
        return singular
    return plural_form if plural_form is not None else f"{singular}s"


def slugify(text: str) -> str:
    return "_".join(text.lower().split())


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))
