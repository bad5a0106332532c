"""
Core enums for BlueBloom.

NOTE: These are NOT data records. For the transfer objects that carry
observations, summaries, actors and scoring results, see src/core/data_types.py.

The enums below are shared across the bloom and scoring modules so that
severity ranks, trend names and labels stay consistent between the
summary builder, the scorers and the API.
"""
from enum import Enum


class Severity(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Ordinal position: none < low < medium < high."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.NONE: 0,
    Severity.LOW: 1,
    Severity.MEDIUM: 2,
    Severity.HIGH: 3,
}


class Trend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"
    UNKNOWN = "unknown"


class FitLabel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ActorType(str, Enum):
    STARTUP = "startup"
    INVESTOR = "investor"


class AlertUseCase(str, Enum):
    PILOT = "pilot"
    SALES = "sales"
    INVESTOR = "investor"


class DeploymentIntensity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class BeachSafety(str, Enum):
    CLEAR = "clear"
    SUSPECTED = "suspected"
    DETECTED = "detected"
    UNKNOWN = "unknown"
