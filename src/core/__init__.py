"""
Core Module - Shared Infrastructure.
"""

from src.core.config import settings, Settings
from src.core.catalog import catalog, ScoringCatalog
from src.core.models import Severity, Trend, FitLabel, ActorType

__all__ = [
    "settings",
    "Settings",
    "catalog",
    "ScoringCatalog",
    "Severity",
    "Trend",
    "FitLabel",
    "ActorType",
]
