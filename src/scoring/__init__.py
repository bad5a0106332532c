"""
Scoring Module - rule-based scorers over a BloomSummary.
"""

from src.scoring.fit_score import compute_problem_fit_score, ProblemFitScorer
from src.scoring.gap_radar import build_gap_radar, build_solution_gap
from src.scoring.clusters import build_clusters_for_situation
from src.scoring.investor_view import build_investor_view_summary
from src.scoring.alerts import does_summary_match_rule, find_perfect_weeks_for_startup, scan_perfect_weeks
from src.scoring.impact import simulate_impact
from src.scoring.pilot import build_pilot_opportunity

__all__ = [
    "compute_problem_fit_score",
    "ProblemFitScorer",
    "build_gap_radar",
    "build_solution_gap",
    "build_clusters_for_situation",
    "build_investor_view_summary",
    "does_summary_match_rule",
    "find_perfect_weeks_for_startup",
    "scan_perfect_weeks",
    "simulate_impact",
    "build_pilot_opportunity",
]
