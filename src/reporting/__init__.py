"""
Reporting Module - Pitch, Case Study and Console Output.
"""

from src.reporting.pitch import build_pitch_snippet, format_pitch_as_text, format_pitch_as_markdown
from src.reporting.case_studies import (
    CaseStudyInput,
    build_case_study_from_input,
    case_study_to_text,
    case_study_to_markdown,
)

__all__ = [
    "build_pitch_snippet",
    "format_pitch_as_text",
    "format_pitch_as_markdown",
    "CaseStudyInput",
    "build_case_study_from_input",
    "case_study_to_text",
    "case_study_to_markdown",
]
