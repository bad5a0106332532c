"""
Case Study Builder

Turns a short pilot write-up (customer, period, actions, results, metrics)
into a publishable case study, optionally enriched with the bloom situation
of the pilot region. Renders to plain text and markdown.
"""
import logging
import time
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.data_types import (
    Actor, BloomSummary, CaseStudyMetric, CaseStudySection, StartupCaseStudy
)

logger = logging.getLogger(__name__)


# =============================================================================
# INPUT SCHEMA
# =============================================================================

class CaseStudyMetricInput(BaseModel):
    label: str
    value: str


class CaseStudyInput(BaseModel):
    """Pilot details supplied by the startup."""
    startup_id: str
    region: str
    time_period: str
    customer_name: str
    summary_of_pilot: str
    key_actions: List[str] = Field(default_factory=list)
    observed_results: List[str] = Field(default_factory=list)
    metrics: List[CaseStudyMetricInput] = Field(default_factory=list)

    @field_validator("startup_id", "region", "time_period", "customer_name", "summary_of_pilot")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("key_actions", "observed_results")
    @classmethod
    def drop_blank_items(cls, v: List[str]) -> List[str]:
        return [item.strip() for item in v if item.strip()]


def _new_case_id() -> str:
    return f"case_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


# =============================================================================
# BUILDER
# =============================================================================

def _problem_body(data: CaseStudyInput, summary: Optional[BloomSummary]) -> str:
    if summary is None:
        return (
            f"{data.customer_name} in {data.region} was facing challenges with cyanobacteria bloom management "
            f"during {data.time_period}. Traditional monitoring approaches were insufficient for the scale and "
            f"complexity of the situation, requiring a more advanced solution."
        )

    body = (
        f"In {data.region}, {data.customer_name} was dealing with {summary.overall_risk_level.value} severity "
        f"cyanobacteria blooms during {data.time_period}. "
    )
    if summary.hotspots:
        names = ", ".join(h.area_name for h in summary.hotspots[:3])
        body += (
            f"Critical hotspots included {names}, with {len(summary.high_severity_hotspots)} areas "
            f"reaching high severity levels. "
        )
    if summary.increasing_hotspots:
        body += "Increasing trends in several locations indicated the situation required immediate attention. "
    return body + (
        "The unpredictability of bloom conditions made planning difficult for water management, "
        "tourism operations, and public safety communications."
    )


def _solution_body(data: CaseStudyInput, startup: Actor) -> str:
    body = (
        f"{startup.name} deployed their {startup.description} The solution leveraged "
        f"{', '.join(startup.tags[:3])} technology to provide {data.customer_name} with real-time insights "
        f"and actionable data. "
    )
    details = startup.startup_details
    if details and details.trl_level:
        body += (
            f"With a TRL level of {details.trl_level} and proven deployments in "
            f"{', '.join(details.target_environments)} environments, the technology was well-suited "
            f"for this deployment."
        )
    return body.rstrip()


def build_case_study_from_input(data: CaseStudyInput, startup: Actor,
                                summary: Optional[BloomSummary] = None) -> StartupCaseStudy:
    if summary is not None:
        risk_context = (
            f"facing {summary.overall_risk_level.value} risk levels with "
            f"{len(summary.hotspots)} affected areas"
        )
    else:
        risk_context = "managing bloom monitoring challenges"

    main_tag = startup.tags[0] if startup.tags else "solution"
    hero = (
        f"{data.customer_name} in {data.region} was {risk_context}. During {data.time_period}, "
        f"{startup.name} deployed their {main_tag} technology to address these challenges. "
        f"{data.summary_of_pilot}"
    )

    results = (
        f"The deployment in {data.region} during {data.time_period} demonstrated measurable improvements "
        f"for {data.customer_name}. "
    )
    if data.metrics:
        joined = ", ".join(f"{m.label} {m.value}" for m in data.metrics)
        results += f"Key metrics showed significant progress: {joined}. "
    results += (
        "The solution enabled better decision-making, reduced uncertainty, and improved operational "
        "efficiency for water management."
    )

    next_steps = (
        f"Following the successful pilot in {data.region}, {data.customer_name} is exploring expansion "
        f"opportunities. Potential next steps include scaling the deployment to additional water bodies in the "
        f"region, extending the monitoring period to cover full seasonal cycles, and integrating the system "
        f"with existing municipal water management infrastructure. {startup.name} is ready to support these "
        f"expansions and customize the solution for {data.customer_name}'s long-term needs."
    )

    case_study = StartupCaseStudy(
        id=_new_case_id(),
        startup_id=data.startup_id,
        region=data.region,
        time_period=data.time_period,
        customer_name=data.customer_name,
        title=f"{startup.name} deployment with {data.customer_name} in {data.region}",
        hero_summary=hero,
        problem=CaseStudySection(title="Problem", body=_problem_body(data, summary)),
        solution=CaseStudySection(title="Solution", body=_solution_body(data, startup),
                                  bullets=list(data.key_actions)),
        results=CaseStudySection(title="Results & Impact", body=results, bullets=list(data.observed_results)),
        next_steps=CaseStudySection(title="Next Steps", body=next_steps),
        metrics=[CaseStudyMetric(label=m.label, value=m.value) for m in data.metrics],
        created_at=datetime.now().isoformat(),
    )
    logger.info(f"Built case study {case_study.id} for {startup.name}")
    return case_study


# =============================================================================
# RENDERERS
# =============================================================================

def case_study_to_text(cs: StartupCaseStudy) -> str:
    lines = [
        cs.title,
        "=" * len(cs.title),
        "",
        f"Customer: {cs.customer_name}",
        f"Region: {cs.region}",
        f"Period: {cs.time_period}",
        "",
        cs.hero_summary,
        "",
    ]

    def section(sec: CaseStudySection, bullet_heading: Optional[str] = None):
        lines.extend([sec.title, "-" * len(sec.title), sec.body, ""])
        if bullet_heading and sec.bullets:
            lines.append(f"{bullet_heading}:")
            lines.extend(f"• {b}" for b in sec.bullets)
            lines.append("")

    section(cs.problem)
    section(cs.solution, "Key Actions")
    section(cs.results, "Observed Results")
    if cs.metrics:
        lines.append("Metrics:")
        lines.extend(f"• {m.label}: {m.value}" for m in cs.metrics)
        lines.append("")
    lines.extend([cs.next_steps.title, "-" * len(cs.next_steps.title), cs.next_steps.body])
    return "\n".join(lines) + "\n"


def case_study_to_markdown(cs: StartupCaseStudy) -> str:
    lines = [
        f"# {cs.title}",
        "",
        f"**Customer:** {cs.customer_name}  ",
        f"**Region:** {cs.region}  ",
        f"**Period:** {cs.time_period}",
        "",
        cs.hero_summary,
        "",
    ]

    def section(sec: CaseStudySection, bullet_heading: Optional[str] = None):
        lines.extend([f"## {sec.title}", "", sec.body, ""])
        if bullet_heading and sec.bullets:
            lines.extend([f"**{bullet_heading}:**", ""])
            lines.extend(f"- {b}" for b in sec.bullets)
            lines.append("")

    section(cs.problem)
    section(cs.solution, "Key Actions")
    section(cs.results, "Observed Results")
    if cs.metrics:
        lines.extend(["**Metrics:**", ""])
        lines.extend(f"- **{m.label}:** {m.value}" for m in cs.metrics)
        lines.append("")
    lines.extend([f"## {cs.next_steps.title}", "", cs.next_steps.body])
    return "\n".join(lines) + "\n"
