"""
Core lightweight data types for BlueBloom.

These are transfer objects (Dataclasses). Everything here is derived or
loaded on demand and never persisted; the static JSON files under data/
use camelCase keys, which the ``from_dict`` constructors translate.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Dict, Optional, Any
from src.core.models import (
    Severity, Trend, FitLabel, ActorType, AlertUseCase, DeploymentIntensity, BeachSafety
)


# =============================================================================
# OBSERVATIONS & SUMMARIES
# =============================================================================

@dataclass(frozen=True)
class Observation:
    """Single raw bloom observation"""
    id: str
    region: str
    area_name: str
    lat: float
    lon: float
    date: str
    week: int
    severity: Severity

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Observation":
        return cls(
            id=str(raw["id"]),
            region=raw["region"],
            area_name=raw["areaName"],
            lat=float(raw["lat"]),
            lon=float(raw["lon"]),
            date=raw["date"],
            week=int(raw["week"]),
            severity=Severity(raw["severity"]),
        )


@dataclass
class Hotspot:
    area_name: str
    severity: Severity
    observation_count: int
    trend: Trend


@dataclass
class BloomSummary:
    """Aggregated view of one region in one week"""
    region: str
    week: int
    total_observations: int = 0
    hotspots: List[Hotspot] = field(default_factory=list)
    safe_areas: List[str] = field(default_factory=list)
    overall_risk_level: Severity = Severity.NONE
    key_messages: List[str] = field(default_factory=list)

    @property
    def high_severity_hotspots(self) -> List[Hotspot]:
        return [h for h in self.hotspots if h.severity == Severity.HIGH]

    @property
    def increasing_hotspots(self) -> List[Hotspot]:
        return [h for h in self.hotspots if h.trend == Trend.INCREASING]


@dataclass
class Bulletin:
    citizen_bulletin: str
    expert_note: str


# =============================================================================
# ACTORS
# =============================================================================

@dataclass
class StartupDetails:
    trl_level: Optional[int] = None
    target_environments: List[str] = field(default_factory=list)
    typical_customer: str = ""
    deployment_scale: str = ""
    price_range: str = ""
    key_benefits: List[str] = field(default_factory=list)
    example_use_case: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "StartupDetails":
        trl = raw.get("trlLevel")
        return cls(
            trl_level=int(trl) if trl is not None else None,
            target_environments=list(raw.get("targetEnvironments", [])),
            typical_customer=raw.get("typicalCustomer", ""),
            deployment_scale=raw.get("deploymentScale", ""),
            price_range=raw.get("priceRange", ""),
            key_benefits=list(raw.get("keyBenefits", [])),
            example_use_case=raw.get("exampleUseCase", ""),
        )


@dataclass
class InvestorDetails:
    stage_focus: List[str] = field(default_factory=list)
    geography_focus: List[str] = field(default_factory=list)
    focus_tags: List[str] = field(default_factory=list)
    portfolio_tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "InvestorDetails":
        return cls(
            stage_focus=list(raw.get("stageFocus", [])),
            geography_focus=list(raw.get("geographyFocus", [])),
            focus_tags=list(raw.get("focusTags", [])),
            portfolio_tags=list(raw.get("portfolioTags", [])),
        )


@dataclass
class Actor:
    """Startup or investor in the blue-economy catalog"""
    id: str
    name: str
    type: ActorType
    country: str = ""
    tags: List[str] = field(default_factory=list)
    description: str = ""
    url: str = ""
    startup_details: Optional[StartupDetails] = None
    investor_details: Optional[InvestorDetails] = None

    @property
    def lower_tags(self) -> List[str]:
        return [t.lower() for t in self.tags]

    @property
    def is_startup(self) -> bool:
        return self.type == ActorType.STARTUP

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Actor":
        startup = raw.get("startupDetails")
        investor = raw.get("investorDetails")
        return cls(
            id=str(raw["id"]),
            name=raw["name"],
            type=ActorType(raw["type"]),
            country=raw.get("country", ""),
            tags=list(raw.get("tags", [])),
            description=raw.get("description", ""),
            url=raw.get("url", ""),
            startup_details=StartupDetails.from_dict(startup) if startup else None,
            investor_details=InvestorDetails.from_dict(investor) if investor else None,
        )


@dataclass
class Recommendation:
    theme: str
    explanation: str
    actors: List[Actor] = field(default_factory=list)


# =============================================================================
# SCORING RESULTS
# =============================================================================

@dataclass
class ProblemFitScore:
    score: int
    label: FitLabel
    explanation: str
    drivers: List[str] = field(default_factory=list)


@dataclass
class SolutionGap:
    theme: Any  # ProblemTheme from src.core.catalog
    severity_score: int
    coverage_score: int
    gap_score: int
    summary: str
    drivers: List[str] = field(default_factory=list)


@dataclass
class CollaborationCluster:
    id: str
    theme: Any  # ClusterTheme from src.core.catalog
    startups: List[Actor]
    summary: str
    benefits: List[str] = field(default_factory=list)
    suitability_note: str = ""


@dataclass
class SituationRelevance:
    score: int
    label: FitLabel
    explanation: str


@dataclass
class DealFlowItem:
    startup: Actor
    fit_score: int
    fit_label: FitLabel
    reasons: List[str] = field(default_factory=list)


@dataclass
class PortfolioFitInsight:
    text: str


@dataclass
class UnderServedTheme:
    theme: str
    description: str
    reason: str


@dataclass
class InvestorViewSummary:
    situation_relevance: SituationRelevance
    top_deal_flow: List[DealFlowItem]
    portfolio_insights: List[PortfolioFitInsight]
    under_served_themes: List[UnderServedTheme]


# =============================================================================
# ALERTS
# =============================================================================

@dataclass
class AlertConditions:
    """Conjunction of optional predicates over a BloomSummary"""
    min_overall_risk: Optional[Severity] = None
    max_overall_risk: Optional[Severity] = None
    min_high_severity_hotspots: Optional[int] = None
    require_increasing_trend: bool = False
    require_tourist_areas_hint: bool = False

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "AlertConditions":
        min_risk = raw.get("minOverallRisk")
        max_risk = raw.get("maxOverallRisk")
        min_high = raw.get("minHighSeverityHotspots")
        return cls(
            min_overall_risk=Severity(min_risk) if min_risk else None,
            max_overall_risk=Severity(max_risk) if max_risk else None,
            min_high_severity_hotspots=int(min_high) if min_high is not None else None,
            require_increasing_trend=bool(raw.get("requireIncreasingTrend", False)),
            require_tourist_areas_hint=bool(raw.get("requireTouristAreasHint", False)),
        )


@dataclass
class StartupAlertRule:
    id: str
    name: str
    description: str
    use_case: AlertUseCase
    conditions: AlertConditions = field(default_factory=AlertConditions)
    is_active: bool = True

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "StartupAlertRule":
        return cls(
            id=str(raw["id"]),
            name=raw["name"],
            description=raw.get("description", ""),
            use_case=AlertUseCase(raw.get("useCase", "pilot")),
            conditions=AlertConditions.from_dict(raw.get("conditions") or {}),
            is_active=bool(raw.get("isActive", True)),
        )


@dataclass
class RuleMatch:
    matches: bool
    reason: Optional[str] = None


@dataclass
class PerfectWeekMatch:
    region: str
    week: int
    rule_id: str
    rule_name: str
    reason: str


@dataclass
class PerfectWeekOverview:
    startup_id: str
    region: str
    matches: List[PerfectWeekMatch] = field(default_factory=list)


# =============================================================================
# IMPACT, PITCH, PILOT
# =============================================================================

@dataclass
class ImpactSimulationInput:
    region: str
    start_week: int
    duration_weeks: int
    deployment_intensity: DeploymentIntensity

    def __post_init__(self):
        if self.duration_weeks < 1:
            raise ValueError("duration_weeks must be at least 1")
        self.deployment_intensity = DeploymentIntensity(self.deployment_intensity)


@dataclass
class RiskPoint:
    week_offset: int
    baseline_risk: int
    with_solution_risk: int


@dataclass
class ImpactSimulationResult:
    region: str
    start_week: int
    duration_weeks: int
    actor_id: str
    points: List[RiskPoint]
    headline: str
    notes: List[str] = field(default_factory=list)


@dataclass
class Slide:
    title: str
    bullets: List[str] = field(default_factory=list)


@dataclass
class PitchSnippet:
    problem_slide: Slide
    solution_slide: Slide


@dataclass
class PilotOpportunity:
    pilot_title: str
    objective: str
    why_now: str
    key_steps: List[str] = field(default_factory=list)
    success_metrics: List[str] = field(default_factory=list)


# =============================================================================
# CASE STUDIES
# =============================================================================

@dataclass
class CaseStudyMetric:
    label: str
    value: str


@dataclass
class CaseStudySection:
    title: str
    body: str
    bullets: Optional[List[str]] = None


@dataclass
class StartupCaseStudy:
    id: str
    startup_id: str
    region: str
    time_period: str
    customer_name: str
    title: str
    hero_summary: str
    problem: CaseStudySection
    solution: CaseStudySection
    results: CaseStudySection
    next_steps: CaseStudySection
    metrics: List[CaseStudyMetric] = field(default_factory=list)
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "StartupCaseStudy":
        def _section(key: str, default_title: str) -> CaseStudySection:
            sec = raw.get(key) or {}
            return CaseStudySection(
                title=sec.get("title", default_title),
                body=sec.get("body", ""),
                bullets=sec.get("bullets"),
            )

        return cls(
            id=str(raw["id"]),
            startup_id=str(raw["startupId"]),
            region=raw.get("region", ""),
            time_period=raw.get("timePeriod", ""),
            customer_name=raw.get("customerName", ""),
            title=raw.get("title", ""),
            hero_summary=raw.get("heroSummary", ""),
            problem=_section("problem", "Problem"),
            solution=_section("solution", "Solution"),
            results=_section("results", "Results & Impact"),
            next_steps=_section("nextSteps", "Next Steps"),
            metrics=[CaseStudyMetric(label=m["label"], value=m["value"]) for m in raw.get("metrics", [])],
            created_at=raw.get("createdAt") or datetime.now().isoformat(),
        )


# =============================================================================
# BEACHES & LIVE DATA
# =============================================================================

@dataclass
class Beach:
    name: str
    region: str
    lat: float
    lon: float

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Beach":
        return cls(
            name=raw["name"],
            region=raw.get("region", ""),
            lat=float(raw.get("lat", 0.0)),
            lon=float(raw.get("lon", 0.0)),
        )


@dataclass
class BeachStatus:
    beach: Beach
    status: BeachSafety
    severity: Optional[Severity] = None
    last_updated: Optional[str] = None
    description: Optional[str] = None

    @property
    def message(self) -> str:
        return {
            BeachSafety.CLEAR: "Safe to swim",
            BeachSafety.SUSPECTED: "Caution: suspected bloom",
            BeachSafety.DETECTED: "Unsafe: bloom detected",
        }.get(self.status, "Data not available")


@dataclass
class CitObsEvent:
    id: str
    lat: float
    lon: float
    timestamp: Optional[str]
    severity: Severity
    area_name: str = "Unknown location"


@dataclass
class CitObsSummary:
    region_key: str
    region_name: str
    week: int
    date_from: str
    date_to: str
    total_observations: int
    severity_counts: Dict[str, int]
    overall_risk: Severity
    sample_events: List[CitObsEvent] = field(default_factory=list)
