"""Startups router: fit score, pitch, pilot, impact, alerts and case studies."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from src.bloom.repository import BloomRepository
from src.core.data_types import Actor, ImpactSimulationInput
from src.core.models import DeploymentIntensity
from src.core.schemas import StandardResponse
from src.reporting.case_studies import (
    CaseStudyInput, build_case_study_from_input, case_study_to_markdown, case_study_to_text
)
from src.reporting.pitch import build_pitch_snippet, format_pitch_as_markdown, format_pitch_as_text
from src.scoring.alerts import scan_perfect_weeks, week_range
from src.scoring.fit_score import compute_problem_fit_score
from src.scoring.impact import simulate_impact
from src.scoring.pilot import build_pilot_opportunity, pilot_to_text
from src.web.dependencies import get_repo, get_startup
from src.web.responses import collection, success
from src.web.serializers import serialize, serialize_list

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/startups",
    tags=["Startups"]
)

TEXT_FORMATS = ("json", "text", "markdown")


class ImpactRequest(BaseModel):
    region: str
    start_week: int = Field(..., ge=1, le=53)
    duration_weeks: int = Field(4, ge=1, le=52)
    deployment_intensity: DeploymentIntensity = DeploymentIntensity.MEDIUM


@router.get("/{startup_id}/fit", response_model=StandardResponse[dict], summary="Problem-Fit Score")
async def get_fit_score(
    region: str,
    week: int = Query(..., ge=1, le=53),
    startup: Actor = Depends(get_startup),
    repo: BloomRepository = Depends(get_repo),
):
    summary = repo.get_bloom_summary(region, week)
    fit = compute_problem_fit_score(summary, startup)
    return StandardResponse(data=serialize(fit, extra={"actor_id": startup.id, "region": region, "week": week}))


@router.get("/{startup_id}/pitch", summary="Pitch Snippet")
async def get_pitch(
    region: str,
    week: int = Query(..., ge=1, le=53),
    format: str = Query("json", pattern="^(json|text|markdown)$"),
    startup: Actor = Depends(get_startup),
    repo: BloomRepository = Depends(get_repo),
):
    """Two-slide pitch. ``format=text`` or ``format=markdown`` returns plain text."""
    pitch = build_pitch_snippet(repo.get_bloom_summary(region, week), startup)
    if format == "text":
        return PlainTextResponse(format_pitch_as_text(pitch))
    if format == "markdown":
        return PlainTextResponse(format_pitch_as_markdown(pitch), media_type="text/markdown")
    return StandardResponse(data=serialize(pitch))


@router.get("/{startup_id}/pilot", summary="Pilot Opportunity")
async def get_pilot(
    region: str,
    week: int = Query(..., ge=1, le=53),
    format: str = Query("json", pattern="^(json|text)$"),
    startup: Actor = Depends(get_startup),
    repo: BloomRepository = Depends(get_repo),
):
    opportunity = build_pilot_opportunity(repo.get_bloom_summary(region, week), startup)
    if format == "text":
        return PlainTextResponse(pilot_to_text(opportunity, startup.name, region, week))
    return StandardResponse(data=serialize(opportunity))


@router.post("/{startup_id}/impact", response_model=StandardResponse[dict], summary="Simulate Impact")
async def post_impact(
    request: ImpactRequest,
    startup: Actor = Depends(get_startup),
    repo: BloomRepository = Depends(get_repo),
):
    """Toy risk-reduction curve starting from the summary of the start week."""
    try:
        sim = ImpactSimulationInput(
            region=request.region,
            start_week=request.start_week,
            duration_weeks=request.duration_weeks,
            deployment_intensity=request.deployment_intensity,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    summary = repo.get_bloom_summary(request.region, request.start_week)
    return StandardResponse(data=serialize(simulate_impact(summary, startup, sim)))


@router.get("/{startup_id}/alerts", summary="Alert Rules")
async def get_alert_rules(startup: Actor = Depends(get_startup), repo: BloomRepository = Depends(get_repo)):
    return collection(serialize_list(repo.get_startup_alerts(startup.id)))


@router.get("/{startup_id}/perfect-weeks", response_model=StandardResponse[dict], summary="Perfect Weeks")
async def get_perfect_weeks(
    region: str,
    start_week: Optional[int] = Query(None, ge=1, le=53),
    end_week: Optional[int] = Query(None, ge=1, le=53),
    startup: Actor = Depends(get_startup),
    repo: BloomRepository = Depends(get_repo),
):
    """
    Weeks in which the startup's active alert rules match.
    Without a week range, every week with observations in the region is scanned.
    """
    if start_week is None and end_week is None:
        weeks = sorted(repo.available_weeks(region))
    else:
        try:
            weeks = week_range(start_week or 1, end_week or 53)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    overview = scan_perfect_weeks(
        repo.get_bloom_summary, repo.get_startup_alerts(startup.id), startup.id, region, weeks
    )
    return StandardResponse(data=serialize(overview))


@router.get("/{startup_id}/case-studies", summary="List Case Studies")
async def list_case_studies(startup: Actor = Depends(get_startup), repo: BloomRepository = Depends(get_repo)):
    return collection(serialize_list(repo.get_case_studies(startup.id)))


@router.get("/{startup_id}/case-studies/{case_id}", summary="Get Case Study")
async def get_case_study(
    case_id: str,
    format: str = Query("json", pattern="^(json|text|markdown)$"),
    startup: Actor = Depends(get_startup),
    repo: BloomRepository = Depends(get_repo),
):
    case_study = next((c for c in repo.get_case_studies(startup.id) if c.id == case_id), None)
    if case_study is None:
        raise HTTPException(status_code=404, detail=f"Case study {case_id} not found")
    if format == "text":
        return PlainTextResponse(case_study_to_text(case_study))
    if format == "markdown":
        return PlainTextResponse(case_study_to_markdown(case_study), media_type="text/markdown")
    return StandardResponse(data=serialize(case_study))


@router.post("/{startup_id}/case-studies", summary="Create Case Study")
async def create_case_study(
    data: CaseStudyInput,
    week: Optional[int] = Query(None, ge=1, le=53),
    startup: Actor = Depends(get_startup),
    repo: BloomRepository = Depends(get_repo),
):
    """
    Build a case study from pilot details. With ``week`` the bloom summary of
    the case study region for that week enriches the problem section.
    Stored for the running session only.
    """
    if data.startup_id != startup.id:
        raise HTTPException(status_code=400, detail="startup_id in body does not match the URL")

    summary = repo.get_bloom_summary(data.region, week) if week is not None else None
    case_study = repo.save_case_study(build_case_study_from_input(data, startup, summary))
    return success(
        "Case study created",
        case_study_id=case_study.id,
        data=serialize(case_study),
    )
