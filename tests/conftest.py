"""
Shared pytest fixtures for BlueBloom test suite.
"""
import copy
import json
import os

# Live CitObs lookups are disabled for the whole test session
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from src.bloom.repository import BloomRepository
from src.core.data_types import (
    Actor, BloomSummary, Hotspot, InvestorDetails, Observation, StartupDetails
)
from src.core.models import ActorType, Severity, Trend


# --- Factory Fixtures ---

@pytest.fixture
def make_observation():
    """Factory fixture for bloom observations."""
    counter = {"n": 0}

    def _create(
        area_name="Ruissalo Beach",
        severity="medium",
        week=28,
        region="Turku archipelago",
        date=None,
        lat=60.43,
        lon=22.15,
    ):
        counter["n"] += 1
        return Observation(
            id=f"obs_{counter['n']:03d}",
            region=region,
            area_name=area_name,
            lat=lat,
            lon=lon,
            date=date or f"2024-07-{counter['n'] % 28 + 1:02d}",
            week=week,
            severity=Severity(severity),
        )

    return _create


@pytest.fixture
def make_actor():
    """Factory fixture for startups and investors."""
    def _create(
        actor_id="s1",
        name="Test Startup",
        tags=None,
        actor_type=ActorType.STARTUP,
        country="Finland",
        description="Test water technology.",
        trl_level=None,
        target_environments=None,
        typical_customer="",
        deployment_scale="pilot sites",
        key_benefits=None,
        focus_tags=None,
        geography_focus=None,
        portfolio_tags=None,
        with_details=True,
    ):
        startup_details = None
        investor_details = None
        if with_details and actor_type == ActorType.STARTUP:
            startup_details = StartupDetails(
                trl_level=trl_level,
                target_environments=list(target_environments or []),
                typical_customer=typical_customer,
                deployment_scale=deployment_scale,
                key_benefits=list(key_benefits or []),
            )
        if with_details and actor_type == ActorType.INVESTOR:
            investor_details = InvestorDetails(
                stage_focus=["seed"],
                geography_focus=list(geography_focus or []),
                focus_tags=list(focus_tags or []),
                portfolio_tags=list(portfolio_tags or []),
            )
        return Actor(
            id=actor_id,
            name=name,
            type=actor_type,
            country=country,
            tags=list(tags or []),
            description=description,
            startup_details=startup_details,
            investor_details=investor_details,
        )

    return _create


@pytest.fixture
def make_summary():
    """Factory fixture for bloom summaries built directly from hotspot tuples."""
    def _create(
        risk="high",
        hotspots=None,
        safe_areas=None,
        region="Turku archipelago",
        week=28,
        total_observations=None,
    ):
        spots = [
            Hotspot(area_name=name, severity=Severity(sev), observation_count=count, trend=Trend(trend))
            for name, sev, count, trend in (hotspots or [])
        ]
        return BloomSummary(
            region=region,
            week=week,
            total_observations=total_observations if total_observations is not None
            else sum(h.observation_count for h in spots),
            hotspots=spots,
            safe_areas=list(safe_areas or []),
            overall_risk_level=Severity(risk),
        )

    return _create


# --- Data Directory Fixtures ---

SAMPLE_OBSERVATIONS = [
    {"id": "o1", "region": "Turku archipelago", "areaName": "Ruissalo Beach", "lat": 60.43, "lon": 22.15,
     "date": "2024-07-02", "week": 27, "severity": "low"},
    {"id": "o2", "region": "Turku archipelago", "areaName": "Ruissalo Beach", "lat": 60.43, "lon": 22.15,
     "date": "2024-07-08", "week": 28, "severity": "high"},
    {"id": "o3", "region": "Turku archipelago", "areaName": "Ruissalo Beach", "lat": 60.43, "lon": 22.15,
     "date": "2024-07-10", "week": 28, "severity": "high"},
    {"id": "o4", "region": "Turku archipelago", "areaName": "Airisto Bay", "lat": 60.35, "lon": 22.09,
     "date": "2024-07-09", "week": 28, "severity": "medium"},
    {"id": "o5", "region": "Turku archipelago", "areaName": "Kakskerta", "lat": 60.35, "lon": 22.27,
     "date": "2024-07-11", "week": 28, "severity": "none"},
    {"id": "o6", "region": "Lake Vesijärvi", "areaName": "Enonselkä", "lat": 61.03, "lon": 25.61,
     "date": "2024-07-10", "week": 28, "severity": "low"},
]

SAMPLE_ACTORS = [
    {"id": "s1", "name": "AquaSense", "type": "startup", "country": "Finland",
     "tags": ["monitoring", "sensors", "iot"], "description": "Sensor buoys.",
     "startupDetails": {"trlLevel": 8, "targetEnvironments": ["coastal"],
                        "typicalCustomer": "Coastal municipalities", "deploymentScale": "shoreline networks",
                        "keyBenefits": ["Early detection of blooms", "24/7 data"]}},
    {"id": "s2", "name": "BlueAlert", "type": "startup", "country": "Sweden",
     "tags": ["communication", "apps", "alerts"], "description": "Beach alerts app.",
     "startupDetails": {"trlLevel": 7, "targetEnvironments": ["coastal", "lakes"],
                        "typicalCustomer": "Beach operators", "deploymentScale": "regional apps",
                        "keyBenefits": ["Public alerts within minutes"]}},
    {"id": "s3", "name": "NutriCycle", "type": "startup", "country": "Estonia",
     "tags": ["remediation", "nutrient reduction"], "description": "Phosphorus filters."},
    {"id": "i1", "name": "Nordic Blue Ventures", "type": "investor", "country": "Finland",
     "tags": ["venture capital"], "description": "Early-stage water fund.",
     "investorDetails": {"stageFocus": ["seed"], "geographyFocus": ["nordics"],
                         "focusTags": ["blue-economy", "monitoring"], "portfolioTags": ["monitoring"]}},
]

SAMPLE_ALERTS = [
    {"startupId": "s1", "rules": [
        {"id": "r1", "name": "High risk pilot", "description": "", "useCase": "pilot",
         "conditions": {"minOverallRisk": "high", "minHighSeverityHotspots": 1}, "isActive": True},
        {"id": "r2", "name": "Inactive", "description": "", "useCase": "sales",
         "conditions": {}, "isActive": False},
    ]},
]

SAMPLE_BEACHES = [
    {"name": "Ruissalo Beach", "region": "Turku archipelago", "lat": 60.43, "lon": 22.15},
    {"name": "Kakskerta", "region": "Turku archipelago", "lat": 60.35, "lon": 22.27},
    {"name": "Yyteri Beach", "region": "Satakunta coast", "lat": 61.57, "lon": 21.53},
]


def write_data_dir(path, observations=None, actors=None, alerts=None, case_studies=None, beaches=None):
    """Write the JSON data files the repository expects. None skips a file."""
    files = {
        "bloom_observations.json": observations,
        "actors.json": actors,
        "startupAlerts.json": alerts,
        "caseStudies.json": case_studies,
        "finnish_beaches.json": beaches,
    }
    for filename, content in files.items():
        if content is not None:
            (path / filename).write_text(json.dumps(content), encoding="utf-8")
    return path


@pytest.fixture
def sample_records():
    """Fresh copies of the sample JSON records, keyed like write_data_dir's arguments."""
    return copy.deepcopy({
        "observations": SAMPLE_OBSERVATIONS,
        "actors": SAMPLE_ACTORS,
        "alerts": SAMPLE_ALERTS,
        "beaches": SAMPLE_BEACHES,
    })


@pytest.fixture
def write_data():
    return write_data_dir


@pytest.fixture
def data_dir(tmp_path):
    """Temporary data directory with a small, complete data set."""
    return write_data_dir(
        tmp_path,
        observations=SAMPLE_OBSERVATIONS,
        actors=SAMPLE_ACTORS,
        alerts=SAMPLE_ALERTS,
        case_studies=[],
        beaches=SAMPLE_BEACHES,
    )


@pytest.fixture
def repo(data_dir):
    """Repository backed by the temporary data directory."""
    return BloomRepository(data_dir)


@pytest.fixture
def test_client(repo):
    """FastAPI TestClient with the repository dependency pointed at test data."""
    from src.web.app import app
    from src.web.dependencies import get_repo

    app.dependency_overrides[get_repo] = lambda: repo
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
