"""
Scoring Catalog Configuration System.

Loads the theme catalogs and keyword lists that drive the bloom scorers:
- The 8 problem themes used by the gap radar (with coverage tags)
- The 5 collaboration cluster themes (with desired tags)
- Tag groups that identify monitoring / remediation / communication startups
- Tourist keywords used to spot recreational hotspots
- CitObs region bounding boxes

Usage:
    from src.core.catalog import catalog

    catalog.problem_themes[0].coverage_tags   # ["monitoring", ...]
    catalog.get_cluster_theme("early_warning_pack")
    catalog.is_tourist_area("Harbour Beach")  # True
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from src.core.config import settings

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA
# =============================================================================

class ProblemTheme(BaseModel):
    """A problem area on the solution gap radar."""
    id: str
    title: str
    description: str = ""
    coverage_tags: List[str] = Field(default_factory=list)


class ClusterTheme(BaseModel):
    """A collaboration pack theme."""
    id: str
    title: str
    description: str = ""
    desired_tags: List[str] = Field(default_factory=list)


class TagGroups(BaseModel):
    """Tag vocabularies that identify an actor's main capability."""
    monitoring: List[str] = Field(
        default_factory=lambda: ["monitoring", "sensors", "early warning"]
    )
    remediation: List[str] = Field(
        default_factory=lambda: ["remediation", "nutrient reduction", "biotech"]
    )
    communication: List[str] = Field(
        default_factory=lambda: [
            "communication", "citizen science", "decision support", "data visualization", "apps",
        ]
    )
    water_tech_focus: List[str] = Field(
        default_factory=lambda: ["blue-economy", "water-tech", "climate", "ocean-tech"]
    )


class CitObsRegion(BaseModel):
    """Bounding box for a CitObs region key."""
    name: str
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @model_validator(mode="after")
    def validate_bounds(self):
        if self.min_lat > self.max_lat or self.min_lon > self.max_lon:
            raise ValueError(f"Invalid bounding box for region {self.name}")
        return self

    def contains(self, lat: float, lon: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon


def _default_problem_themes() -> List[ProblemTheme]:
    return [
        ProblemTheme(
            id="early_warning",
            title="Early Warning & Monitoring",
            description="Real-time detection and forecasting systems for cyanobacteria blooms",
            coverage_tags=["monitoring", "sensors", "forecasting", "early warning"],
        ),
        ProblemTheme(
            id="citizen_communication",
            title="Citizen Communication & Alerts",
            description="Public-facing apps and platforms for bloom status and safety information",
            coverage_tags=["communication", "apps", "alerts", "dashboard", "mobile"],
        ),
        ProblemTheme(
            id="tourism_safety",
            title="Tourism & Beach Safety",
            description="Solutions focused on protecting tourists and recreational water users",
            coverage_tags=["tourism", "safety", "communication", "beach"],
        ),
        ProblemTheme(
            id="nutrient_reduction",
            title="Nutrient Reduction at Source",
            description="Technologies to reduce phosphorus and nitrogen runoff before it reaches water bodies",
            coverage_tags=["nutrient", "runoff", "remediation", "prevention"],
        ),
        ProblemTheme(
            id="in_situ_remediation",
            title="In-Situ Bloom Treatment",
            description="Active technologies to treat blooms directly in affected water bodies",
            coverage_tags=["remediation", "treatment", "cleanup", "filtration"],
        ),
        ProblemTheme(
            id="farmer_tools",
            title="Farmer Decision Support",
            description="Tools helping farmers optimize nutrient management to prevent runoff",
            coverage_tags=["agriculture", "farms", "nutrient", "decision-support", "precision farming"],
        ),
        ProblemTheme(
            id="governance_planning",
            title="Governance & Planning Tools",
            description="Systems for policy-makers to coordinate regional bloom management",
            coverage_tags=["planning", "policy", "governance", "coordination"],
        ),
        ProblemTheme(
            id="data_integration",
            title="Data Integration & Platform",
            description="Platforms aggregating bloom data from multiple sources for unified access",
            coverage_tags=["platform", "data", "integration", "api", "aggregation"],
        ),
    ]


def _default_cluster_themes() -> List[ClusterTheme]:
    return [
        ClusterTheme(
            id="early_warning_pack",
            title="Early Warning & Monitoring Pack",
            description="Comprehensive bloom detection and tracking system",
            desired_tags=["monitoring", "sensors", "forecasting", "alerts", "early warning", "iot", "satellite"],
        ),
        ClusterTheme(
            id="tourism_safety_pack",
            title="Tourism Safety Pack",
            description="Protect tourists and beachgoers with timely information",
            desired_tags=["communication", "apps", "tourism", "alerts", "safety", "dashboard", "citizen science"],
        ),
        ClusterTheme(
            id="nutrient_management_pack",
            title="Nutrient Management Pack",
            description="Reduce nutrient loads and prevent blooms at source",
            desired_tags=["nutrient", "remediation", "agriculture", "farms", "biotech", "nutrient reduction"],
        ),
        ClusterTheme(
            id="citizen_comms_pack",
            title="Citizen Communication Pack",
            description="Keep communities informed and engaged",
            desired_tags=[
                "communication", "apps", "dashboard", "alerts", "decision support",
                "data visualization", "citizen science",
            ],
        ),
        ClusterTheme(
            id="planning_and_policy_pack",
            title="Planning & Policy Pack",
            description="Data-driven governance and strategic planning",
            desired_tags=["planning", "governance", "data", "integration", "decision support", "platform", "api"],
        ),
    ]


def _default_citobs_regions() -> Dict[str, CitObsRegion]:
    return {
        "turku_archipelago": CitObsRegion(
            name="Turku archipelago", min_lat=59.7, max_lat=60.6, min_lon=21.0, max_lon=23.0,
        ),
        "helsinki_archipelago": CitObsRegion(
            name="Helsinki archipelago", min_lat=59.8, max_lat=60.4, min_lon=24.3, max_lon=25.6,
        ),
        "vaasa_archipelago": CitObsRegion(
            name="Vaasa archipelago", min_lat=62.9, max_lat=63.3, min_lon=21.3, max_lon=21.8,
        ),
    }


class ScoringCatalog(BaseModel):
    """
    Complete scoring catalog.

    Drives theme lists, tag vocabularies and region boxes for every scorer.
    Load from YAML with ScoringCatalog.from_yaml(path).
    """
    # --- Metadata ---
    name: str = "Default Catalog"
    version: str = "1.0"

    # --- Themes ---
    problem_themes: List[ProblemTheme] = Field(default_factory=_default_problem_themes)
    cluster_themes: List[ClusterTheme] = Field(default_factory=_default_cluster_themes)

    # --- Keywords ---
    tag_groups: TagGroups = Field(default_factory=TagGroups)
    tourist_keywords: List[str] = Field(
        default_factory=lambda: ["beach", "harbour", "harbor", "marina", "camping", "resort", "bay"]
    )
    coastal_region_keywords: List[str] = Field(
        default_factory=lambda: ["archipelago", "coast", "sea"]
    )
    coastal_customer_keywords: List[str] = Field(
        default_factory=lambda: ["coastal", "municipal", "beach", "port"]
    )
    nordic_region_keywords: List[str] = Field(
        default_factory=lambda: ["turku", "finland", "nordic"]
    )

    # --- Live data ---
    citobs_regions: Dict[str, CitObsRegion] = Field(default_factory=_default_citobs_regions)

    # =================================================================
    # VALIDATORS
    # =================================================================

    @model_validator(mode="after")
    def validate_unique_ids(self):
        for label, themes in (("problem", self.problem_themes), ("cluster", self.cluster_themes)):
            ids = [t.id for t in themes]
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"Duplicate {label} theme ids: {duplicates}")
        return self

    # =================================================================
    # LOOKUPS
    # =================================================================

    def get_problem_theme(self, theme_id: str) -> Optional[ProblemTheme]:
        return next((t for t in self.problem_themes if t.id == theme_id), None)

    def get_cluster_theme(self, theme_id: str) -> Optional[ClusterTheme]:
        return next((t for t in self.cluster_themes if t.id == theme_id), None)

    def is_tourist_area(self, area_name: str) -> bool:
        """True when an area name mentions a beach, harbour, marina etc."""
        name = area_name.lower()
        return any(kw in name for kw in self.tourist_keywords)

    def is_coastal_region(self, region: str) -> bool:
        name = region.lower()
        return any(kw in name for kw in self.coastal_region_keywords)

    # =================================================================
    # LOADERS
    # =================================================================

    @classmethod
    def from_yaml(cls, path: Path) -> "ScoringCatalog":
        """Load catalog configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Catalog config not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # Regions may be given as a flat dict keyed by region key
        regions = raw.get("citobs_regions")
        if isinstance(regions, dict):
            for key, val in regions.items():
                if isinstance(val, dict) and "name" not in val:
                    val["name"] = key

        return cls(**raw)

    @classmethod
    def load(cls, config_dir: Optional[Path] = None) -> "ScoringCatalog":
        """
        Load catalog with fallback chain:
          1. config/catalog.yaml (local overrides, gitignored)
          2. config/catalog.example.yaml (committed)
          3. Built-in defaults
        """
        if config_dir is None:
            config_dir = settings.config_dir

        private = config_dir / "catalog.yaml"
        example = config_dir / "catalog.example.yaml"

        if private.exists():
            logger.info(f"Loading scoring catalog from {private}")
            return cls.from_yaml(private)
        elif example.exists():
            logger.info(f"No catalog.yaml found, falling back to {example}")
            return cls.from_yaml(example)
        else:
            logger.warning("No catalog config found, using built-in defaults")
            return cls()

    # =================================================================
    # API SUMMARY
    # =================================================================

    def to_summary(self) -> dict:
        """Return a JSON-safe summary for the /api/config/catalog endpoint."""
        return {
            "name": self.name,
            "version": self.version,
            "problem_themes": [t.model_dump() for t in self.problem_themes],
            "cluster_themes": [t.model_dump() for t in self.cluster_themes],
            "tag_groups": self.tag_groups.model_dump(),
            "tourist_keywords": list(self.tourist_keywords),
            "citobs_regions": {k: r.model_dump() for k, r in self.citobs_regions.items()},
        }


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

catalog: ScoringCatalog = ScoringCatalog.load()
