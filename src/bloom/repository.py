"""
Static data repository.

Loads the JSON data files once per process and serves observations, actors,
alert rules, case studies and beaches from memory.

Required files: bloom_observations.json, actors.json
Optional files (empty when absent): startupAlerts.json, caseStudies.json,
finnish_beaches.json
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.bloom.summary import build_bloom_summary
from src.core.config import settings
from src.core.data_types import (
    Actor, Beach, BloomSummary, Observation, StartupAlertRule, StartupCaseStudy
)
from src.core.exceptions import ActorNotFoundError, DataLoadError
from src.core.models import ActorType

logger = logging.getLogger(__name__)

OBSERVATIONS_FILE = "bloom_observations.json"
ACTORS_FILE = "actors.json"
ALERTS_FILE = "startupAlerts.json"
CASE_STUDIES_FILE = "caseStudies.json"
BEACHES_FILE = "finnish_beaches.json"


class BloomRepository:
    """In-memory view over the static data directory."""

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else settings.data_dir
        self._observations: Optional[List[Observation]] = None
        self._actors: Optional[List[Actor]] = None
        self._alerts: Optional[Dict[str, List[StartupAlertRule]]] = None
        self._case_studies: Optional[List[StartupCaseStudy]] = None
        self._beaches: Optional[List[Beach]] = None

    # =================================================================
    # LOADING
    # =================================================================

    def _read_json(self, filename: str, required: bool = True) -> List[Dict[str, Any]]:
        path = self.data_dir / filename
        if not path.exists():
            if required:
                raise DataLoadError(f"Required data file not found: {path}")
            logger.warning(f"Optional data file {path} not found, using empty collection")
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise DataLoadError(f"Malformed JSON in {path}: {e}") from e
        if not isinstance(data, list):
            raise DataLoadError(f"Expected a JSON array in {path}")
        return data

    def load(self) -> None:
        """Eagerly load the required files."""
        _ = self.observations
        _ = self.actors

    @property
    def observations(self) -> List[Observation]:
        if self._observations is None:
            try:
                self._observations = [Observation.from_dict(r) for r in self._read_json(OBSERVATIONS_FILE)]
            except (KeyError, ValueError) as e:
                raise DataLoadError(f"Invalid observation record: {e}") from e
            logger.info(f"Loaded {len(self._observations)} bloom observations")
        return self._observations

    @property
    def actors(self) -> List[Actor]:
        if self._actors is None:
            try:
                self._actors = [Actor.from_dict(r) for r in self._read_json(ACTORS_FILE)]
            except (KeyError, ValueError) as e:
                raise DataLoadError(f"Invalid actor record: {e}") from e
            logger.info(f"Loaded {len(self._actors)} actors")
        return self._actors

    @property
    def beaches(self) -> List[Beach]:
        if self._beaches is None:
            self._beaches = [Beach.from_dict(r) for r in self._read_json(BEACHES_FILE, required=False)]
        return self._beaches

    # =================================================================
    # BLOOM DATA
    # =================================================================

    def get_bloom_summary(self, region: str, week: int) -> BloomSummary:
        return build_bloom_summary(self.observations, region, week)

    def available_regions(self) -> List[str]:
        return sorted({o.region for o in self.observations})

    def available_weeks(self, region: Optional[str] = None) -> List[int]:
        """Weeks with observations, most recent first."""
        obs = self.observations
        if region:
            obs = [o for o in obs if o.region == region]
        return sorted({o.week for o in obs}, reverse=True)

    # =================================================================
    # ACTORS
    # =================================================================

    def get_actor(self, actor_id: str) -> Actor:
        for actor in self.actors:
            if actor.id == actor_id:
                return actor
        raise ActorNotFoundError(actor_id)

    def startups(self) -> List[Actor]:
        return [a for a in self.actors if a.type == ActorType.STARTUP]

    def investors(self) -> List[Actor]:
        return [a for a in self.actors if a.type == ActorType.INVESTOR]

    # =================================================================
    # ALERT RULES
    # =================================================================

    def get_startup_alerts(self, startup_id: str) -> List[StartupAlertRule]:
        if self._alerts is None:
            alerts: Dict[str, List[StartupAlertRule]] = {}
            for entry in self._read_json(ALERTS_FILE, required=False):
                rules = [StartupAlertRule.from_dict(r) for r in entry.get("rules", [])]
                alerts.setdefault(str(entry["startupId"]), []).extend(rules)
            self._alerts = alerts
            logger.info(f"Loaded alert rules for {len(alerts)} startups")
        return list(self._alerts.get(startup_id, []))

    # =================================================================
    # CASE STUDIES
    # =================================================================

    def _ensure_case_studies(self) -> List[StartupCaseStudy]:
        if self._case_studies is None:
            self._case_studies = [
                StartupCaseStudy.from_dict(r) for r in self._read_json(CASE_STUDIES_FILE, required=False)
            ]
        return self._case_studies

    def get_case_studies(self, startup_id: str) -> List[StartupCaseStudy]:
        """Case studies for a startup, newest first."""
        studies = [c for c in self._ensure_case_studies() if c.startup_id == startup_id]
        return sorted(studies, key=lambda c: c.created_at, reverse=True)

    def save_case_study(self, case_study: StartupCaseStudy) -> StartupCaseStudy:
        """Keep a generated case study for the rest of the session (not written to disk)."""
        self._ensure_case_studies().append(case_study)
        logger.info(f"Stored case study {case_study.id} for startup {case_study.startup_id}")
        return case_study


_repository: Optional[BloomRepository] = None


def get_repository() -> BloomRepository:
    """Process-wide repository over settings.data_dir."""
    global _repository
    if _repository is None:
        _repository = BloomRepository()
    return _repository
