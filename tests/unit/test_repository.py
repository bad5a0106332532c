"""
Unit tests for the static data repository.
"""
import json

import pytest

from src.bloom.repository import BloomRepository
from src.core.data_types import StartupCaseStudy
from src.core.exceptions import ActorNotFoundError, DataLoadError
from src.core.models import ActorType, AlertUseCase, Severity


class TestLoading:

    def test_missing_required_file(self, tmp_path, write_data, sample_records):
        write_data(tmp_path, observations=sample_records["observations"])
        repo = BloomRepository(tmp_path)

        assert len(repo.observations) == 6
        with pytest.raises(DataLoadError, match="actors.json"):
            repo.load()

    def test_optional_files_default_to_empty(self, tmp_path, write_data, sample_records):
        write_data(tmp_path, observations=sample_records["observations"], actors=sample_records["actors"])
        repo = BloomRepository(tmp_path)

        assert repo.beaches == []
        assert repo.get_startup_alerts("s1") == []
        assert repo.get_case_studies("s1") == []

    def test_malformed_json(self, tmp_path):
        (tmp_path / "bloom_observations.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(DataLoadError, match="Malformed JSON"):
            _ = BloomRepository(tmp_path).observations

    def test_non_array_payload(self, tmp_path):
        (tmp_path / "actors.json").write_text(json.dumps({"id": "s1"}), encoding="utf-8")
        with pytest.raises(DataLoadError, match="Expected a JSON array"):
            _ = BloomRepository(tmp_path).actors

    def test_invalid_record(self, tmp_path, write_data, sample_records):
        bad = [dict(sample_records["observations"][0], severity="extreme")]
        write_data(tmp_path, observations=bad)
        with pytest.raises(DataLoadError, match="Invalid observation record"):
            _ = BloomRepository(tmp_path).observations


class TestQueries:

    def test_observations_parsed(self, repo):
        first = repo.observations[0]

        assert first.area_name == "Ruissalo Beach"
        assert first.severity == Severity.LOW
        assert first.week == 27

    def test_regions_and_weeks(self, repo):
        assert repo.available_regions() == ["Lake Vesijärvi", "Turku archipelago"]
        assert repo.available_weeks() == [28, 27]
        assert repo.available_weeks("Lake Vesijärvi") == [28]

    def test_summary(self, repo):
        summary = repo.get_bloom_summary("Turku archipelago", 28)

        assert summary.total_observations == 4
        assert summary.overall_risk_level == Severity.HIGH

    def test_actor_lookup(self, repo):
        actor = repo.get_actor("s1")

        assert actor.name == "AquaSense"
        assert actor.startup_details.trl_level == 8
        assert repo.get_actor("s3").startup_details is None
        assert repo.get_actor("i1").investor_details.geography_focus == ["nordics"]
        with pytest.raises(ActorNotFoundError):
            repo.get_actor("missing")

    def test_startups_and_investors(self, repo):
        assert [a.id for a in repo.startups()] == ["s1", "s2", "s3"]
        assert [a.id for a in repo.investors()] == ["i1"]
        assert all(a.type == ActorType.INVESTOR for a in repo.investors())

    def test_alert_rules(self, repo):
        rules = repo.get_startup_alerts("s1")

        assert [r.id for r in rules] == ["r1", "r2"]
        assert rules[0].use_case == AlertUseCase.PILOT
        assert rules[0].conditions.min_overall_risk == Severity.HIGH
        assert rules[0].conditions.min_high_severity_hotspots == 1
        assert rules[1].is_active is False
        assert repo.get_startup_alerts("s2") == []

    def test_beaches(self, repo):
        assert [b.name for b in repo.beaches] == ["Ruissalo Beach", "Kakskerta", "Yyteri Beach"]


class TestCaseStudies:

    def test_saved_case_study_listed_first(self, tmp_path, write_data, sample_records):
        existing = {
            "id": "case_old", "startupId": "s1", "region": "Turku archipelago", "timePeriod": "2023",
            "customerName": "Naantali", "title": "Old", "heroSummary": "",
            "createdAt": "2023-09-15T10:00:00",
        }
        write_data(tmp_path, observations=sample_records["observations"], actors=sample_records["actors"],
                   case_studies=[existing])
        repo = BloomRepository(tmp_path)

        old = repo.get_case_studies("s1")[0]
        assert old.problem.title == "Problem"

        new = StartupCaseStudy.from_dict(dict(existing, id="case_new", createdAt="2024-08-01T09:00:00"))
        repo.save_case_study(new)

        assert [c.id for c in repo.get_case_studies("s1")] == ["case_new", "case_old"]
        assert repo.get_case_studies("s2") == []
