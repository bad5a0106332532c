"""
Unit tests for beach safety status and themed actor recommendations.
"""
import pytest

from src.bloom.beaches import build_beach_statuses, search_beaches
from src.bloom.recommendations import recommend_actors, select_diverse_actors
from src.core.data_types import Beach
from src.core.models import ActorType, BeachSafety, Severity


@pytest.fixture
def beaches():
    return [
        Beach(name="Ruissalo Beach", region="Turku archipelago", lat=60.43, lon=22.15),
        Beach(name="Kakskerta", region="Turku archipelago", lat=60.35, lon=22.27),
        Beach(name="Yyteri Beach", region="Satakunta coast", lat=61.57, lon=21.53),
    ]


class TestBeachStatuses:

    def test_latest_observation_wins(self, beaches, make_observation):
        observations = [
            make_observation("Ruissalo Beach", "low", week=27, date="2024-07-02"),
            make_observation("Ruissalo Beach", "high", week=28, date="2024-07-10"),
            make_observation("Ruissalo Beach", "medium", week=28, date="2024-07-08"),
            make_observation("Kakskerta", "medium", week=28, date="2024-07-11"),
        ]
        statuses = {s.beach.name: s for s in build_beach_statuses(beaches, observations)}

        ruissalo = statuses["Ruissalo Beach"]
        assert ruissalo.status == BeachSafety.DETECTED
        assert ruissalo.severity == Severity.HIGH
        assert ruissalo.last_updated == "2024-07-10"
        assert ruissalo.message == "Unsafe: bloom detected"

        assert statuses["Kakskerta"].status == BeachSafety.SUSPECTED
        assert statuses["Yyteri Beach"].status == BeachSafety.UNKNOWN
        assert statuses["Yyteri Beach"].message == "Data not available"

    def test_low_and_none_are_clear(self, beaches, make_observation):
        observations = [
            make_observation("Ruissalo Beach", "low", date="2024-07-02"),
            make_observation("Kakskerta", "none", date="2024-07-02"),
        ]
        statuses = build_beach_statuses(beaches, observations)

        assert [s.status for s in statuses[:2]] == [BeachSafety.CLEAR, BeachSafety.CLEAR]
        assert statuses[0].message == "Safe to swim"

    def test_search_by_name_or_region(self, beaches):
        statuses = build_beach_statuses(beaches, [])

        assert [s.beach.name for s in search_beaches(statuses, "ruissalo")] == ["Ruissalo Beach"]
        assert [s.beach.name for s in search_beaches(statuses, "SATAKUNTA")] == ["Yyteri Beach"]
        assert search_beaches(statuses, "   ") == []
        assert search_beaches(statuses, None) == []


class TestRecommendations:

    @pytest.fixture
    def actors(self, make_actor):
        return [
            make_actor(actor_id="s1", tags=["monitoring"], country="Finland"),
            make_actor(actor_id="s2", tags=["sensors"], country="Finland"),
            make_actor(actor_id="s3", tags=["early warning"], country="Sweden"),
            make_actor(actor_id="s4", tags=["remediation"], country="Estonia"),
            make_actor(actor_id="s5", tags=["apps"], country="Denmark"),
            make_actor(actor_id="s6", tags=["citizen science"], country="Norway"),
            make_actor(actor_id="i1", tags=["monitoring"], actor_type=ActorType.INVESTOR, country="Finland"),
        ]

    def test_all_themes_for_busy_high_week(self, make_summary, actors):
        summary = make_summary("high", hotspots=[
            ("A", "high", 1, "stable"), ("B", "medium", 1, "stable"), ("C", "low", 1, "stable"),
        ])
        recommendations = recommend_actors(summary, actors)

        assert [r.theme for r in recommendations] == [
            "Early Warning & Monitoring",
            "Nutrient Reduction & Remediation",
            "Citizen Communication & Decision Support",
        ]
        assert [a.id for a in recommendations[0].actors] == ["s1", "s3", "s2", "i1"]
        assert [a.id for a in recommendations[1].actors] == ["s4"]

    def test_apps_excluded_from_communication(self, make_summary, actors):
        summary = make_summary("low", hotspots=[("A", "low", 1, "stable")])
        recommendations = recommend_actors(summary, actors)

        assert [r.theme for r in recommendations] == ["Citizen Communication & Decision Support"]
        assert [a.id for a in recommendations[0].actors] == ["s6"]

    def test_quiet_week(self, make_summary, actors):
        assert recommend_actors(make_summary("none"), actors) == []

    def test_diverse_selection_split(self, make_actor):
        actors = [make_actor(actor_id=f"s{i}", country="Finland") for i in range(5)] + [
            make_actor(actor_id=f"i{i}", actor_type=ActorType.INVESTOR, country="Sweden") for i in range(3)
        ]
        selected = select_diverse_actors(actors, 5)

        assert [a.id for a in selected] == ["s0", "s1", "s2", "i0", "i1"]

    def test_selection_is_deterministic(self, actors):
        assert select_diverse_actors(actors, 5) == select_diverse_actors(actors, 5)
