"""
Unit tests for collaboration cluster building.
"""
import pytest

from src.core.catalog import ClusterTheme
from src.scoring.clusters import build_cluster, build_clusters_for_situation
from src.scoring.fit_score import compute_problem_fit_score


@pytest.fixture
def early_warning_pack():
    return ClusterTheme(
        id="early_warning_pack",
        title="Early Warning & Monitoring Pack",
        desired_tags=["monitoring", "sensors", "forecasting", "alerts", "early warning", "iot", "satellite"],
    )


@pytest.fixture
def high_summary(make_summary):
    return make_summary("high", hotspots=[
        ("Ruissalo Beach", "high", 3, "increasing"),
        ("Airisto Bay", "medium", 1, "stable"),
    ], safe_areas=["Kakskerta"])


class TestClusterMembership:

    def test_at_most_four_members(self, early_warning_pack, high_summary, make_actor):
        startups = [make_actor(actor_id=f"s{i}", tags=["monitoring", f"tag{i}"]) for i in range(6)]
        clusters = build_clusters_for_situation(high_summary, startups, themes=[early_warning_pack])

        assert len(clusters) == 1
        assert len(clusters[0].startups) == 4

    def test_single_candidate_gives_no_cluster(self, early_warning_pack, make_summary, make_actor):
        startups = [
            make_actor(actor_id="s1", tags=["monitoring", "sensors"]),
            make_actor(actor_id="s2", tags=["logistics"]),
        ]
        clusters = build_clusters_for_situation(make_summary("none"), startups, themes=[early_warning_pack])
        assert clusters == []

    def test_duplicate_tag_profiles_skipped_after_two(self, early_warning_pack, make_summary, make_actor):
        startups = [
            make_actor(actor_id="a", tags=["monitoring", "sensors"]),
            make_actor(actor_id="b", tags=["sensors", "monitoring"]),
            make_actor(actor_id="c", tags=["monitoring", "sensors"]),
            make_actor(actor_id="d", tags=["monitoring", "iot"]),
        ]
        clusters = build_clusters_for_situation(make_summary("none"), startups, themes=[early_warning_pack])

        assert [s.id for s in clusters[0].startups] == ["a", "b", "d"]

    def test_every_cluster_has_two_to_four_members(self, high_summary, make_actor):
        startups = [
            make_actor(actor_id="s1", tags=["monitoring", "sensors", "iot"]),
            make_actor(actor_id="s2", tags=["communication", "apps", "alerts"]),
            make_actor(actor_id="s3", tags=["remediation", "nutrient reduction"]),
            make_actor(actor_id="s4", tags=["satellite", "data"]),
            make_actor(actor_id="s5", tags=["decision support", "platform"]),
        ]
        clusters = build_clusters_for_situation(high_summary, startups)

        assert clusters
        for cluster in clusters:
            assert 2 <= len(cluster.startups) <= 4


class TestClusterContent:

    def test_id_and_benefits(self, early_warning_pack, high_summary, make_actor):
        members = [make_actor(actor_id="s1"), make_actor(actor_id="s2"), make_actor(actor_id="s3")]
        cluster = build_cluster(early_warning_pack, members, high_summary)

        assert cluster.id == "early_warning_pack_turku_archipelago_w28"
        assert cluster.benefits[-2:] == [
            "Ready to pilot in Turku archipelago starting week 28",
            "3 proven startups working as consortium",
        ]
        assert len(cluster.benefits) == 6
        assert cluster.summary.startswith("This 3-startup pack combines real-time monitoring")
        assert cluster.suitability_note == "Strong match for week 28 with high risk and 1 severe hotspot"

    def test_custom_theme_text(self, high_summary, make_actor):
        theme = ClusterTheme(id="harbour_pack", title="Harbour Pack", description="Marina operators")
        cluster = build_cluster(theme, [make_actor(actor_id="s1"), make_actor(actor_id="s2")], high_summary)

        assert cluster.summary == "Harbour Pack for Turku archipelago: Marina operators"
        assert cluster.benefits == [
            "Ready to pilot in Turku archipelago starting week 28",
            "2 proven startups working as consortium",
        ]

    def test_clusters_ordered_by_average_fit(self, high_summary, make_actor):
        startups = [
            make_actor(actor_id="s1", tags=["monitoring", "sensors", "iot"], trl_level=8),
            make_actor(actor_id="s2", tags=["communication", "apps", "alerts"]),
            make_actor(actor_id="s3", tags=["remediation", "nutrient reduction"]),
            make_actor(actor_id="s4", tags=["dashboard", "data visualization"]),
        ]
        clusters = build_clusters_for_situation(high_summary, startups)

        averages = [
            sum(compute_problem_fit_score(high_summary, s).score for s in c.startups) / len(c.startups)
            for c in clusters
        ]
        assert averages == sorted(averages, reverse=True)
