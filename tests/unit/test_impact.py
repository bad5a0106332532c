"""
Unit tests for the impact simulator.
"""
import pytest

from src.core.data_types import ImpactSimulationInput, RiskPoint
from src.core.models import DeploymentIntensity
from src.scoring.impact import BASE_NOTES, simulate_impact


def make_input(duration=4, intensity="low", start_week=28):
    return ImpactSimulationInput(
        region="Turku archipelago",
        start_week=start_week,
        duration_weeks=duration,
        deployment_intensity=intensity,
    )


class TestSimulateImpact:

    def test_low_intensity_on_quiet_week(self, make_actor, make_summary):
        result = simulate_impact(make_summary("none"), make_actor(tags=["apps"]), make_input(4, "low"))

        assert [p.week_offset for p in result.points] == [0, 1, 2, 3]
        assert [p.baseline_risk for p in result.points] == [10, 14, 15, 11]
        for point in result.points:
            assert point.with_solution_risk <= point.baseline_risk
        assert result.points[0].with_solution_risk == result.points[0].baseline_risk

        final = result.points[-1]
        reduction = (final.baseline_risk - final.with_solution_risk) / final.baseline_risk
        assert reduction == pytest.approx(0.10, abs=0.02)
        assert result.headline.startswith("Modest ~")
        assert result.notes == BASE_NOTES

    def test_monitoring_cuts_peaks(self, make_actor, make_summary):
        result = simulate_impact(make_summary("high"), make_actor(tags=["sensors"]), make_input(1, "high"))

        # 40% high-intensity reduction plus 10% on a baseline above 60
        assert result.points == [RiskPoint(week_offset=0, baseline_risk=80, with_solution_risk=40)]
        assert result.headline.startswith("~50% lower average risk")
        assert "Monitoring solutions are especially effective at reducing peak risk periods." in result.notes

    def test_remediation_bonus(self, make_actor, make_summary):
        result = simulate_impact(
            make_summary("medium"), make_actor(tags=["nutrient reduction"]), make_input(1, "medium")
        )

        # baseline 60 is not above the peak threshold
        assert result.points[0].baseline_risk == 60
        assert result.points[0].with_solution_risk == 42
        assert result.notes[-1] == "Remediation solutions show stronger long-term cumulative effects."

    def test_increasing_trend_rises_in_first_half(self, make_actor, make_summary):
        summary = make_summary("high", hotspots=[("Harbour Beach", "high", 4, "increasing")])
        result = simulate_impact(summary, make_actor(tags=["apps"]), make_input(4, "low"))

        assert [p.baseline_risk for p in result.points] == [80, 83, 80, 80]

    def test_significant_weeks_headline(self, make_actor, make_summary):
        result = simulate_impact(make_summary("high"), make_actor(tags=["apps"]), make_input(2, "medium"))

        # second week drops 84 -> 63 while the average falls only ~13%
        assert result.headline == "Medium-intensity deployment avoids 1 high-risk week in this scenario"

    def test_result_metadata(self, make_actor, make_summary):
        actor = make_actor(actor_id="s7", tags=[])
        result = simulate_impact(make_summary("low"), actor, make_input(6, "high", start_week=30))

        assert result.actor_id == "s7"
        assert result.start_week == 30
        assert result.duration_weeks == 6
        assert len(result.points) == 6


class TestImpactInput:

    def test_zero_duration_rejected(self):
        with pytest.raises(ValueError):
            make_input(duration=0)

    def test_intensity_coerced(self):
        assert make_input(intensity="high").deployment_intensity == DeploymentIntensity.HIGH
