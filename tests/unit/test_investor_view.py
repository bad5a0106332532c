"""
Unit tests for the investor view builder.
"""
import pytest

from src.core.models import ActorType, FitLabel
from src.scoring.investor_view import (
    build_deal_flow, build_investor_view_summary, compute_situation_relevance,
    derive_portfolio_insights, find_under_served_themes,
)


@pytest.fixture
def investor(make_actor):
    return make_actor(
        actor_id="i1",
        name="Nordic Blue Ventures",
        actor_type=ActorType.INVESTOR,
        focus_tags=["blue-economy", "monitoring"],
        geography_focus=["nordics"],
        portfolio_tags=["monitoring"],
    )


@pytest.fixture
def startups(make_actor):
    return [
        make_actor(actor_id="s1", name="AquaSense", tags=["monitoring", "sensors", "iot"], trl_level=8,
                   target_environments=["coastal"]),
        make_actor(actor_id="s2", name="BlueAlert", tags=["communication", "apps", "alerts"], trl_level=5),
    ]


@pytest.fixture
def high_summary(make_summary):
    return make_summary("high", hotspots=[
        ("Ruissalo Beach", "high", 3, "increasing"),
        ("Airisto Bay", "medium", 1, "stable"),
    ])


class TestSituationRelevance:

    def test_nordic_water_tech_investor(self, investor, high_summary):
        relevance = compute_situation_relevance(high_summary, investor)

        # 70 base + 15 water-tech focus + 10 nordic geography
        assert relevance.score == 95
        assert relevance.label == FitLabel.HIGH
        assert "significant opportunity for blue economy investments" in relevance.explanation

    def test_europe_focus_outside_nordic_keywords(self, make_actor, make_summary):
        investor = make_actor(actor_id="i2", actor_type=ActorType.INVESTOR, geography_focus=["nordics", "europe"])
        relevance = compute_situation_relevance(make_summary("medium", region="Lake Vesijärvi"), investor)

        assert relevance.score == 60
        assert relevance.label == FitLabel.MEDIUM

    def test_busy_high_risk_bonus_is_clamped(self, investor, make_summary):
        summary = make_summary("high", hotspots=[(f"Area {i}", "high", 1, "stable") for i in range(4)])
        assert compute_situation_relevance(summary, investor).score == 100

    def test_investor_without_details(self, make_actor, make_summary):
        investor = make_actor(actor_id="i3", actor_type=ActorType.INVESTOR, with_details=False)
        relevance = compute_situation_relevance(make_summary("none"), investor)

        assert relevance.score == 20
        assert relevance.label == FitLabel.LOW
        assert "limited immediate investment urgency" in relevance.explanation


class TestDealFlow:

    def test_focus_tag_bonus_and_ordering(self, investor, startups, high_summary):
        deal_flow = build_deal_flow(high_summary, investor, startups + [investor])

        assert [item.startup.id for item in deal_flow] == ["s1", "s2"]
        # fit 100 plus 5 for the "monitoring" focus tag, clamped
        assert deal_flow[0].fit_score == 100
        assert deal_flow[0].reasons == [
            "Strong match for current bloom situation",
            "Aligned with your investment thesis",
            "Expands portfolio coverage into new areas",
        ]

    def test_capped_at_eight(self, investor, high_summary, make_actor):
        startups = [make_actor(actor_id=f"s{i}", tags=["monitoring"]) for i in range(10)]
        assert len(build_deal_flow(high_summary, investor, startups)) == 8

    def test_default_reason(self, make_actor, make_summary):
        investor = make_actor(actor_id="i9", actor_type=ActorType.INVESTOR, with_details=False)
        startup = make_actor(tags=["logistics"], with_details=False)
        deal_flow = build_deal_flow(make_summary("none"), investor, [startup])

        assert deal_flow[0].reasons == ["Relevant solution for water quality challenges"]


class TestPortfolioInsights:

    def test_extends_and_complements(self, investor, startups, high_summary):
        deal_flow = build_deal_flow(high_summary, investor, startups)
        insights = [i.text for i in derive_portfolio_insights(investor, deal_flow)]

        assert insights == [
            "Extends your portfolio into sensors and iot, currently under-represented in your holdings.",
            "Complements your existing monitoring/sensor focus with citizen communication and alert capabilities.",
        ]

    def test_no_details_or_no_deals(self, investor, make_actor):
        assert derive_portfolio_insights(investor, []) == []
        bare = make_actor(actor_id="i4", actor_type=ActorType.INVESTOR, with_details=False)
        assert derive_portfolio_insights(bare, [object()]) == []


class TestUnderServedThemes:

    def test_high_risk_with_few_remediation_tags(self, startups, high_summary):
        themes = [t.theme for t in find_under_served_themes(high_summary, startups)]
        assert themes == ["Remediation & Nutrient Reduction", "AI-Powered Bloom Prediction"]

    def test_communication_gap_on_busy_hotspot(self, make_actor, high_summary):
        themes = find_under_served_themes(high_summary, [make_actor(tags=["remediation"])])

        assert [t.theme for t in themes] == [
            "Remediation & Nutrient Reduction",
            "Citizen Communication & Tourism Safety",
            "AI-Powered Bloom Prediction",
        ]
        assert themes[1].reason.startswith("Multiple coastal hotspots affecting public areas, but only 0")

    def test_forecasting_tags_cover_prediction(self, make_actor, make_summary):
        themes = find_under_served_themes(make_summary("low"), [make_actor(tags=["forecasting"])])
        assert themes == []


class TestInvestorViewSummary:

    def test_assembles_all_parts(self, investor, startups, high_summary):
        view = build_investor_view_summary(high_summary, investor, startups + [investor])

        assert view.situation_relevance.score == 95
        assert len(view.top_deal_flow) == 2
        assert view.portfolio_insights
        assert view.under_served_themes
