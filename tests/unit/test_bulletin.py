"""
Unit tests for citizen bulletins and expert notes.
"""
from src.bloom.bulletin import generate_bulletin, generate_citizen_bulletin, generate_expert_note


class TestCitizenBulletin:

    def test_high_risk_bulletin(self, make_summary):
        summary = make_summary("high", hotspots=[
            ("Ruissalo Beach", "high", 2, "increasing"),
            ("Airisto Bay", "medium", 1, "decreasing"),
            ("Pansio", "low", 1, "stable"),
            ("Satava", "low", 1, "unknown"),
        ], safe_areas=["Pansio", "Satava", "Kakskerta"])
        text = generate_citizen_bulletin(summary)
        lines = text.split("\n")

        assert lines[0] == "**Cyanobacteria Situation for Turku archipelago - Week 28**"
        assert lines[2].startswith("🚨 **High Alert**")
        assert "🔴 Ruissalo Beach - high severity 📈" in lines
        assert "🟡 Airisto Bay - medium severity 📉" in lines
        assert "🟢 Pansio - low severity ➡️" in lines
        # Only the three worst hotspots are listed
        assert "Satava - low severity" not in text
        assert "✓ Kakskerta" in lines
        assert text.endswith("If in doubt, stay out!*")

    def test_all_clear(self, make_summary):
        text = generate_citizen_bulletin(make_summary("none"))

        assert "🌊 **All Clear**" in text
        assert "**Areas to Avoid**" not in text
        assert "**Safe Areas for Activities**" not in text


class TestExpertNote:

    def test_technical_summary(self, make_summary):
        summary = make_summary("medium", hotspots=[("Airisto Bay", "medium", 3, "stable")])
        note = generate_expert_note(summary)

        assert note.startswith("**Technical Summary**\n")
        assert "Total observations recorded: 3" in note
        assert "Overall risk classification: MEDIUM" in note
        assert "Active hotspots: 1" in note
        assert "• Airisto Bay: 3 observations, medium severity, trend stable" in note
        assert "• Issue public advisories and update signage" in note

    def test_low_risk_actions(self, make_summary):
        note = generate_expert_note(make_summary("low"))

        assert "• Maintain regular monitoring schedule" in note
        assert "• Consider water sampling for toxin analysis" not in note


def test_generate_bulletin_has_both_parts(make_summary):
    bulletin = generate_bulletin(make_summary("low"))

    assert bulletin.citizen_bulletin.startswith("**Cyanobacteria Situation")
    assert bulletin.expert_note.startswith("**Technical Summary**")
