"""Citizen bulletin and expert note templates for a bloom summary."""
from src.core.data_types import BloomSummary, Bulletin
from src.core.models import Severity, Trend

_RISK_BANNERS = {
    Severity.HIGH: (
        "🚨 **High Alert**: Significant cyanobacteria blooms have been detected in several areas. "
        "We recommend avoiding swimming and water sports in affected zones. Please check specific "
        "area conditions before visiting coastal areas."
    ),
    Severity.MEDIUM: (
        "⚠️ **Moderate Caution**: Cyanobacteria levels are elevated in some areas. While many spots "
        "remain safe, we advise checking local conditions and being cautious, especially with "
        "children and pets."
    ),
    Severity.LOW: (
        "✅ **Generally Safe**: Cyanobacteria levels are low across the region. Most areas are "
        "suitable for swimming and water activities, though it's always wise to observe local "
        "water conditions."
    ),
    Severity.NONE: (
        "🌊 **All Clear**: No significant cyanobacteria detected this week. The waters are inviting! "
        "Enjoy your coastal activities safely."
    ),
}

_SEVERITY_MARKERS = {Severity.HIGH: "🔴", Severity.MEDIUM: "🟡"}
_TREND_MARKERS = {Trend.INCREASING: "📈", Trend.DECREASING: "📉"}


def generate_bulletin(summary: BloomSummary) -> Bulletin:
    return Bulletin(
        citizen_bulletin=generate_citizen_bulletin(summary),
        expert_note=generate_expert_note(summary),
    )


def generate_citizen_bulletin(summary: BloomSummary) -> str:
    lines = [
        f"**Cyanobacteria Situation for {summary.region} - Week {summary.week}**",
        "",
        _RISK_BANNERS[summary.overall_risk_level],
        "",
    ]

    if summary.hotspots:
        lines.append("**Areas to Avoid**:")
        for h in summary.hotspots[:3]:
            marker = _SEVERITY_MARKERS.get(h.severity, "🟢")
            trend = _TREND_MARKERS.get(h.trend, "➡️")
            lines.append(f"{marker} {h.area_name} - {h.severity.value} severity {trend}")
        lines.append("")

    if summary.safe_areas:
        lines.append("**Safe Areas for Activities**:")
        lines.extend(f"✓ {area}" for area in summary.safe_areas[:5])
        lines.append("")

    lines.append(
        "*Remember: Conditions can change quickly. Always observe water color and avoid areas "
        "with visible green scum. If in doubt, stay out!*"
    )
    return "\n".join(lines)


def generate_expert_note(summary: BloomSummary) -> str:
    lines = [
        "**Technical Summary**",
        "",
        f"Total observations recorded: {summary.total_observations}",
        f"Overall risk classification: {summary.overall_risk_level.value.upper()}",
        f"Active hotspots: {len(summary.hotspots)}",
        "",
    ]

    if summary.hotspots:
        lines.append("**Hotspot Analysis**:")
        for h in summary.hotspots:
            lines.append(
                f"• {h.area_name}: {h.observation_count} observations, "
                f"{h.severity.value} severity, trend {h.trend.value}"
            )
        lines.append("")

    lines.append("**Recommended Actions**:")
    if summary.overall_risk_level in (Severity.HIGH, Severity.MEDIUM):
        lines.extend([
            "• Increase monitoring frequency in hotspot areas",
            "• Issue public advisories and update signage",
            "• Consider water sampling for toxin analysis",
            "• Coordinate with health authorities if persistent",
        ])
    else:
        lines.extend([
            "• Maintain regular monitoring schedule",
            "• Continue public awareness programs",
        ])

    return "\n".join(lines) + "\n"
