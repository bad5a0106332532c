"""Console table generator using Rich."""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.core.data_types import (
    BloomSummary, CollaborationCluster, InvestorViewSummary, PitchSnippet, ProblemFitScore, SolutionGap
)
from src.core.models import FitLabel, Severity

SEVERITY_EMOJI = {
    Severity.HIGH: "🔴",
    Severity.MEDIUM: "🟠",
    Severity.LOW: "🟡",
    Severity.NONE: "🟢",
}

LABEL_STYLE = {
    FitLabel.HIGH: "bold green",
    FitLabel.MEDIUM: "yellow",
    FitLabel.LOW: "dim",
}


def get_severity_emoji(severity: Severity) -> str:
    return SEVERITY_EMOJI.get(Severity(severity), "⚪")


def _bar(value: int, width: int = 20) -> str:
    return "█" * int(value / 100 * width)


class TableReportGenerator:
    """Print bloom situation reports to the console using Rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_summary(self, summary: BloomSummary):
        """Summary panel plus hotspot table."""
        self.console.print(
            f"\n[bold blue]🌊 BlueBloom: {summary.region}, week {summary.week}[/bold blue]\n"
        )

        messages = "\n".join(f"  • {m}" for m in summary.key_messages)
        stats_text = f"""
[bold]Overall Risk:[/bold] {get_severity_emoji(summary.overall_risk_level)} {summary.overall_risk_level.value}
[bold]Observations:[/bold] {summary.total_observations}
[bold]Hotspots:[/bold] {len(summary.hotspots)}  [bold]Safe Areas:[/bold] {len(summary.safe_areas)}

[bold]Key Messages:[/bold]
{messages}
        """
        self.console.print(Panel(stats_text, title="📈 Summary", border_style="blue"))

        if not summary.hotspots:
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Sev", justify="center", width=4)
        table.add_column("Area", width=32)
        table.add_column("Obs", justify="right", width=5)
        table.add_column("Trend", width=12)
        for h in summary.hotspots:
            table.add_row(get_severity_emoji(h.severity), h.area_name[:32], str(h.observation_count), h.trend.value)
        self.console.print(table)

    def print_gap_radar(self, gaps: List[SolutionGap]):
        self.console.print("\n[bold]🎯 Solution Gap Radar[/bold]\n")
        if not gaps:
            self.console.print("[dim]No significant gaps for this situation.[/dim]")
            return

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Theme", width=32)
        table.add_column("Need", justify="right", width=5)
        table.add_column("Cover", justify="right", width=6)
        table.add_column("Gap", justify="right", width=5)
        table.add_column("", width=22)
        for gap in gaps:
            table.add_row(
                gap.theme.title,
                str(gap.severity_score),
                f"{gap.coverage_score}%",
                str(gap.gap_score),
                _bar(gap.gap_score),
            )
        self.console.print(table)

    def print_clusters(self, clusters: List[CollaborationCluster]):
        self.console.print("\n[bold]🤝 Collaboration Clusters[/bold]\n")
        if not clusters:
            self.console.print("[dim]Not enough complementary startups for a cluster.[/dim]")
            return
        for cluster in clusters:
            members = ", ".join(s.name for s in cluster.startups)
            body = f"{cluster.summary}\n\n[bold]Members:[/bold] {members}\n[italic]{cluster.suitability_note}[/italic]"
            self.console.print(Panel(body, title=cluster.theme.title, border_style="cyan"))

    def print_fit(self, actor_name: str, fit: ProblemFitScore, pitch: Optional[PitchSnippet] = None):
        style = LABEL_STYLE.get(fit.label, "")
        drivers = "\n".join(f"  • {d}" for d in fit.drivers)
        body = (
            f"[{style}]{fit.score}/100 ({fit.label.value})[/{style}]\n\n"
            f"{fit.explanation}\n\n[bold]Drivers:[/bold]\n{drivers}"
        )
        self.console.print(Panel(body, title=f"🚀 Problem fit: {actor_name}", border_style="green"))

        if pitch is not None:
            for slide in (pitch.problem_slide, pitch.solution_slide):
                bullets = "\n".join(f"• {b}" for b in slide.bullets)
                self.console.print(Panel(bullets, title=slide.title, border_style="magenta"))

    def print_investor_view(self, investor_name: str, view: InvestorViewSummary):
        relevance = view.situation_relevance
        self.console.print(Panel(
            f"{relevance.score}/100 ({relevance.label.value})\n\n{relevance.explanation}",
            title=f"💼 Situation relevance: {investor_name}",
            border_style="yellow",
        ))

        table = Table(show_header=True, header_style="bold yellow")
        table.add_column("Startup", width=28)
        table.add_column("Score", justify="right", width=6)
        table.add_column("Label", width=7)
        table.add_column("Why", width=50)
        for item in view.top_deal_flow:
            table.add_row(item.startup.name[:28], str(item.fit_score), item.fit_label.value, "; ".join(item.reasons))
        self.console.print(table)

        for insight in view.portfolio_insights:
            self.console.print(f"  💡 {insight.text}")
        for theme in view.under_served_themes:
            self.console.print(f"  ⚠️  [bold]{theme.theme}[/bold]: {theme.reason}")
