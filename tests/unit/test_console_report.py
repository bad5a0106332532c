"""
Unit tests for the console report CLI and Rich table generator.
"""
import io

import pytest
from rich.console import Console

from src.core.exceptions import ActorNotFoundError
from src.core.models import Severity
from src.reporting.__main__ import build_parser, run
from src.reporting.generators.table_generator import TableReportGenerator, get_severity_emoji


@pytest.fixture
def generator():
    console = Console(file=io.StringIO(), width=160, record=True, color_system=None)
    return TableReportGenerator(console=console)


def output(generator: TableReportGenerator) -> str:
    return generator.console.export_text()


class TestTableReportGenerator:

    def test_severity_emoji(self):
        assert get_severity_emoji(Severity.HIGH) == "🔴"
        assert get_severity_emoji("none") == "🟢"

    def test_summary_without_hotspots(self, generator, make_summary):
        generator.print_summary(make_summary("none", region="Lake Vesijärvi", week=30))
        text = output(generator)

        assert "BlueBloom: Lake Vesijärvi, week 30" in text
        assert "Observations: 0" in text

    def test_empty_gap_radar_and_clusters(self, generator):
        generator.print_gap_radar([])
        generator.print_clusters([])
        text = output(generator)

        assert "No significant gaps for this situation." in text
        assert "Not enough complementary startups for a cluster." in text


class TestCli:

    def test_parser_requires_region_and_week(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--region", "Turku archipelago"])

    def test_full_report(self, generator, data_dir):
        args = build_parser().parse_args([
            "--region", "Turku archipelago", "--week", "28",
            "--startup", "s1", "--investor", "i1", "--data-dir", str(data_dir),
        ])

        assert run(args, generator) == 0
        text = output(generator)
        assert "Ruissalo Beach" in text
        assert "Solution Gap Radar" in text
        assert "Problem fit: AquaSense" in text
        assert "Cyanobacteria Risk in Turku archipelago, Week 28" in text
        assert "Situation relevance: Nordic Blue Ventures" in text

    def test_unknown_startup(self, generator, data_dir):
        args = build_parser().parse_args([
            "--region", "Turku archipelago", "--week", "28", "--startup", "s99", "--data-dir", str(data_dir),
        ])
        with pytest.raises(ActorNotFoundError):
            run(args, generator)
