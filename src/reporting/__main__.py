"""CLI entry point for the console bloom report."""

import argparse
import logging
import sys

from src.bloom.repository import BloomRepository
from src.core.catalog import catalog
from src.core.config import settings
from src.core.exceptions import BloomError
from src.reporting.generators.table_generator import TableReportGenerator
from src.reporting.pitch import build_pitch_snippet
from src.scoring.clusters import build_clusters_for_situation
from src.scoring.fit_score import compute_problem_fit_score
from src.scoring.gap_radar import build_gap_radar
from src.scoring.investor_view import build_investor_view_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Print a BlueBloom situation report to the console',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summary, gap radar and clusters for a region/week
  python -m src.reporting --region "Turku archipelago" --week 28

  # Add a startup's fit score and pitch
  python -m src.reporting --region "Turku archipelago" --week 28 --startup s1

  # Add an investor view
  python -m src.reporting --region "Turku archipelago" --week 28 --investor i1
        """
    )

    parser.add_argument('--region', required=True, help='Region name as it appears in the observations')
    parser.add_argument('--week', type=int, required=True, help='ISO week number')
    parser.add_argument('--startup', help='Startup id for a fit score and pitch')
    parser.add_argument('--investor', help='Investor id for an investor view')
    parser.add_argument('--data-dir', help=f'Data directory (default: {settings.data_dir})')
    return parser


def run(args: argparse.Namespace, generator: TableReportGenerator = None) -> int:
    repo = BloomRepository(args.data_dir) if args.data_dir else BloomRepository()
    generator = generator or TableReportGenerator()

    summary = repo.get_bloom_summary(args.region, args.week)
    startups = repo.startups()

    generator.print_summary(summary)
    generator.print_gap_radar(build_gap_radar(summary, startups, catalog.problem_themes))
    generator.print_clusters(build_clusters_for_situation(summary, startups, catalog.cluster_themes))

    if args.startup:
        actor = repo.get_actor(args.startup)
        generator.print_fit(actor.name, compute_problem_fit_score(summary, actor), build_pitch_snippet(summary, actor))

    if args.investor:
        investor = repo.get_actor(args.investor)
        generator.print_investor_view(investor.name, build_investor_view_summary(summary, investor, repo.actors))

    return 0


def main():
    """Main CLI function."""
    args = build_parser().parse_args()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        sys.exit(run(args))
    except KeyboardInterrupt:
        print("\n\nReport cancelled.")
        sys.exit(1)
    except (BloomError, LookupError) as e:
        print(f"\n\nError: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
