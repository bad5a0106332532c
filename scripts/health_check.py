import sys
import os
sys.path.append(os.getcwd())

import asyncio
import logging

from src.bloom.repository import BloomRepository
from src.bloom.service import BloomService
from src.core.catalog import catalog
from src.core.config import settings
from src.core.exceptions import BloomError

# Configure logging
logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def _pct(part: int, total: int) -> str:
    return f"{part / total * 100:.0f}%" if total else "n/a"


async def run_health_check() -> int:
    print("\nXXX BLUEBLOOM HEALTH CHECK XXX\n")
    problems = 0
    repo = BloomRepository()

    # --- 1. STATIC DATA ---
    print("--- STATIC DATA ---")
    print(f"Data directory: {settings.data_dir}")
    try:
        observations = repo.observations
        regions = repo.available_regions()
        print(f"Observations: {len(observations)}")
        print(f"Regions:      {len(regions)} ({', '.join(regions)})")
        for region in regions:
            weeks = repo.available_weeks(region)
            print(f"  - {region}: weeks {min(weeks)}-{max(weeks)}")
        if not observations:
            print("  [!] WARNING: No observations. Every summary will be empty.")
    except BloomError as e:
        problems += 1
        print(f"  [!] CRITICAL: {e}")

    try:
        actors = repo.actors
        startups = repo.startups()
        with_details = sum(1 for s in startups if s.startup_details)
        print(f"Actors:       {len(actors)} ({len(startups)} startups, {len(repo.investors())} investors)")
        print(f"  - Startups with details: {with_details} ({_pct(with_details, len(startups))})")
    except BloomError as e:
        problems += 1
        print(f"  [!] CRITICAL: {e}")

    print(f"Beaches:      {len(repo.beaches)}")

    # --- 2. SCORING CATALOG ---
    print("\n--- SCORING CATALOG ---")
    print(f"Catalog:        {catalog.name} v{catalog.version}")
    print(f"Problem themes: {len(catalog.problem_themes)}")
    print(f"Cluster themes: {len(catalog.cluster_themes)}")
    print(f"CitObs regions: {', '.join(sorted(catalog.citobs_regions))}")

    # --- 3. LIVE DATA ---
    print("\n--- CITOBS LIVE DATA ---")
    if not settings.citobs_enabled:
        print("Live lookups disabled")
    else:
        service = BloomService(repository=repo)
        region_key = next(iter(catalog.citobs_regions), None)
        weeks = repo.available_weeks()
        if region_key and weeks:
            result = await service.get_live_summary(region_key, weeks[0])
            print(f"Source for {region_key} week {weeks[0]}: {result.source}")
            if result.error:
                print(f"  [!] WARNING: {result.error}")

    print("\nXXX CHECK COMPLETE XXX\n")
    return problems


if __name__ == "__main__":
    sys.exit(1 if asyncio.run(run_health_check()) else 0)
