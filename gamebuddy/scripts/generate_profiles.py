"""
Generate Profiles Script
Creates synthetic players for development and demo databases.

    python -m gamebuddy.scripts.generate_profiles sql   # insert_dummy_profiles.sql (with ids)
    python -m gamebuddy.scripts.generate_profiles csv   # profiles.csv + link_data.sql
    python -m gamebuddy.scripts.generate_profiles load  # insert directly (service role key)
"""

import argparse
import logging
import random
from pathlib import Path
from typing import List, Optional

from gamebuddy.database.supabase_client import SupabaseClient
from gamebuddy.seeding.generator import generate_profiles
from gamebuddy.seeding.loader import load_players
from gamebuddy.seeding.writers import (
    build_link_data_sql, build_with_ids_sql, write_profiles_csv, write_text
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate synthetic GameBuddy players")
    parser.add_argument("mode", choices=["sql", "csv", "load"], help="Output format")
    parser.add_argument("--count", type=int, default=300, help="Number of players")
    parser.add_argument("--output-dir", default="generated-data", help="Directory for generated files")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.count < 1:
        logger.error("--count must be at least 1")
        return 2
    rng = random.Random(args.seed)
    output_dir = Path(args.output_dir)

    if args.mode == "csv":
        players = generate_profiles(args.count, rng, with_ids=False)
        output_dir.mkdir(parents=True, exist_ok=True)
        write_profiles_csv(players, output_dir / "profiles.csv")
        write_text(build_link_data_sql(players), output_dir / "link_data.sql")
        logger.info("Import profiles.csv first, then run link_data.sql in the SQL editor")
        return 0

    players = generate_profiles(args.count, rng, with_ids=True)
    if args.mode == "sql":
        output_dir.mkdir(parents=True, exist_ok=True)
        write_text(build_with_ids_sql(players), output_dir / "insert_dummy_profiles.sql")
        return 0

    supabase = SupabaseClient.get_service_client()
    return 0 if load_players(supabase, players) else 1


if __name__ == "__main__":
    raise SystemExit(main())
