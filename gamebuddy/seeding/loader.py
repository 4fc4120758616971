"""Direct insert of generated players through the service-role client."""
import logging
from typing import Dict, List

from supabase import Client

logger = logging.getLogger(__name__)

PROFILE_BATCH_SIZE = 50
PREFERENCE_BATCH_SIZE = 50
SPORT_BATCH_SIZE = 100


def insert_in_batches(supabase: Client, table: str, rows: List[Dict], batch_size: int) -> bool:
    """Insert rows batch by batch; stop at the first batch that fails"""
    for start in range(0, len(rows), batch_size):
        batch = rows[start:start + batch_size]
        try:
            supabase.table(table).insert(batch).execute()
        except Exception as e:
            logger.error(f"Error inserting {table} batch {start + 1}-{start + len(batch)}: {e}")
            return False
        logger.info(f"Inserted {table} {start + 1} to {start + len(batch)}")
    return True


def load_players(supabase: Client, players: List[Dict]) -> bool:
    """Insert profiles, then preferences, then sports. Players must be generated with ids."""
    profiles = [p["profile"] for p in players]
    preferences = [p["preferences"] for p in players]
    sports = [s for p in players for s in p["sports"]]

    logger.info("Inserting profiles...")
    if not insert_in_batches(supabase, "profiles", profiles, PROFILE_BATCH_SIZE):
        return False
    logger.info("Inserting user preferences...")
    if not insert_in_batches(supabase, "user_preferences", preferences, PREFERENCE_BATCH_SIZE):
        return False
    logger.info("Inserting user sports...")
    if not insert_in_batches(supabase, "user_sports", sports, SPORT_BATCH_SIZE):
        return False

    logger.info(
        f"Inserted {len(profiles)} profiles, {len(preferences)} preferences, {len(sports)} sports entries"
    )
    return True
