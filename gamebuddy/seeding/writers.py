"""
Output formats for generated players.

- profiles.csv: profile rows without ids, for the Supabase table importer
- link_data.sql: preferences and sports for profiles imported from the CSV,
  joined back to them by name and created_at
- insert_dummy_profiles.sql: everything with pre-generated ids in one
  transaction, constraints and RLS switched off while it runs
"""
import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name", "age", "gender", "bio", "location", "latitude", "longitude",
    "profile_photo_url", "created_at", "updated_at",
]

SEED_TABLES = ["profiles", "user_preferences", "user_sports"]

PREFERENCE_COLUMNS = [
    "age_range_min", "age_range_max", "gender_preference", "max_travel_distance", "frequency",
    "preferred_days", "preferred_time_slots", "venue_types", "created_at", "updated_at",
]

VERIFY_COUNTS_SQL = """-- Verify the import
SELECT
  (SELECT COUNT(*) FROM profiles) as profiles_count,
  (SELECT COUNT(*) FROM user_preferences) as preferences_count,
  (SELECT COUNT(*) FROM user_sports) as sports_count;
"""


def escape_sql(value) -> str:
    """SQL literal: NULL for None, numbers as-is, everything else single-quoted"""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return str(value)
    return "'" + str(value).replace("'", "''") + "'"


def sql_array(values: Iterable, enum_type: Optional[str] = None) -> str:
    """ARRAY[...] literal, cast to enum_type[] when given"""
    literal = "ARRAY[" + ",".join(escape_sql(v) for v in values) + "]"
    if enum_type:
        literal += f"::{enum_type}[]"
    return literal


def _timestamp(value) -> str:
    return f"{escape_sql(value)}::timestamptz"


def _enum(value: str, enum_type: str) -> str:
    return f"{escape_sql(value)}::{enum_type}"


def _preference_values(pref: Dict) -> List[str]:
    return [
        escape_sql(pref["age_range_min"]),
        escape_sql(pref["age_range_max"]),
        sql_array(pref["gender_preference"], "gender_type"),
        escape_sql(pref["max_travel_distance"]),
        _enum(pref["frequency"], "frequency"),
        sql_array(pref["preferred_days"]),
        sql_array(pref["preferred_time_slots"], "time_slot"),
        sql_array(pref["venue_types"], "venue_type"),
        _timestamp(pref["created_at"]),
        _timestamp(pref["updated_at"]),
    ]


def _values_block(rows: List[List[str]], indent: str = "  ") -> str:
    return ",\n".join(f"{indent}({', '.join(row)})" for row in rows)


def build_with_ids_sql(players: List[Dict]) -> str:
    """Single-transaction insert of players generated with ids"""
    profiles = [p["profile"] for p in players]
    preferences = [p["preferences"] for p in players]
    sports = [s for p in players for s in p["sports"]]

    profile_rows = [
        [
            escape_sql(p["id"]), escape_sql(p["name"]), escape_sql(p["age"]),
            _enum(p["gender"], "gender_type"), escape_sql(p["bio"]), escape_sql(p["location"]),
            escape_sql(p["latitude"]), escape_sql(p["longitude"]), escape_sql(p["profile_photo_url"]),
            escape_sql(p["created_at"]), escape_sql(p["updated_at"]),
        ]
        for p in profiles
    ]
    preference_rows = [
        [escape_sql(pref["id"]), escape_sql(pref["user_id"])] + _preference_values(pref)
        for pref in preferences
    ]
    sport_rows = [
        [
            escape_sql(s["id"]), escape_sql(s["user_id"]), _enum(s["sport"], "sport_type"),
            _enum(s["skill_level"], "skill_level"), _timestamp(s["created_at"]),
        ]
        for s in sports
    ]

    disable_rls = "\n".join(f"ALTER TABLE {t} DISABLE ROW LEVEL SECURITY;" for t in SEED_TABLES)
    enable_rls = "\n".join(f"ALTER TABLE {t} ENABLE ROW LEVEL SECURITY;" for t in SEED_TABLES)

    return f"""-- Insert {len(profiles)} dummy player profiles
-- Foreign key constraints and RLS are switched off for the duration of the transaction

BEGIN;

SET session_replication_role = replica;
{disable_rls}

-- Insert profiles
INSERT INTO profiles (id, name, age, gender, bio, location, latitude, longitude, profile_photo_url, created_at, updated_at) VALUES
{_values_block(profile_rows)};

-- Insert user preferences
INSERT INTO user_preferences (id, user_id, {', '.join(PREFERENCE_COLUMNS)}) VALUES
{_values_block(preference_rows)};

-- Insert user sports
INSERT INTO user_sports (id, user_id, sport, skill_level, created_at) VALUES
{_values_block(sport_rows)};

{enable_rls}
SET session_replication_role = DEFAULT;

COMMIT;

{VERIFY_COUNTS_SQL}
-- Sample some profiles
SELECT name, age, gender, location FROM profiles ORDER BY created_at LIMIT 10;
"""


def _profile_key(profile: Dict) -> List[str]:
    """Values that pick the imported row out of profiles: name and its exact created_at"""
    return [escape_sql(profile["name"]), _timestamp(profile["created_at"])]


def build_link_data_sql(players: List[Dict]) -> str:
    """Preferences and sports for profiles imported from profiles.csv (run after the import)"""
    preference_rows = [
        _profile_key(p["profile"]) + _preference_values(p["preferences"])
        for p in players
    ]
    sport_rows = [
        _profile_key(p["profile"]) + [
            _enum(s["sport"], "sport_type"),
            _enum(s["skill_level"], "skill_level"), _timestamp(s["created_at"]),
        ]
        for p in players
        for s in p["sports"]
    ]
    pref_select = ",\n".join(f"  pref.{c}" for c in PREFERENCE_COLUMNS)

    return f"""-- Link preferences and sports to imported profiles
-- Run this AFTER importing profiles.csv

-- Create user preferences
INSERT INTO user_preferences (user_id, {', '.join(PREFERENCE_COLUMNS)})
SELECT
  p.id,
{pref_select}
FROM profiles p
JOIN (
  VALUES
{_values_block(preference_rows, indent="    ")}
) pref(profile_name, profile_created_at, {', '.join(PREFERENCE_COLUMNS)})
ON p.name = pref.profile_name AND p.created_at = pref.profile_created_at;

-- Create user sports
INSERT INTO user_sports (user_id, sport, skill_level, created_at)
SELECT
  p.id,
  sports.sport,
  sports.skill_level,
  sports.created_at
FROM profiles p
JOIN (
  VALUES
{_values_block(sport_rows, indent="    ")}
) sports(profile_name, profile_created_at, sport, skill_level, created_at)
ON p.name = sports.profile_name AND p.created_at = sports.profile_created_at;

{VERIFY_COUNTS_SQL}"""


def write_profiles_csv(players: List[Dict], path: Path) -> Path:
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS, extrasaction="ignore", lineterminator="\n")
        writer.writeheader()
        for player in players:
            writer.writerow(player["profile"])
    logger.info(f"Wrote {len(players)} profiles to {path}")
    return path


def write_text(content: str, path: Path) -> Path:
    path.write_text(content, encoding="utf-8")
    logger.info(f"Wrote {path}")
    return path
