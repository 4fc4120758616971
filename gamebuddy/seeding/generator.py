"""Synthetic player generator for local development data."""
import logging
import random
import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from gamebuddy.core.enums import (
    DAYS_OF_WEEK, Frequency, GenderType, SkillLevel, SportType, TimeSlot, VenueType
)
from gamebuddy.seeding.seed_data import (
    BIO_TEMPLATES, CITIES, FIRST_NAMES, LAST_NAMES, LOCATION_JITTER_DEGREES,
    MAX_AGE, MIN_AGE, PROFILE_PHOTOS, TRAVEL_DISTANCES
)

logger = logging.getLogger(__name__)

GENDERS = [g.value for g in GenderType]
SPORTS = [s.value for s in SportType]
SKILL_LEVELS = [s.value for s in SkillLevel]
FREQUENCIES = [f.value for f in Frequency]
TIME_SLOTS = [t.value for t in TimeSlot]
VENUE_TYPES = [v.value for v in VenueType]

PROGRESS_EVERY = 50


def _new_id(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def _sample(rng: random.Random, values: list, low: int, high: int) -> list:
    """Between low and high distinct values, in random order"""
    return rng.sample(values, min(rng.randint(low, high), len(values)))


def generate_profile(rng: random.Random, with_ids: bool = False, created_at: Optional[datetime] = None) -> Dict:
    """One synthetic player: {"profile": ..., "preferences": ..., "sports": [...]}"""
    now = (created_at or datetime.now(timezone.utc)).isoformat()
    gender = rng.choice(GENDERS)
    age = rng.randint(MIN_AGE, MAX_AGE)
    city = rng.choice(CITIES)

    first_names = FIRST_NAMES.get(gender, FIRST_NAMES["non_binary"])
    name = f"{rng.choice(first_names)} {rng.choice(LAST_NAMES)}"

    latitude = round(city["lat"] + rng.uniform(-LOCATION_JITTER_DEGREES, LOCATION_JITTER_DEGREES), 6)
    longitude = round(city["lng"] + rng.uniform(-LOCATION_JITTER_DEGREES, LOCATION_JITTER_DEGREES), 6)

    user_sports = _sample(rng, SPORTS, 1, 3)
    primary_sport = user_sports[0]
    bio = rng.choice(BIO_TEMPLATES).format(sport=primary_sport, years=rng.randint(1, 20))

    profile = {
        "name": name,
        "age": age,
        "gender": gender,
        "bio": bio,
        "location": city["name"],
        "latitude": latitude,
        "longitude": longitude,
        "profile_photo_url": rng.choice(PROFILE_PHOTOS),
        "created_at": now,
        "updated_at": now,
    }

    preferences = {
        "age_range_min": max(MIN_AGE, age - rng.randint(5, 15)),
        "age_range_max": min(MAX_AGE, age + rng.randint(5, 15)),
        "gender_preference": _sample(rng, GENDERS, 1, 2),
        "max_travel_distance": rng.choice(TRAVEL_DISTANCES),
        "frequency": rng.choice(FREQUENCIES),
        "preferred_days": _sample(rng, DAYS_OF_WEEK, 2, 5),
        "preferred_time_slots": _sample(rng, TIME_SLOTS, 1, 3),
        "venue_types": _sample(rng, VENUE_TYPES, 1, 3),
        "created_at": now,
        "updated_at": now,
    }

    sports = [
        {"sport": sport, "skill_level": rng.choice(SKILL_LEVELS), "created_at": now}
        for sport in user_sports
    ]

    if with_ids:
        profile = {"id": _new_id(rng), **profile}
        preferences = {"id": _new_id(rng), "user_id": profile["id"], **preferences}
        sports = [{"id": _new_id(rng), "user_id": profile["id"], **sport} for sport in sports]

    return {"profile": profile, "preferences": preferences, "sports": sports}


def generate_profiles(count: int, rng: Optional[random.Random] = None, with_ids: bool = False) -> List[Dict]:
    """
    Players with strictly increasing created_at, one millisecond apart, so
    (name, created_at) identifies each imported profile row.
    """
    rng = rng or random.Random()
    started_at = datetime.now(timezone.utc)
    players = []
    for i in range(count):
        created_at = started_at + timedelta(milliseconds=i)
        players.append(generate_profile(rng, with_ids=with_ids, created_at=created_at))
        if (i + 1) % PROGRESS_EVERY == 0:
            logger.info(f"Generated {i + 1} profiles...")
    logger.info(f"Generated {len(players)} profiles")
    return players
