"""Postgres enum types of the Supabase schema, mirrored for validation."""
import enum


class GenderType(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non_binary"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class SportType(str, enum.Enum):
    TENNIS = "tennis"
    PICKLEBALL = "pickleball"
    BASKETBALL = "basketball"
    BADMINTON = "badminton"
    SQUASH = "squash"
    RACQUETBALL = "racquetball"


class SkillLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class Frequency(str, enum.Enum):
    ONE_TWO_PER_WEEK = "1_2_per_week"
    THREE_FOUR_PER_WEEK = "3_4_per_week"
    DAILY = "daily"
    FLEXIBLE = "flexible"


class TimeSlot(str, enum.Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class VenueType(str, enum.Enum):
    PUBLIC_FREE = "public_free"
    PRIVATE_CLUB = "private_club"
    PAID_FACILITY = "paid_facility"
    HOME_COURT = "home_court"


# 0 = Sunday ... 6 = Saturday
DAYS_OF_WEEK = list(range(7))
