from supabase import Client
from gamebuddy.modules.profiles.schemas import (
    ProfileSaveRequest, ProfileResponse, UserSportResponse,
    PreferencesResponse, MyProfileResponse, PublicProfileResponse
)
from typing import Dict, List, Optional
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

PUBLIC_PROFILE_COLUMNS = "id, name, age, profile_photo_url, location, bio"


def fetch_sports_by_user(supabase: Client, user_ids: List[str]) -> Dict[str, List[dict]]:
    """Sports for many players in one query, grouped by user_id (players without sports map to [])"""
    sports: Dict[str, List[dict]] = {user_id: [] for user_id in user_ids}
    if not user_ids:
        return sports
    result = supabase.table("user_sports")\
        .select("user_id, sport, skill_level")\
        .in_("user_id", list(user_ids))\
        .execute()
    for row in result.data or []:
        sports.setdefault(row["user_id"], []).append({
            "sport": row["sport"],
            "skill_level": row["skill_level"]
        })
    return sports


def validate_profile_save(data: ProfileSaveRequest) -> None:
    """Checks done before anything is written; mirrors the profile editor's form rules"""
    if not data.profile.name.strip():
        raise HTTPException(status_code=400, detail="Please enter your name")
    if not data.sports:
        raise HTTPException(status_code=400, detail="Please add at least one sport")
    if any(entry.sport is None or entry.skill_level is None for entry in data.sports):
        raise HTTPException(
            status_code=400,
            detail="Please ensure all sports have both sport type and skill level selected"
        )
    prefs = data.preferences
    if prefs.age_range_min is not None and prefs.age_range_max is not None \
            and prefs.age_range_min > prefs.age_range_max:
        raise HTTPException(status_code=400, detail="Minimum age cannot be greater than maximum age")


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_profile_row(self, user_id: str, columns: str = "*") -> Optional[dict]:
        result = self.supabase.table("profiles")\
            .select(columns)\
            .eq("id", user_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            return None
        return result.data

    def get_my_profile(self, user_id: str) -> MyProfileResponse:
        """Profile, sports and preferences for the editor; missing rows come back as defaults"""
        try:
            profile = self.get_profile_row(user_id)

            sports_result = self.supabase.table("user_sports")\
                .select("sport, skill_level")\
                .eq("user_id", user_id)\
                .execute()
            sports = sports_result.data or []

            prefs_result = self.supabase.table("user_preferences")\
                .select("*")\
                .eq("user_id", user_id)\
                .maybe_single()\
                .execute()
            prefs = prefs_result.data if prefs_result and prefs_result.data else {}

            return MyProfileResponse(
                profile=ProfileResponse(**profile) if profile else None,
                sports=[UserSportResponse(**s) for s in sports],
                preferences=PreferencesResponse(
                    preferred_days=prefs.get("preferred_days") or [],
                    preferred_time_slots=prefs.get("preferred_time_slots") or [],
                    frequency=prefs.get("frequency") or "flexible",
                    venue_types=prefs.get("venue_types") or [],
                    max_travel_distance=prefs.get("max_travel_distance") or 10,
                    age_range_min=prefs.get("age_range_min"),
                    age_range_max=prefs.get("age_range_max"),
                    gender_preference=prefs.get("gender_preference") or [],
                ),
                is_complete=bool(profile and profile.get("name")) and len(sports) > 0
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error loading profile data for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load profile data")

    def save_profile(self, user_id: str, data: ProfileSaveRequest) -> MyProfileResponse:
        """Save profile, replace sports and upsert preferences"""
        validate_profile_save(data)
        try:
            now = datetime.now(timezone.utc).isoformat()
            profile_data = data.profile.model_dump(mode="json")
            profile_data["name"] = data.profile.name.strip()
            if profile_data.get("profile_photo_url") is None:
                # Keep whatever photo is stored
                profile_data.pop("profile_photo_url")
            profile_result = self.supabase.table("profiles").upsert({
                "id": user_id,
                **profile_data,
                "updated_at": now
            }).execute()
            if not profile_result.data:
                raise HTTPException(status_code=500, detail="Failed to save profile")

            # Replace sports
            self.supabase.table("user_sports")\
                .delete()\
                .eq("user_id", user_id)\
                .execute()
            sports_to_insert = [
                {
                    "user_id": user_id,
                    "sport": entry.sport.value,
                    "skill_level": entry.skill_level.value
                }
                for entry in data.sports
            ]
            self.supabase.table("user_sports").insert(sports_to_insert).execute()

            # Update preferences if a row exists, otherwise insert
            prefs_data = data.preferences.model_dump(mode="json")
            prefs_data["updated_at"] = now
            existing = self.supabase.table("user_preferences")\
                .select("id")\
                .eq("user_id", user_id)\
                .execute()
            if existing.data:
                self.supabase.table("user_preferences")\
                    .update(prefs_data)\
                    .eq("user_id", user_id)\
                    .execute()
            else:
                self.supabase.table("user_preferences").insert({
                    "user_id": user_id,
                    **prefs_data
                }).execute()

            logger.info(f"Profile saved for {user_id} ({len(sports_to_insert)} sports)")
            return MyProfileResponse(
                profile=ProfileResponse(**profile_result.data[0]),
                sports=[UserSportResponse(**{k: s[k] for k in ("sport", "skill_level")}) for s in sports_to_insert],
                preferences=PreferencesResponse(**data.preferences.model_dump(mode="json")),
                is_complete=True
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error saving profile for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to save profile. Please try again.")

    def get_public_profile(self, user_id: str) -> PublicProfileResponse:
        """Card view of another player: public fields plus sports"""
        try:
            profile = self.get_profile_row(user_id, PUBLIC_PROFILE_COLUMNS)
            if not profile:
                raise HTTPException(status_code=404, detail="Profile not found")
            sports = fetch_sports_by_user(self.supabase, [user_id])
            return PublicProfileResponse(**profile, sports=sports.get(user_id, []))
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error loading profile {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load profile")

    def get_coordinates(self, user_id: str) -> tuple:
        """(latitude, longitude) of the player, each None when unset"""
        profile = self.get_profile_row(user_id, "latitude, longitude")
        if not profile or profile.get("latitude") is None or profile.get("longitude") is None:
            return None, None
        return float(profile["latitude"]), float(profile["longitude"])
