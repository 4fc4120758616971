from supabase import Client
from gamebuddy.config import settings
from gamebuddy.modules.matching.schemas import (
    CandidateResponse, CandidatesResponse, LikeRequest, LikeResponse,
    MatchedUser, MatchResponse, MatchesResponse, ResetMatchesResponse
)
from gamebuddy.modules.profiles.service import ProfileService, fetch_sports_by_user, PUBLIC_PROFILE_COLUMNS
from typing import Any, Dict, List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def _first_row(data: Any) -> Any:
    if isinstance(data, list):
        return data[0] if data else None
    return data


def parse_mutual_match_result(data: Any) -> Dict[str, Any]:
    """Normalize handle_mutual_match output: a bare boolean, or a row with is_mutual/match_id/conversation_id"""
    row = _first_row(data)
    if isinstance(row, bool):
        return {"is_mutual": row, "match_id": None, "conversation_id": None}
    if isinstance(row, dict):
        return {
            "is_mutual": bool(row.get("is_mutual")),
            "match_id": row.get("match_id"),
            "conversation_id": row.get("conversation_id"),
        }
    return {"is_mutual": False, "match_id": None, "conversation_id": None}


class MatchingService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.profiles = ProfileService(supabase)

    def get_candidates(self, user_id: str) -> CandidatesResponse:
        """Swipe deck: distance-bounded candidates from the backend, each with their sports"""
        try:
            latitude, longitude = self.profiles.get_coordinates(user_id)
            result = self.supabase.rpc("get_potential_matches", {
                "user_latitude": latitude,
                "user_longitude": longitude,
                "max_distance_km": settings.discovery_max_distance_km,
                "limit_count": settings.discovery_limit
            }).execute()
            rows = result.data or []
            sports = fetch_sports_by_user(self.supabase, [row["id"] for row in rows])
            candidates = [
                CandidateResponse(
                    id=row["id"],
                    name=row.get("name") or "",
                    age=row.get("age"),
                    profile_photo_url=row.get("profile_photo_url"),
                    location=row.get("location"),
                    bio=row.get("bio"),
                    distance_km=row.get("distance_km", row.get("distance")),
                    sports=sports.get(row["id"], [])
                )
                for row in rows
            ]
            return CandidatesResponse(
                candidates=candidates,
                max_distance_km=settings.discovery_max_distance_km,
                has_location=latitude is not None
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching potential matches for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load potential matches")

    def like(self, user_id: str, like_data: LikeRequest) -> LikeResponse:
        """Swipe right. Mutual promotion and conversation creation happen inside handle_mutual_match."""
        target_id = like_data.target_user_id
        if target_id == user_id:
            raise HTTPException(status_code=400, detail="You cannot like your own profile")
        try:
            target = self.profiles.get_profile_row(target_id, "id, name")
            if not target:
                raise HTTPException(status_code=404, detail="Profile not found")

            if like_data.sport is not None:
                sport = like_data.sport.value
            else:
                target_sports = fetch_sports_by_user(self.supabase, [target_id]).get(target_id, [])
                sport = target_sports[0]["sport"] if target_sports else settings.default_sport

            result = self.supabase.rpc("handle_mutual_match", {
                "current_user_id": user_id,
                "target_user_id": target_id,
                "sport_name": sport
            }).execute()
            outcome = parse_mutual_match_result(result.data)

            if outcome["is_mutual"]:
                logger.info(f"Mutual match between {user_id} and {target_id} ({sport})")
                message = f"It's a match! You and {target['name']} can now message each other about {sport}."
            else:
                message = f"You liked {target['name']}. If they like you back, you'll be matched!"
            return LikeResponse(
                target_user_id=target_id,
                sport=sport,
                is_mutual=outcome["is_mutual"],
                match_id=outcome["match_id"],
                conversation_id=outcome["conversation_id"],
                message=message
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating match {user_id} -> {target_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to create match")

    def list_matches(self, user_id: str) -> MatchesResponse:
        """All matches the player is part of, newest first, split into mutual and pending"""
        try:
            result = self.supabase.table("matches")\
                .select(
                    f"*, user1:profiles!user1_id({PUBLIC_PROFILE_COLUMNS}), "
                    f"user2:profiles!user2_id({PUBLIC_PROFILE_COLUMNS})"
                )\
                .or_(f"user1_id.eq.{user_id},user2_id.eq.{user_id}")\
                .order("created_at", desc=True)\
                .execute()

            resolved: List[tuple] = []
            for match in result.data or []:
                if match.get("user1_id") == user_id:
                    other_id, other_user = match.get("user2_id"), match.get("user2")
                else:
                    other_id, other_user = match.get("user1_id"), match.get("user1")
                if not other_user and other_id:
                    # Embedded join came back empty; fetch the profile directly
                    other_user = self.profiles.get_profile_row(other_id, PUBLIC_PROFILE_COLUMNS)
                if not other_user:
                    logger.warning(f"Skipping match {match.get('id')} with unresolved other user")
                    continue
                resolved.append((match, other_user))

            sports = fetch_sports_by_user(self.supabase, list({other["id"] for _, other in resolved}))
            mutual: List[MatchResponse] = []
            pending: List[MatchResponse] = []
            for match, other_user in resolved:
                item = MatchResponse(
                    id=match["id"],
                    user1_id=match.get("user1_id"),
                    user2_id=match.get("user2_id"),
                    sport=match["sport"],
                    is_mutual=bool(match.get("is_mutual")),
                    created_at=match.get("created_at"),
                    other_user=MatchedUser(**other_user),
                    other_user_sports=sports.get(other_user["id"], [])
                )
                (mutual if item.is_mutual else pending).append(item)
            return MatchesResponse(mutual=mutual, pending=pending)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching matches for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load matches")

    def reset_all_matches(self, user_id: str) -> ResetMatchesResponse:
        """Wipe matches, conversations and messages through the atomic backend procedure"""
        if not settings.match_reset_enabled:
            raise HTTPException(status_code=403, detail="Match reset is disabled in this environment")
        try:
            result = self.supabase.rpc("reset_all_matches", {}).execute()
            counts: Optional[dict] = _first_row(result.data)
            if not isinstance(counts, dict):
                counts = {}
            logger.warning(f"All matches reset by {user_id}: {counts}")
            response = ResetMatchesResponse(
                message="All matches, conversations and messages have been deleted.",
                matches_deleted=counts.get("matches_deleted"),
                conversations_deleted=counts.get("conversations_deleted"),
                messages_deleted=counts.get("messages_deleted")
            )
            if None not in (response.matches_deleted, response.conversations_deleted, response.messages_deleted):
                response.message = (
                    f"Deleted {response.matches_deleted} matches, {response.conversations_deleted} conversations, "
                    f"and {response.messages_deleted} messages."
                )
            return response
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error resetting matches: {e}")
            raise HTTPException(status_code=500, detail="Failed to reset matches")
