from fastapi import APIRouter, Depends
from gamebuddy.modules.matching.schemas import (
    CandidatesResponse, LikeRequest, LikeResponse, MatchesResponse, ResetMatchesResponse
)
from gamebuddy.modules.matching.service import MatchingService
from gamebuddy.core.dependencies import get_current_user, get_user_supabase, require_admin
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/matching", tags=["matching"])


def get_matching_service(supabase: Client = Depends(get_user_supabase)) -> MatchingService:
    return MatchingService(supabase)


@router.get("/candidates", response_model=CandidatesResponse)
async def get_candidates(
    user_data: Dict = Depends(get_current_user),
    service: MatchingService = Depends(get_matching_service)
):
    """Potential matches near the current player (swipe deck)"""
    return service.get_candidates(user_data["id"])


@router.post("/like", response_model=LikeResponse, status_code=201)
async def like_player(
    like_data: LikeRequest,
    user_data: Dict = Depends(get_current_user),
    service: MatchingService = Depends(get_matching_service)
):
    """Like a player; becomes a mutual match if they already liked back"""
    return service.like(user_data["id"], like_data)


@router.get("/matches", response_model=MatchesResponse)
async def list_matches(
    user_data: Dict = Depends(get_current_user),
    service: MatchingService = Depends(get_matching_service)
):
    """Mutual and pending matches of the current player"""
    return service.list_matches(user_data["id"])


@router.post("/reset", response_model=ResetMatchesResponse)
async def reset_matches(
    user_data: Dict = Depends(require_admin),
    service: MatchingService = Depends(get_matching_service)
):
    """Delete all matches, conversations and messages (admin, non-production)"""
    return service.reset_all_matches(user_data["id"])
