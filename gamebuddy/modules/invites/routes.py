from fastapi import APIRouter, Depends
from gamebuddy.modules.invites.schemas import (
    InviteResponse, RedeemInviteRequest, RedeemInviteResponse, InviteStatsResponse
)
from gamebuddy.modules.invites.service import InviteService
from gamebuddy.core.dependencies import get_current_user, get_user_supabase
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/invites", tags=["invites"])


def get_invite_service(supabase: Client = Depends(get_user_supabase)) -> InviteService:
    return InviteService(supabase)


@router.post("", response_model=InviteResponse, status_code=201)
async def create_invite(
    user_data: Dict = Depends(get_current_user),
    service: InviteService = Depends(get_invite_service)
):
    """Create an invite code with share links"""
    return service.create_invite(user_data["id"])


@router.post("/redeem", response_model=RedeemInviteResponse)
async def redeem_invite(
    redeem_data: RedeemInviteRequest,
    user_data: Dict = Depends(get_current_user),
    service: InviteService = Depends(get_invite_service)
):
    """Redeem the code a new player arrived with (?ref=...)"""
    return service.redeem(user_data["id"], redeem_data.invite_code)


@router.get("/stats", response_model=InviteStatsResponse)
async def get_invite_stats(
    user_data: Dict = Depends(get_current_user),
    service: InviteService = Depends(get_invite_service)
):
    return service.get_stats(user_data["id"])
