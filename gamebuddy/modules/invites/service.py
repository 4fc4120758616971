from supabase import Client
from urllib.parse import quote
from gamebuddy.config import settings
from gamebuddy.config.rewards_config import (
    REWARD_PERKS, get_reward_tier, get_next_tier, get_tier_progress
)
from gamebuddy.modules.invites.schemas import (
    InviteResponse, RedeemInviteResponse, InviteStatsResponse, RewardTierResponse
)
from typing import Any, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

INVITE_SUBJECT = "Join me on GameBuddy!"
INVITE_MESSAGE = "Join me on GameBuddy! Find your perfect sports partner for tennis, " \
    "pickleball, basketball, and more. {link}"


def parse_invite_code(data: Any) -> Optional[str]:
    """create_invite_code may return the bare code or a row carrying it"""
    if isinstance(data, list):
        data = data[0] if data else None
    if isinstance(data, str):
        return data or None
    if isinstance(data, dict):
        return data.get("invite_code") or data.get("code")
    return None


def build_invite_links(code: str) -> InviteResponse:
    """Invite link plus ready-to-open share links for email and SMS"""
    link = f"{settings.public_app_url.rstrip('/')}/?ref={quote(code, safe='')}"
    message = INVITE_MESSAGE.format(link=link)
    return InviteResponse(
        invite_code=code,
        invite_link=link,
        share_message=message,
        email_link=f"mailto:?subject={quote(INVITE_SUBJECT)}&body={quote(message)}",
        sms_link=f"sms:?body={quote(message)}"
    )


class InviteService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_invite(self, user_id: str) -> InviteResponse:
        try:
            result = self.supabase.rpc("create_invite_code", {}).execute()
            code = parse_invite_code(result.data)
            if not code:
                raise HTTPException(status_code=500, detail="Failed to create invite code")
            logger.info(f"Invite code created by {user_id}")
            return build_invite_links(code)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating invite code for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to create invite code")

    def redeem(self, user_id: str, invite_code: str) -> RedeemInviteResponse:
        """Redeem a code; a rejected code is reported in the body, not as an error"""
        try:
            result = self.supabase.rpc("redeem_invite", {
                "invite_code_param": invite_code
            }).execute()
            data = result.data[0] if isinstance(result.data, list) and result.data else result.data
            if not isinstance(data, dict):
                raise HTTPException(status_code=500, detail="Failed to redeem invite code")
            success = bool(data.get("success"))
            if success:
                logger.info(f"Invite code redeemed by {user_id}")
            return RedeemInviteResponse(
                success=success,
                message=data.get("message") or (
                    "Invite code redeemed!" if success else "Invalid invite code"
                ),
                inviter_rewards=data.get("inviter_rewards")
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error redeeming invite code for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to redeem invite code")

    def get_stats(self, user_id: str) -> InviteStatsResponse:
        """Referral counters plus the reward tier they earn"""
        try:
            result = self.supabase.rpc("get_user_invite_stats", {
                "user_id_param": user_id
            }).execute()
            data = result.data[0] if isinstance(result.data, list) and result.data else result.data
            stats = data if isinstance(data, dict) else {}
        except Exception as e:
            logger.error(f"Error fetching invite stats for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load invite stats")

        points = int(stats.get("total_rewards") or 0)
        next_tier = get_next_tier(points)
        return InviteStatsResponse(
            total_invites=int(stats.get("total_invites") or 0),
            successful_invites=int(stats.get("successful_invites") or 0),
            total_rewards=points,
            tier=RewardTierResponse(**get_reward_tier(points)),
            next_tier=RewardTierResponse(**next_tier) if next_tier else None,
            next_tier_target=next_tier["min_points"] if next_tier else None,
            progress_percent=round(get_tier_progress(points), 1),
            perks=REWARD_PERKS
        )
