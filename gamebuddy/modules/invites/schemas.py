from pydantic import BaseModel, field_validator
from typing import Optional, List


class InviteResponse(BaseModel):
    invite_code: str
    invite_link: str
    share_message: str
    email_link: str
    sms_link: str


class RedeemInviteRequest(BaseModel):
    invite_code: str

    @field_validator("invite_code")
    @classmethod
    def strip_code(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Invite code is required")
        return value


class RedeemInviteResponse(BaseModel):
    success: bool
    message: str
    inviter_rewards: Optional[int] = None


class RewardTierResponse(BaseModel):
    name: str
    min_points: int
    description: str


class InviteStatsResponse(BaseModel):
    total_invites: int = 0
    successful_invites: int = 0
    total_rewards: int = 0
    tier: RewardTierResponse
    next_tier: Optional[RewardTierResponse] = None
    next_tier_target: Optional[int] = None
    progress_percent: float
    perks: List[str]
