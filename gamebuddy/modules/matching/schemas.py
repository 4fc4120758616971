from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from gamebuddy.core.enums import SportType
from gamebuddy.modules.profiles.schemas import UserSportResponse


class CandidateResponse(BaseModel):
    id: str
    name: str
    age: Optional[int] = None
    profile_photo_url: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    distance_km: Optional[float] = None
    sports: List[UserSportResponse] = Field(default_factory=list)


class CandidatesResponse(BaseModel):
    candidates: List[CandidateResponse]
    max_distance_km: int
    has_location: bool


class LikeRequest(BaseModel):
    target_user_id: str
    sport: Optional[SportType] = None


class LikeResponse(BaseModel):
    target_user_id: str
    sport: str
    is_mutual: bool
    match_id: Optional[str] = None
    conversation_id: Optional[str] = None
    message: str


class MatchedUser(BaseModel):
    id: str
    name: str
    age: Optional[int] = None
    profile_photo_url: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None


class MatchResponse(BaseModel):
    id: str
    user1_id: Optional[str] = None
    user2_id: Optional[str] = None
    sport: str
    is_mutual: bool = False
    created_at: Optional[datetime] = None
    other_user: MatchedUser
    other_user_sports: List[UserSportResponse] = Field(default_factory=list)


class MatchesResponse(BaseModel):
    mutual: List[MatchResponse]
    pending: List[MatchResponse]


class ResetMatchesResponse(BaseModel):
    message: str
    matches_deleted: Optional[int] = None
    conversations_deleted: Optional[int] = None
    messages_deleted: Optional[int] = None
