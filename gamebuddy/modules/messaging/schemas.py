from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from gamebuddy.modules.matching.schemas import MatchedUser


class MessageCreate(BaseModel):
    content: str


class MessageSender(BaseModel):
    id: str
    name: str
    profile_photo_url: Optional[str] = None


class MessageResponse(BaseModel):
    id: str
    conversation_id: str
    sender_id: str
    content: str
    created_at: Optional[datetime] = None
    sender: Optional[MessageSender] = None


class LastMessage(BaseModel):
    content: str
    sender_id: str
    created_at: Optional[datetime] = None


class ConversationResponse(BaseModel):
    id: str
    match_id: Optional[str] = None
    user1_id: str
    user2_id: str
    last_message_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    other_user: MatchedUser
    last_message: Optional[LastMessage] = None
    unread_count: int = 0


class ConversationListResponse(BaseModel):
    conversations: List[ConversationResponse]


class UnreadCountResponse(BaseModel):
    unread_count: int
