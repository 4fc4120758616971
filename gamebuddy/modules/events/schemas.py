from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class EventMessage(BaseModel):
    id: str
    conversation_id: str
    sender_id: str
    content: str
    created_at: Optional[datetime] = None


class EventConversation(BaseModel):
    id: str
    match_id: Optional[str] = None
    user1_id: str
    user2_id: str
    last_message_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class EventsResponse(BaseModel):
    new_messages: List[EventMessage] = Field(default_factory=list)
    updated_conversations: List[EventConversation] = Field(default_factory=list)
    new_conversations: List[EventConversation] = Field(default_factory=list)
    cursor: datetime

    @property
    def has_events(self) -> bool:
        return bool(self.new_messages or self.updated_conversations or self.new_conversations)
