from supabase import Client
from gamebuddy.core.dependencies import check_conversation_participant
from gamebuddy.modules.messaging.schemas import (
    ConversationResponse, ConversationListResponse, LastMessage,
    MessageResponse, UnreadCountResponse
)
from gamebuddy.modules.matching.schemas import MatchedUser
from gamebuddy.modules.profiles.service import PUBLIC_PROFILE_COLUMNS
from typing import Dict, List, Optional
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000

MESSAGE_COLUMNS = "id, conversation_id, sender_id, content, created_at, " \
    "sender:profiles!sender_id(id, name, profile_photo_url)"


def clean_message_content(content: str) -> str:
    """Trimmed message text; 400 when empty or too long"""
    text = (content or "").strip()
    if not text:
        raise HTTPException(status_code=400, detail="Message cannot be empty")
    if len(text) > MAX_MESSAGE_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Message is too long (max {MAX_MESSAGE_LENGTH} characters)"
        )
    return text


def other_participant(conversation: dict, user_id: str) -> Optional[str]:
    if conversation.get("user1_id") == user_id:
        return conversation.get("user2_id")
    return conversation.get("user1_id")


class MessagingService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _conversations_of(self, user_id: str) -> List[dict]:
        result = self.supabase.table("conversations")\
            .select("*")\
            .or_(f"user1_id.eq.{user_id},user2_id.eq.{user_id}")\
            .order("last_message_at", desc=True)\
            .execute()
        return result.data or []

    def _profiles_by_id(self, user_ids: List[str]) -> Dict[str, dict]:
        if not user_ids:
            return {}
        result = self.supabase.table("profiles")\
            .select(PUBLIC_PROFILE_COLUMNS)\
            .in_("id", user_ids)\
            .execute()
        return {row["id"]: row for row in result.data or []}

    def _last_message(self, conversation_id: str) -> Optional[dict]:
        result = self.supabase.table("messages")\
            .select("content, sender_id, created_at")\
            .eq("conversation_id", conversation_id)\
            .order("created_at", desc=True)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def _unread_in(self, conversation: dict, other_id: str) -> int:
        # Messages from the other player at or after the conversation's last activity
        query = self.supabase.table("messages")\
            .select("id", count="exact", head=True)\
            .eq("conversation_id", conversation["id"])\
            .eq("sender_id", other_id)
        if conversation.get("last_message_at"):
            query = query.gte("created_at", conversation["last_message_at"])
        result = query.execute()
        return result.count or 0

    def list_conversations(self, user_id: str) -> ConversationListResponse:
        """Conversation list, most recently active first"""
        try:
            conversations = self._conversations_of(user_id)
            other_ids = list({other_participant(c, user_id) for c in conversations} - {None})
            profiles = self._profiles_by_id(other_ids)

            items: List[ConversationResponse] = []
            for conversation in conversations:
                other_id = other_participant(conversation, user_id)
                other_user = profiles.get(other_id)
                if not other_user:
                    logger.warning(f"Skipping conversation {conversation.get('id')} with unresolved other user")
                    continue
                last_message = self._last_message(conversation["id"])
                items.append(ConversationResponse(
                    id=conversation["id"],
                    match_id=conversation.get("match_id"),
                    user1_id=conversation["user1_id"],
                    user2_id=conversation["user2_id"],
                    last_message_at=conversation.get("last_message_at"),
                    created_at=conversation.get("created_at"),
                    other_user=MatchedUser(**other_user),
                    last_message=LastMessage(**last_message) if last_message else None,
                    unread_count=self._unread_in(conversation, other_id)
                ))
            return ConversationListResponse(conversations=items)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching conversations for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load conversations")

    def unread_count(self, user_id: str) -> UnreadCountResponse:
        """Messages in any of the player's conversations that the player did not send"""
        try:
            result = self.supabase.table("conversations")\
                .select("id")\
                .or_(f"user1_id.eq.{user_id},user2_id.eq.{user_id}")\
                .execute()
            conversation_ids = [row["id"] for row in result.data or []]
            if not conversation_ids:
                return UnreadCountResponse(unread_count=0)

            count_result = self.supabase.table("messages")\
                .select("id", count="exact", head=True)\
                .in_("conversation_id", conversation_ids)\
                .neq("sender_id", user_id)\
                .execute()
            return UnreadCountResponse(unread_count=count_result.count or 0)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching unread count for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load unread count")

    def list_messages(self, user_data: dict, conversation_id: str) -> List[MessageResponse]:
        """Chat history, oldest first"""
        check_conversation_participant(conversation_id, user_data, self.supabase)
        try:
            result = self.supabase.table("messages")\
                .select(MESSAGE_COLUMNS)\
                .eq("conversation_id", conversation_id)\
                .order("created_at", desc=False)\
                .execute()
            return [MessageResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching messages for conversation {conversation_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load messages")

    def send_message(self, user_data: dict, conversation_id: str, content: str) -> MessageResponse:
        """Store a message and bump the conversation's last_message_at"""
        text = clean_message_content(content)
        check_conversation_participant(conversation_id, user_data, self.supabase)
        return self._insert_message(user_data["id"], conversation_id, text)

    def send_quick_message(self, user_data: dict, other_user_id: str, content: str) -> MessageResponse:
        """Message a match from the matches screen without opening the chat first"""
        text = clean_message_content(content)
        user_id = user_data["id"]
        try:
            result = self.supabase.table("conversations")\
                .select("id")\
                .or_(
                    f"and(user1_id.eq.{user_id},user2_id.eq.{other_user_id}),"
                    f"and(user1_id.eq.{other_user_id},user2_id.eq.{user_id})"
                )\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Error finding conversation between {user_id} and {other_user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to send message")
        if not result.data:
            raise HTTPException(
                status_code=404,
                detail="No conversation found. Please try again from the messages page."
            )
        return self._insert_message(user_id, result.data[0]["id"], text)

    def _insert_message(self, user_id: str, conversation_id: str, text: str) -> MessageResponse:
        try:
            result = self.supabase.table("messages").insert({
                "conversation_id": conversation_id,
                "sender_id": user_id,
                "content": text
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to send message")

            message = result.data[0]
            # Database time of the inserted row
            last_message_at = message.get("created_at") or datetime.now(timezone.utc).isoformat()
            self.supabase.table("conversations")\
                .update({"last_message_at": last_message_at})\
                .eq("id", conversation_id)\
                .execute()

            return MessageResponse(**message)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error sending message in conversation {conversation_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to send message")
