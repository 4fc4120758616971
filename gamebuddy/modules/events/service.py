import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import HTTPException
from supabase import Client

from gamebuddy.config import settings
from gamebuddy.modules.events.schemas import EventConversation, EventMessage, EventsResponse

logger = logging.getLogger(__name__)


def parse_timestamp(value) -> Optional[datetime]:
    """Timezone-aware datetime from a row value; naive values are taken as UTC"""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class EventService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def poll(self, user_id: str, since: datetime) -> EventsResponse:
        """Single check for changes after `since`"""
        since = parse_timestamp(since)
        try:
            result = self.supabase.table("conversations")\
                .select("id, match_id, user1_id, user2_id, last_message_at, created_at")\
                .or_(f"user1_id.eq.{user_id},user2_id.eq.{user_id}")\
                .execute()
            conversations = result.data or []
            if not conversations:
                return EventsResponse(cursor=since)

            messages_result = self.supabase.table("messages")\
                .select("id, conversation_id, sender_id, content, created_at")\
                .in_("conversation_id", [c["id"] for c in conversations])\
                .gt("created_at", since.isoformat())\
                .order("created_at", desc=False)\
                .execute()
            messages = messages_result.data or []
        except Exception as e:
            logger.error(f"Error polling events for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load updates")

        # Cursor only moves to database-written created_at values
        cursor = since
        new_messages = []
        active_conversations = set()
        for row in messages:
            created_at = parse_timestamp(row.get("created_at"))
            # Guard against backends that ignore the gt filter
            if created_at is not None and created_at <= since:
                continue
            new_messages.append(EventMessage(**row))
            active_conversations.add(row.get("conversation_id"))
            if created_at is not None:
                cursor = max(cursor, created_at)

        updated, created = [], []
        for row in conversations:
            created_at = parse_timestamp(row.get("created_at"))
            if created_at is not None and created_at > since:
                created.append(EventConversation(**row))
                cursor = max(cursor, created_at)
            elif row["id"] in active_conversations:
                updated.append(EventConversation(**row))

        return EventsResponse(
            new_messages=new_messages,
            updated_conversations=updated,
            new_conversations=created,
            cursor=cursor
        )

    async def wait_for_events(self, user_id: str, since: Optional[datetime], timeout: float) -> EventsResponse:
        """Re-poll until something changed or the timeout runs out; timeout 0 checks once"""
        if since is None:
            # First call only establishes the cursor
            return EventsResponse(cursor=datetime.now(timezone.utc))

        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while True:
            events = await asyncio.to_thread(self.poll, user_id, since)
            remaining = deadline - loop.time()
            if events.has_events or remaining <= 0:
                return events
            await asyncio.sleep(min(settings.event_poll_interval_seconds, remaining))
