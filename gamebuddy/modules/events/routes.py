from fastapi import APIRouter, Depends, Query
from gamebuddy.config import settings
from gamebuddy.modules.events.schemas import EventsResponse
from gamebuddy.modules.events.service import EventService
from gamebuddy.core.dependencies import get_current_user, get_user_supabase
from supabase import Client
from datetime import datetime
from typing import Dict, Optional

router = APIRouter(prefix="/events", tags=["events"])

MAX_POLL_TIMEOUT_SECONDS = 60


def get_event_service(supabase: Client = Depends(get_user_supabase)) -> EventService:
    return EventService(supabase)


@router.get("", response_model=EventsResponse)
async def poll_events(
    since: Optional[datetime] = Query(None, description="Cursor returned by the previous poll"),
    timeout: Optional[float] = Query(None, ge=0, le=MAX_POLL_TIMEOUT_SECONDS),
    user_data: Dict = Depends(get_current_user),
    service: EventService = Depends(get_event_service)
):
    """
    Long poll for new messages, conversation activity and new mutual matches.
    Pass the returned cursor as `since` on the next call.
    """
    if timeout is None:
        timeout = min(settings.event_poll_timeout_seconds, MAX_POLL_TIMEOUT_SECONDS)
    return await service.wait_for_events(user_data["id"], since, timeout)
