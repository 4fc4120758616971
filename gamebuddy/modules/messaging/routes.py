from fastapi import APIRouter, Depends
from gamebuddy.modules.messaging.schemas import (
    ConversationListResponse, MessageCreate, MessageResponse, UnreadCountResponse
)
from gamebuddy.modules.messaging.service import MessagingService
from gamebuddy.core.dependencies import get_current_user, get_user_supabase
from supabase import Client
from typing import Dict, List

router = APIRouter(prefix="/conversations", tags=["messaging"])


def get_messaging_service(supabase: Client = Depends(get_user_supabase)) -> MessagingService:
    return MessagingService(supabase)


@router.get("", response_model=ConversationListResponse)
async def list_conversations(
    user_data: Dict = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service)
):
    """Conversations of the current player with last message and unread count"""
    return service.list_conversations(user_data["id"])


@router.get("/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(
    user_data: Dict = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service)
):
    """Badge count for the messages button"""
    return service.unread_count(user_data["id"])


@router.get("/{conversation_id}/messages", response_model=List[MessageResponse])
async def list_messages(
    conversation_id: str,
    user_data: Dict = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service)
):
    return service.list_messages(user_data, conversation_id)


@router.post("/{conversation_id}/messages", response_model=MessageResponse, status_code=201)
async def send_message(
    conversation_id: str,
    message_data: MessageCreate,
    user_data: Dict = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service)
):
    return service.send_message(user_data, conversation_id, message_data.content)


@router.post("/with/{other_user_id}/messages", response_model=MessageResponse, status_code=201)
async def send_quick_message(
    other_user_id: str,
    message_data: MessageCreate,
    user_data: Dict = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service)
):
    """Quick message to a match, resolving the conversation from the other player's id"""
    return service.send_quick_message(user_data, other_user_id, message_data.content)
