"""
Core dependencies for route protection and participant checks
"""

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from gamebuddy.database.supabase_client import get_supabase, SupabaseClient
from gamebuddy.modules.auth.service import AuthService
from postgrest import SyncPostgrestClient
from supabase import Client
from typing import Dict, Any, Iterator
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_current_token(
    credentials: HTTPAuthorizationCredentials = Security(security)
) -> str:
    """Extract JWT token from Authorization header"""
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_current_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Resolve the current player from the JWT token"""
    return auth_service.get_current_user(token)


def get_user_supabase(
    token: str = Depends(get_current_token),
    user_data: dict = Depends(get_current_user)
) -> Iterator[SyncPostgrestClient]:
    """PostgREST session scoped to the caller's token; RLS policies and RPCs see auth.uid()."""
    with SupabaseClient.get_user_client(token) as client:
        yield client


def is_admin(user_data: dict) -> bool:
    """Check if the player is an admin from app_metadata"""
    # app_metadata is set server-side and cannot be modified by users
    app_metadata = user_data.get("app_metadata") or {}
    return app_metadata.get("type") == "admin"


def require_admin(user_data: dict = Depends(get_current_user)) -> dict:
    if not is_admin(user_data):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return user_data


def check_conversation_participant(conversation_id: str, user_data: dict, supabase: Client) -> Dict[str, Any]:
    """Return the conversation row if the player is one of its two participants"""
    user_id = user_data["id"]
    try:
        result = supabase.table("conversations")\
            .select("id, match_id, user1_id, user2_id, last_message_at, created_at")\
            .eq("id", conversation_id)\
            .maybe_single()\
            .execute()
    except Exception as e:
        logger.error(f"Error loading conversation {conversation_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load conversation"
        )
    if not result or not result.data:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Conversation not found"
        )
    conversation = result.data
    if user_id not in (conversation.get("user1_id"), conversation.get("user2_id")):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not a participant in this conversation"
        )
    return conversation
