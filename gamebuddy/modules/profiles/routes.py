import asyncio
from fastapi import APIRouter, Depends, Query
from gamebuddy.modules.profiles.schemas import (
    ProfileSaveRequest, MyProfileResponse, PublicProfileResponse, GeocodeResponse
)
from gamebuddy.modules.profiles.service import ProfileService
from gamebuddy.modules.profiles.geocoding import resolve_location_name
from gamebuddy.core.dependencies import get_current_user, get_user_supabase
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(supabase: Client = Depends(get_user_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("/me", response_model=MyProfileResponse)
async def get_my_profile(
    user_data: Dict = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    """Profile, sports and preferences of the current player"""
    return service.get_my_profile(user_data["id"])


@router.put("/me", response_model=MyProfileResponse)
async def save_my_profile(
    profile_data: ProfileSaveRequest,
    user_data: Dict = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    """Save profile, sports and preferences (profile setup and profile editor)"""
    return service.save_profile(user_data["id"], profile_data)


@router.get("/geocode", response_model=GeocodeResponse)
async def geocode(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    user_data: Dict = Depends(get_current_user)
):
    """Resolve a device position to a location name; location is null if the geocoder fails"""
    location = await asyncio.to_thread(resolve_location_name, latitude, longitude)
    return GeocodeResponse(
        latitude=latitude,
        longitude=longitude,
        location=location
    )


@router.get("/{user_id}", response_model=PublicProfileResponse)
async def get_profile(
    user_id: str,
    user_data: Dict = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    """Public card of a player"""
    return service.get_public_profile(user_id)
