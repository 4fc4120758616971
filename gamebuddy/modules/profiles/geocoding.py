"""Reverse geocoding for the "use my location" button of the profile editor."""
import logging
from typing import Optional

import httpx

from gamebuddy.config import settings

logger = logging.getLogger(__name__)


def resolve_location_name(latitude: float, longitude: float) -> Optional[str]:
    """Human-readable place name for a coordinate, or None when the geocoder is unreachable."""
    try:
        response = httpx.get(
            settings.geocoding_url,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "localityLanguage": "en",
            },
            timeout=settings.geocoding_timeout_seconds,
        )
        response.raise_for_status()
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Error getting location name for ({latitude}, {longitude}): {e}")
        return None
    return data.get("locality") or data.get("city") or data.get("principalSubdivision") or "Unknown"
