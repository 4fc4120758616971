from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Annotated
from datetime import datetime
from gamebuddy.core.enums import GenderType, SportType, SkillLevel, Frequency, TimeSlot, VenueType

DayOfWeek = Annotated[int, Field(ge=0, le=6)]


class SportEntry(BaseModel):
    # Both optional so an unfinished row reaches the service and gets a readable 400
    sport: Optional[SportType] = None
    skill_level: Optional[SkillLevel] = None

    @field_validator("sport", "skill_level", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PreferencesData(BaseModel):
    preferred_days: List[DayOfWeek] = Field(default_factory=list)
    preferred_time_slots: List[TimeSlot] = Field(default_factory=list)
    frequency: Frequency = Frequency.FLEXIBLE
    venue_types: List[VenueType] = Field(default_factory=list)
    max_travel_distance: int = Field(10, ge=1, le=500, description="Maximum travel distance in miles")
    age_range_min: Optional[int] = Field(None, ge=18, le=120)
    age_range_max: Optional[int] = Field(None, ge=18, le=120)
    gender_preference: List[GenderType] = Field(default_factory=list)


class ProfileData(BaseModel):
    name: str = ""
    age: Optional[int] = Field(None, ge=18, le=120)
    gender: Optional[GenderType] = None
    location: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=1000)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    profile_photo_url: Optional[str] = None

    @field_validator("gender", mode="before")
    @classmethod
    def blank_gender_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ProfileSaveRequest(BaseModel):
    profile: ProfileData
    sports: List[SportEntry] = Field(default_factory=list)
    preferences: PreferencesData = Field(default_factory=PreferencesData)


class UserSportResponse(BaseModel):
    sport: str
    skill_level: str


class ProfileResponse(BaseModel):
    id: str
    name: str
    age: Optional[int] = None
    gender: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    profile_photo_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PreferencesResponse(BaseModel):
    preferred_days: List[int] = Field(default_factory=list)
    preferred_time_slots: List[str] = Field(default_factory=list)
    frequency: str = "flexible"
    venue_types: List[str] = Field(default_factory=list)
    max_travel_distance: int = Field(10, description="Maximum travel distance in miles")
    age_range_min: Optional[int] = None
    age_range_max: Optional[int] = None
    gender_preference: List[str] = Field(default_factory=list)


class MyProfileResponse(BaseModel):
    profile: Optional[ProfileResponse] = None
    sports: List[UserSportResponse]
    preferences: PreferencesResponse
    is_complete: bool


class PublicProfileResponse(BaseModel):
    id: str
    name: str
    age: Optional[int] = None
    profile_photo_url: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    sports: List[UserSportResponse] = Field(default_factory=list)


class GeocodeResponse(BaseModel):
    latitude: float
    longitude: float
    location: Optional[str] = None
