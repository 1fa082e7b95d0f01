"""Pydantic schemas and helpers for validating API and tool payloads."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from models.taxonomy import DRESS_CODES, validate_dress_code, validate_garment_type
from models.weather import Weather

DressCode = Literal["casual", "smart_casual", "business", "sport"]
NULLABLE_FIELDS = {"name", "image_uri"}


class WeatherPayload(BaseModel):
    """Normalized weather reading as accepted on the wire."""

    temp_c: float
    chance_of_rain: float = Field(ge=0.0, le=1.0)
    wind_kph: float = Field(ge=0.0)
    is_snow: bool = False

    def to_weather(self) -> Weather:
        return Weather(**self.model_dump())


class GarmentCreate(BaseModel):
    """Input contract for tagging a new garment."""

    id: Optional[str] = None
    type: str
    colors: List[str] = Field(min_length=1)
    warmth: int = Field(default=2, ge=1, le=5)
    water_resistant: bool = False
    dress_codes: List[str] = Field(min_length=1)
    name: Optional[str] = None
    image_uri: Optional[str] = None
    favorite: bool = False

    @field_validator("type")
    @classmethod
    def _validate_type(cls, value: str) -> str:
        return validate_garment_type(value)

    @field_validator("dress_codes")
    @classmethod
    def _validate_dress_codes(cls, values: List[str]) -> List[str]:
        return [validate_dress_code(value) for value in values]


class GarmentUpdate(BaseModel):
    """Partial update; unset fields are left untouched.

    Only ``name`` and ``image_uri`` may be cleared with an explicit null.
    """

    type: Optional[str] = None
    colors: Optional[List[str]] = Field(default=None, min_length=1)
    warmth: Optional[int] = Field(default=None, ge=1, le=5)
    water_resistant: Optional[bool] = None
    dress_codes: Optional[List[str]] = None
    name: Optional[str] = None
    image_uri: Optional[str] = None
    favorite: Optional[bool] = None
    is_dirty: Optional[bool] = None

    @field_validator("type")
    @classmethod
    def _validate_type(cls, value: Optional[str]) -> Optional[str]:
        return validate_garment_type(value) if value is not None else None

    @field_validator("dress_codes")
    @classmethod
    def _validate_dress_codes(cls, values: Optional[List[str]]) -> Optional[List[str]]:
        if values is None:
            return None
        if not values:
            raise ValueError(f"at least one dress code from {DRESS_CODES} is required")
        return [validate_dress_code(value) for value in values]

    @model_validator(mode="after")
    def _reject_explicit_nulls(self) -> "GarmentUpdate":
        nulled = sorted(
            key for key in self.model_fields_set if getattr(self, key) is None and key not in NULLABLE_FIELDS
        )
        if nulled:
            raise ValueError(f"fields cannot be null: {nulled}")
        return self


class SuggestionRequest(BaseModel):
    """Outfit request: inline weather, or coordinates to fetch it for."""

    dress_code: DressCode
    weather: Optional[WeatherPayload] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    days_no_repeat: Optional[float] = Field(default=None, ge=0)
    now: Optional[datetime] = None
    max_results: Optional[int] = Field(default=None, ge=1, le=20)

    @model_validator(mode="after")
    def _coordinates_come_in_pairs(self) -> "SuggestionRequest":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be supplied together")
        return self


class WearLogRequest(BaseModel):
    """Confirmation that the user wore an outfit."""

    garment_ids: List[str] = Field(min_length=1)
    dress_code: Optional[DressCode] = None
    weather: Optional[WeatherPayload] = None


class LaundryRequest(BaseModel):
    garment_ids: List[str] = Field(min_length=1)


__all__ = [
    "WeatherPayload",
    "GarmentCreate",
    "GarmentUpdate",
    "SuggestionRequest",
    "WearLogRequest",
    "LaundryRequest",
]
