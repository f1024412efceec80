from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

WetlandType = Literal["permanent", "seasonal", "artificial"]
WetlandStatus = Literal["healthy", "degraded", "critical"]


class Location(BaseModel):
    lat: float
    lng: float

    @field_validator("lat")
    @classmethod
    def validate_lat(cls, v):
        if not -90 <= v <= 90:
            raise ValueError("Please enter a valid latitude (-90 to 90)")
        return v

    @field_validator("lng")
    @classmethod
    def validate_lng(cls, v):
        if not -180 <= v <= 180:
            raise ValueError("Please enter a valid longitude (-180 to 180)")
        return v


def _split_sensors(v):
    if v is None:
        return v
    if isinstance(v, str):
        v = v.split(",")
    return [str(s).strip() for s in v if str(s).strip()]


def _require_text(v, message):
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError(message)
    return v


class WetlandCreate(BaseModel):
    """
    Wetland form payload.

    Example:
        {
            "name": "Nyabugogo Wetland",
            "description": "Major wetland system in Kigali.",
            "area": 156.5,
            "type": "permanent",
            "status": "degraded",
            "location": {"lat": -1.9705, "lng": 30.0644},
            "sensors": "temp_001, ph_001"
        }
    """
    name: str
    description: str
    area: float = Field(..., description="Area in hectares")
    type: WetlandType = "permanent"
    status: WetlandStatus = "healthy"
    location: Location
    sensors: List[str] = Field(default_factory=list, description="Sensor IDs, list or comma-separated")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v, "Wetland name is required")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return _require_text(v, "Description is required")

    @field_validator("area")
    @classmethod
    def validate_area(cls, v):
        if v is not None and not v > 0:
            raise ValueError("Please enter a valid area in hectares")
        return v

    @field_validator("sensors", mode="before")
    @classmethod
    def split_sensors(cls, v):
        return _split_sensors(v)


class WetlandUpdate(WetlandCreate):
    """Partial update: every field is optional, omitted fields are left untouched."""
    name: Optional[str] = None
    description: Optional[str] = None
    area: Optional[float] = None
    type: Optional[WetlandType] = None
    status: Optional[WetlandStatus] = None
    location: Optional[Location] = None
    sensors: Optional[List[str]] = None


class WetlandOut(BaseModel):
    id: int
    name: str
    location: Location
    area: float
    type: WetlandType
    status: WetlandStatus
    description: str
    sensors: List[str]
    last_updated: datetime

    @classmethod
    def from_model(cls, wetland) -> "WetlandOut":
        return cls(
            id=wetland.id,
            name=wetland.name,
            location=Location(lat=wetland.latitude, lng=wetland.longitude),
            area=wetland.area,
            type=wetland.type,
            status=wetland.status,
            description=wetland.description,
            sensors=list(wetland.sensors or []),
            last_updated=wetland.last_updated,
        )
