# src/crowdcred/normalize/schema.py
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class IncidentCategory(str, Enum):
    TRAFFIC = "Traffic"
    ACCIDENT = "Accident"
    ROAD_HAZARD = "Road Hazard"
    WATERLOGGING = "Waterlogging"
    POWER_OUTAGE = "Power Outage"
    FIRE = "Fire"
    CRIME = "Crime"
    PROTEST = "Protest"
    CONSTRUCTION = "Construction"
    OTHER = "Other"


class ReportStatus(str, Enum):
    VERIFIED = "verified"
    UNVERIFIED = "unverified"
    REJECTED = "rejected"


class ReportInput(BaseModel):
    """A freshly submitted incident report, as handed over by the submission handler."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="Free-text description")
    category: str = Field(..., description="Incident category label")
    location: Tuple[float, float] = Field(..., description="(longitude, latitude)")
    location_name: str = Field(..., description="Human-readable place label")
    photo_path: Optional[str] = Field(None, description="Path to the uploaded photo")
    user_id: str = Field(..., description="Opaque reporter identifier")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("description must not be empty")
        return v.strip()

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        longitude, latitude = v
        if not -180.0 <= longitude <= 180.0:
            raise ValueError(f"longitude out of range: {longitude}")
        if not -90.0 <= latitude <= 90.0:
            raise ValueError(f"latitude out of range: {latitude}")
        return v

    @field_validator("photo_path")
    @classmethod
    def blank_photo_path_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def longitude(self) -> float:
        return self.location[0]

    @property
    def latitude(self) -> float:
        return self.location[1]

    @property
    def has_photo(self) -> bool:
        return bool(self.photo_path)


class SignalResult(BaseModel):
    score: Union[int, float] = Field(ge=0, description="Bounded sub-score")
    reason: str = Field(..., description="One-line justification")
    evidence: Dict[str, Any] = Field(default_factory=dict)

    @property
    def has_source(self) -> bool:
        return bool(self.evidence.get("source"))


class ConfidenceResult(BaseModel):
    score: int = Field(ge=0, le=100, description="Overall confidence (0-100)")
    reason: str
    evidence: List[Dict[str, Any]] = Field(default_factory=list)
    breakdown: Dict[str, Any] = Field(default_factory=dict)


# Upstream result shapes, independent of any one search vendor.


class NewsArticle(BaseModel):
    title: str = ""
    snippet: str = ""
    source: str = ""
    date: str = ""
    link: str = ""


class WebResult(BaseModel):
    title: str = ""
    snippet: str = ""
    link: str = ""

    @property
    def content(self) -> str:
        return f"{self.title} {self.snippet}".lower()


class Place(BaseModel):
    title: str = ""
    rating: Optional[float] = None
    category: str = ""
