"""Pydantic models for persisted health records and derived trends.

Field aliases are the document keys stored in Firestore. They are the only
durable format of the service, so renaming one breaks every stored record.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from heartcheck.models.assessment import RiskLevel


class HealthRecord(BaseModel):
    # extra="allow": keys written by older clients survive a read and an export
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    # Metadata (assigned by the repository, not stored in the document body)
    id: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    # Client-side ISO 8601 time, the fallback when createdAt is missing
    timestamp: str

    # Demographics & body metrics
    name: Optional[str] = None
    age: int
    gender: str
    weight: float
    height_cm: float = Field(..., alias="heightCm")
    waist: float
    bmi: float

    # Lifestyle
    steps: int = 0
    junk_food: int = Field(0, alias="junkFood")
    exercise: float = 0
    alcohol: int = 0
    smoking: int = 0
    sleep: float = 0
    stress: int = 1
    family_history: int = Field(0, alias="familyHistory")

    # Conditions & labs
    high_bp: bool = Field(False, alias="highBp")
    diabetes: bool = False
    cholesterol: Optional[int] = None
    rbc: Optional[float] = None
    wbc: Optional[float] = None

    # Assessment
    score: int
    level: RiskLevel

    @field_validator("age", mode="before")
    @classmethod
    def floor_age(cls, v):
        # Older clients stored age from parseFloat, e.g. 40.5
        if isinstance(v, float) and math.isfinite(v):
            return math.floor(v)
        return v

    @property
    def recorded_at(self) -> datetime:
        """Server time when present, otherwise the client timestamp."""
        if self.created_at is not None:
            if self.created_at.tzinfo is None:
                return self.created_at.replace(tzinfo=timezone.utc)
            return self.created_at
        return datetime.fromisoformat(self.timestamp.replace("Z", "+00:00"))

    def to_document(self) -> Dict[str, Any]:
        """Document body to write; id and createdAt are set by the store."""
        return self.model_dump(
            by_alias=True, mode="json", exclude={"id", "created_at"}
        )

    @classmethod
    def from_document(cls, doc_id: str, data: Dict[str, Any]) -> "HealthRecord":
        return cls.model_validate({**data, "id": doc_id})


class TrendDirection(str, Enum):
    INCREASING = "Increasing"
    DECREASING = "Decreasing"
    STABLE = "Stable"


@dataclass(frozen=True)
class TrendResult:
    direction: TrendDirection
    magnitude: int

    def to_dict(self) -> dict:
        return {"direction": self.direction.value, "magnitude": self.magnitude}
