"""Pydantic model for one submission of the health form."""
from functools import cached_property
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Gender = Literal["Male", "Female", "Other"]


class HealthInput(BaseModel):
    """Validated inputs for one risk assessment.

    Built per submission by ``services.input_validation.parse_health_form``;
    the risk engine assumes every value here is already in range.
    """

    model_config = ConfigDict(frozen=True)

    # Identity
    name: Optional[str] = None
    gender: Gender = "Other"

    # Biometrics
    age: int = Field(..., ge=1, le=120)
    weight: float = Field(..., ge=1, le=500, description="kg")
    height_cm: float = Field(..., ge=100, le=250)
    waist: float = Field(..., ge=1, le=200, description="cm")

    # Lifestyle
    steps: int = Field(0, ge=0, description="Daily step count")
    junk_food: int = Field(0, ge=0, description="Junk food meals per week")
    exercise: float = Field(0, ge=0, description="Exercise hours per week")
    alcohol: int = Field(0, ge=0, description="Alcohol units per week")
    smoking: Literal[0, 1] = 0
    sleep: float = Field(0, ge=0, description="Hours per night")
    stress: Literal[1, 2, 3] = 1
    family_history: Literal[0, 1] = 0

    # Conditions
    high_bp: bool = False
    diabetes: bool = False

    # Optional labs (rbc/wbc are carried through but never scored)
    cholesterol: Optional[int] = Field(None, ge=0, description="mg/dL")
    rbc: Optional[float] = None
    wbc: Optional[float] = None

    @cached_property
    def bmi(self) -> float:
        height_m = self.height_cm / 100.0
        return self.weight / (height_m * height_m)
