"""Result types produced by the risk-scoring core."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class RiskLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


@dataclass(frozen=True)
class RiskFactorResult:
    """Contribution of one risk factor.

    ``message`` is None exactly when the factor is in its safe band.
    """
    factor: str
    score: int
    message: Optional[str] = None


@dataclass(frozen=True)
class RiskAssessment:
    total_score: int
    level: RiskLevel
    precautions: Tuple[str, ...]
    bmi: float
    factors: Tuple[RiskFactorResult, ...] = ()

    def to_dict(self) -> dict:
        return {
            "totalScore": self.total_score,
            "level": self.level.value,
            "precautions": list(self.precautions),
            "bmi": round(self.bmi, 2),
            "factors": [
                {"factor": f.factor, "score": f.score, "message": f.message}
                for f in self.factors
            ],
        }
