"""
Composite risk scoring.

Sums the factor contributions from services.risk_factors, clamps the total
to [0, 60], classifies it and builds the ordered precaution list.

Rules:
- Score >= 40 is High, 20..39 is Moderate, anything lower is Low.
- Precautions follow evaluator declaration order.
- The steps advice is dropped whenever the exercise advice is present.
- An empty list gets a single positive message.
- The closing disclaimer is always last.
"""
import logging
from typing import Iterable, List, Sequence

from heartcheck.models.assessment import RiskAssessment, RiskFactorResult, RiskLevel
from heartcheck.models.health_data import HealthInput
from heartcheck.services import risk_factors
from heartcheck.services.logger import log_debug

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 60
HIGH_THRESHOLD = 40
MODERATE_THRESHOLD = 20

POSITIVE_MESSAGE = "You're doing great! Keep up the healthy habits."
DISCLAIMER = "Always consult a medical professional for personalized advice."


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def classify_level(score: int) -> RiskLevel:
    if score >= HIGH_THRESHOLD:
        return RiskLevel.HIGH
    if score >= MODERATE_THRESHOLD:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def suppress_redundant(results: Sequence[RiskFactorResult]) -> List[RiskFactorResult]:
    """Drop the steps message when the exercise message already fired.

    Only the message is removed; the steps contribution still counts.
    """
    exercise_advised = any(
        r.factor == risk_factors.EXERCISE and r.message for r in results
    )
    if not exercise_advised:
        return list(results)
    return [
        RiskFactorResult(r.factor, r.score, None) if r.factor == risk_factors.STEPS else r
        for r in results
    ]


def build_precautions(results: Iterable[RiskFactorResult]) -> List[str]:
    precautions: List[str] = []
    for result in suppress_redundant(list(results)):
        if result.message and result.message not in precautions:
            precautions.append(result.message)

    if not precautions:
        precautions.append(POSITIVE_MESSAGE)
    precautions.append(DISCLAIMER)
    return precautions


def aggregate(results: Sequence[RiskFactorResult], bmi: float) -> RiskAssessment:
    raw_total = sum(r.score for r in results)
    total = clamp_score(raw_total)
    level = classify_level(total)

    if raw_total != total:
        logger.debug("Risk score %s clamped to %s", raw_total, total)

    return RiskAssessment(
        total_score=total,
        level=level,
        precautions=tuple(build_precautions(results)),
        bmi=bmi,
        factors=tuple(results),
    )


def evaluate_risk(health_input: HealthInput) -> RiskAssessment:
    """Score one submission. Deterministic for a given input."""
    results = risk_factors.evaluate_factors(health_input)
    assessment = aggregate(results, health_input.bmi)

    log_debug("risk_evaluated", {
        "total_score": assessment.total_score,
        "level": assessment.level.value,
        "contributions": {r.factor: r.score for r in results if r.score},
    })
    return assessment


def risk_summary(assessment: RiskAssessment) -> str:
    return (
        f"Your calculated BMI is {assessment.bmi:.1f}. "
        f"Based on your inputs, your risk level is {assessment.level.value}."
    )
