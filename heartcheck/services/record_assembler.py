"""Builds the record persisted after a successful assessment."""
from datetime import datetime, timezone
from typing import Optional

from heartcheck.models.assessment import RiskAssessment
from heartcheck.models.health_data import HealthInput
from heartcheck.models.records import HealthRecord


def _iso_utc(ts: datetime) -> str:
    # Same shape as a browser's Date.toISOString(): millisecond precision, Z suffix
    ts = ts.astimezone(timezone.utc)
    return ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"


def assemble_record(
    health_input: HealthInput,
    assessment: RiskAssessment,
    now: Optional[datetime] = None,
) -> HealthRecord:
    """
    Merge validated inputs with the assessment.

    ``timestamp`` is the client-side fallback; the store adds the server
    ``createdAt`` and the document id. The simulated percentage is display
    only and is not part of the record.
    """
    now = now or datetime.now(timezone.utc)

    return HealthRecord(
        timestamp=_iso_utc(now),
        name=(health_input.name or None),
        age=health_input.age,
        gender=health_input.gender,
        weight=health_input.weight,
        height_cm=health_input.height_cm,
        waist=health_input.waist,
        bmi=round(assessment.bmi, 2),
        steps=health_input.steps,
        junk_food=health_input.junk_food,
        exercise=health_input.exercise,
        alcohol=health_input.alcohol,
        smoking=health_input.smoking,
        sleep=health_input.sleep,
        stress=health_input.stress,
        family_history=health_input.family_history,
        high_bp=health_input.high_bp,
        diabetes=health_input.diabetes,
        cholesterol=health_input.cholesterol,
        rbc=health_input.rbc,
        wbc=health_input.wbc,
        score=assessment.total_score,
        level=assessment.level,
    )
