from datetime import datetime, timezone

from heartcheck.models.assessment import RiskLevel
from heartcheck.models.health_data import HealthInput
from heartcheck.models.records import HealthRecord

HEALTHY = dict(
    gender="Female", age=25, weight=65, height_cm=170, waist=70,
    steps=8000, junk_food=1, exercise=5, alcohol=2, smoking=0,
    sleep=7.5, stress=1, family_history=0,
    high_bp=False, diabetes=False, cholesterol=None,
)

WORST_CASE = dict(
    gender="Male", age=50, weight=90, height_cm=170, waist=110,
    steps=3000, junk_food=5, exercise=1, alcohol=20, smoking=1,
    sleep=5, stress=3, family_history=1,
    high_bp=True, diabetes=True, cholesterol=260,
)


def make_input(base=HEALTHY, **overrides) -> HealthInput:
    return HealthInput(**{**base, **overrides})


def make_record(score, created_at=None, record_id=None, level=None) -> HealthRecord:
    if level is None:
        level = RiskLevel.HIGH if score >= 40 else RiskLevel.MODERATE if score >= 20 else RiskLevel.LOW
    return HealthRecord(
        id=record_id,
        created_at=created_at,
        timestamp="2024-03-01T10:00:00.000Z",
        age=40, gender="Male", weight=80, height_cm=180, waist=90, bmi=24.69,
        steps=6000, exercise=3, score=score, level=level,
    )


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)
