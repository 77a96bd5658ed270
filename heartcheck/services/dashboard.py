"""Dashboard view over a user's record history."""
from typing import Any, Dict, Optional, Sequence

from heartcheck.core.config import settings
from heartcheck.models.records import HealthRecord
from heartcheck.services.trend import analyze_trend, describe_trend


def record_summary(record: HealthRecord) -> Dict[str, Any]:
    """Fields shown on a dashboard card."""
    return {
        "id": record.id,
        "date": record.recorded_at.strftime("%b %d, %Y").replace(" 0", " "),
        "score": record.score,
        "level": record.level.value,
        "bmi": record.bmi,
        "steps": record.steps,
        "exercise": record.exercise,
        "smoking": "Yes" if record.smoking == 1 else "No",
    }


def build_dashboard(records: Sequence[HealthRecord], limit: Optional[int] = None) -> Dict[str, Any]:
    """
    First ``limit`` records (newest first), whether more exist, and the
    trend between the two newest when at least two exist.
    """
    limit = limit or settings.RECORDS_PAGE_SIZE
    trend = analyze_trend(records)

    return {
        "total": len(records),
        "limit": limit,
        "has_more": len(records) > limit,
        "items": [record_summary(r) for r in records[:limit]],
        "trend": (
            {**trend.to_dict(), "text": describe_trend(trend)}
            if trend is not None else None
        ),
    }
