"""Direction of change between a user's two most recent scores."""
from typing import Optional, Sequence

from heartcheck.models.records import HealthRecord, TrendDirection, TrendResult

_TREND_TEXT = {
    TrendDirection.INCREASING: "Risk increasing",
    TrendDirection.DECREASING: "Risk decreasing",
    TrendDirection.STABLE: "Risk stable",
}


def analyze_trend(records: Sequence[HealthRecord]) -> Optional[TrendResult]:
    """
    Compare the two newest records.

    ``records`` must be ordered newest first (as returned by
    HealthRecordStore.list_ordered_by_time_desc). Returns None when there
    are fewer than two records: no trend is available yet.
    """
    if len(records) < 2:
        return None

    delta = records[0].score - records[1].score
    if delta > 0:
        direction = TrendDirection.INCREASING
    elif delta < 0:
        direction = TrendDirection.DECREASING
    else:
        direction = TrendDirection.STABLE

    return TrendResult(direction=direction, magnitude=abs(delta))


def describe_trend(trend: TrendResult) -> str:
    return f"{_TREND_TEXT[trend.direction]}: {trend.magnitude} points since last check"
