"""JSON export of a user's health records."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

from heartcheck.models.records import HealthRecord


def export_record(record: HealthRecord) -> Dict[str, Any]:
    created = (
        record.created_at.astimezone(timezone.utc).isoformat()
        if record.created_at is not None
        else record.timestamp
    )
    return {"id": record.id, **record.to_document(), "createdAt": created}


def build_export(
    records: Sequence[HealthRecord],
    user_id: str,
    email: Optional[str],
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    return {
        "exportDate": now.isoformat(),
        "userEmail": email,
        "userId": user_id,
        "recordCount": len(records),
        "records": [export_record(r) for r in records],
    }


def export_filename(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"heart-health-data-{int(now.timestamp() * 1000)}.json"
