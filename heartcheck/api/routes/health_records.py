"""Health record history routes: dashboard, trend, export, bulk delete."""
import json
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from heartcheck.api.deps import get_current_user, get_record_store
from heartcheck.core.config import settings
from heartcheck.services.dashboard import build_dashboard
from heartcheck.services.export import build_export, export_filename
from heartcheck.services.health_record_store import HealthRecordStore
from heartcheck.services.trend import analyze_trend, describe_trend

router = APIRouter(prefix="/health_records", tags=["health_records"])

DELETE_CONFIRMATION = "DELETE"


@router.get("/")
def get_dashboard(
    limit: Optional[int] = Query(None, ge=1, le=500, description="How many records to show"),
    user=Depends(get_current_user),
    store: HealthRecordStore = Depends(get_record_store),
):
    """Newest records first, paged client-side in steps of RECORDS_PAGE_SIZE."""
    records = store.list_ordered_by_time_desc(user["uid"])
    return build_dashboard(records, limit or settings.RECORDS_PAGE_SIZE)


@router.get("/trend")
def get_trend(
    user=Depends(get_current_user),
    store: HealthRecordStore = Depends(get_record_store),
):
    records = store.list_ordered_by_time_desc(user["uid"], limit=2)
    trend = analyze_trend(records)
    if trend is None:
        return {"available": False}
    return {"available": True, **trend.to_dict(), "text": describe_trend(trend)}


@router.get("/export")
def export_records(
    user=Depends(get_current_user),
    store: HealthRecordStore = Depends(get_record_store),
):
    records = store.list_ordered_by_time_desc(user["uid"])
    document = build_export(records, user["uid"], user.get("email"))
    return Response(
        content=json.dumps(document, indent=2),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


@router.delete("/")
def delete_all_records(
    confirm: str = Query("", description='Must be "DELETE"'),
    user=Depends(get_current_user),
    store: HealthRecordStore = Depends(get_record_store),
):
    if confirm != DELETE_CONFIRMATION:
        raise HTTPException(status_code=400, detail="Deletion cancelled.")
    deleted = store.delete_all(user["uid"])
    return {"deleted": deleted, "message": f"Successfully deleted {deleted} records."}
