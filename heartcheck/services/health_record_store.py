"""
Firestore persistence for health records.

Records live under:
  artifacts/{app_id}/users/{uid}/healthRecords/{record_id}

Every Firestore failure is re-raised as PersistenceError so routes can
report it without losing an already computed result.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from firebase_admin import firestore
from pydantic import ValidationError

from heartcheck.core.config import settings
from heartcheck.core.errors import PersistenceError
from heartcheck.models.records import HealthRecord

logger = logging.getLogger(__name__)


def _to_datetime(ts):
    if ts is None:
        return None
    # Firestore Timestamp has .datetime in firebase_admin
    try:
        dt = ts.datetime
    except AttributeError:
        dt = ts
    if isinstance(dt, datetime):
        return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
    return None


class HealthRecordStore:
    def __init__(self, db, app_id: str | None = None):
        self.db = db
        self.app_id = app_id or settings.APP_ID

    def _records_ref(self, uid: str):
        return (
            self.db.collection("artifacts")
            .document(self.app_id)
            .collection("users")
            .document(uid)
            .collection("healthRecords")
        )

    def save(self, uid: str, record: HealthRecord) -> str:
        """Add one record; createdAt is the server time. Returns the new id."""
        payload: dict[str, Any] = {
            **record.to_document(),
            "createdAt": firestore.SERVER_TIMESTAMP,
        }
        try:
            _, doc_ref = self._records_ref(uid).add(payload)
        except Exception as exc:
            logger.warning("Saving health record for %s failed: %s", uid, exc)
            raise PersistenceError("save", exc) from exc

        logger.info("Saved health record %s for %s", doc_ref.id, uid)
        return doc_ref.id

    def list_ordered_by_time_desc(self, uid: str, limit: int | None = None) -> list[HealthRecord]:
        q = self._records_ref(uid).order_by(
            "createdAt", direction=firestore.Query.DESCENDING
        )
        if limit is not None:
            q = q.limit(limit)

        try:
            docs = list(q.stream())
        except Exception as exc:
            logger.warning("Listing health records for %s failed: %s", uid, exc)
            raise PersistenceError("list", exc) from exc

        out = []
        for d in docs:
            data = d.to_dict() or {}
            data["createdAt"] = _to_datetime(data.get("createdAt"))
            try:
                out.append(HealthRecord.from_document(d.id, data))
            except ValidationError as exc:
                # One malformed document must not hide the rest of the history
                logger.warning("Skipping unreadable health record %s for %s: %s", d.id, uid, exc)
        return out

    def delete_all(self, uid: str) -> int:
        """Delete every record of one user. Returns how many were deleted."""
        try:
            docs = list(self._records_ref(uid).stream())
            for d in docs:
                d.reference.delete()
        except Exception as exc:
            logger.error("Deleting health records for %s failed: %s", uid, exc)
            raise PersistenceError("delete", exc) from exc

        logger.info("Deleted %d health records for %s", len(docs), uid)
        return len(docs)
