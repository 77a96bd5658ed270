"""Authentication-related routes.

Sign-up, sign-in (email/password or Google) and password reset happen in
the frontend with Firebase Authentication; the backend exposes token
verification status and account deletion.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from firebase_admin import auth

from heartcheck.api.deps import get_current_user, get_record_store
from heartcheck.services.health_record_store import HealthRecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

ACCOUNT_DELETE_CONFIRMATION = "DELETE MY ACCOUNT"


@router.get("/me")
def get_me(user=Depends(get_current_user)):
    return {"uid": user.get("uid"), "email": user.get("email")}


@router.delete("/account")
def delete_account(
    confirm: str = Query("", description='Must be "DELETE MY ACCOUNT"'),
    user=Depends(get_current_user),
    store: HealthRecordStore = Depends(get_record_store),
):
    """Delete every health record, then the Firebase Auth user."""
    if confirm != ACCOUNT_DELETE_CONFIRMATION:
        raise HTTPException(status_code=400, detail="Account deletion cancelled.")

    deleted = store.delete_all(user["uid"])
    try:
        auth.delete_user(user["uid"])
    except Exception as exc:
        logger.error("Deleting auth user %s failed: %s", user["uid"], exc)
        raise HTTPException(
            status_code=502,
            detail="Your records were deleted but the account could not be removed.",
        ) from exc

    return {"deleted_records": deleted, "message": "Your account and all data have been permanently deleted."}
