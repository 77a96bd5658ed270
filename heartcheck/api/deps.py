"""
API dependencies (Firebase auth verification, record store).

Provides FastAPI dependencies to verify Firebase ID tokens. Scoring works
without an identity; storing and reading history needs one.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from firebase_admin import auth

from heartcheck.core import firebase
from heartcheck.services.health_record_store import HealthRecordStore

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def _verify(id_token: str) -> dict:
    try:
        return auth.verify_id_token(id_token)
    except Exception as exc:
        raise HTTPException(
            status_code=401,
            detail="Invalid ID token",
        ) from exc


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[dict]:
    """Decoded token, or None when no usable token was sent.

    A stale or invalid token is treated as anonymous so scoring still works.
    """
    if credentials is None:
        return None
    try:
        return auth.verify_id_token(credentials.credentials)
    except Exception as exc:
        logger.info("Ignoring invalid ID token on optional-auth route: %s", exc)
        return None


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Verify Firebase ID token from Authorization header.

    Expects:
        Authorization: Bearer <id_token>
    """
    if credentials is None:
        raise HTTPException(status_code=401, detail="Please log in to continue")
    return _verify(credentials.credentials)


def get_record_store() -> HealthRecordStore:
    db = firebase.get_db()
    if db is None:
        raise HTTPException(status_code=503, detail="Firestore client not initialized")
    return HealthRecordStore(db)


def get_optional_record_store() -> Optional[HealthRecordStore]:
    db = firebase.get_db()
    return HealthRecordStore(db) if db is not None else None
