"""
Firebase admin initialization and helpers.

The frontend authenticates users with Firebase Authentication (email and
password or Google sign-in) and passes Firebase ID tokens to the backend.
The backend verifies those tokens with the Firebase Admin SDK and keeps
each user's health records in Firestore.
"""

import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore

from heartcheck.core.config import settings

logger = logging.getLogger(__name__)

# Global references to avoid re-initialization
_firebase_app = None
db = None


def init_firebase():
    """
    Initialize Firebase Admin SDK if not already initialized.

    FIREBASE_CREDENTIALS comes from the environment or .env through
    Settings; the default is heartcheck/core/firebase_key.json.
    """

    global _firebase_app, db

    # Prevent re-initialization (important for Uvicorn reload)
    if firebase_admin._apps:
        if db is None:
            db = firestore.client()
        return

    cred_path = settings.FIREBASE_CREDENTIALS

    if not os.path.exists(cred_path):
        raise RuntimeError(
            f"Firebase credentials not found at: {cred_path}\n"
            "Set FIREBASE_CREDENTIALS env var or place firebase_key.json correctly."
        )

    cred = credentials.Certificate(cred_path)
    _firebase_app = firebase_admin.initialize_app(cred)

    db = firestore.client()

    logger.info("Firebase Admin initialized successfully.")


def get_db():
    """Return the Firestore client, or None when Firebase is not configured."""
    return db
