"""Lazy Firebase Admin app used to verify ID tokens."""

import logging
import os

import firebase_admin
from django.conf import settings
from firebase_admin import auth, credentials

logger = logging.getLogger(__name__)

_app = None


def _load_credential():
    cred_path = getattr(settings, "FIREBASE_SERVICE_ACCOUNT_FILE", "")
    if not cred_path or not os.path.exists(cred_path):
        logger.warning("FIREBASE_SERVICE_ACCOUNT_FILE not found. Firebase token auth disabled.")
        return None
    return credentials.Certificate(cred_path)


def get_app():
    """
    Lazily initialise the Firebase Admin app.
    Returns None if credentials are missing or invalid, preventing crashes.
    """
    global _app
    if _app:
        return _app
    if firebase_admin._apps:
        _app = firebase_admin.get_app()
        return _app
    cred = _load_credential()
    if cred is None:
        return None
    try:
        _app = firebase_admin.initialize_app(cred)
    except (ValueError, OSError) as e:
        logger.error("Failed to initialize Firebase: %s", e)
        return None
    return _app


def verify_id_token(id_token: str):
    """Verify a Firebase ID token and return its decoded claims."""
    app = get_app()
    if app is None:
        raise ValueError("Firebase is not configured")
    return auth.verify_id_token(id_token, app=app)
