"""
Firebase bearer-token check for the Roads API routes
"""
import os
from typing import Optional, Dict, Any
from functools import wraps

import firebase_admin
from firebase_admin import auth as fb_auth, credentials as fb_credentials
from flask import request, jsonify, g

from .. import config
from ..logger import get_logger

log = get_logger(__name__)

def _init_admin() -> bool:
    """Initialize firebase_admin once; False when it cannot be used."""
    try:
        firebase_admin.get_app()
        return True
    except ValueError:
        pass

    options = {"projectId": config.FIREBASE_PROJECT_ID} if config.FIREBASE_PROJECT_ID else None
    try:
        if config.SERVICE_ACCOUNT_FILE and os.path.exists(config.SERVICE_ACCOUNT_FILE):
            firebase_admin.initialize_app(fb_credentials.Certificate(config.SERVICE_ACCOUNT_FILE), options)
            log.info("[firebase_admin] initialized with service account")
        else:
            firebase_admin.initialize_app(options=options)
            log.info("[firebase_admin] initialized with ADC")
    except Exception as e:
        log.warning(f"[firebase_admin] not initialized: {e}")
        return False
    return True

def ensure_auth_ready(ready: bool) -> None:
    """Refuse to start when REQUIRE_AUTH is on without a usable firebase_admin."""
    if config.REQUIRE_AUTH and not ready:
        raise RuntimeError("REQUIRE_AUTH is true but firebase_admin could not be initialized")

ADMIN_READY = _init_admin()
ensure_auth_ready(ADMIN_READY)

def _bearer_token() -> str:
    hdr = request.headers.get("Authorization", "")
    if hdr.startswith("Bearer "):
        return hdr.split(" ", 1)[1].strip()
    return request.args.get("token", "")

def verify_token_optional() -> Optional[Dict[str, Any]]:
    """Decoded ID token when one is sent and valid, else None."""
    token = _bearer_token()
    if not token or not ADMIN_READY:
        return None
    try:
        return fb_auth.verify_id_token(token)
    except Exception as e:
        log.warning(f"[auth] token present but invalid: {e}")
        return None

def require_auth(fn):
    """Reject the request with 401 when REQUIRE_AUTH is on and no valid token was sent."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        decoded = verify_token_optional()
        if config.REQUIRE_AUTH and decoded is None:
            log.info(f"[auth] rejected {request.method} {request.path}")
            return jsonify({"error": "unauthorized"}), 401
        g.user = decoded
        return fn(*args, **kwargs)
    return wrapper
