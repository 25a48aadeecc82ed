"""
Admin dashboard authorization.

A request is authorized when it presents the configured shared secret (in the
``X-Admin-Secret`` header or the ``secret`` query parameter) or a bearer token
issued by admin login. Without a configured secret only bearer tokens work.
"""

from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Header, HTTPException, Query, status

from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.core.security import decode_admin_token
from tempo_gig_manager.server.core.config import settings

logger = get_logger(__name__)

# Principal name reported for shared-secret access
SHARED_SECRET_PRINCIPAL = "admin-secret"


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_admin(
    x_admin_secret: Optional[str] = Header(default=None),
    authorization: Optional[str] = Header(default=None),
    secret: Optional[str] = Query(default=None, description="Admin shared secret"),
) -> str:
    """FastAPI dependency returning the authorized admin principal.

    Raises:
        HTTPException: 401 when neither a valid secret nor a valid token is presented
    """
    config = settings.admin
    provided = x_admin_secret or secret
    if config.secret and provided and secrets.compare_digest(provided, config.secret):
        return SHARED_SECRET_PRINCIPAL

    token = _bearer_token(authorization)
    if token and config.token_secret:
        username = decode_admin_token(token, config.token_secret)
        if username:
            return username

    logger.warning("Rejected unauthorized admin request")
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
