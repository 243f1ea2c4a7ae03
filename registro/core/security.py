# ===========================================================================
# File: registro/core/security.py
# ===========================================================================
import base64
import binascii
import secrets
from typing import Optional

from fastapi import Header, Request

from registro.core.config import DEFAULT_ADMIN_PASS, Settings, logger
from registro.core.errors import AuthError

BASIC_PREFIX = "Basic "


def decode_basic_credentials(authorization: Optional[str]) -> Optional[tuple]:
    """Return ``(user, password)`` from a Basic header, or ``None`` if it can't be read."""
    if not authorization or not authorization.startswith(BASIC_PREFIX):
        return None
    encoded = authorization[len(BASIC_PREFIX):].strip()
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    user, separator, password = decoded.partition(":")
    if not separator:
        return None
    return user, password


def is_authorized(authorization: Optional[str], username: str, password: str) -> bool:
    credentials = decode_basic_credentials(authorization)
    if credentials is None:
        return False
    user, pw = credentials
    # both comparisons always run
    user_ok = secrets.compare_digest(user.encode("utf-8"), username.encode("utf-8"))
    pass_ok = secrets.compare_digest(pw.encode("utf-8"), password.encode("utf-8"))
    return user_ok and pass_ok


async def require_admin(request: Request, authorization: Optional[str] = Header(default=None)) -> None:
    config: Settings = request.app.state.settings
    if not is_authorized(authorization, config.ADMIN_USER, config.ADMIN_PASS):
        logger.warning(f"Rejected admin credentials from IP: {request.client.host if request.client else '-'}")
        raise AuthError()


def check_admin_credentials(config: Settings) -> None:
    if config.ADMIN_PASS != DEFAULT_ADMIN_PASS:
        return
    if config.REQUIRE_SECURE_ADMIN_PASS:
        raise RuntimeError("ADMIN_PASS is still the default placeholder; set a real password before starting.")
    logger.warning("ADMIN_PASS is still the default placeholder. Set ADMIN_USER and ADMIN_PASS to protect the records.")
