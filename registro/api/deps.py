from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from registro.core.config import settings
from registro.core.errors import PayloadTooLarge
from registro.crud.crud_registro import CRUDRegistro
from registro.services.static_service import StaticAssetResolver


def rate_limit_key(request: Request) -> str:
    """Client IP, namespaced by the app instance so each app keeps its own counters."""
    return f"{id(request.app)}:{get_remote_address(request)}"


# Rate limiter. Shared by every app in the process: counters are split per app by
# rate_limit_key, but the enabled switch follows the most recently created app.
limiter = Limiter(key_func=rate_limit_key, enabled=settings.RATE_LIMIT_ENABLED)


def get_store(request: Request) -> CRUDRegistro:
    return request.app.state.store


def get_resolver(request: Request) -> StaticAssetResolver:
    return request.app.state.resolver


async def read_limited_body(request: Request, limit: int) -> bytes:
    """Accumulate the request body, giving up as soon as it grows past ``limit`` bytes."""
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise PayloadTooLarge()

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLarge()
    return bytes(body)
