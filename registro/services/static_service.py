# ===========================================================================
# File: registro/services/static_service.py
# ===========================================================================
import os
from pathlib import Path
from typing import NamedTuple, Union

from registro.core.config import logger
from registro.core.errors import ForbiddenError, NotFoundError, StaticReadError

INDEX_DOCUMENT = "index.html"
ADMIN_DOCUMENT = "admin.html"
DEFAULT_MEDIA_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".js": "application/javascript; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".json": "application/json; charset=utf-8",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".svg": "image/svg+xml",
}


class StaticAsset(NamedTuple):
    content: bytes
    media_type: str


def media_type_for(path: Path) -> str:
    return MIME_TYPES.get(path.suffix.lower(), DEFAULT_MEDIA_TYPE)


class StaticAssetResolver:
    """Maps URL paths onto files below a fixed root directory."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()

    def resolve(self, request_path: str) -> Path:
        relative = request_path.lstrip("/") or INDEX_DOCUMENT
        try:
            candidate = Path(os.path.normpath(self.root / relative)).resolve()
            inside = candidate.is_relative_to(self.root)
        except (OSError, ValueError, RuntimeError):
            inside = False
        if not inside:
            logger.warning(f"Blocked static path outside asset root: {request_path!r}")
            raise ForbiddenError()
        return candidate

    def read(self, request_path: str) -> StaticAsset:
        path = self.resolve(request_path)
        try:
            if not path.is_file():
                raise NotFoundError()
            content = path.read_bytes()
        except FileNotFoundError:
            raise NotFoundError()
        except (OSError, ValueError) as e:
            logger.error(f"Could not read static asset {path}: {e}", exc_info=True)
            raise StaticReadError()
        return StaticAsset(content, media_type_for(path))
