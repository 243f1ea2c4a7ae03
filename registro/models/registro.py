# ===========================================================================
# File: registro/models/registro.py
# ===========================================================================
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


def now_iso(moment: Optional[datetime] = None) -> str:
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_local(moment: Optional[datetime] = None) -> str:
    """Format a server-local time the way es-CO browsers do, e.g. ``1/3/2024, 9:05:09 a. m.``."""
    moment = (moment or datetime.now(timezone.utc)).astimezone()
    hour = moment.hour % 12 or 12
    suffix = "a. m." if moment.hour < 12 else "p. m."
    return f"{moment.day}/{moment.month}/{moment.year}, {hour}:{moment:%M:%S} {suffix}"


class RegistroEstudiante(BaseModel):
    codigo: str
    nombre: str
    fecha_iso: str = Field(default_factory=now_iso, alias="fechaISO")
    fecha_local: str = Field(default_factory=now_local, alias="fechaLocal")

    model_config = {
        "populate_by_name": True,
    }

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
