# ===========================================================================
# File: registro/api/v1/schemas/registro.py
# ===========================================================================
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


# Submission payload as it arrives from the public form; every field is optional.
class RegistroCreate(BaseModel):
    codigo: str = ""
    nombre: str = ""
    fecha_iso: Optional[str] = Field(default=None, alias="fechaISO")
    fecha_local: Optional[str] = Field(default=None, alias="fechaLocal")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("codigo", "nombre", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        if not value and not isinstance(value, str):
            return ""
        return str(value).strip()

    @field_validator("fecha_iso", "fecha_local", mode="before")
    @classmethod
    def coerce_timestamp(cls, value: Any) -> Optional[str]:
        if not value:
            return None
        return str(value)


class RegistroCreatedResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    error: str
