# ===========================================================================
# File: registro/services/registro_service.py
# ===========================================================================
import json
import re
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from registro.api.v1.schemas.registro import RegistroCreate
from registro.core.config import logger
from registro.core.errors import ValidationError
from registro.crud.crud_registro import CRUDRegistro
from registro.models.registro import RegistroEstudiante, now_iso, now_local

CODIGO_RE = re.compile(r"[0-9]{4,}")
MIN_NOMBRE_LENGTH = 3
MALFORMED_DETAIL = "No se pudo procesar el registro"


class RegistroService:
    def parse_body(self, raw: bytes) -> Any:
        if not raw:
            return {}
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            logger.warning("Rejected submission with a body that is not JSON.")
            raise ValidationError(MALFORMED_DETAIL)

    def build_registro(self, payload: Any) -> RegistroEstudiante:
        """Normalize an untrusted submission into a record, or raise ``ValidationError``."""
        if not isinstance(payload, dict):
            logger.warning(f"Rejected submission with a {type(payload).__name__} payload.")
            raise ValidationError(MALFORMED_DETAIL)
        try:
            data = RegistroCreate.model_validate(payload)
        except PydanticValidationError:
            raise ValidationError(MALFORMED_DETAIL)

        if not CODIGO_RE.fullmatch(data.codigo) or len(data.nombre) < MIN_NOMBRE_LENGTH:
            logger.warning(f"Rejected submission codigo={data.codigo!r} nombre={data.nombre!r}")
            raise ValidationError("Datos inválidos")

        return RegistroEstudiante(
            codigo=data.codigo,
            nombre=data.nombre,
            fecha_iso=data.fecha_iso or now_iso(),
            fecha_local=data.fecha_local or now_local(),
        )

    async def create_registro(self, store: CRUDRegistro, payload: Any) -> RegistroEstudiante:
        registro = self.build_registro(payload)
        total = await run_in_threadpool(store.append, registro)
        logger.info(f"Stored check-in for codigo {registro.codigo} ({total} records)")
        return registro

    def list_registros(self, store: CRUDRegistro) -> List[Dict[str, Any]]:
        return store.load()


registro_service = RegistroService()
