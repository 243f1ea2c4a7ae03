# ===========================================================================
# File: registro/api/v1/endpoints/registros.py
# ===========================================================================
import json
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from registro.api.deps import get_store, limiter, read_limited_body
from registro.api.v1.schemas.registro import ErrorResponse, RegistroCreatedResponse
from registro.core.config import logger, settings
from registro.core.security import require_admin
from registro.crud.crud_registro import CRUDRegistro
from registro.services.registro_service import registro_service

JSON_MEDIA_TYPE = "application/json; charset=utf-8"
DOWNLOAD_FILENAME = "registro_estudiantes.json"

router = APIRouter(prefix="/api/registros", tags=["Registros"])

SUBMIT_ERRORS = {code: {"model": ErrorResponse} for code in (400, 413, 429, 500)}
ADMIN_ERRORS = {code: {"model": ErrorResponse} for code in (401, 500)}


def _collection_response(records: List[Dict[str, Any]], download: bool = False) -> Response:
    headers = {}
    if download:
        headers["Content-Disposition"] = f'attachment; filename="{DOWNLOAD_FILENAME}"'
    payload = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
    return Response(content=payload, media_type=JSON_MEDIA_TYPE, headers=headers)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RegistroCreatedResponse, responses=SUBMIT_ERRORS)
@limiter.limit(settings.SUBMIT_RATE_LIMIT)
async def create_registro(request: Request, store: CRUDRegistro = Depends(get_store)):
    raw = await read_limited_body(request, request.app.state.settings.MAX_BODY_BYTES)
    payload = registro_service.parse_body(raw)
    await registro_service.create_registro(store, payload)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=RegistroCreatedResponse().model_dump(),
        media_type=JSON_MEDIA_TYPE,
    )


@router.get("", dependencies=[Depends(require_admin)], responses=ADMIN_ERRORS)
def list_registros(store: CRUDRegistro = Depends(get_store)):
    return _collection_response(registro_service.list_registros(store))


@router.get("/descargar", dependencies=[Depends(require_admin)], responses=ADMIN_ERRORS)
def download_registros(store: CRUDRegistro = Depends(get_store)):
    records = registro_service.list_registros(store)
    logger.info(f"Admin downloaded {len(records)} records")
    return _collection_response(records, download=True)
