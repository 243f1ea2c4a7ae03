# ===========================================================================
# File: registro/main.py
# ===========================================================================
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from registro import __version__
from registro.api.deps import limiter
from registro.api.v1.endpoints import pages, registros
from registro.core.config import Settings, logger, settings
from registro.core.errors import MethodNotAllowed, RegistroError, StaticAssetError
from registro.core.security import check_admin_credentials
from registro.crud.crud_registro import CRUDRegistro
from registro.services.static_service import StaticAssetResolver


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "-"


def _error_response(exc: RegistroError) -> Response:
    if isinstance(exc, StaticAssetError):
        return PlainTextResponse(exc.detail, status_code=exc.status_code, headers=exc.headers)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


def create_app(config: Optional[Settings] = None) -> FastAPI:
    config = config or settings

    # FastAPI app
    app = FastAPI(title="Registro de Estudiantes", version=__version__)
    app.state.settings = config
    app.state.store = CRUDRegistro(config.DATA_FILE)
    app.state.resolver = StaticAssetResolver(config.STATIC_DIR)

    limiter.enabled = config.RATE_LIMIT_ENABLED
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(registros.router)
    app.include_router(pages.router)

    @app.on_event("startup")
    async def startup_event():
        check_admin_credentials(config)
        app.state.store.load()
        logger.info(f"Servidor disponible en http://{config.HOST}:{config.PORT}")
        logger.info("Configura ADMIN_USER y ADMIN_PASS para proteger la descarga de registros.")

    @app.exception_handler(RegistroError)
    async def registro_exception_handler(request: Request, exc: RegistroError):
        if exc.status_code >= 500:
            logger.error(f"Server fault: {exc.detail} on {request.method} {request.url.path} from IP: {_client_host(request)}")
        return _error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return _error_response(MethodNotAllowed(headers=exc.headers))
        logger.error(f"HTTP Error: {exc.detail} from IP: {_client_host(request)}")
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error: {str(exc)} from IP: {_client_host(request)}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Error interno del servidor"})

    return app


app = create_app()
