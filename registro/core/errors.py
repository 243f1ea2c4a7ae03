from typing import Dict, Optional


class RegistroError(Exception):
    """Base class for failures that end in a structured HTTP response."""

    status_code = 500
    detail = "Error interno del servidor"

    def __init__(self, detail: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        if detail is not None:
            self.detail = detail
        self.headers = headers
        super().__init__(self.detail)


class ValidationError(RegistroError):
    status_code = 400
    detail = "Datos inválidos"


class AuthError(RegistroError):
    status_code = 401
    detail = "No autorizado"

    def __init__(self, detail: Optional[str] = None, realm: str = "Registro privado"):
        super().__init__(detail, headers={"WWW-Authenticate": f'Basic realm="{realm}"'})


class MethodNotAllowed(RegistroError):
    status_code = 405
    detail = "Método no permitido"


class PayloadTooLarge(RegistroError):
    status_code = 413
    detail = "No se pudo procesar el registro"


class StorageFault(RegistroError):
    status_code = 500
    detail = "No se pudo acceder al registro"


# Static asset failures are answered in plain text
class StaticAssetError(RegistroError):
    pass


class ForbiddenError(StaticAssetError):
    status_code = 403
    detail = "Acceso denegado"


class NotFoundError(StaticAssetError):
    status_code = 404
    detail = "Archivo no encontrado"


class StaticReadError(StaticAssetError):
    status_code = 500
    detail = "Error del servidor"
