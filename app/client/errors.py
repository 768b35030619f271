# app/client/errors.py
"""
Errores del cliente, uno por cada situación que la interfaz distingue
"""
from typing import Optional


class ClientError(Exception):
    """Base de los errores del cliente"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticationMissing(ClientError):
    """Sin sesión o sesión inválida (401): volver a iniciar sesión"""


class ValidationFailed(ClientError):
    """Falta un identificador o un campo obligatorio (400): corregible por el usuario"""


class AccessDenied(ClientError):
    """Entidad no vinculada al usuario (403): aviso, resultado vacío"""


class UpstreamQueryFailed(ClientError):
    """Falla del backend o de la base de datos"""


class RequestTimedOut(ClientError):
    """Petición abortada por tiempo: ofrecer reintentar"""


class CacheCorrupt(ClientError):
    """Snapshot guardado ilegible; se descarta y se vuelve a pedir"""
