from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from app.config.settings import settings
from app.core.auth.dependencies import parse_session_cookie
import time
import logging

logger = logging.getLogger(__name__)

def session_label(request: Request) -> str:
    """Usuario y empresa de la cookie, para el log de peticiones"""
    raw = request.cookies.get(settings.session_cookie_name)
    if not raw:
        return "anónimo"
    try:
        user = parse_session_cookie(raw)
    except (ValueError, ValidationError):
        return "sesión inválida"
    return f"usuario {user.id} / empresa {user.company_id}"

def setup_middleware(app: FastAPI):
    """Configure all middleware for the application"""

    # La cookie de sesión viaja con credenciales; sólo lectura y POST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=3600
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()

        response = await call_next(request)

        elapsed = time.perf_counter() - started
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            f"{'⚠️' if level == logging.WARNING else '📡'} {request.method} {request.url.path} "
            f"[{session_label(request)}] - {response.status_code} en {elapsed:.3f}s"
        )
        if elapsed > settings.request_timeout_seconds:
            logger.warning(
                f"⏱️ {request.url.path} superó el tiempo máximo del cliente ({settings.request_timeout_seconds}s)"
            )

        return response
