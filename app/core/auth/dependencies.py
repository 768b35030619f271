import json
import logging
from urllib.parse import unquote

from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError

from app.config.settings import settings
from .schemas import SessionUser

logger = logging.getLogger(__name__)

def parse_session_cookie(raw: str) -> SessionUser:
    """Decodificar la cookie de sesión (JSON, opcionalmente url-encoded)"""
    data = json.loads(unquote(raw))
    if not isinstance(data, dict):
        raise ValueError("La cookie de sesión no es un objeto")
    if "ID_EMPRESA" not in data and "id_empresa" in data:
        data["ID_EMPRESA"] = data["id_empresa"]
    return SessionUser.model_validate(data)

async def get_current_user(request: Request) -> SessionUser:
    """Usuario autenticado a partir de la cookie de sesión"""
    raw = request.cookies.get(settings.session_cookie_name)
    if not raw:
        logger.warning("❌ Usuario no autenticado - cookie no encontrada")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Usuario no autenticado"
        )

    try:
        return parse_session_cookie(raw)
    except (ValueError, ValidationError) as e:
        logger.warning(f"❌ Cookie de sesión inválida: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sesión inválida"
        )

async def require_company(current_user: SessionUser = Depends(get_current_user)) -> SessionUser:
    """Usuario con empresa identificada"""
    if not current_user.company_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empresa no identificada"
        )
    return current_user

async def require_company_and_user(current_user: SessionUser = Depends(get_current_user)) -> SessionUser:
    """Usuario con empresa e id identificados"""
    if not current_user.company_id or not current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empresa o usuario no identificado"
        )
    return current_user
