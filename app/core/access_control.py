# app/core/access_control.py
"""
Control de acceso a parceiros

La regla concreta pertenece al servicio de control de acceso; el resto del
sistema sólo usa validate_user_access y partners_where_clause.
"""
import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel

from app.core.auth.schemas import SessionUser

logger = logging.getLogger(__name__)


class AccessDeniedError(Exception):
    """El usuario no tiene acceso validado a la empresa"""


class UserAccess(BaseModel):
    user_id: int
    company_id: int
    is_admin: bool = False
    salesperson_code: Optional[int] = None


class AccessControlService:
    """
    Política por defecto:
    - administradores ven todos los parceiros de la empresa
    - vendedores ven los parceiros con su CODVEND
    - usuarios sin vendedor vinculado no tienen acceso
    """

    def validate_user_access(self, user: SessionUser) -> UserAccess:
        if user.is_admin:
            return UserAccess(user_id=user.id, company_id=user.company_id, is_admin=True)

        if not user.salesperson_code:
            raise AccessDeniedError(
                f"Usuario {user.id} sin vendedor vinculado en la empresa {user.company_id}"
            )

        return UserAccess(
            user_id=user.id,
            company_id=user.company_id,
            salesperson_code=user.salesperson_code
        )

    def partners_where_clause(self, access: UserAccess) -> Tuple[str, Dict[str, Any]]:
        """Fragmento SQL (con binds) que restringe AS_PARCEIROS al usuario"""
        if access.is_admin:
            return "", {}
        return "AND CODVEND = :codVendAcesso", {"codVendAcesso": access.salesperson_code}


def get_access_control() -> AccessControlService:
    """Access control dependency for FastAPI"""
    return AccessControlService()
