# app/modules/salespeople/__init__.py
"""
Módulo de Vendedores - consulta de gerentes/vendedores y alta

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Validación del apelido y alta
- repository.py: Acceso a AS_VENDEDORES
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as salespeople_router
from .service import SalespeopleService
from .repository import SalespeopleRepository

__all__ = [
    "salespeople_router",
    "SalespeopleService",
    "SalespeopleRepository"
]
