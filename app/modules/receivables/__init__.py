# app/modules/receivables/__init__.py
"""
Módulo de Títulos a Recibir

Arquitectura:
- router.py: Endpoint FastAPI
- service.py: Filtros obligatorios y vínculo parceiro/usuario
- repository.py: Consulta a AS_FINANCEIRO
- schemas.py: Modelos Pydantic de respuesta
"""

from .router import router as receivables_router
from .service import ReceivablesService
from .repository import ReceivablesRepository

__all__ = [
    "receivables_router",
    "ReceivablesService",
    "ReceivablesRepository"
]
