# app/modules/prefetch/__init__.py
"""
Módulo de Prefetch - listas completas para la caché de sesión

Arquitectura:
- router.py: Endpoint FastAPI
- service.py: Unión all-settled de parceiros y productos
- repository.py: Consultas a la réplica
- schemas.py: Modelos Pydantic de respuesta
"""

from .router import router as prefetch_router
from .service import PrefetchService
from .repository import PrefetchRepository

__all__ = [
    "prefetch_router",
    "PrefetchService",
    "PrefetchRepository"
]
