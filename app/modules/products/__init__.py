# app/modules/products/__init__.py
"""
Módulo de Productos - listado del servidor, estoque y precios

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Paginación del lado del servidor y reglas de precio
- repository.py: Consultas a la réplica
- schemas.py: Modelos Pydantic de respuesta
"""

from .router import router as products_router
from .service import ProductsService
from .repository import ProductsRepository

__all__ = [
    "products_router",
    "ProductsService",
    "ProductsRepository"
]
