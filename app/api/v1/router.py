# app/api/v1/router.py
from fastapi import APIRouter

from app.config.settings import settings
from app.modules.prefetch import prefetch_router
from app.modules.products import products_router
from app.modules.salespeople import salespeople_router
from app.modules.receivables import receivables_router


# Crear router principal de la API v1
api_router = APIRouter(prefix="/api/v1")

# ==================== MÓDULOS ====================

api_router.include_router(prefetch_router)
api_router.include_router(products_router)
api_router.include_router(salespeople_router)
api_router.include_router(receivables_router)


# ==================== ENDPOINTS RAÍZ ====================

@api_router.get("/")
async def api_root():
    """Root endpoint de la API"""
    return {
        "message": f"{settings.app_name} v1",
        "version": settings.version,
        "status": "active",
        "available_endpoints": {
            "prefetch": "/api/v1/prefetch",
            "products": "/api/v1/products",
            "price_tables": "/api/v1/price-tables",
            "salespeople": "/api/v1/salespeople",
            "receivables": "/api/v1/receivables"
        }
    }

@api_router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "modules": {
            "prefetch": {"status": "active", "features": ["Parceiros", "Productos", "all-settled"]},
            "products": {"status": "active", "features": ["Paginación", "Búsqueda", "Estoque", "Precio"]},
            "salespeople": {"status": "active", "features": ["Gerentes", "Vendedores", "Alta"]},
            "receivables": {"status": "active", "features": ["Títulos abiertos", "Control de acceso"]}
        }
    }
