# app/modules/products/router.py
from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.config.database import get_query_client
from app.config.settings import settings
from app.core.auth.dependencies import require_company
from app.core.auth.schemas import SessionUser
from app.shared.database.query import QueryClient
from app.shared.pagination import Page
from .service import ProductsService
from .schemas import StockResponse, PriceResponse, PriceTablesResponse

router = APIRouter(tags=["Products"])

# ==================== LISTADO PAGINADO ====================

@router.get("/products", response_model=Page)
async def list_products(
    page: int = Query(1, ge=1, description="Página, empezando en 1"),
    page_size: int = Query(settings.page_size, ge=1, le=500, alias="pageSize"),
    name: Optional[str] = Query(None, alias="searchName", description="Filtro por descripción"),
    code: Optional[str] = Query(None, alias="searchCode", description="Filtro por código"),
    current_user: SessionUser = Depends(require_company),
    query_client: QueryClient = Depends(get_query_client)
):
    """
    Listado de productos de la empresa cortado en el servidor

    Misma forma que la tabla local: records, total, page, pageSize, totalPages
    """
    service = ProductsService(query_client)
    return await service.list_products(
        company_id=current_user.company_id,
        page=page,
        page_size=page_size,
        name=name,
        code=code
    )

@router.get("/products/search", response_model=Page)
async def search_products(
    q: str = Query(..., description="Término contra descripción o código"),
    limit: int = Query(settings.search_max_results, ge=1, le=500),
    page: int = Query(1, ge=1),
    current_user: SessionUser = Depends(require_company),
    query_client: QueryClient = Depends(get_query_client)
):
    """
    Búsqueda de productos por un único término
    """
    service = ProductsService(query_client)
    return await service.search_products(
        company_id=current_user.company_id,
        term=q,
        page=page,
        limit=limit
    )

# ==================== ESTOQUE Y PRECIO ====================

@router.get("/products/{code}/stock", response_model=StockResponse)
async def get_product_stock(
    code: int,
    current_user: SessionUser = Depends(require_company),
    query_client: QueryClient = Depends(get_query_client)
):
    """
    Estoque del producto por local y total
    """
    service = ProductsService(query_client)
    return await service.get_stock(current_user.company_id, code)

@router.get("/products/{code}/price", response_model=PriceResponse)
async def get_product_price(
    code: int,
    price_table: int = Query(0, ge=0, alias="priceTable", description="NUTAB; 0 es el precio del cadastro"),
    current_user: SessionUser = Depends(require_company),
    query_client: QueryClient = Depends(get_query_client)
):
    """
    Precio del producto en la tabla elegida
    """
    service = ProductsService(query_client)
    return await service.get_price(current_user.company_id, code, price_table)

@router.get("/price-tables", response_model=PriceTablesResponse)
async def get_price_tables(
    current_user: SessionUser = Depends(require_company),
    query_client: QueryClient = Depends(get_query_client)
):
    """
    Tablas de precios disponibles para el selector de productos
    """
    service = ProductsService(query_client)
    return await service.get_price_tables(current_user.company_id)
