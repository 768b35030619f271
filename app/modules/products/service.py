# app/modules/products/service.py
import logging
from typing import Optional

from fastapi import HTTPException

from app.config.settings import settings
from app.shared.database.query import QueryClient
from app.shared.pagination import Page, paginate
from .repository import ProductsRepository
from .schemas import StockResponse, PriceResponse, PriceTablesResponse

logger = logging.getLogger(__name__)

class ProductsService:
    """
    Listado paginado del lado del servidor, estoque y precios de productos
    """

    def __init__(self, query_client: QueryClient):
        self.repository = ProductsRepository(query_client)

    # ==================== LISTADO Y BÚSQUEDA ====================

    async def list_products(
        self,
        company_id: int,
        page: int = 1,
        page_size: int = settings.page_size,
        name: Optional[str] = None,
        code: Optional[str] = None
    ) -> Page:
        """
        Listado con filtros opcionales, cortado en la página pedida
        """
        products = self.repository.list_products(
            company_id,
            name=(name or "").strip() or None,
            code=(code or "").strip() or None
        )
        result = paginate(products, page, page_size)

        logger.info(
            f"📦 {result.total} productos para empresa {company_id} "
            f"(página {result.page}/{result.total_pages})"
        )
        return result

    async def search_products(
        self,
        company_id: int,
        term: str,
        page: int = 1,
        limit: int = settings.search_max_results
    ) -> Page:
        """
        Búsqueda por término único (descripción o código)
        """
        term = term.strip()
        if len(term) < settings.search_min_length:
            raise HTTPException(
                status_code=400,
                detail=f"El término debe tener al menos {settings.search_min_length} caracteres"
            )

        products = self.repository.search_products(company_id, term)
        return paginate(products, page, limit)

    # ==================== ESTOQUE Y PRECIO ====================

    async def get_stock(self, company_id: int, product_code: int) -> StockResponse:
        stocks = self.repository.get_stock(company_id, product_code)
        total_stock = sum(float(s.get("ESTOQUE") or 0) for s in stocks)

        return StockResponse(code=product_code, stocks=stocks, total_stock=total_stock)

    async def get_price(self, company_id: int, product_code: int, price_table: int = 0) -> PriceResponse:
        """
        Tabla 0 es el precio comercial del cadastro; otra tabla usa su excepción de precio
        """
        if price_table == 0:
            price = self.repository.get_list_price(company_id, product_code)
        else:
            price = self.repository.get_table_price(company_id, product_code, price_table)

        if price is None:
            logger.warning(f"⚠️ Sin precio para producto {product_code} en tabla {price_table}")

        return PriceResponse(code=product_code, price_table=price_table, price=float(price or 0))

    async def get_price_tables(self, company_id: int) -> PriceTablesResponse:
        return PriceTablesResponse(tables=self.repository.get_price_tables(company_id))
