# app/client/product_selector.py
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from .api_client import SalesApiClient
from .errors import ClientError, RequestTimedOut, UpstreamQueryFailed
from .search import DebouncedSearch, SearchOutcome
from .store import EntityKind, SnapshotCache

logger = logging.getLogger(__name__)


class ProductSelection(BaseModel):
    product: Dict[str, Any]
    price_table: int
    total_stock: float = 0
    price: float = 0


class ProductSelector:
    """
    Selector de productos para pedidos: tabla de precios obligatoria,
    búsqueda en la caché y carga de estoque/precio del elegido.
    """

    def __init__(self, client: SalesApiClient, cache: SnapshotCache, **search_options):
        self.client = client
        self.price_table: Optional[int] = None
        self.price_tables: List[Dict[str, Any]] = []
        self.search = DebouncedSearch(
            cache,
            EntityKind.products,
            precondition=self._require_price_table,
            **search_options
        )

    def _require_price_table(self) -> Optional[str]:
        if self.price_table is None:
            return "Seleccione una tabla de precios antes de buscar productos"
        return None

    def load_price_tables(self) -> List[Dict[str, Any]]:
        try:
            self.price_tables = self.client.get_price_tables()
            logger.info(f"✅ Tablas de precio cargadas: {len(self.price_tables)}")
        except ClientError as e:
            logger.error(f"❌ Error al cargar tablas de precio: {e.message}")
            self.price_tables = []
        return self.price_tables

    def select_price_table(self, table_number: int) -> None:
        self.price_table = table_number

    def on_input(self, text: str) -> None:
        self.search.on_input(text)

    def search_now(self, text: str) -> SearchOutcome:
        return self.search.evaluate(text)

    async def select(self, product: Dict[str, Any]) -> ProductSelection:
        """
        Estoque y precio del producto; cualquier falla impide la selección
        """
        code = product["CODPROD"]
        table = self.price_table or 0
        logger.info(f"🔍 Seleccionando producto {code} (tabla {table})")

        try:
            stock, price = await self.client.load_stock_and_price(code, table)
        except RequestTimedOut:
            logger.warning(f"⏱️ Tiempo excedido al cargar datos del producto {code}")
            raise
        except ClientError as e:
            logger.error(f"❌ Error al cargar datos del producto {code}: {e.message}")
            raise UpstreamQueryFailed(
                f"Error al cargar información del producto: {e.message}", e.status_code
            ) from e

        return ProductSelection(
            product=product,
            price_table=table,
            total_stock=float(stock.get("totalStock") or 0),
            price=float(price.get("price") or 0)
        )
