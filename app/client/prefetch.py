# app/client/prefetch.py
import logging
from typing import Optional

from pydantic import BaseModel

from .api_client import SalesApiClient
from .errors import ClientError
from .store import EntityKind, SnapshotCache

logger = logging.getLogger(__name__)


class PrefetchSummary(BaseModel):
    partners: int = 0
    products: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PrefetchLoader:
    """
    Llena la caché de sesión después del login con parceiros y productos.

    Nunca lanza: una falla se registra y se informa con conteos en cero.
    """

    def __init__(self, client: SalesApiClient, cache: SnapshotCache):
        self.client = client
        self.cache = cache

    def load(self) -> PrefetchSummary:
        logger.info("🔄 Iniciando prefetch de parceiros y productos...")

        try:
            data = self.client.prefetch()
        except ClientError as e:
            logger.error(f"❌ Error en el prefetch de datos: {e.message}")
            return PrefetchSummary(error=e.message)

        if not data.get("success"):
            message = data.get("error") or "Error al hacer prefetch"
            logger.error(f"❌ Prefetch sin éxito: {message}")
            return PrefetchSummary(error=message)

        partners = data.get("partnersData")
        products = data.get("productsData")

        if isinstance(partners, list):
            self.cache.put(EntityKind.partners, partners)
        if isinstance(products, list):
            self.cache.put(EntityKind.products, products)

        summary = PrefetchSummary(
            partners=data.get("partnersCount") or 0,
            products=data.get("productsCount") or 0
        )
        logger.info(
            f"✅ Prefetch concluido - Parceiros: {summary.partners}, Productos: {summary.products}"
        )
        return summary

    def clear(self) -> None:
        """Forzar una carga nueva en el próximo prefetch"""
        self.cache.clear()
