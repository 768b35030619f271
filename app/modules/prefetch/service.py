# app/modules/prefetch/service.py
import logging
from typing import List, Dict, Any

from app.core.access_control import AccessControlService, AccessDeniedError
from app.core.auth.schemas import SessionUser
from app.core.concurrency import gather_all_settled
from app.shared.database.query import QueryClient
from .repository import PrefetchRepository
from .schemas import PrefetchResponse

logger = logging.getLogger(__name__)

class PrefetchService:
    """
    Carga de parceiros y productos de la empresa en una sola llamada.

    Las dos lecturas corren en paralelo y se unen con all-settled: la falla
    de una rama se convierte en lista vacía para ese tipo.
    """

    def __init__(self, query_client: QueryClient, access_control: AccessControlService):
        self.repository = PrefetchRepository(query_client)
        self.access_control = access_control

    async def prefetch(self, user: SessionUser) -> PrefetchResponse:
        logger.info(f"📊 Buscando datos para empresa {user.company_id} y usuario {user.id}")

        partners_result, products_result = await gather_all_settled(
            lambda: self._load_partners(user),
            lambda: self._load_products(user.company_id)
        )

        partners = partners_result.value_or([])
        products = products_result.value_or([])

        if partners_result.fulfilled:
            logger.info(f"✅ Parceiros cargados: {len(partners)} registros")
        else:
            logger.error(
                "❌ Error al cargar parceiros: %s", partners_result.error,
                exc_info=partners_result.error
            )

        if products_result.fulfilled:
            logger.info(f"✅ Productos cargados: {len(products)} registros")
        else:
            logger.error(
                "❌ Error al cargar productos: %s", products_result.error,
                exc_info=products_result.error
            )

        logger.info(f"✅ Prefetch concluido - {len(partners)} parceiros, {len(products)} productos")

        return PrefetchResponse(
            success=True,
            partners_count=len(partners),
            products_count=len(products),
            partners_data=partners,
            products_data=products
        )

    def _load_partners(self, user: SessionUser) -> List[Dict[str, Any]]:
        try:
            access = self.access_control.validate_user_access(user)
        except AccessDeniedError as e:
            logger.warning(f"⚠️ Usuario sin acceso validado, devolviendo lista vacía: {e}")
            return []

        clause, binds = self.access_control.partners_where_clause(access)
        return self.repository.get_partners(user.company_id, clause, binds)

    def _load_products(self, company_id: int) -> List[Dict[str, Any]]:
        return self.repository.get_products(company_id)
