# app/modules/prefetch/router.py
import logging

from fastapi import APIRouter, Depends

from app.config.database import get_query_client
from app.core.access_control import AccessControlService, get_access_control
from app.core.auth.dependencies import require_company_and_user
from app.core.auth.schemas import SessionUser
from app.shared.database.query import QueryClient
from .schemas import PrefetchResponse
from .service import PrefetchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prefetch", tags=["Prefetch"])

@router.post("", response_model=PrefetchResponse)
async def prefetch_login_data(
    current_user: SessionUser = Depends(require_company_and_user),
    query_client: QueryClient = Depends(get_query_client),
    access_control: AccessControlService = Depends(get_access_control)
):
    """
    Prefetch de parceiros y productos tras el login

    - Parceiros de la empresa filtrados por el control de acceso
    - Productos vigentes de la empresa
    - Si una de las lecturas falla, esa lista vuelve vacía
    """
    service = PrefetchService(query_client, access_control)

    try:
        return await service.prefetch(current_user)
    except Exception as e:
        logger.exception(f"❌ Error en el prefetch de datos: {e}")
        return PrefetchResponse(success=False, error="Error al hacer prefetch")
