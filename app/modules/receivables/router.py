# app/modules/receivables/router.py
from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.config.database import get_query_client
from app.core.access_control import AccessControlService, get_access_control
from app.core.auth.dependencies import require_company
from app.core.auth.schemas import SessionUser
from app.shared.database.query import QueryClient
from .service import ReceivablesService
from .schemas import ReceivablesResponse

router = APIRouter(prefix="/receivables", tags=["Receivables"])

@router.get("", response_model=ReceivablesResponse)
async def search_receivables(
    partner: Optional[str] = Query(None, description="Nombre del parceiro"),
    title_number: Optional[str] = Query(None, alias="titleNumber", description="Número del título (NUFIN)"),
    current_user: SessionUser = Depends(require_company),
    query_client: QueryClient = Depends(get_query_client),
    access_control: AccessControlService = Depends(get_access_control)
):
    """
    Títulos a recibir abiertos

    - Requiere nombre del parceiro o número del título
    - Sólo parceiros vinculados al usuario; si no lo están responde 403
    """
    service = ReceivablesService(query_client, access_control)
    return await service.search_titles(current_user, partner, title_number)
