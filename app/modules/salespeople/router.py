# app/modules/salespeople/router.py
from fastapi import APIRouter, Depends, Query
from typing import Optional, List, Dict, Any

from app.config.database import get_query_client
from app.core.auth.dependencies import require_company
from app.core.auth.schemas import SessionUser
from app.shared.database.query import QueryClient
from .service import SalespeopleService
from .schemas import SalespersonCreateRequest, SalespersonCreateResponse

router = APIRouter(prefix="/salespeople", tags=["Salespeople"])

@router.get("", response_model=List[Dict[str, Any]])
async def list_salespeople(
    role: Optional[str] = Query(None, description="manager o salesperson"),
    manager_code: Optional[int] = Query(None, alias="managerCode", description="Filtrar vendedores por gerente"),
    current_user: SessionUser = Depends(require_company),
    query_client: QueryClient = Depends(get_query_client)
):
    """
    Gerentes o vendedores activos de la empresa
    """
    service = SalespeopleService(query_client)
    return await service.list_salespeople(current_user.company_id, role, manager_code)

@router.post("", response_model=SalespersonCreateResponse)
async def create_salesperson(
    request: SalespersonCreateRequest,
    current_user: SessionUser = Depends(require_company),
    query_client: QueryClient = Depends(get_query_client)
):
    """
    Crear vendedor

    **Validaciones:**
    - Nombre obligatorio
    - Nombre limitado al ancho del apelido en el ERP
    """
    service = SalespeopleService(query_client)
    return await service.create_salesperson(current_user.company_id, request)
