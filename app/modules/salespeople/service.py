# app/modules/salespeople/service.py
import logging
from typing import List, Optional, Dict, Any

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from app.config.settings import settings
from app.shared.database.query import QueryClient
from .repository import SalespeopleRepository, MANAGER_KIND, SALESPERSON_KIND
from .schemas import SalespersonRole, SalespersonCreateRequest, SalespersonCreateResponse

logger = logging.getLogger(__name__)

# Mensajes de la base cuando el valor excede el ancho de la columna
FIELD_WIDTH_ERRORS = ("ORA-12899", "value too large", "largura acima do limite")

def name_too_long_message() -> str:
    return f"Nombre muy largo. Use como máximo {settings.salesperson_name_max_length} caracteres."

class SalespeopleService:
    """
    Consulta de gerentes/vendedores y alta de vendedores
    """

    def __init__(self, query_client: QueryClient):
        self.repository = SalespeopleRepository(query_client)

    async def list_salespeople(
        self,
        company_id: int,
        role: Optional[str],
        manager_code: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        if role == SalespersonRole.manager.value:
            return self.repository.get_by_kind(company_id, MANAGER_KIND)
        if role == SalespersonRole.salesperson.value:
            return self.repository.get_by_kind(company_id, SALESPERSON_KIND, manager_code)

        raise HTTPException(status_code=400, detail="Tipo no especificado")

    async def create_salesperson(
        self,
        company_id: int,
        request: SalespersonCreateRequest
    ) -> SalespersonCreateResponse:
        """
        Alta de vendedor con código secuencial por empresa

        El apelido tiene ancho fijo en el ERP; el exceso se informa como
        mensaje para el usuario, tanto si se detecta antes como si lo
        rechaza la base.
        """
        name = request.name.strip()
        if not name:
            raise HTTPException(status_code=400, detail="Nombre del vendedor es obligatorio")
        if len(name) > settings.salesperson_name_max_length:
            raise HTTPException(status_code=400, detail=name_too_long_message())

        try:
            code = self.repository.next_code(company_id)
            self.repository.create(company_id, code, name, request.manager_code)
        except SQLAlchemyError as e:
            if any(marker in str(e) for marker in FIELD_WIDTH_ERRORS):
                logger.warning(f"⚠️ Apelido rechazado por ancho de columna: {name}")
                raise HTTPException(status_code=400, detail=name_too_long_message())

            logger.error(f"❌ Error creando vendedor {name}: {e}")
            raise HTTPException(status_code=500, detail="Error al crear vendedor")

        logger.info(f"✅ Vendedor {name} creado con código {code}")
        return SalespersonCreateResponse(code=code, name=name)
