# app/modules/receivables/service.py
import logging
from typing import Optional

from fastapi import HTTPException

from app.core.access_control import AccessControlService, AccessDeniedError
from app.core.auth.schemas import SessionUser
from app.shared.database.query import QueryClient
from .repository import ReceivablesRepository
from .schemas import ReceivablesResponse, TitleResponse

logger = logging.getLogger(__name__)

PARTNER_NOT_LINKED = "Parceiro no vinculado"

class ReceivablesService:
    """
    Consulta de títulos a recibir con el filtro de acceso del usuario
    """

    def __init__(self, query_client: QueryClient, access_control: AccessControlService):
        self.repository = ReceivablesRepository(query_client)
        self.access_control = access_control

    async def search_titles(
        self,
        user: SessionUser,
        partner_name: Optional[str] = None,
        title_number: Optional[str] = None
    ) -> ReceivablesResponse:
        partner_name = (partner_name or "").strip() or None
        title_number = (title_number or "").strip() or None

        if not partner_name and not title_number:
            raise HTTPException(
                status_code=400,
                detail="Informe el nombre del parceiro o el número del título"
            )

        try:
            access = self.access_control.validate_user_access(user)
        except AccessDeniedError as e:
            logger.warning(f"⚠️ {e}")
            raise HTTPException(
                status_code=403,
                detail={"error": "Sin acceso", "message": "Usuario sin acceso validado a la empresa"}
            )

        clause, binds = self.access_control.partners_where_clause(access)
        rows = self.repository.find_open_titles(
            user.company_id, partner_name, title_number, clause, binds
        )

        # Títulos que existen pero pertenecen a parceiros de otro vendedor
        if not rows and clause:
            unrestricted = self.repository.find_open_titles(
                user.company_id, partner_name, title_number
            )
            if unrestricted:
                logger.warning(
                    f"⚠️ Usuario {user.id} consultó títulos de parceiro no vinculado"
                )
                raise HTTPException(
                    status_code=403,
                    detail={
                        "error": PARTNER_NOT_LINKED,
                        "message": "Este parceiro no está vinculado a su usuario."
                    }
                )

        titles = [
            TitleResponse(
                title_number=row["NUFIN"],
                partner_code=row["CODPARC"],
                partner=row["NOMEPARC"],
                amount=float(row["VLRDESDOB"] or 0),
                due_date=row["DTVENC"],
                negotiation_date=row["DTNEG"],
                financial_type=row["CODTIPTIT"],
                installment=row["DESDOBRAMENTO"] or 1
            )
            for row in rows
        ]

        return ReceivablesResponse(
            titles=titles,
            total_amount=sum(t.amount for t in titles)
        )
