# app/modules/salespeople/repository.py
from typing import List, Optional, Dict, Any

from sqlalchemy import func, insert, select

from app.shared.database.models import Salesperson
from app.shared.database.query import QueryClient

MANAGER_KIND = "G"
SALESPERSON_KIND = "V"

class SalespeopleRepository:
    """
    Consultas y altas de vendedores en la réplica
    """

    def __init__(self, query_client: QueryClient):
        self.query_client = query_client

    def get_by_kind(
        self,
        company_id: int,
        kind: str,
        manager_code: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Vendedores activos de un tipo ('G' gerente, 'V' vendedor)
        """
        query = select(
            Salesperson.code.label("CODVEND"),
            Salesperson.nickname.label("APELIDO"),
            Salesperson.kind.label("TIPVEND"),
            Salesperson.active.label("ATIVO"),
            Salesperson.manager_code.label("CODGER")
        ).where(
            Salesperson.company_id == company_id,
            Salesperson.is_current == "S",
            Salesperson.active == "S",
            Salesperson.kind == kind
        )

        if manager_code is not None:
            query = query.where(Salesperson.manager_code == manager_code)

        return self.query_client.execute_query(query.order_by(Salesperson.nickname))

    def next_code(self, company_id: int) -> int:
        query = select(
            (func.coalesce(func.max(Salesperson.code), 0) + 1).label("NEXT_CODE")
        ).where(Salesperson.company_id == company_id)

        rows = self.query_client.execute_query(query)
        return int(rows[0]["NEXT_CODE"])

    def create(
        self,
        company_id: int,
        code: int,
        nickname: str,
        manager_code: Optional[int] = None
    ) -> None:
        self.query_client.execute_write(
            insert(Salesperson.__table__).values({
                Salesperson.company_id: company_id,
                Salesperson.code: code,
                Salesperson.nickname: nickname,
                Salesperson.kind: SALESPERSON_KIND,
                Salesperson.active: "S",
                Salesperson.manager_code: manager_code,
                Salesperson.is_current: "S"
            })
        )
