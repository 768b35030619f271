# app/modules/receivables/repository.py
from typing import List, Optional, Dict, Any

from app.shared.database.query import QueryClient, contains_pattern

class ReceivablesRepository:
    """
    Títulos a recibir abiertos en la réplica
    """

    def __init__(self, query_client: QueryClient):
        self.query_client = query_client

    def find_open_titles(
        self,
        company_id: int,
        partner_name: Optional[str] = None,
        title_number: Optional[str] = None,
        access_clause: str = "",
        access_binds: Dict[str, Any] = None
    ) -> List[Dict[str, Any]]:
        sql = """
            SELECT
                F.NUFIN,
                F.CODPARC,
                P.NOMEPARC,
                F.VLRDESDOB,
                F.DTVENC,
                F.DTNEG,
                F.CODTIPTIT,
                F.DESDOBRAMENTO
            FROM AS_FINANCEIRO F
            JOIN AS_PARCEIROS P
              ON P.CODPARC = F.CODPARC
             AND P.ID_SISTEMA = F.ID_SISTEMA
            WHERE F.ID_SISTEMA = :idEmpresa
              AND F.SANKHYA_ATUAL = 'S'
              AND F.RECDESP = 1
              AND F.DHBAIXA IS NULL
        """
        binds: Dict[str, Any] = {"idEmpresa": company_id}

        if partner_name:
            sql += " AND LOWER(P.NOMEPARC) LIKE :parceiro ESCAPE '\\'"
            binds["parceiro"] = contains_pattern(partner_name.lower())
        if title_number:
            sql += " AND CAST(F.NUFIN AS VARCHAR(20)) = :nroTitulo"
            binds["nroTitulo"] = title_number

        if access_clause:
            sql += f" {access_clause}"
            binds.update(access_binds or {})

        sql += " ORDER BY F.DTVENC, F.NUFIN"
        return self.query_client.execute_query(sql, binds)
