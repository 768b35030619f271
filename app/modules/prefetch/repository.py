# app/modules/prefetch/repository.py
from typing import List, Dict, Any

from app.shared.database.query import QueryClient

class PrefetchRepository:
    """
    Consultas de listas completas para el prefetch posterior al login
    """

    def __init__(self, query_client: QueryClient):
        self.query_client = query_client

    def get_partners(
        self,
        company_id: int,
        access_clause: str = "",
        access_binds: Dict[str, Any] = None
    ) -> List[Dict[str, Any]]:
        """
        Parceiros clientes vigentes de la empresa, con el filtro de acceso aplicado
        """
        sql = """
            SELECT
                CODPARC,
                NOMEPARC,
                CGC_CPF,
                CODCID,
                ATIVO,
                TIPPESSOA,
                RAZAOSOCIAL,
                IDENTINSCESTAD,
                CEP,
                CODEND,
                NUMEND,
                COMPLEMENTO,
                CODBAI,
                LATITUDE,
                LONGITUDE,
                CLIENTE,
                CODVEND
            FROM AS_PARCEIROS
            WHERE ID_SISTEMA = :idEmpresa
              AND SANKHYA_ATUAL = 'S'
              AND CLIENTE = 'S'
        """
        binds = {"idEmpresa": company_id}

        if access_clause:
            sql += f" {access_clause}"
            binds.update(access_binds or {})

        sql += " ORDER BY NOMEPARC"

        return self.query_client.execute_query(sql, binds)

    def get_products(self, company_id: int) -> List[Dict[str, Any]]:
        """
        Productos vigentes de la empresa
        """
        sql = """
            SELECT
                ID_SISTEMA,
                CODPROD,
                DESCRPROD,
                ATIVO,
                LOCAL,
                MARCA,
                CARACTERISTICAS,
                UNIDADE,
                VLRCOMERC,
                SANKHYA_ATUAL,
                DT_ULT_CARGA,
                DT_CRIACAO
            FROM AS_PRODUTOS
            WHERE ID_SISTEMA = :idEmpresa
              AND SANKHYA_ATUAL = 'S'
            ORDER BY DESCRPROD
        """
        return self.query_client.execute_query(sql, {"idEmpresa": company_id})
