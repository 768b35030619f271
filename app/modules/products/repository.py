# app/modules/products/repository.py
from typing import List, Optional, Dict, Any

from app.shared.database.query import QueryClient, contains_pattern

PRODUCT_COLUMNS = """
    CODPROD,
    DESCRPROD,
    ATIVO,
    LOCAL,
    MARCA,
    CARACTERISTICAS,
    UNIDADE,
    VLRCOMERC
"""

class ProductsRepository:
    """
    Consultas de productos, estoque y precios en la réplica
    """

    def __init__(self, query_client: QueryClient):
        self.query_client = query_client

    # ==================== LISTADOS ====================

    def list_products(
        self,
        company_id: int,
        name: Optional[str] = None,
        code: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Productos vigentes, filtrados por descripción y/o código
        """
        sql = f"""
            SELECT {PRODUCT_COLUMNS}
            FROM AS_PRODUTOS
            WHERE ID_SISTEMA = :idEmpresa
              AND SANKHYA_ATUAL = 'S'
        """
        binds: Dict[str, Any] = {"idEmpresa": company_id}

        if name:
            sql += " AND LOWER(DESCRPROD) LIKE :searchName ESCAPE '\\'"
            binds["searchName"] = contains_pattern(name.lower())
        if code:
            sql += " AND CAST(CODPROD AS VARCHAR(20)) LIKE :searchCode ESCAPE '\\'"
            binds["searchCode"] = contains_pattern(code)

        sql += " ORDER BY DESCRPROD"
        return self.query_client.execute_query(sql, binds)

    def search_products(self, company_id: int, term: str) -> List[Dict[str, Any]]:
        """
        Un único término contra descripción o código
        """
        sql = f"""
            SELECT {PRODUCT_COLUMNS}
            FROM AS_PRODUTOS
            WHERE ID_SISTEMA = :idEmpresa
              AND SANKHYA_ATUAL = 'S'
              AND (LOWER(DESCRPROD) LIKE :termName ESCAPE '\\'
                   OR CAST(CODPROD AS VARCHAR(20)) LIKE :termCode ESCAPE '\\')
            ORDER BY DESCRPROD
        """
        return self.query_client.execute_query(sql, {
            "idEmpresa": company_id,
            "termName": contains_pattern(term.lower()),
            "termCode": contains_pattern(term)
        })

    # ==================== ESTOQUE Y PRECIO ====================

    def get_stock(self, company_id: int, product_code: int) -> List[Dict[str, Any]]:
        sql = """
            SELECT CODPROD, CODLOCAL, ESTOQUE, RESERVADO
            FROM AS_ESTOQUES
            WHERE ID_SISTEMA = :idEmpresa
              AND SANKHYA_ATUAL = 'S'
              AND CODPROD = :codProd
            ORDER BY CODLOCAL
        """
        return self.query_client.execute_query(sql, {
            "idEmpresa": company_id,
            "codProd": product_code
        })

    def get_list_price(self, company_id: int, product_code: int) -> Optional[float]:
        """Precio comercial del cadastro (tabla 0)"""
        rows = self.query_client.execute_query(
            """
            SELECT VLRCOMERC
            FROM AS_PRODUTOS
            WHERE ID_SISTEMA = :idEmpresa
              AND SANKHYA_ATUAL = 'S'
              AND CODPROD = :codProd
            """,
            {"idEmpresa": company_id, "codProd": product_code}
        )
        return rows[0]["VLRCOMERC"] if rows else None

    def get_table_price(self, company_id: int, product_code: int, table_number: int) -> Optional[float]:
        """Precio del producto en una tabla de precios"""
        rows = self.query_client.execute_query(
            """
            SELECT VLRVENDA
            FROM AS_EXCECAO_PRECO
            WHERE ID_SISTEMA = :idEmpresa
              AND SANKHYA_ATUAL = 'S'
              AND CODPROD = :codProd
              AND NUTAB = :nutab
            """,
            {"idEmpresa": company_id, "codProd": product_code, "nutab": table_number}
        )
        return rows[0]["VLRVENDA"] if rows else None

    def get_price_tables(self, company_id: int) -> List[Dict[str, Any]]:
        sql = """
            SELECT NUTAB, CODTAB, DTVIGOR, PERCENTUAL
            FROM AS_TABELA_PRECOS
            WHERE ID_SISTEMA = :idEmpresa
              AND SANKHYA_ATUAL = 'S'
            ORDER BY CODTAB, NUTAB
        """
        return self.query_client.execute_query(sql, {"idEmpresa": company_id})
