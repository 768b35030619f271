# app/shared/database/query.py
import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.sql import Executable

logger = logging.getLogger(__name__)


Statement = Union[str, Executable]


def as_statement(sql: Statement) -> Executable:
    return text(sql) if isinstance(sql, str) else sql


class QueryClient:
    """
    Colaborador de consultas: query(sql, binds) -> rows

    Cada llamada abre su propia conexión del pool, por lo que dos consultas
    pueden correr en paralelo desde hilos distintos.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def execute_query(self, sql: Statement, binds: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Ejecutar consulta de lectura y devolver filas como diccionarios.

        Acepta SQL en texto con binds o una sentencia construida sobre los
        modelos de la réplica. Las claves se normalizan a mayúsculas, igual que
        las columnas del ERP.
        """
        with self.engine.connect() as conn:
            result = conn.execute(as_statement(sql), binds or {})
            return [
                {key.upper(): value for key, value in row.items()}
                for row in result.mappings()
            ]

    def execute_write(self, sql: Statement, binds: Optional[Dict[str, Any]] = None) -> int:
        """Ejecutar sentencia de escritura en una transacción"""
        with self.engine.begin() as conn:
            result = conn.execute(as_statement(sql), binds or {})
            logger.debug(f"Escritura aplicada: {result.rowcount} filas")
            return result.rowcount


LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """Patrón LIKE de substring literal: `%` y `_` del término no son comodines"""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
