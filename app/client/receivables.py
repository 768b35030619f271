# app/client/receivables.py
import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .api_client import SalesApiClient
from .errors import AccessDenied, ClientError, RequestTimedOut, ValidationFailed

logger = logging.getLogger(__name__)


class ReceivablesStatus(str, Enum):
    results = "results"
    no_results = "no_results"
    not_linked = "not_linked"
    invalid = "invalid"
    timed_out = "timed_out"
    error = "error"


class ReceivablesResult(BaseModel):
    status: ReceivablesStatus
    titles: List[Dict[str, Any]] = Field(default_factory=list)
    notice: Optional[str] = None


class ReceivablesView:
    """Consulta de títulos a recibir; cada falla vuelve como aviso"""

    def __init__(self, client: SalesApiClient):
        self.client = client

    def search(self, partner: str = "", title_number: str = "") -> ReceivablesResult:
        partner, title_number = partner.strip(), title_number.strip()
        if not partner and not title_number:
            return ReceivablesResult(
                status=ReceivablesStatus.invalid,
                notice="Informe el nombre del parceiro o el número del título"
            )

        try:
            data = self.client.search_receivables(partner, title_number)
        except AccessDenied as e:
            return ReceivablesResult(
                status=ReceivablesStatus.not_linked,
                notice=e.message or "Este parceiro no está vinculado a su usuario."
            )
        except ValidationFailed as e:
            return ReceivablesResult(status=ReceivablesStatus.invalid, notice=e.message)
        except RequestTimedOut as e:
            return ReceivablesResult(status=ReceivablesStatus.timed_out, notice=e.message)
        except ClientError as e:
            logger.error(f"❌ Error al cargar títulos: {e.message}")
            return ReceivablesResult(
                status=ReceivablesStatus.error,
                notice="Falla al cargar títulos a recibir"
            )

        titles = data.get("titles") or []
        if not titles:
            return ReceivablesResult(
                status=ReceivablesStatus.no_results,
                notice="Ningún título encontrado con los filtros informados"
            )
        return ReceivablesResult(
            status=ReceivablesStatus.results,
            titles=titles,
            notice=f"{len(titles)} título(s) encontrado(s)"
        )
