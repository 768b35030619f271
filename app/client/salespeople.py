# app/client/salespeople.py
import logging
from typing import Any, Dict, List, Optional

from app.config.settings import settings
from .api_client import SalesApiClient
from .errors import ClientError, ValidationFailed

logger = logging.getLogger(__name__)


class SalespersonPicker:
    """Selector de vendedor con filtro local por nombre y alta rápida"""

    def __init__(self, client: SalesApiClient):
        self.client = client
        self.managers: List[Dict[str, Any]] = []
        self.salespeople: List[Dict[str, Any]] = []
        self.notice: Optional[str] = None

    def load(self, manager_code: Optional[int] = None) -> None:
        try:
            self.managers = self.client.list_salespeople("manager")
            self.salespeople = self.client.list_salespeople("salesperson", manager_code)
            self.notice = None
        except ClientError as e:
            logger.error(f"❌ Error al consultar vendedores: {e.message}")
            self.notice = e.message or "Error al consultar vendedores"

    def filter(self, term: str) -> List[Dict[str, Any]]:
        folded = term.strip().casefold()
        return [
            s for s in self.salespeople
            if folded in str(s.get("APELIDO") or "").casefold()
        ]

    def create(self, name: str, manager_code: Optional[int] = None) -> Optional[Dict[str, Any]]:
        """
        Crear vendedor y recargar la lista. Devuelve None con `notice` cargado
        cuando falla.
        """
        name = name.strip()
        if not name:
            self.notice = "Nombre del vendedor es obligatorio"
            return None
        if len(name) > settings.salesperson_name_max_length:
            self.notice = (
                f"Nombre muy largo. Use como máximo {settings.salesperson_name_max_length} caracteres."
            )
            return None

        try:
            created = self.client.create_salesperson(name, manager_code)
        except ValidationFailed as e:
            self.notice = e.message
            return None
        except ClientError as e:
            logger.error(f"❌ Error al crear vendedor: {e.message}")
            self.notice = "Error al crear vendedor"
            return None

        logger.info(f"✅ Vendedor {created['name']} creado con código {created['code']}")
        self.load(manager_code)
        self.notice = f"Vendedor {created['name']} creado con código {created['code']}"
        return created
