# app/client/api_client.py
"""
Cliente HTTP de la API, con la cookie de sesión y tiempo máximo por petición
"""
import json
import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests

from app.config.settings import settings
from app.core.concurrency import gather_all_or_nothing
from app.shared.pagination import Page
from .errors import (
    AccessDenied, AuthenticationMissing, ClientError, RequestTimedOut,
    UpstreamQueryFailed, ValidationFailed
)

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Tiempo de carga excedido. Intente nuevamente."


def encode_session_cookie(user: Dict[str, Any]) -> str:
    """Cookie de sesión: JSON compacto, url-encoded"""
    return quote(json.dumps(user, separators=(",", ":")))


class SalesApiClient:
    """
    Acceso a los endpoints /api/v1 desde el cliente.

    Traduce estados HTTP y fallas de red a los errores de app.client.errors.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session_user: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"Accept": "application/json"})

        if session_user:
            self.set_session_user(session_user)

    def set_session_user(self, user: Dict[str, Any]) -> None:
        self.session.cookies.set(settings.session_cookie_name, encode_session_cookie(user))

    # ==================== TRANSPORTE ====================

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout:
            logger.warning(f"⏱️ {method} {path} abortado tras {self.timeout}s")
            raise RequestTimedOut(TIMEOUT_MESSAGE)
        except requests.RequestException as e:
            logger.error(f"❌ {method} {path} falló: {e}")
            raise UpstreamQueryFailed(f"Falla de comunicación con la API: {e}")

        if response.status_code >= 400:
            raise self._error_for(response)

        return response.json()

    @staticmethod
    def _error_for(response: requests.Response) -> ClientError:
        try:
            body = response.json()
        except ValueError:
            body = None
        detail = body.get("detail") if isinstance(body, dict) else None

        if isinstance(detail, dict):
            message = detail.get("message") or detail.get("error") or ""
        elif isinstance(detail, str):
            message = detail
        else:
            message = f"Error {response.status_code}"

        status_code = response.status_code
        if status_code == 401:
            return AuthenticationMissing(message, status_code)
        if status_code in (400, 422):
            return ValidationFailed(message, status_code)
        if status_code == 403:
            return AccessDenied(message, status_code)
        return UpstreamQueryFailed(message, status_code)

    # ==================== PREFETCH ====================

    def prefetch(self) -> Dict[str, Any]:
        return self._request("POST", "/prefetch")

    # ==================== PRODUCTOS ====================

    def list_products(
        self,
        page: int = 1,
        page_size: int = settings.page_size,
        name: str = "",
        code: str = ""
    ) -> Page:
        data = self._request("GET", "/products", params={
            "page": page,
            "pageSize": page_size,
            "searchName": name,
            "searchCode": code
        })
        return Page.model_validate(data)

    def search_products(self, term: str, page: int = 1, limit: int = settings.page_size) -> Page:
        data = self._request("GET", "/products/search", params={
            "q": term,
            "limit": limit,
            "page": page
        })
        return Page.model_validate(data)

    def get_stock(self, product_code: int) -> Dict[str, Any]:
        return self._request("GET", f"/products/{product_code}/stock")

    def get_price(self, product_code: int, price_table: int = 0) -> Dict[str, Any]:
        return self._request("GET", f"/products/{product_code}/price", params={"priceTable": price_table})

    def get_price_tables(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/price-tables").get("tables", [])

    async def load_stock_and_price(
        self,
        product_code: int,
        price_table: int = 0
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """
        Estoque y precio en paralelo; si cualquiera falla, falla el conjunto
        """
        stock, price = await gather_all_or_nothing(
            lambda: self.get_stock(product_code),
            lambda: self.get_price(product_code, price_table)
        )
        return stock, price

    # ==================== VENDEDORES ====================

    def list_salespeople(self, role: str, manager_code: Optional[int] = None) -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {"role": role}
        if manager_code is not None:
            params["managerCode"] = manager_code
        return self._request("GET", "/salespeople", params=params)

    def create_salesperson(self, name: str, manager_code: Optional[int] = None) -> Dict[str, Any]:
        body: Dict[str, Any] = {"name": name}
        if manager_code is not None:
            body["managerCode"] = manager_code
        return self._request("POST", "/salespeople", json=body)

    # ==================== TÍTULOS ====================

    def search_receivables(self, partner: str = "", title_number: str = "") -> Dict[str, Any]:
        params = {}
        if partner:
            params["partner"] = partner
        if title_number:
            params["titleNumber"] = title_number
        return self._request("GET", "/receivables", params=params)
