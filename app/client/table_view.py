# app/client/table_view.py
"""
Tabla paginada con dos fuentes:

- sin filtros y con caché: corte local del snapshot
- con filtros o sin caché: el servidor filtra, ordena y corta

Ambas devuelven la misma forma Page.
"""
import logging
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, Field

from app.config.settings import settings
from app.shared.pagination import Page, paginate
from .api_client import SalesApiClient
from .errors import AuthenticationMissing, ClientError, RequestTimedOut
from .store import EntityKind, SnapshotCache

logger = logging.getLogger(__name__)

ServerSource = Callable[[int, int, str, str], Page]


class TableSource(str, Enum):
    cache = "cache"
    server = "server"


class TableStatus(str, Enum):
    ready = "ready"
    empty = "empty"
    timed_out = "timed_out"
    auth_required = "auth_required"
    error = "error"


class TableState(BaseModel):
    page: Page = Field(default_factory=Page)
    source: Optional[TableSource] = None
    status: TableStatus = TableStatus.empty
    notice: Optional[str] = None

    @property
    def can_go_previous(self) -> bool:
        return self.page.has_previous

    @property
    def can_go_next(self) -> bool:
        return self.page.has_next


def products_server_source(
    client: SalesApiClient,
    min_length: int = settings.search_min_length
) -> ServerSource:
    """
    Fuente del servidor para productos: término de búsqueda si algún filtro
    alcanza el largo mínimo, si no el listado con filtros.
    """
    def fetch(page: int, page_size: int, name: str, code: str) -> Page:
        if len(name) >= min_length:
            return client.search_products(name, page=page, limit=page_size)
        if len(code) >= min_length:
            return client.search_products(code, page=page, limit=page_size)
        return client.list_products(page=page, page_size=page_size, name=name, code=code)

    return fetch


class PaginatedTableView:
    """
    Estado de la tabla de productos: filtros aplicados, página actual y
    último resultado. Toda falla termina en un aviso, nunca en excepción.
    """

    def __init__(
        self,
        cache: SnapshotCache,
        server_source: ServerSource,
        kind: EntityKind = EntityKind.products,
        page_size: int = settings.page_size
    ):
        self.cache = cache
        self.server_source = server_source
        self.kind = kind
        self.page_size = page_size
        self.current_page = 1
        self.name_filter = ""
        self.code_filter = ""
        self.state = TableState()

    @property
    def has_filters(self) -> bool:
        return bool(self.name_filter or self.code_filter)

    # ==================== ACCIONES ====================

    def apply_filters(self, name: str = "", code: str = "") -> TableState:
        """Aplicar filtros y volver a la primera página"""
        self.name_filter = name.strip()
        self.code_filter = code.strip()
        self.current_page = 1
        return self.load()

    def next_page(self) -> TableState:
        if not self.state.can_go_next:
            return self.state
        return self.load(self.current_page + 1)

    def previous_page(self) -> TableState:
        if not self.state.can_go_previous:
            return self.state
        return self.load(self.current_page - 1)

    def load(self, page: Optional[int] = None) -> TableState:
        if page is not None:
            self.current_page = page

        try:
            result, source = self._fetch()
        except RequestTimedOut as e:
            self.state = TableState(status=TableStatus.timed_out, notice=e.message)
            return self.state
        except AuthenticationMissing as e:
            logger.warning(f"⚠️ Sesión requerida: {e.message}")
            self.state = TableState(status=TableStatus.auth_required, notice="Sesión expirada. Inicie sesión nuevamente.")
            return self.state
        except ClientError as e:
            logger.error(f"❌ Error al cargar {self.kind.value}: {e.message}")
            self.state = TableState(status=TableStatus.error, notice=f"Falla al cargar {self.kind.value}")
            return self.state

        self.current_page = result.page
        self.state = TableState(
            page=result,
            source=source,
            status=TableStatus.ready if result.records else TableStatus.empty
        )
        logger.info(
            f"✅ Mostrando {len(result.records)} {self.kind.value} desde {source.value} "
            f"(página {result.page}/{result.total_pages})"
        )
        return self.state

    def _fetch(self):
        if not self.has_filters:
            snapshot = self.cache.get(self.kind)
            if snapshot is not None and len(snapshot) > 0:
                return paginate(snapshot.records, self.current_page, self.page_size), TableSource.cache
            if snapshot is not None:
                logger.warning(f"⚠️ Caché de {self.kind.value} vacía, removiendo")
                self.cache.remove(self.kind)

        result = self.server_source(
            self.current_page, self.page_size, self.name_filter, self.code_filter
        )
        return result, TableSource.server
