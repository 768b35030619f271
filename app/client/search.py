# app/client/search.py
"""
Búsqueda incremental sobre los snapshots de la caché.

Cada tecla reprograma la evaluación; sólo corre la última, tras una ventana
de silencio. La búsqueda en sí es un filtro lineal que conserva el orden
del snapshot.
"""
import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from app.config.settings import settings
from .store import EntityKind, SnapshotCache

logger = logging.getLogger(__name__)


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip()


def dispatch(result: Any) -> Optional[asyncio.Future]:
    """
    Programar en el loop activo un callback que devolvió una corrutina; sin
    loop activo la corrutina corre hasta terminar.
    """
    if not asyncio.iscoroutine(result):
        return None
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        asyncio.run(result)
        return None
    return asyncio.ensure_future(result)


def search_records(
    records: Iterable[Dict[str, Any]],
    query: str,
    kind: EntityKind = EntityKind.products,
    limit: int = settings.search_max_results,
    min_length: int = settings.search_min_length
) -> List[Dict[str, Any]]:
    """
    Registros cuya descripción contiene el término (sin distinguir mayúsculas)
    o cuyo código contiene el término, en el orden original y hasta `limit`.

    Con menos de `min_length` caracteres devuelve [] sin recorrer `records`.
    """
    term = normalize_query(query)
    if len(term) < min_length:
        return []

    folded = term.casefold()
    matches = []
    for record in records:
        description = record.get(kind.description_field)
        code = record.get(kind.code_field)

        if (description is not None and folded in str(description).casefold()) or \
                (code is not None and term in str(code)):
            matches.append(record)
            if len(matches) >= limit:
                break

    return matches


class Debouncer:
    """
    Debounce de flanco final con un único timer pendiente.

    schedule() cancela el timer anterior antes de programar el nuevo; la
    acción puede ser síncrona o devolver una corrutina.
    """

    def __init__(self, action: Callable[[Any], Any], wait: float = settings.search_debounce_seconds):
        self.action = action
        self.wait = wait
        self._handle: Optional[asyncio.TimerHandle] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, value: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.wait, self._fire, value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, value: Any) -> None:
        self._handle = None
        self._task = dispatch(self.action(value))


class SearchStatus(str, Enum):
    results = "results"
    no_results = "no_results"
    too_short = "too_short"
    blocked = "blocked"            # precondición no cumplida
    cache_missing = "cache_missing"


class SearchOutcome(BaseModel):
    status: SearchStatus
    query: str = ""
    records: List[Dict[str, Any]] = Field(default_factory=list)
    message: Optional[str] = None


class DebouncedSearch:
    """
    Punto de entrada por tecla para los selectores de producto/parceiro.

    `precondition` devuelve un mensaje cuando la búsqueda no puede correr
    (p. ej. sin tabla de precios elegida) o None cuando puede.
    """

    def __init__(
        self,
        cache: SnapshotCache,
        kind: EntityKind = EntityKind.products,
        on_result: Optional[Callable[[SearchOutcome], Any]] = None,
        precondition: Optional[Callable[[], Optional[str]]] = None,
        wait: float = settings.search_debounce_seconds,
        limit: int = settings.search_max_results,
        min_length: int = settings.search_min_length
    ):
        self.cache = cache
        self.kind = kind
        self.on_result = on_result
        self.precondition = precondition
        self.limit = limit
        self.min_length = min_length
        self.debouncer = Debouncer(self.evaluate, wait)
        self.last_outcome: Optional[SearchOutcome] = None
        self._callback: Optional[asyncio.Future] = None

    def on_input(self, text: str) -> None:
        self.debouncer.schedule(text)

    def cancel(self) -> None:
        self.debouncer.cancel()

    def evaluate(self, text: str) -> SearchOutcome:
        outcome = self._match(text)
        self.last_outcome = outcome
        if self.on_result is not None:
            self._callback = dispatch(self.on_result(outcome))
        return outcome

    def _match(self, text: str) -> SearchOutcome:
        query = normalize_query(text)

        if self.precondition is not None:
            message = self.precondition()
            if message:
                return SearchOutcome(status=SearchStatus.blocked, query=query, message=message)

        if len(query) < self.min_length:
            return SearchOutcome(status=SearchStatus.too_short, query=query)

        snapshot = self.cache.get(self.kind)
        if snapshot is None:
            logger.warning(f"⚠️ Caché de {self.kind.value} no encontrada")
            return SearchOutcome(
                status=SearchStatus.cache_missing,
                query=query,
                message="Caché no encontrada. Inicie sesión nuevamente para sincronizar."
            )

        records = search_records(
            snapshot.records, query, self.kind, limit=self.limit, min_length=self.min_length
        )
        logger.debug(f"✅ {len(records)} {self.kind.value} filtrados para '{query}'")

        if not records:
            return SearchOutcome(status=SearchStatus.no_results, query=query)
        return SearchOutcome(status=SearchStatus.results, query=query, records=records)
