# app/client/store.py
"""
Caché de sesión con snapshots completos de listas de referencia.

El almacenamiento es una interfaz inyectada (get/set/remove/clear sobre
strings), para poder sustituirla por un fake en memoria.
"""
import json
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Protocol, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .errors import CacheCorrupt

logger = logging.getLogger(__name__)


class EntityKind(str, Enum):
    products = "products"
    partners = "partners"

    @property
    def storage_key(self) -> str:
        return f"cached_{self.value}"

    @property
    def code_field(self) -> str:
        return "CODPROD" if self is EntityKind.products else "CODPARC"

    @property
    def description_field(self) -> str:
        return "DESCRPROD" if self is EntityKind.products else "NOMEPARC"


class SnapshotShape(str, Enum):
    bare = "bare"          # lista de registros
    wrapped = "wrapped"    # objeto con campo "records" (formato anterior)


class ListSnapshot(BaseModel):
    """Copia completa de una lista, inmutable hasta que se reemplaza"""
    model_config = ConfigDict(frozen=True)

    entity_kind: EntityKind
    records: Tuple[Dict[str, Any], ...] = ()
    shape: SnapshotShape = SnapshotShape.bare
    captured_at: datetime = Field(default_factory=datetime.now)

    def __len__(self) -> int:
        return len(self.records)


class StorageBackend(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...
    def clear(self) -> None: ...


class MemoryStorage:
    """Almacenamiento clave/valor con vida de la sesión"""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._items


def decode_snapshot(kind: EntityKind, raw: str) -> ListSnapshot:
    """
    Única deserialización de snapshots.

    Acepta una lista de registros o un objeto {"records": [...]} y etiqueta
    la forma leída. Cualquier otra cosa es CacheCorrupt.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise CacheCorrupt(f"Snapshot de {kind.value} ilegible: {e}")

    if isinstance(data, list):
        records, shape = data, SnapshotShape.bare
    elif isinstance(data, dict) and isinstance(data.get("records"), list):
        records, shape = data["records"], SnapshotShape.wrapped
    else:
        raise CacheCorrupt(f"Snapshot de {kind.value} con forma desconocida")

    if not all(isinstance(record, dict) for record in records):
        raise CacheCorrupt(f"Snapshot de {kind.value} con registros inválidos")

    return ListSnapshot(entity_kind=kind, records=tuple(records), shape=shape)


class SnapshotCache:
    """
    put(kind, records) reemplaza el snapshot completo; get(kind) lo devuelve
    o None. Sin TTL: vale hasta que se sobrescribe o se limpia.
    """

    def __init__(self, storage: Optional[StorageBackend] = None):
        self.storage = storage if storage is not None else MemoryStorage()

    def put(self, kind: EntityKind, records: Iterable[Dict[str, Any]]) -> ListSnapshot:
        records = tuple(records)
        self.storage.set_item(kind.storage_key, json.dumps(list(records), default=str))
        logger.info(f"💾 {len(records)} {kind.value} almacenados en la caché")
        return ListSnapshot(entity_kind=kind, records=records)

    def get(self, kind: EntityKind) -> Optional[ListSnapshot]:
        raw = self.storage.get_item(kind.storage_key)
        if raw is None:
            return None

        try:
            return decode_snapshot(kind, raw)
        except CacheCorrupt as e:
            logger.warning(f"⚠️ {e}; eliminando de la caché")
            self.storage.remove_item(kind.storage_key)
            return None

    def remove(self, kind: EntityKind) -> None:
        self.storage.remove_item(kind.storage_key)

    def clear(self) -> None:
        """Invalidar todos los snapshots"""
        for kind in EntityKind:
            self.storage.remove_item(kind.storage_key)
        logger.info("🗑️ Caché de prefetch limpia")
