# app/client/__init__.py
"""
Cliente de la API con caché de sesión

- store.py: snapshots de parceiros/productos en un almacenamiento inyectado
- prefetch.py: carga de la caché después del login
- search.py: búsqueda incremental con debounce
- table_view.py: tabla paginada (caché o servidor)
- product_selector.py, salespeople.py, receivables.py: pantallas de pedido
- api_client.py: transporte HTTP y traducción de errores
"""

from .api_client import SalesApiClient
from .store import EntityKind, ListSnapshot, MemoryStorage, SnapshotCache
from .prefetch import PrefetchLoader
from .search import Debouncer, DebouncedSearch, search_records
from .table_view import PaginatedTableView, products_server_source

__all__ = [
    "SalesApiClient",
    "EntityKind",
    "ListSnapshot",
    "MemoryStorage",
    "SnapshotCache",
    "PrefetchLoader",
    "Debouncer",
    "DebouncedSearch",
    "search_records",
    "PaginatedTableView",
    "products_server_source"
]
