# app/shared/pagination.py
import math
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field, computed_field


class PageRequest(BaseModel):
    """Página solicitada (1-based) con tamaño fijo"""

    page: int = Field(1, description="Número de página, empezando en 1")
    page_size: int = Field(20, gt=0, description="Registros por página")

    @computed_field
    @property
    def start_index(self) -> int:
        return (max(self.page, 1) - 1) * self.page_size

    @computed_field
    @property
    def end_index(self) -> int:
        return self.start_index + self.page_size


class Page(BaseModel):
    """
    Forma paginada común a la tabla local y a los endpoints del servidor:
    { records, total, page, pageSize, totalPages }
    """
    model_config = ConfigDict(populate_by_name=True)

    records: List[Dict[str, Any]] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = Field(20, alias="pageSize")
    total_pages: int = Field(0, alias="totalPages")

    @property
    def start_index(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def end_index(self) -> int:
        return min(self.start_index + self.page_size, self.total)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def total_pages_for(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if page_size > 0 else 0


def clamp_page(page: int, total_pages: int) -> int:
    """Ajustar la página al rango [1, totalPages]"""
    return min(max(page, 1), max(total_pages, 1))


def paginate(records: Sequence[Dict[str, Any]], page: int, page_size: int) -> Page:
    """
    Cortar una lista completa en memoria: [(page-1)*size, page*size)

    Páginas fuera de rango se ajustan al límite más cercano.
    """
    total = len(records)
    total_pages = total_pages_for(total, page_size)
    request = PageRequest(page=clamp_page(page, total_pages), page_size=page_size)

    return Page(
        records=list(records[request.start_index:request.end_index]),
        total=total,
        page=request.page,
        page_size=page_size,
        total_pages=total_pages
    )
