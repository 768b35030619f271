# app/core/concurrency.py
"""
Estrategias de unión para lecturas concurrentes

- all-settled: cada rama se resuelve por separado; una falla no tumba al resto.
- all-or-nothing: cualquier falla hace fallar el resultado compuesto.

Las ramas son funciones bloqueantes (consultas a BD o peticiones HTTP) que se
ejecutan en hilos con asyncio.to_thread.
"""
import asyncio
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class Settled(Generic[T]):
    """Resultado de una rama en una unión all-settled"""

    def __init__(self, value: Optional[T] = None, error: Optional[BaseException] = None):
        self.value = value
        self.error = error

    @property
    def fulfilled(self) -> bool:
        return self.error is None

    def value_or(self, default: T) -> T:
        return self.value if self.fulfilled else default

    def __repr__(self) -> str:
        if self.fulfilled:
            return f"Settled(fulfilled, value={self.value!r})"
        return f"Settled(rejected, error={self.error!r})"


async def gather_all_settled(*calls: Callable[[], Any]) -> List[Settled]:
    """Ejecutar las ramas en paralelo y devolver el estado de cada una"""
    results = await asyncio.gather(
        *(asyncio.to_thread(call) for call in calls),
        return_exceptions=True
    )
    return [
        Settled(error=result) if isinstance(result, Exception) else Settled(value=result)
        for result in results
    ]


async def gather_all_or_nothing(*calls: Callable[[], Any]) -> List[Any]:
    """Ejecutar las ramas en paralelo; la primera excepción se propaga"""
    return list(await asyncio.gather(*(asyncio.to_thread(call) for call in calls)))
