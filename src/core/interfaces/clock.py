"""Contratos de tiempo.

Por qué dos relojes:
- `WallClock` se consulta una sola vez al arrancar para convertir el deadline
  en una duración total fija.
- `MonotonicClock` se consulta en cada tick; es inmune a ajustes del reloj del
  sistema (NTP, DST, cambios manuales) durante la ejecución.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class WallClock(Protocol):
    """Hora local "ahora" (naive)."""

    def now(self) -> datetime:
        ...


@runtime_checkable
class MonotonicClock(Protocol):
    """Segundos de un reloj monotónico; solo importan las diferencias."""

    def monotonic(self) -> float:
        ...
