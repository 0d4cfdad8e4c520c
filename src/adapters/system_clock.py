"""Relojes del sistema.

- `SystemWallClock`: hora local, solo para resolver el deadline al arrancar.
- `SystemMonotonicClock`: `time.monotonic()`, para medir el tiempo transcurrido.
"""

from __future__ import annotations

import time
from datetime import datetime


class SystemWallClock:
    def now(self) -> datetime:
        return datetime.now()


class SystemMonotonicClock:
    def monotonic(self) -> float:
        return time.monotonic()
