"""Contrato de la terminal que consume el bucle de cuenta atrás.

Reglas de diseño:
- `render` recibe porcentaje + texto ya formateado; el adaptador decide cómo
  dibujarlo (gauge a pantalla completa o línea simple).
- `poll_key` bloquea como máximo `timeout` segundos y devuelve la tecla
  pulsada o None.
- La adquisición/liberación (raw mode, pantalla alternativa) es
  responsabilidad de un context manager del adaptador, no del bucle.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CountdownTerminal(Protocol):
    def render(self, percentage: float, label: str) -> None:
        """Dibuja el estado actual."""

        ...

    def poll_key(self, timeout: float) -> str | None:
        """Espera una tecla como mucho `timeout` segundos."""

        ...


@runtime_checkable
class KeyReader(Protocol):
    """Fuente de teclas sin bloqueo indefinido."""

    def read_key(self, timeout: float) -> str | None:
        ...
