"""Jerarquía de errores de endzeit.

Por qué una jerarquía propia:
- La CLI decide el exit code según la familia del error, sin inspeccionar
  mensajes ni tipos de librerías externas.
"""

from __future__ import annotations


class EndzeitError(Exception):
    """Base de todos los errores del dominio."""


class InputValidationError(EndzeitError):
    """Fecha/hora mal formada o deadline no válido (pre-flight, fatal)."""


class PastDeadlineError(InputValidationError):
    """El deadline no está estrictamente en el futuro."""

    def __init__(self, message: str = "Target date/time must be in the future") -> None:
        super().__init__(message)


class TerminalIOError(EndzeitError):
    """Fallo entrando/saliendo de raw mode, dibujando o leyendo teclas."""


class CommandExecutionError(EndzeitError):
    """El comando de finalización no pudo lanzarse (o superó su timeout)."""
