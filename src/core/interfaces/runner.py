"""Contrato para ejecutar el comando de finalización."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ExecutionResult


@runtime_checkable
class CommandRunner(Protocol):
    """Ejecuta una línea de comandos a través del intérprete de la plataforma.

    - Debe capturar stdout/stderr y el exit status en un `ExecutionResult`.
    - Si el proceso no puede lanzarse, levanta `CommandExecutionError`.
    """

    def run(self, command: str) -> ExecutionResult:
        ...
