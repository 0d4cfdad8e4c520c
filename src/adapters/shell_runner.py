"""Ejecución del comando de finalización.

Por qué a través del intérprete:
- El usuario pasa una línea de comandos completa (`--execute "make deploy"`),
  con pipes/redirecciones; la delegamos tal cual a `sh -c` o `cmd /C`.
"""

from __future__ import annotations

import logging
import subprocess
import sys

from core.domain.errors import CommandExecutionError
from core.domain.models import ExecutionResult

logger = logging.getLogger(__name__)


def shell_argv(command: str, *, platform: str | None = None) -> list[str]:
    """Argumentos para ejecutar `command` con el intérprete de la plataforma."""

    platform = platform or sys.platform
    if platform.startswith("win"):
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


class ShellCommandRunner:
    """Runs a command synchronously and captures both output streams."""

    def __init__(self, *, timeout: float | None = None, platform: str | None = None) -> None:
        self._timeout = timeout
        self._platform = platform

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def run(self, command: str) -> ExecutionResult:
        argv = shell_argv(command, platform=self._platform)
        logger.debug("Spawning %s", argv)
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                # Bytes no UTF-8 se sustituyen por U+FFFD.
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise CommandExecutionError(f"Command timed out after {exc.timeout}s") from exc
        except OSError as exc:
            raise CommandExecutionError(f"Failed to execute command: {exc}") from exc

        return ExecutionResult(
            command=command,
            success=completed.returncode == 0,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
