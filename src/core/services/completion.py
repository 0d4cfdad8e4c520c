"""Completion handling: runs the optional command once the deadline is reached.

Command failures never propagate from here; they end up in the
`CompletionReport` and the CLI decides what to do with the exit status.
"""

from __future__ import annotations

import logging

from core.domain.errors import CommandExecutionError
from core.domain.models import CompletionReport, ExecutionResult, LoopOutcome, LoopStatus
from core.interfaces.runner import CommandRunner

logger = logging.getLogger(__name__)


class CompletionHandler:
    """Fires only for loops that ended in `COMPLETED`."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def on_complete(self, outcome: LoopOutcome, command: str | None = None) -> CompletionReport | None:
        if outcome.status is not LoopStatus.COMPLETED:
            logger.debug("Skipping completion handler (status=%s)", outcome.status.value)
            return None

        if not command or not command.strip():
            return CompletionReport()

        logger.debug("Executing completion command: %s", command)
        try:
            result = self._runner.run(command)
        except CommandExecutionError as exc:
            logger.warning("Failed to execute command: %s", exc)
            result = ExecutionResult(command=command, success=False, error=str(exc))
        else:
            if not result.success:
                logger.warning("Command exited with status %s", result.returncode)

        return CompletionReport(command=command, result=result)
