"""Logging setup (stdlib `logging` + Rich).

Rich ya es la capa de presentación de la CLI; `RichHandler` mantiene los
logs legibles y en stderr para no ensuciar la línea de progreso en stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED = False


def configure_logging(level: str | int = logging.WARNING, *, console: Console | None = None) -> None:
    """Install a single `RichHandler` on the root logger.

    Calling it again only updates the level.
    """

    global _CONFIGURED

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)
    if _CONFIGURED:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    _CONFIGURED = True
