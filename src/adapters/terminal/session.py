"""Sesión de terminal con adquisición/liberación acotada.

`open_terminal` agrupa el lector de teclas (raw mode) y el renderer
(pantalla alternativa o línea simple) en un único context manager: al salir,
por la vía normal o por una excepción, ambos se liberan en orden inverso.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from functools import partial
from typing import Iterator, TextIO

from rich.console import Console

from adapters.terminal.keyboard import open_key_reader
from adapters.terminal.renderers import GaugeTerminal, PlainTerminal
from core.config import RendererKind
from core.domain.errors import TerminalIOError
from core.domain.models import Deadline
from core.interfaces.terminal import CountdownTerminal

logger = logging.getLogger(__name__)


@contextmanager
def open_terminal(
    deadline: Deadline,
    *,
    renderer: RendererKind = RendererKind.AUTO,
    console: Console | None = None,
    stdin: TextIO | None = None,
    hint: str | None = None,
) -> Iterator[CountdownTerminal]:
    console = console or Console()
    kind = renderer.resolve(interactive=console.is_terminal)
    logger.debug("Opening %s terminal", kind.value)

    try:
        with ExitStack() as stack:
            keys = stack.enter_context(open_key_reader(stdin))
            if kind is RendererKind.GAUGE:
                terminal: CountdownTerminal = stack.enter_context(
                    GaugeTerminal(deadline, keys, console=console, hint=hint)
                )
            else:
                terminal = stack.enter_context(PlainTerminal(deadline, keys, console=console))
            yield terminal
    except OSError as exc:
        raise TerminalIOError(f"Terminal error: {exc}") from exc


def terminal_factory(
    *,
    renderer: RendererKind,
    console: Console | None = None,
    hint: str | None = None,
):
    """`Deadline -> context manager` callable for the countdown pipeline."""

    return partial(open_terminal, renderer=renderer, console=console, hint=hint)
