"""Lectura de teclas con timeout.

- POSIX: `tty.setcbreak` + `select` sobre el descriptor de stdin.
- Windows: `msvcrt.kbhit/getch` con sondeo corto hasta agotar el timeout.
- Sin TTY (pipes, CI): `NullKeyReader`, que nunca devuelve teclas.

`RawKeyReader` es un context manager: el modo original de la terminal se
restaura siempre al salir, incluso si el bucle aborta con una excepción.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from typing import TextIO

from core.domain.errors import TerminalIOError

IS_WINDOWS = sys.platform == "win32"

if IS_WINDOWS:
    import msvcrt
else:
    import select
    import termios
    import tty

logger = logging.getLogger(__name__)

# Granularidad del sondeo en Windows (no hay select sobre la consola).
_WINDOWS_POLL_STEP = 0.01


class NullKeyReader:
    """Key reader for non-interactive stdin."""

    def __enter__(self) -> "NullKeyReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def read_key(self, timeout: float) -> str | None:
        return None


class RawKeyReader:
    """Reads single key presses from a TTY in cbreak mode."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdin
        self._fd: int | None = None
        self._old_settings: list | None = None

    def __enter__(self) -> "RawKeyReader":
        if IS_WINDOWS:
            return self
        try:
            self._fd = self._stream.fileno()
            self._old_settings = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        except (termios.error, OSError, ValueError) as exc:
            raise TerminalIOError(f"Failed to enter raw mode: {exc}") from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is None:
            self.restore()
            return
        # Ya hay un error en curso: no lo tapamos con el fallo de restauración.
        try:
            self.restore()
        except TerminalIOError:
            logger.warning("Could not restore terminal mode", exc_info=True)

    def restore(self) -> None:
        if IS_WINDOWS or self._fd is None or self._old_settings is None:
            return
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_settings)
        except (termios.error, OSError) as exc:
            raise TerminalIOError(f"Failed to restore terminal mode: {exc}") from exc
        finally:
            self._old_settings = None

    def read_key(self, timeout: float) -> str | None:
        if IS_WINDOWS:
            return self._read_windows(timeout)
        return self._read_posix(timeout)

    def _read_posix(self, timeout: float) -> str | None:
        if self._fd is None:
            raise TerminalIOError("Key reader used outside of its context")
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            if not ready:
                return None
            data = os.read(self._fd, 1)
        except OSError as exc:
            raise TerminalIOError(f"Failed to read key: {exc}") from exc
        if not data:
            return None
        return data.decode("utf-8", errors="replace")

    def _read_windows(self, timeout: float) -> str | None:
        deadline = time.monotonic() + timeout
        while True:
            if msvcrt.kbhit():
                char = msvcrt.getwch()
                if char in ("\x00", "\xe0"):
                    # Tecla especial: descartamos el segundo código.
                    msvcrt.getwch()
                    return None
                return char
            if time.monotonic() >= deadline:
                return None
            time.sleep(_WINDOWS_POLL_STEP)


def open_key_reader(stream: TextIO | None = None) -> RawKeyReader | NullKeyReader:
    """Raw reader on an interactive stdin, null reader otherwise."""

    stream = stream or sys.stdin
    try:
        interactive = stream.isatty()
    except (AttributeError, ValueError):
        interactive = False
    if not interactive:
        logger.debug("stdin is not a TTY; quit key disabled")
        return NullKeyReader()
    return RawKeyReader(stream)
