from adapters.terminal.keyboard import NullKeyReader, RawKeyReader, open_key_reader
from adapters.terminal.renderers import GaugeTerminal, PlainTerminal, plain_progress_line
from adapters.terminal.session import open_terminal, terminal_factory

__all__ = [
    "GaugeTerminal",
    "NullKeyReader",
    "PlainTerminal",
    "RawKeyReader",
    "open_key_reader",
    "open_terminal",
    "plain_progress_line",
    "terminal_factory",
]
