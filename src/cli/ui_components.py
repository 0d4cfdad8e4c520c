"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica del comando con detalles visuales.
- Los paneles de finalización/error se reutilizan desde la CLI y los tests.
"""

from __future__ import annotations

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from core.domain.models import CompletionReport, Deadline, ExecutionResult


def build_start_line(deadline: Deadline, total_seconds: float, *, quit_keys: str) -> Text:
    """Línea previa al bucle: destino + cómo salir."""

    text = Text()
    text.append("Endzeit: ", style="bold cyan")
    text.append(str(deadline))
    text.append(f"  ({total_seconds:.0f}s)", style="dim")
    text.append(f"  •  press '{quit_keys[0]}' to quit", style="dim")
    return text


def _output_block(title: str, content: str, style: str) -> Text:
    body = Text()
    body.append(f"{title}:\n", style=f"bold {style}")
    body.append(content.rstrip("\n"))
    return body


def build_execution_panel(result: ExecutionResult) -> Panel:
    """Panel con el resultado del comando de finalización."""

    parts: list[Text] = []
    header = Text()
    header.append("$ ", style="dim")
    header.append(result.command, style="bold")
    parts.append(header)

    if result.error:
        parts.append(Text(f"Failed to execute command: {result.error}", style="red"))
    else:
        status_style = "green" if result.success else "red"
        parts.append(Text(f"Exit status: {result.returncode}", style=status_style))
    if result.stdout.strip():
        parts.append(_output_block("stdout", result.stdout, "white"))
    if result.stderr.strip():
        parts.append(_output_block("stderr", result.stderr, "red"))

    border = "green" if result.success else "red"
    title = "Command succeeded" if result.success else "Command failed"
    return Panel(Group(*parts), title=title, border_style=border)


def build_completion_panel(report: CompletionReport) -> Panel:
    """Panel final cuando la cuenta atrás termina de forma natural."""

    title = Text(report.message, style="bold yellow")
    if report.result is None:
        return Panel(Text("Time's up!"), title=title, border_style="yellow")
    return Panel(build_execution_panel(report.result), title=title, border_style="yellow")


def error_markup(message: str) -> str:
    return f"[bold red]Error:[/bold red] {escape(message)}"
