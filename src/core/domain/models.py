"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a la terminal ni a subprocesos.
- Los modelos inmutables (frozen) garantizan que el deadline y el desglose
  no cambien una vez calculados.

Nota:
- Estos modelos describen *qué* es el estado de la cuenta atrás, no *cómo*
  se dibuja.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Deadline(BaseModel):
    """Momento objetivo (wall-clock local) hacia el que corre la cuenta atrás."""

    model_config = ConfigDict(frozen=True)

    target: datetime = Field(
        ...,
        description="Fecha y hora local objetivo (naive, sin zona horaria).",
    )

    def __str__(self) -> str:
        return self.target.strftime("%Y-%m-%d %H:%M:%S")


class RemainingBreakdown(BaseModel):
    """Desglose del tiempo restante en unidades tipo calendario.

    Meses y años son aproximaciones de longitud fija (30 y 365 días).
    """

    model_config = ConfigDict(frozen=True)

    years: int = Field(default=0, ge=0, description="Años de 365 días.")
    months: int = Field(default=0, ge=0, description="Meses de 30 días.")
    weeks: int = Field(default=0, ge=0, description="Semanas de 7 días.")
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    seconds: int = Field(default=0, ge=0)


class LoopStatus(str, Enum):
    """Estados del bucle de cuenta atrás."""

    RUNNING = "running"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    @property
    def is_terminal(self) -> bool:
        return self is not LoopStatus.RUNNING


class CountdownState(BaseModel):
    """Foto de un tick: se recalcula en cada iteración y nunca se persiste."""

    total_seconds: float = Field(..., description="Duración total, fijada al arrancar.")
    elapsed_seconds: float = Field(..., ge=0.0, description="Tiempo transcurrido (reloj monotónico).")
    remaining_seconds: float = Field(..., ge=0.0)
    percentage: float = Field(..., ge=0.0, le=100.0)
    breakdown: RemainingBreakdown
    label: str = Field(..., description="Texto listo para mostrar junto al gauge.")

    @property
    def is_finished(self) -> bool:
        return self.elapsed_seconds >= self.total_seconds


class LoopOutcome(BaseModel):
    """Resultado final de `CountdownLoop.run`."""

    status: LoopStatus
    ticks: int = Field(default=0, ge=0, description="Número de ticks ejecutados.")
    last_state: CountdownState | None = Field(
        default=None,
        description="Último estado dibujado (None si no llegó a dibujarse nada).",
    )


class ExecutionResult(BaseModel):
    """Resultado del comando de finalización."""

    command: str = Field(..., min_length=1)
    success: bool = Field(default=False)
    returncode: int | None = Field(
        default=None,
        description="Exit status del proceso; None si no llegó a lanzarse.",
    )
    stdout: str = Field(default="")
    stderr: str = Field(default="")
    error: str | None = Field(
        default=None,
        description="Motivo del fallo al lanzar el proceso (spawn).",
    )


class CompletionReport(BaseModel):
    """Lo que la CLI muestra cuando la cuenta atrás termina de forma natural."""

    message: str = Field(default="Endzeit reached!")
    command: str | None = Field(default=None)
    result: ExecutionResult | None = Field(default=None)

    @property
    def succeeded(self) -> bool:
        return self.result is None or self.result.success
