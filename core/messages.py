"""
core/messages.py
────────────────────────────────────────────────────────────────────────
User-facing Spanish strings. Validation messages are keyed by error kind
(and by field where one kind is shared by several fields); placeholders
are what date helpers return instead of raising.

The text is part of the public contract: clients match on it, so do not
reword without coordinating with the front-end.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    invalid_enum = "InvalidEnum"
    too_short = "TooShort"
    negative = "Negative"
    too_small = "TooSmall"
    not_numeric = "NotNumeric"


# (kind, field) first, then (kind, None) as the generic fallback
MESSAGES: dict[tuple[ErrorKind, str | None], str] = {
    (ErrorKind.invalid_enum, "type"): "Tipo de comida no válido",
    (ErrorKind.too_short, "name"): "El nombre debe tener al menos 2 caracteres",
    (ErrorKind.negative, "calories"): "Las calorías no pueden ser negativas",
    (ErrorKind.negative, "waterIntake"): "La cantidad de agua no puede ser negativa",
    (ErrorKind.too_small, "duration"): "La duración debe ser mayor a 0",
    (ErrorKind.not_numeric, None): "Debe ser un número válido",
}


def message_for(kind: ErrorKind, field: str | None = None) -> str:
    try:
        return MESSAGES[(kind, field)]
    except KeyError:
        return MESSAGES.get((kind, None), kind.value)


# ─── placeholders ─────────────────────────────────────────────────────
INVALID_DATE = "Fecha inválida"
INVALID_DAY = "Día inválido"
NO_COMMENTS = "No hay comentarios"
