"""
core/meal_validation.py
────────────────────────────────────────────────────────────────────────
Turns a raw, loosely-typed meal form payload into a `MealEntry`.

Pipeline:

1. `effective_defaults()`  → what the form starts with (edit / create /
   locked category)
2. `merge_input()`         → raw keys override defaults, lock wins
3. `validate_meal()`       → coercion + field rules, returns a
   `MealValidation` holding either the entry or the field errors

Nothing here raises for bad input and nothing here does I/O.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel, to_snake
from pydantic_core import PydanticCustomError

from config import settings
from core.messages import ErrorKind, message_for
from core.models.meal import MealEntry, MealType

_LOG = logging.getLogger(__name__)

FIELDS = (
    "type", "name", "description", "calories",
    "time", "duration", "water_intake", "notes",
)
MIN_NAME_LENGTH = 2

# ──────────────────────────────────────────────────────────────────────
#  Result types
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class FieldError:
    field: str          # public (camelCase) field name
    kind: ErrorKind
    message: str


@dataclass
class MealValidation:
    entry: MealEntry | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.entry is not None and not self.errors

    def errors_by_field(self) -> dict[str, list[FieldError]]:
        out: dict[str, list[FieldError]] = {}
        for err in self.errors:
            out.setdefault(err.field, []).append(err)
        return out


# ──────────────────────────────────────────────────────────────────────
#  Coercion helpers
# ──────────────────────────────────────────────────────────────────────
def _fail(kind: ErrorKind, name: str) -> PydanticCustomError:
    return PydanticCustomError(kind.value, message_for(kind, to_camel(name)))


def _text(value: Any) -> str | None:
    """Trimmed text; blank and absent both become None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (str, int, float, Decimal)):
        text = str(value).strip()
        return text or None
    _LOG.debug("dropping non-text value of type %s", type(value).__name__)
    return None


def _number(value: Any, name: str) -> Decimal | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise _fail(ErrorKind.not_numeric, name)
    if isinstance(value, float) and not math.isfinite(value):
        raise _fail(ErrorKind.not_numeric, name)
    if isinstance(value, (int, float, Decimal)):
        num = Decimal(str(value))
    elif isinstance(value, str):
        if not value.strip():
            return None
        try:
            num = Decimal(value.strip())
        except InvalidOperation:
            raise _fail(ErrorKind.not_numeric, name) from None
    else:
        raise _fail(ErrorKind.not_numeric, name)
    if not num.is_finite():
        raise _fail(ErrorKind.not_numeric, name)
    return num


def _integer(value: Any, name: str) -> int | None:
    num = _number(value, name)
    return None if num is None else int(num)  # truncates toward zero


# ──────────────────────────────────────────────────────────────────────
#  Form model
# ──────────────────────────────────────────────────────────────────────
class _MealForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: MealType
    name: str
    description: str | None = None
    calories: int | None = None
    time: str | None = None
    duration: int | None = None
    water_intake: float | None = None
    notes: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, v: Any) -> MealType:
        meal_type = MealType.lookup(v)
        if meal_type is None:
            raise _fail(ErrorKind.invalid_enum, "type")
        return meal_type

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> str:
        text = _text(v) or ""
        if len(text) < MIN_NAME_LENGTH:
            raise _fail(ErrorKind.too_short, "name")
        return text

    @field_validator("description", "time", "notes", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        return _text(v)

    @field_validator("calories", mode="before")
    @classmethod
    def coerce_calories(cls, v: Any) -> int | None:
        kcal = _integer(v, "calories")
        if kcal is not None and kcal < 0:
            raise _fail(ErrorKind.negative, "calories")
        return kcal

    @field_validator("duration", mode="before")
    @classmethod
    def coerce_duration(cls, v: Any) -> int | None:
        minutes = _integer(v, "duration")
        if minutes is not None and minutes < 1:
            raise _fail(ErrorKind.too_small, "duration")
        return minutes

    @field_validator("water_intake", mode="before")
    @classmethod
    def coerce_water(cls, v: Any) -> float | None:
        litres = _number(v, "water_intake")
        if litres is None:
            return None
        if litres < 0:
            raise _fail(ErrorKind.negative, "water_intake")
        amount = float(litres)
        if not math.isfinite(amount):
            raise _fail(ErrorKind.not_numeric, "water_intake")
        return amount


# ──────────────────────────────────────────────────────────────────────
#  Defaults / merging
# ──────────────────────────────────────────────────────────────────────
def _fallback_type() -> MealType:
    return MealType.lookup(settings.default_meal_type) or MealType.BREAKFAST


def effective_defaults(
    existing: MealEntry | None = None,
    locked_type: MealType | None = None,
) -> dict[str, Any]:
    """
    Starting values of the form.

    Editing → the existing record's values (0 kcal stays 0).
    Creating → blanks, with `type` from the locked category if any.
    """
    defaults: dict[str, Any] = {name: None for name in FIELDS}
    defaults["name"] = ""
    if existing is not None:
        for name in FIELDS:
            defaults[name] = getattr(existing, name)
    defaults["type"] = (
        (existing.type if existing is not None else None)
        or locked_type
        or _fallback_type()
    )
    return defaults


def merge_input(
    raw: Mapping[str, Any] | None,
    defaults: Mapping[str, Any],
    locked_type: MealType | None = None,
) -> dict[str, Any]:
    values = dict(defaults)
    if raw is None:
        raw = {}
    elif not isinstance(raw, Mapping):
        _LOG.warning("meal payload is %s, not a mapping; ignoring it", type(raw).__name__)
        raw = {}

    for key, value in raw.items():
        if not isinstance(key, str):
            continue
        name = to_snake(key)
        if name in FIELDS:
            values[name] = value

    if locked_type is not None:
        values["type"] = defaults.get("type") or locked_type
    return values


# ──────────────────────────────────────────────────────────────────────
#  Public entrypoint
# ──────────────────────────────────────────────────────────────────────
def validate_meal(
    raw: Mapping[str, Any] | None,
    *,
    existing: MealEntry | None = None,
    locked_type: MealType | None = None,
) -> MealValidation:
    """Validate + normalize one form submission. Never raises on bad input."""
    defaults = effective_defaults(existing, locked_type)
    values = merge_input(raw, defaults, locked_type)

    try:
        form = _MealForm.model_validate(values)
    except ValidationError as exc:
        errors = [_to_field_error(err) for err in exc.errors()]
        _LOG.debug("meal rejected: %s", [(e.field, e.kind.value) for e in errors])
        return MealValidation(errors=errors)

    return MealValidation(entry=MealEntry(**form.model_dump()))


def _to_field_error(err: Mapping[str, Any]) -> FieldError:
    name = str(err["loc"][0])
    kind = ErrorKind(err["type"])
    public = to_camel(name)
    return FieldError(field=public, kind=kind, message=message_for(kind, public))
