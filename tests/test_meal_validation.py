# tests/test_meal_validation.py
from __future__ import annotations

import pytest

from core.meal_validation import effective_defaults, merge_input, validate_meal
from core.messages import ErrorKind
from core.models.meal import MealEntry, MealType

EXISTING = MealEntry(
    type=MealType.LUNCH,
    name="Lentejas",
    calories=0,
    duration=20,
    water_intake=0.5,
    notes="sin sal",
)


def _kinds(result) -> dict[str, ErrorKind]:
    return {e.field: e.kind for e in result.errors}


# ── happy path ───────────────────────────────────────────────────────
def test_blank_calories_is_absent_not_zero():
    r = validate_meal({"type": "breakfast", "name": "Avena", "calories": "", "duration": "15"})
    assert r.ok
    assert r.entry.type is MealType.BREAKFAST
    assert r.entry.calories is None
    assert r.entry.duration == 15


def test_labels_and_member_names_both_accepted():
    assert validate_meal({"type": "Media Tarde", "name": "Fruta"}).entry.type is MealType.AFTERNOON_SNACK
    assert validate_meal({"type": "morning_snack", "name": "Fruta"}).entry.type is MealType.MORNING_SNACK


def test_text_fields_trimmed_and_blank_dropped():
    r = validate_meal(
        {"type": "Cena", "name": "  Sopa  ", "description": "   ", "time": "21:00", "notes": ""}
    )
    assert r.entry.name == "Sopa"
    assert r.entry.description is None
    assert r.entry.time == "21:00"
    assert r.entry.notes is None


def test_water_intake_camel_case_key():
    r = validate_meal({"type": "Comida", "name": "Arroz", "waterIntake": "0.75"})
    assert r.entry.water_intake == pytest.approx(0.75)


def test_integer_fields_truncate_decimals():
    r = validate_meal({"type": "Comida", "name": "Arroz", "calories": "350.9"})
    assert r.entry.calories == 350


# ── boundaries ───────────────────────────────────────────────────────
@pytest.mark.parametrize("value, ok", [(0, False), ("0", False), (1, True), ("1", True)])
def test_duration_lower_bound(value, ok):
    r = validate_meal({"type": "Cena", "name": "Pasta", "duration": value})
    assert r.ok is ok
    if not ok:
        assert _kinds(r) == {"duration": ErrorKind.too_small}
        assert r.errors[0].message == "La duración debe ser mayor a 0"


@pytest.mark.parametrize("value, ok", [(-1, False), ("-1", False), (0, True), ("0", True)])
def test_calories_lower_bound(value, ok):
    r = validate_meal({"type": "Cena", "name": "Pasta", "calories": value})
    assert r.ok is ok
    if ok:
        assert r.entry.calories == 0
    else:
        assert r.errors[0].message == "Las calorías no pueden ser negativas"


def test_negative_water():
    r = validate_meal({"type": "Cena", "name": "Pasta", "waterIntake": -0.1})
    assert _kinds(r) == {"waterIntake": ErrorKind.negative}
    assert r.errors[0].message == "La cantidad de agua no puede ser negativa"


@pytest.mark.parametrize("name", ["", " ", "A", "  B  ", None])
def test_short_names_rejected(name):
    r = validate_meal({"type": "Cena", "name": name})
    assert r.entry is None
    assert _kinds(r) == {"name": ErrorKind.too_short}
    assert r.errors[0].message == "El nombre debe tener al menos 2 caracteres"


# ── failures ─────────────────────────────────────────────────────────
def test_invalid_type_and_negative_calories_reported_together():
    r = validate_meal({"type": "desayuno-invalido", "name": "Ok", "calories": "-5"})
    assert r.entry is None
    assert _kinds(r) == {"type": ErrorKind.invalid_enum, "calories": ErrorKind.negative}
    assert r.errors_by_field()["type"][0].message == "Tipo de comida no válido"


def test_non_numeric_text_fails():
    r = validate_meal({"type": "Cena", "name": "Pasta", "calories": "abc", "duration": True})
    assert _kinds(r) == {"calories": ErrorKind.not_numeric, "duration": ErrorKind.not_numeric}


@pytest.mark.parametrize("raw", [None, [], "breakfast", 42])
def test_malformed_payload_never_raises(raw):
    r = validate_meal(raw)
    assert not r.ok
    assert _kinds(r) == {"name": ErrorKind.too_short}


# ── defaults ─────────────────────────────────────────────────────────
def test_defaults_for_new_meal():
    d = effective_defaults()
    assert d["type"] is MealType.BREAKFAST
    assert d["name"] == ""
    assert d["calories"] is None


def test_defaults_keep_existing_zero_calories():
    d = effective_defaults(EXISTING)
    assert d["calories"] == 0
    assert d["type"] is MealType.LUNCH


def test_edit_fills_unsent_fields_from_existing():
    r = validate_meal({"name": "Lentejas estofadas"}, existing=EXISTING)
    assert r.ok
    assert r.entry.name == "Lentejas estofadas"
    assert r.entry.calories == 0
    assert r.entry.duration == 20
    assert r.entry.notes == "sin sal"


def test_edit_can_clear_optional_field():
    r = validate_meal({"notes": ""}, existing=EXISTING)
    assert r.entry.notes is None


def test_locked_type_overrides_submitted_type():
    r = validate_meal({"type": "Cena", "name": "Tostadas"}, locked_type=MealType.BREAKFAST)
    assert r.entry.type is MealType.BREAKFAST


def test_merge_ignores_unknown_keys():
    merged = merge_input({"userId": 3, "name": "Té"}, effective_defaults())
    assert "user_id" not in merged
    assert merged["name"] == "Té"


# ── blank numbers / overflow ─────────────────────────────────────────
@pytest.mark.parametrize("key, attr", [
    ("calories", "calories"), ("duration", "duration"), ("waterIntake", "water_intake"),
])
@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_numeric_fields_are_absent(key, attr, blank):
    raw = {"type": "Cena", "name": "Sopa"}
    if blank is not None:
        raw[key] = blank
    r = validate_meal(raw)
    assert r.ok
    assert getattr(r.entry, attr) is None


def test_water_too_large_for_a_float_is_not_numeric():
    r = validate_meal({"type": "Cena", "name": "Sopa", "waterIntake": "1e400"})
    assert r.entry is None
    assert _kinds(r) == {"waterIntake": ErrorKind.not_numeric}
    assert r.errors[0].message == "Debe ser un número válido"
