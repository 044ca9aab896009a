from src.attendance_dashboard.attendance_dashboard.core.enums import ValueKind
from src.attendance_dashboard.attendance_dashboard.explorer.values import (
    MISSING,
    collate,
    display_text,
    kind_of,
    resolve_path,
    text_form,
)


def test_resolve_path_walks_nested_mappings():
    row = {"employee": {"profile": {"name": "Amy"}}, "tags": [{"label": "night"}]}

    assert resolve_path(row, "employee.profile.name") == "Amy"
    assert resolve_path(row, "tags.0.label") == "night"


def test_resolve_path_yields_missing_for_broken_chains():
    row = {"employee": {"profile": {"name": "Amy"}}, "code": 5, "tags": []}

    assert resolve_path(row, "nope") is MISSING
    assert resolve_path(row, "employee.address.city") is MISSING
    assert resolve_path(row, "code.digits") is MISSING
    assert resolve_path(row, "tags.3.label") is MISSING


def test_resolve_path_keeps_explicit_none():
    assert resolve_path({"a": None}, "a") is None
    assert resolve_path({"a": {"b": None}}, "a.b.c") is None


def test_kind_of_classifies_values():
    assert kind_of(None) is ValueKind.MISSING
    assert kind_of(MISSING) is ValueKind.MISSING
    assert kind_of("") is ValueKind.TEXT
    assert kind_of(3) is ValueKind.NUMBER
    assert kind_of(2.5) is ValueKind.NUMBER
    assert kind_of(True) is ValueKind.OTHER
    assert kind_of(["x"]) is ValueKind.OTHER


def test_display_text_uses_placeholder_only_for_absent_values():
    assert display_text(None) == "-"
    assert display_text(MISSING) == "-"
    assert display_text("") == ""
    assert display_text(0) == "0"
    assert display_text(None, placeholder="") == ""


def test_text_form_drops_trailing_zero_of_integral_floats():
    assert text_form(5.0) == "5"
    assert text_form(5.25) == "5.25"
    assert text_form(False) == "false"


def test_collate_orders_like_a_locale():
    assert collate("alice", "Amy") == -1
    assert collate("Bob", "alice") == 1
    assert collate("a", "A") == -1
    assert collate("école", "ecole") == 1
    assert collate("école", "f") == -1
    assert collate("same", "same") == 0
