"""Tests for AccessControlledView's six mediated operations."""
import pytest

from fieldguard.domain.descriptor import FieldDescriptor
from fieldguard.domain.errors import (
    AccessError,
    NonConfigurableField,
    PropertyInaccessible,
    ReadOnlyField,
)
from fieldguard.domain.predicates import prefix_predicate
from fieldguard.domain.types import UNDEFINED, Symbol
from fieldguard.view.access_view import AccessControlledView

PRIVATE_OPS = [
    ("read", lambda v, k: v.read(k)),
    ("write", lambda v, k: v.write(k, "changed")),
    ("remove", lambda v, k: v.remove(k)),
    ("define", lambda v, k: v.define(k, FieldDescriptor("changed"))),
]


# ---------------------------------------------------------------------------
# End-to-end example
# ---------------------------------------------------------------------------

def test_example_record(plain_record):
    view = AccessControlledView(plain_record)
    assert view.read("name") == "ok"
    with pytest.raises(PropertyInaccessible):
        view.read("_secret")
    assert view.contains("_secret") is False
    assert view.list_keys() == ["name"]


# ---------------------------------------------------------------------------
# Private keys
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name,op", PRIVATE_OPS, ids=[n for n, _ in PRIVATE_OPS])
def test_private_operations_fail_without_side_effects(record, view, name, op):
    before = dict(record)
    with pytest.raises(PropertyInaccessible, match="property is inaccessible") as exc:
        op(view, "_token")
    assert exc.value.key == "_token"
    assert exc.value.operation == name
    assert dict(record) == before


@pytest.mark.parametrize("name,op", PRIVATE_OPS, ids=[n for n, _ in PRIVATE_OPS])
def test_private_operations_fail_for_absent_keys(record, view, name, op):
    with pytest.raises(PropertyInaccessible):
        op(view, "_test")
    assert "_test" not in record


def test_property_inaccessible_is_access_error():
    assert issubclass(PropertyInaccessible, AccessError)


def test_view_stays_usable_after_denial(view):
    with pytest.raises(PropertyInaccessible):
        view.read("_token")
    assert view.read("title") == "public value"
    assert view.violations == 1


def test_contains_hides_existing_private_key(record, view):
    assert "_token" in record
    assert view.contains("_token") is False


def test_private_field_still_mutable_on_record(record, view):
    record["_token"] = "updated"
    assert record["_token"] == "updated"
    with pytest.raises(PropertyInaccessible):
        view.read("_token")


# ---------------------------------------------------------------------------
# Public keys
# ---------------------------------------------------------------------------

def test_write_then_read(view):
    assert view.write("exposed", True) is True
    assert view.read("exposed") is True


def test_write_passes_through_to_record(record, view):
    view.write("alias", "alias")
    assert record["alias"] == "alias"


def test_direct_record_write_is_visible(record, view):
    record["later"] = 5
    assert view.read("later") == 5
    assert view.contains("later") is True
    assert "later" in view.list_keys()


def test_read_absent_key_returns_undefined(view):
    assert view.read("somethingElse") is UNDEFINED


def test_contains_public_key(view):
    assert view.contains("title") is True
    assert view.contains("missing") is False


def test_remove_public_key(record, view):
    assert view.remove("title") is True
    assert "title" not in record
    assert view.read("title") is UNDEFINED


def test_remove_absent_public_key_is_noop(record, view):
    before = dict(record)
    assert view.remove("missing") is True
    assert dict(record) == before


def test_define_on_record_keeps_flags(record, view):
    view.define("exposed", FieldDescriptor(True, writable=False, enumerable=False))
    desc = record.describe("exposed")
    assert desc.value is True
    assert desc.writable is False
    assert desc.enumerable is False


def test_define_on_plain_mapping_stores_value(plain_record):
    view = AccessControlledView(plain_record)
    view.define("exposed", FieldDescriptor(1, writable=False))
    assert plain_record["exposed"] == 1


def test_define_requires_descriptor(view):
    with pytest.raises(TypeError, match="FieldDescriptor"):
        view.define("exposed", {"value": 1})


# ---------------------------------------------------------------------------
# Enumeration
# ---------------------------------------------------------------------------

def test_list_keys_filters_private_and_keeps_symbols(view, symbol_id):
    assert view.list_keys() == ["title", symbol_id]


def test_list_keys_preserves_record_order(view, symbol_id):
    view.write("b", 1)
    view.write("a", 2)
    assert view.list_keys() == ["title", symbol_id, "b", "a"]


def test_list_keys_is_idempotent(view):
    assert view.list_keys() == view.list_keys()


def test_list_keys_includes_non_enumerable_public_fields(record, view):
    record.define("hidden", FieldDescriptor(1, enumerable=False))
    assert "hidden" in view.list_keys()


# ---------------------------------------------------------------------------
# Symbols and custom predicates
# ---------------------------------------------------------------------------

def test_symbol_keys_are_never_filtered(record, symbol_id):
    sym = Symbol("_private_looking")
    record[sym] = "visible"
    view = AccessControlledView(record, lambda key: True)
    assert view.read(sym) == "visible"
    assert view.contains(sym) is True
    assert view.list_keys() == [symbol_id, sym]


def test_symbol_write_and_remove(record, view):
    sym = Symbol()
    view.write(sym, 1)
    assert record[sym] == 1
    view.remove(sym)
    assert sym not in record


def test_custom_predicate(plain_record):
    plain_record["internal_id"] = 9
    view = AccessControlledView(plain_record, lambda key: key.startswith("internal"))
    assert view.read("_secret") == "x"
    with pytest.raises(PropertyInaccessible):
        view.read("internal_id")
    assert view.list_keys() == ["_secret", "name"]


def test_explicit_marker_predicate(plain_record):
    plain_record["$token"] = "t"
    view = AccessControlledView(plain_record, prefix_predicate("$"))
    assert view.contains("$token") is False
    assert view.read("_secret") == "x"


def test_record_must_be_mutable_mapping():
    with pytest.raises(TypeError, match="MutableMapping"):
        AccessControlledView([("a", 1)])


def test_predicate_must_be_callable(plain_record):
    with pytest.raises(TypeError, match="callable"):
        AccessControlledView(plain_record, "_")


def test_violation_limit_needs_revocable_view(plain_record):
    from fieldguard.domain.config import ViewConfig

    with pytest.raises(ValueError, match="revocable"):
        AccessControlledView(plain_record, config=ViewConfig(violation_limit=2))


# ---------------------------------------------------------------------------
# Record descriptor rules seen through a view
# ---------------------------------------------------------------------------

def test_write_to_read_only_field_raises_record_error(record, view):
    record.define("id", FieldDescriptor(7, writable=False))
    with pytest.raises(ReadOnlyField):
        view.write("id", 8)
    assert record["id"] == 7
    assert view.violations == 0
    assert view.read("id") == 7


def test_remove_non_configurable_field_raises_record_error(record, view):
    record.define("id", FieldDescriptor(7, configurable=False))
    with pytest.raises(NonConfigurableField):
        view.remove("id")
    assert "id" in record
    assert view.violations == 0
    assert view.contains("id") is True


def test_redefine_non_configurable_field_raises_record_error(record, view):
    record.define("id", FieldDescriptor(7, configurable=False))
    with pytest.raises(NonConfigurableField):
        view.define("id", FieldDescriptor(8))
    assert record["id"] == 7
    assert view.violations == 0
    view.write("other", 1)
    assert view.read("other") == 1
