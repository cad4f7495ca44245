import pytest

from osquery_encoding.business_logic.field_resolver import is_visible, osquery_tag, resolve_key
from osquery_encoding.models.field_entry import RecordField


def test_osquery_tag_builds_metadata():
    assert osquery_tag("pid") == {"osquery": "pid"}


@pytest.mark.parametrize("field, expected", [
    (RecordField(name="Name", value=1), "Name"),
    (RecordField(name="Name", value=1, tag=""), "Name"),
    (RecordField(name="Name", value=1, tag="column"), "column"),
    (RecordField(name="Name", value=1, tag="column,omitempty"), "column,omitempty"),
    (RecordField(name="Name", value=1, tag="-"), None),
    (RecordField(name="_name", value=1), None),
    (RecordField(name="_name", value=1, tag="column"), None),
])
def test_resolve_key(field, expected):
    assert resolve_key(field) == expected


def test_is_visible():
    assert is_visible("pid")
    assert is_visible("Pid")
    assert not is_visible("_pid")
    assert not is_visible("__pid")
