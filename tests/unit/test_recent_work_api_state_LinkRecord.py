"""LinkRecord validation and serialization."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from recent_work.api.state.LinkRecord import LinkRecord

pytestmark = pytest.mark.state

TS = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_accepts_field_names_and_aliases():
    by_name = LinkRecord(original_path="/a/x.txt", timestamp=TS, symlink_name="x.txt")
    by_alias = LinkRecord.model_validate(
        {"originalPath": "/a/x.txt", "timestamp": "2026-01-01T12:00:00+00:00", "symlinkName": "x.txt"}
    )
    assert by_name == by_alias


def test_to_json_dict_uses_camel_case():
    record = LinkRecord(original_path="/a/x.txt", timestamp=TS, symlink_name="x.txt")
    data = record.to_json_dict()
    assert data["originalPath"] == "/a/x.txt"
    assert data["symlinkName"] == "x.txt"
    assert datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00")) == TS


def test_naive_timestamp_taken_as_utc():
    record = LinkRecord(original_path="/a", timestamp=datetime(2026, 1, 1, 12, 0), symlink_name="a")
    assert record.timestamp == TS


def test_offset_timestamp_normalized_to_utc():
    eastern = timezone(timedelta(hours=-5))
    record = LinkRecord(original_path="/a", timestamp=datetime(2026, 1, 1, 7, 0, tzinfo=eastern), symlink_name="a")
    assert record.timestamp == TS
    assert record.timestamp.utcoffset() == timedelta(0)


def test_empty_fields_rejected():
    with pytest.raises(ValidationError):
        LinkRecord(original_path="", timestamp=TS, symlink_name="a")
    with pytest.raises(ValidationError):
        LinkRecord(original_path="/a", timestamp=TS, symlink_name="")


def test_touched_returns_copy():
    record = LinkRecord(original_path="/a", timestamp=TS, symlink_name="a")
    later = record.touched(TS + timedelta(hours=1))
    assert later.timestamp == TS + timedelta(hours=1)
    assert record.timestamp == TS
    assert later.symlink_name == record.symlink_name


def test_is_broken(tmp_path):
    target = tmp_path / "x.txt"
    target.write_text("x")
    record = LinkRecord(original_path=str(target), timestamp=TS, symlink_name="x.txt")
    assert record.is_broken() is False
    target.unlink()
    assert record.is_broken() is True
