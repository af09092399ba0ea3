"""Tests for registry models."""

import pytest
from pydantic import ValidationError

from framework_kit.models.installed import InstalledFramework, InstalledFrameworksMetadata


def _record(framework_id: str, version: str = "1.0.0") -> InstalledFramework:
    return InstalledFramework(id=framework_id, version=version, installed_at="2025-01-01T00:00:00")


def test_not_customized_clears_customized_at() -> None:
    record = InstalledFramework(
        id="tdd",
        version="1.0.0",
        installed_at="2025-01-01T00:00:00",
        customized=False,
        customized_at="2025-01-02T00:00:00",
    )

    assert record.customized_at is None


def test_customized_without_timestamp_falls_back_to_installed_at() -> None:
    record = InstalledFramework(
        id="tdd", version="1.0.0", installed_at="2025-01-01T00:00:00", customized=True
    )

    assert record.customized is True
    assert record.customized_at == "2025-01-01T00:00:00"


def test_customized_without_any_timestamp_is_rejected() -> None:
    with pytest.raises(ValidationError):
        InstalledFramework.model_validate({"id": "tdd", "version": "1.0.0", "customized": True})


def test_as_customized_sets_both_fields() -> None:
    record = _record("tdd").as_customized("2025-03-01T00:00:00")

    assert record.customized is True
    assert record.customized_at == "2025-03-01T00:00:00"
    assert record.version == "1.0.0"


def test_with_framework_replaces_in_place() -> None:
    metadata = InstalledFrameworksMetadata(frameworks=[_record("a"), _record("b"), _record("c")])

    updated = metadata.with_framework(_record("b", "2.0.0"))

    assert [f.id for f in updated.frameworks] == ["a", "b", "c"]
    assert updated.frameworks[1].version == "2.0.0"
    # Original is untouched
    assert metadata.frameworks[1].version == "1.0.0"


def test_with_framework_appends_new_id() -> None:
    metadata = InstalledFrameworksMetadata(frameworks=[_record("a")])

    updated = metadata.with_framework(_record("z"))

    assert [f.id for f in updated.frameworks] == ["a", "z"]


def test_without_framework_drops_entry() -> None:
    metadata = InstalledFrameworksMetadata(frameworks=[_record("a"), _record("b")])

    assert [f.id for f in metadata.without_framework("a").frameworks] == ["b"]
    assert metadata.find("a") is not None
    assert metadata.find("missing") is None


def test_unparsed_entries_survive_unrelated_changes() -> None:
    raw = {"id": "legacy", "installed_at": "2024-01-01"}
    metadata = InstalledFrameworksMetadata(frameworks=[_record("a")], unparsed_entries=[raw])

    updated = metadata.with_framework(_record("b")).without_framework("a")

    assert updated.unparsed_entries == [raw]


def test_unparsed_entry_is_replaced_by_record_with_same_id() -> None:
    raw = {"id": "legacy", "installed_at": "2024-01-01"}
    metadata = InstalledFrameworksMetadata(unparsed_entries=[raw, "not-a-table"])

    updated = metadata.with_framework(_record("legacy"))

    assert updated.unparsed_entries == ["not-a-table"]
    assert updated.find("legacy") is not None
