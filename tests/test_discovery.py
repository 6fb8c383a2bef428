"""Tests for dataset file collection."""

import pytest

from contest_validator.discovery import CollectionError, collect


def test_collects_sorted_json_files(dataset):
    dataset.add_handle("zed")
    dataset.add_handle("amy")
    dataset.write_raw(dataset.handles_dir / "notes.txt", "ignored")
    dataset.add_avatar("avatars/amy.png")
    dataset.add_org("Acme")

    files = collect(dataset.settings())

    assert [p.name for p in files.handles] == ["amy.json", "zed.json"]
    assert [p.name for p in files.orgs] == ["acme.json"]
    assert files.contests.name == "contests.csv"
    assert files.findings.name == "findings.json"


def test_empty_directories_are_valid(dataset):
    files = collect(dataset.settings())
    assert files.handles == ()
    assert files.orgs == ()


def test_missing_root_raises(tmp_path):
    from contest_validator.config import Settings

    with pytest.raises(CollectionError, match="Dataset root not found"):
        collect(Settings(data_root=tmp_path / "missing"))


def test_missing_handles_directory_raises(dataset):
    dataset.handles_dir.rmdir()
    with pytest.raises(CollectionError, match="handles directory"):
        collect(dataset.settings())


def test_missing_findings_file_raises(dataset):
    (dataset.root / "findings" / "findings.json").unlink()
    with pytest.raises(CollectionError, match="findings file"):
        collect(dataset.settings())
