"""Shared fixtures: a throwaway dataset laid out under tmp_path."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

import pytest

from contest_validator.config import (
    CONFIG_PATH_ENV_VAR,
    DATA_ROOT_ENV_VAR,
    WARN_ONLY_ENV_VAR,
    Settings,
)

CONTEST_COLUMNS = ["contestid", "title", "sponsor", "start_time", "end_time", "amount"]


class DatasetBuilder:
    """Writes dataset files the way authors lay them out in _data/."""

    def __init__(self, root: Path):
        self.root = root
        self.handles_dir = root / "handles"
        self.orgs_dir = root / "orgs"
        self.handles_dir.mkdir(parents=True)
        self.orgs_dir.mkdir(parents=True)
        (root / "contests").mkdir()
        (root / "findings").mkdir()
        self.set_contests([])
        self.set_findings([])

    def add_handle(self, handle: str, filename: str | None = None, **fields: Any) -> Path:
        data = {"handle": handle, **fields}
        return self.write_json(self.handles_dir / (filename or f"{handle}.json"), data)

    def add_avatar(self, relative: str) -> Path:
        path = self.handles_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x89PNG")
        return path

    def add_org(self, name: str, image: str | None = "logo.png", **fields: Any) -> Path:
        data: dict[str, Any] = {"name": name, **fields}
        if image is not None:
            data["image"] = image
            logo = self.orgs_dir / image
            logo.parent.mkdir(parents=True, exist_ok=True)
            logo.write_bytes(b"\x89PNG")
        return self.write_json(self.orgs_dir / f"{name.lower()}.json", data)

    def set_contests(self, rows: list[dict[str, Any]]) -> Path:
        path = self.root / "contests" / "contests.csv"
        with path.open("w", encoding="utf-8", newline="") as fh:
            writer = csv.DictWriter(fh, fieldnames=CONTEST_COLUMNS, restval="")
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
        return path

    def set_findings(self, findings: list[dict[str, Any]]) -> Path:
        return self.write_json(self.root / "findings" / "findings.json", findings)

    def write_json(self, path: Path, data: Any) -> Path:
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def write_raw(self, path: Path, text: str) -> Path:
        path.write_text(text, encoding="utf-8")
        return path

    def settings(self, **overrides: Any) -> Settings:
        return Settings(data_root=self.root, **overrides)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (CONFIG_PATH_ENV_VAR, DATA_ROOT_ENV_VAR, WARN_ONLY_ENV_VAR, "GITHUB_STEP_SUMMARY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def dataset(tmp_path: Path) -> DatasetBuilder:
    return DatasetBuilder(tmp_path / "_data")


@pytest.fixture
def valid_dataset(dataset: DatasetBuilder) -> DatasetBuilder:
    """A small dataset where every cross-reference resolves."""
    dataset.add_avatar("avatars/alice.png")
    dataset.add_handle("alice", image="./avatars/alice.png")
    dataset.add_handle("bob", image="")
    dataset.add_handle("team1", members=["alice", "bob"])
    dataset.add_org("Acme", image="acme.png", link="https://acme.example")
    dataset.add_org("Globex", image="globex.png")
    dataset.set_contests(
        [
            {"contestid": "1", "title": "Acme contest", "sponsor": "Acme", "amount": "$50,000"},
            {"contestid": "2", "title": "Globex contest", "sponsor": "Globex"},
        ]
    )
    dataset.set_findings(
        [
            {"handle": "alice", "contest": 1},
            {"handle": "team1", "contest": 2},
            {"handle": "bob", "contest": 1},
        ]
    )
    return dataset
