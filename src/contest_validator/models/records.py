"""Record models for handles, organizations, contests and findings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(slots=True, frozen=True)
class HandleRecord:
    """A registered participant, or a team when ``members`` is set."""

    path: Path
    handle: str | None
    image: str | None = None
    members: tuple[str, ...] | None = None

    @property
    def has_handle(self) -> bool:
        return self.handle is not None

    @property
    def is_team(self) -> bool:
        return self.members is not None

    @classmethod
    def from_dict(cls, path: Path, data: dict[str, Any]) -> HandleRecord:
        members = data.get("members")
        return cls(
            path=path,
            handle=data.get("handle"),
            image=data.get("image"),
            members=tuple(members) if members is not None else None,
        )


@dataclass(slots=True, frozen=True)
class OrganizationRecord:
    """A sponsoring organization referenced by contests through ``name``."""

    path: Path
    name: str | None
    image: str | None = None
    link: str | None = None

    @property
    def has_image(self) -> bool:
        return self.image is not None

    @classmethod
    def from_dict(cls, path: Path, data: dict[str, Any]) -> OrganizationRecord:
        return cls(
            path=path,
            name=data.get("name"),
            image=data.get("image"),
            link=data.get("link"),
        )


@dataclass(slots=True, frozen=True)
class ContestRecord:
    """One row of the contests table.

    Only ``contestid`` and ``sponsor`` are validated; the remaining columns
    (title, start_time, end_time, amount, ...) are kept in ``fields`` as-is.
    """

    path: Path
    row: int
    contestid: int | float
    sponsor: str
    fields: dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def location(self) -> str:
        return f"{self.path}:row {self.row}"


@dataclass(slots=True, frozen=True)
class FindingRecord:
    """A submitted result linking a handle to a contest."""

    path: Path
    index: int
    handle: str
    contest: int | float

    @property
    def location(self) -> str:
        return f"{self.path}[{self.index}]"
