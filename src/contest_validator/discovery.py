"""Dataset file discovery."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import Settings

logger = logging.getLogger(__name__)


class CollectionError(RuntimeError):
    """Raised when an expected data directory or file is entirely absent."""


@dataclass(slots=True, frozen=True)
class CollectedFiles:
    """Paths of every file the validator reads, per entity category."""

    handles: tuple[Path, ...]
    orgs: tuple[Path, ...]
    contests: Path
    findings: Path


def _json_files(directory: Path, category: str) -> tuple[Path, ...]:
    """Return the *.json files directly under directory, sorted by name.

    An empty directory is valid and yields no files.
    """
    if not directory.is_dir():
        raise CollectionError(f"Missing {category} directory: {directory}")
    found = tuple(sorted(p for p in directory.glob("*.json") if p.is_file()))
    logger.debug("Collected %d %s file(s) from %s", len(found), category, directory)
    return found


def _required_file(path: Path, category: str) -> Path:
    if not path.is_file():
        raise CollectionError(f"Missing {category} file: {path}")
    return path


def collect(settings: Settings) -> CollectedFiles:
    """Locate all dataset files under the configured data root."""
    root = settings.data_root
    if not root.is_dir():
        raise CollectionError(f"Dataset root not found: {root}")

    return CollectedFiles(
        handles=_json_files(settings.handles_path, "handles"),
        orgs=_json_files(settings.orgs_path, "organizations"),
        contests=_required_file(settings.contests_path, "contests"),
        findings=_required_file(settings.findings_path, "findings"),
    )
