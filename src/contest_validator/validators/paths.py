"""Resolution of ``image`` paths against their category directory."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_image(category_dir: Path, image: str) -> Path | None:
    """Join ``image`` under ``category_dir`` and normalise it.

    Leading slashes are dropped, so an absolute path is looked up inside the
    category directory. Returns None when ``..`` segments lead outside it.
    Symlinks are not followed.
    """
    base = Path(os.path.normpath(category_dir.absolute()))
    candidate = Path(os.path.normpath(base / image.lstrip("/\\")))
    if candidate != base and base not in candidate.parents:
        return None
    return candidate


def image_diagnostic(category_dir: Path, image: str, source: Path) -> str | None:
    """Return the diagnostic for an image that is outside the directory or missing."""
    candidate = resolve_image(category_dir, image)
    if candidate is None:
        return f'"image" key in {source} points outside {category_dir}: {image}'
    if not candidate.is_file():
        return f'Unable to read file from "image" key in {source}. Does "{image}" exist?'
    return None
