"""JSON Schemas describing the shape of each JSON-backed record.

Keys that rules check for presence (``handle``, organization ``image``) are
deliberately optional here: a missing key is a rule diagnostic, not a parse
failure.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator

HANDLE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "handle": {"type": "string"},
        "image": {"type": "string"},
        "members": {"type": "array", "items": {"type": "string"}},
    },
}

ORGANIZATION_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "image": {"type": "string"},
        "link": {"type": "string"},
    },
}

FINDING_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["handle", "contest"],
    "properties": {
        "handle": {"type": "string"},
        "contest": {"type": "number"},
    },
}

HANDLE_VALIDATOR = Draft202012Validator(HANDLE_SCHEMA)
ORGANIZATION_VALIDATOR = Draft202012Validator(ORGANIZATION_SCHEMA)
FINDING_VALIDATOR = Draft202012Validator(FINDING_SCHEMA)


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"{pointer or '<root>'}: {error.message}")
    return "; ".join(messages)


def schema_errors(validator: Draft202012Validator, document: Any) -> str | None:
    """Return a one-line description of schema violations, or None."""
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if not errors:
        return None
    return _format_errors(errors)
