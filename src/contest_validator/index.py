"""Lookup sets shared by the cross-reference rules."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .models import ContestRecord, HandleRecord, OrganizationRecord

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class DatasetIndex:
    """Immutable indexes built once per run from successfully parsed records."""

    unique_handles: frozenset[str]
    unique_contest_ids: frozenset[int | float]
    registered_organizations: frozenset[str]


def build_indexes(
    handles: Iterable[HandleRecord],
    orgs: Iterable[OrganizationRecord],
    contests: Iterable[ContestRecord],
) -> DatasetIndex:
    """Collect handle names, contest ids and organization names.

    Duplicates collapse silently; uniqueness is checked by the rules.
    Organization names are stripped, matching how contest sponsors are read.
    """
    index = DatasetIndex(
        unique_handles=frozenset(h.handle for h in handles if h.handle is not None),
        unique_contest_ids=frozenset(c.contestid for c in contests),
        registered_organizations=frozenset(o.name.strip() for o in orgs if o.name is not None),
    )
    logger.debug(
        "Indexed %d handle(s), %d contest id(s), %d organization(s)",
        len(index.unique_handles),
        len(index.unique_contest_ids),
        len(index.registered_organizations),
    )
    return index
