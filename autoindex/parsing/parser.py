"""Version-dispatched parsing of index and constraint metadata rows.

The server changed how it reports its schema at 4.0: older servers only
describe an entry in free text, newer ones add structured fields and
rephrase the text. Rather than one pattern covering every phrasing, each
server generation gets its own ordered list of parse steps:

  constraints   pre-4.0 grammars  ->  4.0+ grammars
  indexes       pre-4.0 grammar   ->  structured fields

A step only runs when its version predicate accepts the server version.
Pre-4.0 servers fall through to the newer steps when their own grammars
do not match.

Nothing here raises for metadata it does not understand: such rows are
logged as warnings and yield None, so that one odd row does not abort a
whole schema sync.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, TypeVar

from pydantic import ValidationError

from autoindex.core.config import settings
from autoindex.core.errors import IndexDefinitionError
from autoindex.models.index import IndexDescriptor
from autoindex.models.kinds import IndexKind
from autoindex.models.rows import ConstraintRow, IndexRow, Row
from autoindex.parsing.classifiers import (
    is_fulltext,
    is_node_or_relationship_lookup,
    is_unique_backing_index,
    is_unique_property_index,
)
from autoindex.parsing.grammars import (
    CURRENT_CONSTRAINT_GRAMMARS,
    LEGACY_CONSTRAINT_GRAMMARS,
    LEGACY_INDEX_GRAMMARS,
    match_first,
)

logger = logging.getLogger(__name__)

REL_ENTITY_TYPE = "RELATIONSHIP"

RowT = TypeVar("RowT", ConstraintRow, IndexRow)


def is_legacy_version(version: Optional[str]) -> bool:
    """True for servers reporting the pre-4.0 metadata format.

    Plain string comparison against the configured cutoff; an unknown
    version is treated as current.
    """
    if not version:
        return False
    return version < settings.LEGACY_VERSION_CUTOFF


def _any_version(version: Optional[str]) -> bool:
    return True


def _never(row: object) -> bool:
    return False


@dataclass(frozen=True)
class ParseStep(Generic[RowT]):
    """One server generation's way of reading a row.

    ``skip`` recognises rows that must be ignored outright; ``parse``
    returns None when the row is not in this step's format.
    """

    label: str
    applies: Callable[[Optional[str]], bool]
    parse: Callable[[RowT], Optional[IndexDescriptor]]
    skip: Callable[[RowT], bool] = _never


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


def _legacy_constraint(row: ConstraintRow) -> Optional[IndexDescriptor]:
    return match_first(LEGACY_CONSTRAINT_GRAMMARS, row.description)


def _current_constraint(row: ConstraintRow) -> Optional[IndexDescriptor]:
    return match_first(CURRENT_CONSTRAINT_GRAMMARS, row.description)


CONSTRAINT_STEPS: tuple[ParseStep[ConstraintRow], ...] = (
    ParseStep("pre-4.0 constraint", is_legacy_version, _legacy_constraint),
    ParseStep("constraint", _any_version, _current_constraint),
)


def parse_constraint(row: Row, version: Optional[str]) -> Optional[IndexDescriptor]:
    """Recover the descriptor of one constraint row, or None."""
    try:
        constraint = ConstraintRow.from_row(row)
    except ValidationError as exc:
        logger.warning("Could not read constraint row: %s", exc)
        return None

    for step in CONSTRAINT_STEPS:
        if not step.applies(version):
            continue
        descriptor = step.parse(constraint)
        if descriptor is not None:
            return descriptor
        logger.debug(
            "No %s grammar matched %r, trying the next one", step.label, constraint.description
        )

    logger.warning("Could not parse constraint description %s", constraint.description)
    return None


# ---------------------------------------------------------------------------
# Indexes
# ---------------------------------------------------------------------------


def _legacy_index(row: IndexRow) -> Optional[IndexDescriptor]:
    if row.description is None:
        return None
    return match_first(LEGACY_INDEX_GRAMMARS, row.description)


def _structured_index(row: IndexRow) -> Optional[IndexDescriptor]:
    if not row.properties or not row.labels_or_types:
        return None

    owning_type = row.labels_or_types[0]
    properties = tuple(row.properties)
    composite = len(properties) > 1
    if row.entity_type is not None and row.entity_type.upper() == REL_ENTITY_TYPE:
        kind = IndexKind.REL_COMPOSITE_INDEX if composite else IndexKind.REL_SINGLE_INDEX
        # Relationship indexes are dropped by name, so keep it.
        return IndexDescriptor(kind, owning_type, properties, name=row.name)

    kind = IndexKind.NODE_COMPOSITE_INDEX if composite else IndexKind.NODE_SINGLE_INDEX
    return IndexDescriptor(kind, owning_type, properties)


INDEX_STEPS: tuple[ParseStep[IndexRow], ...] = (
    ParseStep("pre-4.0 index", is_legacy_version, _legacy_index, skip=is_unique_property_index),
    ParseStep("index", _any_version, _structured_index, skip=is_unique_backing_index),
)


def parse_index(row: Row, version: Optional[str]) -> Optional[IndexDescriptor]:
    """Recover the descriptor of one index row, or None.

    Fulltext, lookup and uniqueness-backing indexes always yield None.
    """
    try:
        index = IndexRow.from_row(row)
    except ValidationError as exc:
        logger.warning("Could not read index row: %s", exc)
        return None

    if is_fulltext(index):
        logger.info("Ignoring unsupported fulltext index %s", index.name or index.description)
        return None

    if is_node_or_relationship_lookup(index):
        return None

    for step in INDEX_STEPS:
        if not step.applies(version):
            continue
        if step.skip(index):
            logger.debug("Skipping uniqueness index %s, read from its constraint", index.description)
            return None
        descriptor = step.parse(index)
        if descriptor is not None:
            return descriptor

    logger.warning(
        "Could not parse index of type %s with description %s", index.index_type, index.description
    )
    return None


# ---------------------------------------------------------------------------
# Batches
# ---------------------------------------------------------------------------


def _parse_all(
    rows: Iterable[Row],
    version: Optional[str],
    parse: Callable[[Row, Optional[str]], Optional[IndexDescriptor]],
    what: str,
) -> list[IndexDescriptor]:
    descriptors: list[IndexDescriptor] = []
    for row in rows:
        try:
            descriptor = parse(row, version)
        except IndexDefinitionError as exc:
            logger.warning("Skipping %s row: %s", what, exc)
            continue
        if descriptor is not None:
            descriptors.append(descriptor)
    return descriptors


def parse_constraints(rows: Iterable[Row], version: Optional[str]) -> list[IndexDescriptor]:
    """Parse every constraint row, dropping the ones that yield nothing."""
    return _parse_all(rows, version, parse_constraint, "constraint")


def parse_indexes(rows: Iterable[Row], version: Optional[str]) -> list[IndexDescriptor]:
    """Parse every index row, dropping the ones that yield nothing."""
    return _parse_all(rows, version, parse_index, "index")
