"""Normalisation of Neo4j index and constraint metadata.

Public surface area: import from here rather than sub-modules.
"""

from autoindex.models import (
    IndexDescriptor,
    IndexKind,
    build_description,
    create_opposite_index,
    has_opposite,
)
from autoindex.parsing import (
    is_legacy_version,
    parse_constraint,
    parse_constraints,
    parse_index,
    parse_indexes,
)

__all__ = [
    "IndexKind",
    "IndexDescriptor",
    "build_description",
    "has_opposite",
    "create_opposite_index",
    "is_legacy_version",
    "parse_constraint",
    "parse_constraints",
    "parse_index",
    "parse_indexes",
]
