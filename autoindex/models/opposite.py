"""Opposite enforcement mechanisms.

A plain single-property index and a uniqueness constraint on the same
property are interchangeable for lookups (the constraint is backed by an
index), and likewise a composite index and a node key constraint. The
reconciliation code uses the opposite of a desired entry to avoid creating
both.
"""

from autoindex.core.errors import OppositeIndexError
from autoindex.models.index import IndexDescriptor
from autoindex.models.kinds import IndexKind

OPPOSITE_KINDS: dict[IndexKind, IndexKind] = {
    IndexKind.NODE_SINGLE_INDEX: IndexKind.UNIQUE_CONSTRAINT,
    IndexKind.UNIQUE_CONSTRAINT: IndexKind.NODE_SINGLE_INDEX,
    IndexKind.NODE_COMPOSITE_INDEX: IndexKind.NODE_KEY_CONSTRAINT,
    IndexKind.NODE_KEY_CONSTRAINT: IndexKind.NODE_COMPOSITE_INDEX,
}


def has_opposite(kind: IndexKind) -> bool:
    return kind in OPPOSITE_KINDS


def create_opposite_index(descriptor: IndexDescriptor) -> IndexDescriptor:
    """Return the paired descriptor on the same owning type and properties.

    Raises OppositeIndexError for kinds outside OPPOSITE_KINDS; check
    has_opposite() first.
    """
    opposite = OPPOSITE_KINDS.get(descriptor.kind)
    if opposite is None:
        raise OppositeIndexError(descriptor.kind)
    return IndexDescriptor(opposite, descriptor.owning_type, descriptor.properties)
