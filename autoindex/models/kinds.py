"""The closed set of index and constraint kinds known to the schema sync."""

from enum import Enum


class IndexKind(str, Enum):
    """Kind of an index or constraint.

    Each member fixes whether it applies to nodes or relationships, whether
    it spans one property or several, and whether it is an index or a
    constraint.
    """

    NODE_SINGLE_INDEX = "node_single_index"
    NODE_COMPOSITE_INDEX = "node_composite_index"
    REL_SINGLE_INDEX = "rel_single_index"
    REL_COMPOSITE_INDEX = "rel_composite_index"
    UNIQUE_CONSTRAINT = "unique_constraint"
    NODE_KEY_CONSTRAINT = "node_key_constraint"
    NODE_PROP_EXISTENCE_CONSTRAINT = "node_prop_existence_constraint"
    REL_PROP_EXISTENCE_CONSTRAINT = "rel_prop_existence_constraint"

    @property
    def is_relationship(self) -> bool:
        return self in _RELATIONSHIP_KINDS

    @property
    def is_single_property(self) -> bool:
        return self in _SINGLE_PROPERTY_KINDS

    @property
    def is_constraint(self) -> bool:
        return self in _CONSTRAINT_KINDS


_RELATIONSHIP_KINDS = frozenset(
    {
        IndexKind.REL_SINGLE_INDEX,
        IndexKind.REL_COMPOSITE_INDEX,
        IndexKind.REL_PROP_EXISTENCE_CONSTRAINT,
    }
)

_SINGLE_PROPERTY_KINDS = frozenset(
    {
        IndexKind.NODE_SINGLE_INDEX,
        IndexKind.REL_SINGLE_INDEX,
        IndexKind.UNIQUE_CONSTRAINT,
        IndexKind.NODE_PROP_EXISTENCE_CONSTRAINT,
        IndexKind.REL_PROP_EXISTENCE_CONSTRAINT,
    }
)

_CONSTRAINT_KINDS = frozenset(
    {
        IndexKind.UNIQUE_CONSTRAINT,
        IndexKind.NODE_KEY_CONSTRAINT,
        IndexKind.NODE_PROP_EXISTENCE_CONSTRAINT,
        IndexKind.REL_PROP_EXISTENCE_CONSTRAINT,
    }
)
