"""Descriptor model package.

Public surface area: import from here rather than from sub-modules directly.
"""

from autoindex.models.description import RENDERERS, build_description
from autoindex.models.index import IndexDescriptor
from autoindex.models.kinds import IndexKind
from autoindex.models.opposite import OPPOSITE_KINDS, create_opposite_index, has_opposite
from autoindex.models.rows import ConstraintRow, IndexRow, row_to_dict

__all__ = [
    # Kinds
    "IndexKind",
    # Descriptor + builder
    "IndexDescriptor",
    "RENDERERS",
    "build_description",
    # Opposite indexes
    "OPPOSITE_KINDS",
    "has_opposite",
    "create_opposite_index",
    # Raw rows
    "ConstraintRow",
    "IndexRow",
    "row_to_dict",
]
