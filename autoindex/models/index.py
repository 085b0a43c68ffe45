"""The normalised descriptor of one index or constraint.

Descriptors come from two sides:
  - the desired schema, built directly from kind / owning type / properties
  - the live schema, recovered by autoindex.parsing from metadata rows

Both sides compare by ``(kind, owning_type, properties)`` so that the two
collections can be diffed with plain set operations.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Iterable, Optional

from autoindex.core.errors import IndexDefinitionError, MissingIndexNameError
from autoindex.models.description import build_description
from autoindex.models.kinds import IndexKind


@dataclass(frozen=True)
class IndexDescriptor:
    """Immutable value describing one index or constraint.

    ``name`` is the server-assigned index name. It is only known for
    descriptors parsed from structured rows, and it takes no part in
    equality or hashing. Property order does take part: two composite
    descriptors listing the same properties in a different order are
    different entries, just as their descriptions differ.
    """

    kind: IndexKind
    owning_type: str
    properties: tuple[str, ...]
    name: Optional[str] = field(default=None, compare=False)
    description: str = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        kind = IndexKind(self.kind)
        if isinstance(self.properties, str):
            raise IndexDefinitionError(kind, "properties must be a sequence of names, not a string")
        properties = tuple(self.properties)
        if not self.owning_type:
            raise IndexDefinitionError(kind, "owning type must not be empty", properties)
        if not properties:
            raise IndexDefinitionError(kind, "at least one property is required", properties)

        # Frozen dataclass: normalised values are written once, here.
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "properties", properties)
        object.__setattr__(
            self, "description", build_description(kind, self.owning_type, properties)
        )

    @classmethod
    def of(
        cls,
        kind: IndexKind,
        owning_type: str,
        properties: Iterable[str],
        name: Optional[str] = None,
    ) -> IndexDescriptor:
        return cls(kind, owning_type, tuple(properties), name)

    def with_name(self, name: Optional[str]) -> IndexDescriptor:
        """Return a copy of this descriptor carrying *name*."""
        return dataclasses.replace(self, name=name)

    @property
    def create_statement(self) -> str:
        return "CREATE " + self.description

    @property
    def drop_statement(self) -> str:
        """Statement removing this entry from the database.

        Relationship indexes cannot be dropped by repeating their creation
        clause; they are dropped by name.
        """
        if self.kind in (IndexKind.REL_SINGLE_INDEX, IndexKind.REL_COMPOSITE_INDEX):
            if not self.name:
                raise MissingIndexNameError(self.description)
            return "DROP INDEX " + self.name
        return "DROP " + self.description

    def __str__(self) -> str:
        return self.description
