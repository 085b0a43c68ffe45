"""Cypher fragments used to create and drop indexes and constraints.

The fragment for a descriptor is the text after ``CREATE`` / ``DROP``:

  INDEX ON :`Person`(`name`)
  INDEX FOR ()-[`knows`:`KNOWS`]-() ON (`knows`.`since`)
  CONSTRAINT ON (`person`:`Person`) ASSERT `person`.`email` IS UNIQUE
  CONSTRAINT ON (`person`:`Person`) ASSERT (`person`.`a`,`person`.`b`) IS NODE KEY
  CONSTRAINT ON (`person`:`Person`) ASSERT exists(`person`.`name`)
  CONSTRAINT ON ()-[`knows`:`KNOWS`]-() ASSERT exists(`knows`.`since`)

The variable bound in each pattern is the lower-cased owning type.
"""

from typing import Callable, Sequence

from autoindex.core.errors import IndexDefinitionError, UnsupportedIndexKindError
from autoindex.models.kinds import IndexKind

_Renderer = Callable[[str, str, Sequence[str]], str]


def _quote(identifier: str) -> str:
    return f"`{identifier}`"


def _plain_properties(properties: Sequence[str]) -> str:
    return ",".join(_quote(p) for p in properties)


def _qualified_properties(alias: str, properties: Sequence[str]) -> str:
    return ",".join(f"{_quote(alias)}.{_quote(p)}" for p in properties)


def _node_single_index(alias: str, owning_type: str, properties: Sequence[str]) -> str:
    return f"INDEX ON :{_quote(owning_type)}({_quote(properties[0])})"


def _node_composite_index(alias: str, owning_type: str, properties: Sequence[str]) -> str:
    return f"INDEX ON :{_quote(owning_type)}({_plain_properties(properties)})"


def _rel_single_index(alias: str, owning_type: str, properties: Sequence[str]) -> str:
    return (
        f"INDEX FOR ()-[{_quote(alias)}:{_quote(owning_type)}]-() "
        f"ON ({_quote(alias)}.{_quote(properties[0])})"
    )


def _rel_composite_index(alias: str, owning_type: str, properties: Sequence[str]) -> str:
    return (
        f"INDEX FOR ()-[{_quote(alias)}:{_quote(owning_type)}]-() "
        f"ON ({_qualified_properties(alias, properties)})"
    )


def _unique_constraint(alias: str, owning_type: str, properties: Sequence[str]) -> str:
    return (
        f"CONSTRAINT ON ({_quote(alias)}:{_quote(owning_type)}) "
        f"ASSERT {_quote(alias)}.{_quote(properties[0])} IS UNIQUE"
    )


def _node_key_constraint(alias: str, owning_type: str, properties: Sequence[str]) -> str:
    return (
        f"CONSTRAINT ON ({_quote(alias)}:{_quote(owning_type)}) "
        f"ASSERT ({_qualified_properties(alias, properties)}) IS NODE KEY"
    )


def _node_existence_constraint(alias: str, owning_type: str, properties: Sequence[str]) -> str:
    return (
        f"CONSTRAINT ON ({_quote(alias)}:{_quote(owning_type)}) "
        f"ASSERT exists({_quote(alias)}.{_quote(properties[0])})"
    )


def _rel_existence_constraint(alias: str, owning_type: str, properties: Sequence[str]) -> str:
    return (
        f"CONSTRAINT ON ()-[{_quote(alias)}:{_quote(owning_type)}]-() "
        f"ASSERT exists({_quote(alias)}.{_quote(properties[0])})"
    )


RENDERERS: dict[IndexKind, _Renderer] = {
    IndexKind.NODE_SINGLE_INDEX: _node_single_index,
    IndexKind.NODE_COMPOSITE_INDEX: _node_composite_index,
    IndexKind.REL_SINGLE_INDEX: _rel_single_index,
    IndexKind.REL_COMPOSITE_INDEX: _rel_composite_index,
    IndexKind.UNIQUE_CONSTRAINT: _unique_constraint,
    IndexKind.NODE_KEY_CONSTRAINT: _node_key_constraint,
    IndexKind.NODE_PROP_EXISTENCE_CONSTRAINT: _node_existence_constraint,
    IndexKind.REL_PROP_EXISTENCE_CONSTRAINT: _rel_existence_constraint,
}


def validate_properties_length(kind: IndexKind, properties: Sequence[str]) -> None:
    """Fail unless a single-property *kind* was given exactly one property."""
    if kind.is_single_property and len(properties) != 1:
        raise IndexDefinitionError(
            kind,
            f"must have exactly one property, got {list(properties)}",
            properties,
        )


def build_description(kind: IndexKind, owning_type: str, properties: Sequence[str]) -> str:
    """Return the Cypher fragment for *kind* declared on *owning_type*.

    Raises IndexDefinitionError for a wrong property count and
    UnsupportedIndexKindError for a kind with no renderer.
    """
    renderer = RENDERERS.get(kind)
    if renderer is None:
        raise UnsupportedIndexKindError(kind)
    kind = IndexKind(kind)
    validate_properties_length(kind, properties)
    return renderer(owning_type.lower(), owning_type, properties)
