from autoindex.parsing.classifiers import (
    LOOKUP_INDEX_ENTITIES,
    is_fulltext,
    is_node_or_relationship_lookup,
    is_unique_backing_index,
    is_unique_property_index,
)
from autoindex.parsing.parser import (
    is_legacy_version,
    parse_constraint,
    parse_constraints,
    parse_index,
    parse_indexes,
)

__all__ = [
    "LOOKUP_INDEX_ENTITIES",
    "is_fulltext",
    "is_node_or_relationship_lookup",
    "is_unique_backing_index",
    "is_unique_property_index",
    "is_legacy_version",
    "parse_constraint",
    "parse_constraints",
    "parse_index",
    "parse_indexes",
]
