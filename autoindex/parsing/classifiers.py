"""Index rows that are never turned into descriptors.

  - fulltext indexes are not supported and are left alone
  - node / relationship lookup indexes (4.3+) belong to the server
  - uniqueness indexes back a unique constraint, which is already read
    from the constraint rows; counting them twice would make the sync
    drop or recreate the constraint's index
"""

from autoindex.models.rows import IndexRow

LOOKUP_INDEX_ENTITIES = frozenset({"node", "relationship"})

LEGACY_UNIQUE_INDEX_TYPE = "node_unique_property"


def is_fulltext(row: IndexRow) -> bool:
    return row.index_type is not None and "fulltext" in row.index_type.lower()


def is_node_or_relationship_lookup(row: IndexRow) -> bool:
    if row.index_type is None or row.entity_type is None:
        return False
    return (
        row.index_type.strip().lower() == "lookup"
        and row.entity_type.strip().lower() in LOOKUP_INDEX_ENTITIES
    )


def is_unique_property_index(row: IndexRow) -> bool:
    """Pre-4.0 uniqueness index, recognised by its type string."""
    return row.index_type == LEGACY_UNIQUE_INDEX_TYPE


def is_unique_backing_index(row: IndexRow) -> bool:
    """4.0+ uniqueness index, recognised by the structured ``uniqueness`` field."""
    return row.uniqueness == "UNIQUE"
