"""Typed views over the rows returned by schema introspection.

Rows arrive either as ``neo4j.Record`` instances (straight from a result)
or as plain dicts (tests, offline exports). Only the fields the parser
depends on are modelled; everything else on the row is ignored.

  constraints:  description, name
  indexes:      description, type, entityType, uniqueness, name,
                properties, labelsOrTypes
"""

from typing import Any, Mapping, Optional, Union

from neo4j import Record
from pydantic import BaseModel, ConfigDict, Field

Row = Union[Record, Mapping[str, Any]]


def row_to_dict(row: Row) -> dict[str, Any]:
    """Return a plain dict for either a neo4j Record or a mapping."""
    if isinstance(row, Record):
        return row.data()
    return dict(row)


class _MetadataRow(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @classmethod
    def from_row(cls, row: Row):
        return cls.model_validate(row_to_dict(row))


class ConstraintRow(_MetadataRow):
    """One row of ``SHOW CONSTRAINTS`` / ``db.constraints()``."""

    description: str
    name: Optional[str] = None


class IndexRow(_MetadataRow):
    """One row of ``SHOW INDEXES`` / ``db.indexes()``."""

    description: Optional[str] = None
    index_type: Optional[str] = Field(default=None, alias="type")
    entity_type: Optional[str] = Field(default=None, alias="entityType")
    uniqueness: Optional[str] = None
    name: Optional[str] = None
    properties: Optional[list[str]] = None
    labels_or_types: Optional[list[str]] = Field(default=None, alias="labelsOrTypes")
