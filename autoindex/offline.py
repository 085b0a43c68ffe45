"""Offline mode: schema metadata exported to a JSON file.

The export holds the raw introspection rows and the server version they
came from, so a schema can be inspected without a live database::

  {
    "version": "4.4.12",
    "constraints": [{"name": "...", "description": "CONSTRAINT ON ..."}, …],
    "indexes":     [{"name": "...", "type": "BTREE", "entityType": "NODE", …}, …]
  }

``constraints`` holds ``SHOW CONSTRAINTS`` / ``db.constraints()`` rows and
``indexes`` holds ``SHOW INDEXES`` / ``db.indexes()`` rows, as returned.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

import jsonschema
from jsonschema import ValidationError

from autoindex.core.errors import OfflineFileError
from autoindex.models.index import IndexDescriptor
from autoindex.parsing.parser import parse_constraints, parse_indexes

logger = logging.getLogger(__name__)

_ROW_LIST = {"type": "array", "items": {"type": "object"}}

SCHEMA_EXPORT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "version": {"type": "string"},
        "constraints": _ROW_LIST,
        "indexes": _ROW_LIST,
    },
    "required": ["version"],
    "additionalProperties": True,
}

ACTIONS = ("create", "drop")


@dataclass
class SchemaExport:
    """Rows of one exported schema."""

    version: str
    constraints: list[dict[str, Any]] = field(default_factory=list)
    indexes: list[dict[str, Any]] = field(default_factory=list)


def validate_export(data: Any) -> list[str]:
    """Validate a decoded export against SCHEMA_EXPORT_SCHEMA.

    Returns a (possibly empty) list of human-readable error messages.
    """
    errors: list[str] = []
    try:
        jsonschema.validate(instance=data, schema=SCHEMA_EXPORT_SCHEMA)
    except ValidationError as exc:
        errors.append(exc.message)
    except jsonschema.SchemaError as exc:
        errors.append(f"Invalid schema definition: {exc.message}")
    return errors


def load_export(path: str) -> SchemaExport:
    """Read and validate an exported schema file."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise OfflineFileError(path, [str(exc)]) from exc

    errors = validate_export(data)
    if errors:
        raise OfflineFileError(path, errors)

    export = SchemaExport(
        version=data["version"],
        constraints=data.get("constraints", []),
        indexes=data.get("indexes", []),
    )
    logger.info(
        "Read %d constraint and %d index rows from %s",
        len(export.constraints),
        len(export.indexes),
        path,
    )
    return export


def describe_schema(
    constraint_rows: Iterable[Any],
    index_rows: Iterable[Any],
    version: str,
) -> list[IndexDescriptor]:
    """Parse both row collections into distinct descriptors, constraints first."""
    seen: set[IndexDescriptor] = set()
    descriptors: list[IndexDescriptor] = []
    for descriptor in parse_constraints(constraint_rows, version) + parse_indexes(index_rows, version):
        if descriptor in seen:
            continue
        seen.add(descriptor)
        descriptors.append(descriptor)
    return descriptors


def describe_export(export: SchemaExport) -> list[IndexDescriptor]:
    return describe_schema(export.constraints, export.indexes, export.version)


def render_statements(descriptors: Iterable[IndexDescriptor], action: str) -> list[str]:
    """Return the create or drop statement of every descriptor."""
    if action == "create":
        return [d.create_statement for d in descriptors]
    if action == "drop":
        return [d.drop_statement for d in descriptors]
    raise ValueError(f"action must be one of {ACTIONS}, got {action!r}")
