"""Print the indexes and constraints recorded in an offline schema export.

Usage:
  python3 scripts/describe_schema.py ./schema_export.json

  # Statements recreating the schema:
  python3 scripts/describe_schema.py ./schema_export.json --action create

  # Re-read an export as if it came from another server version:
  python3 scripts/describe_schema.py ./schema_export.json --server-version 3.5.28
"""

import argparse
import logging
import sys

# Ensure autoindex is importable when run from project root
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Describe the indexes and constraints of an offline schema export."
    )
    parser.add_argument("path", help="JSON export with version, constraints and indexes")
    parser.add_argument(
        "--action",
        choices=["describe", "create", "drop"],
        default="describe",
        help="Print descriptions (default) or create / drop statements",
    )
    parser.add_argument(
        "--server-version",
        default=None,
        help="Override the server version recorded in the export",
    )
    args = parser.parse_args()

    from autoindex.core.config import settings
    from autoindex.core.errors import AutoIndexError
    from autoindex.offline import describe_schema, load_export, render_statements

    logging.basicConfig(level=settings.LOG_LEVEL)

    try:
        export = load_export(args.path)
        version = args.server_version or export.version
        descriptors = describe_schema(export.constraints, export.indexes, version)
        if args.action == "describe":
            lines = [f"{d.kind.value:<32} {d.description}" for d in descriptors]
        else:
            lines = render_statements(descriptors, args.action)
    except AutoIndexError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Server version: {version} ({len(descriptors)} entries)")
    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
