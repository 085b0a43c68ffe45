"""Database package.

Public surface area: import from here rather than sub-modules.
"""

from autoindex.db.statements import create_queries, create_query, drop_queries, drop_query

__all__ = [
    "create_query",
    "drop_query",
    "create_queries",
    "drop_queries",
]
