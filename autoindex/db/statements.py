"""Schema statements ready to hand to a Neo4j session.

This module only builds ``neo4j.Query`` objects; running them (and
deciding which ones to run) is up to the caller::

    from autoindex.db.statements import create_queries

    with driver.session() as session:
        for query in create_queries(missing):
            session.run(query)
"""

from typing import Iterable

from neo4j import Query

from autoindex.models.index import IndexDescriptor


def create_query(descriptor: IndexDescriptor) -> Query:
    return Query(descriptor.create_statement)


def drop_query(descriptor: IndexDescriptor) -> Query:
    """Query dropping *descriptor*.

    Raises MissingIndexNameError for a relationship index without a name.
    """
    return Query(descriptor.drop_statement)


def create_queries(descriptors: Iterable[IndexDescriptor]) -> list[Query]:
    return [create_query(d) for d in descriptors]


def drop_queries(descriptors: Iterable[IndexDescriptor]) -> list[Query]:
    return [drop_query(d) for d in descriptors]
