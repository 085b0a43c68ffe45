"""Regular-expression grammars for index and constraint descriptions.

Each Grammar recognises one shape of description and yields a descriptor
of a fixed kind. Grammars are grouped into ordered sets; the parser tries
a set front to back and the first match wins.

Descriptions embed the bound variable ("binder") of the pattern, e.g.
``CONSTRAINT ON ( person:Person ) ASSERT person.email IS UNIQUE``. The
binder is captured once and every property token must carry it as a
``binder.`` prefix, which is stripped. Identifiers may be backtick-quoted,
as in the fragments produced by autoindex.models.description.

Older servers print names unquoted unless they contain ``:``, so an
unquoted label or binder may contain spaces and an unquoted property may
contain spaces and dots (``person.address.city``). Unquoted names run up
to the next delimiter of the surrounding pattern.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from autoindex.models.index import IndexDescriptor
from autoindex.models.kinds import IndexKind

QUOTED = r"`(?:[^`]|``)+`"

# Label or binder: ends at a colon, a parenthesis or a bracket.
NAME = rf"(?:{QUOTED}|[^`()\[\]:]+?)"

# Property after the ``binder.`` prefix: ends at a parenthesis or at the
# fixed text that follows it.
PROPERTY_NAME = rf"(?:{QUOTED}|[^`()]+?)"

_TOKEN_RE = re.compile(rf"{QUOTED}|[^`]+")

_NODE = rf"\(\s*(?P<binder>{NAME})\s*:\s*(?P<label>{NAME})\s*\)"
_REL = rf"\(\)-\[\s*(?P<binder>{NAME})\s*:\s*(?P<label>{NAME})\s*\]-\(\)"
_PROPERTY = rf"(?P=binder)\.(?P<property>{PROPERTY_NAME})"
_PROPERTY_LIST = r"\((?P<properties>[^()]+)\)"

# ``x.p`` or ``(x.p)``; the closing parenthesis is only allowed after an
# opening one.
_MAYBE_PARENTHESISED_PROPERTY = rf"(?:(?P<open>\()\s*)?{_PROPERTY}(?(open)\s*\))"

# ``exists(x.p)``, ``(x.p) IS NOT NULL`` or ``x.p IS NOT NULL``.
_NOT_NULL_PROPERTY = (
    rf"(?P<exists>exists(?=\())?{_MAYBE_PARENTHESISED_PROPERTY}(?(exists)| IS NOT NULL)"
)


def unquote(identifier: str) -> str:
    """Strip surrounding whitespace and backticks from an identifier."""
    identifier = identifier.strip()
    if len(identifier) >= 2 and identifier.startswith("`") and identifier.endswith("`"):
        return identifier[1:-1].replace("``", "`")
    return identifier


def split_properties(raw: str, binder: Optional[str] = None) -> Optional[list[str]]:
    """Split a comma separated property list.

    With *binder*, every token must be qualified by it; the qualifier is
    removed. Returns None when a token is empty or only partly quoted.
    """
    properties = []
    for token in raw.split(","):
        token = token.strip()
        if binder is not None:
            prefix = binder + "."
            if not token.startswith(prefix):
                return None
            token = token[len(prefix):].strip()
        if not _TOKEN_RE.fullmatch(token):
            return None
        properties.append(unquote(token))
    return properties


@dataclass(frozen=True)
class Grammar:
    """One description shape.

    ``composite_kind``, when set, is used instead of ``kind`` if more than
    one property was captured.
    """

    name: str
    kind: IndexKind
    pattern: re.Pattern
    composite_kind: Optional[IndexKind] = None
    qualified: bool = True

    def match(self, description: str) -> Optional[IndexDescriptor]:
        m = self.pattern.fullmatch(description.strip())
        if m is None:
            return None

        groups = m.groupdict()
        label = unquote(groups["label"])
        if groups.get("property") is not None:
            properties = [unquote(groups["property"])]
        else:
            binder = groups.get("binder") if self.qualified else None
            properties = split_properties(groups["properties"], binder)
            if not properties:
                return None

        kind = self.kind
        if self.composite_kind is not None and len(properties) > 1:
            kind = self.composite_kind
        return IndexDescriptor(kind, label, tuple(properties))


def match_first(grammars: tuple[Grammar, ...], description: str) -> Optional[IndexDescriptor]:
    for grammar in grammars:
        descriptor = grammar.match(description)
        if descriptor is not None:
            return descriptor
    return None


def _grammar(name: str, kind: IndexKind, pattern: str, **kwargs) -> Grammar:
    return Grammar(name=name, kind=kind, pattern=re.compile(pattern), **kwargs)


# ---------------------------------------------------------------------------
# Constraints, servers before 4.0
# ---------------------------------------------------------------------------

LEGACY_CONSTRAINT_GRAMMARS: tuple[Grammar, ...] = (
    _grammar(
        "legacy-unique",
        IndexKind.UNIQUE_CONSTRAINT,
        rf"CONSTRAINT ON {_NODE} ASSERT {_PROPERTY} IS UNIQUE",
    ),
    _grammar(
        "legacy-node-key",
        IndexKind.NODE_KEY_CONSTRAINT,
        rf"CONSTRAINT ON {_NODE} ASSERT {_PROPERTY_LIST} IS NODE KEY",
    ),
    _grammar(
        "legacy-node-exists",
        IndexKind.NODE_PROP_EXISTENCE_CONSTRAINT,
        rf"CONSTRAINT ON {_NODE} ASSERT exists\(\s*{_PROPERTY}\s*\)",
    ),
    _grammar(
        "legacy-rel-exists",
        IndexKind.REL_PROP_EXISTENCE_CONSTRAINT,
        rf"CONSTRAINT ON {_REL} ASSERT exists\(\s*{_PROPERTY}\s*\)",
    ),
)

# ---------------------------------------------------------------------------
# Constraints, 4.0 and later
# ---------------------------------------------------------------------------

CURRENT_CONSTRAINT_GRAMMARS: tuple[Grammar, ...] = (
    _grammar(
        "unique",
        IndexKind.UNIQUE_CONSTRAINT,
        rf"CONSTRAINT ON {_NODE} ASSERT {_MAYBE_PARENTHESISED_PROPERTY} IS UNIQUE",
    ),
    _grammar(
        "node-key",
        IndexKind.NODE_KEY_CONSTRAINT,
        rf"CONSTRAINT ON {_NODE} ASSERT {_PROPERTY_LIST} IS NODE KEY",
    ),
    _grammar(
        "node-exists",
        IndexKind.NODE_PROP_EXISTENCE_CONSTRAINT,
        rf"CONSTRAINT ON {_NODE} ASSERT {_NOT_NULL_PROPERTY}",
    ),
    _grammar(
        "rel-exists",
        IndexKind.REL_PROP_EXISTENCE_CONSTRAINT,
        rf"CONSTRAINT ON {_REL} ASSERT {_NOT_NULL_PROPERTY}",
    ),
)

# ---------------------------------------------------------------------------
# Indexes, servers before 4.0 (description text only)
# ---------------------------------------------------------------------------

LEGACY_INDEX_GRAMMARS: tuple[Grammar, ...] = (
    _grammar(
        "legacy-node-index",
        IndexKind.NODE_SINGLE_INDEX,
        rf"INDEX ON :\s*(?P<label>{NAME})\s*{_PROPERTY_LIST}",
        composite_kind=IndexKind.NODE_COMPOSITE_INDEX,
        qualified=False,
    ),
)
