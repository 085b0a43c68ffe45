"""Custom exception classes.

Construction and usage errors are raised. Unrecognised metadata rows do
not raise: the parser logs them and returns None.
"""

from typing import Any, Sequence


class AutoIndexError(Exception):
    """Base class for every error raised by this package."""


class IndexDefinitionError(AutoIndexError, ValueError):
    """Raised when a descriptor is constructed from invalid parts."""

    def __init__(self, kind: Any, detail: str, properties: Sequence[str] = ()) -> None:
        self.kind = kind
        self.properties = tuple(properties)
        self.detail = detail
        super().__init__(f"{kind}: {detail}")


class UnsupportedIndexKindError(AutoIndexError, NotImplementedError):
    """Raised when the description builder has no renderer for a kind."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"Index type {kind} not supported yet")


class OppositeIndexError(AutoIndexError):
    """Raised when an opposite index is requested for a kind without one."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"Can not create opposite index for type={kind}")


class MissingIndexNameError(AutoIndexError):
    """Raised when a relationship index is dropped without its server-assigned name."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(
            f"Relationship index '{description}' can only be dropped by name, but no name is known"
        )


class OfflineFileError(AutoIndexError):
    """Raised when an exported schema file cannot be read or has the wrong shape."""

    def __init__(self, path: str, errors: Sequence[str]) -> None:
        self.path = path
        self.errors = list(errors)
        super().__init__(f"{path}: " + "; ".join(self.errors))
