"""Tests for the opposite-index table."""

import pytest

from autoindex.core.errors import OppositeIndexError
from autoindex.models import (
    OPPOSITE_KINDS,
    IndexDescriptor,
    IndexKind,
    create_opposite_index,
    has_opposite,
)

PAIRS = [
    (IndexKind.NODE_SINGLE_INDEX, IndexKind.UNIQUE_CONSTRAINT, ("email",)),
    (IndexKind.UNIQUE_CONSTRAINT, IndexKind.NODE_SINGLE_INDEX, ("email",)),
    (IndexKind.NODE_COMPOSITE_INDEX, IndexKind.NODE_KEY_CONSTRAINT, ("first", "last")),
    (IndexKind.NODE_KEY_CONSTRAINT, IndexKind.NODE_COMPOSITE_INDEX, ("first", "last")),
]

WITHOUT_OPPOSITE = [
    IndexKind.REL_SINGLE_INDEX,
    IndexKind.REL_COMPOSITE_INDEX,
    IndexKind.NODE_PROP_EXISTENCE_CONSTRAINT,
    IndexKind.REL_PROP_EXISTENCE_CONSTRAINT,
]


class TestHasOpposite:
    @pytest.mark.parametrize("kind", [p[0] for p in PAIRS])
    def test_mapped(self, kind):
        assert has_opposite(kind) is True

    @pytest.mark.parametrize("kind", WITHOUT_OPPOSITE)
    def test_unmapped(self, kind):
        assert has_opposite(kind) is False

    def test_table_is_symmetric(self):
        for kind, opposite in OPPOSITE_KINDS.items():
            assert OPPOSITE_KINDS[opposite] == kind


class TestCreateOppositeIndex:
    @pytest.mark.parametrize("kind,expected,properties", PAIRS)
    def test_paired_kind(self, kind, expected, properties):
        opposite = create_opposite_index(IndexDescriptor(kind, "Person", properties))
        assert opposite.kind == expected
        assert opposite.owning_type == "Person"
        assert opposite.properties == properties

    @pytest.mark.parametrize("kind,expected,properties", PAIRS)
    def test_involutive(self, kind, expected, properties):
        descriptor = IndexDescriptor(kind, "Person", properties)
        assert create_opposite_index(create_opposite_index(descriptor)) == descriptor

    @pytest.mark.parametrize("kind", WITHOUT_OPPOSITE)
    def test_unmapped_kind_fails(self, kind):
        descriptor = IndexDescriptor(kind, "KNOWS", ("since",))
        with pytest.raises(OppositeIndexError) as exc_info:
            create_opposite_index(descriptor)
        assert exc_info.value.kind == kind

    def test_opposite_of_unique_renders_plain_index(self):
        unique = IndexDescriptor(IndexKind.UNIQUE_CONSTRAINT, "Person", ("email",))
        assert create_opposite_index(unique).description == "INDEX ON :`Person`(`email`)"
