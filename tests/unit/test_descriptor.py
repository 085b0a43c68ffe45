"""Tests for the descriptor model and the description builder.

Covers:
  - The exact Cypher fragment rendered for every kind
  - Property-count validation for single-property kinds
  - Identity: equality / hashing ignore the name, respect property order
  - Create and drop statements, including drop-by-name for relationship indexes
  - The renderer table staying exhaustive over IndexKind
"""

import pytest

from autoindex.core.errors import (
    IndexDefinitionError,
    MissingIndexNameError,
    UnsupportedIndexKindError,
)
from autoindex.models import RENDERERS, IndexDescriptor, IndexKind, build_description

EXPECTED_DESCRIPTIONS = [
    (
        IndexKind.NODE_SINGLE_INDEX,
        "Person",
        ("name",),
        "INDEX ON :`Person`(`name`)",
    ),
    (
        IndexKind.NODE_COMPOSITE_INDEX,
        "Person",
        ("firstName", "lastName"),
        "INDEX ON :`Person`(`firstName`,`lastName`)",
    ),
    (
        IndexKind.REL_SINGLE_INDEX,
        "KNOWS",
        ("since",),
        "INDEX FOR ()-[`knows`:`KNOWS`]-() ON (`knows`.`since`)",
    ),
    (
        IndexKind.REL_COMPOSITE_INDEX,
        "KNOWS",
        ("since", "weight"),
        "INDEX FOR ()-[`knows`:`KNOWS`]-() ON (`knows`.`since`,`knows`.`weight`)",
    ),
    (
        IndexKind.UNIQUE_CONSTRAINT,
        "Person",
        ("email",),
        "CONSTRAINT ON (`person`:`Person`) ASSERT `person`.`email` IS UNIQUE",
    ),
    (
        IndexKind.NODE_KEY_CONSTRAINT,
        "Person",
        ("firstName", "lastName"),
        "CONSTRAINT ON (`person`:`Person`) ASSERT (`person`.`firstName`,`person`.`lastName`) IS NODE KEY",
    ),
    (
        IndexKind.NODE_PROP_EXISTENCE_CONSTRAINT,
        "Person",
        ("name",),
        "CONSTRAINT ON (`person`:`Person`) ASSERT exists(`person`.`name`)",
    ),
    (
        IndexKind.REL_PROP_EXISTENCE_CONSTRAINT,
        "KNOWS",
        ("since",),
        "CONSTRAINT ON ()-[`knows`:`KNOWS`]-() ASSERT exists(`knows`.`since`)",
    ),
]

SINGLE_PROPERTY_KINDS = [
    IndexKind.NODE_SINGLE_INDEX,
    IndexKind.REL_SINGLE_INDEX,
    IndexKind.UNIQUE_CONSTRAINT,
    IndexKind.NODE_PROP_EXISTENCE_CONSTRAINT,
    IndexKind.REL_PROP_EXISTENCE_CONSTRAINT,
]


# ---------------------------------------------------------------------------
# Description builder
# ---------------------------------------------------------------------------


class TestBuildDescription:
    @pytest.mark.parametrize("kind,owning_type,properties,expected", EXPECTED_DESCRIPTIONS)
    def test_fragment_per_kind(self, kind, owning_type, properties, expected):
        assert build_description(kind, owning_type, properties) == expected

    @pytest.mark.parametrize("kind,owning_type,properties,expected", EXPECTED_DESCRIPTIONS)
    def test_descriptor_carries_fragment(self, kind, owning_type, properties, expected):
        assert IndexDescriptor(kind, owning_type, properties).description == expected

    def test_alias_is_lower_cased_owning_type(self):
        description = build_description(IndexKind.UNIQUE_CONSTRAINT, "BlogPost", ["slug"])
        assert description.startswith("CONSTRAINT ON (`blogpost`:`BlogPost`)")

    def test_description_is_deterministic(self):
        first = IndexDescriptor(IndexKind.NODE_KEY_CONSTRAINT, "Person", ("a", "b"))
        second = IndexDescriptor(IndexKind.NODE_KEY_CONSTRAINT, "Person", ("a", "b"))
        assert first.description == second.description

    def test_every_kind_has_a_renderer(self):
        assert set(RENDERERS) == set(IndexKind)

    def test_missing_renderer_is_unsupported(self, monkeypatch):
        monkeypatch.delitem(RENDERERS, IndexKind.NODE_KEY_CONSTRAINT)
        with pytest.raises(UnsupportedIndexKindError) as exc_info:
            build_description(IndexKind.NODE_KEY_CONSTRAINT, "Person", ["a", "b"])
        assert exc_info.value.kind == IndexKind.NODE_KEY_CONSTRAINT
        assert isinstance(exc_info.value, NotImplementedError)


# ---------------------------------------------------------------------------
# Construction invariants
# ---------------------------------------------------------------------------


class TestConstruction:
    @pytest.mark.parametrize("kind", SINGLE_PROPERTY_KINDS)
    def test_single_property_kind_accepts_one(self, kind):
        descriptor = IndexDescriptor(kind, "Thing", ("id",))
        assert descriptor.properties == ("id",)

    @pytest.mark.parametrize("kind", SINGLE_PROPERTY_KINDS)
    def test_single_property_kind_rejects_two(self, kind):
        with pytest.raises(IndexDefinitionError, match="exactly one property"):
            IndexDescriptor(kind, "Thing", ("id", "other"))

    @pytest.mark.parametrize("kind", list(IndexKind))
    def test_no_properties_rejected(self, kind):
        with pytest.raises(IndexDefinitionError):
            IndexDescriptor(kind, "Thing", ())

    def test_empty_owning_type_rejected(self):
        with pytest.raises(IndexDefinitionError, match="owning type"):
            IndexDescriptor(IndexKind.NODE_SINGLE_INDEX, "", ("id",))

    def test_string_properties_rejected(self):
        with pytest.raises(IndexDefinitionError):
            IndexDescriptor(IndexKind.NODE_SINGLE_INDEX, "Thing", "id")

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            IndexDescriptor(IndexKind.UNIQUE_CONSTRAINT, "Thing", ("a", "b"))

    def test_error_carries_kind_and_properties(self):
        with pytest.raises(IndexDefinitionError) as exc_info:
            IndexDescriptor(IndexKind.UNIQUE_CONSTRAINT, "Thing", ("a", "b"))
        assert exc_info.value.kind == IndexKind.UNIQUE_CONSTRAINT
        assert exc_info.value.properties == ("a", "b")

    def test_composite_kinds_accept_one_property(self):
        descriptor = IndexDescriptor(IndexKind.NODE_KEY_CONSTRAINT, "Thing", ("id",))
        assert descriptor.properties == ("id",)

    def test_properties_list_normalised_to_tuple(self):
        descriptor = IndexDescriptor.of(IndexKind.NODE_COMPOSITE_INDEX, "Thing", ["a", "b"])
        assert descriptor.properties == ("a", "b")

    def test_kind_value_accepted(self):
        descriptor = IndexDescriptor("unique_constraint", "Thing", ("id",))
        assert descriptor.kind is IndexKind.UNIQUE_CONSTRAINT

    def test_descriptor_is_immutable(self):
        descriptor = IndexDescriptor(IndexKind.NODE_SINGLE_INDEX, "Thing", ("id",))
        with pytest.raises(AttributeError):
            descriptor.owning_type = "Other"  # type: ignore[misc]

    def test_str_is_description(self):
        descriptor = IndexDescriptor(IndexKind.NODE_SINGLE_INDEX, "Thing", ("id",))
        assert str(descriptor) == "INDEX ON :`Thing`(`id`)"


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


class TestIdentity:
    def test_equal_parts_are_equal(self):
        a = IndexDescriptor(IndexKind.UNIQUE_CONSTRAINT, "Person", ("email",))
        b = IndexDescriptor(IndexKind.UNIQUE_CONSTRAINT, "Person", ("email",))
        assert a == b
        assert hash(a) == hash(b)

    def test_name_is_not_part_of_identity(self):
        a = IndexDescriptor(IndexKind.REL_SINGLE_INDEX, "KNOWS", ("since",), name="idx_1")
        b = IndexDescriptor(IndexKind.REL_SINGLE_INDEX, "KNOWS", ("since",), name="idx_2")
        c = IndexDescriptor(IndexKind.REL_SINGLE_INDEX, "KNOWS", ("since",))
        assert a == b == c
        assert len({a, b, c}) == 1

    def test_composite_property_order_matters(self):
        a = IndexDescriptor(IndexKind.NODE_COMPOSITE_INDEX, "Person", ("first", "last"))
        b = IndexDescriptor(IndexKind.NODE_COMPOSITE_INDEX, "Person", ("last", "first"))
        assert a != b
        assert a.description != b.description

    def test_kind_is_part_of_identity(self):
        a = IndexDescriptor(IndexKind.NODE_SINGLE_INDEX, "Person", ("email",))
        b = IndexDescriptor(IndexKind.UNIQUE_CONSTRAINT, "Person", ("email",))
        assert a != b

    def test_owning_type_is_case_sensitive(self):
        a = IndexDescriptor(IndexKind.NODE_SINGLE_INDEX, "Person", ("email",))
        b = IndexDescriptor(IndexKind.NODE_SINGLE_INDEX, "person", ("email",))
        assert a != b

    def test_with_name_returns_new_descriptor(self):
        original = IndexDescriptor(IndexKind.REL_SINGLE_INDEX, "KNOWS", ("since",))
        named = original.with_name("idx_1")
        assert named.name == "idx_1"
        assert original.name is None
        assert named == original
        assert named.description == original.description


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


class TestStatements:
    @pytest.mark.parametrize("kind,owning_type,properties,expected", EXPECTED_DESCRIPTIONS)
    def test_create_statement(self, kind, owning_type, properties, expected):
        descriptor = IndexDescriptor(kind, owning_type, properties)
        assert descriptor.create_statement == "CREATE " + expected

    @pytest.mark.parametrize(
        "kind,owning_type,properties,expected",
        [
            row
            for row in EXPECTED_DESCRIPTIONS
            if row[0] not in (IndexKind.REL_SINGLE_INDEX, IndexKind.REL_COMPOSITE_INDEX)
        ],
    )
    def test_drop_statement_repeats_description(self, kind, owning_type, properties, expected):
        descriptor = IndexDescriptor(kind, owning_type, properties)
        assert descriptor.drop_statement == "DROP " + expected

    @pytest.mark.parametrize(
        "kind,properties",
        [
            (IndexKind.REL_SINGLE_INDEX, ("since",)),
            (IndexKind.REL_COMPOSITE_INDEX, ("since", "weight")),
        ],
    )
    def test_relationship_index_dropped_by_name(self, kind, properties):
        descriptor = IndexDescriptor(kind, "KNOWS", properties, name="idx_1")
        assert descriptor.drop_statement == "DROP INDEX idx_1"

    def test_relationship_index_without_name_cannot_be_dropped(self):
        descriptor = IndexDescriptor(IndexKind.REL_SINGLE_INDEX, "KNOWS", ("since",))
        with pytest.raises(MissingIndexNameError):
            descriptor.drop_statement

    def test_unique_constraint_example(self):
        descriptor = IndexDescriptor(IndexKind.UNIQUE_CONSTRAINT, "Person", ("email",))
        assert descriptor.create_statement == (
            "CREATE CONSTRAINT ON (`person`:`Person`) ASSERT `person`.`email` IS UNIQUE"
        )


# ---------------------------------------------------------------------------
# Kind traits
# ---------------------------------------------------------------------------


class TestIndexKind:
    def test_relationship_kinds(self):
        assert {k for k in IndexKind if k.is_relationship} == {
            IndexKind.REL_SINGLE_INDEX,
            IndexKind.REL_COMPOSITE_INDEX,
            IndexKind.REL_PROP_EXISTENCE_CONSTRAINT,
        }

    def test_single_property_kinds(self):
        assert {k for k in IndexKind if k.is_single_property} == set(SINGLE_PROPERTY_KINDS)

    def test_constraint_kinds(self):
        assert {k for k in IndexKind if k.is_constraint} == {
            IndexKind.UNIQUE_CONSTRAINT,
            IndexKind.NODE_KEY_CONSTRAINT,
            IndexKind.NODE_PROP_EXISTENCE_CONSTRAINT,
            IndexKind.REL_PROP_EXISTENCE_CONSTRAINT,
        }

    def test_eight_kinds(self):
        assert len(IndexKind) == 8
