"""Tests for query fields, field rules and the shared validation helpers."""

import pytest

from anilist_gql.core.argument import QueryArguments
from anilist_gql.core.exceptions import (
    ArgumentTypeError,
    ArgumentValidationError,
    ConfigurationError,
    FieldValidationError,
)
from anilist_gql.core.field import FieldDefinition, FieldRules, GraphQueryField, QueryFields
from anilist_gql.core.registry import fields_registry, namespace_of
from anilist_gql.core.types import QueryType


# =============================================================================
# Test containers
# =============================================================================


MEDIA_ONLY = FieldRules(allowed_query_types={QueryType.MEDIA})


class GadgetQueryFields(QueryFields):
    definitions = (
        FieldDefinition("id"),
        FieldDefinition("label"),
    )

    def id(self):
        return self._select("id")

    def label_(self):
        return self._select("label")


class SprocketQueryFields(QueryFields):
    definitions = (FieldDefinition("id"),)

    def id(self):
        return self._select("id")


class GadgetQueryArguments(QueryArguments):

    def id(self, value):
        return self._argument("id", int, value)

    def search(self, value):
        return self._argument("search", str, value)


class SprocketQueryArguments(QueryArguments):

    def id(self, value):
        return self._argument("id", int, value)


class WidgetQueryFields(QueryFields):
    definitions = (
        FieldDefinition("id"),
        FieldDefinition("gadgets", children="GadgetQueryFields", arguments="GadgetQueryArguments"),
        FieldDefinition("search", FieldRules(requires_arguments=True), arguments="GadgetQueryArguments"),
        FieldDefinition("mediaOnly", MEDIA_ONLY),
    )

    def id(self):
        return self._select("id")

    def gadgets(self, fields, arguments=None):
        return self._select("gadgets", fields, arguments)

    def search(self, arguments=None):
        return self._select("search", arguments=arguments)


class StaffOnlyQueryFields(QueryFields):
    definitions = (
        FieldDefinition("id", FieldRules(allowed_query_types={QueryType.STAFF})),
    )


@pytest.fixture
def widget():
    return WidgetQueryFields(QueryType.MEDIA)


@pytest.fixture
def gadget():
    return GadgetQueryFields(QueryType.MEDIA)


# =============================================================================
# Tests: FieldRules
# =============================================================================


class TestFieldRules:
    """Tests for FieldRules."""

    def test_defaults_allow_every_query_type(self):
        rules = FieldRules()
        assert rules.requires_arguments is False
        assert all(rules.allows(query_type) for query_type in QueryType)

    def test_allowed_query_types_normalized_to_frozenset(self):
        rules = FieldRules(allowed_query_types=[QueryType.USER, QueryType.USER])
        assert rules.allowed_query_types == frozenset({QueryType.USER})

    def test_allows(self):
        assert MEDIA_ONLY.allows(QueryType.MEDIA)
        assert not MEDIA_ONLY.allows(QueryType.STUDIO)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            MEDIA_ONLY.requires_arguments = True


# =============================================================================
# Tests: GraphQueryField
# =============================================================================


class TestGraphQueryFieldConstruction:
    """Tests for creating fields under a query type."""

    def test_disallowed_query_type(self):
        with pytest.raises(ConfigurationError, match=r"Query field \(mediaOnly\)"):
            GraphQueryField("mediaOnly", WidgetQueryFields, QueryType.STAFF, MEDIA_ONLY)

    def test_allowed_query_type(self):
        field = GraphQueryField("mediaOnly", WidgetQueryFields, QueryType.MEDIA, MEDIA_ONLY)
        assert field.name == "mediaOnly"
        assert field.owner is WidgetQueryFields
        assert field.children == ()
        assert field.arguments == ()
        assert not field.is_branch

    def test_container_fails_for_disallowed_query_type(self):
        with pytest.raises(ConfigurationError):
            WidgetQueryFields(QueryType.STAFF)

    def test_container_creates_every_field(self):
        container = StaffOnlyQueryFields(QueryType.STAFF)
        assert container.query_type is QueryType.STAFF
        assert StaffOnlyQueryFields.field_names() == ["id"]


class TestAttachFields:
    """Tests for attaching child fields."""

    def test_attach_children(self, widget, gadget):
        field = widget.gadgets([gadget.id(), gadget.label_()])
        assert field.name == "gadgets"
        assert [child.name for child in field.children] == ["id", "label"]

    def test_attach_returns_new_node(self, widget, gadget):
        first = widget.gadgets([gadget.id()])
        second = widget.gadgets([gadget.label_()])
        assert first is not second
        assert [c.name for c in first.children] == ["id"]
        assert [c.name for c in second.children] == ["label"]

    def test_leaf_returns_stored_node(self, widget):
        assert widget.id() is widget.id()

    @pytest.mark.parametrize("fields", [None, []])
    def test_empty_children(self, widget, fields):
        with pytest.raises(FieldValidationError) as exc_info:
            widget.gadgets(fields)
        assert str(exc_info.value) == "Query field (gadgets) requires at least one gadget query field."

    def test_wrong_owner_names_every_field_in_order(self, widget, gadget):
        sprocket = SprocketQueryFields(QueryType.MEDIA)
        with pytest.raises(FieldValidationError) as exc_info:
            widget.gadgets([sprocket.id(), gadget.id(), widget.id()])
        assert str(exc_info.value) == "The following fields are not valid gadget query fields id, id."

    def test_wrong_owner_message_order(self, widget, gadget):
        with pytest.raises(FieldValidationError) as exc_info:
            widget.gadgets([widget.gadgets([gadget.id()]), gadget.id(), widget.id()])
        assert str(exc_info.value).endswith("query fields gadgets, id.")

    def test_non_field_children(self, widget):
        with pytest.raises(FieldValidationError, match="not valid gadget query fields"):
            widget.gadgets(["id"])

    def test_leaf_rejects_children(self, widget, gadget):
        with pytest.raises(FieldValidationError, match="does not accept child query fields"):
            widget.id().attach([gadget.id()])


class TestAttachArguments:
    """Tests for attaching arguments."""

    def test_attach_arguments(self, widget, gadget):
        args = GadgetQueryArguments()
        field = widget.gadgets([gadget.id()], [args.id(1), args.search("x")])
        assert [a.name for a in field.arguments] == ["id", "search"]

    def test_wrong_owner(self, widget, gadget):
        sprocket_args = SprocketQueryArguments()
        with pytest.raises(ArgumentValidationError) as exc_info:
            widget.gadgets([gadget.id()], [GadgetQueryArguments().id(1), sprocket_args.id(2)])
        assert str(exc_info.value) == "The following arguments are not valid gadget query arguments id."

    def test_wrong_value_type(self, widget, gadget):
        with pytest.raises(ArgumentTypeError, match=r"Query argument \(id\)"):
            widget.gadgets([gadget.id()], [GadgetQueryArguments().id("1")])

    def test_owner_checked_before_value_type(self, widget, gadget):
        with pytest.raises(ArgumentValidationError):
            widget.gadgets([gadget.id()], [SprocketQueryArguments().id("not an int")])

    def test_required_arguments_missing(self, widget):
        with pytest.raises(ArgumentValidationError) as exc_info:
            widget.search()
        assert str(exc_info.value) == "Query field (search) requires at least one gadget query argument."

    def test_required_arguments_given(self, widget):
        field = widget.search([GadgetQueryArguments().search("bebop")])
        assert field.arguments[0].value == "bebop"

    def test_field_without_arguments_class(self, widget):
        with pytest.raises(ArgumentValidationError, match="does not accept query arguments"):
            widget.id().attach(arguments=[GadgetQueryArguments().id(1)])


class TestRegistryResolution:
    """Tests for resolving container names."""

    def test_unknown_children_class(self):
        field = GraphQueryField(
            "ghost", WidgetQueryFields, QueryType.MEDIA, FieldRules(),
            children_class="GhostQueryFields",
        )
        with pytest.raises(ConfigurationError, match="Unknown query fields class GhostQueryFields"):
            field.attach([])

    def test_containers_resolve_in_defining_namespace(self):
        namespace = namespace_of(WidgetQueryFields)
        assert namespace == WidgetQueryFields.__module__.partition(".")[0]
        assert fields_registry.resolve("GadgetQueryFields", namespace) is GadgetQueryFields
        assert not fields_registry.has("GadgetQueryFields")
        assert "GadgetQueryFields" in fields_registry.names(namespace)

    def test_unknown_accessor_name(self, widget):
        with pytest.raises(ConfigurationError, match=r"no query field \(ghost\)"):
            widget._select("ghost")

    def test_labels(self):
        assert WidgetQueryFields.label() == "widget"
        assert StaffOnlyQueryFields.label() == "staff only"
        assert GadgetQueryArguments.label() == "gadget"
