"""Query builder for AniList queries.

Composes a root selection of configured field nodes and root arguments into
a QueryDocument, which renders to the query text AniList accepts.

    builder = QueryBuilder(QueryType.MEDIA)
    media = builder.fields
    title = builder.query_fields(MediaTitleQueryFields)
    document = builder.build(
        [media.id(), media.title([title.romaji()])],
        [builder.arguments.id(1)],
    )
    document.text  # 'query { Media(id: 1) { id title { romaji } } }'
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from graphql import (
    ArgumentNode,
    DocumentNode,
    FieldNode,
    GraphQLSchema,
    NameNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    print_ast,
    validate,
)

from .argument import GraphQueryArgument, QueryArguments
from .exceptions import ConfigurationError
from .field import GraphQueryField, QueryFields, check_arguments, check_fields
from .registry import DEFAULT_NAMESPACE, arguments_registry, fields_registry
from .types import QueryType
from .values import render_value, value_to_node

logger = logging.getLogger(__name__)

# Root containers per query type, resolved by name once the field classes
# have been imported.
ROOT_CONTAINERS: dict[QueryType, tuple[str, str]] = {
    QueryType.MEDIA: ("MediaQueryFields", "MediaQueryArguments"),
    QueryType.CHARACTER: ("CharacterQueryFields", "CharacterQueryArguments"),
    QueryType.STAFF: ("StaffQueryFields", "StaffQueryArguments"),
    QueryType.STUDIO: ("StudioQueryFields", "StudioQueryArguments"),
    QueryType.USER: ("UserQueryFields", "UserQueryArguments"),
}


def render_argument(argument: GraphQueryArgument) -> str:
    return f"{argument.name}: {render_value(argument.value)}"


def render_selection(
    name: str,
    arguments: Iterable[GraphQueryArgument],
    children: Iterable[GraphQueryField],
) -> str:
    """Render name(arg: value, ...) { child child }, depth first."""
    text = name
    arguments = list(arguments)
    children = list(children)
    if arguments:
        text += f"({', '.join(render_argument(a) for a in arguments)})"
    if children:
        text += f" {{ {' '.join(render_field(c) for c in children)} }}"
    return text


def render_field(field: GraphQueryField) -> str:
    return render_selection(field.name, field.arguments, field.children)


def _field_node(
    name: str,
    arguments: Iterable[GraphQueryArgument],
    children: Iterable[GraphQueryField],
) -> FieldNode:
    selections = tuple(_field_node(c.name, c.arguments, c.children) for c in children)
    return FieldNode(
        alias=None,
        name=NameNode(value=name),
        arguments=tuple(
            ArgumentNode(name=NameNode(value=a.name), value=value_to_node(a.value))
            for a in arguments
        ),
        directives=(),
        selection_set=SelectionSetNode(selections=selections) if selections else None,
    )


@dataclass(frozen=True)
class QueryDocument:
    """A built query: the root query type, its arguments and selection."""
    query_type: QueryType
    fields: tuple[GraphQueryField, ...]
    arguments: tuple[GraphQueryArgument, ...] = ()

    @property
    def text(self) -> str:
        """The query in single-line wire form."""
        root = render_selection(self.query_type.value, self.arguments, self.fields)
        return f"query {{ {root} }}"

    def __str__(self) -> str:
        return self.text

    def to_ast(self) -> DocumentNode:
        """Build the graphql-core document for this query."""
        root = _field_node(self.query_type.value, self.arguments, self.fields)
        operation = OperationDefinitionNode(
            operation=OperationType.QUERY,
            name=None,
            variable_definitions=(),
            directives=(),
            selection_set=SelectionSetNode(selections=(root,)),
        )
        return DocumentNode(definitions=(operation,))

    def pretty(self) -> str:
        """The query printed over several indented lines."""
        return print_ast(self.to_ast())

    def validate(self, schema: GraphQLSchema) -> list[str]:
        """Validate against a schema; returns error messages (empty if valid)."""
        return [error.message for error in validate(schema, self.to_ast())]

    def to_payload(self, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """The JSON request body for this query."""
        payload: dict[str, Any] = {"query": self.text}
        if variables:
            payload["variables"] = variables
        return payload


class QueryBuilder:
    """Builds query documents rooted at one query type."""

    def __init__(self, query_type: QueryType, namespace: str = DEFAULT_NAMESPACE):
        """Create a builder for query_type.

        The root containers are looked up in namespace, the top-level
        package (or module name) that defines them. Pass the name of a
        generated module to build queries from its containers.
        """
        self.query_type = query_type
        self.namespace = namespace
        fields_name, arguments_name = ROOT_CONTAINERS[query_type]
        self.root_fields_class = fields_registry.resolve(fields_name, namespace)
        self.root_arguments_class = arguments_registry.resolve(arguments_name, namespace)
        self._containers: dict[type, QueryFields] = {}

    @property
    def fields(self) -> QueryFields:
        """The root query fields container, e.g. MediaQueryFields."""
        return self.query_fields(self.root_fields_class)

    @property
    def arguments(self) -> QueryArguments:
        """The root query arguments container, e.g. MediaQueryArguments."""
        return self.query_arguments(self.root_arguments_class)

    def query_fields(self, fields_class: type) -> QueryFields:
        """A query fields container scoped to this builder's query type."""
        if fields_class not in self._containers:
            self._containers[fields_class] = fields_class(self.query_type)
        return self._containers[fields_class]

    def query_arguments(self, arguments_class: type) -> QueryArguments:
        return arguments_class()

    def build(
        self,
        fields: Iterable[GraphQueryField],
        arguments: Iterable[GraphQueryArgument] | None = None,
    ) -> QueryDocument:
        """Validate the root selection and return the query document.

        Raises:
            FieldValidationError: No root fields, or fields that do not
                belong to the root container.
            ArgumentValidationError: Root arguments from the wrong container.
            ArgumentTypeError: A root argument value has the wrong type.
            ConfigurationError: A field in the tree was configured for a
                different query type.
        """
        fields = list(fields or ())
        arguments = list(arguments or ())

        check_fields(self.query_type.value, self.root_fields_class, fields)
        check_arguments(self.query_type.value, self.root_arguments_class, arguments)
        for field in fields:
            self._check_tree(field)

        document = QueryDocument(self.query_type, tuple(fields), tuple(arguments))
        logger.debug(
            "Built %s query with %d root fields and %d arguments",
            self.query_type.value, len(fields), len(arguments),
        )
        return document

    def _check_tree(self, field: GraphQueryField):
        if field.query_type is not self.query_type or not field.rules.allows(self.query_type):
            raise ConfigurationError(
                f"Query field ({field.name}) was configured for "
                f"{field.query_type.value} queries and cannot be used in a "
                f"{self.query_type.value} query."
            )
        for child in field.children:
            self._check_tree(child)
