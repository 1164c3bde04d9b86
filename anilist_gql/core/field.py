"""Query fields, their rules, and the base class for field containers.

A query fields container (one per schema type) eagerly creates a
GraphQueryField for every field of its type. Accessors hand back a field
node; branch fields must first be given child fields that belong to the
right container class, and any arguments must belong to the right
arguments class:

    edge = CharacterEdgeQueryFields(QueryType.MEDIA)
    character = CharacterQueryFields(QueryType.MEDIA)
    edge.node([character.id()])   # renders as: node { id }
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace

from .argument import GraphQueryArgument
from .exceptions import ArgumentValidationError, ConfigurationError, FieldValidationError
from .naming import describe_class
from .registry import arguments_registry, fields_registry, namespace_of
from .types import ALL_QUERY_TYPES, QueryType


@dataclass(frozen=True)
class FieldRules:
    """Whether a field needs arguments and which query types may contain it."""
    requires_arguments: bool = False
    allowed_query_types: frozenset[QueryType] = ALL_QUERY_TYPES

    def __post_init__(self):
        object.__setattr__(self, "allowed_query_types", frozenset(self.allowed_query_types))

    def allows(self, query_type: QueryType) -> bool:
        return query_type in self.allowed_query_types


@dataclass(frozen=True)
class FieldDefinition:
    """Schema data for one field of a query fields container.

    children and arguments name the container classes whose fields and
    arguments this field accepts; None means the field takes none.
    """
    name: str
    rules: FieldRules = field(default_factory=FieldRules)
    children: str | None = None
    arguments: str | None = None


@dataclass(frozen=True, eq=False)
class GraphQueryField:
    """One selectable field, scoped to the query type it was created for."""
    name: str
    owner: type
    query_type: QueryType
    rules: FieldRules
    children_class: str | None = None
    arguments_class: str | None = None
    children: tuple["GraphQueryField", ...] = ()
    arguments: tuple[GraphQueryArgument, ...] = ()

    def __post_init__(self):
        if not self.rules.allows(self.query_type):
            raise ConfigurationError(
                f"Query field ({self.name}) of {self.owner.__name__} is not "
                f"available in {self.query_type.value} queries."
            )

    @property
    def is_branch(self) -> bool:
        """True if the field selects a nested object type."""
        return self.children_class is not None

    def attach(
        self,
        fields: Iterable["GraphQueryField"] | None = None,
        arguments: Iterable[GraphQueryArgument] | None = None,
    ) -> "GraphQueryField":
        """Validate child fields and arguments and return a configured copy.

        The node this is called on is left untouched, so a container can
        hand out the same field several times.

        Raises:
            FieldValidationError: A branch field got no children, a leaf got
                children, or a child belongs to the wrong container.
            ArgumentValidationError: Arguments are missing, unexpected, or
                belong to the wrong arguments container.
            ArgumentTypeError: An argument value has the wrong type.
        """
        fields = list(fields or ())
        arguments = list(arguments or ())

        namespace = namespace_of(self.owner)
        if self.is_branch:
            children = fields_registry.resolve(self.children_class, namespace)
            check_fields(self.name, children, fields)
        elif fields:
            raise FieldValidationError(
                f"Query field ({self.name}) does not accept child query fields."
            )

        expected_arguments = (
            arguments_registry.resolve(self.arguments_class, namespace)
            if self.arguments_class else None
        )
        check_arguments(
            self.name,
            expected_arguments,
            arguments,
            required=self.rules.requires_arguments,
        )

        if not fields and not arguments:
            return self
        return replace(self, children=tuple(fields), arguments=tuple(arguments))


def check_fields(name: str, expected: type, fields: Sequence[GraphQueryField]):
    """Require at least one field, all owned by the expected container."""
    label = expected.label()
    if not fields:
        raise FieldValidationError(
            f"Query field ({name}) requires at least one {label} query field."
        )

    invalid = [
        _describe(f) for f in fields
        if not isinstance(f, GraphQueryField) or f.owner is not expected
    ]
    if invalid:
        raise FieldValidationError(
            f"The following fields are not valid {label} query fields {', '.join(invalid)}."
        )


def check_arguments(
    name: str,
    expected: type | None,
    arguments: Sequence[GraphQueryArgument],
    required: bool = False,
):
    """Require arguments owned by the expected container with valid values."""
    if not arguments:
        if required:
            label = f"{expected.label()} query argument" if expected else "query argument"
            raise ArgumentValidationError(
                f"Query field ({name}) requires at least one {label}."
            )
        return

    if expected is None:
        raise ArgumentValidationError(f"Query field ({name}) does not accept query arguments.")

    invalid = [
        _describe(a) for a in arguments
        if not isinstance(a, GraphQueryArgument) or a.owner is not expected
    ]
    if invalid:
        raise ArgumentValidationError(
            f"The following arguments are not valid {expected.label()} query arguments "
            f"{', '.join(invalid)}."
        )

    for argument in arguments:
        argument.is_valid_argument_type()


def _describe(item) -> str:
    return getattr(item, "name", None) or repr(item)


class QueryFields:
    """Base class for query fields containers.

    Subclasses list their schema fields in `definitions` and expose one
    accessor per field that delegates to `_select`.
    """

    definitions: tuple[FieldDefinition, ...] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        fields_registry.register(cls)

    def __init__(self, query_type: QueryType):
        self.query_type = query_type
        self._fields: dict[str, GraphQueryField] = {}
        self._initialize_properties()

    def _initialize_properties(self):
        """Create every field of the type for this container's query type."""
        for definition in self.definitions:
            self._fields[definition.name] = GraphQueryField(
                name=definition.name,
                owner=type(self),
                query_type=self.query_type,
                rules=definition.rules,
                children_class=definition.children,
                arguments_class=definition.arguments,
            )

    @classmethod
    def label(cls) -> str:
        return describe_class(cls.__name__, "QueryFields")

    @classmethod
    def field_names(cls) -> list[str]:
        return [definition.name for definition in cls.definitions]

    def _select(
        self,
        name: str,
        fields: Iterable[GraphQueryField] | None = None,
        arguments: Iterable[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        try:
            query_field = self._fields[name]
        except KeyError:
            raise ConfigurationError(
                f"{type(self).__name__} has no query field ({name})."
            ) from None
        return query_field.attach(fields, arguments)
