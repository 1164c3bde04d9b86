"""Core modules for building AniList queries."""

from .argument import GraphQueryArgument, QueryArguments
from .exceptions import (
    AniListQueryError,
    ArgumentTypeError,
    ArgumentValidationError,
    ConfigurationError,
    FieldValidationError,
)
from .executor import ANILIST_URL, AniListExecutor, GraphQLError
from .field import FieldDefinition, FieldRules, GraphQueryField, QueryFields
from .generator import FieldsGenerator
from .ir import IRArgument, IREnum, IRField, IRSchema, IRType
from .parser import SchemaParser
from .query_builder import QueryBuilder, QueryDocument
from .registry import DEFAULT_NAMESPACE, arguments_registry, fields_registry
from .types import ALL_QUERY_TYPES, QueryType
from .values import render_value

__all__ = [
    # Query types
    "ALL_QUERY_TYPES",
    "QueryType",
    # Fields and arguments
    "FieldDefinition",
    "FieldRules",
    "GraphQueryField",
    "QueryFields",
    "GraphQueryArgument",
    "QueryArguments",
    "DEFAULT_NAMESPACE",
    "arguments_registry",
    "fields_registry",
    "render_value",
    # Errors
    "AniListQueryError",
    "ArgumentTypeError",
    "ArgumentValidationError",
    "ConfigurationError",
    "FieldValidationError",
    # Query Builder
    "QueryBuilder",
    "QueryDocument",
    # Executor
    "ANILIST_URL",
    "AniListExecutor",
    "GraphQLError",
    # IR, parser and generator
    "IRArgument",
    "IREnum",
    "IRField",
    "IRSchema",
    "IRType",
    "SchemaParser",
    "FieldsGenerator",
]
