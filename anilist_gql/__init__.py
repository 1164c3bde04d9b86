"""Typed query builder for the AniList GraphQL API."""

from .core import (
    AniListExecutor,
    AniListQueryError,
    ArgumentTypeError,
    ArgumentValidationError,
    ConfigurationError,
    FieldValidationError,
    GraphQLError,
    QueryBuilder,
    QueryDocument,
    QueryType,
)
from . import arguments, enums, fields

__all__ = [
    "AniListExecutor",
    "AniListQueryError",
    "ArgumentTypeError",
    "ArgumentValidationError",
    "ConfigurationError",
    "FieldValidationError",
    "GraphQLError",
    "QueryBuilder",
    "QueryDocument",
    "QueryType",
    "arguments",
    "enums",
    "fields",
]
