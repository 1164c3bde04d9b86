"""Exceptions raised while building AniList queries.

All of them are raised synchronously at build time and are never recovered
internally; the caller is expected to fix the call site.
"""


class AniListQueryError(Exception):
    """Base class for query building errors."""


class ConfigurationError(AniListQueryError):
    """A field or container is used in a context the schema data disallows."""


class FieldValidationError(AniListQueryError):
    """Child fields are missing or belong to the wrong query fields class."""


class ArgumentValidationError(AniListQueryError):
    """Arguments are missing or belong to the wrong query arguments class."""


class ArgumentTypeError(AniListQueryError, TypeError):
    """An argument value does not match its expected type."""
