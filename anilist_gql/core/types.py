"""Root query types of the AniList API."""

from enum import Enum


class QueryType(Enum):
    """Root schema contexts a query can target.

    The value is the root field name used on the wire.
    """
    MEDIA = "Media"
    CHARACTER = "Character"
    STAFF = "Staff"
    STUDIO = "Studio"
    USER = "User"

    @classmethod
    def from_root_field(cls, name: str) -> "QueryType | None":
        """Look up the query type for a root field name, e.g. 'Media'."""
        for query_type in cls:
            if query_type.value == name:
                return query_type
        return None


ALL_QUERY_TYPES = frozenset(QueryType)
