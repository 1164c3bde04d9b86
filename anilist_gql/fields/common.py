"""Field rules and the small object types shared across the schema."""

from ..core.field import FieldDefinition, FieldRules, GraphQueryField, QueryFields
from ..core.types import QueryType

# In the AniList schema every object type kept here is reachable from every
# root query (a Studio query reaches characters through its media, a User
# query reaches studios through favourites), so they all use ALL_QUERIES.
# The types in user.py are reachable from User queries only.
ALL_QUERIES = FieldRules()
USER_QUERIES = FieldRules(allowed_query_types={QueryType.USER})


class FuzzyDateQueryFields(QueryFields):
    """Date fields where any part may be missing."""

    definitions = (
        FieldDefinition("year", ALL_QUERIES),
        FieldDefinition("month", ALL_QUERIES),
        FieldDefinition("day", ALL_QUERIES),
    )

    def year(self) -> GraphQueryField:
        return self._select("year")

    def month(self) -> GraphQueryField:
        return self._select("month")

    def day(self) -> GraphQueryField:
        return self._select("day")


class PageInfoQueryFields(QueryFields):
    """Pagination information of a connection."""

    definitions = (
        FieldDefinition("total", ALL_QUERIES),
        FieldDefinition("perPage", ALL_QUERIES),
        FieldDefinition("currentPage", ALL_QUERIES),
        FieldDefinition("lastPage", ALL_QUERIES),
        FieldDefinition("hasNextPage", ALL_QUERIES),
    )

    def total(self) -> GraphQueryField:
        """The total number of items. AniList caps this for large result sets."""
        return self._select("total")

    def per_page(self) -> GraphQueryField:
        return self._select("perPage")

    def current_page(self) -> GraphQueryField:
        return self._select("currentPage")

    def last_page(self) -> GraphQueryField:
        return self._select("lastPage")

    def has_next_page(self) -> GraphQueryField:
        return self._select("hasNextPage")
