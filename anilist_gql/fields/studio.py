"""Query fields of animation studios and studio connections."""

from ..core.argument import GraphQueryArgument
from ..core.field import FieldDefinition, GraphQueryField, QueryFields
from .common import ALL_QUERIES


class StudioQueryFields(QueryFields):
    """All available studio query fields."""

    definitions = (
        FieldDefinition("id", ALL_QUERIES),
        FieldDefinition("name", ALL_QUERIES),
        FieldDefinition("isAnimationStudio", ALL_QUERIES),
        FieldDefinition(
            "media", ALL_QUERIES,
            children="MediaConnectionQueryFields",
            arguments="MediaConnectionQueryArguments",
        ),
        FieldDefinition("siteUrl", ALL_QUERIES),
        FieldDefinition("isFavourite", ALL_QUERIES),
        FieldDefinition("favourites", ALL_QUERIES),
    )

    def id(self) -> GraphQueryField:
        return self._select("id")

    def name(self) -> GraphQueryField:
        return self._select("name")

    def is_animation_studio(self) -> GraphQueryField:
        """If the studio is an animation studio or a different kind of company."""
        return self._select("isAnimationStudio")

    def media(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        """The media the studio has worked on."""
        return self._select("media", fields, arguments)

    def site_url(self) -> GraphQueryField:
        return self._select("siteUrl")

    def is_favourite(self) -> GraphQueryField:
        return self._select("isFavourite")

    def favourites(self) -> GraphQueryField:
        return self._select("favourites")


class StudioConnectionQueryFields(QueryFields):
    """All available studio connection query fields."""

    definitions = (
        FieldDefinition("edges", ALL_QUERIES, children="StudioEdgeQueryFields"),
        FieldDefinition("nodes", ALL_QUERIES, children="StudioQueryFields"),
        FieldDefinition("pageInfo", ALL_QUERIES, children="PageInfoQueryFields"),
    )

    def edges(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """Studio edges of the connection.

        Args:
            fields: Studio edge query fields (at least one).
        """
        return self._select("edges", fields)

    def nodes(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """Studios of the connection.

        Args:
            fields: Studio query fields (at least one).
        """
        return self._select("nodes", fields)

    def page_info(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """The pagination information."""
        return self._select("pageInfo", fields)


class StudioEdgeQueryFields(QueryFields):
    """All available studio edge query fields."""

    definitions = (
        FieldDefinition("node", ALL_QUERIES, children="StudioQueryFields"),
        FieldDefinition("id", ALL_QUERIES),
        FieldDefinition("isMain", ALL_QUERIES),
        FieldDefinition("favouriteOrder", ALL_QUERIES),
    )

    def node(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("node", fields)

    def id(self) -> GraphQueryField:
        """The id of the connection."""
        return self._select("id")

    def is_main(self) -> GraphQueryField:
        """If the studio is the main animation studio of the anime."""
        return self._select("isMain")

    def favourite_order(self) -> GraphQueryField:
        return self._select("favouriteOrder")
