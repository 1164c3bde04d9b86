"""Query fields of media (anime and manga) and their connections."""

from ..core.argument import GraphQueryArgument
from ..core.field import FieldDefinition, GraphQueryField, QueryFields
from .common import ALL_QUERIES


class MediaQueryFields(QueryFields):
    """All available media query fields."""

    definitions = (
        FieldDefinition("id", ALL_QUERIES),
        FieldDefinition("idMal", ALL_QUERIES),
        FieldDefinition("title", ALL_QUERIES, children="MediaTitleQueryFields"),
        FieldDefinition("type", ALL_QUERIES),
        FieldDefinition("format", ALL_QUERIES),
        FieldDefinition("status", ALL_QUERIES),
        FieldDefinition("description", ALL_QUERIES, arguments="TextQueryArguments"),
        FieldDefinition("startDate", ALL_QUERIES, children="FuzzyDateQueryFields"),
        FieldDefinition("endDate", ALL_QUERIES, children="FuzzyDateQueryFields"),
        FieldDefinition("season", ALL_QUERIES),
        FieldDefinition("seasonYear", ALL_QUERIES),
        FieldDefinition("episodes", ALL_QUERIES),
        FieldDefinition("duration", ALL_QUERIES),
        FieldDefinition("chapters", ALL_QUERIES),
        FieldDefinition("volumes", ALL_QUERIES),
        FieldDefinition("countryOfOrigin", ALL_QUERIES),
        FieldDefinition("coverImage", ALL_QUERIES, children="MediaCoverImageQueryFields"),
        FieldDefinition("bannerImage", ALL_QUERIES),
        FieldDefinition("genres", ALL_QUERIES),
        FieldDefinition("synonyms", ALL_QUERIES),
        FieldDefinition("averageScore", ALL_QUERIES),
        FieldDefinition("meanScore", ALL_QUERIES),
        FieldDefinition("popularity", ALL_QUERIES),
        FieldDefinition("favourites", ALL_QUERIES),
        FieldDefinition("isAdult", ALL_QUERIES),
        FieldDefinition("siteUrl", ALL_QUERIES),
        FieldDefinition(
            "characters", ALL_QUERIES,
            children="CharacterConnectionQueryFields",
            arguments="CharacterConnectionQueryArguments",
        ),
        FieldDefinition(
            "staff", ALL_QUERIES,
            children="StaffConnectionQueryFields",
            arguments="StaffConnectionQueryArguments",
        ),
        FieldDefinition(
            "studios", ALL_QUERIES,
            children="StudioConnectionQueryFields",
            arguments="StudioConnectionQueryArguments",
        ),
        FieldDefinition("relations", ALL_QUERIES, children="MediaConnectionQueryFields"),
    )

    def id(self) -> GraphQueryField:
        """The id of the media."""
        return self._select("id")

    def id_mal(self) -> GraphQueryField:
        """The MyAnimeList id of the media."""
        return self._select("idMal")

    def title(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """The official titles of the media in various languages.

        Args:
            fields: Media title query fields (at least one).
        """
        return self._select("title", fields)

    def type(self) -> GraphQueryField:
        return self._select("type")

    def format(self) -> GraphQueryField:
        return self._select("format")

    def status(self) -> GraphQueryField:
        return self._select("status")

    def description(self, arguments: list[GraphQueryArgument] | None = None) -> GraphQueryField:
        """Short description of the media's story and characters."""
        return self._select("description", arguments=arguments)

    def start_date(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("startDate", fields)

    def end_date(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("endDate", fields)

    def season(self) -> GraphQueryField:
        return self._select("season")

    def season_year(self) -> GraphQueryField:
        return self._select("seasonYear")

    def episodes(self) -> GraphQueryField:
        """The amount of episodes the anime has when complete."""
        return self._select("episodes")

    def duration(self) -> GraphQueryField:
        """The general length of each anime episode in minutes."""
        return self._select("duration")

    def chapters(self) -> GraphQueryField:
        return self._select("chapters")

    def volumes(self) -> GraphQueryField:
        return self._select("volumes")

    def country_of_origin(self) -> GraphQueryField:
        return self._select("countryOfOrigin")

    def cover_image(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("coverImage", fields)

    def banner_image(self) -> GraphQueryField:
        return self._select("bannerImage")

    def genres(self) -> GraphQueryField:
        return self._select("genres")

    def synonyms(self) -> GraphQueryField:
        return self._select("synonyms")

    def average_score(self) -> GraphQueryField:
        """A weighted average score of all the user's scores of the media."""
        return self._select("averageScore")

    def mean_score(self) -> GraphQueryField:
        return self._select("meanScore")

    def popularity(self) -> GraphQueryField:
        return self._select("popularity")

    def favourites(self) -> GraphQueryField:
        return self._select("favourites")

    def is_adult(self) -> GraphQueryField:
        return self._select("isAdult")

    def site_url(self) -> GraphQueryField:
        return self._select("siteUrl")

    def characters(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        """The characters in the media.

        Args:
            fields: Character connection query fields (at least one).
            arguments: Character connection query arguments.
        """
        return self._select("characters", fields, arguments)

    def staff(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        """The staff who produced the media."""
        return self._select("staff", fields, arguments)

    def studios(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        """The companies who produced the media."""
        return self._select("studios", fields, arguments)

    def relations(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """Other media in the same or connecting franchise."""
        return self._select("relations", fields)


class MediaTitleQueryFields(QueryFields):
    """The official titles of a media in various languages."""

    definitions = (
        FieldDefinition("romaji", ALL_QUERIES),
        FieldDefinition("english", ALL_QUERIES),
        FieldDefinition("native", ALL_QUERIES),
        FieldDefinition("userPreferred", ALL_QUERIES),
    )

    def romaji(self) -> GraphQueryField:
        return self._select("romaji")

    def english(self) -> GraphQueryField:
        return self._select("english")

    def native(self) -> GraphQueryField:
        return self._select("native")

    def user_preferred(self) -> GraphQueryField:
        """The currently authenticated user's preferred title language."""
        return self._select("userPreferred")


class MediaCoverImageQueryFields(QueryFields):

    definitions = (
        FieldDefinition("extraLarge", ALL_QUERIES),
        FieldDefinition("large", ALL_QUERIES),
        FieldDefinition("medium", ALL_QUERIES),
        FieldDefinition("color", ALL_QUERIES),
    )

    def extra_large(self) -> GraphQueryField:
        return self._select("extraLarge")

    def large(self) -> GraphQueryField:
        return self._select("large")

    def medium(self) -> GraphQueryField:
        return self._select("medium")

    def color(self) -> GraphQueryField:
        """Average #hex color of the cover image."""
        return self._select("color")


class MediaConnectionQueryFields(QueryFields):
    """All available media connection query fields."""

    definitions = (
        FieldDefinition("edges", ALL_QUERIES, children="MediaEdgeQueryFields"),
        FieldDefinition("nodes", ALL_QUERIES, children="MediaQueryFields"),
        FieldDefinition("pageInfo", ALL_QUERIES, children="PageInfoQueryFields"),
    )

    def edges(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("edges", fields)

    def nodes(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("nodes", fields)

    def page_info(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """The pagination information."""
        return self._select("pageInfo", fields)


class MediaEdgeQueryFields(QueryFields):
    """All available media edge query fields."""

    definitions = (
        FieldDefinition("node", ALL_QUERIES, children="MediaQueryFields"),
        FieldDefinition("id", ALL_QUERIES),
        FieldDefinition("relationType", ALL_QUERIES),
        FieldDefinition("isMainStudio", ALL_QUERIES),
        FieldDefinition("characters", ALL_QUERIES, children="CharacterQueryFields"),
        FieldDefinition("characterRole", ALL_QUERIES),
        FieldDefinition("staffRole", ALL_QUERIES),
        FieldDefinition("favouriteOrder", ALL_QUERIES),
    )

    def node(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("node", fields)

    def id(self) -> GraphQueryField:
        """The id of the connection."""
        return self._select("id")

    def relation_type(self) -> GraphQueryField:
        """The type of relation to the parent model."""
        return self._select("relationType")

    def is_main_studio(self) -> GraphQueryField:
        return self._select("isMainStudio")

    def characters(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """The characters in the media, for staff connections."""
        return self._select("characters", fields)

    def character_role(self) -> GraphQueryField:
        return self._select("characterRole")

    def staff_role(self) -> GraphQueryField:
        return self._select("staffRole")

    def favourite_order(self) -> GraphQueryField:
        return self._select("favouriteOrder")
