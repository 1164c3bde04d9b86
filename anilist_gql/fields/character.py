"""Query fields of characters and character connections."""

from ..core.argument import GraphQueryArgument
from ..core.field import FieldDefinition, GraphQueryField, QueryFields
from .common import ALL_QUERIES


class CharacterQueryFields(QueryFields):
    """All available character query fields."""

    definitions = (
        FieldDefinition("id", ALL_QUERIES),
        FieldDefinition("name", ALL_QUERIES, children="CharacterNameQueryFields"),
        FieldDefinition("image", ALL_QUERIES, children="CharacterImageQueryFields"),
        FieldDefinition("description", ALL_QUERIES, arguments="TextQueryArguments"),
        FieldDefinition("gender", ALL_QUERIES),
        FieldDefinition("dateOfBirth", ALL_QUERIES, children="FuzzyDateQueryFields"),
        FieldDefinition("age", ALL_QUERIES),
        FieldDefinition("bloodType", ALL_QUERIES),
        FieldDefinition("isFavourite", ALL_QUERIES),
        FieldDefinition("siteUrl", ALL_QUERIES),
        FieldDefinition("favourites", ALL_QUERIES),
        FieldDefinition(
            "media", ALL_QUERIES,
            children="MediaConnectionQueryFields",
            arguments="MediaConnectionQueryArguments",
        ),
    )

    def id(self) -> GraphQueryField:
        """The id of the character."""
        return self._select("id")

    def name(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """The names of the character.

        Args:
            fields: Character name query fields (at least one).
        """
        return self._select("name", fields)

    def image(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("image", fields)

    def description(self, arguments: list[GraphQueryArgument] | None = None) -> GraphQueryField:
        return self._select("description", arguments=arguments)

    def gender(self) -> GraphQueryField:
        return self._select("gender")

    def date_of_birth(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("dateOfBirth", fields)

    def age(self) -> GraphQueryField:
        return self._select("age")

    def blood_type(self) -> GraphQueryField:
        return self._select("bloodType")

    def is_favourite(self) -> GraphQueryField:
        """If the character is marked as favourite by the authenticated user."""
        return self._select("isFavourite")

    def site_url(self) -> GraphQueryField:
        return self._select("siteUrl")

    def favourites(self) -> GraphQueryField:
        """The amount of users who have this character as a favourite."""
        return self._select("favourites")

    def media(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        """Media the character is in."""
        return self._select("media", fields, arguments)


class CharacterNameQueryFields(QueryFields):
    """The names of a character."""

    definitions = (
        FieldDefinition("first", ALL_QUERIES),
        FieldDefinition("middle", ALL_QUERIES),
        FieldDefinition("last", ALL_QUERIES),
        FieldDefinition("full", ALL_QUERIES),
        FieldDefinition("native", ALL_QUERIES),
        FieldDefinition("alternative", ALL_QUERIES),
        FieldDefinition("alternativeSpoiler", ALL_QUERIES),
        FieldDefinition("userPreferred", ALL_QUERIES),
    )

    def first(self) -> GraphQueryField:
        return self._select("first")

    def middle(self) -> GraphQueryField:
        return self._select("middle")

    def last(self) -> GraphQueryField:
        return self._select("last")

    def full(self) -> GraphQueryField:
        """The character's first and last name."""
        return self._select("full")

    def native(self) -> GraphQueryField:
        return self._select("native")

    def alternative(self) -> GraphQueryField:
        return self._select("alternative")

    def alternative_spoiler(self) -> GraphQueryField:
        return self._select("alternativeSpoiler")

    def user_preferred(self) -> GraphQueryField:
        return self._select("userPreferred")


class CharacterImageQueryFields(QueryFields):

    definitions = (
        FieldDefinition("large", ALL_QUERIES),
        FieldDefinition("medium", ALL_QUERIES),
    )

    def large(self) -> GraphQueryField:
        return self._select("large")

    def medium(self) -> GraphQueryField:
        return self._select("medium")


class CharacterConnectionQueryFields(QueryFields):
    """All available character connection query fields."""

    definitions = (
        FieldDefinition("edges", ALL_QUERIES, children="CharacterEdgeQueryFields"),
        FieldDefinition("nodes", ALL_QUERIES, children="CharacterQueryFields"),
        FieldDefinition("pageInfo", ALL_QUERIES, children="PageInfoQueryFields"),
    )

    def edges(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("edges", fields)

    def nodes(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("nodes", fields)

    def page_info(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("pageInfo", fields)


class CharacterEdgeQueryFields(QueryFields):
    """All available character edge query fields."""

    definitions = (
        FieldDefinition("node", ALL_QUERIES, children="CharacterQueryFields"),
        FieldDefinition("id", ALL_QUERIES),
        FieldDefinition("role", ALL_QUERIES),
        FieldDefinition(
            "voiceActors", ALL_QUERIES,
            children="StaffQueryFields",
            arguments="StaffQueryArguments",
        ),
        FieldDefinition("media", ALL_QUERIES, children="MediaQueryFields"),
        FieldDefinition("favouriteOrder", ALL_QUERIES),
    )

    def node(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """The character at the end of the edge.

        Args:
            fields: Character query fields (at least one).
        """
        return self._select("node", fields)

    def id(self) -> GraphQueryField:
        """The id of the connection."""
        return self._select("id")

    def role(self) -> GraphQueryField:
        """The character's role in the media."""
        return self._select("role")

    def voice_actors(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        """The voice actors of the character.

        Args:
            fields: Staff query fields (at least one).
            arguments: Staff query arguments, e.g. language and sort.
        """
        return self._select("voiceActors", fields, arguments)

    def media(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """The media the character is in."""
        return self._select("media", fields)

    def favourite_order(self) -> GraphQueryField:
        """The order the character should be displayed from the user's favourites."""
        return self._select("favouriteOrder")
