"""Query fields of staff members and staff connections."""

from ..core.argument import GraphQueryArgument
from ..core.field import FieldDefinition, GraphQueryField, QueryFields
from .common import ALL_QUERIES


class StaffQueryFields(QueryFields):
    """All available staff query fields."""

    definitions = (
        FieldDefinition("id", ALL_QUERIES),
        FieldDefinition("name", ALL_QUERIES, children="StaffNameQueryFields"),
        FieldDefinition("languageV2", ALL_QUERIES),
        FieldDefinition("image", ALL_QUERIES, children="StaffImageQueryFields"),
        FieldDefinition("description", ALL_QUERIES, arguments="TextQueryArguments"),
        FieldDefinition("primaryOccupations", ALL_QUERIES),
        FieldDefinition("gender", ALL_QUERIES),
        FieldDefinition("dateOfBirth", ALL_QUERIES, children="FuzzyDateQueryFields"),
        FieldDefinition("dateOfDeath", ALL_QUERIES, children="FuzzyDateQueryFields"),
        FieldDefinition("age", ALL_QUERIES),
        FieldDefinition("yearsActive", ALL_QUERIES),
        FieldDefinition("homeTown", ALL_QUERIES),
        FieldDefinition("bloodType", ALL_QUERIES),
        FieldDefinition("isFavourite", ALL_QUERIES),
        FieldDefinition("siteUrl", ALL_QUERIES),
        FieldDefinition("favourites", ALL_QUERIES),
        FieldDefinition(
            "staffMedia", ALL_QUERIES,
            children="MediaConnectionQueryFields",
            arguments="MediaConnectionQueryArguments",
        ),
        FieldDefinition(
            "characters", ALL_QUERIES,
            children="CharacterConnectionQueryFields",
            arguments="CharacterConnectionQueryArguments",
        ),
    )

    def id(self) -> GraphQueryField:
        """The id of the staff member."""
        return self._select("id")

    def name(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("name", fields)

    def language(self) -> GraphQueryField:
        """The primary language of the staff member."""
        return self._select("languageV2")

    def image(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("image", fields)

    def description(self, arguments: list[GraphQueryArgument] | None = None) -> GraphQueryField:
        return self._select("description", arguments=arguments)

    def primary_occupations(self) -> GraphQueryField:
        return self._select("primaryOccupations")

    def gender(self) -> GraphQueryField:
        return self._select("gender")

    def date_of_birth(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("dateOfBirth", fields)

    def date_of_death(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("dateOfDeath", fields)

    def age(self) -> GraphQueryField:
        return self._select("age")

    def years_active(self) -> GraphQueryField:
        """[startYear, endYear] (if the 2nd value is not present staff is still active)."""
        return self._select("yearsActive")

    def home_town(self) -> GraphQueryField:
        return self._select("homeTown")

    def blood_type(self) -> GraphQueryField:
        return self._select("bloodType")

    def is_favourite(self) -> GraphQueryField:
        return self._select("isFavourite")

    def site_url(self) -> GraphQueryField:
        return self._select("siteUrl")

    def favourites(self) -> GraphQueryField:
        return self._select("favourites")

    def staff_media(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        """Media where the staff member has a production role."""
        return self._select("staffMedia", fields, arguments)

    def characters(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        """Characters voiced by the actor."""
        return self._select("characters", fields, arguments)


class StaffNameQueryFields(QueryFields):
    """The names of a staff member."""

    definitions = (
        FieldDefinition("first", ALL_QUERIES),
        FieldDefinition("middle", ALL_QUERIES),
        FieldDefinition("last", ALL_QUERIES),
        FieldDefinition("full", ALL_QUERIES),
        FieldDefinition("native", ALL_QUERIES),
        FieldDefinition("alternative", ALL_QUERIES),
        FieldDefinition("userPreferred", ALL_QUERIES),
    )

    def first(self) -> GraphQueryField:
        return self._select("first")

    def middle(self) -> GraphQueryField:
        return self._select("middle")

    def last(self) -> GraphQueryField:
        return self._select("last")

    def full(self) -> GraphQueryField:
        return self._select("full")

    def native(self) -> GraphQueryField:
        return self._select("native")

    def alternative(self) -> GraphQueryField:
        return self._select("alternative")

    def user_preferred(self) -> GraphQueryField:
        return self._select("userPreferred")


class StaffImageQueryFields(QueryFields):

    definitions = (
        FieldDefinition("large", ALL_QUERIES),
        FieldDefinition("medium", ALL_QUERIES),
    )

    def large(self) -> GraphQueryField:
        return self._select("large")

    def medium(self) -> GraphQueryField:
        return self._select("medium")


class StaffConnectionQueryFields(QueryFields):
    """All available staff connection query fields."""

    definitions = (
        FieldDefinition("edges", ALL_QUERIES, children="StaffEdgeQueryFields"),
        FieldDefinition("nodes", ALL_QUERIES, children="StaffQueryFields"),
        FieldDefinition("pageInfo", ALL_QUERIES, children="PageInfoQueryFields"),
    )

    def edges(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("edges", fields)

    def nodes(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("nodes", fields)

    def page_info(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("pageInfo", fields)


class StaffEdgeQueryFields(QueryFields):
    """All available staff edge query fields."""

    definitions = (
        FieldDefinition("node", ALL_QUERIES, children="StaffQueryFields"),
        FieldDefinition("id", ALL_QUERIES),
        FieldDefinition("role", ALL_QUERIES),
        FieldDefinition("favouriteOrder", ALL_QUERIES),
    )

    def node(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("node", fields)

    def id(self) -> GraphQueryField:
        return self._select("id")

    def role(self) -> GraphQueryField:
        """The role of the staff member in the production of the media."""
        return self._select("role")

    def favourite_order(self) -> GraphQueryField:
        return self._select("favouriteOrder")
