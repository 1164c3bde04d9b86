"""Query fields only available in User queries."""

from ..core.argument import GraphQueryArgument
from ..core.field import FieldDefinition, GraphQueryField, QueryFields
from .common import USER_QUERIES


class UserQueryFields(QueryFields):
    """All available user query fields."""

    definitions = (
        FieldDefinition("id", USER_QUERIES),
        FieldDefinition("name", USER_QUERIES),
        FieldDefinition("about", USER_QUERIES, arguments="TextQueryArguments"),
        FieldDefinition("avatar", USER_QUERIES, children="UserAvatarQueryFields"),
        FieldDefinition("bannerImage", USER_QUERIES),
        FieldDefinition("isFollowing", USER_QUERIES),
        FieldDefinition("isFollower", USER_QUERIES),
        FieldDefinition("isBlocked", USER_QUERIES),
        FieldDefinition("donatorTier", USER_QUERIES),
        FieldDefinition("donatorBadge", USER_QUERIES),
        FieldDefinition("moderatorRoles", USER_QUERIES),
        FieldDefinition("siteUrl", USER_QUERIES),
        FieldDefinition("createdAt", USER_QUERIES),
        FieldDefinition("updatedAt", USER_QUERIES),
        FieldDefinition("favourites", USER_QUERIES, children="FavouritesQueryFields"),
    )

    def id(self) -> GraphQueryField:
        return self._select("id")

    def name(self) -> GraphQueryField:
        return self._select("name")

    def about(self, arguments: list[GraphQueryArgument] | None = None) -> GraphQueryField:
        """The bio written by the user (markdown)."""
        return self._select("about", arguments=arguments)

    def avatar(self, fields: list[GraphQueryField]) -> GraphQueryField:
        return self._select("avatar", fields)

    def banner_image(self) -> GraphQueryField:
        return self._select("bannerImage")

    def is_following(self) -> GraphQueryField:
        """If the authenticated user is following this user."""
        return self._select("isFollowing")

    def is_follower(self) -> GraphQueryField:
        return self._select("isFollower")

    def is_blocked(self) -> GraphQueryField:
        return self._select("isBlocked")

    def donator_tier(self) -> GraphQueryField:
        return self._select("donatorTier")

    def donator_badge(self) -> GraphQueryField:
        return self._select("donatorBadge")

    def moderator_roles(self) -> GraphQueryField:
        return self._select("moderatorRoles")

    def site_url(self) -> GraphQueryField:
        return self._select("siteUrl")

    def created_at(self) -> GraphQueryField:
        return self._select("createdAt")

    def updated_at(self) -> GraphQueryField:
        return self._select("updatedAt")

    def favourites(self, fields: list[GraphQueryField]) -> GraphQueryField:
        """The user's favourite media, characters, staff and studios."""
        return self._select("favourites", fields)


class UserAvatarQueryFields(QueryFields):

    definitions = (
        FieldDefinition("large", USER_QUERIES),
        FieldDefinition("medium", USER_QUERIES),
    )

    def large(self) -> GraphQueryField:
        return self._select("large")

    def medium(self) -> GraphQueryField:
        return self._select("medium")


class FavouritesQueryFields(QueryFields):
    """A user's favourites."""

    definitions = (
        FieldDefinition(
            "anime", USER_QUERIES,
            children="MediaConnectionQueryFields",
            arguments="FavouritesQueryArguments",
        ),
        FieldDefinition(
            "manga", USER_QUERIES,
            children="MediaConnectionQueryFields",
            arguments="FavouritesQueryArguments",
        ),
        FieldDefinition(
            "characters", USER_QUERIES,
            children="CharacterConnectionQueryFields",
            arguments="FavouritesQueryArguments",
        ),
        FieldDefinition(
            "staff", USER_QUERIES,
            children="StaffConnectionQueryFields",
            arguments="FavouritesQueryArguments",
        ),
        FieldDefinition(
            "studios", USER_QUERIES,
            children="StudioConnectionQueryFields",
            arguments="FavouritesQueryArguments",
        ),
    )

    def anime(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        return self._select("anime", fields, arguments)

    def manga(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        return self._select("manga", fields, arguments)

    def characters(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        return self._select("characters", fields, arguments)

    def staff(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        return self._select("staff", fields, arguments)

    def studios(
        self,
        fields: list[GraphQueryField],
        arguments: list[GraphQueryArgument] | None = None,
    ) -> GraphQueryField:
        return self._select("studios", fields, arguments)
