"""Query argument containers for the AniList schema.

Each accessor returns an argument owned by its container; a field only
accepts arguments from the container named in its definition.
"""

from datetime import date

from .core.argument import GraphQueryArgument, QueryArguments
from .enums import (
    CharacterRole,
    CharacterSort,
    MediaFormat,
    MediaSeason,
    MediaSort,
    MediaStatus,
    MediaType,
    StaffLanguage,
    StaffSort,
    StudioSort,
)


class MediaQueryArguments(QueryArguments):
    """Arguments of the root Media query."""

    def id(self, value: int) -> GraphQueryArgument:
        return self._argument("id", int, value)

    def id_mal(self, value: int) -> GraphQueryArgument:
        """Filter by the MyAnimeList id."""
        return self._argument("idMal", int, value)

    def start_date(self, value: int | date) -> GraphQueryArgument:
        """Filter by the start date (a FuzzyDateInt or a date)."""
        return self._argument("startDate", (int, date), value)

    def season(self, value: MediaSeason) -> GraphQueryArgument:
        return self._argument("season", MediaSeason, value)

    def season_year(self, value: int) -> GraphQueryArgument:
        return self._argument("seasonYear", int, value)

    def type(self, value: MediaType) -> GraphQueryArgument:
        return self._argument("type", MediaType, value)

    def format(self, value: MediaFormat) -> GraphQueryArgument:
        return self._argument("format", MediaFormat, value)

    def status(self, value: MediaStatus) -> GraphQueryArgument:
        return self._argument("status", MediaStatus, value)

    def episodes(self, value: int) -> GraphQueryArgument:
        return self._argument("episodes", int, value)

    def is_adult(self, value: bool) -> GraphQueryArgument:
        return self._argument("isAdult", bool, value)

    def genre(self, value: str) -> GraphQueryArgument:
        return self._argument("genre", str, value)

    def tag(self, value: str) -> GraphQueryArgument:
        return self._argument("tag", str, value)

    def search(self, value: str) -> GraphQueryArgument:
        return self._argument("search", str, value)

    def id_in(self, value: list[int]) -> GraphQueryArgument:
        return self._argument("id_in", int, value, is_list=True)

    def genre_in(self, value: list[str]) -> GraphQueryArgument:
        return self._argument("genre_in", str, value, is_list=True)

    def sort(self, value: list[MediaSort]) -> GraphQueryArgument:
        """The order the results will be returned in."""
        return self._argument("sort", MediaSort, value, is_list=True)


class CharacterQueryArguments(QueryArguments):
    """Arguments of the root Character query."""

    def id(self, value: int) -> GraphQueryArgument:
        return self._argument("id", int, value)

    def is_birthday(self, value: bool) -> GraphQueryArgument:
        return self._argument("isBirthday", bool, value)

    def search(self, value: str) -> GraphQueryArgument:
        return self._argument("search", str, value)

    def id_in(self, value: list[int]) -> GraphQueryArgument:
        return self._argument("id_in", int, value, is_list=True)

    def sort(self, value: list[CharacterSort]) -> GraphQueryArgument:
        return self._argument("sort", CharacterSort, value, is_list=True)


class StaffQueryArguments(QueryArguments):
    """Arguments of the root Staff query and of voice actor fields."""

    def id(self, value: int) -> GraphQueryArgument:
        return self._argument("id", int, value)

    def is_birthday(self, value: bool) -> GraphQueryArgument:
        return self._argument("isBirthday", bool, value)

    def search(self, value: str) -> GraphQueryArgument:
        return self._argument("search", str, value)

    def language(self, value: StaffLanguage) -> GraphQueryArgument:
        """The language of the voice actors."""
        return self._argument("language", StaffLanguage, value)

    def sort(self, value: list[StaffSort]) -> GraphQueryArgument:
        return self._argument("sort", StaffSort, value, is_list=True)


class StudioQueryArguments(QueryArguments):
    """Arguments of the root Studio query."""

    def id(self, value: int) -> GraphQueryArgument:
        return self._argument("id", int, value)

    def search(self, value: str) -> GraphQueryArgument:
        return self._argument("search", str, value)

    def sort(self, value: list[StudioSort]) -> GraphQueryArgument:
        return self._argument("sort", StudioSort, value, is_list=True)


class UserQueryArguments(QueryArguments):
    """Arguments of the root User query."""

    def id(self, value: int) -> GraphQueryArgument:
        return self._argument("id", int, value)

    def name(self, value: str) -> GraphQueryArgument:
        return self._argument("name", str, value)

    def search(self, value: str) -> GraphQueryArgument:
        return self._argument("search", str, value)


class TextQueryArguments(QueryArguments):
    """Arguments of free text fields such as descriptions."""

    def as_html(self, value: bool) -> GraphQueryArgument:
        """Return the text as html instead of markdown."""
        return self._argument("asHtml", bool, value)


class MediaConnectionQueryArguments(QueryArguments):

    def sort(self, value: list[MediaSort]) -> GraphQueryArgument:
        return self._argument("sort", MediaSort, value, is_list=True)

    def type(self, value: MediaType) -> GraphQueryArgument:
        return self._argument("type", MediaType, value)

    def on_list(self, value: bool) -> GraphQueryArgument:
        return self._argument("onList", bool, value)

    def page(self, value: int) -> GraphQueryArgument:
        return self._argument("page", int, value)

    def per_page(self, value: int) -> GraphQueryArgument:
        """The amount of entries per page, max 25."""
        return self._argument("perPage", int, value)


class CharacterConnectionQueryArguments(QueryArguments):

    def sort(self, value: list[CharacterSort]) -> GraphQueryArgument:
        return self._argument("sort", CharacterSort, value, is_list=True)

    def role(self, value: CharacterRole) -> GraphQueryArgument:
        return self._argument("role", CharacterRole, value)

    def search(self, value: str) -> GraphQueryArgument:
        return self._argument("search", str, value)

    def page(self, value: int) -> GraphQueryArgument:
        return self._argument("page", int, value)

    def per_page(self, value: int) -> GraphQueryArgument:
        return self._argument("perPage", int, value)


class StaffConnectionQueryArguments(QueryArguments):

    def sort(self, value: list[StaffSort]) -> GraphQueryArgument:
        return self._argument("sort", StaffSort, value, is_list=True)

    def page(self, value: int) -> GraphQueryArgument:
        return self._argument("page", int, value)

    def per_page(self, value: int) -> GraphQueryArgument:
        return self._argument("perPage", int, value)


class StudioConnectionQueryArguments(QueryArguments):

    def sort(self, value: list[StudioSort]) -> GraphQueryArgument:
        return self._argument("sort", StudioSort, value, is_list=True)

    def is_main(self, value: bool) -> GraphQueryArgument:
        """Only return the main studios."""
        return self._argument("isMain", bool, value)


class FavouritesQueryArguments(QueryArguments):
    """Paging arguments of a user's favourites."""

    def page(self, value: int) -> GraphQueryArgument:
        return self._argument("page", int, value)

    def per_page(self, value: int) -> GraphQueryArgument:
        return self._argument("perPage", int, value)
