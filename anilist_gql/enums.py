"""AniList enum types used as argument values."""

from enum import Enum


class MediaType(str, Enum):
    ANIME = "ANIME"
    MANGA = "MANGA"


class MediaFormat(str, Enum):
    TV = "TV"
    TV_SHORT = "TV_SHORT"
    MOVIE = "MOVIE"
    SPECIAL = "SPECIAL"
    OVA = "OVA"
    ONA = "ONA"
    MUSIC = "MUSIC"
    MANGA = "MANGA"
    NOVEL = "NOVEL"
    ONE_SHOT = "ONE_SHOT"


class MediaStatus(str, Enum):
    FINISHED = "FINISHED"
    RELEASING = "RELEASING"
    NOT_YET_RELEASED = "NOT_YET_RELEASED"
    CANCELLED = "CANCELLED"
    HIATUS = "HIATUS"


class MediaSeason(str, Enum):
    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    FALL = "FALL"


class MediaSort(str, Enum):
    """Media sort orders."""
    ID = "ID"
    ID_DESC = "ID_DESC"
    TITLE_ROMAJI = "TITLE_ROMAJI"
    TITLE_ROMAJI_DESC = "TITLE_ROMAJI_DESC"
    TITLE_ENGLISH = "TITLE_ENGLISH"
    TITLE_ENGLISH_DESC = "TITLE_ENGLISH_DESC"
    TYPE = "TYPE"
    TYPE_DESC = "TYPE_DESC"
    FORMAT = "FORMAT"
    FORMAT_DESC = "FORMAT_DESC"
    START_DATE = "START_DATE"
    START_DATE_DESC = "START_DATE_DESC"
    SCORE = "SCORE"
    SCORE_DESC = "SCORE_DESC"
    POPULARITY = "POPULARITY"
    POPULARITY_DESC = "POPULARITY_DESC"
    TRENDING = "TRENDING"
    TRENDING_DESC = "TRENDING_DESC"
    EPISODES = "EPISODES"
    EPISODES_DESC = "EPISODES_DESC"
    FAVOURITES = "FAVOURITES"
    FAVOURITES_DESC = "FAVOURITES_DESC"
    SEARCH_MATCH = "SEARCH_MATCH"


class CharacterSort(str, Enum):
    ID = "ID"
    ID_DESC = "ID_DESC"
    ROLE = "ROLE"
    ROLE_DESC = "ROLE_DESC"
    SEARCH_MATCH = "SEARCH_MATCH"
    FAVOURITES = "FAVOURITES"
    FAVOURITES_DESC = "FAVOURITES_DESC"
    RELEVANCE = "RELEVANCE"


class CharacterRole(str, Enum):
    MAIN = "MAIN"
    SUPPORTING = "SUPPORTING"
    BACKGROUND = "BACKGROUND"


class StaffSort(str, Enum):
    ID = "ID"
    ID_DESC = "ID_DESC"
    ROLE = "ROLE"
    ROLE_DESC = "ROLE_DESC"
    LANGUAGE = "LANGUAGE"
    LANGUAGE_DESC = "LANGUAGE_DESC"
    SEARCH_MATCH = "SEARCH_MATCH"
    FAVOURITES = "FAVOURITES"
    FAVOURITES_DESC = "FAVOURITES_DESC"
    RELEVANCE = "RELEVANCE"


class StaffLanguage(str, Enum):
    """Voice actor languages."""
    JAPANESE = "JAPANESE"
    ENGLISH = "ENGLISH"
    KOREAN = "KOREAN"
    ITALIAN = "ITALIAN"
    SPANISH = "SPANISH"
    PORTUGUESE = "PORTUGUESE"
    FRENCH = "FRENCH"
    GERMAN = "GERMAN"
    HEBREW = "HEBREW"
    HUNGARIAN = "HUNGARIAN"


class StudioSort(str, Enum):
    ID = "ID"
    ID_DESC = "ID_DESC"
    NAME = "NAME"
    NAME_DESC = "NAME_DESC"
    SEARCH_MATCH = "SEARCH_MATCH"
    FAVOURITES = "FAVOURITES"
    FAVOURITES_DESC = "FAVOURITES_DESC"
