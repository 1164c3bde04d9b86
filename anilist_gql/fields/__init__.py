"""Query fields containers for the AniList schema."""

from .character import (
    CharacterConnectionQueryFields,
    CharacterEdgeQueryFields,
    CharacterImageQueryFields,
    CharacterNameQueryFields,
    CharacterQueryFields,
)
from .common import ALL_QUERIES, USER_QUERIES, FuzzyDateQueryFields, PageInfoQueryFields
from .media import (
    MediaConnectionQueryFields,
    MediaCoverImageQueryFields,
    MediaEdgeQueryFields,
    MediaQueryFields,
    MediaTitleQueryFields,
)
from .staff import (
    StaffConnectionQueryFields,
    StaffEdgeQueryFields,
    StaffImageQueryFields,
    StaffNameQueryFields,
    StaffQueryFields,
)
from .studio import StudioConnectionQueryFields, StudioEdgeQueryFields, StudioQueryFields
from .user import FavouritesQueryFields, UserAvatarQueryFields, UserQueryFields

__all__ = [
    "ALL_QUERIES",
    "USER_QUERIES",
    "CharacterConnectionQueryFields",
    "CharacterEdgeQueryFields",
    "CharacterImageQueryFields",
    "CharacterNameQueryFields",
    "CharacterQueryFields",
    "FavouritesQueryFields",
    "FuzzyDateQueryFields",
    "MediaConnectionQueryFields",
    "MediaCoverImageQueryFields",
    "MediaEdgeQueryFields",
    "MediaQueryFields",
    "MediaTitleQueryFields",
    "PageInfoQueryFields",
    "StaffConnectionQueryFields",
    "StaffEdgeQueryFields",
    "StaffImageQueryFields",
    "StaffNameQueryFields",
    "StaffQueryFields",
    "StudioConnectionQueryFields",
    "StudioEdgeQueryFields",
    "StudioQueryFields",
    "UserAvatarQueryFields",
    "UserQueryFields",
]
