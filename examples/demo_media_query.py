#!/usr/bin/env python3
"""Demonstration of the AniList query builder.

This script shows how to:
1. Build a Media query with nested character and voice actor fields
2. See validation errors for a wrongly configured field
3. Optionally send the query to AniList (pass --execute)
"""

import asyncio
import json
import sys

from anilist_gql import AniListExecutor, AniListQueryError, QueryBuilder, QueryType
from anilist_gql.arguments import CharacterConnectionQueryArguments, StaffQueryArguments
from anilist_gql.enums import CharacterRole, StaffLanguage
from anilist_gql.fields import (
    CharacterConnectionQueryFields,
    CharacterEdgeQueryFields,
    CharacterNameQueryFields,
    CharacterQueryFields,
    MediaTitleQueryFields,
    StaffNameQueryFields,
    StaffQueryFields,
    UserQueryFields,
)


def build_query(media_id: int):
    builder = QueryBuilder(QueryType.MEDIA)
    media = builder.fields
    title = builder.query_fields(MediaTitleQueryFields)
    characters = builder.query_fields(CharacterConnectionQueryFields)
    edge = builder.query_fields(CharacterEdgeQueryFields)
    character = builder.query_fields(CharacterQueryFields)
    character_name = builder.query_fields(CharacterNameQueryFields)
    staff = builder.query_fields(StaffQueryFields)
    staff_name = builder.query_fields(StaffNameQueryFields)

    character_args = builder.query_arguments(CharacterConnectionQueryArguments)
    staff_args = builder.query_arguments(StaffQueryArguments)

    return builder.build(
        [
            media.id(),
            media.title([title.romaji()]),
            media.characters(
                [
                    characters.edges([
                        edge.role(),
                        edge.node([character.name([character_name.full()])]),
                        edge.voice_actors(
                            [staff.name([staff_name.full()])],
                            [staff_args.language(StaffLanguage.JAPANESE)],
                        ),
                    ]),
                ],
                [character_args.role(CharacterRole.MAIN), character_args.per_page(5)],
            ),
        ],
        [builder.arguments.id(media_id)],
    )


def main():
    print("=== AniList Query Builder Demo ===\n")

    print("1. Building a Media query...")
    document = build_query(1)
    print(document.pretty())

    print("\n2. Validation errors:")
    edge = CharacterEdgeQueryFields(QueryType.MEDIA)
    try:
        edge.voice_actors([])
    except AniListQueryError as e:
        print(f"   {type(e).__name__}: {e}")
    try:
        UserQueryFields(QueryType.MEDIA)
    except AniListQueryError as e:
        print(f"   {type(e).__name__}: {e}")

    if "--execute" not in sys.argv:
        print("\n3. Skipping the request (pass --execute to send it)")
        return

    print("\n3. Sending the query to AniList...")

    async def run():
        async with AniListExecutor() as executor:
            return await executor.execute(document)

    print(json.dumps(asyncio.run(run()), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
