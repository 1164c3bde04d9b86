"""Command-line interface for anilist-gql."""

import asyncio
import json
import logging
from pathlib import Path

import click
import httpx
from graphql import GraphQLSyntaxError

from .arguments import MediaQueryArguments, StudioConnectionQueryArguments
from .core.exceptions import AniListQueryError
from .core.executor import ANILIST_URL, AniListExecutor, GraphQLError
from .core.generator import FieldsGenerator
from .core.parser import SchemaParser
from .core.query_builder import QueryBuilder, QueryDocument
from .core.types import QueryType
from .fields import (
    MediaTitleQueryFields,
    StudioConnectionQueryFields,
    StudioEdgeQueryFields,
    StudioQueryFields,
)


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_media_query(media_id: int) -> QueryDocument:
    """The lookup query used by the media command."""
    builder = QueryBuilder(QueryType.MEDIA)
    media = builder.fields
    args: MediaQueryArguments = builder.arguments
    title = builder.query_fields(MediaTitleQueryFields)
    studios = builder.query_fields(StudioConnectionQueryFields)
    studio_edge = builder.query_fields(StudioEdgeQueryFields)
    studio = builder.query_fields(StudioQueryFields)
    studio_args = builder.query_arguments(StudioConnectionQueryArguments)

    return builder.build(
        [
            media.id(),
            media.title([title.romaji(), title.english(), title.native()]),
            media.format(),
            media.status(),
            media.episodes(),
            media.season_year(),
            media.average_score(),
            media.studios(
                [studios.edges([studio_edge.is_main(), studio_edge.node([studio.name()])])],
                [studio_args.is_main(True)],
            ),
        ],
        [args.id(media_id)],
    )


@click.group()
@click.version_option(package_name="anilist-gql")
def main():
    """Typed query builder for the AniList GraphQL API."""
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to a GraphQL schema file or a directory of .graphql/.graphqls files.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output file for the generated query fields module (e.g. fields.py).",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with a custom fields.py.j2 template.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def generate(schema: str, output: str, template_dir: str | None, verbose: bool):
    """Generate query fields containers from a GraphQL schema.

    Examples:

        anilist-gql generate --schema ./anilist.graphql --output ./fields.py
    """
    _configure_logging(verbose)
    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    click.echo("Parsing schema...")
    try:
        ir = SchemaParser(str(schema_path)).parse_all()
    except (FileNotFoundError, GraphQLSyntaxError) as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        click.echo(f"  Types: {len(ir.types)}")
        click.echo(f"  Enums: {len(ir.enums)}")
        click.echo(f"  Unions: {len(ir.unions)}")
        click.echo(f"  Root query fields: {len(ir.query_fields)}")

    click.echo("Generating query fields...")
    try:
        code = FieldsGenerator(ir, template_dir=template_dir).write(str(output_path))
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    num_fields = code.count("(QueryFields):")
    num_arguments = code.count("(QueryArguments):")
    click.echo(
        f"Done! Generated {num_fields} query fields classes and "
        f"{num_arguments} query arguments classes in {output_path}"
    )


@main.command()
@click.argument("media_id", type=int)
@click.option("--execute", "-x", is_flag=True, help="Send the query to AniList and print the result.")
@click.option("--pretty", is_flag=True, help="Print the query over several lines.")
@click.option("--url", default=ANILIST_URL, show_default=True, help="GraphQL endpoint URL.")
@click.option("--token", envvar="ANILIST_TOKEN", default=None, help="AniList access token.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def media(media_id: int, execute: bool, pretty: bool, url: str, token: str | None, verbose: bool):
    """Build (and optionally run) a lookup query for one media.

    Examples:

        anilist-gql media 1

        anilist-gql media 1 --execute
    """
    _configure_logging(verbose)
    try:
        document = build_media_query(media_id)
    except AniListQueryError as e:
        raise click.ClickException(str(e)) from e

    click.echo(document.pretty() if pretty else document.text)
    if not execute:
        return

    async def run():
        async with AniListExecutor(url, token) as executor:
            return await executor.execute(document)

    try:
        data = asyncio.run(run())
    except (GraphQLError, httpx.HTTPError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
