"""Tests for AniListExecutor."""

import asyncio
import json

import httpx
import pytest
from pydantic import BaseModel

from anilist_gql.core.executor import ANILIST_URL, AniListExecutor, GraphQLError
from anilist_gql.core.query_builder import QueryBuilder
from anilist_gql.core.types import QueryType


class PageFilter(BaseModel):
    page: int
    per_page: int | None = None


def make_transport(handler, requests):
    def record(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    return httpx.MockTransport(record)


def run(executor, query, variables=None):
    async def go():
        async with executor:
            return await executor.execute(query, variables)

    return asyncio.run(go())


@pytest.fixture
def requests():
    return []


@pytest.fixture
def document():
    builder = QueryBuilder(QueryType.MEDIA)
    return builder.build([builder.fields.id()], [builder.arguments.id(1)])


# =============================================================================
# Tests: successful requests
# =============================================================================


class TestExecute:
    """Tests for AniListExecutor.execute."""

    def test_returns_data(self, requests, document):
        transport = make_transport(
            lambda request: httpx.Response(200, json={"data": {"Media": {"id": 1}}}),
            requests,
        )
        data = run(AniListExecutor(transport=transport), document)

        assert data == {"Media": {"id": 1}}
        assert len(requests) == 1
        assert requests[0].url.host == httpx.URL(ANILIST_URL).host
        assert requests[0].method == "POST"
        assert json.loads(requests[0].content) == {"query": document.text}

    def test_raw_query_text(self, requests):
        transport = make_transport(
            lambda request: httpx.Response(200, json={"data": {"Media": None}}),
            requests,
        )
        data = run(AniListExecutor(transport=transport), "query { Media(id: 0) { id } }")

        assert data == {"Media": None}
        assert json.loads(requests[0].content)["query"] == "query { Media(id: 0) { id } }"

    def test_missing_data(self, requests, document):
        transport = make_transport(lambda request: httpx.Response(200, json={}), requests)
        assert run(AniListExecutor(transport=transport), document) == {}

    def test_headers_without_token(self, requests, document):
        transport = make_transport(lambda request: httpx.Response(200, json={"data": {}}), requests)
        run(AniListExecutor(transport=transport), document)

        assert requests[0].headers["content-type"] == "application/json"
        assert "authorization" not in requests[0].headers

    def test_bearer_token(self, requests, document):
        transport = make_transport(lambda request: httpx.Response(200, json={"data": {}}), requests)
        run(AniListExecutor(token="secret", transport=transport), document)

        assert requests[0].headers["authorization"] == "Bearer secret"

    def test_custom_url(self, requests, document):
        transport = make_transport(lambda request: httpx.Response(200, json={"data": {}}), requests)
        run(AniListExecutor("https://example.test/graphql", transport=transport), document)

        assert requests[0].url.host == "example.test"
        assert requests[0].url.path == "/graphql"

    def test_variables_serialized(self, requests, document):
        transport = make_transport(lambda request: httpx.Response(200, json={"data": {}}), requests)
        run(
            AniListExecutor(transport=transport),
            document,
            {
                "filter": PageFilter(page=2),
                "filters": [PageFilter(page=1, per_page=5), 3],
                "search": None,
                "id": 1,
            },
        )

        assert json.loads(requests[0].content)["variables"] == {
            "filter": {"page": 2},
            "filters": [{"page": 1, "per_page": 5}, 3],
            "id": 1,
        }

    def test_client_closed_on_exit(self, document):
        executor = AniListExecutor(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"data": {}}))
        )
        run(executor, document)
        assert executor._client is None


# =============================================================================
# Tests: errors
# =============================================================================


class TestExecuteErrors:
    """Tests for error responses."""

    def test_graphql_errors(self, requests, document):
        body = {
            "data": None,
            "errors": [
                {"message": "Not Found.", "status": 404},
                {"message": "Validation error"},
            ],
        }
        transport = make_transport(lambda request: httpx.Response(404, json=body), requests)

        with pytest.raises(GraphQLError) as exc_info:
            run(AniListExecutor(transport=transport), document)

        assert str(exc_info.value) == "GraphQL errors: Not Found.; Validation error"
        assert exc_info.value.errors == body["errors"]

    def test_graphql_errors_with_data(self, requests, document):
        body = {"data": {"Media": {"id": 1}}, "errors": [{"message": "Partial failure"}]}
        transport = make_transport(lambda request: httpx.Response(200, json=body), requests)

        with pytest.raises(GraphQLError, match="Partial failure"):
            run(AniListExecutor(transport=transport), document)

    def test_http_error_without_json(self, requests, document):
        transport = make_transport(
            lambda request: httpx.Response(500, text="Internal Server Error"), requests
        )

        with pytest.raises(httpx.HTTPStatusError):
            run(AniListExecutor(transport=transport), document)

    def test_http_error_with_json(self, requests, document):
        transport = make_transport(
            lambda request: httpx.Response(429, json={"data": None}), requests
        )

        with pytest.raises(httpx.HTTPStatusError):
            run(AniListExecutor(transport=transport), document)

    def test_invalid_json_with_ok_status(self, requests, document):
        transport = make_transport(lambda request: httpx.Response(200, text="<html>"), requests)

        with pytest.raises(ValueError):
            run(AniListExecutor(transport=transport), document)
