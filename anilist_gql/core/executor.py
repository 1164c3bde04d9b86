"""Async executor for sending built queries to AniList.

    async with AniListExecutor(token=token) as executor:
        data = await executor.execute(document)

Responses are returned as plain dictionaries (the "data" object). GraphQL
errors in the response body raise GraphQLError; HTTP failures without a
GraphQL error body raise httpx.HTTPStatusError.
"""

import logging
from datetime import date
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel, Field

from .query_builder import QueryDocument
from .values import fuzzy_date_int

logger = logging.getLogger(__name__)

ANILIST_URL = "https://graphql.anilist.co"


class GraphQLError(Exception):
    """Raised when a response carries GraphQL errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]]):
        self.message = message
        self.errors = errors
        super().__init__(message)


class GraphQLResponse(BaseModel):
    """The JSON envelope of a GraphQL response."""
    data: dict[str, Any] | None = None
    errors: list[dict[str, Any]] = Field(default_factory=list)

    def error_message(self) -> str:
        return "GraphQL errors: " + "; ".join(
            str(error.get("message", error)) for error in self.errors
        )


def to_json_value(value: Any) -> Any:
    """Convert a variable value to something json.dumps accepts."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return fuzzy_date_int(value)
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    return value


class AniListExecutor:
    """Sends query documents to the AniList GraphQL endpoint.

    The underlying httpx.AsyncClient is created on first use and closed by
    close() or when leaving the async context.
    """

    def __init__(
        self,
        url: str = ANILIST_URL,
        token: str | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Create an executor; no connection is opened until the first query.

        Args:
            url: GraphQL endpoint URL
            token: AniList OAuth access token, sent as a bearer token
            timeout: Request timeout in seconds
            transport: httpx transport override, e.g. httpx.MockTransport
        """
        self.url = url
        self.timeout = timeout
        self._token = token
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "AniListExecutor":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _client_for_request(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers=self.headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client, if one was opened."""
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    async def execute(
        self,
        query: QueryDocument | str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a query and return the response's data object.

        Args:
            query: A built QueryDocument or raw query text
            variables: Variables for the query; None values are dropped

        Raises:
            GraphQLError: If the response body lists GraphQL errors
            httpx.HTTPStatusError: On an error status without GraphQL errors
        """
        text = query.text if isinstance(query, QueryDocument) else query
        payload: dict[str, Any] = {"query": text}
        if variables:
            payload["variables"] = {
                key: to_json_value(value)
                for key, value in variables.items()
                if value is not None
            }

        logger.debug("POST %s: %s", self.url, text)
        response = await self._client_for_request().post(self.url, json=payload)

        # AniList answers GraphQL errors with a 4xx status and an errors body
        result = self._read_body(response)
        if result.errors:
            raise GraphQLError(result.error_message(), result.errors)
        response.raise_for_status()
        return result.data or {}

    @staticmethod
    def _read_body(response: httpx.Response) -> GraphQLResponse:
        try:
            body = response.json()
        except ValueError:
            response.raise_for_status()
            raise
        return GraphQLResponse.model_validate(body)
