"""Brave Search API client."""

from __future__ import annotations

import httpx
from loguru import logger

from bravesearch.config.schema import Config
from bravesearch.search.decoder import check_response, decode_body
from bravesearch.search.errors import DecompressionFailure, TransportFailure
from bravesearch.search.models import CollectedUrl
from bravesearch.search.output import project
from bravesearch.search.request import build_request


class BraveSearchClient:
    """Run one web search and normalize the results."""

    def __init__(
        self,
        config: Config | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or Config()
        self._transport = transport

    async def fetch(self, request: httpx.Request) -> tuple[int, bytes]:
        """Send the request and return the status code and full body."""
        logger.debug("GET {}", request.url)
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.config.timeout,
            ) as client:
                response = await client.send(request)
                body = await response.aread()
        except httpx.DecodingError as e:
            # httpx already tried to undo a declared Content-Encoding.
            raise DecompressionFailure(str(e) or type(e).__name__) from e
        except httpx.HTTPError as e:
            raise TransportFailure(str(e) or type(e).__name__) from e

        logger.debug(
            "Response status={} content-encoding={} bytes={}",
            response.status_code,
            response.headers.get("Content-Encoding", "-"),
            len(body),
        )
        return response.status_code, body

    async def search(self, *, query: str, count: int, api_key: str) -> list[CollectedUrl]:
        """Search the web and return results in API order."""
        try:
            request = build_request(query, count, api_key, base_url=self.config.endpoint)
        except UnicodeEncodeError as e:
            raise TransportFailure("invalid X-Subscription-Token header value") from e
        except httpx.InvalidURL as e:
            raise TransportFailure(f"invalid search endpoint: {e}") from e
        status_code, body = await self.fetch(request)
        check_response(status_code, body)
        results = project(decode_body(body))
        logger.debug("Collected {} result(s) for {!r}", len(results), query)
        return results
