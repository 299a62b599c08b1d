"""Request construction for the Brave web search endpoint."""

from urllib.parse import quote

import httpx

from bravesearch.config.schema import DEFAULT_BASE_URL

AUTH_HEADER = "X-Subscription-Token"


def encode_query(query: str) -> str:
    """Percent-encode everything except RFC 3986 unreserved characters."""
    return quote(query, safe="")


def build_url(query: str, count: int, base_url: str = DEFAULT_BASE_URL) -> str:
    return f"{base_url}?q={encode_query(query)}&count={count}"


def build_request(
    query: str,
    count: int,
    api_key: str,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> httpx.Request:
    """Build the GET request for a single web search."""
    return httpx.Request(
        "GET",
        build_url(query, count, base_url),
        headers={
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            AUTH_HEADER: api_key,
        },
    )
