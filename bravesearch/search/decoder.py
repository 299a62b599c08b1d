"""Response body decoding: gzip sniffing, decompression and JSON parsing.

Servers do not always label compressed bodies, so compression is decided by
looking at the body itself rather than at the ``Content-Encoding`` header.
"""

from __future__ import annotations

import gzip
import zlib

from loguru import logger
from pydantic import ValidationError

from bravesearch.search.errors import (
    ApiStatusError,
    DecompressionFailure,
    DeserializationFailure,
    EmptyResponse,
)
from bravesearch.search.models import ApiResponse

GZIP_MAGIC = b"\x1f\x8b"


def check_response(status_code: int, body: bytes) -> None:
    """Reject non-success statuses and empty bodies before any parsing."""
    if not 200 <= status_code < 300:
        raise ApiStatusError(status_code)
    if not body:
        raise EmptyResponse()


def is_gzip(body: bytes) -> bool:
    """Return True if the body starts with the gzip magic number."""
    return body[:2] == GZIP_MAGIC


def decompress(body: bytes) -> bytes:
    try:
        return gzip.decompress(body)
    except (OSError, EOFError, zlib.error) as e:
        raise DecompressionFailure(str(e) or type(e).__name__) from e


def parse_response(body: bytes, *, decompressed: bool = False) -> ApiResponse:
    """Parse JSON bytes into the API response schema."""
    try:
        return ApiResponse.model_validate_json(body)
    except ValidationError as e:
        raise DeserializationFailure(_describe(e), decompressed=decompressed) from e


def decode_body(body: bytes) -> ApiResponse:
    """Decode a raw response body, decompressing it first if gzip-framed."""
    if is_gzip(body):
        logger.debug("Body is gzip-framed ({} bytes), decompressing", len(body))
        data = decompress(body)
        logger.debug("Decompressed to {} bytes", len(data))
        return parse_response(data, decompressed=True)
    return parse_response(body)


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {item.get('msg', 'invalid value')}")
    return "; ".join(parts)
