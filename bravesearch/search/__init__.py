"""Brave web search pipeline."""

from bravesearch.search.client import BraveSearchClient
from bravesearch.search.errors import (
    ApiStatusError,
    BraveSearchError,
    DecompressionFailure,
    DeserializationFailure,
    EmptyResponse,
    MissingCredential,
    TransportFailure,
)
from bravesearch.search.models import ApiResponse, CollectedUrl, OutputEnvelope, SearchResult

__all__ = [
    "BraveSearchClient",
    "BraveSearchError",
    "MissingCredential",
    "TransportFailure",
    "ApiStatusError",
    "EmptyResponse",
    "DecompressionFailure",
    "DeserializationFailure",
    "ApiResponse",
    "SearchResult",
    "CollectedUrl",
    "OutputEnvelope",
]
