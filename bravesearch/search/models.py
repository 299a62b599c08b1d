"""Search API response schema and output records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """One web result as returned by the API."""

    title: str
    url: str
    description: str


class WebResults(BaseModel):
    """The ``web`` section of an API response."""

    results: list[SearchResult] = Field(default_factory=list)


class ApiResponse(BaseModel):
    """Top-level API response; only the ``web`` section is read."""

    web: WebResults = Field(default_factory=WebResults)


@dataclass(slots=True, frozen=True)
class CollectedUrl:
    """Result record printed to stdout."""

    title: str
    url: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "description": self.description,
        }


@dataclass(slots=True, frozen=True)
class OutputEnvelope:
    """Top-level output document."""

    results: list[CollectedUrl] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"results": [item.to_dict() for item in self.results]}
