"""Projection of API results into output records, and JSON emission."""

from __future__ import annotations

import json
from typing import TextIO

from bravesearch.search.models import ApiResponse, CollectedUrl, OutputEnvelope


def project(response: ApiResponse) -> list[CollectedUrl]:
    """Copy every API result, in order, into an output record."""
    return [
        CollectedUrl(title=item.title, url=item.url, description=item.description)
        for item in response.web.results
    ]


def render(results: list[CollectedUrl]) -> str:
    envelope = OutputEnvelope(results=list(results))
    return json.dumps(envelope.to_dict(), ensure_ascii=False, indent=2)


def emit(results: list[CollectedUrl], stream: TextIO) -> None:
    """Write the envelope as one document followed by a newline."""
    stream.write(render(results) + "\n")
    stream.flush()
