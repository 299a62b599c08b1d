"""Utilities for keeping credentials out of error messages and logs."""

from __future__ import annotations

import re
from typing import Iterable


class SecretRedactor:
    """Redact known secrets and token-shaped values from text."""

    SECRET_PLACEHOLDER = "[REDACTED_SECRET]"

    _TOKEN_HEADER_RE = re.compile(
        r"(?i)(x-subscription-token[\"']?\s*[:=]\s*[\"']?)([^\"'\s,}\]]+)"
    )

    def __init__(self, secrets: Iterable[str] | None = None, enabled: bool = True):
        self.enabled = enabled
        self._literal_secrets: set[str] = set()
        for raw in secrets or ():
            value = str(raw or "").strip()
            if len(value) >= 6:
                self._literal_secrets.add(value)

    def redact(self, text: str) -> str:
        """Redact sensitive values from text."""
        if not self.enabled or not text:
            return text

        sanitized = text
        for value in sorted(self._literal_secrets, key=len, reverse=True):
            sanitized = sanitized.replace(value, self.SECRET_PLACEHOLDER)
        return self._TOKEN_HEADER_RE.sub(rf"\1{self.SECRET_PLACEHOLDER}", sanitized)

    def patch_record(self, record: dict) -> None:
        """loguru patcher hook: redact the formatted message in place."""
        record["message"] = self.redact(record["message"])
