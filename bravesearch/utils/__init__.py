"""Utility functions for bravesearch."""

from bravesearch.utils.redaction import SecretRedactor

__all__ = ["SecretRedactor"]
