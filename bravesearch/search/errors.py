"""Errors raised by the search pipeline."""


class BraveSearchError(Exception):
    """Raised when a search cannot be completed."""


class MissingCredential(BraveSearchError):
    """Raised when the API key environment variable is not set."""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"{env_var} environment variable not set")


class TransportFailure(BraveSearchError):
    """Raised when the search endpoint cannot be reached."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"request failed: {cause}")


class ApiStatusError(BraveSearchError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"API request failed with status: {status_code}")


class EmptyResponse(BraveSearchError):
    """Raised when the API answers with an empty body."""

    def __init__(self):
        super().__init__("Empty response from API")


class DecompressionFailure(BraveSearchError):
    """Raised when a gzip-framed body cannot be decompressed."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Failed to decompress gzip data: {cause}")


class DeserializationFailure(BraveSearchError):
    """Raised when the body is not JSON of the expected shape."""

    def __init__(self, cause: str, *, decompressed: bool = False):
        self.cause = cause
        self.decompressed = decompressed
        what = "decompressed JSON" if decompressed else "API response"
        super().__init__(f"Failed to parse {what}: {cause}")
