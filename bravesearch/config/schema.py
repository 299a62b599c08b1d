"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_BASE_URL = "https://api.search.brave.com/res/v1/web/search"
DEFAULT_COUNT = 10
DEFAULT_TIMEOUT = 10.0
API_KEY_ENV = "BRAVE_API_KEY"


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Config(Base):
    """Root configuration for bravesearch."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    default_count: int = Field(default=DEFAULT_COUNT, ge=1)

    @property
    def endpoint(self) -> str:
        """Configured search endpoint, falling back to the public API."""
        return self.base_url.strip() or DEFAULT_BASE_URL
