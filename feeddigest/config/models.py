"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FetchSettings(BaseModel):
    """Feed retrieval parameters."""

    timeout: float = Field(15.0, description="Per-request timeout in seconds", gt=0.0, le=300.0)
    max_concurrent: int = Field(10, description="Maximum in-flight requests", ge=1, le=100)
    user_agent: str = Field(
        "feeddigest/1.0 (+https://github.com/feeddigest/feeddigest)",
        description="User-Agent header sent with every request",
    )
    default_hours: int = Field(24, description="Default look-back window in hours", ge=0)
    description_max_length: int = Field(
        500, description="Maximum description length in characters", ge=0
    )


class ConfigModel(BaseModel):
    """Main configuration model."""

    fetch: FetchSettings = Field(default_factory=FetchSettings)
    sources_file: Optional[str] = Field(
        None, description="YAML file replacing the embedded source list"
    )


class SourceConfig(BaseModel):
    """A named RSS/Atom endpoint."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Source name", min_length=1)
    url: str = Field(..., description="RSS or Atom feed URL", min_length=1)
    enabled: bool = Field(True, description="Whether source is fetched")
