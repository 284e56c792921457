"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (SEARCHLAYER_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class MeilisearchSettings(BaseModel):
    """Connection to a Meilisearch instance."""

    host: str = Field(default="http://127.0.0.1:7700", description="Meilisearch instance URL")
    api_key: str | None = Field(default=None, description="Master key or API key")
    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")
    task_timeout_ms: int = Field(default=5000, gt=0, description="Deadline when waiting for a task")
    task_interval_ms: int = Field(default=50, gt=0, description="Polling interval when waiting for a task")


class SearchSettings(BaseModel):
    """Search behavior configuration."""

    adapter: str = Field(default="meilisearch", description="Name of the adapter to use")
    strict_fast_path: bool = Field(
        default=True,
        description="Use direct document fetch only when the limit is unset or 1 (False: any positive limit)",
    )
    date_as_integer: bool = Field(default=True, description="Store date/time fields as UNIX timestamps")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the SEARCHLAYER_ prefix.
    Nested settings use double underscores.

    Example:
        SEARCHLAYER_MEILISEARCH__HOST=http://meilisearch:7700
        SEARCHLAYER_MEILISEARCH__API_KEY=masterKey
        SEARCHLAYER_SEARCH__STRICT_FAST_PATH=false
    """

    model_config = {
        "env_prefix": "SEARCHLAYER_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    meilisearch: MeilisearchSettings = Field(default_factory=MeilisearchSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        still take precedence.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
