from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

DEFAULT_SOURCE_URL = (
    "https://raw.githubusercontent.com/github/docs/main/content/actions/"
    "writing-workflows/choosing-when-your-workflow-runs/events-that-trigger-workflows.md"
)

URL_ENV = "WEBHOOK_EVENTS_URL"
TIMEOUT_ENV = "WEBHOOK_EVENTS_TIMEOUT"


class GeneratorConfig(BaseModel):
    """Settings shared by the fetch, extraction and emission steps."""

    source_url: str = Field(DEFAULT_SOURCE_URL, description="Markdown document to fetch")
    timeout: float = Field(30.0, gt=0, description="HTTP timeout in seconds")
    variable_name: str = Field(
        "ALL_WEBHOOK_TYPES", description="Name of the generated module-level table"
    )
    tool_name: str = Field(
        "generate-webhook-events", description="Generator named in the output header"
    )

    model_config = {"extra": "forbid"}

    @field_validator("source_url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("source_url must be an http(s) URL")
        return value

    @field_validator("variable_name")
    @classmethod
    def validate_variable_name(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError("variable_name must be a valid Python identifier")
        return value

    @classmethod
    def from_env(cls, **overrides) -> "GeneratorConfig":
        """
        Build a config from WEBHOOK_EVENTS_* environment variables.

        Explicit keyword overrides win over the environment; None values are ignored.
        """
        values: dict[str, object] = {}
        if os.getenv(URL_ENV):
            values["source_url"] = os.environ[URL_ENV]
        if os.getenv(TIMEOUT_ENV):
            values["timeout"] = os.environ[TIMEOUT_ENV]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
