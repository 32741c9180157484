"""Responder configuration with environment variable loading.

Pydantic-based configuration for the component that answers chat messages.
Supports a simulated responder and an Agno agent backed by OpenAI or any
OpenAI-compatible API via custom base URL.
"""

import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

# Load environment variables from .env file
load_dotenv()


class ResponderKind(str, Enum):
    """Which responder answers chat messages."""

    SIMULATED = "simulated"
    AGENT = "agent"


class ResponderConfig(BaseModel):
    """Configuration for the chat responder.

    Attributes:
        kind: Responder implementation to use.
        api_key: API key for model access (agent responder only).
        base_url: API base URL (None for OpenAI default).
        model_name: Model identifier to use.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
        simulated_delay: Pause between simulated fragments, in seconds.
    """

    kind: ResponderKind = Field(
        default_factory=lambda: ResponderKind(os.getenv("RESPONDER", "simulated").lower()),
        description="Responder implementation",
    )
    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", "")),
        description="API key for LLM provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4o-mini"),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default=1024,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )
    simulated_delay: float = Field(
        default_factory=lambda: float(os.getenv("SIMULATED_DELAY", "0.03")),
        ge=0.0,
        description="Seconds between simulated fragments",
    )

    @model_validator(mode="after")
    def validate_api_key(self) -> "ResponderConfig":
        """Require a non-empty API key when the agent responder is selected."""
        self.api_key = self.api_key.strip()
        if self.kind is ResponderKind.AGENT and not self.api_key:
            raise ValueError(
                "API key required for the agent responder. "
                "Set LLM_API_KEY or OPENAI_API_KEY in .env"
            )
        return self


def get_responder_config() -> ResponderConfig:
    """Create responder configuration from environment.

    Raises:
        ValueError: If the agent responder is selected without an API key.
    """
    return ResponderConfig()
