"""Chat client configuration with environment variable loading."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

load_dotenv()


class ClientConfig(BaseModel):
    """Endpoints used by the chat page controller.

    Attributes:
        api_base_url: Base URL of the resume chat API. Defaults to localhost on
            PORT, the port the API is served on.
        ws_url: Chat WebSocket URL. Derived from api_base_url when unset.
        upload_timeout: Seconds to wait for the upload request.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL")
        or f"http://localhost:{os.getenv('PORT', '8000')}",
        description="Base URL of the resume chat API",
    )
    ws_url: str = Field(
        default_factory=lambda: os.getenv("CHAT_WS_URL", ""),
        description="Chat WebSocket URL",
    )
    upload_timeout: float = Field(
        default_factory=lambda: float(os.getenv("UPLOAD_TIMEOUT", "60")),
        gt=0,
        description="Upload request timeout in seconds",
    )

    @model_validator(mode="after")
    def derive_ws_url(self) -> "ClientConfig":
        """Build ws(s)://host/ws from the API base URL when no URL is given."""
        self.api_base_url = self.api_base_url.rstrip("/")
        if not self.ws_url:
            base = self.api_base_url
            if base.startswith("https://"):
                base = "wss://" + base.removeprefix("https://")
            elif base.startswith("http://"):
                base = "ws://" + base.removeprefix("http://")
            self.ws_url = f"{base}/ws"
        return self

    @property
    def upload_url(self) -> str:
        return f"{self.api_base_url}/upload"


def get_client_config() -> ClientConfig:
    """Create client configuration from environment."""
    return ClientConfig()
