"""Unit tests for ClientConfig and media type validation."""

import pytest
import pytest_check as check
from pydantic import ValidationError

from resume_chat.client.config import ClientConfig
from resume_chat.client.uploader import is_accepted_media_type


class TestClientConfig:
    """Tests for endpoint derivation."""

    def test_derives_ws_url_from_http(self) -> None:
        config = ClientConfig(api_base_url="http://localhost:8000/", ws_url="")

        check.equal(config.api_base_url, "http://localhost:8000")
        check.equal(config.ws_url, "ws://localhost:8000/ws")
        check.equal(config.upload_url, "http://localhost:8000/upload")

    def test_derives_secure_ws_url_from_https(self) -> None:
        config = ClientConfig(api_base_url="https://chat.example.com", ws_url="")
        check.equal(config.ws_url, "wss://chat.example.com/ws")

    def test_explicit_ws_url_is_kept(self) -> None:
        config = ClientConfig(api_base_url="http://api", ws_url="ws://other:9000/chat")
        check.equal(config.ws_url, "ws://other:9000/chat")

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_BASE_URL", "http://backend:8080")
        monkeypatch.delenv("CHAT_WS_URL", raising=False)

        config = ClientConfig()

        check.equal(config.upload_url, "http://backend:8080/upload")
        check.equal(config.ws_url, "ws://backend:8080/ws")

    def test_default_base_url_follows_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("API_BASE_URL", raising=False)
        monkeypatch.delenv("CHAT_WS_URL", raising=False)
        monkeypatch.setenv("PORT", "9000")

        config = ClientConfig()

        check.equal(config.upload_url, "http://localhost:9000/upload")
        check.equal(config.ws_url, "ws://localhost:9000/ws")

    def test_default_base_url_without_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("API_BASE_URL", raising=False)
        monkeypatch.delenv("PORT", raising=False)

        check.equal(ClientConfig(ws_url="").api_base_url, "http://localhost:8000")

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(upload_timeout=0)


class TestAcceptedMediaType:
    """Tests for the resume type filter."""

    @pytest.mark.parametrize(
        "content_type",
        [
            "application/pdf",
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "application/vnd.oasis.opendocument.text",
        ],
    )
    def test_accepts(self, content_type: str) -> None:
        check.is_true(is_accepted_media_type(content_type))

    @pytest.mark.parametrize(
        "content_type", ["", None, "image/png", "text/plain", "application/msword"]
    )
    def test_rejects(self, content_type: str | None) -> None:
        check.is_false(is_accepted_media_type(content_type))
