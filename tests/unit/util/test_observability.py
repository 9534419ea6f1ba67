"""Unit tests for Logfire configuration helpers."""

from types import SimpleNamespace
from uuid import uuid4

from linkup.config import ObservabilitySettings, Settings
from linkup.util.observability import request_attributes, resolve_send_to_logfire


def settings_with(**observability) -> Settings:
    return Settings(observability=ObservabilitySettings(**observability))


class TestResolveSendToLogfire:
    """Tests for the cloud-export decision."""

    def test_console_only_without_token(self):
        assert resolve_send_to_logfire(settings_with()) is False

    def test_sends_when_token_present(self):
        assert resolve_send_to_logfire(settings_with(logfire_token="tok")) is True

    def test_explicit_flag_overrides_token(self):
        settings = settings_with(logfire_token="tok", send_to_logfire=False)

        assert resolve_send_to_logfire(settings) is False


class TestRequestAttributes:
    """Tests for the request span attribute mapper."""

    def test_adds_authenticated_user_id(self):
        # Arrange
        user_id = uuid4()
        request = SimpleNamespace(state=SimpleNamespace(user=SimpleNamespace(id=user_id)))

        # Act
        result = request_attributes(request, {"values": {}})

        # Assert
        assert result == {"values": {}, "user_id": str(user_id)}

    def test_anonymous_request_is_unchanged(self):
        request = SimpleNamespace(state=SimpleNamespace())

        assert request_attributes(request, {"values": {}}) == {"values": {}}
