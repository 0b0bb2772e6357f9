"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from resrobot_departures.adapters.api_request_logger import (
    REDACTED,
    log_api_request,
    redact_params,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given RESROBOT_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("RESROBOT_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_when_env_true_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Given RESROBOT_LOG_REQUESTS=true in any case, when checking, then returns True."""
        monkeypatch.setenv("RESROBOT_LOG_REQUESTS", value)

        assert should_log_requests() is True

    def test_when_env_false_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given RESROBOT_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("RESROBOT_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestRedactParams:
    """Tests for redact_params function."""

    def test_when_key_present_then_redacted(self) -> None:
        """Given the API key parameter, when redacting, then its value is hidden."""
        result = redact_params({"key": "abc123", "originId": "740000001"})

        assert result == {"key": REDACTED, "originId": "740000001"}

    def test_when_name_differs_in_case_then_still_redacted(self) -> None:
        """Given an upper-case credential name, when redacting, then it is hidden too."""
        assert redact_params({"accessId": "abc"}) == {"accessId": REDACTED}


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("resrobot_departures.adapters.api_request_logger.should_log_requests")
    @patch("resrobot_departures.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "https://api.resrobot.se/v2/trip", params={"key": "abc"})

        mock_logger.info.assert_not_called()

    @patch("resrobot_departures.adapters.api_request_logger.should_log_requests")
    @patch("resrobot_departures.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_sorted_params_without_key(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled, when logging a trip query, then params are sorted and key hidden."""
        mock_should_log.return_value = True

        log_api_request(
            "GET",
            "https://api.resrobot.se/v2/trip",
            params={"originId": "1", "key": "abc123", "destId": "2"},
        )

        mock_logger.info.assert_called_once()
        message = mock_logger.info.call_args[0][0]
        assert "GET https://api.resrobot.se/v2/trip?destId=2&key=" in message
        assert "originId=1" in message
        assert "abc123" not in message
        assert REDACTED in message

    @patch("resrobot_departures.adapters.api_request_logger.should_log_requests")
    @patch("resrobot_departures.adapters.api_request_logger.logger")
    def test_when_url_has_query_then_params_appended(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given a URL with an existing query, when logging params, then they are appended with '&'."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/trip?lang=sv", params={"format": "json"})

        message = mock_logger.info.call_args[0][0]
        assert "https://example.com/trip?lang=sv&format=json" in message

    @patch("resrobot_departures.adapters.api_request_logger.should_log_requests")
    @patch("resrobot_departures.adapters.api_request_logger.logger")
    def test_when_no_params_then_url_only(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given no params, when logging, then only method and URL are logged."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/trip")

        assert mock_logger.info.call_args[0][0] == "API Request: GET https://example.com/trip"
