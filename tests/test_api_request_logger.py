"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from ferry_departures.adapters.api_request_logger import (
    REDACTED,
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given FERRY_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("FERRY_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_when_env_set_to_true_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Given FERRY_LOG_REQUESTS=true in any case, when checking, then returns True."""
        monkeypatch.setenv("FERRY_LOG_REQUESTS", value)

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given FERRY_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("FERRY_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("ferry_departures.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given logging disabled, when logging a request, then nothing is logged."""
        monkeypatch.delenv("FERRY_LOG_REQUESTS", raising=False)

        log_api_request("GET", "https://example.com/api")

        mock_logger.info.assert_not_called()

    @patch("ferry_departures.adapters.api_request_logger.logger")
    def test_when_params_given_then_access_code_is_redacted(
        self, mock_logger: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given an access code param, when logging, then the code never reaches the log."""
        monkeypatch.setenv("FERRY_LOG_REQUESTS", "true")

        log_api_request(
            "GET",
            "https://www.wsdot.wa.gov/ferries/api/vessels/rest/vessellocations",
            params={"apiaccesscode": "secret-code", "format": "json"},
        )

        message = mock_logger.info.call_args[0][0]
        assert message.startswith("API Request:\nGET ")
        assert "secret-code" not in message
        assert f"apiaccesscode={REDACTED}" in message
        assert "format=json" in message

    @patch("ferry_departures.adapters.api_request_logger.logger")
    def test_when_url_has_query_then_params_are_appended(
        self, mock_logger: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given a URL that already has a query, when logging, then params join with '&'."""
        monkeypatch.setenv("FERRY_LOG_REQUESTS", "true")

        log_api_request("GET", "https://example.com/api?a=1", params={"b": "2"})

        message = mock_logger.info.call_args[0][0]
        assert "https://example.com/api?a=1&b=2" in message

    @patch("ferry_departures.adapters.api_request_logger.logger")
    def test_when_headers_given_then_sensitive_headers_are_redacted(
        self, mock_logger: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given sensitive headers, when logging, then their values are masked."""
        monkeypatch.setenv("FERRY_LOG_REQUESTS", "true")

        log_api_request(
            "GET",
            "https://api.weather.gov/points/47.6,-122.3",
            headers={"User-Agent": "ferry-departures/0.1", "Authorization": "Bearer abc"},
        )

        message = mock_logger.info.call_args[0][0]
        assert "Headers:" in message
        assert "ferry-departures/0.1" in message
        assert "Bearer abc" not in message
        assert REDACTED in message
