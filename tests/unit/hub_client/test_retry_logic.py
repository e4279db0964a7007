"""Unit tests for hub_client.retry_logic module."""

import pytest
from unittest.mock import patch, MagicMock
from requests.exceptions import HTTPError

from src.hub_client.retry_logic import retry_on_rate_limit, _is_rate_limit_error
from src.hub_client.errors import APIAccessError, ResourceNotFoundError


def http_error(status_code, message=None):
    """Create an HTTPError carrying a response with the given status."""
    response = MagicMock()
    response.status_code = status_code
    return HTTPError(message or f"{status_code} Error", response=response)


class TestIsRateLimitError:
    """Test cases for _is_rate_limit_error function."""

    def test_detects_response_status_code(self):
        """An HTTP error with a 429 response is a rate limit."""
        assert _is_rate_limit_error(http_error(429)) is True

    def test_detects_status_code_attribute(self):
        """An exception carrying status_code=429 is a rate limit."""
        error = Exception("API error")
        error.status_code = 429
        assert _is_rate_limit_error(error) is True

    def test_other_status_codes_are_not_rate_limits(self):
        assert _is_rate_limit_error(http_error(404)) is False
        assert _is_rate_limit_error(http_error(500)) is False

    def test_message_text_is_ignored(self):
        """Mentions of 429 or rate limits in the message do not count."""
        assert _is_rate_limit_error(Exception("HTTP 429 Too Many Requests")) is False
        assert _is_rate_limit_error(http_error(404, "Content item item-429a not found")) is False

    def test_not_found_error_with_429_in_id(self):
        """A translated not-found error for an ID containing 429 is not a rate limit."""
        assert _is_rate_limit_error(ResourceNotFoundError("Content item", "item-429a")) is False

    def test_error_without_response(self):
        assert _is_rate_limit_error(HTTPError("connection dropped")) is False


class TestRetryOnRateLimit:
    """Test cases for retry_on_rate_limit function."""

    def test_success_on_first_attempt(self):
        """retry_on_rate_limit should return result on first successful attempt."""
        mock_func = MagicMock(return_value="success")
        result = retry_on_rate_limit(mock_func, "arg1", kwarg1="value1")

        assert result == "success"
        mock_func.assert_called_once_with("arg1", kwarg1="value1")

    @patch('src.hub_client.retry_logic.time.sleep')
    def test_backoff_doubles_between_retries(self, mock_sleep):
        """Retries should wait 1s, 2s, 4s."""
        mock_func = MagicMock(side_effect=[
            http_error(429),
            http_error(429),
            http_error(429),
            "done",
        ])

        assert retry_on_rate_limit(mock_func) == "done"
        assert [c.args[0] for c in mock_sleep.call_args_list] == [1, 2, 4]

    @patch('src.hub_client.retry_logic.time.sleep')
    def test_gives_up_after_three_retries(self, mock_sleep):
        """A rate limit persisting past 3 retries raises APIAccessError."""
        mock_func = MagicMock(side_effect=http_error(429))

        with pytest.raises(APIAccessError):
            retry_on_rate_limit(mock_func)

        assert mock_func.call_count == 4
        assert mock_sleep.call_count == 3

    @patch('src.hub_client.retry_logic.time.sleep')
    def test_other_errors_fail_fast(self, mock_sleep):
        """Non-rate-limit errors are raised immediately without retry."""
        mock_func = MagicMock(side_effect=ValueError("bad input"))

        with pytest.raises(ValueError):
            retry_on_rate_limit(mock_func)

        mock_func.assert_called_once()
        mock_sleep.assert_not_called()

    @patch('src.hub_client.retry_logic.time.sleep')
    def test_not_found_with_429_in_message_fails_fast(self, mock_sleep):
        """A not-found error naming an ID that contains 429 is not retried."""
        mock_func = MagicMock(side_effect=ResourceNotFoundError("Content item", "item-429a"))

        with pytest.raises(ResourceNotFoundError):
            retry_on_rate_limit(mock_func)

        mock_func.assert_called_once()
        mock_sleep.assert_not_called()
