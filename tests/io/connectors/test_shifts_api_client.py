"""
Unit tests for the shifts API client.

Exercises initialization from settings, URL building, envelope unwrapping,
status code mapping and retry behaviour with a mocked requests session.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from shift_hub.io.connectors.shifts_api import (
    ShiftsApiClient,
    ShiftsApiClientError,
    ShiftsApiDecodeError,
    ShiftsApiError,
    ShiftsApiNotFoundError,
)
from shift_hub.io.connectors.shifts_api.parsers import unwrap_collection
from shift_hub.io.connectors.shifts_api.utils import sanitize_url_for_logging


def _response(status_code=200, payload=None, json_error=None):
    response = Mock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestShiftsApiClientInitialization:
    """Test client initialization and configuration."""

    def test_defaults_from_settings(self):
        client = ShiftsApiClient()
        assert client.base_url == "http://localhost:3000"
        assert client.timeout == 30
        assert client.retry_max == 0
        assert client.session.headers["Accept"] == "application/json"

    def test_settings_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("SHIFT_HUB_API_BASE_URL", "https://shifts.example.com/")
        monkeypatch.setenv("SHIFT_HUB_API_TIMEOUT", "5")
        monkeypatch.setenv("SHIFT_HUB_API_RETRY_MAX", "2")

        client = ShiftsApiClient()

        assert client.base_url == "https://shifts.example.com"
        assert client.timeout == 5
        assert client.retry_max == 2

    def test_constructor_overrides(self):
        client = ShiftsApiClient("http://api.internal:8080/", timeout=2.5, retry_max=4)
        assert client.base_url == "http://api.internal:8080"
        assert client.timeout == 2.5
        assert client.retry_max == 4

    def test_negative_retry_rejected(self):
        with pytest.raises(ValueError):
            ShiftsApiClient(retry_max=-1)

    def test_injected_session_used(self):
        session = requests.Session()
        client = ShiftsApiClient(session=session)
        assert client.session is session

    @pytest.mark.parametrize(
        "endpoint, expected",
        [
            ("/workplaces", "http://localhost:3000/workplaces"),
            ("shifts", "http://localhost:3000/shifts"),
            ("https://other.example.com/shifts", "https://other.example.com/shifts"),
        ],
    )
    def test_url_for(self, endpoint, expected):
        assert ShiftsApiClient().url_for(endpoint) == expected


class TestFetchCollection:
    """Test collection retrieval and envelope handling."""

    def test_returns_unwrapped_records(self):
        client = ShiftsApiClient()
        records = [{"id": "1", "name": "Alpha"}, {"id": "2", "name": "Beta"}]

        with patch.object(client.session, "request") as mock_request:
            mock_request.return_value = _response(
                payload={"data": records, "links": {"next": None}}
            )
            result = client.fetch_collection("/workplaces")

        assert result == records
        mock_request.assert_called_once_with(
            "GET", "http://localhost:3000/workplaces", timeout=30
        )

    def test_missing_envelope_field(self):
        client = ShiftsApiClient()

        with patch.object(client.session, "request") as mock_request:
            mock_request.return_value = _response(payload=[{"id": "1"}])
            with pytest.raises(ShiftsApiDecodeError, match="JSON object envelope"):
                client.fetch_collection("/workplaces")

    def test_invalid_json(self):
        client = ShiftsApiClient()

        with patch.object(client.session, "request") as mock_request:
            mock_request.return_value = _response(
                json_error=requests.JSONDecodeError("Expecting value", "<html>", 0)
            )
            with pytest.raises(ShiftsApiDecodeError, match="Invalid JSON"):
                client.fetch_collection("/shifts")

    def test_empty_endpoint_rejected(self):
        client = ShiftsApiClient()
        with pytest.raises(ValueError, match="Endpoint cannot be empty"):
            client.fetch_collection("  ")


class TestShiftsApiErrorHandling:
    """Test status code mapping and retries."""

    def test_not_found_404(self):
        client = ShiftsApiClient(retry_max=3)

        with patch.object(client.session, "request") as mock_request:
            mock_request.return_value = _response(status_code=404)
            with pytest.raises(ShiftsApiNotFoundError):
                client.fetch_collection("/shifts")

        assert mock_request.call_count == 1

    def test_non_200_success_status_accepted(self):
        client = ShiftsApiClient()

        with patch.object(client.session, "request") as mock_request:
            mock_request.return_value = _response(
                status_code=203, payload={"data": [{"id": "1", "name": "Alpha"}]}
            )
            result = client.fetch_collection("/workplaces")

        assert result == [{"id": "1", "name": "Alpha"}]
        mock_request.assert_called_once()

    def test_client_error_not_retried(self):
        client = ShiftsApiClient(retry_max=3)

        with patch.object(client.session, "request") as mock_request:
            mock_request.return_value = _response(status_code=400)
            with pytest.raises(ShiftsApiClientError, match="Unexpected status code"):
                client.fetch_collection("/shifts")

        assert mock_request.call_count == 1

    @patch("shift_hub.io.connectors.shifts_api.transport.time.sleep")
    def test_server_error_retried_then_succeeds(self, mock_sleep):
        client = ShiftsApiClient(retry_max=2)

        with patch.object(client.session, "request") as mock_request:
            mock_request.side_effect = [
                _response(status_code=503),
                _response(payload={"data": []}),
            ]
            assert client.fetch_collection("/shifts") == []

        assert mock_request.call_count == 2
        mock_sleep.assert_called_once()

    @patch("shift_hub.io.connectors.shifts_api.transport.time.sleep")
    def test_server_error_retries_exhausted(self, mock_sleep):
        client = ShiftsApiClient(retry_max=2)

        with patch.object(client.session, "request") as mock_request:
            mock_request.return_value = _response(status_code=500)
            with pytest.raises(ShiftsApiClientError, match="Server error"):
                client.fetch_collection("/shifts")

        assert mock_request.call_count == 3
        assert mock_sleep.call_count == 2

    @patch("shift_hub.io.connectors.shifts_api.transport.time.sleep")
    def test_connection_error_wrapped(self, mock_sleep):
        client = ShiftsApiClient(retry_max=1)

        with patch.object(client.session, "request") as mock_request:
            mock_request.side_effect = requests.ConnectionError("connection refused")
            with pytest.raises(ShiftsApiClientError) as exc_info:
                client.fetch_collection("/shifts")

        assert "failed after 2 attempts" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
        assert mock_request.call_count == 2

    def test_connection_error_without_retries(self):
        client = ShiftsApiClient()

        with patch.object(client.session, "request") as mock_request:
            mock_request.side_effect = requests.Timeout("read timed out")
            with pytest.raises(ShiftsApiClientError):
                client.fetch_collection("/workplaces")

        assert mock_request.call_count == 1

    def test_exception_hierarchy(self):
        assert issubclass(ShiftsApiClientError, ShiftsApiError)
        assert issubclass(ShiftsApiNotFoundError, ShiftsApiClientError)
        assert issubclass(ShiftsApiDecodeError, ShiftsApiError)


class TestUnwrapCollection:
    def test_custom_field(self):
        assert unwrap_collection({"items": [{"a": 1}]}, field="items") == [{"a": 1}]

    def test_missing_field(self):
        with pytest.raises(ShiftsApiDecodeError, match="missing the 'data' field"):
            unwrap_collection({"error": "nope"})

    def test_field_not_a_list(self):
        with pytest.raises(ShiftsApiDecodeError, match="must be a list"):
            unwrap_collection({"data": {"id": "1"}})

    def test_non_object_record(self):
        with pytest.raises(ShiftsApiDecodeError, match="Record 1"):
            unwrap_collection({"data": [{"id": "1"}, "2"]})


class TestSanitizeUrl:
    def test_strips_credentials_and_query(self):
        assert (
            sanitize_url_for_logging("https://user:pw@api.example.com/shifts?token=abc")
            == "https://api.example.com/shifts?[QUERY_SANITIZED]"
        )

    def test_plain_url_unchanged(self):
        assert (
            sanitize_url_for_logging("http://localhost:3000/workplaces")
            == "http://localhost:3000/workplaces"
        )
