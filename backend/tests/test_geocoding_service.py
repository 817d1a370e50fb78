"""
Tests for Geocoding Service

Nominatim calls are mocked; failures must degrade to empty results.
"""
import requests
from unittest.mock import patch, MagicMock

from quietroute.services.geocoding_service import reverse_geocode, search_location

VICTORIA_MEMORIAL = {
    "place_id": 12345,
    "name": "Victoria Memorial",
    "display_name": "Victoria Memorial, Queen's Way, Kolkata, West Bengal, India",
    "lat": "22.5448",
    "lon": "88.3426",
    "type": "museum",
}


def mock_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class TestSearchLocation:
    """Tests for search_location()"""

    @patch('quietroute.services.geocoding_service.requests.get')
    def test_results_normalized(self, mock_get):
        mock_get.return_value = mock_response([VICTORIA_MEMORIAL])

        results = search_location("Victoria Memorial", limit=1)

        assert len(results) == 1
        place = results[0]
        assert place["name"] == "Victoria Memorial"
        assert place["latitude"] == 22.5448
        assert place["longitude"] == 88.3426
        assert place["place_id"] == 12345

    @patch('quietroute.services.geocoding_service.requests.get')
    def test_sends_user_agent_and_limit(self, mock_get):
        mock_get.return_value = mock_response([])

        search_location("Park Street", limit=3)

        kwargs = mock_get.call_args[1]
        assert "User-Agent" in kwargs["headers"]
        assert kwargs["params"]["limit"] == 3
        assert kwargs["params"]["q"] == "Park Street"

    @patch('quietroute.services.geocoding_service.requests.get')
    def test_viewbox_biases_without_bounding(self, mock_get):
        mock_get.return_value = mock_response([])

        search_location("Park Street", viewbox="88.2,22.4,88.5,22.7")

        params = mock_get.call_args[1]["params"]
        assert params["viewbox"] == "88.2,22.4,88.5,22.7"
        assert params["bounded"] == 0

    @patch('quietroute.services.geocoding_service.requests.get')
    def test_name_falls_back_to_display_name(self, mock_get):
        place = dict(VICTORIA_MEMORIAL, name="")
        mock_get.return_value = mock_response([place])

        results = search_location("Victoria Memorial")

        assert results[0]["name"] == "Victoria Memorial"

    @patch('quietroute.services.geocoding_service.requests.get')
    def test_malformed_results_skipped(self, mock_get):
        mock_get.return_value = mock_response([{"display_name": "No coords"}, VICTORIA_MEMORIAL])

        results = search_location("Victoria Memorial")

        assert len(results) == 1

    @patch('quietroute.services.geocoding_service.requests.get')
    def test_api_failure_returns_empty(self, mock_get):
        mock_get.side_effect = requests.exceptions.RequestException("API connection failed")
        assert search_location("Victoria Memorial") == []

    @patch('quietroute.services.geocoding_service.requests.get')
    def test_blank_query_skips_request(self, mock_get):
        assert search_location("   ") == []
        mock_get.assert_not_called()


class TestReverseGeocode:
    """Tests for reverse_geocode()"""

    @patch('quietroute.services.geocoding_service.requests.get')
    def test_success(self, mock_get):
        mock_get.return_value = mock_response(VICTORIA_MEMORIAL)

        place = reverse_geocode(22.5448, 88.3426)

        assert place is not None
        assert place["display_name"].startswith("Victoria Memorial")

    @patch('quietroute.services.geocoding_service.requests.get')
    def test_nominatim_error_payload(self, mock_get):
        mock_get.return_value = mock_response({"error": "Unable to geocode"})
        assert reverse_geocode(0.0, 0.0) is None

    @patch('quietroute.services.geocoding_service.requests.get')
    def test_timeout_returns_none(self, mock_get):
        mock_get.side_effect = requests.Timeout("Request timed out")
        assert reverse_geocode(22.5448, 88.3426) is None
