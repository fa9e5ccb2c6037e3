import pytest
import requests

from boost.domain.errors import PlacesError
from boost.integrations.places import PlacesClient, extract_business_name, parse_coordinates


class FakeResponse:
    def __init__(self, payload: dict, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> dict:
        return self.payload


class FakeSession:
    def __init__(self, response: FakeResponse):
        self.response = response
        self.calls: list[dict] = []

    def request(self, method, url, json=None, headers=None, timeout=None) -> FakeResponse:
        self.calls.append({"method": method, "url": url, "json": json, "headers": headers})
        return self.response


NEARBY_PAYLOAD = {
    "places": [
        {
            "id": "p1",
            "displayName": {"text": "Costco Gas Station"},
            "formattedAddress": "1 Main St",
            "location": {"latitude": 37.1, "longitude": -122.1},
            "types": ["gas_station", "point_of_interest"],
            "rating": 4.5,
        },
        {"id": "p2", "displayName": {"text": "Sushi Zen"}, "types": ["sushi_restaurant"]},
    ]
}


def test_search_nearby_builds_request_and_parses_places() -> None:
    session = FakeSession(FakeResponse(NEARBY_PAYLOAD))
    client = PlacesClient("key", session=session)

    places = client.search_nearby(37.1, -122.1, radius_m=100, max_results=10)

    assert [place.name for place in places] == ["Costco Gas Station", "Sushi Zen"]
    assert places[0].primary_type == "gas_station"
    assert places[0].latitude == 37.1
    assert places[1].address is None

    call = session.calls[0]
    assert call["url"].endswith("places:searchNearby")
    assert call["headers"]["X-Goog-Api-Key"] == "key"
    assert call["json"]["excludedTypes"] == ["shopping_mall"]
    assert call["json"]["rankPreference"] == "POPULARITY"
    assert call["json"]["locationRestriction"]["circle"]["radius"] == 100


def test_search_nearby_limits_results() -> None:
    client = PlacesClient("key", session=FakeSession(FakeResponse(NEARBY_PAYLOAD)))

    assert len(client.search_nearby(0.0, 0.0, max_results=1)) == 1


def test_http_errors_become_places_errors() -> None:
    client = PlacesClient("key", session=FakeSession(FakeResponse({}, status_code=403)))

    with pytest.raises(PlacesError):
        client.search_nearby(0.0, 0.0)


def test_missing_api_key() -> None:
    with pytest.raises(PlacesError):
        PlacesClient("")


def test_autocomplete_keeps_first_prediction_per_business() -> None:
    payload = {
        "suggestions": [
            {"placePrediction": {"placeId": "a", "structuredFormat": {"mainText": {"text": "Starbucks - Main St"}}}},
            {"placePrediction": {"placeId": "b", "structuredFormat": {"mainText": {"text": "Starbucks (Airport)"}}}},
            {"placePrediction": {"placeId": "c", "text": {"text": "Target, Oakland"}}},
            {"queryPrediction": {"text": {"text": "starbucks near me"}}},
        ]
    }
    client = PlacesClient("key", session=FakeSession(FakeResponse(payload)))

    assert client.autocomplete("star") == [("Starbucks", "a"), ("Target", "c")]


def test_autocomplete_skips_blank_query() -> None:
    session = FakeSession(FakeResponse({}))

    assert PlacesClient("key", session=session).autocomplete("  ") == []
    assert session.calls == []


def test_fetch_place() -> None:
    session = FakeSession(FakeResponse(NEARBY_PAYLOAD["places"][1]))

    place = PlacesClient("key", session=session).fetch_place("p2")

    assert place.place_id == "p2"
    assert place.types == ["sushi_restaurant"]
    assert session.calls[0]["method"] == "GET"


def test_extract_business_name() -> None:
    assert extract_business_name("Costco Wholesale, Mountain View") == "Costco Wholesale"
    assert extract_business_name("Shell – Route 9") == "Shell"
    assert extract_business_name("Walgreens") == "Walgreens"


def test_parse_coordinates() -> None:
    assert parse_coordinates("37.7749, -122.4194") == (37.7749, -122.4194)
    assert parse_coordinates("Getting location...") is None
    assert parse_coordinates("1, 2, 3") is None
