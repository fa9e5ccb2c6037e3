import logging
import re

import requests

from boost.domain.errors import PlacesError
from boost.domain.models import Place

logger = logging.getLogger(__name__)

PLACES_BASE_URL = "https://places.googleapis.com/v1"
PLACE_FIELDS = ["id", "displayName", "formattedAddress", "location", "types", "rating"]
EXCLUDED_NEARBY_TYPES = ["shopping_mall"]

_NAME_SEPARATORS = re.compile(r"[,\-–(]")


def extract_business_name(text: str) -> str:
    """Business name without the address or branch suffix."""
    return _NAME_SEPARATORS.split(text, maxsplit=1)[0].strip()


def parse_coordinates(text: str) -> tuple[float, float] | None:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


def _place_from_payload(payload: dict) -> Place:
    location = payload.get("location") or {}
    return Place(
        place_id=payload.get("id"),
        name=(payload.get("displayName") or {}).get("text", ""),
        types=list(payload.get("types") or []),
        address=payload.get("formattedAddress"),
        latitude=location.get("latitude"),
        longitude=location.get("longitude"),
        rating=payload.get("rating"),
    )


class PlacesClient:
    """Thin client for the Google Places API (New)."""

    def __init__(self, api_key: str, session: requests.Session | None = None, timeout: float = 10.0):
        if not api_key:
            raise PlacesError("GOOGLE_PLACES_API_KEY is required.")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    def _headers(self, field_mask: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": field_mask,
        }

    def _request(self, method: str, path: str, field_mask: str, body: dict | None = None) -> dict:
        url = f"{PLACES_BASE_URL}/{path}"
        try:
            response = self.session.request(
                method,
                url,
                json=body,
                headers=self._headers(field_mask),
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            logger.error("Places API %s %s failed: %s", method, path, exc)
            raise PlacesError(f"Places API request failed: {exc}") from exc
        except ValueError as exc:
            raise PlacesError("Places API returned invalid JSON.") from exc

    def search_nearby(
        self,
        latitude: float,
        longitude: float,
        radius_m: float = 100.0,
        max_results: int = 10,
    ) -> list[Place]:
        body = {
            "locationRestriction": {
                "circle": {
                    "center": {"latitude": latitude, "longitude": longitude},
                    "radius": radius_m,
                }
            },
            "excludedTypes": EXCLUDED_NEARBY_TYPES,
            "rankPreference": "POPULARITY",
            "maxResultCount": max_results,
        }
        field_mask = ",".join(f"places.{field}" for field in PLACE_FIELDS)
        data = self._request("POST", "places:searchNearby", field_mask, body)

        places = [_place_from_payload(item) for item in data.get("places", [])][:max_results]
        logger.info("Found %d places near %s, %s", len(places), latitude, longitude)
        return places

    def autocomplete(self, query: str) -> list[tuple[str, str]]:
        """Return ``(business_name, place_id)`` predictions, one per business name."""
        if not query.strip():
            return []

        data = self._request("POST", "places:autocomplete", "*", {"input": query})

        predictions: dict[str, str] = {}
        for suggestion in data.get("suggestions", []):
            prediction = suggestion.get("placePrediction")
            if not prediction:
                continue
            main_text = (prediction.get("structuredFormat") or {}).get("mainText") or prediction.get("text") or {}
            name = extract_business_name(main_text.get("text", ""))
            if name and name not in predictions:
                predictions[name] = prediction.get("placeId", "")
        return list(predictions.items())

    def fetch_place(self, place_id: str) -> Place:
        data = self._request("GET", f"places/{place_id}", ",".join(PLACE_FIELDS))
        return _place_from_payload(data)
