import pytest
from fastapi.testclient import TestClient

from boost.agents.orchestrator import RecommendationOrchestrator
from boost.api.app import app
from boost.api.dependencies import get_orchestrator
from boost.integrations.analytics import AnalyticsSink
from boost.repository.catalog_store import CardCatalog
from boost.repository.wallet_store import WalletStore


@pytest.fixture
def client(tmp_path, catalog: CardCatalog):
    orchestrator = RecommendationOrchestrator(
        wallet=WalletStore(str(tmp_path / "wallet.json")),
        catalog=catalog,
        analytics=AnalyticsSink(str(tmp_path / "metrics.json")),
    )
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()


def _add(client: TestClient, issuer: str, product_name: str):
    return client.post("/wallet/cards", json={"issuer": issuer, "product_name": product_name})


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_wallet_lifecycle(client: TestClient) -> None:
    assert client.get("/wallet").json()["cards"][0]["issuer"] == "Virtual"

    response = _add(client, "Chase", "Sapphire Preferred")
    assert response.status_code == 201
    assert response.json()["cards"][1]["reward_table"] == {"dining": 3.0, "other": 1.0}

    assert _add(client, "chase", "sapphire preferred").status_code == 409

    response = client.request("DELETE", "/wallet/cards", json={"issuer": "Chase", "product_name": "Sapphire Preferred"})
    assert response.status_code == 200
    assert len(response.json()["cards"]) == 1

    response = client.request("DELETE", "/wallet/cards", json={"issuer": "Virtual", "product_name": "Debit Card"})
    assert response.status_code == 404


def test_sign_out_clears_wallet(client: TestClient) -> None:
    _add(client, "Chase", "Sapphire Preferred")

    response = client.post("/wallet/sign-out")

    assert [card["issuer"] for card in response.json()["cards"]] == ["Virtual"]


def test_recommend(client: TestClient) -> None:
    _add(client, "Chase", "Sapphire Preferred")
    _add(client, "Citi", "Costco Anywhere Visa")

    dining = client.post("/recommend", json={"business_name": "Sushi Zen", "place_types": ["sushi_restaurant"]})
    costco = client.post("/recommend", json={"business_name": "Costco Gas Station", "place_types": ["gas_station"]})

    assert dining.status_code == 200
    assert dining.json()["card"]["product_name"] == "Sapphire Preferred"
    assert dining.json()["rate"] == 3.0
    assert costco.json()["rate"] == 5.0
    assert costco.json()["matched_category"] == "Costco"


def test_recommend_with_empty_wallet(client: TestClient) -> None:
    body = client.post("/recommend", json={"business_name": "Anywhere"}).json()

    assert body["recommended"] is False
    assert body["card"]["issuer"] == "Virtual"
    assert body["category"] == "other"


def test_card_rate(client: TestClient) -> None:
    _add(client, "Chase", "Sapphire Preferred")

    ok = client.get("/cards/rate", params={"issuer": "Chase", "product_name": "Sapphire Preferred", "category": "hotels"})
    missing = client.get("/cards/rate", params={"issuer": "Citi", "product_name": "Premier", "category": "dining"})

    assert ok.json()["rate"] == 1.0
    assert ok.json()["rate_display"] == "1%"
    assert missing.status_code == 404


def test_nearby_without_places_key(client: TestClient) -> None:
    response = client.post("/recommend/nearby", json={"latitude": 37.0, "longitude": -122.0})

    assert response.status_code == 503


def test_nearby_rejects_bad_coordinates(client: TestClient) -> None:
    response = client.post("/recommend/nearby", json={"latitude": 137.0, "longitude": -122.0})

    assert response.status_code == 422


def test_payment(client: TestClient) -> None:
    _add(client, "Chase", "Sapphire Preferred")

    body = client.post(
        "/payments", json={"issuer": "Chase", "product_name": "Sapphire Preferred", "category": "Dining"}
    ).json()

    assert body == {"tracked": True, "wallet_url": "shoebox://"}


def test_catalog(client: TestClient) -> None:
    body = client.get("/catalog").json()

    assert [item["product_name"] for item in body] == ["Sapphire Preferred", "Costco Anywhere Visa", "Gold Card"]
