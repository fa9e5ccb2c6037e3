import json

import pytest

from boost.domain.models import VIRTUAL_CARD, Card
from boost.repository.catalog_store import CardCatalog

CATALOG = [
    {"issuer": "Chase", "name": "Sapphire Preferred", "rewards": {"dining": 3, "other": 1}},
    {"issuer": "Citi", "name": "Costco Anywhere Visa", "rewards": {"costco": "2", "gas": 4, "other": 1}},
    {"issuer": "American Express", "name": "Gold Card", "rewards": {"dining": 4.0, "groceries": 4}},
]


@pytest.fixture
def catalog(tmp_path) -> CardCatalog:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return CardCatalog(str(path))


@pytest.fixture
def sapphire() -> Card:
    return Card(issuer="Chase", product_name="Sapphire Preferred", reward_table={"dining": 3.0, "other": 1.0})


@pytest.fixture
def gold() -> Card:
    return Card(issuer="American Express", product_name="Gold Card", reward_table={"dining": 4.0, "groceries": 4.0})


@pytest.fixture
def wallet(sapphire, gold) -> list[Card]:
    return [VIRTUAL_CARD, sapphire, gold]
