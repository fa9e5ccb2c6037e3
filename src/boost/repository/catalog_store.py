import json
import logging
import math
from pathlib import Path
from typing import Any

from boost.domain.errors import CardNotFoundError
from boost.domain.models import CardDetails

logger = logging.getLogger(__name__)


def _parse_rate(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        rate = float(value)
    elif isinstance(value, str):
        try:
            rate = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(rate) or rate < 0:
        return None
    return rate


def parse_reward_table(raw: Any) -> dict[str, float]:
    """Normalize a stored reward map into ``{category: rate}``.

    Stored documents mix ints, floats and numeric strings. Entries that are
    not a non-negative number are dropped.
    """
    if not isinstance(raw, dict):
        return {}

    table: dict[str, float] = {}
    for category, value in raw.items():
        rate = _parse_rate(value)
        if rate is None:
            logger.warning("Dropping reward %r with unusable value %r", category, value)
            continue
        table[str(category)] = rate
    return table


def _details_from_document(document: dict, issuer: str, product_name: str) -> CardDetails:
    return CardDetails(
        issuer=document.get("issuer") or issuer,
        product_name=document.get("name") or product_name,
        reward_table=parse_reward_table(document.get("rewards")),
        image_ref=document.get("imgURL"),
    )


class CardCatalog:
    def __init__(self, catalog_file: str):
        self.catalog_file = Path(catalog_file)

    def _load_documents(self) -> list[dict]:
        if not self.catalog_file.exists():
            raise FileNotFoundError(f"Card catalog not found: {self.catalog_file}")

        with self.catalog_file.open("r", encoding="utf-8") as fh:
            data = json.load(fh)

        return [item for item in data if isinstance(item, dict)]

    def list_cards(self) -> list[CardDetails]:
        return [
            _details_from_document(doc, str(doc.get("issuer", "")), str(doc.get("name", "")))
            for doc in self._load_documents()
        ]

    def fetch_card_details(self, issuer: str, product_name: str) -> CardDetails:
        logger.debug("Looking up card issuer=%s name=%s", issuer, product_name)
        for document in self._load_documents():
            if document.get("issuer") == issuer and document.get("name") == product_name:
                details = _details_from_document(document, issuer, product_name)
                logger.info(
                    "Found card %s %s with %d reward categories",
                    details.issuer,
                    details.product_name,
                    len(details.reward_table),
                )
                return details

        raise CardNotFoundError(issuer, product_name)
