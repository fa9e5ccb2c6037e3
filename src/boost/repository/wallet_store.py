import asyncio
import json
import logging
import string
import threading
from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from boost.domain.errors import CardNotFoundError
from boost.domain.models import VIRTUAL_CARD, Card
from boost.repository.catalog_store import CardCatalog

logger = logging.getLogger(__name__)

_cards_adapter = TypeAdapter(list[Card])


def parse_card_id(card_id: str) -> tuple[str, str] | None:
    """Split a profile card id such as ``chase_sapphire_preferred``.

    Returns ``(issuer, product_name)`` with capitalized words, or ``None``
    when the id has no product part.
    """
    parts = [part for part in card_id.split("_") if part]
    if len(parts) < 2:
        return None

    if parts[0] == "capital" and parts[1] == "one":
        issuer = "Capital One"
        product_parts = parts[2:]
    else:
        issuer = parts[0].capitalize()
        product_parts = parts[1:]

    if not product_parts:
        return None
    return issuer, string.capwords(" ".join(product_parts))


class WalletStore:
    """Ordered wallet of one signed-in user.

    The virtual card is always first and can't be removed. Every mutation is
    written to ``wallet_file`` when one is configured.
    """

    def __init__(self, wallet_file: str | None = None):
        self.wallet_file = Path(wallet_file) if wallet_file else None
        self._lock = threading.RLock()
        self._cards: list[Card] = self._load()

    def _load(self) -> list[Card]:
        if self.wallet_file is None or not self.wallet_file.exists():
            logger.info("No saved wallet, starting with the virtual card")
            return [VIRTUAL_CARD]

        try:
            raw = self.wallet_file.read_text(encoding="utf-8")
            cards = _cards_adapter.validate_python(json.loads(raw))
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            logger.error("Could not read wallet from %s: %s", self.wallet_file, exc)
            return [VIRTUAL_CARD]

        if VIRTUAL_CARD not in cards:
            cards.insert(0, VIRTUAL_CARD)
        logger.info("Loaded %d cards from %s", len(cards), self.wallet_file)
        return cards

    def _save(self) -> None:
        if self.wallet_file is None:
            return
        try:
            self.wallet_file.parent.mkdir(parents=True, exist_ok=True)
            payload = [card.model_dump() for card in self._cards]
            self.wallet_file.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.error("Could not save wallet to %s: %s", self.wallet_file, exc)

    def snapshot(self) -> tuple[Card, ...]:
        with self._lock:
            return tuple(self._cards)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cards)

    def add_card(self, card: Card) -> bool:
        with self._lock:
            if card in self._cards:
                logger.warning("Card already in wallet: %s", card.display_name)
                return False
            self._cards.append(card)
            self._save()

        if card.reward_table:
            logger.info("Added card %s with rewards %s", card.display_name, card.reward_table)
        else:
            logger.info("Added card %s without reward data", card.display_name)
        return True

    def get_card(self, issuer: str, product_name: str) -> Card | None:
        probe = Card(issuer=issuer, product_name=product_name)
        with self._lock:
            return next((card for card in self._cards if card == probe), None)

    def delete_card(self, issuer: str, product_name: str) -> Card | None:
        """Remove a card and return it, or ``None`` when nothing was removed."""
        probe = Card(issuer=issuer, product_name=product_name)
        if probe == VIRTUAL_CARD:
            logger.warning("Refusing to delete the virtual card")
            return None

        with self._lock:
            for index, card in enumerate(self._cards):
                if card == probe:
                    del self._cards[index]
                    self._save()
                    logger.info("Deleted card %s", card.display_name)
                    return card

        logger.warning("Card not in wallet: %s %s", issuer, product_name)
        return None

    def clear(self) -> None:
        with self._lock:
            self._cards = [VIRTUAL_CARD]
            self._save()
        logger.info("Cleared wallet down to the virtual card")

    async def load_from_profile(self, card_ids: Iterable[str], catalog: CardCatalog) -> int:
        """Replace the wallet with the cards listed in a user profile.

        Catalog lookups run concurrently. A card that can't be found is still
        added, with an empty reward table. Returns the number of cards added.
        """
        self.clear()

        parsed: list[tuple[str, str]] = []
        for card_id in card_ids:
            names = parse_card_id(card_id)
            if names is None:
                logger.warning("Invalid card id format: %s", card_id)
                continue
            parsed.append(names)

        cards = await asyncio.gather(
            *(self._fetch_or_fallback(catalog, issuer, product_name) for issuer, product_name in parsed)
        )

        added = sum(1 for card in cards if self.add_card(card))
        logger.info("Loaded %d cards from profile", added)
        return added

    @staticmethod
    async def _fetch_or_fallback(catalog: CardCatalog, issuer: str, product_name: str) -> Card:
        try:
            details = await asyncio.to_thread(catalog.fetch_card_details, issuer, product_name)
        except (CardNotFoundError, OSError, ValueError) as exc:
            logger.warning("Failed to load card %s %s: %s", issuer, product_name, exc)
            return Card(issuer=issuer, product_name=product_name)
        return details.to_card()
