import logging
import string
from collections.abc import Iterable, Sequence

from boost.domain.models import Card, CardRate, RecommendationResult
from boost.engine.categories import OTHER, get_database_keys
from boost.engine.evaluator import DEFAULT_RATE, get_reward_rate, lookup_rate, matching_rates

logger = logging.getLogger(__name__)

GENERIC_BUSINESS_WORDS = ("wholesale", "store", "gas station", "supermarket", "supercenter")

COSTCO_CARD_IDENTITY = ("citi", "costco anywhere visa")
COSTCO_GAS_RATE = 5.0


def _eligible(wallet: Iterable[Card]) -> list[Card]:
    return [card for card in wallet if not card.is_virtual]


def _best_match(cards: Sequence[Card], keys: Sequence[str], floor: float | None = None) -> CardRate | None:
    """Highest rate for ``keys``; with ``floor`` set, only rates above it count."""
    best: CardRate | None = None
    for card in cards:
        for key in keys:
            for rate in matching_rates(card.reward_table, key):
                threshold = best.rate if best is not None else floor
                # Strictly greater: the earlier card keeps a tie.
                if threshold is None or rate > threshold:
                    best = CardRate(card=card, rate=rate)
    return best


def find_best_card_for_category(wallet: Iterable[Card], category: str) -> CardRate | None:
    cards = _eligible(wallet)
    keys = get_database_keys(category)

    best = _best_match(cards, keys, floor=0.0)
    if best is not None:
        logger.debug("Best card for %r: %s at %s", category, best.card.display_name, best.rate)
        return best

    best = _best_match(cards, [OTHER])
    if best is not None:
        logger.debug(
            "No card lists %r, using 'other' rate of %s at %s",
            category,
            best.card.display_name,
            best.rate,
        )
        return best

    logger.debug("No card has a rate for %r or 'other'", category)
    return None


def clean_business_name(business_name: str) -> str:
    cleaned = business_name.lower()
    for word in GENERIC_BUSINESS_WORDS:
        cleaned = cleaned.replace(word, "")
    return cleaned.strip()


def _is_cobranded(card: Card, cleaned_name: str) -> bool:
    product = card.product_name.lower()
    if not cleaned_name or not product:
        return False
    return cleaned_name in product or (len(cleaned_name) > 3 and product in cleaned_name)


def _cobranded_rate(card: Card, business_name: str, cleaned_name: str) -> float:
    lowered = business_name.lower()
    if "costco" in lowered and "gas" in lowered and card.identity == COSTCO_CARD_IDENTITY:
        logger.debug("Costco gas promotion applies to %s", card.display_name)
        return COSTCO_GAS_RATE

    rate = lookup_rate(card.reward_table, cleaned_name)
    if rate is None:
        rate = lookup_rate(card.reward_table, OTHER)
    return DEFAULT_RATE if rate is None else rate


def find_best_card_for_business(
    wallet: Iterable[Card], business_name: str, category: str
) -> RecommendationResult | None:
    cards = _eligible(wallet)
    cleaned_name = clean_business_name(business_name)
    logger.debug("Matching business %r as %r", business_name, cleaned_name)

    for card in cards:
        if not _is_cobranded(card, cleaned_name):
            continue
        rate = _cobranded_rate(card, business_name, cleaned_name)
        logger.info("Co-branded match for %r: %s at %s", business_name, card.display_name, rate)
        return RecommendationResult(card=card, rate=rate, matched_category=string.capwords(cleaned_name))

    best = find_best_card_for_category(cards, category)
    if best is None:
        return None
    return RecommendationResult(card=best.card, rate=best.rate, matched_category=None)


def rank_cards(wallet: Iterable[Card], category: str) -> list[CardRate]:
    rates = [CardRate(card=card, rate=get_reward_rate(card, category)) for card in _eligible(wallet)]
    rates.sort(key=lambda item: item.rate, reverse=True)
    return rates
