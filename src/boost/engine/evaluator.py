import logging
from collections.abc import Iterator, Mapping

from boost.domain.models import Card
from boost.engine.categories import CATEGORY_MAPPING, OTHER

logger = logging.getLogger(__name__)

DEFAULT_RATE = 1.0


def matching_rates(reward_table: Mapping[str, float], key: str) -> Iterator[float]:
    """Yield every rate whose key equals ``key`` ignoring case, in table order."""
    wanted = key.lower()
    for reward_key, rate in reward_table.items():
        if reward_key.lower() == wanted:
            yield rate


def lookup_rate(reward_table: Mapping[str, float], key: str) -> float | None:
    if key in reward_table:
        return reward_table[key]
    return next(matching_rates(reward_table, key), None)


def get_reward_rate(card: Card, category: str) -> float:
    """Effective rate of one card for a category.

    Tries the category itself, then its synonyms from ``CATEGORY_MAPPING``,
    then the card's ``other`` rate. Falls back to ``DEFAULT_RATE``.
    """
    normalized = category.lower().strip()

    rate = lookup_rate(card.reward_table, normalized)
    if rate is not None:
        return rate

    for display_name, synonyms in CATEGORY_MAPPING.items():
        if display_name.lower() != normalized and normalized not in synonyms:
            continue
        for key in [*synonyms, display_name.lower()]:
            rate = lookup_rate(card.reward_table, key)
            if rate is not None:
                return rate
        break

    rate = lookup_rate(card.reward_table, OTHER)
    if rate is not None:
        return rate

    logger.debug("No rate for %r on %s, using default", category, card.display_name)
    return DEFAULT_RATE


def format_rate(rate: float) -> str:
    return f"{rate:g}%"
