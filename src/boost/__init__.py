from boost.agents.orchestrator import RecommendationOrchestrator
from boost.domain.models import VIRTUAL_CARD, Card, CardRate, Place, RecommendationResult
from boost.engine.categories import get_database_keys, resolve_category, resolve_place_category
from boost.engine.evaluator import get_reward_rate
from boost.engine.selectors import find_best_card_for_business, find_best_card_for_category, rank_cards
from boost.repository.catalog_store import CardCatalog
from boost.repository.wallet_store import WalletStore
from boost.schemas.requests import RecommendRequest

__all__ = [
    "VIRTUAL_CARD",
    "Card",
    "CardCatalog",
    "CardRate",
    "Place",
    "RecommendRequest",
    "RecommendationOrchestrator",
    "RecommendationResult",
    "WalletStore",
    "find_best_card_for_business",
    "find_best_card_for_category",
    "get_database_keys",
    "get_reward_rate",
    "rank_cards",
    "resolve_category",
    "resolve_place_category",
]
