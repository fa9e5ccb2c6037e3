import logging

from boost.domain.errors import CardNotFoundError, ConfigurationError
from boost.domain.models import VIRTUAL_CARD, Card, Place
from boost.engine.categories import display_category, resolve_place_category
from boost.engine.evaluator import format_rate, get_reward_rate
from boost.engine.selectors import find_best_card_for_business, rank_cards
from boost.integrations.analytics import AnalyticsSink
from boost.integrations.places import PlacesClient
from boost.repository.catalog_store import CardCatalog
from boost.repository.wallet_store import WalletStore
from boost.schemas.requests import NearbyRequest, PaymentRequest, RecommendRequest
from boost.schemas.responses import (
    CardRateResponse,
    NearbyResponse,
    PaymentResponse,
    RecommendResponse,
)

logger = logging.getLogger(__name__)

WALLET_DEEP_LINK = "shoebox://"


class RecommendationOrchestrator:
    def __init__(
        self,
        wallet: WalletStore,
        catalog: CardCatalog,
        places: PlacesClient | None = None,
        analytics: AnalyticsSink | None = None,
        default_user_id: str = "local",
        nearby_radius_m: float = 100.0,
        nearby_max_results: int = 10,
    ):
        self.wallet = wallet
        self.catalog = catalog
        self.places = places
        self.analytics = analytics
        self.default_user_id = default_user_id
        self.nearby_radius_m = nearby_radius_m
        self.nearby_max_results = nearby_max_results

    def recommend(self, request: RecommendRequest) -> RecommendResponse:
        category = request.category or resolve_place_category(request.place_types)
        cards = self.wallet.snapshot()

        result = find_best_card_for_business(cards, request.business_name, category)
        alternatives = rank_cards(cards, category)

        if result is None:
            logger.info("No card recommended for %r (%s)", request.business_name, category)
            return RecommendResponse(
                card=VIRTUAL_CARD,
                rate=0.0,
                rate_display=format_rate(0.0),
                category=category,
                display_category=display_category(category),
                recommended=False,
                alternatives=alternatives,
            )

        logger.info(
            "Recommending %s at %s for %r (%s)",
            result.card.display_name,
            result.rate,
            request.business_name,
            category,
        )
        return RecommendResponse(
            card=result.card,
            rate=result.rate,
            rate_display=format_rate(result.rate),
            category=category,
            display_category=result.matched_category or display_category(category),
            matched_category=result.matched_category,
            recommended=True,
            alternatives=alternatives,
        )

    def recommend_for_place(self, place: Place) -> RecommendResponse:
        return self.recommend(RecommendRequest(business_name=place.name, place_types=place.types))

    def recommend_nearby(self, request: NearbyRequest) -> NearbyResponse:
        if self.places is None:
            raise ConfigurationError("Nearby search needs GOOGLE_PLACES_API_KEY.")

        places = self.places.search_nearby(
            request.latitude,
            request.longitude,
            radius_m=self.nearby_radius_m,
            max_results=self.nearby_max_results,
        )
        if not places:
            return NearbyResponse(places=[])

        selected = places[0]
        return NearbyResponse(
            places=places,
            selected_place=selected,
            recommendation=self.recommend_for_place(selected),
        )

    def card_rate(self, issuer: str, product_name: str, category: str) -> CardRateResponse:
        card = self.wallet.get_card(issuer, product_name)
        if card is None:
            raise CardNotFoundError(issuer, product_name)

        rate = get_reward_rate(card, category)
        return CardRateResponse(card=card, category=category, rate=rate, rate_display=format_rate(rate))

    def add_card(self, issuer: str, product_name: str, user_id: str | None = None) -> tuple[Card, bool]:
        try:
            card = self.catalog.fetch_card_details(issuer, product_name).to_card()
        except (CardNotFoundError, OSError, ValueError) as exc:
            logger.warning("Catalog lookup failed, adding %s %s without rewards: %s", issuer, product_name, exc)
            card = Card(issuer=issuer, product_name=product_name)

        added = self.wallet.add_card(card)
        if added and self.analytics is not None:
            self.analytics.track_card_added(user_id or self.default_user_id, card)
        return card, added

    def remove_card(self, issuer: str, product_name: str, user_id: str | None = None) -> bool:
        removed = self.wallet.delete_card(issuer, product_name)
        if removed is None:
            return False
        if self.analytics is not None:
            self.analytics.track_card_deleted(user_id or self.default_user_id, removed)
        return True

    def sign_out(self) -> None:
        self.wallet.clear()

    def record_payment(self, request: PaymentRequest) -> PaymentResponse:
        card = self.wallet.get_card(request.issuer, request.product_name)
        tracked = False
        if card is not None and not card.is_virtual and self.analytics is not None:
            self.analytics.track_payment_usage(request.user_id or self.default_user_id, request.category, card)
            tracked = True
        return PaymentResponse(tracked=tracked, wallet_url=WALLET_DEEP_LINK)
