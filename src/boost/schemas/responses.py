from pydantic import BaseModel

from boost.domain.models import Card, CardRate, Place


class RecommendResponse(BaseModel):
    card: Card
    rate: float
    rate_display: str
    category: str
    display_category: str
    matched_category: str | None = None
    recommended: bool
    alternatives: list[CardRate]


class NearbyResponse(BaseModel):
    places: list[Place]
    selected_place: Place | None = None
    recommendation: RecommendResponse | None = None


class CardRateResponse(BaseModel):
    card: Card
    category: str
    rate: float
    rate_display: str


class WalletResponse(BaseModel):
    cards: list[Card]


class PaymentResponse(BaseModel):
    tracked: bool
    wallet_url: str
