import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

VIRTUAL_ISSUER = "Virtual"
VIRTUAL_PRODUCT_NAME = "Debit Card"


class Card(BaseModel):
    model_config = ConfigDict(frozen=True)

    issuer: str
    product_name: str
    reward_table: dict[str, float] = Field(default_factory=dict)
    image_ref: str | None = None

    @field_validator("reward_table")
    @classmethod
    def check_non_negative_rates(cls, value: dict[str, float]) -> dict[str, float]:
        for key, rate in value.items():
            if not math.isfinite(rate) or rate < 0:
                raise ValueError(f"reward rate for {key!r} must be a finite number >= 0, got {rate}")
        return value

    @property
    def identity(self) -> tuple[str, str]:
        return self.issuer.casefold(), self.product_name.casefold()

    @property
    def is_virtual(self) -> bool:
        return self.issuer == VIRTUAL_ISSUER

    @property
    def card_key(self) -> str:
        """Analytics key, e.g. ``citi_costco_anywhere_visa``."""
        issuer = self.issuer.lower().replace(" ", "_").replace(".", "")
        product = self.product_name.lower().replace(" ", "_").replace(".", "")
        return f"{issuer}_{product}"

    @property
    def document_id(self) -> str:
        """Identifier stored in a user profile's card list."""
        return f"{self.issuer.lower().strip()}_{self.product_name.lower().strip()}".replace(" ", "_")

    @property
    def display_name(self) -> str:
        return f"{self.issuer} {self.product_name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)


VIRTUAL_CARD = Card(issuer=VIRTUAL_ISSUER, product_name=VIRTUAL_PRODUCT_NAME)


class CardDetails(BaseModel):
    issuer: str
    product_name: str
    reward_table: dict[str, float] = Field(default_factory=dict)
    image_ref: str | None = None

    def to_card(self) -> Card:
        return Card(
            issuer=self.issuer,
            product_name=self.product_name,
            reward_table=dict(self.reward_table),
            image_ref=self.image_ref,
        )


class Place(BaseModel):
    place_id: str | None = None
    name: str = ""
    types: list[str] = Field(default_factory=list)
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    rating: float | None = None

    @property
    def primary_type(self) -> str | None:
        return self.types[0] if self.types else None


class CardRate(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: Card
    rate: float


class RecommendationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: Card
    rate: float
    matched_category: str | None = None
