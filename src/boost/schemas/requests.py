from pydantic import BaseModel, Field


class RecommendRequest(BaseModel):
    business_name: str = ""
    place_types: list[str] = Field(default_factory=list)
    category: str | None = None


class NearbyRequest(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class CardRequest(BaseModel):
    issuer: str = Field(min_length=1)
    product_name: str = Field(min_length=1)
    user_id: str | None = None


class PaymentRequest(CardRequest):
    category: str | None = None
