from fastapi import APIRouter, Depends, HTTPException

from boost.agents.orchestrator import RecommendationOrchestrator
from boost.api.dependencies import get_orchestrator
from boost.domain.errors import CardNotFoundError, ConfigurationError, PlacesError
from boost.schemas.requests import NearbyRequest, RecommendRequest
from boost.schemas.responses import CardRateResponse, NearbyResponse, RecommendResponse

router = APIRouter(tags=["recommend"])


@router.post("/recommend", response_model=RecommendResponse)
def recommend(
    request: RecommendRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
) -> RecommendResponse:
    return orchestrator.recommend(request)


@router.post("/recommend/nearby", response_model=NearbyResponse)
def recommend_nearby(
    request: NearbyRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
) -> NearbyResponse:
    try:
        return orchestrator.recommend_nearby(request)
    except ConfigurationError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except PlacesError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.get("/cards/rate", response_model=CardRateResponse)
def card_rate(
    issuer: str,
    product_name: str,
    category: str = "",
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
) -> CardRateResponse:
    try:
        return orchestrator.card_rate(issuer, product_name, category)
    except CardNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
