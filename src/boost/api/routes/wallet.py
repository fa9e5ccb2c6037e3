from fastapi import APIRouter, Depends, HTTPException

from boost.agents.orchestrator import RecommendationOrchestrator
from boost.api.dependencies import get_orchestrator
from boost.domain.models import CardDetails
from boost.schemas.requests import CardRequest, PaymentRequest
from boost.schemas.responses import PaymentResponse, WalletResponse

router = APIRouter(tags=["wallet"])


def _wallet(orchestrator: RecommendationOrchestrator) -> WalletResponse:
    return WalletResponse(cards=list(orchestrator.wallet.snapshot()))


@router.get("/wallet", response_model=WalletResponse)
def get_wallet(orchestrator: RecommendationOrchestrator = Depends(get_orchestrator)) -> WalletResponse:
    return _wallet(orchestrator)


@router.post("/wallet/cards", response_model=WalletResponse, status_code=201)
def add_card(
    request: CardRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
) -> WalletResponse:
    _, added = orchestrator.add_card(request.issuer, request.product_name, request.user_id)
    if not added:
        raise HTTPException(status_code=409, detail="Card already in wallet.")
    return _wallet(orchestrator)


@router.delete("/wallet/cards", response_model=WalletResponse)
def remove_card(
    request: CardRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
) -> WalletResponse:
    if not orchestrator.remove_card(request.issuer, request.product_name, request.user_id):
        raise HTTPException(status_code=404, detail="Card not in wallet or not removable.")
    return _wallet(orchestrator)


@router.post("/wallet/sign-out", response_model=WalletResponse)
def sign_out(orchestrator: RecommendationOrchestrator = Depends(get_orchestrator)) -> WalletResponse:
    orchestrator.sign_out()
    return _wallet(orchestrator)


@router.post("/payments", response_model=PaymentResponse)
def record_payment(
    request: PaymentRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
) -> PaymentResponse:
    return orchestrator.record_payment(request)


@router.get("/catalog", response_model=list[CardDetails])
def list_catalog(orchestrator: RecommendationOrchestrator = Depends(get_orchestrator)) -> list[CardDetails]:
    try:
        return orchestrator.catalog.list_cards()
    except FileNotFoundError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
