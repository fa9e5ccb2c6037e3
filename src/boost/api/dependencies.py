from functools import lru_cache

from boost.agents.orchestrator import RecommendationOrchestrator
from boost.config import settings
from boost.integrations.analytics import AnalyticsSink
from boost.integrations.places import PlacesClient
from boost.repository.catalog_store import CardCatalog
from boost.repository.wallet_store import WalletStore


@lru_cache
def get_orchestrator() -> RecommendationOrchestrator:
    places = PlacesClient(settings.google_places_api_key) if settings.google_places_api_key else None
    return RecommendationOrchestrator(
        wallet=WalletStore(settings.wallet_file),
        catalog=CardCatalog(settings.catalog_file),
        places=places,
        analytics=AnalyticsSink(settings.metrics_file),
        default_user_id=settings.default_user_id,
        nearby_radius_m=settings.nearby_radius_m,
        nearby_max_results=settings.nearby_max_results,
    )
