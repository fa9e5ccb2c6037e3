import json
import logging
import threading
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from boost.domain.models import Card

logger = logging.getLogger(__name__)

DEFAULT_USAGE_CATEGORY = "Other"


class UserMetrics(BaseModel):
    total_cards: int = 0
    card_usage_by_category: dict[str, dict[str, int]] = Field(default_factory=dict)


class AnalyticsSink:
    """Per-user usage counters kept in a JSON file.

    Tracking calls never raise; failures are logged and dropped.
    """

    def __init__(self, metrics_file: str):
        self.metrics_file = Path(metrics_file)
        self._lock = threading.Lock()

    def _read_all(self) -> dict[str, UserMetrics]:
        if not self.metrics_file.exists():
            return {}
        data = json.loads(self.metrics_file.read_text(encoding="utf-8"))
        return {user_id: UserMetrics.model_validate(item) for user_id, item in data.items()}

    def _write_all(self, metrics: dict[str, UserMetrics]) -> None:
        self.metrics_file.parent.mkdir(parents=True, exist_ok=True)
        payload = {user_id: item.model_dump() for user_id, item in metrics.items()}
        self.metrics_file.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def _update(self, user_id: str, event: str, apply: Callable[[UserMetrics], None]) -> None:
        with self._lock:
            try:
                metrics = self._read_all()
                user_metrics = metrics.setdefault(user_id, UserMetrics())
                apply(user_metrics)
                self._write_all(metrics)
            except (OSError, ValueError, ValidationError) as exc:
                logger.error("Could not track %s for user %s: %s", event, user_id, exc)
                return
        logger.info("Tracked %s for user %s", event, user_id)

    def track_card_added(self, user_id: str, card: Card) -> None:
        def apply(metrics: UserMetrics) -> None:
            metrics.total_cards += 1
            metrics.card_usage_by_category[card.card_key] = {}

        self._update(user_id, f"card added ({card.card_key})", apply)

    def track_card_deleted(self, user_id: str, card: Card) -> None:
        def apply(metrics: UserMetrics) -> None:
            metrics.total_cards = max(0, metrics.total_cards - 1)
            metrics.card_usage_by_category.pop(card.card_key, None)

        self._update(user_id, f"card deleted ({card.card_key})", apply)

    def track_payment_usage(self, user_id: str, category: str | None, card: Card) -> None:
        category = category or DEFAULT_USAGE_CATEGORY

        def apply(metrics: UserMetrics) -> None:
            usage = metrics.card_usage_by_category.setdefault(card.card_key, {})
            usage[category] = usage.get(category, 0) + 1

        self._update(user_id, f"payment ({card.card_key}, {category})", apply)

    def fetch_metrics(self, user_id: str) -> UserMetrics:
        with self._lock:
            return self._read_all().get(user_id, UserMetrics())
