import asyncio
import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from boost.api.dependencies import get_orchestrator
from boost.config import settings
from boost.domain.errors import BoostError, ConfigurationError
from boost.engine.evaluator import format_rate
from boost.schemas.requests import NearbyRequest, RecommendRequest
from boost.schemas.responses import NearbyResponse, RecommendResponse

logger = logging.getLogger(__name__)


def parse_business_message(text: str) -> RecommendRequest:
    """``"Costco Gas Station | gas_station"`` -> name plus optional place type."""
    name, _, place_type = text.partition("|")
    place_types = [place_type.strip()] if place_type.strip() else []
    return RecommendRequest(business_name=name.strip(), place_types=place_types)


def format_recommendation(payload: RecommendResponse) -> str:
    if not payload.recommended:
        return f"No card in your wallet earns extra for {payload.display_category}."

    lines = [
        f"Best card: {payload.card.display_name}",
        f"Reward: {payload.rate_display} on {payload.display_category}",
    ]
    others = [item for item in payload.alternatives if item.card != payload.card]
    if others:
        lines.append("Other cards:")
        lines.extend(f"- {item.card.display_name}: {format_rate(item.rate)}" for item in others[:3])
    return "\n".join(lines)


def format_nearby(payload: NearbyResponse) -> str:
    if payload.selected_place is None or payload.recommendation is None:
        return "No businesses found near you."
    header = f"Closest match: {payload.selected_place.name}"
    return f"{header}\n{format_recommendation(payload.recommendation)}"


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text(
        "Send a business name, e.g. 'Costco Gas Station | gas_station', or share your location."
    )


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    text = update.message.text or ""
    result = await asyncio.to_thread(get_orchestrator().recommend, parse_business_message(text))
    await update.message.reply_text(format_recommendation(result))


async def handle_location(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    location = update.message.location
    request = NearbyRequest(latitude=location.latitude, longitude=location.longitude)
    try:
        result = await asyncio.to_thread(get_orchestrator().recommend_nearby, request)
    except BoostError as exc:
        logger.warning("Nearby recommendation failed: %s", exc)
        await update.message.reply_text(f"Nearby search failed: {exc}")
        return
    await update.message.reply_text(format_nearby(result))


def main() -> None:
    if not settings.telegram_bot_token:
        raise ConfigurationError("TELEGRAM_BOT_TOKEN is required.")

    app = Application.builder().token(settings.telegram_bot_token).build()
    app.add_handler(CommandHandler("start", start))
    app.add_handler(MessageHandler(filters.LOCATION, handle_location))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))

    app.run_polling()


if __name__ == "__main__":
    main()
