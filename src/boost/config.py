from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    catalog_file: str = "data/cards/catalog.json"
    wallet_file: str = "data/wallet.json"
    metrics_file: str = "data/metrics.json"
    default_user_id: str = "local"

    google_places_api_key: str = ""
    nearby_radius_m: float = 100.0
    nearby_max_results: int = 10

    telegram_bot_token: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
