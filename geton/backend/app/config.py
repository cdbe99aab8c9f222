from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    LOG_LEVEL: str = "INFO"

    # --- Minimal B2B Auth (API key) ---
    # Send: X-API-Key: <key>
    API_KEY: str | None = None

    # --- Landlord "interested renters" view ---
    HIGH_MATCH_THRESHOLD: int = 70


settings = Settings()
