from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    LEAD_WEBHOOK_URL: str | None = None
    LEAD_TIMEOUT_SECONDS: float = 10.0
    LEAD_FORM_TYPE: str = "Smart Quote Widget"
    LEAD_SOURCE: str = "https://ppfpros.ca/"

    SESSION_STORAGE: str = "json"  # "json" | "memory"
    SESSION_STORAGE_PATH: str = "./data/quote_session.json"

    ANALYSIS_DELAY_SECONDS: float = 3.0
    AUTO_ADVANCE_DELAY_SECONDS: float = 1.0
    NEW_VEHICLE_YEAR: int = 2024


settings = Settings()
