from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SUPABASE_URL: str | None = None
    SUPABASE_ANON_KEY: str | None = None

    PUBLIC_SITE_URL: str = "http://localhost:5173"

    BUSINESS_NAME: str = "Calabriando"
    DEFAULT_LANGUAGE: str = "it"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    HTTP_TIMEOUT_SECONDS: float = 10.0
    CONTENT_RETRY_DELAYS: list[float] = [1.0, 2.0, 5.0]
    SEARCH_LIMIT_PER_TABLE: int = 5
    EMAIL_NOTIFICATIONS_ENABLED: bool = True


settings = Settings()
