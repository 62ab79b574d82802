from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    LOG_LEVEL: str = "INFO"
    PROPADMIN_DB_URL: str = "sqlite+aiosqlite:///./propadmin.db"

    # --- Minimal auth (API key) ---
    # Send: X-API-Key: <key>
    API_KEY: str | None = None

    # --- Where /properties reads from: memory|database|medusa ---
    LISTING_PROVIDER: str = "memory"

    # memory provider: JSON list (or {"data": [...]}) of property payloads.
    # Unset means the built-in demo listings.
    FIXTURE_PATH: str | None = None

    # database provider: load the demo listings on startup (idempotent)
    SEED_DEMO_DATA: bool = True

    # --- Paging ---
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # --- Medusa backend (remote provider) ---
    MEDUSA_BASE_URL: str = "http://localhost:9000/admin"
    MEDUSA_API_KEY: str | None = None

    # --- Outbound HTTP (shared by remote clients) ---
    HTTP_TIMEOUT_S: float = 15.0
    HTTP_MAX_RETRIES: int = 2
    HTTP_BACKOFF_BASE_S: float = 0.5
    HTTP_RATE_LIMIT_RPS: float = 0.0  # 0 disables
    HTTP_CIRCUIT_FAIL_THRESHOLD: int = 5
    HTTP_CIRCUIT_RESET_S: float = 30.0


settings = Settings()
