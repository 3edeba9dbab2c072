# recipe_harvest/core/config.py
# Environment loading (.env): fetch, crawl and db knobs
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MONGO_URI: str = "mongodb://localhost:27017"  # split into prod/staging when needed
    MONGO_DB: str = "recipes"
    MONGO_COLLECTION: str = "recipes"

    USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_3) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/125.0.0.0 Safari/537.36"
    )
    FETCH_TIMEOUT: float = 20.0
    FETCH_RETRIES: int = 3
    CRAWL_CONCURRENCY: int = 1   # recipes built at once per round-up

    LOG_LEVEL: str = "INFO"

settings = Settings()
