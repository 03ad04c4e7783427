from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    # Bind address shared by the backend and the presentation app
    host: str = "0.0.0.0"
    port: int = 3001
    web_port: int = 5173

    # CORS settings
    allowed_origins: list[str] = ["*"]

    # Where the landing page form posts to (must match the backend /contact route)
    contact_api_url: str = "http://localhost:3001/contact"

    site_name: str = "JR Tech Solutions"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def effective_log_level(self) -> str:
        """Normalise LOG_LEVEL so 'debug' and 'DEBUG' behave the same"""
        return self.log_level.strip().upper() or "INFO"


@lru_cache
def get_settings():
    return Settings()
