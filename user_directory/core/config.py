from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parents[1]
REPO_ROOT = PACKAGE_DIR.parent
ENV_FILES = [REPO_ROOT / ".env"]

for env_path in ENV_FILES:
    if env_path.exists():
        load_dotenv(env_path, override=False)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, extra="allow", populate_by_name=True)

    app_name: str = Field(default="User Directory", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Remote users API
    users_api_base_url: str = Field(default="https://jsonplaceholder.typicode.com", alias="USERS_API_BASE_URL")
    # None keeps the transport default
    users_api_timeout_seconds: Optional[float] = Field(default=None, alias="USERS_API_TIMEOUT_SECONDS")

    # Listing
    page_size: int = Field(default=8, ge=1, alias="PAGE_SIZE")
    default_total: int = Field(default=10, ge=0, alias="DEFAULT_TOTAL")

    enable_prometheus_metrics: bool = Field(default=True, alias="ENABLE_PROMETHEUS_METRICS")
    backend_cors_origins_raw: str = Field(default="*", alias="BACKEND_CORS_ORIGINS")

    @property
    def backend_cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.backend_cors_origins_raw.split(",") if origin.strip()]

    @property
    def users_api_root(self) -> str:
        return self.users_api_base_url.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    if not settings.users_api_base_url:
        raise RuntimeError("USERS_API_BASE_URL is required in environment or .env")
    return settings
