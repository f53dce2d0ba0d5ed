from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)

    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Nilayam API"
    ENV: str = "development"

    # -------------------------------------------------
    # Frontend origins (CORS, auto-built below)
    # -------------------------------------------------
    FRONTEND_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Supabase (Primary DB & Auth)
    # -------------------------------------------------
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    # -------------------------------------------------
    # Navigation state
    # -------------------------------------------------
    LAST_PAGE_KEY_PREFIX: str = "nilayam_last_page"
    NAVIGATION_TTL_SECONDS: int = Field(
        12 * 60 * 60,
        description="How long an idle navigation request is kept (default: 12h)",
    )
    LAST_PAGE_TTL_SECONDS: int = Field(
        30 * 24 * 60 * 60,
        description="How long the last viewed page is remembered (default: 30 days)",
    )


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list after loading settings
# -------------------------------------------------
settings.BACKEND_CORS_ORIGINS = sorted(
    {origin.rstrip("/") for origin in settings.FRONTEND_ORIGINS}
)
