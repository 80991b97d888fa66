# backend/app/core/config.py
from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------- App --------
    app_name: str = "User Exists API"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # -------- AWS / Cognito (identity directory) --------
    aws_region: Optional[str] = None
    aws_cognito_user_pool_id: Optional[str] = None
    aws_endpoint_url: Optional[str] = None  # e.g. a local Cognito emulator

    # -------- CORS --------
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_csv(cls, v):
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


settings = Settings()
