from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Server settings
    server_host: str = Field(default="0.0.0.0", alias="SERVER_HOST")
    server_port: int = Field(default=3000, alias="SERVER_PORT")

    # CORS settings
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(
        default=["*"], alias="CORS_ALLOW_ORIGINS"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(default=None, alias="LOG_FILE")

    # Requests carrying more text than this are refused by the web layer
    max_input_length: int = Field(default=100_000, gt=0, alias="MAX_INPUT_LENGTH")

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            origins = [origin.strip() for origin in v.strip("[]").split(",")]
            # Remove empty strings
            origins = [origin for origin in origins if origin]
            return origins
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            level = v.strip().upper()
            if level not in LOG_LEVELS:
                raise ValueError(f"Unknown log level: {v}")
            return level
        return v

    def model_post_init(self, __context):
        if not self.cors_allow_origins:
            raise ValueError(
                "Missing required environment variable: CORS_ALLOW_ORIGINS"
            )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", frozen=True
    )
