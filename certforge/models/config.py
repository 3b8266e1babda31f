"""Application configuration models."""

from typing import Optional

from pydantic import BaseModel, Field


class GenerationDefaults(BaseModel):
    """Defaults offered at the interactive prompts."""

    key_size: int = 2048
    validity_days: int = 365
    file_prefix: str = "cert"


class LoggingSettings(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


class AppConfig(BaseModel):
    """Main application configuration."""

    defaults: GenerationDefaults = Field(default_factory=GenerationDefaults)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
