"""Application configuration settings"""


from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from duration_timestamp.domain.value_objects.format import Format


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = Field(default="Duration Timestamp")
    debug: bool = Field(default=False)
    version: str = Field(default="0.1.0")
    log_level: str = Field(default="INFO")

    # Timestamp Settings
    default_format: Format = Field(default=Format.SHORT)
    youtube_watch_url: str = Field(default="https://www.youtube.com/watch")
    max_text_length: int = Field(default=100000, ge=1)
    max_pattern_length: int = Field(default=100, ge=0)


# Global settings instance
settings = Settings()
