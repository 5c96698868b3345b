"""Configuration for FYP Report Writer"""
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Service info
    APP_NAME: str = "FYP Report Writer"

    # Generation endpoint
    GENERATE_API_URL: str = "http://localhost:3000"
    GENERATE_PATH: str = "/api/generate"
    GENERATE_TIMEOUT: Optional[float] = None  # None = wait indefinitely

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def generate_url(self) -> str:
        return self.GENERATE_API_URL.rstrip("/") + "/" + self.GENERATE_PATH.lstrip("/")


settings = Settings()
