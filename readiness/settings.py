from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Output language for verdict labels and tips
    LOCALE: Literal["en", "zh"] = "en"

    # Suggestion list length
    MAX_SUGGESTIONS: int = Field(default=3, ge=1, le=5)

    # Scheme used when an input record leaves it unset
    DEFAULT_SCHEME: Literal["default", "engineering", "humanities"] = "default"

    class Config:
        case_sensitive = True
        env_prefix = "READINESS_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()
