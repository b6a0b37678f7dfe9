"""
Configuration module for the chat proxy.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from urllib.parse import urlparse

from dotenv import load_dotenv

from chat_proxy.utils.constants import DEFAULT_CHATBOT_BACKEND_URL

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Chatbot backend every /api/chat request is relayed to
    CHATBOT_BACKEND_URL: str = os.getenv("CHATBOT_BACKEND_URL", DEFAULT_CHATBOT_BACKEND_URL)

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (only consulted in production)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If the backend URL is missing or not an HTTP(S) URL.
        """
        if not cls.CHATBOT_BACKEND_URL:
            raise ValueError(
                "Missing required environment variable: CHATBOT_BACKEND_URL. "
                "Please check your .env file."
            )

        parsed = urlparse(cls.CHATBOT_BACKEND_URL)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(
                f"CHATBOT_BACKEND_URL must be an http(s) URL, got '{cls.CHATBOT_BACKEND_URL}'"
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   The proxy may not work correctly until you configure your .env file.")
        else:
            raise
