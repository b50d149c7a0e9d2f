"""
Configuration management untuk API
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings dari environment variables"""

    # Server configuration
    PORT: int = int(os.getenv("PORT", 8000))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    RELOAD: bool = os.getenv("RELOAD", "false").lower() == "true"

    # Model configuration
    GOOGLE_API_KEY: Optional[str] = os.getenv("GOOGLE_API_KEY")
    LLM_MODEL: str = os.getenv("LLM_MODEL", "gemini-2.5-flash")
    LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", 0.2))

    # Agent permissions standard handed to the model
    STANDARD_PATH: str = os.getenv("STANDARD_PATH", os.path.join("design", "standard.md"))

    # Request limits
    MAX_INSTRUCTIONS_CHARS: int = int(os.getenv("MAX_INSTRUCTIONS_CHARS", 2000))

    # Logging configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # API configuration
    API_TITLE: str = "Agent Permissions Playground API"
    API_DESCRIPTION: str = "Draft agent-permissions.json policies from a site's robots.txt and landing page"
    API_VERSION: str = "0.1.0"

    # CORS configuration
    CORS_ORIGINS: list = ["*"]  # In production, specify allowed origins

    def load_standard(self) -> Optional[str]:
        """Read the local agent-permissions standard, None if unavailable"""
        try:
            with open(self.STANDARD_PATH, "r", encoding="utf-8") as f:
                return f.read()
        except OSError:
            return None


# Global settings instance
settings = Settings()
