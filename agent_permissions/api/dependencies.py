"""
FastAPI dependencies untuk validasi dan dependency injection
"""
from fastapi import Depends

from agent_permissions.api.config import Settings, settings
from agent_permissions.api.exceptions import MissingCredentialError
from agent_permissions.api.generator import PolicyGenerator
from agent_permissions.crawl import CrawlConfig


def get_settings() -> Settings:
    """Dependency untuk mendapatkan settings"""
    return settings


def get_crawl_config() -> CrawlConfig:
    """Dependency untuk crawl configuration, robots always respected"""
    return CrawlConfig(respect_robots=True)


def get_generator(app_settings: Settings = Depends(get_settings)) -> PolicyGenerator:
    """Dependency untuk policy generator; requires the model credential"""
    if not app_settings.GOOGLE_API_KEY:
        raise MissingCredentialError("GOOGLE_API_KEY")

    return PolicyGenerator(
        api_key=app_settings.GOOGLE_API_KEY,
        model=app_settings.LLM_MODEL,
        temperature=app_settings.LLM_TEMPERATURE
    )
