"""
Business logic services untuk policy generation
"""
import asyncio
import logging
from typing import List, Optional
from urllib.parse import urlparse

from agent_permissions.api.config import Settings
from agent_permissions.api.exceptions import InvalidUrlError, UnsupportedSchemeError
from agent_permissions.api.generator import PolicyGenerator
from agent_permissions.api.models import GenerateRequest, GenerateResponse
from agent_permissions.crawl import (
    CrawlConfig,
    RobotsChecker,
    SiteCrawler,
    fetch_existing_policy,
)
from agent_permissions.policy import ParsedPolicy, interpret_policy

logger = logging.getLogger(__name__)

BROWSERLESS_NOTE = "Browserless mode is not yet available in this preview; fell back to static HTTP fetches."
MISSING_STANDARD_NOTE = "Unable to load local agent-permissions standard; proceeding without it."


def validate_target_url(url: str) -> str:
    """Check the URL is absolute http(s); returns it unchanged"""
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        raise InvalidUrlError()

    if not parsed.scheme:
        raise InvalidUrlError()

    if parsed.scheme not in ("http", "https"):
        raise UnsupportedSchemeError()

    if not parsed.netloc:
        raise InvalidUrlError()

    return url.strip()


class GenerateService:
    """Service untuk crawl + policy drafting"""

    @staticmethod
    async def generate(
        request: GenerateRequest,
        generator: PolicyGenerator,
        app_settings: Settings,
        crawl_config: Optional[CrawlConfig] = None
    ) -> GenerateResponse:
        crawl_config = crawl_config or CrawlConfig()
        target_url = validate_target_url(request.url)
        instructions = (request.instructions or "")[:app_settings.MAX_INSTRUCTIONS_CHARS]
        notes: List[str] = []

        if request.mode == "browserless":
            notes.append(BROWSERLESS_NOTE)

        robots_checker = RobotsChecker(crawl_config)
        robots, existing_policy = await asyncio.gather(
            asyncio.to_thread(robots_checker.fetch_robots, target_url),
            asyncio.to_thread(fetch_existing_policy, target_url, crawl_config)
        )

        crawler = SiteCrawler(crawl_config)
        crawl_result = await crawler.crawl(target_url, robots.rules if robots else None)

        standard = app_settings.load_standard()
        if standard is None:
            notes.append(MISSING_STANDARD_NOTE)

        llm = await generator.generate(
            instructions=instructions,
            pages=crawl_result.pages,
            standard=standard or ""
        )

        policy_summary = None
        if llm.policy is not None:
            parsed = interpret_policy(llm.policy)
            if isinstance(parsed, ParsedPolicy):
                policy_summary = parsed.summary

        logger.info(
            f"Generated draft for {target_url}: {len(crawl_result.pages)} page(s), "
            f"robots={'present' if robots else 'missing'}, model_error={llm.error}"
        )

        return GenerateResponse(
            input={
                "url": target_url,
                "instructions": instructions,
                "mode": "static"
            },
            notes=notes,
            existing_policy=existing_policy.to_dict() if existing_policy else None,
            llm=llm.to_dict(),
            crawl_summary=crawl_result.summary(robots),
            crawl_log=[entry.to_dict() for entry in crawl_result.log],
            crawl_pages=[page.to_dict() for page in crawl_result.pages],
            policy_summary=policy_summary
        )
