"""
Single-page crawler gated by robots.txt
"""

import asyncio
import logging
from typing import Optional
from urllib.parse import urlparse, urlunparse

import requests

from .config import CrawlConfig
from .extractor import PageExtractor
from .models import CrawlLogEntry, CrawlResult, RobotsRules
from .robots_checker import RobotsChecker

SKIPPED_BY_ROBOTS = "Skipped (disallowed by robots.txt)"
FETCHED_SNAPSHOT = "Fetched landing page (single-page snapshot; links not followed)"


def normalize_url(url: str) -> Optional[str]:
    """Drop the fragment; None for anything other than http(s)"""
    parsed = urlparse(url)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        return None
    return urlunparse(parsed._replace(path=parsed.path or '/', fragment=''))


class SiteCrawler:
    """
    Takes a snapshot of one page for policy drafting.

    Only the target URL is fetched. Links found on the page are never
    queued, so the result holds at most one page.
    """

    def __init__(self, config: Optional[CrawlConfig] = None):
        self.config = config or CrawlConfig()
        self.robots_checker = RobotsChecker(self.config)
        self.extractor = PageExtractor(self.config)
        self.logger = logging.getLogger(__name__)

    async def crawl(self, target_url: str, rules: Optional[RobotsRules] = None) -> CrawlResult:
        """Crawl ``target_url`` honouring ``rules`` when robots are respected"""
        result = CrawlResult()

        normalized_url = normalize_url(target_url)
        if normalized_url is None:
            self.logger.debug(f"Skipping {target_url}: unsupported URL")
            return result

        path = urlparse(normalized_url).path
        if not self.robots_checker.can_crawl(path, rules):
            self.logger.info(f"Skipping {normalized_url}: robots_disallowed")
            result.log.append(CrawlLogEntry(url=normalized_url, reason=SKIPPED_BY_ROBOTS))
            return result

        try:
            response = await asyncio.to_thread(self._fetch, normalized_url)

            result.log.append(CrawlLogEntry(
                url=normalized_url,
                status=response.status_code,
                reason=FETCHED_SNAPSHOT
            ))
            self.logger.info(f"Fetched {normalized_url}: HTTP {response.status_code}")

            if not response.ok:
                return result

            content_type = response.headers.get('content-type', '')
            if 'text/html' not in content_type:
                self.logger.info(f"Skipping {normalized_url}: content type {content_type or 'unknown'}")
                return result

            result.pages.append(self.extractor.extract(normalized_url, response.text))

        except Exception as e:
            self.logger.warning(f"Error crawling {normalized_url}: {e}")
            result.log.append(CrawlLogEntry(
                url=normalized_url,
                reason=str(e) or type(e).__name__
            ))

        return result

    def _fetch(self, url: str) -> requests.Response:
        """GET the page; redirects are followed by requests"""
        return requests.get(
            url,
            timeout=self.config.request_timeout,
            headers={
                'User-Agent': self.config.user_agent,
                'Accept': self.config.accept_header
            },
            allow_redirects=True
        )
