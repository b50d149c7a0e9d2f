"""
Robots.txt parsing and path matching for the crawl gate
"""

import logging
import math
import re
from typing import List, Optional
from urllib.parse import urljoin, urlparse

import requests

from .config import CrawlConfig, DEFAULT_AGENT_TOKEN
from .models import RobotsInfo, RobotsRules

_LINE_SPLIT = re.compile(r"\r?\n")
_LEADING_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _parse_delay(value: str) -> Optional[float]:
    """Read the numeric prefix of a crawl-delay value ("2.5s" -> 2.5)"""
    match = _LEADING_NUMBER.match(value)
    if not match:
        return None
    delay = float(match.group(0))
    if not math.isfinite(delay) or delay < 0:
        return None
    return delay


def parse_robots(content: str, agent_token: str = DEFAULT_AGENT_TOKEN) -> RobotsRules:
    """
    Parse robots.txt text into the rules that apply to our agent.

    A ``User-agent`` line opens a block that applies when its value is ``*``
    or contains ``agent_token``; directives outside an applicable block are
    ignored, as are unknown directives.
    """
    disallow: List[str] = []
    allow: List[str] = []
    crawl_delay: Optional[float] = None
    token = agent_token.lower()
    applies = False

    for line in _LINE_SPLIT.split(content):
        cleaned = line.strip()
        if not cleaned or cleaned.startswith("#"):
            continue

        raw_key, sep, raw_value = cleaned.partition(":")
        key = raw_key.strip().lower()
        if not key or not sep:
            continue
        value = raw_value.strip()

        if key == "user-agent":
            agent = value.lower()
            applies = agent == "*" or token in agent
            continue

        if not applies:
            continue

        if key == "disallow":
            if value:
                disallow.append(value)
        elif key == "allow":
            if value:
                allow.append(value)
        elif key == "crawl-delay":
            delay = _parse_delay(value)
            if delay is not None:
                crawl_delay = delay

    return RobotsRules(
        disallow=tuple(disallow),
        allow=tuple(allow),
        crawl_delay=crawl_delay
    )


def matches_rule(target_path: str, rule_path: str) -> bool:
    """Prefix match, with a trailing ``$`` meaning exact match"""
    if not rule_path or rule_path == "/":
        return True

    if rule_path.endswith("$"):
        return target_path == rule_path[:-1]

    return target_path.startswith(rule_path)


def is_path_allowed(path: str, rules: Optional[RobotsRules]) -> bool:
    """
    Decide whether ``path`` may be fetched under ``rules``.

    Allow entries are checked first and the first match wins, then disallow
    entries. This is not the longest-match precedence of RFC 9309: an Allow
    always beats a Disallow, whatever their lengths.
    """
    if rules is None:
        return True

    normalized_path = path or "/"

    for allowed in rules.allow:
        if matches_rule(normalized_path, allowed):
            return True

    for disallowed in rules.disallow:
        if matches_rule(normalized_path, disallowed):
            return False

    return True


class RobotsChecker:
    """Fetches robots.txt for an origin and evaluates the crawl gate"""

    def __init__(self, config: Optional[CrawlConfig] = None):
        self.config = config or CrawlConfig()
        self.logger = logging.getLogger(__name__)

    def fetch_robots(self, url: str) -> Optional[RobotsInfo]:
        """Fetch and parse robots.txt; None when missing or unreachable"""
        parsed_url = urlparse(url)
        origin = f"{parsed_url.scheme}://{parsed_url.netloc}"
        robots_url = urljoin(origin, "/robots.txt")

        try:
            response = requests.get(
                robots_url,
                timeout=self.config.request_timeout,
                headers={'User-Agent': self.config.user_agent}
            )
        except requests.RequestException as e:
            self.logger.warning(f"Error fetching robots.txt for {origin}: {e}")
            return None

        if response.status_code == 404:
            self.logger.debug(f"No robots.txt found for {origin}")
            return None

        if not response.ok:
            self.logger.warning(f"Failed to fetch robots.txt for {origin}: HTTP {response.status_code}")
            return None

        raw = response.text
        rules = parse_robots(raw, self.config.agent_token)
        self.logger.info(
            f"Loaded robots.txt for {origin}: "
            f"{len(rules.disallow)} disallow, {len(rules.allow)} allow"
        )
        return RobotsInfo(raw=raw, rules=rules)

    def can_crawl(self, path: str, rules: Optional[RobotsRules]) -> bool:
        """Apply the crawl gate for ``path``"""
        if not self.config.respect_robots:
            return True
        return is_path_allowed(path, rules)
