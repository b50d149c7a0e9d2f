"""
Lookup of an agent-permissions.json already published by the site
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests

from .config import CrawlConfig

WELL_KNOWN_PATH = "/.well-known/agent-permissions.json"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExistingPolicy:
    """A policy file found on the site; ``body`` if JSON, else ``raw``"""
    url: str
    status: int
    body: Any = None
    raw: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            'url': self.url,
            'status': self.status,
            'body': self.body,
            'raw': self.raw
        }


def well_known_url(target_url: str) -> str:
    parsed = urlparse(target_url)
    return f"{parsed.scheme}://{parsed.netloc}{WELL_KNOWN_PATH}"


def fetch_existing_policy(target_url: str, config: Optional[CrawlConfig] = None) -> Optional[ExistingPolicy]:
    """Fetch the site's published policy; None when absent or unreachable"""
    config = config or CrawlConfig()
    policy_url = well_known_url(target_url)

    try:
        response = requests.get(
            policy_url,
            timeout=config.request_timeout,
            headers={'User-Agent': config.user_agent, 'Accept': 'application/json'}
        )
    except requests.RequestException as e:
        logger.warning(f"Error fetching {policy_url}: {e}")
        return None

    if not response.ok:
        if response.status_code == 404:
            logger.debug(f"No existing policy at {policy_url}")
            return None
        return ExistingPolicy(url=policy_url, status=response.status_code)

    text = response.text
    try:
        body = json.loads(text)
    except ValueError:
        logger.info(f"Existing policy at {policy_url} is not valid JSON")
        return ExistingPolicy(url=policy_url, status=response.status_code, raw=text)

    logger.info(f"Found existing policy at {policy_url}")
    return ExistingPolicy(url=policy_url, status=response.status_code, body=body)
