"""
Configuration settings for the crawler
"""

from dataclasses import dataclass

DEFAULT_USER_AGENT = "AgentPermissionsPreviewBot/0.1"
DEFAULT_AGENT_TOKEN = "agent-permissions"
HTML_ACCEPT_HEADER = "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8"


@dataclass
class CrawlConfig:
    """Configuration class for crawler settings"""
    # Robots.txt handling
    respect_robots: bool = True
    agent_token: str = DEFAULT_AGENT_TOKEN

    # Content limits for the page snapshot
    max_html_chars: int = 20000
    max_text_chars: int = 12000

    # HTTP client settings
    user_agent: str = DEFAULT_USER_AGENT
    accept_header: str = HTML_ACCEPT_HEADER
    request_timeout: int = 10
