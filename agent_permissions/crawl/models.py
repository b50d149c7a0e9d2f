"""
Data models for the crawler
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class RobotsRules:
    """Rules from robots.txt that apply to our agent"""
    disallow: Tuple[str, ...] = ()
    allow: Tuple[str, ...] = ()
    crawl_delay: Optional[float] = None


@dataclass(frozen=True)
class RobotsInfo:
    """Raw robots.txt body together with its parsed rules"""
    raw: str
    rules: RobotsRules


@dataclass(frozen=True)
class CrawlLogEntry:
    """One attempted page fetch"""
    url: str
    status: Optional[int] = None
    reason: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class PageSummary:
    """Sanitized snapshot of a single HTML page"""
    url: str
    title: Optional[str]
    text_content: str
    html_content: str
    is_text_truncated: bool
    is_html_truncated: bool
    word_count: int
    has_forms: bool
    has_search: bool
    contains_login: bool

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization"""
        return {
            'url': self.url,
            'title': self.title,
            'text_content': self.text_content,
            'html_content': self.html_content,
            'is_text_truncated': self.is_text_truncated,
            'is_html_truncated': self.is_html_truncated,
            'word_count': self.word_count,
            'has_forms': self.has_forms,
            'has_search': self.has_search,
            'contains_login': self.contains_login
        }


@dataclass
class CrawlResult:
    """Pages and diagnostic log produced by a single crawl"""
    pages: List[PageSummary] = field(default_factory=list)
    log: List[CrawlLogEntry] = field(default_factory=list)

    def summary(self, robots: Optional[RobotsInfo] = None) -> Dict:
        """Counts shown next to the generated policy"""
        if robots is not None:
            robots_summary = {
                'present': True,
                'crawl_delay': robots.rules.crawl_delay
            }
        else:
            robots_summary = {'present': False, 'crawl_delay': None}

        return {
            'total_pages': len(self.pages),
            'pages_with_forms': sum(1 for page in self.pages if page.has_forms),
            'pages_with_logins': sum(1 for page in self.pages if page.contains_login),
            'robots': robots_summary
        }
