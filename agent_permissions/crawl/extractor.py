"""
Page extraction: sanitize, truncate and classify a fetched HTML page
"""

import logging
import re
from typing import Optional, Tuple

from bs4 import BeautifulSoup, Doctype

from .config import CrawlConfig
from .models import PageSummary

TRUNCATION_MARKER = "..."
STRIPPED_TAGS = ['script', 'style', 'noscript']

_WHITESPACE = re.compile(r"\s+")
_LOGIN_TEXT = re.compile(r"log[\s-]?in", re.IGNORECASE)


def truncate(text: str, max_length: int) -> Tuple[str, bool]:
    """Cut ``text`` to ``max_length`` chars, appending the marker when cut"""
    if len(text) <= max_length:
        return text, False
    return f"{text[:max_length]}{TRUNCATION_MARKER}", True


class PageExtractor:
    """Turns raw HTML into a PageSummary safe to hand to the model"""

    def __init__(self, config: Optional[CrawlConfig] = None):
        self.config = config or CrawlConfig()
        self.logger = logging.getLogger(__name__)

    def extract(self, url: str, html: str) -> PageSummary:
        """Build a PageSummary from an HTML document"""
        soup = BeautifulSoup(html, 'html.parser')

        for element in soup(STRIPPED_TAGS):
            element.decompose()

        title_tag = soup.find('title')
        title = title_tag.get_text().strip() if title_tag else ''

        body = soup.body
        if body is None:
            # html.parser does not synthesize <body>; drop head content so only page content remains
            if soup.head is not None:
                soup.head.decompose()
            for element in soup.find_all(['title', 'meta', 'link', 'base']):
                element.decompose()
            for node in list(soup.contents):
                if isinstance(node, Doctype):
                    node.extract()
            body = soup.html or soup

        body_html = body.decode_contents().strip()
        html_content, is_html_truncated = truncate(body_html, self.config.max_html_chars)

        raw_text = _WHITESPACE.sub(' ', body.get_text()).strip()
        text_content, is_text_truncated = truncate(raw_text, self.config.max_text_chars)
        word_count = len(raw_text.split()) if raw_text else 0

        forms = soup.find_all('form')
        has_forms = len(forms) > 0
        has_search = len(soup.select("form input[type='search']")) > 0
        contains_login = has_forms and (
            len(soup.select("input[type='password']")) > 0
            or _LOGIN_TEXT.search(raw_text) is not None
            or any('login' in (form.get('id') or '').lower() for form in forms)
        )

        self.logger.debug(
            f"Extracted {url}: {word_count} words, forms={has_forms}, "
            f"login={contains_login}, truncated={is_text_truncated}/{is_html_truncated}"
        )

        return PageSummary(
            url=url,
            title=title or None,
            text_content=text_content,
            html_content=html_content,
            is_text_truncated=is_text_truncated,
            is_html_truncated=is_html_truncated,
            word_count=word_count,
            has_forms=has_forms,
            has_search=has_search,
            contains_login=contains_login
        )
