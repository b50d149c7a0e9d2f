"""
Crawl module for the agent permissions playground

Module ini berisi robots.txt rule engine, single-page crawler, page extractor
dan lookup untuk policy yang sudah dipublikasikan oleh site.
"""

from .crawler import SiteCrawler, normalize_url
from .config import CrawlConfig
from .extractor import PageExtractor
from .models import CrawlLogEntry, CrawlResult, PageSummary, RobotsInfo, RobotsRules
from .robots_checker import RobotsChecker, is_path_allowed, matches_rule, parse_robots
from .well_known import ExistingPolicy, fetch_existing_policy

__all__ = [
    # Main crawler
    'SiteCrawler',
    'normalize_url',

    # Configuration
    'CrawlConfig',

    # Data models
    'CrawlLogEntry',
    'CrawlResult',
    'PageSummary',
    'RobotsInfo',
    'RobotsRules',
    'ExistingPolicy',

    # Core components
    'PageExtractor',
    'RobotsChecker',
    'parse_robots',
    'matches_rule',
    'is_path_allowed',
    'fetch_existing_policy'
]
