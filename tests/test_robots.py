"""
Tests for robots.txt parsing, path matching and fetching
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from agent_permissions.crawl import (
    CrawlConfig,
    RobotsChecker,
    RobotsRules,
    is_path_allowed,
    matches_rule,
    parse_robots,
)


def make_response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    return response


class TestParseRobots:
    """Test robots.txt parsing"""

    def test_wildcard_block(self):
        rules = parse_robots("User-agent: *\nDisallow: /admin\nCrawl-delay: 2.5")

        assert rules.disallow == ("/admin",)
        assert rules.allow == ()
        assert rules.crawl_delay == 2.5

    def test_other_agent_block_is_ignored(self):
        rules = parse_robots("User-agent: other-bot\nDisallow: /\nAllow: /public\nCrawl-delay: 5")

        assert rules.disallow == ()
        assert rules.allow == ()
        assert rules.crawl_delay is None

    def test_directives_before_user_agent_are_ignored(self):
        rules = parse_robots("Disallow: /early\nUser-agent: *\nDisallow: /late")

        assert rules.disallow == ("/late",)

    def test_agent_token_match_is_case_insensitive(self):
        content = "User-agent: Agent-Permissions-Bot\nDisallow: /private\n"
        rules = parse_robots(content)

        assert rules.disallow == ("/private",)

    def test_custom_agent_token(self):
        content = "User-agent: mybot\nDisallow: /x\nUser-agent: otherbot\nDisallow: /y"
        rules = parse_robots(content, agent_token="MyBot")

        assert rules.disallow == ("/x",)

    def test_block_applicability_switches(self):
        content = "\n".join([
            "User-agent: *",
            "Disallow: /a",
            "User-agent: googlebot",
            "Disallow: /b",
            "User-agent: *",
            "Allow: /c",
        ])
        rules = parse_robots(content)

        assert rules.disallow == ("/a",)
        assert rules.allow == ("/c",)

    def test_comments_blank_lines_and_crlf(self):
        content = "# robots\r\n\r\nUser-agent: *\r\n# keep out\r\nDisallow: /tmp\r\n"
        rules = parse_robots(content)

        assert rules.disallow == ("/tmp",)

    def test_order_preserved_and_empty_values_skipped(self):
        content = "User-agent: *\nDisallow: /b\nDisallow:\nDisallow: /a\nAllow: \nAllow: /z"
        rules = parse_robots(content)

        assert rules.disallow == ("/b", "/a")
        assert rules.allow == ("/z",)

    def test_value_keeps_later_colons(self):
        rules = parse_robots("User-agent: *\nDisallow: /a:b")

        assert rules.disallow == ("/a:b",)

    def test_unknown_directives_and_lines_without_colon(self):
        content = "User-agent: *\nSitemap: https://example.com/sitemap.xml\nnonsense line\nDisallow: /x"
        rules = parse_robots(content)

        assert rules.disallow == ("/x",)
        assert rules.allow == ()

    def test_crawl_delay_last_finite_value_wins(self):
        content = "User-agent: *\nCrawl-delay: 1\nCrawl-delay: abc\nCrawl-delay: 3s"
        rules = parse_robots(content)

        assert rules.crawl_delay == 3.0

    def test_crawl_delay_rejects_non_finite_and_negative(self):
        content = "User-agent: *\nCrawl-delay: 4\nCrawl-delay: inf\nCrawl-delay: -1"
        rules = parse_robots(content)

        assert rules.crawl_delay == 4.0

    def test_empty_content(self):
        assert parse_robots("") == RobotsRules()


class TestMatchesRule:
    """Test single pattern matching"""

    @pytest.mark.parametrize("path", ["/", "/anything", "/a/b/c", ""])
    def test_root_and_empty_pattern_match_everything(self, path):
        assert matches_rule(path, "/") is True
        assert matches_rule(path, "") is True

    def test_prefix_match(self):
        assert matches_rule("/admin/users", "/admin") is True
        assert matches_rule("/administrator", "/admin") is True
        assert matches_rule("/public", "/admin") is False

    def test_exact_match_with_dollar(self):
        assert matches_rule("/page", "/page$") is True
        assert matches_rule("/page/2", "/page$") is False
        assert matches_rule("/pag", "/page$") is False

    def test_no_wildcard_expansion(self):
        assert matches_rule("/a/b.pdf", "/*.pdf") is False
        assert matches_rule("/*.pdf", "/*.pdf") is True


class TestIsPathAllowed:
    """Test the allow-first crawl gate"""

    def test_no_rules_allows_everything(self):
        assert is_path_allowed("/admin", None) is True

    def test_disallow_and_default(self):
        rules = parse_robots("User-agent: *\nDisallow: /admin\nCrawl-delay: 2.5")

        assert is_path_allowed("/admin/x", rules) is False
        assert is_path_allowed("/public", rules) is True

    def test_allow_beats_longer_disallow(self):
        rules = RobotsRules(disallow=("/docs/private",), allow=("/docs",))

        assert is_path_allowed("/docs/private/file", rules) is True

    def test_allow_checked_before_disallow_regardless_of_order(self):
        rules = parse_robots("User-agent: *\nDisallow: /\nAllow: /public")

        assert is_path_allowed("/public/page", rules) is True
        assert is_path_allowed("/private", rules) is False

    def test_empty_path_is_root(self):
        rules = RobotsRules(disallow=("/$",))

        assert is_path_allowed("", rules) is False
        assert is_path_allowed("/index.html", rules) is True


class TestRobotsChecker:
    """Test robots.txt fetching"""

    def setup_method(self):
        self.config = CrawlConfig(agent_token="agent-permissions", user_agent="TestBot/1.0")
        self.checker = RobotsChecker(self.config)

    @patch('agent_permissions.crawl.robots_checker.requests.get')
    def test_fetch_success(self, mock_get):
        mock_get.return_value = make_response(200, "User-agent: *\nDisallow: /admin")

        robots = self.checker.fetch_robots("https://example.com/some/page?x=1")

        assert robots is not None
        assert robots.rules.disallow == ("/admin",)
        assert robots.raw.startswith("User-agent")
        args, kwargs = mock_get.call_args
        assert args[0] == "https://example.com/robots.txt"
        assert kwargs['headers']['User-Agent'] == "TestBot/1.0"

    @patch('agent_permissions.crawl.robots_checker.requests.get')
    def test_fetch_not_found(self, mock_get):
        mock_get.return_value = make_response(404)

        assert self.checker.fetch_robots("https://example.com/") is None

    @patch('agent_permissions.crawl.robots_checker.requests.get')
    def test_fetch_server_error(self, mock_get):
        mock_get.return_value = make_response(503)

        assert self.checker.fetch_robots("https://example.com/") is None

    @patch('agent_permissions.crawl.robots_checker.requests.get')
    def test_fetch_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("connection refused")

        assert self.checker.fetch_robots("https://example.com/") is None

    def test_can_crawl_respects_config(self):
        rules = RobotsRules(disallow=("/",))

        assert self.checker.can_crawl("/page", rules) is False
        assert RobotsChecker(CrawlConfig(respect_robots=False)).can_crawl("/page", rules) is True
        assert self.checker.can_crawl("/page", None) is True
