"""
Tests for the command line interface
"""

import json
import logging
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from agent_permissions.cli import app
from agent_permissions.crawl import (
    CrawlLogEntry,
    CrawlResult,
    PageSummary,
    RobotsChecker,
    SiteCrawler,
)

runner = CliRunner()


class TestBuildCommand:

    def test_build_prints_document(self):
        result = runner.invoke(app, ["build", "--site-name", "Shop", "--rate-limit", "gentle", "--allow-forms"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["metadata"]["author"] == "Shop"
        submit = next(rule for rule in data["resource_rules"] if rule["verb"] == "submit_form")
        assert submit["allowed"] is True
        assert submit["modifiers"] == {"human_in_the_loop": True}

    def test_build_writes_file(self, tmp_path):
        output = tmp_path / "agent-permissions.json"

        result = runner.invoke(app, ["build", "--no-block-login", "--output", str(output)])

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["action_guidelines"] == []


class TestExplainCommand:

    def test_explain_policy_file(self, tmp_path):
        policy_file = tmp_path / "policy.json"
        policy_file.write_text(json.dumps({
            "metadata": {"author": "Shop"},
            "resource_rules": [
                {"verb": "execute_script", "selector": "script", "allowed": False},
                {"verb": "broken"}
            ]
        }), encoding="utf-8")

        result = runner.invoke(app, ["explain", str(policy_file)])

        assert result.exit_code == 0
        assert "Blocked: Execute scripts (script)" in result.stdout
        assert "broken" not in result.stdout

    def test_explain_invalid_json(self, tmp_path):
        policy_file = tmp_path / "policy.json"
        policy_file.write_text("{not json", encoding="utf-8")

        result = runner.invoke(app, ["explain", str(policy_file)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.stdout


class TestCrawlCommand:

    def test_crawl_reports_page(self):
        page = PageSummary(
            url="https://example.com/", title="Shop", text_content="Hi", html_content="<p>Hi</p>",
            is_text_truncated=False, is_html_truncated=False, word_count=1,
            has_forms=False, has_search=False, contains_login=False
        )
        crawl_result = CrawlResult(
            pages=[page],
            log=[CrawlLogEntry(url="https://example.com/", status=200, reason="ok")]
        )

        with patch.object(RobotsChecker, "fetch_robots", return_value=None), \
                patch.object(SiteCrawler, "crawl", new=AsyncMock(return_value=crawl_result)):
            result = runner.invoke(app, ["crawl", "https://example.com/"])

        assert result.exit_code == 0
        assert "robots.txt missing" in result.stdout
        assert "Crawl log" in result.stdout
        assert "Words" in result.stdout

    def test_crawl_without_pages_fails(self):
        with patch.object(RobotsChecker, "fetch_robots", return_value=None), \
                patch.object(SiteCrawler, "crawl", new=AsyncMock(return_value=CrawlResult())):
            result = runner.invoke(app, ["crawl", "https://example.com/"])

        assert result.exit_code == 1
        assert "could not fetch any content" in result.stdout

    def test_crawl_writes_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "crawl.log"

        with patch.object(RobotsChecker, "fetch_robots", return_value=None), \
                patch.object(SiteCrawler, "crawl", new=AsyncMock(return_value=CrawlResult())):
            result = runner.invoke(app, [
                "crawl", "https://example.com/", "--log-level", "INFO", "--log-file", str(log_file)
            ])

        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()

        assert result.exit_code == 1
        assert "Crawling https://example.com/" in log_file.read_text(encoding="utf-8")
