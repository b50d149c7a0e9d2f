#!/usr/bin/env python3
"""
CLI Application for the agent permissions playground
"""

import asyncio
import json
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from typer import Typer

from agent_permissions.crawl import CrawlConfig, RobotsChecker, SiteCrawler
from agent_permissions.logger import Logger
from agent_permissions.policy import (
    PolicyBuildConfig,
    PolicyParseError,
    RateLimitPreset,
    build_policy,
    parse_policy,
)

console = Console()

app = Typer(
    name="agent-permissions",
    help="Draft and inspect agent-permissions.json policies",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _flag(value: bool) -> str:
    return "✅" if value else "❌"


@app.command()
def crawl(
    url: str,
    ignore_robots: bool = False,
    max_text_chars: int = 12000,
    max_html_chars: int = 20000,
    log_level: str = "WARNING",
    log_file: Optional[str] = None,
):
    """Fetch robots.txt and snapshot the landing page"""
    logger = Logger.setup_logging(log_level, log_file)
    logger.info(f"Crawling {url} (respect robots: {not ignore_robots})")
    config = CrawlConfig(
        respect_robots=not ignore_robots,
        max_text_chars=max_text_chars,
        max_html_chars=max_html_chars,
    )

    robots = RobotsChecker(config).fetch_robots(url)
    result = asyncio.run(SiteCrawler(config).crawl(url, robots.rules if robots else None))

    if robots:
        delay = robots.rules.crawl_delay
        console.print(f"robots.txt found{f' (crawl-delay {delay}s)' if delay is not None else ''}")
    else:
        console.print("robots.txt missing")

    log_table = Table(title="Crawl log")
    log_table.add_column("URL", style="cyan")
    log_table.add_column("Status", style="green")
    log_table.add_column("Reason")
    for entry in result.log:
        log_table.add_row(
            escape(entry.url),
            str(entry.status) if entry.status is not None else "-",
            escape(entry.reason or "")
        )
    console.print(log_table)

    if not result.pages:
        console.print("The crawler could not fetch any content.")
        raise SystemExit(1)

    for page in result.pages:
        page_table = Table(title=escape(page.title or page.url), show_header=False)
        page_table.add_column("Field", style="cyan")
        page_table.add_column("Value", style="green")
        page_table.add_row("Words", str(page.word_count))
        page_table.add_row("Forms", _flag(page.has_forms))
        page_table.add_row("Login flow", _flag(page.contains_login))
        page_table.add_row("Search input", _flag(page.has_search))
        page_table.add_row("Text truncated", _flag(page.is_text_truncated))
        page_table.add_row("HTML truncated", _flag(page.is_html_truncated))
        console.print(page_table)


@app.command()
def build(
    site_name: str = "",
    allow_read_content: bool = True,
    allow_read_metadata: bool = True,
    allow_navigation: bool = True,
    allow_forms: bool = False,
    require_human_for_forms: bool = True,
    allow_downloads: bool = False,
    rate_limit: RateLimitPreset = RateLimitPreset.STANDARD,
    block_login: bool = True,
    output: Optional[Path] = None,
):
    """Build a policy document from toggles"""
    document = build_policy(PolicyBuildConfig(
        site_name=site_name,
        allow_read_content=allow_read_content,
        allow_read_metadata=allow_read_metadata,
        allow_navigation=allow_navigation,
        allow_forms=allow_forms,
        require_human_for_forms=require_human_for_forms,
        allow_downloads=allow_downloads,
        rate_limit=rate_limit,
        block_login=block_login,
    ))
    text = document.to_json()

    if output:
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"Policy written to {output}")
    else:
        print(text)


@app.command()
def explain(path: Path):
    """Summarize an existing policy file"""
    parsed = parse_policy(path.read_text(encoding="utf-8"))

    if isinstance(parsed, PolicyParseError):
        console.print(f"[bold red]{escape(parsed.error)}[/bold red]")
        raise SystemExit(1)

    if parsed.metadata:
        console.print(Panel(escape(json.dumps(parsed.metadata, indent=2)), title="Metadata"))
    for line in parsed.summary:
        console.print(f"• {line}", markup=False)


@app.command()
def serve(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False):
    """Run the HTTP API"""
    import uvicorn

    from agent_permissions.api.config import settings

    uvicorn.run(
        "agent_permissions.api.app:create_app",
        factory=True,
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload
    )


if __name__ == "__main__":
    app()
