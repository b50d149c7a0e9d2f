"""
Policy drafting with the chat model
"""

import json
import logging
import re
from dataclasses import dataclass, asdict
from typing import Any, List, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from agent_permissions.crawl.models import PageSummary

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert assistant generating agent-permissions.json files. "
    "Follow the provided standard precisely and return only valid JSON."
)

_FENCED_JSON = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)


@dataclass
class LlmResult:
    model: str
    raw: str
    policy: Any = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


def format_page_section(page: PageSummary, index: int) -> str:
    """Render one crawled page as a prompt section"""
    notes = []
    if page.is_text_truncated:
        notes.append("Plain text truncated to max_text_chars limit.")
    if page.is_html_truncated:
        notes.append("HTML body truncated to max_html_chars limit.")

    def yes_no(flag: bool) -> str:
        return "yes" if flag else "no"

    lines = [
        f"### Page {index + 1}: {page.url}",
        f"Title: {page.title}" if page.title else "Title: (none detected)",
        f"Word count ~{page.word_count}",
        f"Forms: {yes_no(page.has_forms)} | Login detected: {yes_no(page.contains_login)} "
        f"| Search input: {yes_no(page.has_search)}",
    ]
    if notes:
        lines.append(f"Notes: {' '.join(notes)}")
    lines.append(f"Plain text content:\n{page.text_content}")
    lines.append(f"Sanitized HTML body (no <script>/<style>):\n{page.html_content}")
    return "\n".join(lines)


def build_prompt(instructions: str, pages: List[PageSummary], standard: str) -> str:
    page_sections = [format_page_section(page, index) for index, page in enumerate(pages[:1])]

    return "\n".join([
        "You are drafting an agent-permissions.json document.",
        "You must output strictly valid JSON with no surrounding commentary or code fences.",
        "Use the schema and semantics described in the provided standard.",
        "",
        "=== Agent Permissions Standard ===",
        standard,
        "",
        "=== User Instructions ===",
        instructions or "(none provided)",
        "",
        "=== Page Snapshots ===",
        "\n\n".join(page_sections) or "(crawl returned no pages)",
        "",
        "Generate the recommended agent-permissions.json document, adding page-specific overrides if appropriate.",
    ])


def parse_json_safely(raw: str) -> Any:
    """Decode model output, tolerating a ```json fence; None if it is not JSON"""
    if not raw:
        return None

    trimmed = raw.strip()
    fenced = _FENCED_JSON.search(trimmed)
    candidate = fenced.group(1).strip() if fenced else trimmed

    try:
        return json.loads(candidate)
    except ValueError:
        return None


def _message_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    # Gemini may return a list of content parts
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and isinstance(part.get("text"), str):
            parts.append(part["text"])
    return "".join(parts)


class PolicyGenerator:
    """Asks the chat model for a draft agent-permissions.json"""

    def __init__(self, api_key: Optional[str], model: str, temperature: float = 0.2, llm=None):
        self.model = model
        self.llm = llm or ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=temperature
        )

    async def generate(self, instructions: str, pages: List[PageSummary], standard: str) -> LlmResult:
        prompt = build_prompt(instructions, pages, standard)

        try:
            response = await self.llm.ainvoke([
                SystemMessage(content=SYSTEM_PROMPT),
                HumanMessage(content=prompt)
            ])
        except Exception as e:
            logger.error(f"Model call failed: {e}")
            return LlmResult(
                model=self.model,
                raw=str(e),
                error="Failed to contact the model API."
            )

        raw = _message_text(response.content).strip()
        policy = parse_json_safely(raw)
        if policy is None:
            logger.warning("Model output was not valid JSON")
            return LlmResult(
                model=self.model,
                raw=raw,
                error="Unable to parse JSON from model output."
            )

        return LlmResult(model=self.model, raw=raw, policy=policy)
