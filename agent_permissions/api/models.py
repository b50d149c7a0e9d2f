"""
Pydantic models untuk request dan response API
"""
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from agent_permissions.policy import RateLimitPreset


class GenerateRequest(BaseModel):
    url: str
    instructions: Optional[str] = ""
    mode: Optional[str] = "static"


class LlmResponse(BaseModel):
    model: str
    raw: str
    policy: Optional[Any] = None
    error: Optional[str] = None


class CrawlLogEntryResponse(BaseModel):
    url: str
    status: Optional[int] = None
    reason: Optional[str] = None


class PageSummaryResponse(BaseModel):
    url: str
    title: Optional[str] = None
    text_content: str
    html_content: str
    is_text_truncated: bool
    is_html_truncated: bool
    word_count: int
    has_forms: bool
    has_search: bool
    contains_login: bool


class ExistingPolicyResponse(BaseModel):
    url: str
    status: int
    body: Optional[Any] = None
    raw: Optional[str] = None


class GenerateResponse(BaseModel):
    input: Dict[str, Any]
    notes: List[str]
    existing_policy: Optional[ExistingPolicyResponse] = None
    llm: LlmResponse
    crawl_summary: Dict[str, Any]
    crawl_log: List[CrawlLogEntryResponse]
    crawl_pages: List[PageSummaryResponse]
    policy_summary: Optional[List[str]] = None


class PolicyBuildRequest(BaseModel):
    site_name: Optional[str] = ""
    allow_read_content: bool = True
    allow_read_metadata: bool = True
    allow_navigation: bool = True
    allow_forms: bool = False
    require_human_for_forms: bool = True
    allow_downloads: bool = False
    rate_limit: RateLimitPreset = RateLimitPreset.STANDARD
    block_login: bool = True


class PolicyExplainRequest(BaseModel):
    policy: str


class PolicyExplainResponse(BaseModel):
    metadata: Optional[Dict[str, Any]] = None
    resource_rules: List[Dict[str, Any]] = []
    action_guidelines: List[Dict[str, Any]] = []
    summary: List[str] = []
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    credential_configured: bool
    standard_loaded: bool
    llm_model: str
