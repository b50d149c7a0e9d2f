"""
Build a PolicyDocument from the playground's toggles
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from .schema import (
    ActionGuideline,
    Directive,
    PolicyDocument,
    PolicyMetadata,
    RateLimit,
    ResourceRule,
    RuleModifiers,
    Verb,
)

CONTENT_SELECTOR = "body"
METADATA_SELECTOR = "head"
LINK_SELECTOR = "a[href]"
INPUT_SELECTOR = "form input, form textarea, form select"
FORM_SELECTOR = "form"
DOWNLOAD_SELECTOR = "a[download]"
SCRIPT_SELECTOR = "script"
UPLOAD_SELECTOR = "input[type='file']"

LOGIN_GUIDELINE = "Submit login credentials or session tokens on behalf of a user."


class RateLimitPreset(str, Enum):
    GENTLE = "gentle"
    STANDARD = "standard"
    OPEN = "open"


RATE_LIMITS: Dict[RateLimitPreset, Optional[RateLimit]] = {
    RateLimitPreset.GENTLE: RateLimit(max_requests=1, window_seconds=1),
    RateLimitPreset.STANDARD: RateLimit(max_requests=5, window_seconds=10),
    RateLimitPreset.OPEN: None,
}


@dataclass
class PolicyBuildConfig:
    """Toggles offered by the policy builder"""
    site_name: str = ""
    allow_read_content: bool = True
    allow_read_metadata: bool = True
    allow_navigation: bool = True
    allow_forms: bool = False
    require_human_for_forms: bool = True
    allow_downloads: bool = False
    rate_limit: RateLimitPreset = RateLimitPreset.STANDARD
    block_login: bool = True


def build_policy(config: PolicyBuildConfig, now: Optional[datetime] = None) -> PolicyDocument:
    """
    Turn builder toggles into a canonical document.

    Script execution and file uploads are always disallowed. The rate limit
    applies to link following only, and only while navigation is allowed.
    """
    rate_limit = RATE_LIMITS[RateLimitPreset(config.rate_limit)]

    navigation_modifiers = None
    if config.allow_navigation and rate_limit is not None:
        navigation_modifiers = RuleModifiers(rate_limit=rate_limit)

    form_modifiers = None
    if config.allow_forms and config.require_human_for_forms:
        form_modifiers = RuleModifiers(human_in_the_loop=True)

    rules: List[ResourceRule] = [
        ResourceRule(verb=Verb.READ_CONTENT, selector=CONTENT_SELECTOR, allowed=config.allow_read_content),
        ResourceRule(verb=Verb.READ_METADATA, selector=METADATA_SELECTOR, allowed=config.allow_read_metadata),
        ResourceRule(
            verb=Verb.FOLLOW_LINK,
            selector=LINK_SELECTOR,
            allowed=config.allow_navigation,
            modifiers=navigation_modifiers
        ),
        ResourceRule(
            verb=Verb.SET_INPUT_VALUE,
            selector=INPUT_SELECTOR,
            allowed=config.allow_forms,
            modifiers=form_modifiers
        ),
        ResourceRule(
            verb=Verb.SUBMIT_FORM,
            selector=FORM_SELECTOR,
            allowed=config.allow_forms,
            modifiers=form_modifiers
        ),
        ResourceRule(verb=Verb.DOWNLOAD_FILE, selector=DOWNLOAD_SELECTOR, allowed=config.allow_downloads),
        ResourceRule(verb=Verb.EXECUTE_SCRIPT, selector=SCRIPT_SELECTOR, allowed=False),
        ResourceRule(verb=Verb.UPLOAD_FILE, selector=UPLOAD_SELECTOR, allowed=False),
    ]

    guidelines: List[ActionGuideline] = []
    if config.block_login:
        guidelines.append(ActionGuideline(directive=Directive.MUST_NOT, description=LOGIN_GUIDELINE))

    site_name = config.site_name.strip()
    metadata = PolicyMetadata(
        last_updated=now or datetime.now(timezone.utc),
        author=site_name or None
    )

    return PolicyDocument(
        metadata=metadata,
        resource_rules=tuple(rules),
        action_guidelines=tuple(guidelines)
    )
