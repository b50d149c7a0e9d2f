"""
Canonical agent-permissions.json schema
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

SCHEMA_VERSION = "1.0"


class Verb(str, Enum):
    """Actions an agent can take on a page"""
    READ_CONTENT = "read_content"
    READ_METADATA = "read_metadata"
    FOLLOW_LINK = "follow_link"
    CLICK_ELEMENT = "click_element"
    SCROLL_PAGE = "scroll_page"
    SET_INPUT_VALUE = "set_input_value"
    SUBMIT_FORM = "submit_form"
    EXECUTE_SCRIPT = "execute_script"
    PLAY_MEDIA = "play_media"
    PAUSE_MEDIA = "pause_media"
    MUTE_MEDIA = "mute_media"
    UNMUTE_MEDIA = "unmute_media"
    UPLOAD_FILE = "upload_file"
    DOWNLOAD_FILE = "download_file"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


class Directive(str, Enum):
    MUST_NOT = "MUST NOT"
    MUST = "MUST"
    SHOULD = "SHOULD"
    SHOULD_NOT = "SHOULD NOT"


VERB_LABELS = {
    Verb.READ_CONTENT: "Read page content",
    Verb.READ_METADATA: "Read page metadata",
    Verb.FOLLOW_LINK: "Follow links",
    Verb.CLICK_ELEMENT: "Click elements",
    Verb.SCROLL_PAGE: "Scroll the page",
    Verb.SET_INPUT_VALUE: "Fill in form inputs",
    Verb.SUBMIT_FORM: "Submit forms",
    Verb.EXECUTE_SCRIPT: "Execute scripts",
    Verb.PLAY_MEDIA: "Play media",
    Verb.PAUSE_MEDIA: "Pause media",
    Verb.MUTE_MEDIA: "Mute media",
    Verb.UNMUTE_MEDIA: "Unmute media",
    Verb.UPLOAD_FILE: "Upload files",
    Verb.DOWNLOAD_FILE: "Download files",
    Verb.COPY_TO_CLIPBOARD: "Copy to clipboard",
}


def format_verb(verb: str) -> str:
    """Human readable label; unknown verbs are shown with spaces"""
    try:
        return VERB_LABELS[Verb(verb)]
    except ValueError:
        return verb.replace("_", " ")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class RateLimit(_Frozen):
    max_requests: int
    window_seconds: int


class RuleModifiers(_Frozen):
    rate_limit: Optional[RateLimit] = None
    human_in_the_loop: Optional[bool] = None
    burst: Optional[float] = None
    time_window: Optional[str] = None


class ResourceRule(_Frozen):
    verb: Verb
    selector: str
    allowed: bool
    modifiers: Optional[RuleModifiers] = None


class ActionGuideline(_Frozen):
    directive: Directive
    description: str
    exceptions: Optional[str] = None


class PolicyMetadata(_Frozen):
    schema_version: str = SCHEMA_VERSION
    last_updated: datetime
    author: Optional[str] = None


class PolicyDocument(_Frozen):
    """An agent-permissions.json document"""
    metadata: PolicyMetadata
    resource_rules: Tuple[ResourceRule, ...] = ()
    action_guidelines: Tuple[ActionGuideline, ...] = ()

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, indent: int = 2) -> str:
        return self.model_dump_json(indent=indent, exclude_none=True)
