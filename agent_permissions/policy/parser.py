"""
Tolerant reader for agent-permissions.json documents of unknown origin
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .schema import format_verb


@dataclass(frozen=True)
class ParsedResourceRule:
    verb: str
    selector: str
    allowed: bool
    modifiers: Any = None

    @property
    def label(self) -> str:
        return format_verb(self.verb)

    def to_dict(self) -> Dict:
        data = {'verb': self.verb, 'selector': self.selector, 'allowed': self.allowed}
        if self.modifiers is not None:
            data['modifiers'] = self.modifiers
        return data


@dataclass(frozen=True)
class ParsedGuideline:
    directive: str
    description: str
    exceptions: Optional[str] = None

    def to_dict(self) -> Dict:
        data = {'directive': self.directive, 'description': self.description}
        if self.exceptions is not None:
            data['exceptions'] = self.exceptions
        return data


@dataclass(frozen=True)
class ParsedPolicy:
    """Best-effort view of a policy plus a readable summary"""
    metadata: Optional[Dict[str, Any]] = None
    resource_rules: List[ParsedResourceRule] = field(default_factory=list)
    action_guidelines: List[ParsedGuideline] = field(default_factory=list)
    summary: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'metadata': self.metadata,
            'resource_rules': [rule.to_dict() for rule in self.resource_rules],
            'action_guidelines': [guideline.to_dict() for guideline in self.action_guidelines],
            'summary': list(self.summary)
        }


@dataclass(frozen=True)
class PolicyParseError:
    error: str

    def to_dict(self) -> Dict:
        return {'error': self.error}


def _as_rule(entry: Any) -> Optional[ParsedResourceRule]:
    if not isinstance(entry, dict):
        return None
    verb, selector, allowed = entry.get('verb'), entry.get('selector'), entry.get('allowed')
    if not isinstance(verb, str) or not isinstance(selector, str) or not isinstance(allowed, bool):
        return None
    return ParsedResourceRule(verb=verb, selector=selector, allowed=allowed, modifiers=entry.get('modifiers'))


def _as_guideline(entry: Any) -> Optional[ParsedGuideline]:
    if not isinstance(entry, dict):
        return None
    directive, description = entry.get('directive'), entry.get('description')
    if not isinstance(directive, str) or not isinstance(description, str):
        return None
    exceptions = entry.get('exceptions')
    return ParsedGuideline(
        directive=directive,
        description=description,
        exceptions=exceptions if isinstance(exceptions, str) else None
    )


def _describe_modifiers(modifiers: Any) -> List[str]:
    if not isinstance(modifiers, dict):
        return []

    notes = []
    rate_limit = modifiers.get('rate_limit')
    if isinstance(rate_limit, dict):
        max_requests = rate_limit.get('max_requests')
        window_seconds = rate_limit.get('window_seconds')
        if max_requests is not None and window_seconds is not None:
            notes.append(f"max {max_requests} requests per {window_seconds}s")
    if modifiers.get('human_in_the_loop') is True:
        notes.append("human approval required")
    if modifiers.get('burst') is not None:
        notes.append(f"burst {modifiers['burst']}")
    if isinstance(modifiers.get('time_window'), str):
        notes.append(f"only during {modifiers['time_window']}")
    return notes


def summarize_policy(rules: List[ParsedResourceRule], guidelines: List[ParsedGuideline]) -> List[str]:
    """One line per rule and guideline"""
    lines = []
    for rule in rules:
        status = "Allowed" if rule.allowed else "Blocked"
        line = f"{status}: {rule.label} ({rule.selector})"
        notes = _describe_modifiers(rule.modifiers)
        if notes:
            line += f" [{', '.join(notes)}]"
        lines.append(line)

    for guideline in guidelines:
        line = f"{guideline.directive}: {guideline.description}"
        if guideline.exceptions:
            line += f" (exceptions: {guideline.exceptions})"
        lines.append(line)

    if not lines:
        lines.append("No recognizable resource rules or action guidelines.")
    return lines


def interpret_policy(data: Any) -> Union[ParsedPolicy, PolicyParseError]:
    """Filter an already decoded document down to the entries we understand"""
    if not isinstance(data, dict):
        return PolicyParseError(error="Policy document must be a JSON object.")

    raw_rules = data.get('resource_rules')
    raw_guidelines = data.get('action_guidelines')

    rules = [
        rule for rule in map(_as_rule, raw_rules if isinstance(raw_rules, list) else [])
        if rule is not None
    ]
    guidelines = [
        guideline for guideline in map(_as_guideline, raw_guidelines if isinstance(raw_guidelines, list) else [])
        if guideline is not None
    ]
    metadata = data.get('metadata')

    return ParsedPolicy(
        metadata=metadata if isinstance(metadata, dict) else None,
        resource_rules=rules,
        action_guidelines=guidelines,
        summary=summarize_policy(rules, guidelines)
    )


def parse_policy(raw: Union[str, bytes]) -> Union[ParsedPolicy, PolicyParseError]:
    """Decode JSON text and interpret it; malformed JSON yields a PolicyParseError"""
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        return PolicyParseError(error=f"Invalid JSON: {e}")
    return interpret_policy(data)
