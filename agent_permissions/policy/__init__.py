"""
Policy module: agent-permissions.json schema, builder and tolerant parser
"""

from .builder import PolicyBuildConfig, RateLimitPreset, build_policy
from .parser import (
    ParsedGuideline,
    ParsedPolicy,
    ParsedResourceRule,
    PolicyParseError,
    interpret_policy,
    parse_policy,
    summarize_policy,
)
from .schema import (
    ActionGuideline,
    Directive,
    PolicyDocument,
    PolicyMetadata,
    RateLimit,
    ResourceRule,
    RuleModifiers,
    Verb,
    format_verb,
)

__all__ = [
    # Schema
    'PolicyDocument',
    'PolicyMetadata',
    'ResourceRule',
    'RuleModifiers',
    'RateLimit',
    'ActionGuideline',
    'Verb',
    'Directive',
    'format_verb',

    # Builder
    'PolicyBuildConfig',
    'RateLimitPreset',
    'build_policy',

    # Parser
    'ParsedPolicy',
    'ParsedResourceRule',
    'ParsedGuideline',
    'PolicyParseError',
    'parse_policy',
    'interpret_policy',
    'summarize_policy'
]
