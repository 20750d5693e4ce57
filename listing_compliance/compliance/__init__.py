"""
Fair Trading Act compliance rules, evaluators and scoring.

Everything in this package is a pure function of its input: no I/O,
no logging, no model calls.
"""

from .evaluator import build_corpus, check_text_compliance, validate_compliance
from .rules import DISCLOSURE_RULES, PROHIBITED_RULES, RULESET_VERSION, WARNING_RULES
from .scoring import PUBLISH_THRESHOLD, ai_is_valid, combine_validation
from .suggestions import get_compliance_suggestions, suggest_alternatives

__all__ = [
    "build_corpus",
    "check_text_compliance",
    "validate_compliance",
    "combine_validation",
    "ai_is_valid",
    "PUBLISH_THRESHOLD",
    "suggest_alternatives",
    "get_compliance_suggestions",
    "PROHIBITED_RULES",
    "WARNING_RULES",
    "DISCLOSURE_RULES",
    "RULESET_VERSION",
]
