"""
Compliant rewordings and general advertising guidance.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

GENERIC_ALTERNATIVE = "Consider more factual, descriptive language"

ALTERNATIVES: Dict[str, Tuple[str, ...]] = {
    "amazing": ("impressive", "notable", "well-appointed", "attractive"),
    "stunning": ("attractive", "well-presented", "appealing", "stylish"),
    "perfect": ("suitable", "well-suited", "ideal for", "appropriate"),
    "incredible": ("remarkable", "notable", "significant", "impressive"),
    "best": ("excellent", "high-quality", "superior", "premium"),
    "guaranteed return": ("historical returns", "potential returns", "indicative returns"),
    "must sell": ("vendor motivated", "genuine sale", "committed vendor"),
    "won't last long": ("expected to attract interest", "likely to be popular"),
    "investment opportunity": ("rental potential", "investment consideration"),
    "tightly held": ("rarely available", "seldom offered"),
    "most sought after": ("popular", "desirable", "well-regarded"),
}

COMPLIANCE_SUGGESTIONS: Tuple[str, ...] = (
    "Use factual, descriptive language rather than promotional superlatives",
    "Support all claims with evidence (e.g., comparable sales, official reports)",
    "Verify all property information before publication",
    "Include required disclosures for property type and known issues",
    "Ensure pricing expectations are realistic and well-supported",
    "Have supervisor review all marketing materials before publication",
    "Keep records of all information sources and vendor communications",
    "Update or remove marketing materials immediately when listing status changes",
)


def suggest_alternatives(phrase: str) -> List[str]:
    """Look up compliant rewordings for a flagged phrase (exact match only)."""
    key = (phrase or "").strip().lower()
    return list(ALTERNATIVES.get(key, (GENERIC_ALTERNATIVE,)))


def get_compliance_suggestions() -> List[str]:
    return list(COMPLIANCE_SUGGESTIONS)


__all__ = ["suggest_alternatives", "get_compliance_suggestions", "GENERIC_ALTERNATIVE"]
