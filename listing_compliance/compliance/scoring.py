"""
Score aggregation for compliance results and the combined publish gate.
"""

from __future__ import annotations

import math
from typing import Iterable, List

from listing_compliance.services.types import (
    AIValidationResult,
    CombinedValidation,
    ComplianceIssue,
    ComplianceResult,
    ComplianceSummary,
    OverallValidation,
)

ERROR_WEIGHT = 30
WARNING_WEIGHT = 10
INFO_WEIGHT = 2

PUBLISH_THRESHOLD = 80

AI_SCORE_WEIGHT = 0.4
COMPLIANCE_SCORE_WEIGHT = 0.6


def summarize(issues: Iterable[ComplianceIssue]) -> ComplianceSummary:
    summary = ComplianceSummary()
    for issue in issues:
        if issue.type == "error":
            summary.errors += 1
        elif issue.type == "warning":
            summary.warnings += 1
        elif issue.type == "info":
            summary.infos += 1
    return summary


def compute_score(summary: ComplianceSummary) -> int:
    """Deduct fixed weights per issue from 100, never below zero."""
    deductions = (
        summary.errors * ERROR_WEIGHT
        + summary.warnings * WARNING_WEIGHT
        + summary.infos * INFO_WEIGHT
    )
    return max(0, 100 - deductions)


def build_result(issues: List[ComplianceIssue]) -> ComplianceResult:
    summary = summarize(issues)
    score = compute_score(summary)
    return ComplianceResult(
        is_compliant=summary.errors == 0 and score >= PUBLISH_THRESHOLD,
        issues=issues,
        score=score,
        summary=summary,
    )


def ai_is_valid(ai: AIValidationResult) -> bool:
    return not ai.unsupported and ai.compliance_score >= PUBLISH_THRESHOLD


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def combine_validation(ai: AIValidationResult, compliance: ComplianceResult) -> CombinedValidation:
    """Blend the AI validator result with the rule-based result."""
    ai_valid = ai_is_valid(ai)
    combined = _round_half_up(
        ai.compliance_score * AI_SCORE_WEIGHT + compliance.score * COMPLIANCE_SCORE_WEIGHT
    )
    overall = OverallValidation(
        is_valid=ai_valid and compliance.is_compliant,
        can_publish=ai_valid and compliance.score >= PUBLISH_THRESHOLD,
        combined_score=combined,
    )
    return CombinedValidation(ai=ai, compliance=compliance, overall=overall)


__all__ = [
    "ERROR_WEIGHT",
    "WARNING_WEIGHT",
    "INFO_WEIGHT",
    "PUBLISH_THRESHOLD",
    "summarize",
    "compute_score",
    "build_result",
    "ai_is_valid",
    "combine_validation",
]
