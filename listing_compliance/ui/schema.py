"""
JSON helpers for validation payloads.

Result dataclasses use snake_case attributes; the listing editor consumes
camelCase keys (`isCompliant`, `canPublish`, `combinedScore`). These helpers
produce that wire shape from the dataclasses.
"""

from __future__ import annotations

from typing import Any, Dict, List

from listing_compliance.services.types import (
    AIValidationResult,
    CombinedValidation,
    ComplianceIssue,
    ComplianceResult,
)


def serialize_issue(issue: ComplianceIssue) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "type": issue.type,
        "category": issue.category,
        "message": issue.message,
        "severity": issue.severity,
    }
    if issue.suggestion is not None:
        payload["suggestion"] = issue.suggestion
    if issue.field is not None:
        payload["field"] = issue.field
    return payload


def serialize_issues(issues: List[ComplianceIssue]) -> List[Dict[str, Any]]:
    return [serialize_issue(issue) for issue in issues]


def serialize_compliance_result(result: ComplianceResult) -> Dict[str, Any]:
    return {
        "isCompliant": result.is_compliant,
        "issues": serialize_issues(result.issues),
        "score": result.score,
        "summary": {
            "errors": result.summary.errors,
            "warnings": result.summary.warnings,
            "infos": result.summary.infos,
        },
    }


def serialize_ai_result(result: AIValidationResult) -> Dict[str, Any]:
    return {
        "unsupported": list(result.unsupported),
        "risky_phrases": list(result.risky_phrases),
        "suggestions": list(result.suggestions),
        "compliance_score": result.compliance_score,
    }


def serialize_combined_validation(validation: CombinedValidation) -> Dict[str, Any]:
    return {
        "ai": serialize_ai_result(validation.ai),
        "compliance": serialize_compliance_result(validation.compliance),
        "overall": {
            "isValid": validation.overall.is_valid,
            "canPublish": validation.overall.can_publish,
            "combinedScore": validation.overall.combined_score,
        },
    }


__all__ = [
    "serialize_issue",
    "serialize_issues",
    "serialize_compliance_result",
    "serialize_ai_result",
    "serialize_combined_validation",
]
