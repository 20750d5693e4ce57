"""
HTTP layer for the listing editor.

Only the serialisation helpers are imported eagerly; the FastAPI app lives in
`listing_compliance.ui.api`.
"""

from .schema import (
    serialize_ai_result,
    serialize_combined_validation,
    serialize_compliance_result,
    serialize_issue,
    serialize_issues,
)

__all__ = [
    "serialize_ai_result",
    "serialize_combined_validation",
    "serialize_compliance_result",
    "serialize_issue",
    "serialize_issues",
]
