"""
Dataclasses describing listing snapshots and validation results.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional

IssueType = Literal["error", "warning", "info"]
IssueCategory = Literal["false_misleading", "unsubstantiated", "pricing", "disclosure", "general"]
IssueSeverity = Literal["high", "medium", "low"]


def _string_list(value: Any, name: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"'{name}' must be a list of strings, got {type(value).__name__}.")
    return [str(item) for item in value if item is not None]


def _optional_string(value: Any, name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"'{name}' must be a string, got {type(value).__name__}.")
    return value or None


def _optional_number(value: Any, name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{name}' must be numeric, got {value!r}.") from exc
    if not math.isfinite(number):
        raise ValueError(f"'{name}' must be a finite number, got {value!r}.")
    return number


@dataclass(slots=True)
class ListingVariants:
    """Generated copy variants attached to a listing."""

    standard: Optional[str] = None
    long: Optional[str] = None
    headlines: List[str] = field(default_factory=list)
    bullets: List[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ListingVariants":
        return cls(
            standard=_optional_string(data.get("standard"), "standard"),
            long=_optional_string(data.get("long"), "long"),
            headlines=_string_list(data.get("headlines"), "headlines"),
            bullets=_string_list(data.get("bullets"), "bullets"),
        )


@dataclass(slots=True)
class ListingSnapshot:
    """Textual fields and valuation facts of a listing at validation time."""

    address: str
    draft_copy: Optional[str] = None
    variants: Optional[ListingVariants] = None
    features: List[str] = field(default_factory=list)
    notes: Optional[str] = None
    cv: Optional[float] = None
    rv: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ListingSnapshot":
        """
        Build a snapshot from a stored listing record.

        Accepts the camelCase keys used by the listing store (`draftCopy`,
        `variantsJson`, `featuresJson`) as well as snake_case equivalents.
        Raises ValueError for malformed input so callers reject it before
        evaluation.
        """
        address = str(data.get("address") or "").strip()
        if not address:
            raise ValueError("Listing address must not be empty.")

        variants_raw = data.get("variantsJson", data.get("variants"))
        variants: Optional[ListingVariants] = None
        if variants_raw is not None:
            if not isinstance(variants_raw, Mapping):
                raise ValueError("'variantsJson' must be an object.")
            variants = ListingVariants.from_mapping(variants_raw)

        features_raw = data.get("featuresJson", data.get("features"))
        return cls(
            address=address,
            draft_copy=_optional_string(data.get("draftCopy", data.get("draft_copy")), "draftCopy"),
            variants=variants,
            features=_string_list(features_raw, "featuresJson"),
            notes=_optional_string(data.get("notes"), "notes"),
            cv=_optional_number(data.get("cv"), "cv"),
            rv=_optional_number(data.get("rv"), "rv"),
        )


@dataclass(slots=True)
class ComplianceIssue:
    """Single compliance finding."""

    type: IssueType
    category: IssueCategory
    message: str
    severity: IssueSeverity
    suggestion: Optional[str] = None
    field: Optional[str] = None  # reserved for field-level reporting


@dataclass(slots=True)
class ComplianceSummary:
    errors: int = 0
    warnings: int = 0
    infos: int = 0


@dataclass(slots=True)
class ComplianceResult:
    """Outcome of a Fair Trading Act check over one listing."""

    is_compliant: bool
    issues: List[ComplianceIssue]
    score: int
    summary: ComplianceSummary


@dataclass(slots=True)
class AIValidationResult:
    """Result returned by the AI draft validator."""

    unsupported: List[str] = field(default_factory=list)
    risky_phrases: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    compliance_score: float = 0.0
    source: str = "ai"  # "ai" or "fallback"


@dataclass(slots=True)
class OverallValidation:
    is_valid: bool
    can_publish: bool
    combined_score: int


@dataclass(slots=True)
class CombinedValidation:
    """AI and rule-based results blended into the publish gate."""

    ai: AIValidationResult
    compliance: ComplianceResult
    overall: OverallValidation
    metadata: Dict[str, Any] = field(default_factory=dict)


__all__ = [
    "IssueType",
    "IssueCategory",
    "IssueSeverity",
    "ListingVariants",
    "ListingSnapshot",
    "ComplianceIssue",
    "ComplianceSummary",
    "ComplianceResult",
    "AIValidationResult",
    "OverallValidation",
    "CombinedValidation",
]
