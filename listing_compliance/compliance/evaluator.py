"""
Rule-based evaluation of listing copy against the Fair Trading Act catalogs.
"""

from __future__ import annotations

from typing import Iterable, List

from listing_compliance.compliance.rules import (
    CV_RV_LOWER_RATIO,
    CV_RV_UPPER_RATIO,
    DISCLOSURE_RULES,
    PROHIBITED_RULES,
    PROMOTIONAL_LIMIT,
    PROMOTIONAL_PATTERN,
    WARNING_RULES,
    DisclosureRule,
    PatternRule,
)
from listing_compliance.compliance.scoring import build_result
from listing_compliance.services.types import ComplianceIssue, ComplianceResult, ListingSnapshot

PROHIBITED_SUGGESTION = "Remove superlative language or provide evidence to support the claim"
WARNING_SUGGESTION = "Ensure you have evidence to support this claim (e.g., comparable sales, official reports)"
TEXT_PROHIBITED_SUGGESTION = "Remove superlative language or provide evidence"
TEXT_WARNING_SUGGESTION = "Ensure you have evidence to support this claim"


def build_corpus(listing: ListingSnapshot) -> str:
    """Join every text field of the listing with single spaces."""
    variants = listing.variants
    parts: List[str] = [
        listing.draft_copy or "",
        (variants.standard if variants else None) or "",
        (variants.long if variants else None) or "",
    ]
    if variants:
        parts.extend(variants.headlines)
        parts.extend(variants.bullets)
    parts.extend(listing.features)
    parts.append(listing.notes or "")
    return " ".join(parts)


def _prohibited_issues(text: str, rules: Iterable[PatternRule], suggestion: str) -> List[ComplianceIssue]:
    issues: List[ComplianceIssue] = []
    for rule in rules:
        for match in rule.find_all(text):
            issues.append(
                ComplianceIssue(
                    type="error",
                    category="unsubstantiated",
                    message=f'Potentially unsubstantiated claim: "{match}"',
                    severity="high",
                    suggestion=suggestion,
                )
            )
    return issues


def _warning_issues(text: str, rules: Iterable[PatternRule], suggestion: str) -> List[ComplianceIssue]:
    issues: List[ComplianceIssue] = []
    for rule in rules:
        for match in rule.find_all(text):
            issues.append(
                ComplianceIssue(
                    type="warning",
                    category="unsubstantiated",
                    message=f'Claim requires substantiation: "{match}"',
                    severity="medium",
                    suggestion=suggestion,
                )
            )
    return issues


def _disclosure_issues(text: str, rules: Iterable[DisclosureRule]) -> List[ComplianceIssue]:
    # One issue per triggered rule, not per occurrence.
    return [
        ComplianceIssue(
            type="warning",
            category="disclosure",
            message=rule.message,
            severity="medium",
            suggestion="Consider adding appropriate disclosure statements",
        )
        for rule in rules
        if rule.is_triggered(text)
    ]


def _pricing_issues(listing: ListingSnapshot) -> List[ComplianceIssue]:
    if not (listing.cv and listing.rv):
        return []
    ratio = listing.cv / listing.rv
    if not (ratio > CV_RV_UPPER_RATIO or ratio < CV_RV_LOWER_RATIO):
        return []
    return [
        ComplianceIssue(
            type="warning",
            category="pricing",
            message="Significant difference between CV and RV values",
            severity="medium",
            suggestion="Ensure pricing expectations are realistic and well-supported",
        )
    ]


def _promotional_issues(text: str) -> List[ComplianceIssue]:
    count = sum(1 for _ in PROMOTIONAL_PATTERN.finditer(text))
    if count <= PROMOTIONAL_LIMIT:
        return []
    return [
        ComplianceIssue(
            type="warning",
            category="general",
            message="High use of promotional language detected",
            severity="low",
            suggestion=(
                "Consider using more factual, descriptive language to avoid potential "
                "misleading representation claims"
            ),
        )
    ]


def _missing_content_issues(listing: ListingSnapshot) -> List[ComplianceIssue]:
    if listing.draft_copy or listing.variants is not None:
        return []
    return [
        ComplianceIssue(
            type="error",
            category="general",
            message="No property description available",
            severity="high",
            suggestion="Generate property description before publishing",
        )
    ]


def validate_compliance(listing: ListingSnapshot) -> ComplianceResult:
    """
    Check a listing against every rule family and score the outcome.

    Issues are emitted in a fixed order: prohibited claims, claims needing
    substantiation, disclosures, CV/RV pricing, promotional density, then
    missing description.
    """
    text = build_corpus(listing)

    issues: List[ComplianceIssue] = []
    issues.extend(_prohibited_issues(text, PROHIBITED_RULES, PROHIBITED_SUGGESTION))
    issues.extend(_warning_issues(text, WARNING_RULES, WARNING_SUGGESTION))
    issues.extend(_disclosure_issues(text, DISCLOSURE_RULES))
    issues.extend(_pricing_issues(listing))
    issues.extend(_promotional_issues(text))
    issues.extend(_missing_content_issues(listing))

    return build_result(issues)


def check_text_compliance(text: str) -> List[ComplianceIssue]:
    """Run only the claim catalogs over an arbitrary piece of text."""
    text = text or ""
    issues = _prohibited_issues(text, PROHIBITED_RULES, TEXT_PROHIBITED_SUGGESTION)
    issues.extend(_warning_issues(text, WARNING_RULES, TEXT_WARNING_SUGGESTION))
    return issues


__all__ = ["build_corpus", "validate_compliance", "check_text_compliance"]
