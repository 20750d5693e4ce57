"""
Listing validation facade combining the AI validator with the rule checks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from listing_compliance.compliance import combine_validation, validate_compliance
from listing_compliance.config.settings import ValidatorConfig
from listing_compliance.services.types import CombinedValidation, ComplianceResult, ListingSnapshot
from listing_compliance.services.validator import DraftValidator
from listing_compliance.storage.audit import JsonlAuditLogger

logger = logging.getLogger("listing_compliance.services.listing_validator")


@dataclass(slots=True)
class ListingValidator:
    """Runs both validators for a listing and records the outcome."""

    config: ValidatorConfig = field(default_factory=ValidatorConfig)
    draft_validator: Optional[DraftValidator] = None
    audit_log_path: Optional[Path] = None
    audit_logger: Optional[JsonlAuditLogger] = field(init=False, default=None)

    def __post_init__(self) -> None:
        if self.draft_validator is None:
            self.draft_validator = DraftValidator(self.config)
        if self.audit_log_path is not None:
            self.audit_logger = JsonlAuditLogger(self.audit_log_path)

    @classmethod
    def from_config(cls, config: ValidatorConfig) -> "ListingValidator":
        return cls(config=config, audit_log_path=config.audit_log_path)

    def check(self, listing: ListingSnapshot) -> ComplianceResult:
        """Rule-based checks only; no model call, no audit record."""
        return validate_compliance(listing)

    def validate(
        self,
        listing: ListingSnapshot,
        facts: Optional[Mapping[str, Any]] = None,
        *,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> CombinedValidation:
        ai_result = self.draft_validator.validate(facts or {}, listing.draft_copy or "")
        compliance = validate_compliance(listing)
        combined = combine_validation(ai_result, compliance)
        combined.metadata = {"ai_source": ai_result.source, **(metadata or {})}

        logger.info(
            "Listing validated",
            extra={
                "address": listing.address,
                "compliance_score": compliance.score,
                "ai_score": ai_result.compliance_score,
                "combined_score": combined.overall.combined_score,
                "can_publish": combined.overall.can_publish,
            },
        )
        if self.audit_logger is not None:
            self.audit_logger.log(listing, combined, metadata=combined.metadata)
        return combined


__all__ = ["ListingValidator"]
