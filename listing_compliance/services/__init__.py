"""
Service layer modules that wrap the compliance rules for callers.

This package exposes the primary classes via lazy imports to avoid circular
dependencies (e.g., compliance scoring importing
`listing_compliance.services.types`).
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict

__all__ = [
    "ListingValidator",
    "DraftValidator",
    "LLMClient",
    "LLMResponse",
    "ListingSnapshot",
    "ListingVariants",
    "ComplianceIssue",
    "ComplianceResult",
    "AIValidationResult",
    "CombinedValidation",
]

_MODULE_ATTRS: Dict[str, str] = {
    "ListingValidator": "listing_compliance.services.listing_validator",
    "DraftValidator": "listing_compliance.services.validator",
    "LLMClient": "listing_compliance.services.models",
    "LLMResponse": "listing_compliance.services.models",
    "ListingSnapshot": "listing_compliance.services.types",
    "ListingVariants": "listing_compliance.services.types",
    "ComplianceIssue": "listing_compliance.services.types",
    "ComplianceResult": "listing_compliance.services.types",
    "AIValidationResult": "listing_compliance.services.types",
    "CombinedValidation": "listing_compliance.services.types",
}


def __getattr__(name: str) -> Any:
    module_path = _MODULE_ATTRS.get(name)
    if not module_path:
        raise AttributeError(f"module 'listing_compliance.services' has no attribute '{name}'")  # pragma: no cover
    module = import_module(module_path)
    return getattr(module, name)


def __dir__() -> list[str]:  # pragma: no cover - convenience helper
    return sorted(__all__)
