"""
AI draft validator with a deterministic keyword fallback.

The model is asked to compare draft copy against the locked property facts
and to return JSON. Whenever no provider is configured, the call fails, or
the reply does not match the expected shape, the basic keyword check is used
instead so validation always produces a result.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from listing_compliance.config.settings import ValidatorConfig
from listing_compliance.services.models import LLMClient
from listing_compliance.services.types import AIValidationResult

logger = logging.getLogger("listing_compliance.services.validator")

SYSTEM_PROMPT = """You are a New Zealand real estate compliance validator.
Analyze the draft copy against the provided facts and identify:
1. Unsupported claims (anything not backed by facts)
2. Risky phrases that could violate Fair Trading Act
3. Suggestions for improvement

Return valid JSON with keys: unsupported[], risky_phrases[], suggestions[], compliance_score (0-100)."""

SUBJECTIVE_CLAIMS = ("stunning", "beautiful", "perfect", "ideal", "amazing")
FEATURE_CLAIMS = (
    "fantastic",
    "excellent",
    "outstanding",
    "magnificent",
    "double glazing",
    "heat pump",
    "alarm",
    "dishwasher",
)

UNSUPPORTED_PENALTY = 15
RISKY_PENALTY = 10

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


class ValidationResultPayload(BaseModel):
    """Shape the model must return."""

    unsupported: List[str] = Field(default_factory=list)
    risky_phrases: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    compliance_score: float = Field(ge=0, le=100)


def build_user_prompt(facts: Mapping[str, Any], draft: str) -> str:
    return (
        "Validate this draft copy against the facts.\n\n"
        f"FACTS:\n{json.dumps(dict(facts), indent=2, ensure_ascii=False, default=str)}\n\n"
        f"DRAFT:\n{draft}\n\n"
        "Return JSON only."
    )


def parse_validation_payload(text: str) -> AIValidationResult:
    """Parse a model reply into a result. Raises ValueError on bad payloads."""
    raw = (text or "").strip()
    fenced = _FENCE_RE.search(raw)
    if fenced:
        raw = fenced.group(1).strip()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Validator reply is not JSON: {raw[:200]!r}") from exc
    try:
        payload = ValidationResultPayload.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Validator reply has unexpected shape: {exc}") from exc
    return AIValidationResult(
        unsupported=payload.unsupported,
        risky_phrases=payload.risky_phrases,
        suggestions=payload.suggestions,
        compliance_score=payload.compliance_score,
        source="ai",
    )


def basic_validation(facts: Mapping[str, Any], draft: str) -> AIValidationResult:
    """Keyword check of the draft against the listed features."""
    unsupported: List[str] = []
    risky_phrases: List[str] = []
    suggestions: List[str] = []

    draft = draft or ""
    draft_lower = draft.lower()
    features = [str(feature).lower() for feature in (facts.get("features") or [])]

    for claim in SUBJECTIVE_CLAIMS + FEATURE_CLAIMS:
        if claim not in draft_lower:
            continue
        if any(claim in feature for feature in features):
            continue
        if claim in SUBJECTIVE_CLAIMS:
            risky_phrases.append(f'Subjective claim: "{claim}"')
        else:
            unsupported.append(f'"{claim}" not listed in property features')

    bedrooms = facts.get("bedrooms")
    bathrooms = facts.get("bathrooms")
    if bedrooms is not None and str(bedrooms) not in draft:
        suggestions.append("Ensure bedroom count matches the facts")
    if bathrooms is not None and str(bathrooms) not in draft:
        suggestions.append("Ensure bathroom count matches the facts")

    score = 100 - len(unsupported) * UNSUPPORTED_PENALTY - len(risky_phrases) * RISKY_PENALTY
    return AIValidationResult(
        unsupported=unsupported,
        risky_phrases=risky_phrases,
        suggestions=suggestions,
        compliance_score=max(score, 0),
        source="fallback",
    )


class DraftValidator:
    """Checks draft copy against facts with an LLM, falling back to keywords."""

    def __init__(self, config: Optional[ValidatorConfig] = None, client: Optional[LLMClient] = None):
        self.config = config or ValidatorConfig()
        if client is None and self.config.ai_enabled and self.config.endpoint:
            client = LLMClient(
                endpoint=self.config.endpoint,
                auth_token=self.config.api_key,
                api_mode=self.config.api_mode,
            )
        self.client = client

    def validate(self, facts: Optional[Mapping[str, Any]], draft: str) -> AIValidationResult:
        facts = facts or {}
        if self.client is None:
            logger.info("No AI provider configured; using basic draft validation")
            return basic_validation(facts, draft)

        try:
            response = self.client.chat(
                self.config.model,
                SYSTEM_PROMPT,
                build_user_prompt(facts, draft),
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
                timeout=self.config.timeout,
            )
            return parse_validation_payload(response.text)
        except (RuntimeError, ValueError) as exc:
            logger.warning(
                "AI draft validation failed; using basic validation",
                extra={"model": self.config.model, "error": str(exc)},
            )
            return basic_validation(facts, draft)


__all__ = [
    "DraftValidator",
    "ValidationResultPayload",
    "basic_validation",
    "build_user_prompt",
    "parse_validation_payload",
]
