"""
FastAPI application exposing the listing compliance checks.

The service is stateless apart from the optional audit log: each request
carries the listing snapshot to check, so it can run next to the listing
editor or be deployed separately.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

load_dotenv()

logger = logging.getLogger("listing_compliance.ui.api")
if not logging.getLogger().handlers:
    logging.basicConfig(level=logging.INFO)

from listing_compliance import get_version
from listing_compliance.compliance import (
    RULESET_VERSION,
    check_text_compliance,
    get_compliance_suggestions,
    suggest_alternatives,
)
from listing_compliance.config.settings import load_config
from listing_compliance.services.listing_validator import ListingValidator
from listing_compliance.services.types import ListingSnapshot

from .schema import serialize_combined_validation, serialize_compliance_result, serialize_issues


class VariantsPayload(BaseModel):
    standard: Optional[str] = None
    long: Optional[str] = None
    headlines: List[str] = Field(default_factory=list)
    bullets: List[str] = Field(default_factory=list)


class ListingPayload(BaseModel):
    address: str
    draftCopy: Optional[str] = None
    variantsJson: Optional[VariantsPayload] = None
    featuresJson: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    cv: Optional[float] = None
    rv: Optional[float] = None


class ValidateRequest(BaseModel):
    listing: ListingPayload
    facts: Dict[str, Any] = Field(default_factory=dict)
    listing_id: Optional[str] = None


class TextRequest(BaseModel):
    text: str


def _to_snapshot(payload: ListingPayload) -> ListingSnapshot:
    try:
        return ListingSnapshot.from_mapping(payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def create_api(validator: ListingValidator | None = None) -> FastAPI:
    """Build the API around a validator (configured from the environment by default)."""

    listing_validator = validator or ListingValidator.from_config(load_config())

    app = FastAPI(title="Listing Compliance API", version=get_version())

    @app.get("/")
    def root() -> dict:
        return {"service": "listing-compliance", "ruleset": RULESET_VERSION}

    @app.post("/compliance")
    def check_listing(payload: ListingPayload) -> dict:
        """Run the Fair Trading Act rules over a listing snapshot."""
        result = listing_validator.check(_to_snapshot(payload))
        return serialize_compliance_result(result)

    @app.post("/validate")
    def validate_listing(payload: ValidateRequest) -> dict:
        """
        Combine AI draft validation with the rule checks.

        The response carries the publish gate under `overall`.
        """
        snapshot = _to_snapshot(payload.listing)
        metadata: Dict[str, Any] = {}
        if payload.listing_id:
            metadata["listing_id"] = payload.listing_id
        validation = listing_validator.validate(snapshot, payload.facts, metadata=metadata)
        return serialize_combined_validation(validation)

    @app.post("/check-text")
    def check_text(payload: TextRequest) -> list:
        return serialize_issues(check_text_compliance(payload.text))

    @app.get("/alternatives")
    def alternatives(phrase: str = Query(..., min_length=1)) -> list:
        return suggest_alternatives(phrase)

    @app.get("/suggestions")
    def suggestions() -> list:
        return get_compliance_suggestions()

    return app


app = create_api()


__all__ = ["create_api", "app"]
