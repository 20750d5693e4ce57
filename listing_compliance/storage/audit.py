"""
Audit logging of listing validations.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator

from listing_compliance.services.types import CombinedValidation, ListingSnapshot
from listing_compliance.utils.checksum import snapshot_checksum


@dataclass(slots=True)
class AuditRecord:
    """Structured log entry for one validation request."""

    timestamp: str
    address: str
    snapshot_checksum: str
    compliance_score: int
    is_compliant: bool
    issues: list[dict[str, Any]]
    ai: dict[str, Any]
    is_valid: bool
    can_publish: bool
    combined_score: int
    metadata: Dict[str, Any]
    listing_id: str | None = None


class JsonlAuditLogger:
    """Append-only JSONL logger for validation snapshots."""

    def __init__(self, path: Path):
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def log(
        self,
        listing: ListingSnapshot,
        validation: CombinedValidation,
        metadata: Dict[str, Any] | None = None,
    ) -> AuditRecord:
        meta = dict(metadata or {})
        listing_id = meta.get("listing_id")
        record = AuditRecord(
            timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            address=listing.address,
            snapshot_checksum=snapshot_checksum(listing),
            compliance_score=validation.compliance.score,
            is_compliant=validation.compliance.is_compliant,
            issues=[asdict(issue) for issue in validation.compliance.issues],
            ai=asdict(validation.ai),
            is_valid=validation.overall.is_valid,
            can_publish=validation.overall.can_publish,
            combined_score=validation.overall.combined_score,
            metadata=meta,
            listing_id=str(listing_id) if listing_id else None,
        )
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(asdict(record), ensure_ascii=False) + "\n")
        return record

    def iter_records(self) -> Iterator[Dict[str, Any]]:
        """Yield stored records, skipping blank or corrupt lines."""
        if not self.path.exists():
            return
        with self.path.open("r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line:
                    continue
                try:
                    yield json.loads(line)
                except json.JSONDecodeError:
                    continue


__all__ = ["AuditRecord", "JsonlAuditLogger"]
