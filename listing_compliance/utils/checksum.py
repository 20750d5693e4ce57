"""Checksum helpers for identifying the listing state an audit record refers to."""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, is_dataclass
from typing import Any


def canonical_json(data: Any) -> str:
    if is_dataclass(data) and not isinstance(data, type):
        data = asdict(data)
    return json.dumps(data, sort_keys=True, ensure_ascii=False, separators=(",", ":"), default=str)


def sha256_of_text(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def snapshot_checksum(data: Any) -> str:
    """SHA256 of the canonical JSON form of a snapshot (dataclass or mapping)."""
    return sha256_of_text(canonical_json(data))


__all__ = ["canonical_json", "sha256_of_text", "snapshot_checksum"]
