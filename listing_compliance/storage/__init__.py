"""Persistence helpers for validation snapshots."""

from .audit import AuditRecord, JsonlAuditLogger

__all__ = ["AuditRecord", "JsonlAuditLogger"]
