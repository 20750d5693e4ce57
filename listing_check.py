#!/usr/bin/env python3
"""
Command-line driver for checking listing copy.

Reads a listing snapshot (and optionally locked facts) from JSON files, runs
the Fair Trading Act rules, optionally blends in AI draft validation, and
prints the result as JSON. Exits with status 1 when the listing is not ready
to publish.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

load_dotenv()

from listing_compliance.compliance import check_text_compliance, validate_compliance
from listing_compliance.config.settings import load_config
from listing_compliance.services.listing_validator import ListingValidator
from listing_compliance.services.types import ListingSnapshot
from listing_compliance.ui.schema import (
    serialize_combined_validation,
    serialize_compliance_result,
    serialize_issues,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="NZ Fair Trading Act listing checks")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--listing", type=Path, help="Listing snapshot JSON file")
    source.add_argument("--text", help="Check a single piece of copy against the claim rules")
    parser.add_argument("--facts", type=Path, default=None, help="Locked property facts JSON file")
    parser.add_argument("--with-ai", action="store_true", help="Blend in AI draft validation")
    parser.add_argument(
        "--audit-log",
        type=Path,
        default=None,
        help="Append the combined result to this JSONL file (requires --with-ai)",
    )
    args = parser.parse_args(argv)
    if args.audit_log is not None and (args.text is not None or not args.with_ai):
        parser.error("--audit-log requires --listing together with --with-ai")
    return args


def print_step(message: str) -> None:
    print(f"[listing-check] {message}", file=sys.stderr)


def load_json(path: Path) -> Dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object.")
    return data


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if args.text is not None:
        issues = check_text_compliance(args.text)
        print(json.dumps(serialize_issues(issues), indent=2, ensure_ascii=False))
        return 1 if any(issue.type == "error" for issue in issues) else 0

    try:
        listing = ListingSnapshot.from_mapping(load_json(args.listing))
        facts = load_json(args.facts) if args.facts else {}
    except (OSError, ValueError) as exc:
        print_step(f"Invalid input: {exc}")
        return 2

    if not args.with_ai:
        result = validate_compliance(listing)
        print(json.dumps(serialize_compliance_result(result), indent=2, ensure_ascii=False))
        return 0 if result.is_compliant else 1

    config = load_config()
    config.audit_log_path = args.audit_log
    if not config.ai_enabled:
        print_step("No AI provider configured; using basic draft validation")
    validator = ListingValidator.from_config(config)
    validation = validator.validate(listing, facts)
    print(json.dumps(serialize_combined_validation(validation), indent=2, ensure_ascii=False))
    return 0 if validation.overall.can_publish else 1


if __name__ == "__main__":
    sys.exit(main())
