"""
listing_compliance package bootstrap.

Exposes the NZ Fair Trading Act checks for real-estate listing copy and the
services that combine them with an AI draft validator into a publish gate.
"""

from importlib import metadata


def get_version() -> str:
    """Return the package version if installed, else '0.0.0'."""
    try:
        return metadata.version("listing-compliance")
    except metadata.PackageNotFoundError:  # pragma: no cover - best effort only
        return "0.0.0"


__all__ = ["get_version"]
