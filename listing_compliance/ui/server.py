"""
Command-line entry point for running the listing compliance API.

Usage:
    python -m listing_compliance.ui.server

Environment variables:
    LISTING_API_HOST    Host interface to bind (default: 127.0.0.1).
    LISTING_API_PORT    Port for the service (default: 8000).
    LISTING_API_RELOAD  Set to "1" to enable autoreload (development only).
"""

from __future__ import annotations

import uvicorn
from dotenv import load_dotenv

from listing_compliance.config.settings import load_config


def main() -> None:
    """Boot the FastAPI application with configurable host/port."""

    load_dotenv()
    config = load_config()
    uvicorn.run(
        "listing_compliance.ui.api:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.api_reload,
        factory=False,
    )


if __name__ == "__main__":
    main()
