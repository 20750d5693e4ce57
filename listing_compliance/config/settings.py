"""
Validator and service settings for listing compliance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_OPENAI_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_OLLAMA_CHAT_ENDPOINT = "http://localhost:11434/api/chat"


def _env_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True)
class ValidatorConfig:
    """AI validator and service configuration entry."""

    api_mode: str = "openai"
    model: str = "gpt-4o-mini"
    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    temperature: float = 0.1
    max_tokens: int = 800
    timeout: int = 60
    audit_log_path: Optional[Path] = None
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_reload: bool = False

    @property
    def ai_enabled(self) -> bool:
        """OpenAI mode needs a key; local Ollama does not."""
        if self.api_mode == "openai":
            return bool(self.api_key)
        return True


def load_config() -> ValidatorConfig:
    """Resolve configuration from environment variables."""
    api_mode = os.getenv("LISTING_AI_API_MODE", "openai").strip().lower()
    if api_mode == "openai":
        endpoint = os.getenv("OPENAI_ENDPOINT", DEFAULT_OPENAI_ENDPOINT)
        api_key = os.getenv("OPENAI_API_KEY")
    else:
        endpoint = os.getenv("OLLAMA_CHAT_ENDPOINT", DEFAULT_OLLAMA_CHAT_ENDPOINT)
        api_key = os.getenv("OLLAMA_BEARER")

    # Audit logging stays off unless a path is configured.
    audit_raw = os.getenv("LISTING_AUDIT_LOG", "").strip()
    return ValidatorConfig(
        api_mode=api_mode,
        model=os.getenv("LISTING_AI_MODEL", "gpt-4o-mini"),
        endpoint=endpoint,
        api_key=api_key,
        timeout=int(os.getenv("LISTING_AI_TIMEOUT", "60")),
        audit_log_path=Path(audit_raw) if audit_raw else None,
        api_host=os.getenv("LISTING_API_HOST", "127.0.0.1"),
        api_port=int(os.getenv("LISTING_API_PORT", "8000")),
        api_reload=_env_bool(os.getenv("LISTING_API_RELOAD"), default=False),
    )


__all__ = ["ValidatorConfig", "load_config"]
