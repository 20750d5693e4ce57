"""
Model invocation utilities for the AI draft validator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional
from urllib.parse import urlparse, urlunparse

import requests


def ensure_ollama_endpoint(endpoint: str, default_path: str) -> str:
    """
    Normalise a user-supplied Ollama endpoint.

    Accepts bare hosts (e.g. http://localhost:11434) or `/api` roots and ensures
    the required path suffix is present. Custom paths are preserved as-is.
    """
    if not endpoint:
        return endpoint

    target_suffix = "/" + default_path.strip("/")
    parsed = urlparse(endpoint.strip())
    path = (parsed.path or "").rstrip("/")

    if not path:
        new_path = target_suffix
    elif path.endswith(target_suffix):
        new_path = path
    elif path == "/api" and target_suffix.startswith("/api/"):
        new_path = "/api" + target_suffix[len("/api") :]
    else:
        new_path = path

    normalised = parsed._replace(path=new_path or "/")
    return urlunparse(normalised).rstrip("/")


def _preview(body: str, limit: int) -> str:
    body = (body or "").strip()
    preview = body[:limit]
    if len(body) > len(preview):
        preview += "…"
    return preview


def _post_json(
    *,
    endpoint: str,
    payload: Dict[str, object],
    headers: Dict[str, str],
    timeout: int,
    model: str,
) -> Dict[str, object]:
    try:
        response = requests.post(endpoint, json=payload, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise RuntimeError(f"Request failed for model '{model}' at {endpoint}: {exc}") from exc

    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise RuntimeError(
            f"HTTP {response.status_code} for model '{model}' at {endpoint}: {_preview(response.text, 1000)}"
        ) from exc

    try:
        return response.json()
    except ValueError as exc:
        raise RuntimeError(
            f"Non-JSON payload for model '{model}' at {endpoint}: {_preview(response.text, 500)}"
        ) from exc


@dataclass(slots=True)
class LLMResponse:
    """Container for raw LLM output and metadata."""

    text: str
    model: str
    temperature: float
    max_tokens: Optional[int]


class LLMClient:
    """Thin wrapper around OpenAI-compatible or Ollama chat HTTP APIs."""

    def __init__(
        self,
        endpoint: str,
        auth_token: Optional[str] = None,
        api_mode: str = "openai",
    ):
        self.api_mode = api_mode.lower()
        if self.api_mode not in {"openai", "ollama_chat"}:
            raise ValueError(
                f"Unsupported LISTING_AI_API_MODE '{self.api_mode}'. Expected 'openai' or 'ollama_chat'."
            )
        if self.api_mode == "ollama_chat":
            endpoint = ensure_ollama_endpoint(endpoint, "api/chat")
        self.endpoint = endpoint
        self.auth_token = auth_token

    def chat(
        self,
        model: str,
        system: str,
        prompt: str,
        *,
        temperature: float = 0.1,
        max_tokens: Optional[int] = None,
        timeout: int = 60,
    ) -> LLMResponse:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"

        messages: List[Dict[str, str]] = [
            {"role": "system", "content": system},
            {"role": "user", "content": prompt},
        ]
        if self.api_mode == "ollama_chat":
            options: Dict[str, int | float] = {"temperature": temperature}
            if max_tokens is not None:
                options["num_predict"] = int(max_tokens)
            data = _post_json(
                endpoint=self.endpoint,
                payload={"model": model, "messages": messages, "stream": False, "options": options},
                headers=headers,
                timeout=timeout,
                model=model,
            )
            message = data.get("message") or {}
            text = message.get("content", "")
        else:
            payload: Dict[str, object] = {
                "model": model,
                "messages": messages,
                "temperature": temperature,
            }
            if max_tokens is not None:
                payload["max_tokens"] = int(max_tokens)
            data = _post_json(
                endpoint=self.endpoint,
                payload=payload,
                headers=headers,
                timeout=timeout,
                model=model,
            )
            choices = data.get("choices") or []
            if not choices:
                text = ""
            else:
                choice = choices[0]
                message = choice.get("message") or {}
                text = message.get("content", "") or choice.get("text", "")

        return LLMResponse(text=text or "", model=model, temperature=temperature, max_tokens=max_tokens)


__all__ = ["LLMClient", "LLMResponse", "ensure_ollama_endpoint"]
