"""Interface to the chat-completion API that suggests page metadata.

Sends one request per page and turns the model reply into a suggestion
dictionary.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

import requests
from requests.exceptions import HTTPError

from settings import API_URL, MODEL, TEMPERATURE

SYSTEM_PROMPT = (
    "You generate concise SEO metadata for HTML pages: title (<=60 chars), "
    "description (120-160 chars), og:title, og:description, keywords "
    "(<=8 comma-separated), and optional canonical URL if detectable. "
    "Return strict JSON with keys: title, description, ogTitle, ogDescription, "
    "keywords, canonical."
)

PROMPT_TEMPLATE = (
    "Generate metadata for this page. Return JSON with keys: title, description, "
    "ogTitle, ogDescription, keywords, canonical. Text: {text}"
)

INVALID_JSON_ERROR = "Invalid JSON from model"


class MissingCredentialError(RuntimeError):
    """Raised when no API key is configured."""


class MetadataAPIError(RuntimeError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"OpenAI API error: {status_code} {body}")
        self.status_code = status_code
        self.body = body


def parse_suggestion(content: str) -> Dict[str, Any]:
    """Return the JSON object in *content* or an error-shaped suggestion.

    Never raises: a reply that is not a JSON object yields
    ``{"error": "Invalid JSON from model", "raw": content}``.
    """

    try:
        data = json.loads(content)
    except (TypeError, ValueError):
        return {"error": INVALID_JSON_ERROR, "raw": content}
    if not isinstance(data, dict):
        return {"error": INVALID_JSON_ERROR, "raw": content}
    return data


class MetadataClient:
    """Thin wrapper around an OpenAI compatible chat-completions endpoint."""

    def __init__(
        self,
        api_key: str | None,
        endpoint: str = API_URL,
        model: str = MODEL,
        temperature: float = TEMPERATURE,
    ) -> None:
        self.api_key = api_key
        self.endpoint = endpoint
        self.model = model
        self.temperature = temperature

    def complete(self, prompt: str, system_prompt: str = SYSTEM_PROMPT) -> str:
        """Return the first completion's message content for *prompt*.

        Raises
        ------
        MissingCredentialError
            If no API key was configured.
        MetadataAPIError
            If the endpoint answers with a non-2xx status.
        """

        if not self.api_key:
            raise MissingCredentialError("OPENAI_API_KEY is not set")

        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.temperature,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        logging.info("Prompt size: %d chars", len(prompt) + len(system_prompt))
        logging.info("LLM request started")
        response = requests.post(
            self.endpoint, json=payload, headers=headers, timeout=None
        )
        try:
            response.raise_for_status()
        except HTTPError as exc:
            logging.error("LLM request failed: %s %s", response.status_code, response.text)
            raise MetadataAPIError(response.status_code, response.text) from exc

        data = response.json()
        logging.info("LLM request completed")
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        return content or "{}"

    def suggest(self, text: str) -> Dict[str, Any]:
        """Return metadata suggested for a page whose visible text is *text*."""

        content = self.complete(PROMPT_TEMPLATE.format(text=text))
        suggestion = parse_suggestion(content)
        if "error" in suggestion:
            logging.warning("Model reply was not a JSON object")
        return suggestion
