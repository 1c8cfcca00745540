"""Text generator backed by the Hugging Face Inference API."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from domain.interfaces import TextGenerator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HuggingFaceConfig:
    api_key: str
    model: str = "gpt2"
    api_url: str = "https://api-inference.huggingface.co"
    timeout: float = 60.0


class HuggingFaceTextGenerator(TextGenerator):
    """Call the hosted text-generation task for a single model."""

    def __init__(self, config: HuggingFaceConfig) -> None:
        if not config.api_key:
            raise ValueError("Missing Hugging Face API key.")
        self._config = config

    @property
    def model_id(self) -> str:
        return self._config.model

    def generate(self, prompt: str, *, max_new_tokens: int, temperature: float) -> str:
        response = requests.post(
            f"{self._config.api_url}/models/{self._config.model}",
            headers={"Authorization": f"Bearer {self._config.api_key}"},
            json={
                "inputs": prompt,
                "parameters": {"max_new_tokens": max_new_tokens, "temperature": temperature},
            },
            timeout=self._config.timeout,
        )
        response.raise_for_status()
        return self._parse_generated_text(response.json())

    @staticmethod
    def _parse_generated_text(payload: object) -> str:
        if isinstance(payload, list) and payload:
            payload = payload[0]
        if isinstance(payload, dict):
            if "generated_text" in payload:
                return str(payload["generated_text"])
            if "error" in payload:
                raise RuntimeError(f"Hugging Face error: {payload['error']}")
        raise ValueError(f"Unexpected text-generation response: {payload!r}")


__all__ = ["HuggingFaceTextGenerator", "HuggingFaceConfig"]
