"""Generation step with deterministic fallback to rule-based extraction."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from application.services.answer_extractor import AnswerExtractor
from domain.interfaces import TextGenerator

logger = logging.getLogger(__name__)

GENERATOR_UNAVAILABLE = "Unable to generate answer - HF_API_KEY not set"


@dataclass(frozen=True, slots=True)
class GenerationParameters:
    max_new_tokens: int = 50
    temperature: float = 0.7


class AnswerGenerator:
    """Answer a formatted prompt with an optional text generator.

    Without a generator a fixed sentinel is returned. Any failure of the
    generator degrades to :meth:`AnswerExtractor.extract_answer` on the same
    prompt, so this step never raises.
    """

    def __init__(
        self,
        generator: TextGenerator | None = None,
        extractor: AnswerExtractor | None = None,
        parameters: GenerationParameters | None = None,
    ) -> None:
        self._generator = generator
        self._extractor = extractor or AnswerExtractor()
        self._parameters = parameters or GenerationParameters()

    @property
    def available(self) -> bool:
        return self._generator is not None

    def invoke(self, prompt_text: str) -> str:
        if self._generator is None:
            logger.info("No text generator configured.")
            return GENERATOR_UNAVAILABLE

        try:
            logger.debug("Calling %s (prompt: %d chars)", self._generator.model_id, len(prompt_text))
            answer = self._generator.generate(
                prompt_text,
                max_new_tokens=self._parameters.max_new_tokens,
                temperature=self._parameters.temperature,
            )
        except Exception as exc:
            logger.warning("Text generation failed (%s); falling back to extraction.", exc)
            return self._extractor.extract_answer(prompt_text)
        logger.debug("Generated %d chars", len(answer))
        return answer


__all__ = ["AnswerGenerator", "GenerationParameters", "GENERATOR_UNAVAILABLE"]
