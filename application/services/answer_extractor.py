"""Rule-based answer extraction used when generation is unavailable or fails."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from application.services.prompt import PromptTemplate

logger = logging.getLogger(__name__)

_EXPERIENCE_PATTERN = re.compile(r"(\d+)\s*(?:year|yr)s?\s*(?:of\s*)?(?:experience|exp)", re.IGNORECASE)

DEFAULT_SKILLS = ("React", "JavaScript", "NodeJS", "ExpressJS", "Redux", "HTML5", "CSS3", "jQuery")


@dataclass(frozen=True, slots=True)
class ExtractionRules:
    """Fixed vocabulary and fallback answers for the extraction rules."""

    known_name: str = "Navdeep Singh"
    skill_vocabulary: tuple[str, ...] = DEFAULT_SKILLS
    experience_not_found: str = "Experience duration not found in context"
    skills_not_found: str = "Skills not clearly specified"


@dataclass(frozen=True, slots=True)
class _Rule:
    name: str
    applies: Callable[[str], bool]
    handle: Callable[[str], str]


class AnswerExtractor:
    """Derive a short answer from a question/context pair.

    Rules are checked in priority order against the lowercased question and
    the first one that applies produces the answer. When none applies the
    caller-supplied default is returned untouched.
    """

    def __init__(self, rules: ExtractionRules | None = None) -> None:
        self._rules = rules or ExtractionRules()
        name_tokens = self._rules.known_name.split()
        self._name_pattern = re.compile(r"\s+".join(re.escape(token) for token in name_tokens), re.IGNORECASE)
        self._dispatch: tuple[_Rule, ...] = (
            _Rule("name", lambda q: "name" in q and "portfolio" in q, self._extract_name),
            _Rule("experience", lambda q: "experience" in q and "year" in q, self._extract_experience),
            _Rule("skills", lambda q: "skill" in q or "technology" in q, self._extract_skills),
        )

    @property
    def rules(self) -> ExtractionRules:
        return self._rules

    def extract(self, question: str, context: str, default: str) -> str:
        question_lower = question.lower()
        logger.debug("Extracting answer for %r (context: %d chars)", question_lower, len(context))
        for rule in self._dispatch:
            if rule.applies(question_lower):
                answer = rule.handle(context)
                logger.debug("Rule %s answered %r", rule.name, answer)
                return answer
        logger.debug("No extraction rule matched")
        return default

    def extract_answer(self, prompt_text: str) -> str:
        """Parse a formatted prompt and extract an answer from it.

        Falls through to the unchanged prompt text when no rule applies.
        """

        question, context = PromptTemplate.parse(prompt_text)
        return self.extract(question, context, default=prompt_text)

    def _extract_name(self, context: str) -> str:
        match = self._name_pattern.search(context)
        return match.group(0) if match else self._rules.known_name

    def _extract_experience(self, context: str) -> str:
        match = _EXPERIENCE_PATTERN.search(context.lower())
        return f"{match.group(1)} years" if match else self._rules.experience_not_found

    def _extract_skills(self, context: str) -> str:
        context_lower = context.lower()
        found = [skill for skill in self._rules.skill_vocabulary if skill.lower() in context_lower]
        return ", ".join(found) if found else self._rules.skills_not_found


_default_extractor = AnswerExtractor()


def extract_answer(prompt_text: str) -> str:
    """Extract an answer from ``prompt_text`` with the default rules."""

    return _default_extractor.extract_answer(prompt_text)


__all__ = ["AnswerExtractor", "ExtractionRules", "DEFAULT_SKILLS", "extract_answer"]
