import unittest

from application.services.answer_extractor import AnswerExtractor, ExtractionRules, extract_answer
from application.services.prompt import PromptTemplate


def _prompt(context: str, question: str) -> str:
    return PromptTemplate().format(context=context, question=question)


class TestNameRule(unittest.TestCase):
    def test_returns_name_found_in_context(self) -> None:
        prompt = _prompt("Hi, I am Navdeep Singh, a frontend developer.", "name of the person whose portfolio is this?")
        self.assertEqual(extract_answer(prompt), "Navdeep Singh")

    def test_keeps_spelling_from_context(self) -> None:
        prompt = _prompt("<title>NAVDEEP   singh</title>", "What is the name on this portfolio?")
        self.assertEqual(extract_answer(prompt), "NAVDEEP   singh")

    def test_falls_back_to_known_name(self) -> None:
        prompt = _prompt("Welcome to my site", "name of the person whose portfolio is this?")
        self.assertEqual(extract_answer(prompt), "Navdeep Singh")

    def test_name_rule_wins_over_experience_rule(self) -> None:
        prompt = _prompt("I have 5 years of experience.", "name on portfolio and years of experience?")
        self.assertEqual(extract_answer(prompt), "Navdeep Singh")

    def test_custom_identity(self) -> None:
        extractor = AnswerExtractor(ExtractionRules(known_name="Ada Lovelace"))
        answer = extractor.extract("portfolio owner name?", "made by ada\nlovelace", default="")
        self.assertEqual(answer, "ada\nlovelace")


class TestExperienceRule(unittest.TestCase):
    def test_extracts_years(self) -> None:
        prompt = _prompt("I have 5 years of experience in web development.", "how many years of experience?")
        self.assertEqual(extract_answer(prompt), "5 years")

    def test_accepts_abbreviations(self) -> None:
        prompt = _prompt("Frontend dev, 3yrs exp with React", "Years of experience?")
        self.assertEqual(extract_answer(prompt), "3 years")

    def test_sentinel_when_missing(self) -> None:
        prompt = _prompt("I like building things.", "how many years of experience?")
        self.assertEqual(extract_answer(prompt), "Experience duration not found in context")


class TestSkillsRule(unittest.TestCase):
    def test_lists_skills_in_vocabulary_order(self) -> None:
        prompt = _prompt("built with html5 and then react", "what skills does he have?")
        self.assertEqual(extract_answer(prompt), "React, HTML5")

    def test_technology_trigger(self) -> None:
        prompt = _prompt("Uses jQuery, Redux and CSS3", "Which technology is used?")
        self.assertEqual(extract_answer(prompt), "Redux, CSS3, jQuery")

    def test_sentinel_when_nothing_matches(self) -> None:
        prompt = _prompt("Python and Django", "list the skills")
        self.assertEqual(extract_answer(prompt), "Skills not clearly specified")


class TestFallThrough(unittest.TestCase):
    def test_returns_prompt_unchanged_when_no_rule_applies(self) -> None:
        prompt = _prompt("Sunny portfolio page", "what is the weather today?")
        self.assertEqual(extract_answer(prompt), prompt)

    def test_text_without_markers_is_returned_unchanged(self) -> None:
        self.assertEqual(extract_answer("no markers in here"), "no markers in here")

    def test_structured_entry_point_uses_default(self) -> None:
        self.assertEqual(AnswerExtractor().extract("hello there", "context", default="fallback"), "fallback")


if __name__ == "__main__":
    unittest.main()
