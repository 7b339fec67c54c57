"""
Тесты для компонента AbbreviationDetector.
"""

import pytest
from text_analyser.components.abbreviations import AbbreviationDetector
from text_analyser.components.tokenizer import TokenProcessor
from text_analyser.interfaces.text_processor import Term, TermType


def extract(content, **kwargs):
    return AbbreviationDetector(**kwargs).extract(TokenProcessor().tokenize(content))


class TestIsAbbreviation:
    """Распознавание токенов-аббревиатур."""

    @pytest.mark.parametrize("token", ["NASA", "МГУ", "ООН", "MP3", "IoT", "SaaS", "ИИ"])
    def test_abbreviations(self, token):
        assert AbbreviationDetector().is_abbreviation(token) is True

    @pytest.mark.parametrize("token", ["Python", "кот", "A", "Я", "PostgreSQL", "Москва"])
    def test_not_abbreviations(self, token):
        assert AbbreviationDetector().is_abbreviation(token) is False

    def test_known_abbreviations(self):
        detector = AbbreviationDetector(known_abbreviations=["Linux"])
        assert detector.is_abbreviation("Linux") is True


class TestExpansions:
    """Поиск расшифровок рядом с аббревиатурой."""

    def test_expansion_in_parentheses_after(self, sample_texts):
        terms = extract(sample_texts["abbreviations"])
        assert terms == [
            Term("НАСА", TermType.ABBREVIATION, 1, None),
            Term("NASA", TermType.ABBREVIATION, 1, "National Aeronautics and Space Administration"),
        ]

    def test_expansion_before_parentheses(self):
        terms = extract("Всемирная организация здравоохранения (ВОЗ) опубликовала отчёт.")
        assert terms == [
            Term("ВОЗ", TermType.ABBREVIATION, 1, "Всемирная организация здравоохранения"),
        ]

    def test_expansion_after_dash(self):
        terms = extract("ООН — Организация Объединённых Наций, основана в 1945 году.")
        assert terms[0].term == "ООН"
        assert terms[0].expansion == "Организация Объединённых Наций"

    def test_expansion_found_once_applies_to_all_occurrences(self, sample_texts):
        terms = extract(sample_texts["english"])
        who = [t for t in terms if t.term == "WHO"]
        assert who == [Term("WHO", TermType.ABBREVIATION, 2, "World Health Organization")]

    def test_ambiguous_expansion_is_left_empty(self):
        terms = extract("ИИ (искусственный интеллект) и ИИ (игровой интерфейс) различаются.")
        assert terms == [Term("ИИ", TermType.ABBREVIATION, 2, None)]

    def test_phrase_with_wrong_initials_is_ignored(self):
        terms = extract("NASA (очень большое агентство) работает.")
        assert terms[0].expansion is None

    def test_expansion_not_searched_across_sentences(self):
        terms = extract("Всемирная организация здравоохранения. ВОЗ работает.")
        assert terms[0].expansion is None

    def test_matches(self):
        detector = AbbreviationDetector()
        letters = ["n", "a", "s", "a"]
        assert detector.matches(letters, "National Aeronautics and Space Administration") is True
        assert detector.matches(letters, "Nothing at all") is False
        # Нужно хотя бы два слова
        assert detector.matches(["a"], "Alpha") is False

    def test_empty_stream(self):
        assert extract("") == []
