"""
Тесты публичного API движка: сценарии использования и общие свойства.
"""

from datetime import datetime

import pytest
from text_analyser import (
    Document,
    DocumentCategory,
    FrequencyEntry,
    ProperNoun,
    ProperNounCategory,
    TermType,
    analyze_frequency,
    extract_terms,
    find_contexts,
    find_proper_nouns,
    tokenize,
)
from text_analyser.components.stopwords import get_stopwords


class TestScenarios:
    """Сквозные сценарии на коротких текстах."""

    def test_frequency_table(self):
        assert analyze_frequency("Кот сидит. Кот спит.") == [
            FrequencyEntry("кот", 2),
            FrequencyEntry("сидит", 1),
            FrequencyEntry("спит", 1),
        ]

    def test_abbreviations_with_and_without_expansion(self):
        content = "НАСА объявило проект. NASA (National Aeronautics and Space Administration) работает."
        terms = {t.term: t for t in extract_terms(content) if t.type == TermType.ABBREVIATION}

        assert terms["НАСА"].expansion is None
        assert terms["NASA"].expansion == "National Aeronautics and Space Administration"

    def test_proper_nouns(self):
        content = "Иван Петров приехал в Москву. Иван Петров работал в Яндекс."
        assert find_proper_nouns(content) == [
            ProperNoun("Иван Петров", ProperNounCategory.PERSON),
            ProperNoun("Москву", ProperNounCategory.LOCATION),
            ProperNoun("Яндекс", ProperNounCategory.ORGANIZATION),
        ]

    def test_contexts(self):
        content = "слово один слово два слово три"
        contexts = find_contexts(content, "слово", 2)
        assert len(contexts) == 2
        assert all(c.context == content for c in contexts)

    def test_empty_content(self):
        assert len(tokenize("")) == 0
        assert analyze_frequency("") == []
        assert extract_terms("") == []
        assert find_proper_nouns("") == []
        assert find_contexts("", "слово", 3) == []

    def test_negative_max_contexts_fails_fast(self):
        with pytest.raises(ValueError):
            find_contexts("слово", "слово", -1)


class TestProperties:
    """Свойства, выполняющиеся для любого текста."""

    def test_determinism(self, sample_texts):
        for content in sample_texts.values():
            assert tokenize(content) == tokenize(content)
            assert analyze_frequency(content) == analyze_frequency(content)
            assert extract_terms(content) == extract_terms(content)
            assert find_proper_nouns(content) == find_proper_nouns(content)
            assert find_contexts(content, "кот", 3) == find_contexts(content, "кот", 3)

    def test_frequency_sum(self, sample_texts):
        stopwords = get_stopwords(["ru", "en"])
        for content in sample_texts.values():
            expected = sum(1 for t in tokenize(content) if len(t.text) > 1 and t.lower not in stopwords)
            assert sum(e.frequency for e in analyze_frequency(content)) == expected

    def test_term_dedup(self, sample_texts):
        for content in sample_texts.values():
            keys = [(t.term, t.type) for t in extract_terms(content * 3)]
            assert len(keys) == len(set(keys))

    def test_proper_noun_casing(self, sample_texts):
        for content in sample_texts.values():
            assert all(n.name in content for n in find_proper_nouns(content))

    def test_enum_values_serialize_as_strings(self):
        assert TermType.ABBREVIATION == "abbreviation"
        assert ProperNounCategory.PERSON.value == "person"


class TestDocument:
    """Тесты для модели Document."""

    def test_create(self):
        document = Document.create("  Лекция 1 ", "Кот сидит.", category="linguistics")

        assert document.id.isdigit()
        assert document.title == "Лекция 1"
        assert document.category == "linguistics"
        assert document.source == "manual"
        assert isinstance(datetime.fromisoformat(document.created_at), datetime)

    def test_create_accepts_enum(self):
        document = Document.create("Статья", "текст", category=DocumentCategory.MEDICINE, source="file")
        assert document.category == "medicine"
        assert document.source == "file"

    def test_create_unknown_category(self):
        with pytest.raises(ValueError):
            Document.create("Статья", "текст", category="history")
