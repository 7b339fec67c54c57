"""
Тесты для компонента TermExtractor и его стратегий.
"""

from text_analyser.components.term_extractor import TermExtractor, deduplicate_terms
from text_analyser.interfaces.text_processor import Term, TermType


def by_type(terms, term_type):
    return [t.term for t in terms if t.type == term_type]


class TestTermExtractor:
    """Тесты для TermExtractor."""

    def test_extract_words_and_phrases(self, sample_texts):
        """Слова, затем словосочетания, затем аббревиатуры."""
        terms = TermExtractor().extract(sample_texts["tech"])
        assert terms == [
            Term("машинное", TermType.WORD, 2),
            Term("обучение", TermType.WORD, 2),
            Term("машинное обучение", TermType.PHRASE, 2),
        ]

    def test_short_and_rare_words_are_not_terms(self, sample_texts):
        # «кот» встречается дважды, но короче порога; «сидит» встречается один раз
        assert TermExtractor().extract(sample_texts["simple"]) == []

    def test_phrase_edges_are_not_stopwords(self):
        terms = TermExtractor().extract("Анализ и синтез данных. Анализ и синтез данных.")
        assert by_type(terms, TermType.PHRASE) == ["анализ и синтез", "синтез данных"]
        assert by_type(terms, TermType.WORD) == ["анализ", "синтез", "данных"]

    def test_phrase_does_not_cross_punctuation(self):
        terms = TermExtractor().extract("Большие данные, модели. Большие данные, модели.")
        assert by_type(terms, TermType.PHRASE) == ["большие данные"]

    def test_phrase_frequency_counts_occurrences(self):
        content = "Нейронная сеть учится. Нейронная сеть отвечает. Нейронная сеть спит."
        terms = TermExtractor().extract(content)
        assert Term("нейронная сеть", TermType.PHRASE, 3) in terms

    def test_abbreviations_included(self, sample_texts):
        terms = TermExtractor().extract(sample_texts["abbreviations"])
        abbreviations = [t for t in terms if t.type == TermType.ABBREVIATION]
        assert [t.term for t in abbreviations] == ["НАСА", "NASA"]
        assert abbreviations[1].expansion == "National Aeronautics and Space Administration"

    def test_known_abbreviations(self):
        terms = TermExtractor(known_abbreviations=["Linux"]).extract("Мы используем Linux.")
        assert Term("Linux", TermType.ABBREVIATION, 1) in terms

    def test_custom_thresholds(self):
        terms = TermExtractor(word_min_frequency=1, word_min_length=2).extract("Кот спит.")
        assert by_type(terms, TermType.WORD) == ["кот", "спит"]

    def test_engine_never_produces_manual_terms(self, sample_texts):
        for content in sample_texts.values():
            assert all(t.type != TermType.MANUAL for t in TermExtractor().extract(content))

    def test_no_duplicate_term_and_type(self, sample_texts):
        for content in sample_texts.values():
            terms = TermExtractor().extract(content * 2)
            keys = [(t.term, t.type) for t in terms]
            assert len(keys) == len(set(keys))

    def test_empty_input(self):
        assert TermExtractor().extract("") == []
        assert TermExtractor().extract(None) == []


def test_deduplicate_terms_keeps_first():
    terms = [
        Term("ит", TermType.WORD, 3),
        Term("ит", TermType.ABBREVIATION, 1),
        Term("ит", TermType.WORD, 1),
    ]
    assert deduplicate_terms(terms) == terms[:2]
