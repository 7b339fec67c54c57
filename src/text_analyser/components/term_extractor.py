"""
Компонент для извлечения терминов.

Объединяет три стратегии поиска кандидатов:
- WordTermStrategy - частотные слова
- PhraseTermStrategy - повторяющиеся словосочетания из 2-3 слов
- AbbreviationDetector - аббревиатуры с расшифровками
"""

from typing import Dict, List, Optional, Tuple
from ..config import config
from ..interfaces.text_processor import (
    Term,
    TermExtractorInterface,
    TermType,
    TokenStream,
)
from .abbreviations import AbbreviationDetector
from .frequency_analyzer import FrequencyAnalyzer
from .tokenizer import TokenProcessor
import logging

logger = logging.getLogger(__name__)


class WordTermStrategy:
    """Слова-термины: частые и достаточно длинные слова частотной таблицы."""

    def __init__(self, frequency_analyzer: FrequencyAnalyzer,
                 min_frequency: int = 2, min_length: int = 3):
        self.frequency_analyzer = frequency_analyzer
        self.min_frequency = min_frequency
        self.min_length = min_length

    def extract(self, stream: TokenStream) -> List[Term]:
        return [
            Term(term=entry.word, type=TermType.WORD, frequency=entry.frequency)
            for entry in self.frequency_analyzer.analyze_stream(stream)
            if entry.frequency >= self.min_frequency and len(entry.word) > self.min_length
        ]


class PhraseTermStrategy:
    """Словосочетания: повторяющиеся n-граммы внутри одного предложения."""

    def __init__(self, frequency_analyzer: FrequencyAnalyzer,
                 min_frequency: int = 2, max_words: int = 3):
        self.frequency_analyzer = frequency_analyzer
        self.min_frequency = min_frequency
        self.max_words = max_words

    def _is_edge_word(self, word: str) -> bool:
        """Слово может начинать или завершать словосочетание."""
        return self.frequency_analyzer.is_countable(word)

    def extract(self, stream: TokenStream) -> List[Term]:
        counts: Dict[Tuple[str, ...], int] = {}
        tokens = stream.tokens
        for start in range(len(tokens)):
            if not self._is_edge_word(tokens[start].lower):
                continue
            for size in range(2, self.max_words + 1):
                end = start + size
                if end > len(tokens):
                    break
                # Словосочетание не пересекает пунктуацию и границы предложений
                if not stream.is_adjacent(end - 1):
                    break
                gram = tuple(t.lower for t in tokens[start:end])
                if not self._is_edge_word(gram[-1]):
                    continue
                counts[gram] = counts.get(gram, 0) + 1

        # Порядок: по убыванию частоты, затем по первому появлению
        ranked = sorted(
            ((gram, freq) for gram, freq in counts.items() if freq >= self.min_frequency),
            key=lambda item: item[1],
            reverse=True,
        )
        return [Term(term=' '.join(gram), type=TermType.PHRASE, frequency=freq) for gram, freq in ranked]


class TermExtractor(TermExtractorInterface):
    """Извлекатель терминов."""

    def __init__(self,
                 word_min_frequency: Optional[int] = None,
                 word_min_length: Optional[int] = None,
                 phrase_min_frequency: Optional[int] = None,
                 phrase_max_words: Optional[int] = None,
                 known_abbreviations: Optional[List[str]] = None,
                 frequency_analyzer: Optional[FrequencyAnalyzer] = None,
                 tokenizer: Optional[TokenProcessor] = None):
        """
        Инициализирует извлекатель терминов.

        Args:
            word_min_frequency: Минимальная частота слова-термина
            word_min_length: Слово-термин должно быть длиннее этого значения
            phrase_min_frequency: Минимальное число повторов словосочетания
            phrase_max_words: Максимальная длина словосочетания в словах
            known_abbreviations: Дополнительные известные аббревиатуры
            frequency_analyzer: Анализатор частотности (фильтр слов)
            tokenizer: Токенизатор
        """
        self.tokenizer = tokenizer or TokenProcessor()
        self.frequency_analyzer = frequency_analyzer or FrequencyAnalyzer(tokenizer=self.tokenizer)
        self.word_strategy = WordTermStrategy(
            self.frequency_analyzer,
            min_frequency=word_min_frequency or config.get_word_term_min_frequency(),
            min_length=config.get_word_term_min_length() if word_min_length is None else word_min_length,
        )
        self.phrase_strategy = PhraseTermStrategy(
            self.frequency_analyzer,
            min_frequency=phrase_min_frequency or config.get_phrase_min_frequency(),
            max_words=phrase_max_words or config.get_phrase_max_words(),
        )
        if known_abbreviations is None:
            known_abbreviations = config.get_known_abbreviations()
        self.abbreviation_detector = AbbreviationDetector(
            known_abbreviations=known_abbreviations,
            stopwords=self.frequency_analyzer.stopwords,
        )

    def extract(self, content: str) -> List[Term]:
        """
        Извлекает термины из текста.

        Args:
            content: Исходный текст

        Returns:
            Слова, затем словосочетания, затем аббревиатуры; без повторов по (term, type)
        """
        stream = self.tokenizer.tokenize(content)
        if not stream.tokens:
            return []

        candidates = (
            self.word_strategy.extract(stream)
            + self.phrase_strategy.extract(stream)
            + self.abbreviation_detector.extract(stream)
        )
        terms = deduplicate_terms(candidates)
        logger.debug(f"Извлечено терминов: {len(terms)}")
        return terms


def deduplicate_terms(terms: List[Term]) -> List[Term]:
    """
    Убирает повторы по паре (term, type), сохраняя первое вхождение.

    Args:
        terms: Кандидаты в термины

    Returns:
        Термины без повторов в исходном порядке
    """
    seen = set()
    result = []
    for term in terms:
        key = (term.term, term.type)
        if key in seen:
            continue
        seen.add(key)
        result.append(term)
    return result
