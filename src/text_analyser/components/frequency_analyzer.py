"""
Компонент для анализа частотности слов.

Отвечает за подсчёт частоты появления слов и построение
ранжированной частотной таблицы.
"""

from collections import Counter
from typing import Dict, FrozenSet, Iterable, List, Optional
from ..config import config
from ..interfaces.text_processor import (
    FrequencyAnalyzerInterface,
    FrequencyEntry,
    TokenStream,
)
from .stopwords import get_stopwords
from .tokenizer import TokenProcessor
import logging

logger = logging.getLogger(__name__)


class FrequencyAnalyzer(FrequencyAnalyzerInterface):
    """Анализатор частотности слов."""

    def __init__(self,
                 min_word_length: Optional[int] = None,
                 stopwords: Optional[Iterable[str]] = None,
                 tokenizer: Optional[TokenProcessor] = None):
        """
        Инициализирует анализатор частотности.

        Args:
            min_word_length: Минимальная длина учитываемого слова
            stopwords: Стоп-слова (по умолчанию для языков из конфигурации)
            tokenizer: Токенизатор
        """
        self.min_word_length = min_word_length or config.get_min_word_length()
        if stopwords is None:
            self.stopwords: FrozenSet[str] = get_stopwords(config.get_stopword_languages())
        else:
            self.stopwords = frozenset(w.lower() for w in stopwords)
        self.tokenizer = tokenizer or TokenProcessor()

    def is_countable(self, word: str) -> bool:
        """
        Проверяет, учитывается ли слово в частотном словаре.

        Args:
            word: Слово в нижнем регистре

        Returns:
            True если слово достаточно длинное и не является стоп-словом
        """
        return len(word) >= self.min_word_length and word not in self.stopwords

    def analyze(self, content: str) -> List[FrequencyEntry]:
        """
        Строит частотную таблицу текста.

        Args:
            content: Исходный текст

        Returns:
            Записи по убыванию частоты; при равенстве в порядке первого появления
        """
        return self.analyze_stream(self.tokenizer.tokenize(content))

    def analyze_stream(self, stream: TokenStream) -> List[FrequencyEntry]:
        """Строит частотную таблицу по уже токенизированному тексту."""
        counts = self.count_frequency(t.lower for t in stream)
        # Counter хранит порядок вставки, sorted стабилен: равные частоты
        # остаются в порядке первого появления
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        entries = [FrequencyEntry(word=word, frequency=freq) for word, freq in ranked]
        logger.debug(f"Частотный анализ: {len(entries)} уникальных слов")
        return entries

    def count_frequency(self, words: Iterable[str]) -> Counter:
        """
        Подсчитывает частоту появления слов.

        Args:
            words: Слова в нижнем регистре

        Returns:
            Словарь {слово: частота} в порядке первого появления
        """
        return Counter(w for w in words if self.is_countable(w))


def get_frequency_statistics(entries: List[FrequencyEntry]) -> Dict[str, int]:
    """
    Возвращает общую статистику частотной таблицы.

    Args:
        entries: Частотная таблица

    Returns:
        Словарь со статистикой
    """
    if not entries:
        return {'total_words': 0, 'unique_words': 0, 'max_frequency': 0}
    return {
        'total_words': sum(e.frequency for e in entries),
        'unique_words': len(entries),
        'max_frequency': max(e.frequency for e in entries),
    }


def relative_frequency(entry: FrequencyEntry, entries: List[FrequencyEntry]) -> float:
    """Доля частоты слова от максимальной частоты в таблице (0..1)."""
    top = entries[0].frequency if entries else 0
    return entry.frequency / top if top else 0.0
