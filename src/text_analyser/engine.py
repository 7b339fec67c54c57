"""
Публичный API движка анализа текста.

Каждая функция является чистым вычислением над переданным текстом: компоненты
создаются заново на каждый вызов, состояние между вызовами не хранится.
"""

from typing import List
from .components.concordance import ConcordanceBuilder
from .components.frequency_analyzer import FrequencyAnalyzer
from .components.proper_nouns import ProperNounFinder
from .components.term_extractor import TermExtractor
from .components.tokenizer import TokenProcessor
from .interfaces.text_processor import (
    ContextEntry,
    FrequencyEntry,
    ProperNoun,
    Term,
    TokenStream,
)


def tokenize(content: str) -> TokenStream:
    """Разбивает текст на токены и предложения."""
    return TokenProcessor().tokenize(content)


def analyze_frequency(content: str) -> List[FrequencyEntry]:
    """Частотная таблица слов без стоп-слов."""
    return FrequencyAnalyzer().analyze(content)


def extract_terms(content: str) -> List[Term]:
    """Терминологический указатель: слова, словосочетания и аббревиатуры."""
    return TermExtractor().extract(content)


def find_proper_nouns(content: str) -> List[ProperNoun]:
    """Именной указатель с категориями."""
    return ProperNounFinder().find(content)


def find_contexts(content: str, term: str, max_contexts: int) -> List[ContextEntry]:
    """Контексты употребления термина, не более max_contexts."""
    return ConcordanceBuilder().find_contexts(content, term, max_contexts)
