"""
Компоненты для анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- TokenProcessor - токенизация текста и разбивка на предложения
- FrequencyAnalyzer - подсчёт частотности
- TermExtractor - извлечение терминов (слова, словосочетания, аббревиатуры)
- ProperNounFinder - поиск и классификация имён собственных
- ConcordanceBuilder - контексты употребления термина
- ResultExporter - экспорт результатов
"""

from .tokenizer import TokenProcessor
from .frequency_analyzer import FrequencyAnalyzer, get_frequency_statistics
from .abbreviations import AbbreviationDetector
from .term_extractor import TermExtractor, deduplicate_terms
from .classifier import ClassificationRule, ProperNounCandidate, ProperNounClassifier, DEFAULT_RULES
from .proper_nouns import ProperNounFinder, group_by_category
from .concordance import ConcordanceBuilder
from .exporter import ResultExporter

__all__ = [
    'TokenProcessor',
    'FrequencyAnalyzer',
    'get_frequency_statistics',
    'AbbreviationDetector',
    'TermExtractor',
    'deduplicate_terms',
    'ClassificationRule',
    'ProperNounCandidate',
    'ProperNounClassifier',
    'DEFAULT_RULES',
    'ProperNounFinder',
    'group_by_category',
    'ConcordanceBuilder',
    'ResultExporter',
]
