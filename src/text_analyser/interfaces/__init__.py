"""
Интерфейсы и модели данных для компонентов анализа текста.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .text_processor import (
    TermType,
    ProperNounCategory,
    DocumentCategory,
    Token,
    Sentence,
    TokenStream,
    FrequencyEntry,
    Term,
    ProperNoun,
    ContextEntry,
    DictionaryEntry,
    Document,
    DocumentAnalysis,
    TokenProcessorInterface,
    FrequencyAnalyzerInterface,
    TermExtractorInterface,
    ProperNounFinderInterface,
    ConcordanceBuilderInterface,
    ResultExporterInterface,
)

__all__ = [
    'TermType',
    'ProperNounCategory',
    'DocumentCategory',
    'Token',
    'Sentence',
    'TokenStream',
    'FrequencyEntry',
    'Term',
    'ProperNoun',
    'ContextEntry',
    'DictionaryEntry',
    'Document',
    'DocumentAnalysis',
    'TokenProcessorInterface',
    'FrequencyAnalyzerInterface',
    'TermExtractorInterface',
    'ProperNounFinderInterface',
    'ConcordanceBuilderInterface',
    'ResultExporterInterface',
]
