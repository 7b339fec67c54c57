"""
Text Analyser - движок для изучения корпуса текстов

Этот модуль предоставляет инструменты для:
- Токенизации русских и английских текстов
- Построения частотных таблиц
- Извлечения терминов, словосочетаний и аббревиатур
- Поиска и классификации имён собственных
- Построения конкорданса и заготовок словарных статей
- Создания Excel отчётов
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .config import config
from .engine import (
    analyze_frequency,
    extract_terms,
    find_contexts,
    find_proper_nouns,
    tokenize,
)
from .document_analyzer import DocumentAnalyzer
from .text_processor import TextPreprocessor
from .interfaces.text_processor import (
    ContextEntry,
    DictionaryEntry,
    Document,
    DocumentAnalysis,
    DocumentCategory,
    FrequencyEntry,
    ProperNoun,
    ProperNounCategory,
    Term,
    TermType,
    Token,
    TokenStream,
)

__all__ = [
    "config",
    "tokenize",
    "analyze_frequency",
    "extract_terms",
    "find_proper_nouns",
    "find_contexts",
    "DocumentAnalyzer",
    "TextPreprocessor",
    "ContextEntry",
    "DictionaryEntry",
    "Document",
    "DocumentAnalysis",
    "DocumentCategory",
    "FrequencyEntry",
    "ProperNoun",
    "ProperNounCategory",
    "Term",
    "TermType",
    "Token",
    "TokenStream",
]
