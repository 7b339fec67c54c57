"""
Модуль для полного анализа документа

Собирает все артефакты для одного документа:
- Частотную таблицу
- Терминологический указатель
- Именной указатель
- Конкорданс для извлечённых терминов
"""

import time
from typing import Dict, List, Optional, Sequence, Union
from .config import config
from .components.concordance import ConcordanceBuilder
from .components.frequency_analyzer import FrequencyAnalyzer
from .components.proper_nouns import ProperNounFinder
from .components.term_extractor import TermExtractor
from .components.tokenizer import TokenProcessor
from .interfaces.text_processor import ContextEntry, Document, DocumentAnalysis
from .text_processor import TextPreprocessor
import logging

logger = logging.getLogger(__name__)


class DocumentAnalyzer:
    """Оркестратор анализа документа.

    Не хранит результатов между вызовами: каждый вызов analyze_document
    пересчитывает артефакты из текста.
    """

    def __init__(self,
                 strip_html: Optional[bool] = None,
                 max_contexts: Optional[int] = None,
                 max_terms: Optional[int] = None):
        """
        Инициализация анализатора документа

        Args:
            strip_html: Очищать ли текст от HTML перед анализом
            max_contexts: Сколько контекстов строить на термин
            max_terms: Для скольких терминов строить конкорданс по умолчанию
        """
        self.strip_html = config.is_strip_html_enabled() if strip_html is None else strip_html
        self.max_contexts = config.get_max_contexts() if max_contexts is None else max_contexts
        self.max_terms = config.get_concordance_max_terms() if max_terms is None else max_terms

        self.preprocessor = TextPreprocessor()
        self.tokenizer = TokenProcessor()
        self.frequency_analyzer = FrequencyAnalyzer(tokenizer=self.tokenizer)
        self.term_extractor = TermExtractor(frequency_analyzer=self.frequency_analyzer, tokenizer=self.tokenizer)
        self.proper_noun_finder = ProperNounFinder(tokenizer=self.tokenizer)
        self.concordance_builder = ConcordanceBuilder(tokenizer=self.tokenizer)

    def prepare_content(self, content: str) -> str:
        """Возвращает текст, который пойдёт в анализ (исходный не изменяется)."""
        if not self.strip_html:
            return content
        return self.preprocessor.clean_text(content, strip_html=True)

    def analyze_document(self,
                         document: Union[Document, str],
                         concordance_terms: Optional[Sequence[str]] = None,
                         max_contexts: Optional[int] = None) -> DocumentAnalysis:
        """
        Строит все артефакты для документа.

        Args:
            document: Документ или сырой текст
            concordance_terms: Термины для конкорданса (по умолчанию первые
                max_terms извлечённых терминов)
            max_contexts: Сколько контекстов строить на термин

        Returns:
            Результат анализа
        """
        start = time.perf_counter()
        if isinstance(document, Document):
            document_id: Optional[str] = document.id
            content = document.content
        else:
            document_id = None
            content = document

        if not isinstance(content, str) or not content.strip():
            logger.warning(f"Документ {document_id or '<без id>'} пуст, анализ пропущен")
            return DocumentAnalysis(
                document_id=document_id,
                frequency=[],
                terms=[],
                proper_nouns=[],
                concordance={},
                processing_time=time.perf_counter() - start,
            )

        content = self.prepare_content(content)
        logger.info(
            f"Анализ документа {document_id or '<без id>'}: {len(content)} символов, "
            f"алфавит: {self.preprocessor.dominant_alphabet(content)}"
        )

        frequency = self.frequency_analyzer.analyze(content)
        terms = self.term_extractor.extract(content)
        proper_nouns = self.proper_noun_finder.find(content)

        if concordance_terms is None:
            concordance_terms = [t.term for t in terms[:self.max_terms]]
        limit = self.max_contexts if max_contexts is None else max_contexts
        concordance = self.build_concordance(content, concordance_terms, limit)

        elapsed = time.perf_counter() - start
        logger.info(
            f"Анализ завершён за {elapsed:.3f} сек: {len(frequency)} слов, "
            f"{len(terms)} терминов, {len(proper_nouns)} имён"
        )
        return DocumentAnalysis(
            document_id=document_id,
            frequency=frequency,
            terms=terms,
            proper_nouns=proper_nouns,
            concordance=concordance,
            processing_time=elapsed,
        )

    def build_concordance(self, content: str, terms: Sequence[str],
                          max_contexts: int) -> Dict[str, List[ContextEntry]]:
        """
        Строит конкорданс для списка терминов.

        Args:
            content: Текст документа
            terms: Термины
            max_contexts: Сколько контекстов на термин

        Returns:
            Словарь {термин: контексты}; термины без вхождений пропускаются
        """
        concordance: Dict[str, List[ContextEntry]] = {}
        for term in terms:
            if term in concordance:
                continue
            contexts = self.concordance_builder.find_contexts(content, term, max_contexts)
            if contexts:
                concordance[term] = contexts
        return concordance
