"""
Компонент для построения конкорданса: контекстов употребления термина.

Контекст: предложение с вхождением термина плюс соседние предложения,
обрезанные симметрично вокруг вхождения до максимальной длины.
"""

from typing import List, Optional, Tuple
from ..config import config
from ..interfaces.text_processor import (
    ConcordanceBuilderInterface,
    ContextEntry,
    TokenStream,
)
from .tokenizer import TokenProcessor
import logging

logger = logging.getLogger(__name__)

ELLIPSIS = '…'


def collapse_whitespace(text: str) -> str:
    return ' '.join(text.split())


class ConcordanceBuilder(ConcordanceBuilderInterface):
    """Построитель конкорданса."""

    def __init__(self,
                 max_snippet_length: Optional[int] = None,
                 window_sentences: Optional[int] = None,
                 tokenizer: Optional[TokenProcessor] = None):
        """
        Инициализирует построитель конкорданса.

        Args:
            max_snippet_length: Максимальная длина контекста в символах
            window_sentences: Сколько предложений брать до и после вхождения
            tokenizer: Токенизатор
        """
        self.max_snippet_length = max_snippet_length or config.get_max_snippet_length()
        self.window_sentences = config.get_window_sentences() if window_sentences is None else window_sentences
        self.tokenizer = tokenizer or TokenProcessor()

    def find_contexts(self, content: str, term: str, max_contexts: int) -> List[ContextEntry]:
        """
        Находит контексты употребления термина.

        Args:
            content: Исходный текст
            term: Слово или словосочетание (регистр не важен)
            max_contexts: Максимальное число контекстов

        Returns:
            Контексты в порядке появления; пустой список, если термин не найден

        Raises:
            TypeError: max_contexts не целое число
            ValueError: max_contexts отрицательно
        """
        if isinstance(max_contexts, bool) or not isinstance(max_contexts, int):
            raise TypeError(f"max_contexts должно быть целым числом, получено: {max_contexts!r}")
        if max_contexts < 0:
            raise ValueError(f"max_contexts не может быть отрицательным: {max_contexts}")
        if max_contexts == 0 or not isinstance(term, str):
            return []

        words = [t.lower for t in self.tokenizer.tokenize(term)]
        if not words:
            return []

        stream = self.tokenizer.tokenize(content)
        contexts = []
        for first, last in self.find_occurrences(stream, words):
            contexts.append(ContextEntry(context=self._build_snippet(stream, first, last)))
            if len(contexts) >= max_contexts:
                break

        logger.debug(f"Конкорданс '{term}': {len(contexts)} контекстов")
        return contexts

    def find_occurrences(self, stream: TokenStream, words: List[str]) -> List[Tuple[int, int]]:
        """
        Ищет вхождения последовательности слов в потоке токенов.

        Args:
            stream: Результат токенизации
            words: Слова термина в нижнем регистре

        Returns:
            Пары (индекс первого токена, индекс последнего токена)
        """
        n = len(words)
        tokens = stream.tokens
        occurrences = []
        for i in range(len(tokens) - n + 1):
            if any(tokens[i + k].lower != words[k] for k in range(n)):
                continue
            # Фраза должна идти подряд, без пунктуации между словами
            if all(stream.is_adjacent(i + k, '-') for k in range(1, n)):
                occurrences.append((i, i + n - 1))
        return occurrences

    def _build_snippet(self, stream: TokenStream, first: int, last: int) -> str:
        content = stream.content
        sentences = stream.sentences
        match_start, match_end = stream[first].start, stream[last].end

        lo = max(0, stream[first].sentence_index - self.window_sentences)
        hi = min(len(sentences) - 1, stream[last].sentence_index + self.window_sentences)
        start, end = sentences[lo].start, sentences[hi].end

        if end - start <= self.max_snippet_length:
            return collapse_whitespace(content[start:end])
        return self._trim_around_match(content, start, end, match_start, match_end)

    def _trim_around_match(self, content: str, start: int, end: int,
                           match_start: int, match_end: int) -> str:
        """Обрезает окно [start, end) симметрично вокруг вхождения."""
        budget = self.max_snippet_length - 2 * len(ELLIPSIS)
        match_len = match_end - match_start
        if match_len >= budget:
            return collapse_whitespace(content[match_start:match_end])[:self.max_snippet_length]

        remaining = budget - match_len
        left = remaining // 2
        right = remaining - left

        win_start = max(start, match_start - left)
        win_end = min(end, match_end + right)
        # Неиспользованный запас одной стороны отдаём другой
        unused_left = left - (match_start - win_start)
        unused_right = right - (win_end - match_end)
        win_end = min(end, win_end + unused_left)
        win_start = max(start, win_start - unused_right)

        # Не режем слова посередине
        if win_start > start:
            while win_start < match_start and not content[win_start - 1].isspace():
                win_start += 1
        if win_end < end:
            while win_end > match_end and not content[win_end].isspace():
                win_end -= 1

        snippet = collapse_whitespace(content[win_start:win_end])
        if win_start > start:
            snippet = ELLIPSIS + snippet
        if win_end < end:
            snippet = snippet + ELLIPSIS
        return snippet
