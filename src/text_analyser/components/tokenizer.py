"""
Компонент для токенизации текста.

Отвечает за разбивку текста на токены и предложения с сохранением
исходного регистра и позиций символов.
"""

import re
from bisect import bisect_right
from typing import List
from ..interfaces.text_processor import (
    Sentence,
    Token,
    TokenProcessorInterface,
    TokenStream,
)
import logging

logger = logging.getLogger(__name__)


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации текста на любом алфавите (кириллица, латиница и др.)."""

    # Буквы и цифры любого алфавита, без подчёркивания; комбинируемые
    # диакритики (NFD-текст: «й» = «и» + U+0306) остаются внутри слова
    WORD_PATTERN = re.compile(r'[^\W_](?:[^\W_]|[\u0300-\u036f\u0483-\u0489])*')
    # Конец предложения: серия .!? и, возможно, закрывающие кавычки/скобки
    SENTENCE_END_PATTERN = re.compile(r'[.!?]+["\'»”’)\]]*(?=\s|$)')

    def tokenize(self, content: str) -> TokenStream:
        """
        Разбивает текст на токены и предложения.

        Args:
            content: Исходный текст

        Returns:
            Поток токенов; пустой, если текст пуст или не является строкой
        """
        if not isinstance(content, str) or not content.strip():
            return TokenStream(content=content if isinstance(content, str) else '', tokens=[], sentences=[])

        sentences = self.split_sentences(content)
        starts = [s.start for s in sentences]

        tokens: List[Token] = []
        for match in self.WORD_PATTERN.finditer(content):
            text = match.group()
            if not self.is_valid_token(text):
                continue
            sentence_index = max(0, bisect_right(starts, match.start()) - 1)
            tokens.append(Token(text, match.start(), match.end(), sentence_index))

        logger.debug(f"Токенизация: {len(tokens)} токенов, {len(sentences)} предложений")
        return TokenStream(content=content, tokens=tokens, sentences=sentences)

    def split_sentences(self, content: str) -> List[Sentence]:
        """
        Делит текст на предложения по терминальной пунктуации.

        Сокращения не распознаются: точка после «т.е.» или «США.» завершает
        предложение.

        Args:
            content: Исходный текст

        Returns:
            Список непустых предложений
        """
        spans = []
        pos = 0
        for match in self.SENTENCE_END_PATTERN.finditer(content):
            spans.append((pos, match.end()))
            pos = match.end()
        if pos < len(content):
            spans.append((pos, len(content)))

        sentences: List[Sentence] = []
        for start, end in spans:
            # Убираем пробелы по краям, сохраняя позиции
            while start < end and content[start].isspace():
                start += 1
            while end > start and content[end - 1].isspace():
                end -= 1
            if start < end:
                sentences.append(Sentence(len(sentences), start, end))
        return sentences

    def is_valid_token(self, token: str) -> bool:
        """
        Проверяет, что токен является словом, а не числом.

        Args:
            token: Токен для проверки

        Returns:
            True если токен содержит хотя бы одну букву
        """
        return bool(token) and any(ch.isalpha() for ch in token)
