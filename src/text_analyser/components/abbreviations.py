"""
Компонент для поиска аббревиатур и их расшифровок.

Расшифровка ищется в пределах предложения рядом с аббревиатурой:
- «NASA (National Aeronautics and Space Administration)»
- «National Aeronautics and Space Administration (NASA)»
- «ООН — Организация Объединённых Наций»
Фраза принимается, если первые буквы её слов (всех или только значимых)
совпадают с буквами аббревиатуры. Если подходящих вариантов нет или их
несколько разных, расшифровка остаётся пустой.
"""

import re
from typing import Dict, FrozenSet, Iterable, List, Optional, Set
from ..interfaces.text_processor import Term, TermType, TokenStream
from .stopwords import get_stopwords
from .tokenizer import TokenProcessor
import logging

logger = logging.getLogger(__name__)

DASHES = '—–-'
_PHRASE_STOP = r',;:()\[\]—–!?.'

_AFTER_PARENS = re.compile(r'\s*\(([^()]+)\)')
_AFTER_DASH = re.compile(r'\s*[' + DASHES + r']\s*([^' + _PHRASE_STOP + r']+)')
_BEFORE_PARENS = re.compile(r'\(([^()]+)\)\s*$')
_OPEN_PAREN = re.compile(r'\(\s*$')
_CLOSE_PAREN = re.compile(r'\s*\)')
_BEFORE_DASH = re.compile(r'([^' + _PHRASE_STOP + r']+?)\s*[' + DASHES + r']\s*$')


class AbbreviationDetector:
    """Детектор аббревиатур с поиском расшифровок."""

    # Смешанный регистр (IoT, SaaS, PhD) считается аббревиатурой только для коротких токенов
    MIXED_CASE_MAX_LENGTH = 6

    def __init__(self,
                 known_abbreviations: Optional[Iterable[str]] = None,
                 stopwords: Optional[FrozenSet[str]] = None):
        self.known_abbreviations = frozenset(known_abbreviations or ())
        self.stopwords = stopwords if stopwords is not None else get_stopwords(('ru', 'en'))

    def is_abbreviation(self, token: str) -> bool:
        """
        Проверяет, похож ли токен на аббревиатуру.

        Args:
            token: Токен в исходном регистре

        Returns:
            True для «NASA», «МГУ», «MP3», «IoT» и известных аббревиатур
        """
        if token in self.known_abbreviations:
            return True
        letters = [ch for ch in token if ch.isalpha()]
        upper = sum(1 for ch in letters if ch.isupper())
        if len(letters) >= 2 and upper == len(letters):
            return True
        # Шаблон со смешанным регистром: не меньше двух заглавных, не Title-case
        return (
            upper >= 2
            and len(token) <= self.MIXED_CASE_MAX_LENGTH
            and not token[1:].islower()
        )

    def extract(self, stream: TokenStream) -> List[Term]:
        """
        Извлекает аббревиатуры из потока токенов.

        Args:
            stream: Результат токенизации

        Returns:
            Термины типа abbreviation в порядке первого появления
        """
        counts: Dict[str, int] = {}
        expansions: Dict[str, Set[str]] = {}
        for index, token in enumerate(stream):
            if not self.is_abbreviation(token.text):
                continue
            counts[token.text] = counts.get(token.text, 0) + 1
            expansions.setdefault(token.text, set()).update(
                self.find_expansions(stream, index)
            )

        terms = []
        for abbr, freq in counts.items():
            found = expansions.get(abbr, set())
            expansion = next(iter(found)) if len(found) == 1 else None
            if len(found) > 1:
                logger.debug(f"Неоднозначная расшифровка {abbr}: {sorted(found)}")
            terms.append(Term(term=abbr, type=TermType.ABBREVIATION, frequency=freq, expansion=expansion))
        return terms

    def find_expansions(self, stream: TokenStream, index: int) -> Set[str]:
        """
        Ищет расшифровки для одного вхождения аббревиатуры.

        Args:
            stream: Результат токенизации
            index: Индекс токена-аббревиатуры

        Returns:
            Множество найденных расшифровок (обычно 0 или 1 элемент)
        """
        token = stream[index]
        letters = [ch.lower() for ch in token.text if ch.isalpha()]
        sentence = stream.sentences[token.sentence_index]
        content = stream.content
        before = content[sentence.start:token.start]
        after = content[token.end:sentence.end]

        found: Set[str] = set()

        # ABBR (Full Phrase)
        m = _AFTER_PARENS.match(after)
        if m and self.matches(letters, m.group(1)):
            found.add(m.group(1))

        # ABBR — Full Phrase, ...
        m = _AFTER_DASH.match(after)
        if m:
            phrase = self._matching_prefix(letters, m.group(1))
            if phrase:
                found.add(phrase)

        # Full Phrase (ABBR)
        if _OPEN_PAREN.search(before) and _CLOSE_PAREN.match(after):
            head = _OPEN_PAREN.sub('', before)
            phrase = self._matching_suffix(letters, head)
            if phrase:
                found.add(phrase)
        else:
            # (Full Phrase) ABBR
            m = _BEFORE_PARENS.search(before)
            if m and self.matches(letters, m.group(1)):
                found.add(m.group(1))

            # Full Phrase — ABBR
            m = _BEFORE_DASH.search(before)
            if m:
                phrase = self._matching_suffix(letters, m.group(1))
                if phrase:
                    found.add(phrase)

        return {' '.join(p.split()) for p in found}

    def matches(self, letters: List[str], phrase: str) -> bool:
        """
        Проверяет, соответствует ли фраза буквам аббревиатуры.

        Args:
            letters: Буквы аббревиатуры в нижнем регистре
            phrase: Кандидат в расшифровку

        Returns:
            True если совпадают первые буквы всех слов или только значимых слов
        """
        words = [m.group() for m in TokenProcessor.WORD_PATTERN.finditer(phrase)
                 if any(ch.isalpha() for ch in m.group())]
        if len(words) < 2 or not letters:
            return False
        initials = [w[0].lower() for w in words]
        if initials == letters:
            return True
        significant = [w[0].lower() for w in words if w.lower() not in self.stopwords]
        return significant == letters

    def _matching_prefix(self, letters: List[str], text: str) -> Optional[str]:
        """Кратчайшее начало text, совпадающее с аббревиатурой."""
        spans = list(TokenProcessor.WORD_PATTERN.finditer(text))
        for k in range(2, len(spans) + 1):
            candidate = text[spans[0].start():spans[k - 1].end()]
            if self.matches(letters, candidate):
                return candidate
        return None

    def _matching_suffix(self, letters: List[str], text: str) -> Optional[str]:
        """Кратчайший конец text, совпадающий с аббревиатурой."""
        spans = list(TokenProcessor.WORD_PATTERN.finditer(text))
        for k in range(2, len(spans) + 1):
            candidate = text[spans[-k].start():spans[-1].end()]
            if self.matches(letters, candidate):
                return candidate
        return None
