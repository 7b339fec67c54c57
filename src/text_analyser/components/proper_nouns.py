"""
Компонент для поиска имён собственных.

Имя собственное: цепочка смежных токенов с заглавной буквы внутри
предложения. Первый токен предложения учитывается, только если сразу за
ним идёт ещё один заглавный токен («Иван Петров приехал...»). Служебные
слова («Это», «Then», «I») в имя не входят, даже если написаны с заглавной.
"""

from typing import Dict, FrozenSet, Iterable, List, Optional
from ..config import config
from ..interfaces.text_processor import (
    ProperNoun,
    ProperNounCategory,
    ProperNounFinderInterface,
    TokenStream,
)
from .classifier import ProperNounCandidate, ProperNounClassifier
from .stopwords import get_stopwords
from .tokenizer import TokenProcessor
import logging

logger = logging.getLogger(__name__)

# Внутри имени допускается дефис: «Санкт-Петербург», «Жан-Поль»
NAME_SEPARATORS = '-'


def is_capitalized(token: str) -> bool:
    return token[:1].isupper()


class ProperNounFinder(ProperNounFinderInterface):
    """Поиск и классификация имён собственных."""

    def __init__(self,
                 classifier: Optional[ProperNounClassifier] = None,
                 chain_first_token: Optional[bool] = None,
                 tokenizer: Optional[TokenProcessor] = None,
                 stopwords: Optional[Iterable[str]] = None):
        """
        Инициализирует поиск имён собственных.

        Args:
            classifier: Классификатор категорий
            chain_first_token: Учитывать первый токен предложения, если за ним идёт заглавный токен
            tokenizer: Токенизатор
            stopwords: Служебные слова, которые не входят в имя («Это», «Then», «I»)
        """
        self.classifier = classifier or ProperNounClassifier()
        self.chain_first_token = (
            config.is_chain_first_token_enabled() if chain_first_token is None else chain_first_token
        )
        self.tokenizer = tokenizer or TokenProcessor()
        if stopwords is None:
            self.stopwords: FrozenSet[str] = get_stopwords(config.get_stopword_languages())
        else:
            self.stopwords = frozenset(w.lower() for w in stopwords)

    def is_name_word(self, stream: TokenStream, index: int) -> bool:
        """Токен с заглавной буквы, не являющийся служебным словом."""
        token = stream[index]
        if not is_capitalized(token.text):
            return False
        # Аббревиатуры (WHO, IT) не сверяются со служебными словами
        if len(token.text) > 1 and token.text.isupper():
            return True
        return token.lower not in self.stopwords

    def find(self, content: str) -> List[ProperNoun]:
        """
        Находит имена собственные в тексте.

        Args:
            content: Исходный текст

        Returns:
            Имена в порядке первого появления, без повторов по name
        """
        stream = self.tokenizer.tokenize(content)
        seen = set()
        result = []
        for candidate in self.find_candidates(stream):
            if candidate.name in seen:
                continue
            seen.add(candidate.name)
            result.append(ProperNoun(name=candidate.name, category=self.classifier.classify(candidate)))
        logger.debug(f"Найдено имён собственных: {len(result)}")
        return result

    def find_candidates(self, stream: TokenStream) -> List[ProperNounCandidate]:
        """
        Собирает цепочки заглавных токенов по предложениям.

        Args:
            stream: Результат токенизации

        Returns:
            Кандидаты в порядке появления (возможны повторы)
        """
        candidates = []
        for indices in stream.sentence_tokens().values():
            pos = 0
            while pos < len(indices):
                i = indices[pos]
                if not self._starts_candidate(stream, indices, pos):
                    pos += 1
                    continue
                end = pos
                while (end + 1 < len(indices)
                       and self.is_name_word(stream, indices[end + 1])
                       and stream.is_adjacent(indices[end + 1], NAME_SEPARATORS)):
                    end += 1
                last = indices[end]
                preceding = stream[indices[pos - 1]].text if pos > 0 else None
                candidates.append(ProperNounCandidate(
                    name=stream.content[stream[i].start:stream[last].end],
                    words=tuple(stream[j].text for j in indices[pos:end + 1]),
                    preceding_word=preceding,
                ))
                pos = end + 1
        return candidates

    def _starts_candidate(self, stream: TokenStream, indices: List[int], pos: int) -> bool:
        if not self.is_name_word(stream, indices[pos]):
            return False
        if pos > 0:
            return True
        # Первый токен предложения начинает имя только вместе с заглавным соседом
        return (
            self.chain_first_token
            and len(indices) > 1
            and self.is_name_word(stream, indices[1])
            and stream.is_adjacent(indices[1], NAME_SEPARATORS)
        )


def group_by_category(nouns: List[ProperNoun], include_unknown: bool = False) -> Dict[ProperNounCategory, List[ProperNoun]]:
    """
    Группирует имена по категориям в фиксированном порядке категорий.

    Args:
        nouns: Имена собственные
        include_unknown: Включать ли группу unknown

    Returns:
        Непустые группы {категория: имена}
    """
    groups: Dict[ProperNounCategory, List[ProperNoun]] = {}
    for category in ProperNounCategory:
        if category is ProperNounCategory.UNKNOWN and not include_unknown:
            continue
        members = [n for n in nouns if n.category == category]
        if members:
            groups[category] = members
    return groups
