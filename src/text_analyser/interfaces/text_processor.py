"""
Модели данных и абстрактные интерфейсы компонентов анализа текста.

Определяет значения, которые порождает движок (токены, частоты, термины,
имена собственные, контексты), и контракты компонентов, обеспечивая
единообразный API и возможность замены реализаций.
"""

import unicodedata
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, List, NamedTuple, Optional, Union


class TermType(str, Enum):
    """Источник термина в терминологическом указателе."""
    WORD = 'word'
    PHRASE = 'phrase'
    ABBREVIATION = 'abbreviation'
    # Зарезервировано для терминов, добавленных вручную; движок их не порождает
    MANUAL = 'manual'


class ProperNounCategory(str, Enum):
    """Категория имени собственного."""
    PERSON = 'person'
    LOCATION = 'location'
    ORGANIZATION = 'organization'
    SOFTWARE = 'software'
    UNKNOWN = 'unknown'


class DocumentCategory(str, Enum):
    INFORMATICS = 'informatics'
    LINGUISTICS = 'linguistics'
    MEDICINE = 'medicine'


class Token(NamedTuple):
    """Токен с позицией в исходном тексте."""
    text: str
    start: int  # Позиция в оригинальном тексте
    end: int
    sentence_index: int

    @property
    def lower(self) -> str:
        # Слова в NFD (й = и + U+0306) сравниваются с NFC-формой
        return unicodedata.normalize('NFC', self.text).lower()


class Sentence(NamedTuple):
    """Границы предложения в исходном тексте."""
    index: int
    start: int
    end: int

    def text(self, content: str) -> str:
        return content[self.start:self.end]


@dataclass(frozen=True)
class TokenStream:
    """Результат токенизации: исходный текст, токены и предложения.

    Ведёт себя как последовательность токенов.
    """
    content: str
    tokens: List[Token]
    sentences: List[Sentence]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index):
        return self.tokens[index]

    def gap_before(self, index: int) -> str:
        """Текст между токеном index и предыдущим токеном."""
        if index <= 0:
            return self.content[:self.tokens[0].start] if self.tokens else ''
        return self.content[self.tokens[index - 1].end:self.tokens[index].start]

    def is_adjacent(self, index: int, separators: str = '') -> bool:
        """Проверяет, что токен index непосредственно следует за предыдущим.

        Токены смежны, если они в одном предложении и между ними только
        пробельные символы (и, опционально, символы из separators).
        """
        if index <= 0 or index >= len(self.tokens):
            return False
        prev, cur = self.tokens[index - 1], self.tokens[index]
        if prev.sentence_index != cur.sentence_index:
            return False
        gap = self.gap_before(index)
        stripped = gap.strip()
        if not stripped:
            return True
        return bool(separators) and len(stripped) == 1 and stripped in separators

    def sentence_tokens(self) -> Dict[int, List[int]]:
        """Индексы токенов, сгруппированные по номеру предложения."""
        grouped: Dict[int, List[int]] = {}
        for i, token in enumerate(self.tokens):
            grouped.setdefault(token.sentence_index, []).append(i)
        return grouped


@dataclass(frozen=True)
class FrequencyEntry:
    """Строка частотной таблицы."""
    word: str
    frequency: int


@dataclass(frozen=True)
class Term:
    """Термин терминологического указателя."""
    term: str
    type: TermType
    frequency: int
    expansion: Optional[str] = None


@dataclass(frozen=True)
class ProperNoun:
    """Имя собственное с категорией."""
    name: str
    category: ProperNounCategory = ProperNounCategory.UNKNOWN


@dataclass(frozen=True)
class ContextEntry:
    """Контекст употребления термина."""
    context: str
    source: Optional[str] = None


@dataclass
class DictionaryEntry:
    """Словарная статья, которую пользователь дополняет вручную."""
    term: str
    definition: str = ''
    related_phrases: List[str] = field(default_factory=list)
    examples: List[str] = field(default_factory=list)


@dataclass
class Document:
    """Документ корпуса. Хранится внешним хранилищем."""
    id: str
    title: str
    content: str
    category: str = DocumentCategory.INFORMATICS.value
    source: str = 'manual'
    created_at: str = ''

    @classmethod
    def create(cls, title: str, content: str,
               category: Union[str, DocumentCategory] = DocumentCategory.INFORMATICS,
               source: str = 'manual') -> 'Document':
        """
        Создаёт документ с идентификатором и датой создания.

        Args:
            title: Заголовок
            content: Текст документа
            category: Категория (informatics, linguistics, medicine)
            source: Источник текста ('manual' или 'file')

        Returns:
            Новый документ
        """
        now = datetime.now()
        return cls(
            id=str(int(now.timestamp() * 1000)),
            title=title.strip(),
            content=content,
            category=DocumentCategory(category).value,
            source=source,
            created_at=now.isoformat(),
        )


@dataclass
class DocumentAnalysis:
    """Результат полного анализа документа."""
    document_id: Optional[str]
    frequency: List[FrequencyEntry]
    terms: List[Term]
    proper_nouns: List[ProperNoun]
    concordance: Dict[str, List[ContextEntry]]
    processing_time: float


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, content: str) -> TokenStream:
        """Разбивает текст на токены и предложения."""
        pass


class FrequencyAnalyzerInterface(ABC):
    """Интерфейс для анализа частотности слов."""

    @abstractmethod
    def analyze(self, content: str) -> List[FrequencyEntry]:
        """Строит ранжированную частотную таблицу."""
        pass


class TermExtractorInterface(ABC):
    """Интерфейс для извлечения терминов."""

    @abstractmethod
    def extract(self, content: str) -> List[Term]:
        """Извлекает термины из текста."""
        pass


class ProperNounFinderInterface(ABC):
    """Интерфейс для поиска имён собственных."""

    @abstractmethod
    def find(self, content: str) -> List[ProperNoun]:
        """Находит и классифицирует имена собственные."""
        pass


class ConcordanceBuilderInterface(ABC):
    """Интерфейс для построения конкорданса."""

    @abstractmethod
    def find_contexts(self, content: str, term: str, max_contexts: int) -> List[ContextEntry]:
        """Возвращает контексты употребления термина."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта результатов."""

    @abstractmethod
    def export_to_excel(self, result: DocumentAnalysis, filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует результат в Excel формат."""
        pass

    @abstractmethod
    def export_to_csv(self, result: DocumentAnalysis, filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует частотную таблицу в CSV."""
        pass

    @abstractmethod
    def export_to_json(self, result: DocumentAnalysis, filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует результат в JSON формат."""
        pass
