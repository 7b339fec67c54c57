"""
Помощники для словаря определений и ручных терминов.

Словарь ведёт пользователь; здесь только заготовки статей из конкорданса
и операции, возвращающие обновлённые копии статей.
"""

from dataclasses import replace
from typing import List
from ..interfaces.text_processor import ContextEntry, DictionaryEntry, Term, TermType

# Сколько контекстов конкорданса попадает в примеры новой статьи
DEFAULT_EXAMPLES = 3


def create_entry(term: str, contexts: List[ContextEntry], max_examples: int = DEFAULT_EXAMPLES) -> DictionaryEntry:
    """
    Создаёт пустую словарную статью с примерами из конкорданса.

    Args:
        term: Термин
        contexts: Контексты употребления термина
        max_examples: Максимальное число примеров

    Returns:
        Статья без определения и связанных фраз
    """
    return DictionaryEntry(
        term=term,
        definition='',
        related_phrases=[],
        examples=[c.context for c in contexts[:max_examples]],
    )


def set_definition(entry: DictionaryEntry, definition: str) -> DictionaryEntry:
    return replace(entry, definition=definition.strip())


def add_related_phrase(entry: DictionaryEntry, phrase: str) -> DictionaryEntry:
    """
    Добавляет связанную фразу, если её ещё нет.

    Args:
        entry: Словарная статья
        phrase: Связанная фраза

    Returns:
        Обновлённая копия статьи (пустая фраза игнорируется)
    """
    phrase = phrase.strip()
    if not phrase or phrase in entry.related_phrases:
        return entry
    return replace(entry, related_phrases=entry.related_phrases + [phrase])


def remove_related_phrase(entry: DictionaryEntry, phrase: str) -> DictionaryEntry:
    return replace(entry, related_phrases=[p for p in entry.related_phrases if p != phrase])


def make_manual_term(text: str) -> Term:
    """
    Создаёт термин, добавленный пользователем вручную.

    Args:
        text: Текст термина

    Returns:
        Термин типа manual с частотой 1

    Raises:
        ValueError: Пустой текст термина
    """
    text = (text or '').strip()
    if not text:
        raise ValueError("Введите термин")
    return Term(term=text, type=TermType.MANUAL, frequency=1)
