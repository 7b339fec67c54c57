"""
Тесты для помощников словаря определений.
"""

import pytest
from text_analyser.components.glossary import (
    DEFAULT_EXAMPLES,
    add_related_phrase,
    create_entry,
    make_manual_term,
    remove_related_phrase,
    set_definition,
)
from text_analyser.interfaces.text_processor import ContextEntry, DictionaryEntry, Term, TermType


def test_create_entry_takes_first_examples():
    contexts = [ContextEntry(f"Контекст {i}.") for i in range(5)]
    entry = create_entry("термин", contexts)

    assert entry == DictionaryEntry(
        term="термин",
        definition="",
        related_phrases=[],
        examples=["Контекст 0.", "Контекст 1.", "Контекст 2."],
    )
    assert len(entry.examples) == DEFAULT_EXAMPLES


def test_create_entry_without_contexts():
    assert create_entry("термин", []).examples == []


def test_set_definition_returns_copy():
    entry = create_entry("кот", [])
    updated = set_definition(entry, "  домашнее животное  ")

    assert updated.definition == "домашнее животное"
    assert entry.definition == ""


def test_related_phrases():
    entry = create_entry("кот", [])
    entry = add_related_phrase(entry, "кошка")
    entry = add_related_phrase(entry, "котёнок")
    entry = add_related_phrase(entry, "кошка")
    entry = add_related_phrase(entry, "   ")
    assert entry.related_phrases == ["кошка", "котёнок"]

    entry = remove_related_phrase(entry, "кошка")
    assert entry.related_phrases == ["котёнок"]


def test_make_manual_term():
    assert make_manual_term("  нейросеть ") == Term("нейросеть", TermType.MANUAL, 1)


@pytest.mark.parametrize("text", ["", "   ", None])
def test_make_manual_term_empty(text):
    with pytest.raises(ValueError):
        make_manual_term(text)
