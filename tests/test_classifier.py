"""
Тесты для классификатора имён собственных.
"""

import pytest
from text_analyser.components.classifier import (
    DEFAULT_RULES,
    ClassificationRule,
    ProperNounCandidate,
    ProperNounClassifier,
)
from text_analyser.interfaces.text_processor import ProperNounCategory


def candidate(name, preceding_word=None):
    return ProperNounCandidate(
        name=name,
        words=tuple(name.replace('-', ' ').split()),
        preceding_word=preceding_word,
    )


class TestProperNounClassifier:
    """Тесты для ProperNounClassifier."""

    def test_rule_order(self):
        assert [r.category for r in DEFAULT_RULES] == [
            ProperNounCategory.SOFTWARE,
            ProperNounCategory.ORGANIZATION,
            ProperNounCategory.LOCATION,
            ProperNounCategory.PERSON,
        ]

    @pytest.mark.parametrize("name,preceding,expected", [
        ("Python", None, ProperNounCategory.SOFTWARE),
        ("GitHub", None, ProperNounCategory.SOFTWARE),
        ("Office365", None, ProperNounCategory.SOFTWARE),
        ("Яндекс", "в", ProperNounCategory.ORGANIZATION),
        ("Московский университет", None, ProperNounCategory.ORGANIZATION),
        ("ООН", None, ProperNounCategory.ORGANIZATION),
        ("World Health Organization", None, ProperNounCategory.ORGANIZATION),
        ("Москву", "в", ProperNounCategory.LOCATION),
        ("Новосибирск", None, ProperNounCategory.LOCATION),
        ("Зеленоград", None, ProperNounCategory.LOCATION),
        ("Санкт-Петербург", None, ProperNounCategory.LOCATION),
        ("Тверь", "в", ProperNounCategory.LOCATION),
        ("Иван Петров", None, ProperNounCategory.PERSON),
        ("Петров", "профессор", ProperNounCategory.PERSON),
        ("Linus Torvalds", None, ProperNounCategory.PERSON),
        ("Зефир", None, ProperNounCategory.UNKNOWN),
    ])
    def test_classify(self, name, preceding, expected):
        assert ProperNounClassifier().classify(candidate(name, preceding)) == expected

    def test_first_matching_rule_wins(self):
        """Кандидат, подходящий под software и organization, получает software."""
        classifier = ProperNounClassifier()
        assert classifier.classify(candidate("Microsoft Word")) == ProperNounCategory.SOFTWARE
        assert classifier.classify(candidate("Microsoft")) == ProperNounCategory.ORGANIZATION

    def test_empty_rule_table(self):
        assert ProperNounClassifier(rules=[]).classify(candidate("Python")) == ProperNounCategory.UNKNOWN

    def test_with_rule(self):
        rule = ClassificationRule(
            "sweets",
            ProperNounCategory.ORGANIZATION,
            lambda c: c.lower_words == ("зефир",),
        )
        base = ProperNounClassifier()
        extended = base.with_rule(rule, position=0)

        assert extended.classify(candidate("Зефир")) == ProperNounCategory.ORGANIZATION
        assert extended.rules[0] is rule
        # Исходная таблица не меняется
        assert base.classify(candidate("Зефир")) == ProperNounCategory.UNKNOWN
        assert len(base.with_rule(rule).rules) == len(DEFAULT_RULES) + 1
