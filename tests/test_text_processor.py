"""
Тесты для TextPreprocessor.
"""

import pytest
from text_analyser.text_processor import TextPreprocessor


class TestTextPreprocessor:
    """Тесты для TextPreprocessor."""

    @pytest.mark.parametrize("text,expected", [
        ("Привет, мир", TextPreprocessor.CYRILLIC),
        ("Hello world", TextPreprocessor.LATIN),
        ("Мы используем Python", TextPreprocessor.CYRILLIC),
        ("12345 !!!", TextPreprocessor.UNKNOWN),
        ("", TextPreprocessor.UNKNOWN),
    ])
    def test_dominant_alphabet(self, text, expected):
        assert TextPreprocessor().dominant_alphabet(text) == expected

    def test_share_letters_in_alphabet(self):
        processor = TextPreprocessor()
        assert processor.share_letters_in_alphabet("абab", processor.cyrillic_alphabet) == 0.5
        assert processor.share_letters_in_alphabet("123", processor.latin_alphabet) == 0.0

    def test_remove_html_tags(self):
        processor = TextPreprocessor()
        assert processor.remove_html_tags("<p>Кот <b>сидит</b></p>") == "Кот сидит"
        assert processor.remove_html_tags("a < b") == "a < b"
        assert processor.remove_html_tags("") == ""

    def test_clean_text_html(self, sample_texts):
        processor = TextPreprocessor()
        cleaned = processor.clean_text(sample_texts["html"])

        assert "<" not in cleaned and ">" not in cleaned
        assert cleaned == "Кот сидит на окне.\nКот спит на окне."

    def test_clean_text_collapses_spaces(self):
        processor = TextPreprocessor()
        text = "Кот   сидит. \n\n\n\n  Кот\tспит. "
        assert processor.clean_text(text, strip_html=False) == "Кот сидит.\n\nКот спит."

    def test_clean_text_keeps_tags_when_disabled(self):
        assert TextPreprocessor().clean_text("<b>кот</b>", strip_html=False) == "<b>кот</b>"

    def test_clean_text_normalizes_unicode(self):
        assert TextPreprocessor().clean_text("cafe\u0301") == "caf\u00e9"

    def test_clean_text_does_not_modify_input(self):
        text = "  <p>Кот</p>  "
        TextPreprocessor().clean_text(text)
        assert text == "  <p>Кот</p>  "
