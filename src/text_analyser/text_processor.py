"""
Модуль для предварительной обработки текста документа

Содержит функции для:
- Определения доминирующего алфавита в тексте
- Удаления HTML тегов
- Нормализации Unicode и пробелов
"""

import re
import unicodedata
from bs4 import BeautifulSoup


class TextPreprocessor:
    """Класс для подготовки текста документа к анализу.

    Все методы возвращают новый текст и не изменяют исходный.
    """

    LATIN = 'latin'
    CYRILLIC = 'cyrillic'
    UNKNOWN = 'unknown'

    def __init__(self) -> None:
        self.latin_alphabet = set("abcdefghijklmnopqrstuvwxyz")
        self.cyrillic_alphabet = set("абвгдеёжзийклмнопрстуфхцчшщъыьэюя")
        self._inline_spaces = re.compile(r'[ \t\u00a0]+')
        self._blank_lines = re.compile(r'\n\s*\n+')

    def share_letters_in_alphabet(self, text: str, alphabet: set) -> float:
        """Подсчитывает долю букв, принадлежащих определённому алфавиту"""
        letters = [ch for ch in text.lower() if ch.isalpha()]
        if not letters:
            return 0.0
        return sum(1 for ch in letters if ch in alphabet) / len(letters)

    def dominant_alphabet(self, text: str) -> str:
        """
        Определяет, какой алфавит преобладает в тексте

        Args:
            text: Исходный текст

        Returns:
            'latin', 'cyrillic' или 'unknown' (нет букв или поровну)
        """
        if not text:
            return self.UNKNOWN
        latin = self.share_letters_in_alphabet(text, self.latin_alphabet)
        cyrillic = self.share_letters_in_alphabet(text, self.cyrillic_alphabet)
        if latin > cyrillic:
            return self.LATIN
        if cyrillic > latin:
            return self.CYRILLIC
        return self.UNKNOWN

    def remove_html_tags(self, text: str) -> str:
        """
        Удаляет HTML теги из текста используя BeautifulSoup

        Args:
            text: HTML текст

        Returns:
            Очищенный текст без HTML тегов
        """
        if not text:
            return ""

        if '<' in text and '>' in text:
            soup = BeautifulSoup(text, "html.parser")
            return soup.get_text()
        return text

    def normalize_whitespace(self, text: str) -> str:
        """Схлопывает пробелы внутри строк и пустые строки между абзацами"""
        text = self._inline_spaces.sub(' ', text)
        text = self._blank_lines.sub('\n\n', text)
        return '\n'.join(line.strip() for line in text.split('\n')).strip()

    def clean_text(self, text: str, strip_html: bool = True) -> str:
        """
        Полная очистка текста: HTML, Unicode NFC, пробелы

        Args:
            text: Исходный текст
            strip_html: Удалять ли HTML теги

        Returns:
            Очищенный текст
        """
        if not text:
            return ""
        cleaned = self.remove_html_tags(text) if strip_html else text
        cleaned = unicodedata.normalize('NFC', cleaned)
        return self.normalize_whitespace(cleaned)
