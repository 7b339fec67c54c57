"""Наборы текстов для тестирования.

Короткие русские и английские примеры: частотность, аббревиатуры, имена
собственные, словосочетания, а также HTML-текст для проверки очистки.
"""

SAMPLE_SIMPLE_TEXT = "Кот сидит. Кот спит."


SAMPLE_ABBREVIATION_TEXT = (
    "НАСА объявило проект. "
    "NASA (National Aeronautics and Space Administration) работает."
)


SAMPLE_NAMES_TEXT = "Иван Петров приехал в Москву. Иван Петров работал в Яндекс."


SAMPLE_TECH_TEXT = (
    "Машинное обучение меняет медицину. "
    "Машинное обучение требует данных. "
    "Данные важны."
)


SAMPLE_ENGLISH_TEXT = """
The World Health Organization (WHO) publishes reports every year.
Doctors in London read WHO reports. Linus Torvalds wrote Linux in Finland.
""".strip()


SAMPLE_HTML_TEXT = """
<div>
  <p>Кот <strong>сидит</strong> на окне.</p>
  <p>Кот спит на окне.</p>
</div>
""".strip()
