import sys
from pathlib import Path

import pytest

# В тестах явно добавляем путь к src, чтобы импортировать пакет без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы русских и английских текстов для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_SIMPLE_TEXT,
        SAMPLE_ABBREVIATION_TEXT,
        SAMPLE_NAMES_TEXT,
        SAMPLE_TECH_TEXT,
        SAMPLE_ENGLISH_TEXT,
        SAMPLE_HTML_TEXT,
    )

    return {
        "simple": SAMPLE_SIMPLE_TEXT,
        "abbreviations": SAMPLE_ABBREVIATION_TEXT,
        "names": SAMPLE_NAMES_TEXT,
        "tech": SAMPLE_TECH_TEXT,
        "english": SAMPLE_ENGLISH_TEXT,
        "html": SAMPLE_HTML_TEXT,
    }


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
