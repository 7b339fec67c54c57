"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс TEXT_ANALYSER_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)


class Config:
    """Класс для работы с конфигурацией проекта"""

    ENV_PREFIX = 'TEXT_ANALYSER_'

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в корне проекта
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            # Если не найден в текущей директории, ищем в родительских
            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}
        self.env_data: Dict[str, Any] = {}

        self._load_config()
        self._load_env()
        try:
            self._apply_env_overrides()
            self._validate()
        except (TypeError, ValueError) as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")
        self._configure_logging_if_needed()

    def _resolve_config_path(self) -> Path:
        env = os.getenv('TEXT_ANALYSER_ENV', '').lower().strip()
        root = self.config_path.parent if self.config_path else Path.cwd()
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            candidate = root / 'config.yaml'
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self) -> None:
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                self._merge(self.config_data, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _load_env(self) -> None:
        """Загружает переменные окружения из .env файла"""
        load_dotenv()
        self.env_data = {
            'TEXT_ANALYSER_ENV': os.getenv('TEXT_ANALYSER_ENV'),
            'TEXT_ANALYSER_RESULTS_DIR': os.getenv('TEXT_ANALYSER_RESULTS_DIR'),
        }
        logger.debug("Переменные окружения загружены из .env (если есть)")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (TEXT_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(self.ENV_PREFIX):
                continue
            if key in ('TEXT_ANALYSER_ENV', 'TEXT_ANALYSER_RESULTS_DIR'):
                continue
            tail = key[len(self.ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv('TEXT_ANALYSER_ENV'):
            logger.info(f"Активирован профиль: {os.getenv('TEXT_ANALYSER_ENV')}")

    def _clamp_int(self, key: str, minimum: int, default: int) -> None:
        try:
            value = int(self.get(key, default))
        except (TypeError, ValueError):
            logger.warning(f"{key}: некорректное значение, используется {default}")
            value = default
        if value < minimum:
            logger.warning(f"{key} < {minimum}, принудительно установлено в {minimum}")
            value = minimum
        self._set_nested(self.config_data, key, value)

    def _validate(self) -> None:
        """Проверяет диапазоны числовых настроек."""
        self._clamp_int('text_analysis.min_word_length', 1, 2)
        self._clamp_int('terms.word_min_frequency', 1, 2)
        self._clamp_int('terms.word_min_length', 0, 3)
        self._clamp_int('terms.phrase_min_frequency', 2, 2)
        self._clamp_int('terms.phrase_max_words', 2, 3)
        self._clamp_int('concordance.max_contexts', 0, 5)
        self._clamp_int('concordance.max_snippet_length', 20, 300)
        self._clamp_int('concordance.window_sentences', 0, 1)
        self._clamp_int('concordance.max_terms', 0, 20)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_text_analyser_configured", False) and not force:
            if (
                getattr(root, "_text_analyser_console_level", None) == console_level_name and
                getattr(root, "_text_analyser_file_level", None) == file_level_name and
                getattr(root, "_text_analyser_format", None) == desired_fmt and
                getattr(root, "_text_analyser_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_text_analyser_configured", True)
        setattr(root, "_text_analyser_console_level", console_level_name)
        setattr(root, "_text_analyser_file_level", file_level_name)
        setattr(root, "_text_analyser_format", desired_fmt)
        setattr(root, "_text_analyser_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'text_analysis': {
                # Токены короче этого порога не попадают в частотный словарь
                'min_word_length': 2,
                'stopword_languages': ['ru', 'en'],
                'strip_html': False,
            },
            'terms': {
                'word_min_frequency': 2,
                # Слово-термин должно быть строго длиннее этого значения
                'word_min_length': 3,
                'phrase_min_frequency': 2,
                'phrase_max_words': 3,
                'known_abbreviations': [],
            },
            'proper_nouns': {
                # Первый токен предложения считается кандидатом, если за ним сразу идёт заглавный токен
                'chain_first_token': True,
            },
            'concordance': {
                'max_contexts': 5,
                'max_snippet_length': 300,
                'window_sentences': 1,
                # Сколько терминов автоматически получают конкорданс в DocumentAnalyzer
                'max_terms': 20,
            },
            'files': {
                'results_folder': "data/results",
                'results_filename_prefix': "text_analysis",
            },
            'excel': {
                'frequency_sheet_name': "Частотность",
                'terms_sheet_name': "Термины",
                'proper_nouns_sheet_name': "Имена собственные",
                'concordance_sheet_name': "Конкорданс",
            },
            'logging': {
                'level': "INFO",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/text_analyser.log",
                'max_log_files': 10,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение переменной окружения"""
        value = self.env_data.get(key)
        return default if value is None else value

    def get_text_analysis_config(self) -> Dict[str, Any]:
        """Получает конфигурацию анализа текста"""
        return self.config_data.get('text_analysis', {})

    def get_terms_config(self) -> Dict[str, Any]:
        return self.config_data.get('terms', {})

    def get_concordance_config(self) -> Dict[str, Any]:
        return self.config_data.get('concordance', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Получает конфигурацию логирования"""
        return self.config_data.get('logging', {})

    # --- Анализ текста ---
    def get_min_word_length(self) -> int:
        """Получает минимальную длину слова для частотного анализа"""
        return self.get('text_analysis.min_word_length', 2)

    def get_stopword_languages(self) -> List[str]:
        """Языки, чьи стоп-слова исключаются из анализа"""
        return list(self.get('text_analysis.stopword_languages', ['ru', 'en']) or [])

    def is_strip_html_enabled(self) -> bool:
        return bool(self.get('text_analysis.strip_html', False))

    # --- Термины ---
    def get_word_term_min_frequency(self) -> int:
        return self.get('terms.word_min_frequency', 2)

    def get_word_term_min_length(self) -> int:
        return self.get('terms.word_min_length', 3)

    def get_phrase_min_frequency(self) -> int:
        return self.get('terms.phrase_min_frequency', 2)

    def get_phrase_max_words(self) -> int:
        return self.get('terms.phrase_max_words', 3)

    def get_known_abbreviations(self) -> List[str]:
        return list(self.get('terms.known_abbreviations', []) or [])

    # --- Имена собственные ---
    def is_chain_first_token_enabled(self) -> bool:
        return bool(self.get('proper_nouns.chain_first_token', True))

    # --- Конкорданс ---
    def get_max_contexts(self) -> int:
        return self.get('concordance.max_contexts', 5)

    def get_max_snippet_length(self) -> int:
        return self.get('concordance.max_snippet_length', 300)

    def get_window_sentences(self) -> int:
        return self.get('concordance.window_sentences', 1)

    def get_concordance_max_terms(self) -> int:
        return self.get('concordance.max_terms', 20)

    # --- Файлы и Excel ---
    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get_env('TEXT_ANALYSER_RESULTS_DIR') or self.get('files.results_folder', "data/results")

    def get_results_filename_prefix(self) -> str:
        """Получает префикс для файлов результатов"""
        return self.get('files.results_filename_prefix', "text_analysis")

    def get_sheet_name(self, artifact: str) -> str:
        """Название листа Excel для артефакта (frequency, terms, proper_nouns, concordance)"""
        defaults = self._get_default_config()['excel']
        key = f'{artifact}_sheet_name'
        return self.get(f'excel.{key}', defaults.get(key, artifact))

    # --- Логирование ---
    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_format(self) -> str:
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        return bool(self.get('logging.log_to_file', False))

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов"""
        log_file_template = self.get('logging.log_file', "logs/text_analyser.log")
        if "{timestamp}" in log_file_template:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return log_file_template.replace("{timestamp}", timestamp)
        return log_file_template

    def get_max_log_files(self) -> int:
        return self.get('logging.max_log_files', 10)

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_logging_file()).parent
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("text_analyser_*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Самые новые в конце списка
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
