"""
Компонент для экспорта результатов анализа.

Отвечает за выгрузку результатов в различные форматы:
Excel (лист на каждый артефакт), CSV частотности, JSON.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union
import pandas as pd
from ..config import config
from ..interfaces.text_processor import DocumentAnalysis, ResultExporterInterface
from .frequency_analyzer import get_frequency_statistics, relative_frequency
import logging

logger = logging.getLogger(__name__)


def _enum_value(value: Any) -> Any:
    return getattr(value, 'value', value)


class ResultExporter(ResultExporterInterface):
    """Экспортёр результатов анализа."""

    def __init__(self, output_dir: Optional[str] = None):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов
        """
        self.output_dir = Path(output_dir or config.get_results_folder())
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def to_dataframes(self, result: DocumentAnalysis) -> Dict[str, pd.DataFrame]:
        """
        Представляет результат анализа в виде таблиц.

        Args:
            result: Результат анализа

        Returns:
            Словарь {артефакт: DataFrame}
        """
        frequency_df = pd.DataFrame(
            [
                {
                    'Слово': e.word,
                    'Частота': e.frequency,
                    'Доля от максимума': round(relative_frequency(e, result.frequency), 4),
                }
                for e in result.frequency
            ],
            columns=['Слово', 'Частота', 'Доля от максимума'],
        )
        terms_df = pd.DataFrame(
            [
                {
                    'Термин': t.term,
                    'Тип': _enum_value(t.type),
                    'Частота': t.frequency,
                    'Расшифровка': t.expansion or '',
                }
                for t in result.terms
            ],
            columns=['Термин', 'Тип', 'Частота', 'Расшифровка'],
        )
        nouns_df = pd.DataFrame(
            [{'Имя': n.name, 'Категория': _enum_value(n.category)} for n in result.proper_nouns],
            columns=['Имя', 'Категория'],
        )
        concordance_df = pd.DataFrame(
            [
                {'Термин': term, '№': i, 'Контекст': c.context, 'Источник': c.source or ''}
                for term, contexts in result.concordance.items()
                for i, c in enumerate(contexts, 1)
            ],
            columns=['Термин', '№', 'Контекст', 'Источник'],
        )
        return {
            'frequency': frequency_df,
            'terms': terms_df,
            'proper_nouns': nouns_df,
            'concordance': concordance_df,
        }

    def _is_empty(self, result: Optional[DocumentAnalysis]) -> bool:
        return (
            result is None
            or not (result.frequency or result.terms or result.proper_nouns or result.concordance)
        )

    def export_to_excel(self, result: DocumentAnalysis, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует результат в Excel формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к файлу или None, если экспортировать нечего
        """
        if self._is_empty(result):
            logger.info("Нет данных для экспорта в Excel")
            return None

        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix('.xlsx')

        frames = self.to_dataframes(result)
        stats = get_frequency_statistics(result.frequency)
        stats_df = pd.DataFrame({
            'Параметр': [
                'Документ',
                'Всего слов',
                'Уникальных слов',
                'Терминов',
                'Имён собственных',
                'Время обработки (сек)',
                'Дата анализа',
            ],
            'Значение': [
                result.document_id or '',
                stats['total_words'],
                stats['unique_words'],
                len(result.terms),
                len(result.proper_nouns),
                round(result.processing_time, 3),
                datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            ],
        })

        try:
            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                for artifact, df in frames.items():
                    df.to_excel(writer, sheet_name=config.get_sheet_name(artifact), index=False)
                stats_df.to_excel(writer, sheet_name='Статистика', index=False)
        except OSError as e:
            logger.error(f"Ошибка экспорта в Excel: {e}")
            raise

        logger.info(f"Результат экспортирован в Excel: {filepath}")
        return filepath

    def export_to_csv(self, result: DocumentAnalysis, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует частотную таблицу в CSV.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к файлу или None, если частотная таблица пуста
        """
        if result is None or not result.frequency:
            logger.info("Нет данных для экспорта в CSV")
            return None

        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix('.csv')

        try:
            self.to_dataframes(result)['frequency'].to_csv(filepath, index=False, encoding='utf-8')
        except OSError as e:
            logger.error(f"Ошибка экспорта в CSV: {e}")
            raise

        logger.info(f"Частотность экспортирована в CSV: {filepath} ({len(result.frequency)} слов)")
        return filepath

    def export_to_json(self, result: DocumentAnalysis, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует результат в JSON формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к файлу или None, если результата нет
        """
        if result is None:
            logger.info("Нет данных для экспорта в JSON")
            return None

        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix('.json')

        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'document_id': result.document_id,
                'processing_time': result.processing_time,
                **get_frequency_statistics(result.frequency),
            },
            'frequency': [{'word': e.word, 'frequency': e.frequency} for e in result.frequency],
            'terms': [
                {
                    'term': t.term,
                    'type': _enum_value(t.type),
                    'frequency': t.frequency,
                    'expansion': t.expansion,
                }
                for t in result.terms
            ],
            'proper_nouns': [
                {'name': n.name, 'category': _enum_value(n.category)} for n in result.proper_nouns
            ],
            'concordance': {
                term: [{'context': c.context, 'source': c.source} for c in contexts]
                for term, contexts in result.concordance.items()
            },
        }

        try:
            with open(filepath, 'w', encoding='utf-8') as jsonfile:
                json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"Ошибка экспорта в JSON: {e}")
            raise

        logger.info(f"Результат экспортирован в JSON: {filepath}")
        return filepath

    def export_all_formats(self, result: DocumentAnalysis, base_filename: Optional[str] = None) -> Dict[str, Path]:
        """
        Экспортирует результат во все доступные форматы.

        Args:
            result: Результат анализа
            base_filename: Базовое имя файла без расширения

        Returns:
            Словарь с путями к экспортированным файлам
        """
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        base_filename = f"{base_filename or config.get_results_filename_prefix()}_{timestamp}"

        exported_files: Dict[str, Path] = {}
        excel_path = self.export_to_excel(result, self.output_dir / f"{base_filename}.xlsx")
        if excel_path:
            exported_files['excel'] = excel_path
        csv_path = self.export_to_csv(result, self.output_dir / f"{base_filename}_frequency.csv")
        if csv_path:
            exported_files['csv'] = csv_path
        json_path = self.export_to_json(result, self.output_dir / f"{base_filename}.json")
        if json_path:
            exported_files['json'] = json_path

        logger.info(f"Результат экспортирован в папку: {self.output_dir}")
        return exported_files
