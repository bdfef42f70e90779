# database/sheets.py

"""
Документ в Google Sheets

Таблица (GOOGLE_SHEET_ID) - это установка, лист с названием document_id -
это документ. Колонка A - ключ поля, колонка B - JSON-текст значения.
"""

import logging
import threading
from typing import Dict, List, Optional

import gspread
from gspread.exceptions import WorksheetNotFound

from .base import RemoteDocumentStore, RemoteUnavailable

logger = logging.getLogger(__name__)

SCOPES = [
    'https://www.googleapis.com/auth/spreadsheets',
    'https://www.googleapis.com/auth/drive'
]

def get_sheets_client(credentials_file: str) -> gspread.Client:
    try:
        return gspread.service_account(filename=credentials_file, scopes=SCOPES)
    except Exception as e:
        logger.error(f"❌ Ошибка авторизации Google Sheets: {e}")
        raise RemoteUnavailable(f"Ошибка авторизации Google Sheets: {e}", operation="auth") from e

class SheetsDocumentStore(RemoteDocumentStore):
    """Хранилище документа в листе Google Sheets (gspread)"""

    def __init__(self, sheet_id: str, document_id: str = "userData",
                 credentials_file: str = "service_account.json",
                 client: Optional[gspread.Client] = None):
        self.sheet_id = sheet_id
        self.document_id = document_id
        self.credentials_file = credentials_file
        self._client = client
        self._worksheet = None
        # find + append должны быть атомарны, иначе у ключа появятся две строки
        self._write_lock = threading.Lock()

    def _get_client(self) -> gspread.Client:
        if self._client is None:
            self._client = get_sheets_client(self.credentials_file)
        return self._client

    def _open_worksheet(self, create: bool):
        if self._worksheet is not None:
            return self._worksheet
        spreadsheet = self._get_client().open_by_key(self.sheet_id)
        try:
            self._worksheet = spreadsheet.worksheet(self.document_id)
        except WorksheetNotFound:
            if not create:
                return None
            logger.info(f"🆕 Создаем лист документа '{self.document_id}'")
            self._worksheet = spreadsheet.add_worksheet(title=self.document_id, rows=100, cols=2)
        return self._worksheet

    def load(self) -> Dict[str, str]:
        try:
            worksheet = self._open_worksheet(create=False)
            if worksheet is None:
                logger.info(f"📂 Лист '{self.document_id}' не найден, документ пуст")
                return {}
            rows = worksheet.get_all_values()
        except RemoteUnavailable:
            raise
        except Exception as e:
            raise RemoteUnavailable(f"Ошибка чтения Google Sheets: {e}", operation="load") from e

        return self._rows_to_fields(rows)

    def merge_write(self, key: str, serialized_value: str) -> None:
        try:
            with self._write_lock:
                worksheet = self._open_worksheet(create=True)
                cell = worksheet.find(key, in_column=1)
                if cell is not None:
                    worksheet.update(range_name=f"A{cell.row}:B{cell.row}",
                                     values=[[key, serialized_value]], raw=True)
                else:
                    worksheet.append_row([key, serialized_value], value_input_option="RAW")
        except RemoteUnavailable:
            raise
        except Exception as e:
            raise RemoteUnavailable(f"Ошибка записи в Google Sheets: {e}",
                                    operation="merge_write", key=key) from e

    @staticmethod
    def _rows_to_fields(rows: List[List[str]]) -> Dict[str, str]:
        fields: Dict[str, str] = {}
        for row in rows:
            if not row or not row[0]:
                continue
            # При дубликатах выигрывает последняя строка
            fields[row[0]] = row[1] if len(row) > 1 else ""
        return fields
