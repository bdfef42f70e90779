# database/__init__.py

"""
Хранилища удаленного документа Momentum
"""

import logging

from .base import RemoteDocumentStore, InMemoryDocumentStore, StoreError, RemoteUnavailable
from .manager import JsonFileDocumentStore

logger = logging.getLogger(__name__)

def create_document_store(app_config) -> RemoteDocumentStore:
    """Создать хранилище по STORAGE_BACKEND"""
    from config import StorageBackend

    storage = app_config.storage
    if storage.backend == StorageBackend.SHEETS:
        from .sheets import SheetsDocumentStore
        store = SheetsDocumentStore(
            sheet_id=storage.google_sheet_id,
            document_id=storage.document_id,
            credentials_file=storage.google_credentials_file
        )
    elif storage.backend == StorageBackend.JSON:
        store = JsonFileDocumentStore(storage.json_path, document_id=storage.document_id)
    else:
        store = InMemoryDocumentStore(document_id=storage.document_id)

    logger.info(f"🗄️ Хранилище документа: {store.describe()}")
    return store

__all__ = [
    'RemoteDocumentStore',
    'InMemoryDocumentStore',
    'JsonFileDocumentStore',
    'StoreError',
    'RemoteUnavailable',
    'create_document_store'
]
