"""Storage connection opened on first use."""

import logging

from ..interfaces import Storage, StorageHandle

logger = logging.getLogger(__name__)


class LazyStorage:
    """Holds a storage connection that is only opened when first needed.

    If opening fails the handle stays unset, so the next call retries.
    """

    def __init__(self, storage: Storage):
        self._storage = storage
        self._handle: StorageHandle | None = None

    def is_open(self) -> bool:
        return self._handle is not None

    def get(self) -> StorageHandle:
        """
        Get the open handle, opening the connection if necessary.

        Raises:
            StorageError: If the store cannot be opened.
        """
        if self._handle is None:
            logger.info("Opening storage connection")
            self._handle = self._storage.open()
        return self._handle

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
