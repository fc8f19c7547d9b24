from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional, Sequence

from gacha_browser.core.dataset import Dataset
from gacha_browser.core.dataset_loader import DEFAULT_TIMEOUT, Source, load_dataset
from gacha_browser.core.exceptions import HeaderMismatch, LoadError
from gacha_browser.core.table_parser import DEFAULT_LOCATION_COLUMNS

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    PENDING = "pending"
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"
    FORMAT_FAILED = "format_failed"


class DatasetService:
    """
    Owns the single Dataset for the app and its load lifecycle.

    The dataset is fetched lazily on the first load() call and kept for the
    life of the process once it succeeds. A failed load leaves an empty
    dataset and records the error; the next load() call (e.g. the next page
    load) reads the source again.
    """

    def __init__(
        self,
        source: Source,
        *,
        location_columns: Sequence[str] = DEFAULT_LOCATION_COLUMNS,
        location_label: str = "Location",
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._source = source
        self._location_columns = tuple(location_columns)
        self._location_label = location_label
        self._timeout = timeout

        self._lock = threading.Lock()
        self._status = LoadStatus.PENDING
        self._dataset = Dataset.empty(source=str(source), location_label=location_label)
        self._error: Optional[Exception] = None

    @property
    def source(self) -> str:
        return str(self._source)

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def error(self) -> Optional[Exception]:
        return self._error

    def is_loaded(self) -> bool:
        return self._status == LoadStatus.LOADED

    def load(self) -> LoadStatus:
        # Dash may run callbacks on several server threads; one load at a time
        with self._lock:
            if self._status == LoadStatus.LOADED:
                return self._status

            try:
                dataset = load_dataset(
                    self._source,
                    location_columns=self._location_columns,
                    location_label=self._location_label,
                    timeout=self._timeout,
                )
            except LoadError as e:
                logger.error(
                    "Dataset could not be loaded",
                    extra={"source": self.source, "error": str(e)},
                )
                self._error = e
                self._status = LoadStatus.LOAD_FAILED
            except HeaderMismatch as e:
                logger.error(
                    "Dataset has an unexpected format",
                    extra={"source": self.source, "error": str(e)},
                )
                self._error = e
                self._status = LoadStatus.FORMAT_FAILED
            else:
                self._dataset = dataset
                self._error = None
                self._status = LoadStatus.LOADED

            return self._status

    def reload(self) -> LoadStatus:
        """Drop the current dataset and load again from the source."""
        with self._lock:
            self._status = LoadStatus.PENDING
            self._dataset = Dataset.empty(source=self.source, location_label=self._location_label)
            self._error = None
        return self.load()
