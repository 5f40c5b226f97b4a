"""JSON file persistence for dashboard data."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from lif.core.errors import StoreError
from lif.domain.app_data import AppData


logger = logging.getLogger(__name__)


def _atomic_write(path: Path, content: str) -> None:
    """Write content atomically via tempfile + rename."""
    fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.replace(tmp, path)
    except Exception:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


class DataStore(Protocol):
    """Persistence backend for the whole dashboard aggregate."""

    def load(self) -> AppData: ...

    def save(self, data: AppData) -> None: ...


class JsonFileStore:
    """Loads and saves the whole ``AppData`` aggregate as one JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> AppData:
        """Read dashboard data from disk.

        A missing file is created with defaults. A file that cannot be parsed
        is left alone and defaults are returned, so the user can recover it.

        Raises:
            StoreError: If the file exists but cannot be read
        """
        if not self.path.exists():
            logger.info(f"No data file at {self.path}, creating defaults")
            data = AppData()
            self.save(data)
            return data

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            msg = f"Failed to read {self.path}: {e}"
            raise StoreError(msg) from e

        try:
            return AppData.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Data file {self.path} is corrupt, starting from defaults: {e.error_count()} errors")
            return AppData()

    def save(self, data: AppData) -> None:
        """Write dashboard data to disk atomically.

        Raises:
            StoreError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            _atomic_write(self.path, data.model_dump_json(indent=2))
        except OSError as e:
            msg = f"Failed to write {self.path}: {e}"
            raise StoreError(msg) from e
