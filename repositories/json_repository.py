# repositories/json_repository.py
"""
JSON File Repository - Generic read-only JSON array loader.
"""

import json
from typing import List, Optional, TypeVar, Generic, Type, Union
from pathlib import Path
import logging

from core.base import BaseRepository
from core.interfaces import IReadOnlyRepository
from core.exceptions import DataLoadError, ValidationError
from config.paths import get_path_config

logger = logging.getLogger(__name__)
T = TypeVar('T')


class JSONRepository(BaseRepository, IReadOnlyRepository[T], Generic[T]):
    """
    Generic repository for a bundled JSON array file.

    The whole file is parsed into records of ``record_type`` at construction.
    ``record_type`` must provide a ``from_dict`` classmethod. Any failure is
    raised as DataLoadError; nothing is loaded partially.
    """

    def __init__(
        self,
        record_type: Type[T],
        resource_name: Union[str, Path],
        data_dir: Optional[Union[str, Path]] = None,
        entity_name: Optional[str] = None
    ):
        super().__init__(entity_name or record_type.__name__)
        self._record_type = record_type
        self._file_path = get_path_config().resolve_resource(resource_name, data_dir)
        self._records: List[T] = self._load_data()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def _read_json(self):
        """Read and decode the raw JSON document."""
        if not self._file_path.is_file():
            logger.error(f"Resource file not found: {self._file_path}")
            raise DataLoadError(
                f"Resource file '{self._file_path}' not found",
                file_path=str(self._file_path)
            )

        try:
            with open(self._file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse JSON file {self._file_path}: {e}")
            raise DataLoadError(
                f"Malformed JSON in '{self._file_path}': {e}",
                file_path=str(self._file_path)
            ) from e
        except OSError as e:
            logger.error(f"Failed to read {self._file_path}: {e}")
            raise DataLoadError(
                f"Cannot read '{self._file_path}': {e}",
                file_path=str(self._file_path)
            ) from e

    def _load_data(self) -> List[T]:
        """Load and parse every element of the JSON array."""
        self._log_operation("load", str(self._file_path))
        data = self._read_json()

        if not isinstance(data, list):
            logger.error(f"Expected a JSON array in {self._file_path}, got {type(data).__name__}")
            raise DataLoadError(
                f"Expected a JSON array in '{self._file_path}'",
                file_path=str(self._file_path)
            )

        records = []
        for index, item in enumerate(data):
            try:
                records.append(self._record_type.from_dict(item))
            except ValidationError as e:
                logger.error(f"Invalid {self._entity_name} at index {index} in {self._file_path}: {e}")
                raise DataLoadError(
                    f"Invalid {self._entity_name} at index {index}: {e.message}",
                    file_path=str(self._file_path)
                ) from e

        logger.info(f"Loaded {len(records)} {self._entity_name} records from {self._file_path}")
        return records

    def get_all(self) -> List[T]:
        """Get all records in file order."""
        return list(self._records)

    def count(self) -> int:
        """Get total count of records."""
        return len(self._records)
