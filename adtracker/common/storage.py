"""
Whole-file JSON persistence.

The data file is a single document ``{"ads": [...], "revenue": [...]}``.
It is read once at startup and fully rewritten after every mutation.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

import orjson
from pydantic import ValidationError as PydanticValidationError

from adtracker.common.config import get_settings
from adtracker.common.exceptions import ConfigError, StorageError
from adtracker.common.logger import get_logger
from adtracker.common.utils import Timer, json_dumps, json_loads
from adtracker.models import Ad, RevenueEntry

logger = get_logger(__name__)


@dataclass
class Dataset:
    """Full durable state: both collections in insertion order."""

    ads: list[Ad] = field(default_factory=list)
    revenue: list[RevenueEntry] = field(default_factory=list)

    def to_document(self) -> dict:
        return {
            "ads": [ad.to_document() for ad in self.ads],
            "revenue": [entry.to_document() for entry in self.revenue],
        }

    @classmethod
    def from_document(cls, document: dict) -> Dataset:
        return cls(
            ads=[Ad.model_validate(item) for item in document.get("ads") or []],
            revenue=[
                RevenueEntry.model_validate(item)
                for item in document.get("revenue") or []
            ],
        )


class JsonFileStorage:
    """
    Synchronous whole-document JSON storage.

    Writes go to a temporary file in the same directory and are then
    renamed over the data file, so readers only ever see a complete snapshot.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path)
        if self.path.is_dir():
            raise ConfigError(
                "Data file path points to a directory",
                details={"path": str(self.path)},
            )

    def load(self) -> Dataset:
        """
        Read the data file.

        A missing file yields an empty dataset. An unreadable or malformed
        file is logged and also yields an empty dataset.
        """
        if not self.path.exists():
            logger.info("No data file, starting empty", path=str(self.path))
            return Dataset()

        try:
            document = json_loads(self.path.read_bytes())
            if not isinstance(document, dict):
                raise TypeError(f"expected object, got {type(document).__name__}")
            dataset = Dataset.from_document(document)
        except (OSError, orjson.JSONDecodeError, TypeError, PydanticValidationError) as e:
            logger.error(
                "Error loading data file",
                path=str(self.path),
                error=str(e),
                error_type=e.__class__.__name__,
            )
            return Dataset()

        logger.info(
            "Data file loaded",
            path=str(self.path),
            ads=len(dataset.ads),
            revenue=len(dataset.revenue),
        )
        return dataset

    def save(self, dataset: Dataset) -> None:
        """Rewrite the whole data file. Raises StorageError on failure."""
        directory = self.path.parent

        with Timer() as timer:
            tmp_name = None
            try:
                payload = json_dumps(dataset.to_document(), indent=True)
                directory.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
                tmp_name = None
            except (OSError, orjson.JSONEncodeError) as e:
                logger.error(
                    "Error saving data file",
                    path=str(self.path),
                    error=str(e),
                    error_type=e.__class__.__name__,
                )
                raise StorageError(
                    "Failed to save data",
                    details={"path": str(self.path)},
                ) from e
            finally:
                if tmp_name is not None and os.path.exists(tmp_name):
                    os.unlink(tmp_name)

        logger.debug(
            "Data file saved",
            path=str(self.path),
            ads=len(dataset.ads),
            revenue=len(dataset.revenue),
            duration_ms=round(timer.elapsed_ms, 2),
        )

    def is_writable(self) -> bool:
        """Whether the data file (or its directory) accepts writes."""
        if self.path.exists():
            return os.access(self.path, os.W_OK)
        parent = self.path.parent
        return parent.is_dir() and os.access(parent, os.W_OK)


def get_storage() -> JsonFileStorage:
    """Build the storage backend from settings."""
    return JsonFileStorage(get_settings().storage.path)
