"""Single-writer access to a JSON document on disk."""

import copy
import json
import logging
import os
import tempfile
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

from savefarm.domain.errors import StorageError

T = TypeVar("T")

_logger = logging.getLogger(__name__)


@dataclass
class JsonDocument:
    """A JSON file rewritten wholesale on every mutation.

    All updates go through one lock per document so concurrent requests
    cannot clobber each other's writes.
    """

    path: Path
    empty: dict[str, object]
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def ensure_exists(self) -> None:
        """Create the file with the empty shape when it is missing."""
        with self._lock:
            if self.path.exists():
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write(copy.deepcopy(self.empty))

    def read(self) -> dict[str, object]:
        """Return a parsed snapshot of the document."""
        with self._lock:
            return self._read()

    def update(self, mutate: Callable[[dict[str, object]], T]) -> T:
        """Read, mutate in memory and write back under the document lock.

        The document is only written when ``mutate`` returns normally.
        """
        with self._lock:
            data = self._read()
            result = mutate(data)
            self._write(data)
            return result

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return copy.deepcopy(self.empty)
        try:
            with self.path.open(encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            _logger.warning("Failed to read %s: %s", self.path, exc)
            raise StorageError(f"Failed to read {self.path.name}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Malformed document {self.path.name}")
        return data

    def _write(self, data: dict[str, object]) -> None:
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            _logger.warning("Failed to write %s: %s", self.path, exc)
            raise StorageError(f"Failed to write {self.path.name}") from exc
