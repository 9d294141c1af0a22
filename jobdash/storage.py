"""Local key/value store: one JSON document per key under the data directory."""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from jobdash.log import get_logger

log = get_logger(__name__)


class KeyValueStore:
    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def load(self, key: str) -> Any | None:
        """Stored value for *key*, or None when absent or unreadable."""
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as exc:
            log.warning("Discarding unreadable %s: %s", path.name, exc)
            return None

    def save(self, key: str, value: Any) -> None:
        """Overwrite the whole value; readers never see a partial write."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, ensure_ascii=False, indent=2)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        log.debug("Saved %s", path.name)

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
