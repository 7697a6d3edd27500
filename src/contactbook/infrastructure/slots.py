"""Key-value slot implementations: in memory, and one JSON file per key."""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class InMemorySlot:
    """Stores slots in a dict. Nothing survives the process."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def read(self, key: str) -> bytes | None:
        return self._data.get(key)

    def write(self, key: str, data: bytes) -> None:
        self._data[key] = bytes(data)


class FileSlot:
    """Stores each slot as <directory>/<key>.json.
    Writes go to a temp file first and are moved into place, so a crash never leaves half a file.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def read(self, key: str) -> bytes | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def write(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_name, path)
        except OSError as e:
            logger.warning("Could not write slot %s to %s: %s", key, path, e)
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
