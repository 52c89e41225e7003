"""String key-value stores for phrase persistence."""

import json
from pathlib import Path
from typing import Optional

from packages.core.errors import PersistenceUnavailable
from packages.core.utils import ensure_dir


class MemoryStore:
    """In-process store. Useful for tests and ephemeral sessions."""

    def __init__(self, data: Optional[dict[str, str]] = None):
        self.data = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Store backed by one JSON object file mapping keys to strings.

    A missing file reads as empty. A file that cannot be read or is not a
    JSON object raises PersistenceUnavailable.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            raise PersistenceUnavailable("read", str(self.path), str(e)) from e
        if not isinstance(data, dict):
            raise PersistenceUnavailable("read", str(self.path), "expected a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if value is None or isinstance(value, str) else json.dumps(value)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except PersistenceUnavailable:
            # a corrupt file is replaced
            data = {}
        data[key] = value
        try:
            ensure_dir(self.path.parent)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise PersistenceUnavailable("write", str(self.path), str(e)) from e
