"""Preference stores holding the persisted auto-refresh flag.

Values are strings, mirroring browser local storage: the scheduler writes
``"true"``/``"false"`` and treats anything other than ``"true"`` as disabled.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    """Protocol for key/value preference persistence."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` (last write wins)."""
        ...


class InMemoryPreferenceStore:
    """Process-local preference store, mainly for tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JSONFilePreferenceStore:
    """Preference store persisted as a flat JSON object on disk.

    The file is read once on first access and rewritten atomically on every
    ``set``. A missing file behaves as an empty store; a corrupt file is
    logged and treated as empty.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._values: dict[str, str] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._load()
        values[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(json.dumps(values, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, self._path)

    def _load(self) -> dict[str, str]:
        if self._values is not None:
            return self._values
        self._values = {}
        if not self._path.exists():
            return self._values
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable preference file {self._path}: {e}")
            return self._values
        if isinstance(raw, dict):
            self._values = {str(k): str(v) for k, v in raw.items()}
        return self._values
