"""Settings store - a bytes-valued key-value store, optionally mirrored to disk."""

from __future__ import annotations
import base64
import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class SettingsStore:
    """Key-value settings mechanism holding raw bytes per key.

    Without a path the store lives in memory only. With a path, every change
    is flushed to a JSON file (values base64-encoded) and the file is read
    back on construction. Each store is its own handle; nothing is shared
    between instances.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else None
        self._values: dict[str, bytes] = {}
        if self.path is not None:
            self._values = self._load()

    def data(self, key: str) -> Optional[bytes]:
        """Raw bytes stored for key, or None."""
        return self._values.get(key)

    def set(self, data: Optional[bytes], key: str) -> None:
        """Store bytes for key. Setting None removes the key."""
        if data is None:
            self.remove_object(key)
            return
        self._commit({**self._values, key: data})

    def remove_object(self, key: str) -> None:
        """Remove key if present."""
        if key not in self._values:
            return
        self._commit({k: v for k, v in self._values.items() if k != key})

    def keys(self) -> list[str]:
        """All keys currently stored."""
        return list(self._values)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    # ===== Disk Mirror =====

    def _commit(self, values: dict[str, bytes]) -> None:
        """Flush values to disk, then make them current. A failed flush changes nothing."""
        self._flush(values)
        self._values = values

    def _load(self) -> dict[str, bytes]:
        """Read the backing file. A missing or unreadable file is an empty store."""
        if not self.path.exists():
            logger.debug(f"No settings file at {self.path}")
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            values = {key: base64.b64decode(value) for key, value in raw.items()}
        except (ValueError, OSError, AttributeError, TypeError) as e:
            logger.error(f"Failed to load settings from {self.path}: {e}")
            return {}

        logger.info(f"Settings loaded from {self.path} ({len(values)} keys)")
        return values

    def _flush(self, values: dict[str, bytes]) -> None:
        """Write values to the backing file, if any."""
        if self.path is None:
            return

        self.path.parent.mkdir(parents=True, exist_ok=True)
        raw = {key: base64.b64encode(value).decode("ascii") for key, value in values.items()}
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(raw, f, indent=2)
            tmp_path.replace(self.path)
            logger.debug(f"Settings saved to {self.path}")
        except OSError as e:
            logger.error(f"Failed to save settings to {self.path}: {e}")
            tmp_path.unlink(missing_ok=True)
            raise
