"""Storage ports for the client-side cart.

A storage keeps one serialized cart snapshot. ``FileCartStorage`` plays the
part of browser local storage: a JSON object of string values on disk, shared
by every client pointed at the same file.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Protocol

from storefront.config import Settings


class CartStorage(Protocol):
    """Where a cart snapshot lives between sessions."""

    def load(self) -> str | None:
        """Return the stored snapshot, or None if nothing has been saved."""
        ...

    def save(self, payload: str) -> None:
        """Replace the stored snapshot with ``payload``."""
        ...


class MemoryCartStorage:
    def __init__(self, payload: str | None = None):
        self.payload = payload

    def load(self) -> str | None:
        return self.payload

    def save(self, payload: str) -> None:
        self.payload = payload


class FileCartStorage:
    """Key/value JSON file holding the cart under ``key``."""

    def __init__(self, path: str | Path, key: str = "shopping_cart"):
        self.path = Path(path)
        self.key = key

    @classmethod
    def from_settings(cls, settings: Settings) -> "FileCartStorage":
        return cls(settings.cart_storage_path, key=settings.cart_storage_key)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def load(self) -> str | None:
        value = self._read_all().get(self.key)
        return value if isinstance(value, str) else None

    def save(self, payload: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            # Unreadable file: start over rather than lose the new snapshot
            data = {}
        data[self.key] = payload

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".storage_", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(temp_path, self.path)
        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise
