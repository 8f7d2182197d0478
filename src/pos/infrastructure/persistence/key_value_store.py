"""Key-value storage for JSON-serializable values.

Every piece of persisted state (products, categories, cart lines, sales)
is one JSON value stored under a fixed key. Reading never raises: a
missing, empty or corrupt value yields the caller's fallback. There is no
transaction spanning several keys.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, TypeVar

from pos.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

T = TypeVar("T")

PRODUCTS_KEY = "cctv_products"
CATEGORIES_KEY = "cctv_categories"
CART_KEY = "cctv_cart"
SALES_KEY = "cctv_sales"


class KeyValueStore(ABC):
    """Fallback-on-failure JSON reads on top of a raw text backend."""

    def read(self, key: str, fallback: Any) -> Any:
        try:
            text = self._get_text(key)
        except (OSError, UnicodeDecodeError):
            logger.warning("Could not read %r; using fallback", key, exc_info=True)
            return fallback
        if not text:
            return fallback
        try:
            value = json.loads(text)
        except ValueError:
            logger.warning("Stored value for %r is not valid JSON; using fallback", key)
            return fallback
        return fallback if value is None else value

    def write(self, key: str, value: Any) -> None:
        self._set_text(key, json.dumps(value, indent=2, ensure_ascii=False) + "\n")

    def remove(self, key: str) -> None:
        self._delete(key)

    # --- Backend hooks --------------------------------------------------------

    @abstractmethod
    def _get_text(self, key: str) -> str | None:
        """Return the raw text stored under *key*, or None."""

    @abstractmethod
    def _set_text(self, key: str, text: str) -> None:
        """Store *text* under *key*, replacing any previous value."""

    @abstractmethod
    def _delete(self, key: str) -> None:
        """Drop *key*. Missing keys are ignored."""


class JsonFileStore(KeyValueStore):
    """One ``<key>.json`` file per key inside a data directory."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _path(self, key: str) -> Path:
        return self._data_dir / f"{key}.json"

    def _get_text(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _set_text(self, key: str, text: str) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(text, encoding="utf-8")

    def _delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


def read_records(
    store: KeyValueStore, key: str, decode: Callable[[dict], T]
) -> list[T]:
    """Read a JSON list under *key* and decode each record.

    A value that is not a list counts as corrupt and yields ``[]``; a single
    malformed record is skipped so the rest of the list stays usable.
    """
    raw = store.read(key, [])
    if not isinstance(raw, list):
        logger.warning("Stored value for %r is not a list; ignoring it", key)
        return []
    records: list[T] = []
    for item in raw:
        try:
            records.append(decode(item))
        except (KeyError, TypeError, ValueError, AttributeError, DomainException):
            logger.warning("Skipping malformed record in %r: %r", key, item)
    return records
