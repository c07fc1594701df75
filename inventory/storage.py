"""JSON file persistence for the shop's catalogue and settings.

The whole store is one JSON document ``{"products": [...], "settings": {...}}``.
Loading tolerates a missing file, a UTF-8 BOM, UTF-16 files written by
Windows editors and stray control characters; saving writes UTF-8 through a
temporary file so a crash never leaves half a catalogue on disk.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .errors import StorageError
from .models import Product, Settings

logger = logging.getLogger(__name__)


def _decode(raw: bytes) -> str:
    for enc in ("utf-8-sig", "utf-16"):
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue
    return raw.decode("utf-8", errors="replace")


def _parse_document(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        cleaned = "".join(ch for ch in text if ch >= " " or ch in "\n\t\r")
        if not cleaned.strip():
            return {}
        return json.loads(cleaned)


class JsonStore:
    """Thread-safe in-memory view of the store file at ``path``.

    ``path=None`` keeps everything in memory, which the tests use.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self.lock = threading.RLock()
        self._products: Dict[str, Product] = {}
        self._settings: Optional[Settings] = None
        self.load()

    def load(self) -> None:
        """(Re)read the store file; a missing or empty file gives an empty store."""
        with self.lock:
            self._products = {}
            self._settings = None
            if self.path is None:
                return
            if not self.path.exists():
                logger.warning("Store %s not found, starting with an empty catalogue", self.path)
                return
            text = _decode(self.path.read_bytes())
            if not text.strip():
                return
            try:
                data = _parse_document(text)
            except json.JSONDecodeError as exc:
                raise StorageError(f"Store {self.path} is not valid JSON: {exc}") from exc
            if not isinstance(data, dict):
                raise StorageError(f"Unexpected store format: {type(data).__name__}")

            for raw in data.get("products") or []:
                try:
                    product = Product.from_dict(raw)
                except (KeyError, TypeError, ValueError) as exc:
                    logger.error("Skipping malformed product %r: %s", raw, exc)
                    continue
                self._products[product.id] = product
            settings = data.get("settings")
            if isinstance(settings, dict):
                self._settings = Settings(**{
                    k: v for k, v in settings.items() if k in ("default_margin", "language")
                })
            logger.info("Loaded %d products from %s", len(self._products), self.path)

    def save(self) -> None:
        """Persist the current state if the store is file-backed."""
        if self.path is None:
            return
        with self.lock:
            data: Dict[str, Any] = {
                "products": [p.to_dict() for p in self._products.values()],
                "settings": self._settings.to_dict() if self._settings else None,
            }
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            try:
                tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
                os.replace(tmp, self.path)
            except OSError as exc:
                raise StorageError(f"Could not write store {self.path}: {exc}") from exc

    def products(self) -> List[Product]:
        with self.lock:
            return list(self._products.values())

    def get(self, product_id: str) -> Optional[Product]:
        with self.lock:
            return self._products.get(product_id)

    def _commit(self, restore: Callable[[], None]) -> None:
        # Undo the in-memory change when it could not be written.
        try:
            self.save()
        except StorageError:
            restore()
            raise

    def put(self, product: Product) -> None:
        with self.lock:
            previous = self._products.get(product.id)
            self._products[product.id] = product

            def restore() -> None:
                if previous is None:
                    self._products.pop(product.id, None)
                else:
                    self._products[product.id] = previous

            self._commit(restore)

    def remove(self, product_id: str) -> None:
        with self.lock:
            previous = self._products.pop(product_id, None)
            if previous is None:
                return

            def restore() -> None:
                self._products[product_id] = previous

            self._commit(restore)

    @property
    def settings(self) -> Optional[Settings]:
        return self._settings

    def put_settings(self, settings: Settings) -> None:
        with self.lock:
            previous = self._settings
            self._settings = settings

            def restore() -> None:
                self._settings = previous

            self._commit(restore)
