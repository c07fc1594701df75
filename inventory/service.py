"""Business logic for products, stock levels and settings.

The services work on a shared :class:`~inventory.storage.JsonStore`. Search
pulls the whole catalogue into memory and filters it with
:func:`shabdkosh.matcher.filter_products`, which is fine for a single shop's
few thousand items.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from shabdkosh.matcher import filter_products

from .errors import DuplicateError, NotFoundError
from .formatters import calculate_margin, format_currency, format_date, format_number, format_size
from .models import MandiListItem, Product, Settings, Stock, StockStatus, utcnow
from .storage import JsonStore
from .validation import (
    parse_stock_status,
    validate_pagination,
    validate_product_input,
    validate_product_update,
    validate_settings_update,
)

logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 15


def serialize_product(product: Product) -> Dict[str, Any]:
    """Return ``product`` as a JSON-ready dict including its margin."""
    data = product.to_dict()
    data["margin"] = calculate_margin(product.buying_price, product.selling_price)
    return data


class ProductService:
    def __init__(self, store: JsonStore) -> None:
        self.store = store

    def _ensure_unique_barcode(self, barcode: Optional[str], exclude_id: Optional[str] = None) -> None:
        if not barcode:
            return
        for product in self.store.products():
            if product.barcode == barcode and product.id != exclude_id:
                raise DuplicateError(
                    "A record with this value already exists (duplicate barcode or name)"
                )

    def create_product(self, data: Mapping[str, Any]) -> Product:
        """Validate ``data`` and store a new product with its stock record."""
        cleaned = validate_product_input(data)
        with self.store.lock:
            self._ensure_unique_barcode(cleaned["barcode"])
            status = cleaned.pop("stock_status")
            product = Product(id=str(uuid.uuid4()), stock=Stock(status=status), **cleaned)
            self.store.put(product)
        logger.info("Product created: %s (%s)", product.name, product.id)
        return product

    def get_product(self, product_id: str) -> Product:
        product = self.store.get(product_id)
        if product is None:
            raise NotFoundError("Product")
        return product

    def get_product_by_barcode(self, barcode: str) -> Product:
        for product in self.store.products():
            if product.barcode == barcode:
                return product
        raise NotFoundError("Product")

    def list_products(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        stock_status: Any = None,
    ) -> Dict[str, Any]:
        """Return one page of products, newest first."""
        page, limit = validate_pagination(page, limit)
        products = self.store.products()
        if stock_status is not None:
            status = parse_stock_status(stock_status)
            products = [p for p in products if p.stock_status == status]
        products.sort(key=lambda p: p.created_at, reverse=True)

        total = len(products)
        start = (page - 1) * limit
        return {
            "data": products[start:start + limit],
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "total_pages": -(-total // limit),
            },
        }

    def search_listing(self) -> List[Product]:
        """All products sorted by name, as loaded by the search screen."""
        return sorted(self.store.products(), key=lambda p: p.name.lower())

    def search(self, query: str, limit: int = DEFAULT_RESULT_LIMIT) -> List[Product]:
        """Return up to ``limit`` products matching ``query`` (blank = all)."""
        return filter_products(query or "", self.search_listing(), limit=limit)

    def update_product(self, product_id: str, data: Mapping[str, Any]) -> Product:
        cleaned = validate_product_update(data)
        with self.store.lock:
            current = self.get_product(product_id)
            if "barcode" in cleaned:
                self._ensure_unique_barcode(cleaned["barcode"], exclude_id=product_id)
            status = cleaned.pop("stock_status", None)
            if status is not None:
                cleaned["stock"] = Stock(status=status)
            product = replace(current, updated_at=utcnow(), **cleaned)
            self.store.put(product)
        return product

    def delete_product(self, product_id: str) -> None:
        with self.store.lock:
            self.get_product(product_id)
            self.store.remove(product_id)
        logger.info("Product deleted: %s", product_id)

    def summary(self) -> Dict[str, int]:
        products = self.store.products()
        return {
            "total": len(products),
            "low_stock": sum(1 for p in products if p.stock_status is StockStatus.LOW),
            "empty": sum(1 for p in products if p.stock_status is StockStatus.EMPTY),
        }


class StockService:
    def __init__(self, store: JsonStore) -> None:
        self.store = store

    def update_stock_status(self, product_id: str, status: Any) -> Product:
        """Set the traffic-light status of a product and stamp ``last_checked``."""
        status = parse_stock_status(status)
        with self.store.lock:
            current = self.store.get(product_id)
            if current is None:
                raise NotFoundError("Product")
            product = replace(current, stock=Stock(status=status))
            self.store.put(product)
        logger.info("Stock of %s set to %s", product.name, status.value)
        return product

    def get_low_stock_items(self) -> List[MandiListItem]:
        products = [
            p for p in self.store.products()
            if p.stock_status in (StockStatus.LOW, StockStatus.EMPTY)
        ]
        products.sort(key=lambda p: p.name.lower())
        return [
            MandiListItem(
                name=p.name,
                size=format_size(p.size_value, p.size_unit),
                last_buying_price=p.buying_price,
                status=p.stock_status,
            )
            for p in products
        ]

    def generate_mandi_list(self, today: Optional[date] = None) -> str:
        """Return the shopping list as WhatsApp-formatted text."""
        items = self.get_low_stock_items()
        if not items:
            return "✅ सब कुछ स्टॉक में है! (Everything is in stock!)"

        urgent = [i for i in items if i.status is StockStatus.EMPTY]
        low = [i for i in items if i.status is StockStatus.LOW]

        def _lines(block: List[MandiListItem]) -> str:
            return "".join(
                f"{idx}. {item.name} ({item.size}) - ₹{format_number(item.last_buying_price)}\n"
                for idx, item in enumerate(block, start=1)
            )

        text = "🛒 *खरीदारी की लिस्ट (Shopping List)*\n\n"
        if urgent:
            text += "🔴 *तुरंत चाहिए (Urgent):*\n" + _lines(urgent) + "\n"
        if low:
            text += "🟡 *जल्दी खरीदें (Buy Soon):*\n" + _lines(low)
        text += f"\n📅 {format_date(today or date.today())}"
        return text

    def restock_value(self) -> str:
        """Total last buying price of everything on the Mandi list."""
        return format_currency(sum(i.last_buying_price for i in self.get_low_stock_items()))


class SettingsService:
    def __init__(self, store: JsonStore, defaults: Optional[Settings] = None) -> None:
        self.store = store
        self.defaults = defaults or Settings()

    def get_settings(self) -> Settings:
        """Return the settings, creating them from the defaults on first use."""
        with self.store.lock:
            if self.store.settings is None:
                self.store.put_settings(
                    Settings(self.defaults.default_margin, self.defaults.language)
                )
            return self.store.settings

    def update_settings(self, data: Mapping[str, Any]) -> Settings:
        cleaned = validate_settings_update(data)
        with self.store.lock:
            settings = self.get_settings()
            updated = Settings(
                default_margin=cleaned.get("default_margin", settings.default_margin),
                language=cleaned.get("language", settings.language),
            )
            self.store.put_settings(updated)
        return updated
