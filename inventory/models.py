"""Dataclasses for products, stock records and settings."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

SIZE_UNITS = ("kg", "g", "L", "mL", "pcs")
LANGUAGES = ("hi", "en")
DEFAULT_MARGIN = 10.0
DEFAULT_LANGUAGE = "hi"


def utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class StockStatus(str, Enum):
    """Traffic-light stock level of a product."""

    OK = "OK"
    LOW = "LOW"
    EMPTY = "EMPTY"


@dataclass
class Stock:
    status: StockStatus = StockStatus.OK
    last_checked: str = field(default_factory=utcnow)


@dataclass
class Product:
    """Single catalogue item.

    Attributes:
        aliases: Shopkeeper-approved search words (e.g. ``namak`` for salt).
        size_value/size_unit: Pack size such as ``5`` ``kg``.
        stock: Current stock record; ``None`` only for legacy rows.
    """

    id: str
    name: str
    size_value: float
    size_unit: str
    buying_price: float
    selling_price: float
    barcode: Optional[str] = None
    aliases: List[str] = field(default_factory=list)
    stock: Optional[Stock] = field(default_factory=Stock)
    created_at: str = field(default_factory=utcnow)
    updated_at: str = field(default_factory=utcnow)

    @property
    def stock_status(self) -> Optional[StockStatus]:
        return self.stock.status if self.stock else None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.stock is not None:
            data["stock"]["status"] = self.stock.status.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        stock_raw = data.get("stock")
        stock = None
        if isinstance(stock_raw, dict):
            stock = Stock(
                status=StockStatus(stock_raw.get("status", StockStatus.OK.value)),
                last_checked=stock_raw.get("last_checked") or utcnow(),
            )
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            size_value=float(data["size_value"]),
            size_unit=str(data["size_unit"]),
            buying_price=float(data["buying_price"]),
            selling_price=float(data["selling_price"]),
            barcode=data.get("barcode"),
            aliases=[str(a) for a in data.get("aliases") or []],
            stock=stock,
            created_at=data.get("created_at") or utcnow(),
            updated_at=data.get("updated_at") or utcnow(),
        )


@dataclass
class MandiListItem:
    """Line of the restock (Mandi) shopping list."""

    name: str
    size: str
    last_buying_price: float
    status: StockStatus

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass
class Settings:
    default_margin: float = DEFAULT_MARGIN
    language: str = DEFAULT_LANGUAGE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
