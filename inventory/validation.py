"""Input validation for product, stock and settings payloads.

Each ``validate_*`` function returns a cleaned copy of the payload or raises
:class:`~inventory.errors.ValidationError` listing every problem found.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional

from .errors import ValidationError
from .models import LANGUAGES, SIZE_UNITS, StockStatus

MAX_NAME_LENGTH = 200
MIN_BARCODE_LENGTH = 3
MAX_SIZE_VALUE = 100000
MAX_PRICE = 1000000
MAX_PAGE_LIMIT = 100


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _raise_if(errors: List[str]) -> None:
    if errors:
        raise ValidationError(", ".join(errors))


def _check_name(value: Any, errors: List[str]) -> Optional[str]:
    if not isinstance(value, str) or not value.strip():
        errors.append("name: Product name is required")
        return None
    name = value.strip()
    if len(name) > MAX_NAME_LENGTH:
        errors.append("name: Product name too long")
    return name


def _check_barcode(value: Any, errors: List[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        errors.append("barcode: Barcode must be a string")
        return None
    barcode = value.strip()
    if len(barcode) < MIN_BARCODE_LENGTH:
        errors.append(f"barcode: Barcode must be at least {MIN_BARCODE_LENGTH} characters")
    return barcode


def _check_aliases(value: Any, errors: List[str]) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(a, str) for a in value):
        errors.append("aliases: Aliases must be a list of strings")
        return []
    aliases: List[str] = []
    for alias in value:
        alias = alias.strip()
        if alias and alias not in aliases:
            aliases.append(alias)
    return aliases


def _check_positive(field: str, label: str, value: Any, maximum: float, errors: List[str]) -> Optional[float]:
    if not _is_number(value):
        errors.append(f"{field}: {label} must be a number")
        return None
    if value <= 0:
        errors.append(f"{field}: {label} must be positive")
    elif value > maximum:
        errors.append(f"{field}: {label} too large")
    return float(value)


def _check_unit(value: Any, errors: List[str]) -> Optional[str]:
    if value not in SIZE_UNITS:
        errors.append(f"size_unit: Invalid unit. Use: {', '.join(SIZE_UNITS)}")
        return None
    return value


def parse_stock_status(value: Any) -> StockStatus:
    """Return the :class:`StockStatus` named by ``value``."""
    if isinstance(value, StockStatus):
        return value
    try:
        return StockStatus(str(value).upper())
    except ValueError:
        raise ValidationError("status: Invalid status. Use: OK, LOW, or EMPTY") from None


def validate_product_input(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate a payload for a new product."""
    errors: List[str] = []
    cleaned: Dict[str, Any] = {
        "name": _check_name(data.get("name"), errors),
        "barcode": _check_barcode(data.get("barcode"), errors),
        "aliases": _check_aliases(data.get("aliases"), errors),
        "size_value": _check_positive("size_value", "Size value", data.get("size_value"), MAX_SIZE_VALUE, errors),
        "size_unit": _check_unit(data.get("size_unit"), errors),
        "buying_price": _check_positive("buying_price", "Buying price", data.get("buying_price"), MAX_PRICE, errors),
        "selling_price": _check_positive("selling_price", "Selling price", data.get("selling_price"), MAX_PRICE, errors),
    }
    status = data.get("stock_status")
    if status is None:
        cleaned["stock_status"] = StockStatus.OK
    else:
        try:
            cleaned["stock_status"] = parse_stock_status(status)
        except ValidationError as exc:
            errors.append(exc.message)
    _raise_if(errors)
    return cleaned


def validate_product_update(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate a partial update; only keys present in ``data`` are checked."""
    errors: List[str] = []
    cleaned: Dict[str, Any] = {}
    if "name" in data:
        cleaned["name"] = _check_name(data["name"], errors)
    if "barcode" in data:
        cleaned["barcode"] = _check_barcode(data["barcode"], errors)
    if "aliases" in data:
        cleaned["aliases"] = _check_aliases(data["aliases"], errors)
    if "size_value" in data:
        cleaned["size_value"] = _check_positive("size_value", "Size value", data["size_value"], MAX_SIZE_VALUE, errors)
    if "size_unit" in data:
        cleaned["size_unit"] = _check_unit(data["size_unit"], errors)
    for key, label in (("buying_price", "Buying price"), ("selling_price", "Selling price")):
        if key in data:
            cleaned[key] = _check_positive(key, label, data[key], MAX_PRICE, errors)
    if data.get("stock_status") is not None:
        try:
            cleaned["stock_status"] = parse_stock_status(data["stock_status"])
        except ValidationError as exc:
            errors.append(exc.message)
    _raise_if(errors)
    return cleaned


def validate_settings_update(data: Mapping[str, Any]) -> Dict[str, Any]:
    errors: List[str] = []
    cleaned: Dict[str, Any] = {}
    if data.get("default_margin") is not None:
        margin = data["default_margin"]
        if not _is_number(margin):
            errors.append("default_margin: Margin must be a number")
        elif margin < 0:
            errors.append("default_margin: Margin cannot be negative")
        elif margin > 100:
            errors.append("default_margin: Margin cannot exceed 100%")
        else:
            cleaned["default_margin"] = float(margin)
    if data.get("language") is not None:
        if data["language"] not in LANGUAGES:
            errors.append("language: Invalid language. Use: hi or en")
        else:
            cleaned["language"] = data["language"]
    _raise_if(errors)
    return cleaned


def validate_pagination(page: Any = None, limit: Any = None) -> tuple[int, int]:
    """Return ``(page, limit)`` with defaults 1 and 20."""
    errors: List[str] = []
    page = 1 if page is None else page
    limit = 20 if limit is None else limit
    if not isinstance(page, int) or isinstance(page, bool) or page < 1:
        errors.append("page: Page must be a positive integer")
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
        errors.append("limit: Limit must be a positive integer")
    elif limit > MAX_PAGE_LIMIT:
        errors.append(f"limit: Limit cannot exceed {MAX_PAGE_LIMIT}")
    _raise_if(errors)
    return page, limit
