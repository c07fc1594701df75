"""Populate an empty store with a sample kirana catalogue.

Usage: ``python -m inventory.seed [PATH]`` (defaults to the configured
``[INVENTORY] data_path``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from .service import ProductService
from .storage import JsonStore

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    # Staples
    {"name": "Tata Salt", "barcode": "8901058851625", "aliases": ["namak", "salt", "iodine salt"],
     "size_value": 1, "size_unit": "kg", "buying_price": 20, "selling_price": 22, "stock_status": "OK"},
    {"name": "India Gate Basmati Rice", "barcode": "8901491101219", "aliases": ["chawal", "rice", "basmati"],
     "size_value": 5, "size_unit": "kg", "buying_price": 450, "selling_price": 500, "stock_status": "LOW"},
    {"name": "Fortune Sunflower Oil", "barcode": "8901072001014", "aliases": ["tel", "oil", "cooking oil"],
     "size_value": 1, "size_unit": "L", "buying_price": 120, "selling_price": 135, "stock_status": "OK"},
    {"name": "Toor Dal (Arhar)", "aliases": ["dal", "arhar", "toor", "pulses"],
     "size_value": 1, "size_unit": "kg", "buying_price": 95, "selling_price": 110, "stock_status": "EMPTY"},
    {"name": "Aashirvaad Atta", "barcode": "8901725130503", "aliases": ["atta", "flour", "wheat flour", "gehun"],
     "size_value": 5, "size_unit": "kg", "buying_price": 185, "selling_price": 205, "stock_status": "OK"},

    # Snacks & instant food
    {"name": "Maggi 2-Minute Noodles", "barcode": "8901058840094", "aliases": ["maggi", "noodles", "instant noodles"],
     "size_value": 280, "size_unit": "g", "buying_price": 48, "selling_price": 52, "stock_status": "LOW"},
    {"name": "Parle-G Biscuits", "barcode": "8901719106088", "aliases": ["parle", "biscuits", "glucose biscuits"],
     "size_value": 1, "size_unit": "kg", "buying_price": 50, "selling_price": 55, "stock_status": "OK"},
    {"name": "Haldiram Bhujia", "barcode": "8904063209214", "aliases": ["bhujia", "namkeen", "snacks"],
     "size_value": 400, "size_unit": "g", "buying_price": 80, "selling_price": 90, "stock_status": "OK"},

    # Dairy & beverages
    {"name": "Amul Taaza Milk", "barcode": "8901088100201", "aliases": ["milk", "doodh", "amul"],
     "size_value": 500, "size_unit": "mL", "buying_price": 28, "selling_price": 30, "stock_status": "EMPTY"},
    {"name": "Red Label Tea", "barcode": "8901030714184", "aliases": ["chai", "tea", "chai patti"],
     "size_value": 500, "size_unit": "g", "buying_price": 180, "selling_price": 200, "stock_status": "LOW"},
    {"name": "Bru Instant Coffee", "barcode": "8901063006607", "aliases": ["coffee", "instant coffee"],
     "size_value": 200, "size_unit": "g", "buying_price": 240, "selling_price": 265, "stock_status": "OK"},

    # Personal care
    {"name": "Colgate Toothpaste", "barcode": "8901012101001", "aliases": ["toothpaste", "dant manjan", "colgate"],
     "size_value": 200, "size_unit": "g", "buying_price": 95, "selling_price": 105, "stock_status": "OK"},
    {"name": "Clinic Plus Shampoo", "barcode": "8901030676109", "aliases": ["shampoo", "hair wash"],
     "size_value": 180, "size_unit": "mL", "buying_price": 70, "selling_price": 78, "stock_status": "OK"},
    {"name": "Lux Soap", "barcode": "8901030612510", "aliases": ["soap", "sabun", "bathing soap"],
     "size_value": 125, "size_unit": "g", "buying_price": 32, "selling_price": 35, "stock_status": "OK"},

    # Household
    {"name": "Vim Dishwash Bar", "barcode": "8901030611100", "aliases": ["vim", "dishwash", "bartan soap"],
     "size_value": 600, "size_unit": "g", "buying_price": 45, "selling_price": 50, "stock_status": "LOW"},
    {"name": "Surf Excel Detergent", "barcode": "8901030612527", "aliases": ["surf", "detergent", "kapde dhone ka powder"],
     "size_value": 1, "size_unit": "kg", "buying_price": 150, "selling_price": 165, "stock_status": "OK"},
]


def seed_store(store: JsonStore) -> int:
    """Add the sample products to ``store`` if it is empty; return the count added."""
    if store.products():
        logger.info("Store already has products, skipping seed")
        return 0
    service = ProductService(store)
    for data in SAMPLE_PRODUCTS:
        service.create_product(data)
    logger.info("Seeded %d sample products", len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the kirana store with sample products")
    parser.add_argument("path", nargs="?", type=Path, default=None, help="store file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    path = args.path
    if path is None:
        from runtime_config import inventory_data_path

        path = inventory_data_path()
    added = seed_store(JsonStore(path))
    print(f"Added {added} products to {path}", file=sys.stdout)


if __name__ == "__main__":
    main()
