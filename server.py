"""Flask application for Munafa OS, the kirana shop inventory tracker.

The server wires together configuration (``config.ini`` plus runtime
overrides and ``.env``), logging, the JSON product store and the HTTP
routes: product CRUD, the traffic-light stock status, the Mandi shopping
list, settings, and the bilingual search blueprint from :mod:`shabdkosh`.
Every JSON response follows ``{"success": bool, "data"|"error": ...}``.
"""

import configparser
import logging
import os
import shutil
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional, Tuple

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from inventory.errors import AppError, ValidationError
from inventory.models import Settings
from inventory.seed import seed_store
from inventory.service import (
    DEFAULT_RESULT_LIMIT,
    ProductService,
    SettingsService,
    StockService,
    serialize_product,
)
from inventory.storage import JsonStore
from runtime_config import inventory_data_path, load_merged_config
from shabdkosh.api import bp as search_bp
from shabdkosh.suggester import MAX_SUGGESTIONS


# Custom StreamHandler to handle encoding errors
class SafeEncodingStreamHandler(logging.StreamHandler):
    def emit(self, record):
        """Write log lines without failing on consoles that cannot show Devanagari."""
        try:
            msg = self.format(record)
            stream = self.stream
            stream.write(msg.encode('utf-8', errors='replace').decode('utf-8', errors='ignore') + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


class SafeRotatingFileHandler(RotatingFileHandler):
    """Rotating handler that tolerates Windows file locks (e.g. OneDrive/AV)."""

    def rotate(self, source: str, dest: str) -> None:
        try:
            super().rotate(source, dest)
            return
        except PermissionError as exc:
            if getattr(exc, "winerror", None) != 32:
                raise
        # Fallback: copy current log and truncate instead of renaming
        try:
            if os.path.exists(source):
                shutil.copy2(source, dest)
            with open(source, "w", encoding=self.encoding or "utf-8") as fh:
                fh.truncate(0)
        except OSError:
            return


load_dotenv()

try:
    config = load_merged_config()
except configparser.Error:
    logging.exception("Could not load configuration completely, using defaults")
    config = configparser.ConfigParser()


def _level(name: Optional[str], default: int) -> int:
    return logging._nameToLevel.get((name or "").strip().upper(), default)


def configure_logging(cfg: configparser.ConfigParser) -> None:
    """Install console (and optional rotating file) handlers on the root logger."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        try:
            handler.close()
        except OSError:
            pass

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    console_level = _level(
        os.getenv("MUNAFA_LOG_LEVEL") or cfg.get("LOGGING", "console_level", fallback="INFO"),
        logging.INFO,
    )

    safe_handler = SafeEncodingStreamHandler(sys.stdout)
    safe_handler.setFormatter(formatter)
    safe_handler.setLevel(console_level)
    root_logger.addHandler(safe_handler)
    root_level = console_level

    log_file = cfg.get("LOGGING", "log_file", fallback="").strip()
    if log_file:
        file_level = _level(cfg.get("LOGGING", "file_level", fallback=""), console_level)
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = SafeRotatingFileHandler(
            path,
            maxBytes=cfg.getint("LOGGING", "log_max_bytes", fallback=1048576),
            backupCount=cfg.getint("LOGGING", "log_backup_count", fallback=3),
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(file_level)
        root_logger.addHandler(file_handler)
        root_level = min(root_level, file_level)

    root_logger.setLevel(root_level)
    # werkzeug logs every request at INFO
    logging.getLogger('werkzeug').setLevel(max(console_level, logging.WARNING))


configure_logging(config)
logger = logging.getLogger(__name__)  # Module-level logger


def success_response(data: Any, message: Optional[str] = None, status: int = 200) -> Tuple[Any, int]:
    payload: dict[str, Any] = {"success": True, "data": data}
    if message:
        payload["message"] = message
    return jsonify(payload), status


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request must be a JSON object")
    return data


def _int_arg(name: str) -> Optional[int]:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name}: must be an integer") from None


def create_app(
    store: Optional[JsonStore] = None,
    cfg: Optional[configparser.ConfigParser] = None,
) -> Flask:
    """Build the Flask app around ``store`` (defaults to the configured file)."""
    cfg = cfg if cfg is not None else config
    if store is None:
        store = JsonStore(inventory_data_path(cfg))
        if cfg.getboolean("INVENTORY", "seed_on_empty", fallback=False):
            seed_store(store)

    defaults = Settings(
        default_margin=cfg.getfloat("INVENTORY", "default_margin", fallback=10.0),
        language=cfg.get("INVENTORY", "language", fallback="hi"),
    )
    products = ProductService(store)
    stock = StockService(store)
    settings = SettingsService(store, defaults)
    result_limit = cfg.getint("SEARCH", "result_limit", fallback=DEFAULT_RESULT_LIMIT)

    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.config["MAX_SUGGESTIONS"] = cfg.getint("SEARCH", "max_suggestions", fallback=MAX_SUGGESTIONS)
    app.config["STORE"] = store
    app.register_blueprint(search_bp)

    @app.errorhandler(AppError)
    def handle_app_error(exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s: %s", exc.code, exc.message)
        else:
            logger.info("%s: %s", exc.code, exc.message)
        return jsonify(exc.to_dict()), exc.status_code

    @app.route('/api/health')
    def health():
        return jsonify({"status": "ok", "products": len(store.products())})

    @app.route('/api/products', methods=['GET'])
    def list_products():
        result = products.list_products(
            page=_int_arg("page"),
            limit=_int_arg("limit"),
            stock_status=request.args.get("stock_status") or None,
        )
        result["data"] = [serialize_product(p) for p in result["data"]]
        return success_response(result)

    @app.route('/api/products', methods=['POST'])
    def add_product():
        product = products.create_product(_json_body())
        return success_response(serialize_product(product), "Product created successfully", 201)

    @app.route('/api/products/search')
    def search_products():
        """Semantic Hindi/English search over the whole catalogue."""
        query = request.args.get("q", "")
        limit = _int_arg("limit") or result_limit
        found = products.search(query, limit=limit)
        return success_response([serialize_product(p) for p in found])

    @app.route('/api/products/barcode/<barcode>')
    def product_by_barcode(barcode: str):
        return success_response(serialize_product(products.get_product_by_barcode(barcode)))

    @app.route('/api/products/<product_id>', methods=['GET'])
    def get_product(product_id: str):
        return success_response(serialize_product(products.get_product(product_id)))

    @app.route('/api/products/<product_id>', methods=['PATCH'])
    def update_product(product_id: str):
        product = products.update_product(product_id, _json_body())
        return success_response(serialize_product(product), "Product updated successfully")

    @app.route('/api/products/<product_id>', methods=['DELETE'])
    def delete_product(product_id: str):
        products.delete_product(product_id)
        return success_response({"id": product_id}, "Product deleted successfully")

    @app.route('/api/stock/<product_id>', methods=['PATCH'])
    def update_stock(product_id: str):
        status = _json_body().get("status")
        product = stock.update_stock_status(product_id, status)
        return success_response(
            {"message": f"Stock status updated to {product.stock.status.value}"},
            "Stock updated successfully",
        )

    @app.route('/api/stock/low')
    def low_stock():
        return success_response([item.to_dict() for item in stock.get_low_stock_items()])

    @app.route('/api/mandi-list')
    def mandi_list():
        return success_response({"list": stock.generate_mandi_list(), "total": stock.restock_value()})

    @app.route('/api/summary')
    def summary():
        return success_response(products.summary())

    @app.route('/api/settings', methods=['GET'])
    def get_settings():
        return success_response(settings.get_settings().to_dict())

    @app.route('/api/settings', methods=['PATCH'])
    def update_settings():
        updated = settings.update_settings(_json_body())
        return success_response(updated.to_dict(), "Settings updated successfully")

    return app


app = create_app()


if __name__ == '__main__':
    host = config.get("SERVER", "host", fallback="127.0.0.1")
    port = config.getint("SERVER", "port", fallback=5000)
    debug = config.getboolean("SERVER", "debug", fallback=False)
    logger.info("Starting Munafa OS on %s:%s", host, port)
    app.run(host=host, port=port, debug=debug)
