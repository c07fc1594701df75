"""Flask blueprint exposing the search core over HTTP.

The product form calls ``/suggest-aliases`` while the name is typed; the
other endpoints are thin wrappers used by the web client and for quick
contract checks during development.
"""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from .dictionary import related_terms
from .expander import expand_search_query, expand_terms
from .matcher import matches_product
from .suggester import MAX_SUGGESTIONS, get_suggested_aliases

bp = Blueprint("shabdkosh", __name__, url_prefix="/api/search")


def _ok(data: Any) -> Any:
    return jsonify({"success": True, "data": data})


def _bad_request(message: str) -> Any:
    return jsonify({"success": False, "error": "VALIDATION_ERROR", "message": message}), 400


@bp.route("/", methods=["GET"])
def root() -> Any:
    """Readiness endpoint."""
    return jsonify({"status": "ok"})


@bp.route("/related", methods=["GET"])
def related() -> Any:
    term = request.args.get("term", "")
    return _ok({"term": term, "related": related_terms(term)})


@bp.route("/expand", methods=["GET"])
def expand() -> Any:
    query = request.args.get("q", "")
    return _ok({"query": query, "expanded": expand_search_query(query), "terms": expand_terms(query)})


@bp.route("/suggest-aliases", methods=["GET"])
def suggest_aliases() -> Any:
    """Return alias chips for the product name in ``?name=``."""
    name = request.args.get("name", "")
    limit = current_app.config.get("MAX_SUGGESTIONS", MAX_SUGGESTIONS)
    return _ok({"name": name, "suggestions": get_suggested_aliases(name, limit=limit)})


@bp.route("/match", methods=["POST"])
def match() -> Any:
    data = request.get_json(silent=True) or {}
    query = data.get("query")
    product = data.get("product")
    if not isinstance(query, str) or not isinstance(product, dict):
        return _bad_request("query (string) and product (object) are required")
    name = product.get("name", "")
    aliases = product.get("aliases") or []
    if (
        not isinstance(name, str)
        or not isinstance(aliases, list)
        or not all(isinstance(a, str) for a in aliases)
    ):
        return _bad_request("product.name must be a string and product.aliases a list of strings")
    return _ok({"match": matches_product(query, {"name": name, "aliases": aliases})})
