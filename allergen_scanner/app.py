#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HTTP surface for the allergen scanner.

A text recognizer (or any other client) posts recognized label text to
``/scan``; the selected-allergen list is managed through ``/allergens``.
"""

from typing import Any, Dict

from decouple import config
from flask import Flask, jsonify, request

from .core import log, get_scanner_state
from .core.exceptions import PersistenceError
from .matching.matcher import MatchSettings, find_allergens
from .matching.summary import summarize
from .utils.constants import BUILTIN_CATALOG, BUILTIN_NAMES


def _j(code: int, payload: Any):
    resp = jsonify(payload)
    resp.status_code = code
    resp.headers.setdefault("Cache-Control", "no-store")
    return resp


def _error(code: int, error_code: str, message: str):
    return _j(code, {"error_code": error_code, "message": message})


def create_app(state=None, settings: MatchSettings = None) -> Flask:
    """
    Build the Flask application.

    Args:
        state: Scanner state owning the registry (defaults to the process singleton)
        settings: Fuzzy thresholds for ``/scan``
    """
    app = Flask(__name__)
    state = state or get_scanner_state()
    settings = settings or MatchSettings.from_config()

    @app.errorhandler(PersistenceError)
    def not_saved(e):
        log.error(f"❌ {e}")
        return _error(500, "not_saved", "The change was applied but could not be saved")

    @app.route("/catalog")
    def catalog():
        return _j(200, [{"name": name, "synonyms": sorted(BUILTIN_CATALOG[name]),
                         "selected": state.registry.is_selected(name)}
                        for name in BUILTIN_NAMES])

    @app.route("/allergens")
    def list_allergens():
        return _j(200, [a.to_dict() for a in state.registry])

    @app.route("/allergens/builtin/<name>/toggle", methods=["POST"])
    def toggle_builtin(name: str):
        if not name.strip():
            return _error(400, "missing_name", "name is required")
        selected = state.registry.toggle_builtin(name)
        return _j(200, {"name": name, "selected": selected})

    @app.route("/allergens/custom", methods=["POST"])
    def add_custom():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            return _error(400, "invalid_json", "Body must be a JSON object with a string 'name'")

        added = state.registry.add_custom(data["name"])
        if added is None:
            return _error(409, "rejected", "Name is empty or already selected")
        return _j(201, added.to_dict())

    @app.route("/allergens/<allergen_id>", methods=["DELETE"])
    def remove_allergen(allergen_id: str):
        if not state.registry.remove(allergen_id):
            return _error(404, "not_found", f"No allergen with id {allergen_id}")
        return "", 204

    @app.route("/scan", methods=["POST"])
    def scan():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get("text"), str):
            return _error(400, "missing_text", "Body must be a JSON object with a string 'text'")

        text = data["text"]
        summary = summarize(text, find_allergens(text, state.registry.snapshot(), settings))
        payload: Dict[str, Any] = {
            "matches": [m.to_dict() for m in summary.matches],
            "summary": summary.to_dict(),
        }
        log.debug(f"/scan → {summary.status.value}")
        return _j(200, payload)

    return app


# ── dev runner ----------------------------------------------------
if __name__ == "__main__":
    create_app().run(host=config('ALLERGEN_SCANNER_HOST', default='127.0.0.1'),
                     port=config('ALLERGEN_SCANNER_PORT', default=8080, cast=int),
                     debug=True)
