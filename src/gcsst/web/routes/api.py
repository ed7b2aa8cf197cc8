from __future__ import annotations

import logging
import os

from flask import Blueprint, current_app, jsonify, request

from gcsst import __version__
from gcsst.errors import GcsstError, InvalidInput
from gcsst.output import transmute_from_content
from gcsst.tokenizer import ParseError

api_bp = Blueprint("api", __name__)

log = logging.getLogger(__name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/transmute", methods=["OPTIONS"])
def transmute_preflight():
    """Handle CORS preflight for transmutation."""
    return "", 204


def _error_response(error: Exception):
    return jsonify({"json": f"Error: {error}", "duration": "N/A"}), 400


@api_bp.route("/transmute", methods=["POST"])
def transmute():
    """Transmute the CSS in the JSON body and return the rendered scrolls."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("css"), str):
        return _error_response(InvalidInput("css required"))

    try:
        duration, json_output = transmute_from_content(
            data["css"],
            bool(data.get("with_oneliner", False)),
            oracle=current_app.extensions["spell_oracle"],
        )
    except (GcsstError, ParseError) as exc:
        log.info("Transmutation rejected: %s", exc)
        return _error_response(exc)

    return jsonify({"json": json_output, "duration": str(duration)})


@api_bp.route("/versions")
def versions():
    """Report the engine and UI versions."""
    return jsonify({
        "gcsst_version": os.environ.get("GCSST_VERSION", __version__),
        "gcsst_ui_version": os.environ.get("GCSST_UI_VERSION", "unknown"),
    })
