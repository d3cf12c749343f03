from __future__ import annotations

from flask import jsonify


def json_error(message: str, status: int, **extra):
    body = {"success": False, "error": message}
    body.update(extra)
    return jsonify(body), status
