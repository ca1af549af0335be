"""Helpers shared by the JSON controllers."""

from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import BackupFormatError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def ok(payload: dict | None = None, status: int = 200):
    body = {"success": True}
    body.update(payload or {})
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_errors(view):
    """Map domain errors onto JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return fail(str(e), 404)
        except (ValidationError, BackupFormatError) as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("unhandled error in %s", view.__name__)
            return fail("Internal error", 500)

    return wrapper
