from typing import Any, Dict
from flask import request, jsonify

def ok(payload: Dict[str, Any], status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status

def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    # Fallback to form data if the body is not a JSON object
    return request.form.to_dict() if request.form else {}
