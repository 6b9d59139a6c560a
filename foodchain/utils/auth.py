import datetime as dt
from functools import wraps
from typing import Optional
from flask import request, jsonify, current_app
import jwt


def create_token(user_id: str, household_id: Optional[str] = None) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    hours = current_app.config.get("JWT_EXPIRES_HOURS", 12)
    payload = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(hours=hours)).timestamp()),
    }
    if household_id:
        payload["household_id"] = str(household_id)
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return jsonify({"error": {"code": "UNAUTHORIZED", "message": "Missing Bearer token"}}), 401
        token = auth_header.split(" ", 1)[1]
        try:
            payload = decode_token(token)
            request.user_id = str(payload["sub"])  # type: ignore
            request.household_id = payload.get("household_id")  # type: ignore
        except (jwt.InvalidTokenError, KeyError):
            return jsonify({"error": {"code": "UNAUTHORIZED", "message": "Invalid token"}}), 401
        return f(*args, **kwargs)
    return wrapper

__all__ = ["create_token", "decode_token", "require_auth"]
