from flask import request

from ..errors import ValidationError


def json_body():
    """Return the request JSON object or raise BAD_REQUEST."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("invalid json")
    return data


def require_str(data, key):
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{key} is required")
    return value


def require_bool(data, key):
    value = data.get(key)
    if not isinstance(value, bool):
        raise ValidationError(f"{key} must be a boolean")
    return value


def require_arg(key):
    """Required query string argument."""
    value = request.args.get(key, "")
    if not value.strip():
        raise ValidationError(f"{key} is required")
    return value
