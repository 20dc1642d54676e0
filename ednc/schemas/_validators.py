# ednc/schemas/_validators.py
from typing import Any


def require_text(value: Any) -> str:
    if value is None or not str(value).strip():
        raise ValueError("must not be blank")
    return str(value).strip()


def require_nonblank(value: Any) -> Any:
    """Rejects blank input but keeps the value as sent (used for secrets)."""
    if value is None or not str(value).strip():
        raise ValueError("must not be blank")
    return value


def blank_to_none(value: Any) -> Any:
    """Forms send "" for untouched optional inputs."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
