"""Helpers for handling push tokens in logs."""

_VISIBLE_PREFIX = 12


def mask_token(token: str | None) -> str:
    """Return a short prefix of ``token`` safe to write to logs."""

    if not token:
        return "<empty>"
    if len(token) <= _VISIBLE_PREFIX:
        return token
    return f"{token[:_VISIBLE_PREFIX]}..."
