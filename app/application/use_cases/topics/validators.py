"""Validation helpers for topic use cases."""

from app.domain.errors import ValidationError

MAX_TOPIC_NAME_LENGTH = 255


def ensure_topic_name(name: str | None) -> str:
    """Return the stripped topic name or raise ``ValidationError``."""

    normalized = (name or "").strip()
    if not normalized:
        raise ValidationError("A topic name is required")
    if len(normalized) > MAX_TOPIC_NAME_LENGTH:
        raise ValidationError(
            f"Topic names cannot exceed {MAX_TOPIC_NAME_LENGTH} characters"
        )
    return normalized
