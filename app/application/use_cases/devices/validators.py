"""Common validation helpers for device use cases."""

from app.domain.entities import PLATFORMS
from app.domain.errors import ValidationError


def ensure_token(token: str | None) -> str:
    """Return the stripped push token or raise ``ValidationError``."""

    normalized = (token or "").strip()
    if not normalized:
        raise ValidationError("A push token is required")
    return normalized


def ensure_platform(platform: str | None) -> str:
    normalized = (platform or "").strip().lower()
    if normalized not in PLATFORMS:
        raise ValidationError(
            f"Platform must be one of: {', '.join(PLATFORMS)}"
        )
    return normalized
