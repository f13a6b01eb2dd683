"""Use cases for per-user notification preferences."""

from .get_preferences import get_preferences
from .update_preferences import update_preferences

__all__ = ["get_preferences", "update_preferences"]
