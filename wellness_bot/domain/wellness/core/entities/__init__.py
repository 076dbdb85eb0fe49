"""Domain entities."""

from .user_profile import RAW_FIELDS, UserProfile

__all__ = ["RAW_FIELDS", "UserProfile"]
