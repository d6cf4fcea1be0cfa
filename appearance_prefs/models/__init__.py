"""Data models for appearance preferences."""

from .instant import Instant
from .scheme_choice import SchemeChoice

__all__ = [
    "Instant",
    "SchemeChoice"
]
