"""Styling for forced light and dark schemes."""

from .theme import AppTheme, apply_scheme_choice, bind_application_scheme

__all__ = [
    "AppTheme",
    "apply_scheme_choice",
    "bind_application_scheme"
]
