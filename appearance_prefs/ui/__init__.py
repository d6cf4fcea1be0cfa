"""User interface components for appearance preferences."""

from .scheme_selector import SchemeSelectorToolBar, ToolbarPlacement

__all__ = [
    "SchemeSelectorToolBar",
    "ToolbarPlacement"
]
