"""Tri-state color scheme choice."""

from enum import IntEnum
from typing import Optional


class SchemeChoice(IntEnum):
    """User's color scheme preference.

    The integer values are persisted; never renumber them.
    """

    AUTOMATIC = 0
    LIGHT = 1
    DARK = 2

    @property
    def label(self) -> str:
        """Get the menu label for this choice."""
        return self.name.capitalize()

    @property
    def preferred_color_scheme(self) -> Optional[str]:
        """Get the forced scheme name, or None to let the platform decide."""
        if self is SchemeChoice.AUTOMATIC:
            return None
        return self.name.lower()


# Order in which the selector menu lists the choices
MENU_ORDER = (SchemeChoice.LIGHT, SchemeChoice.DARK, SchemeChoice.AUTOMATIC)
