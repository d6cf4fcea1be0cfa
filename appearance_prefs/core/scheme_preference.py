"""The persisted tri-state color scheme preference."""

import logging
from typing import Callable

from ..constants import COLOR_SCHEME_AUTOMATIC_KEY
from ..models.scheme_choice import SchemeChoice
from .codecs import scheme_choice_codec
from .preference_store import PreferenceStore
from .stored_value import StoredValue


class SchemePreference:
    """Reads and writes the user's SchemeChoice in a preference store.

    The choice lives under COLOR_SCHEME_AUTOMATIC_KEY as its ordinal. A
    missing entry reads as AUTOMATIC. The entry is never removed here.
    """

    def __init__(self, store: PreferenceStore):
        self._stored = StoredValue(
            store, COLOR_SCHEME_AUTOMATIC_KEY, scheme_choice_codec, SchemeChoice.AUTOMATIC
        )

    @property
    def store(self) -> PreferenceStore:
        return self._stored.store

    @property
    def value(self) -> SchemeChoice:
        """Get the current choice."""
        return self._stored.get()

    def select(self, choice: SchemeChoice):
        """Persist a choice made by the user."""
        choice = SchemeChoice(choice)
        self._stored.set(choice)
        logging.info(f"Color scheme set to {choice.label}")

    def observe(self, callback: Callable[[SchemeChoice], None]) -> Callable[[], None]:
        """Follow changes to the choice; returns an unsubscribe function."""
        return self._stored.observe(callback)
