"""
Appearance Preferences - storable instants and a tri-state color scheme

Small helpers for PyQt applications: an Instant that round-trips through a
string preference, and an automatic/light/dark scheme choice with a tool bar
selector.
"""

__version__ = "1.0.0"

from .models.instant import Instant
from .models.scheme_choice import SchemeChoice
from .core.codecs import InstantCodec, SchemeChoiceCodec
from .core.preference_store import InMemoryPreferenceStore, JsonPreferenceStore, QSettingsPreferenceStore
from .core.scheme_preference import SchemePreference
from .core.stored_value import StoredValue

__all__ = [
    "Instant",
    "SchemeChoice",
    "InstantCodec",
    "SchemeChoiceCodec",
    "InMemoryPreferenceStore",
    "JsonPreferenceStore",
    "QSettingsPreferenceStore",
    "SchemePreference",
    "StoredValue"
]
