"""Core preference logic for appearance preferences."""

from .codecs import Codec, InstantCodec, SchemeChoiceCodec, instant_codec, scheme_choice_codec
from .preference_store import (
    PreferenceStore,
    InMemoryPreferenceStore,
    JsonPreferenceStore,
    QSettingsPreferenceStore
)
from .stored_value import StoredValue
from .scheme_preference import SchemePreference

__all__ = [
    "Codec",
    "InstantCodec",
    "SchemeChoiceCodec",
    "instant_codec",
    "scheme_choice_codec",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "JsonPreferenceStore",
    "QSettingsPreferenceStore",
    "StoredValue",
    "SchemePreference"
]
