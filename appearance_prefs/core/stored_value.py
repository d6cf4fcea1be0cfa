"""Binding between one preference key, a codec and a default value."""

from typing import Callable, Generic, TypeVar

from .codecs import Codec
from .preference_store import PreferenceStore

T = TypeVar('T')


class StoredValue(Generic[T]):
    """A typed view of a single preference entry.

    Reads decode the stored primitive, or return the default when the key
    is absent. Writes encode the value and store it.
    """

    def __init__(self, store: PreferenceStore, key: str, codec: Codec, default: T):
        self.store = store
        self.key = key
        self.codec = codec
        self.default = default

    def get(self) -> T:
        """Get the current value."""
        if not self.store.contains(self.key):
            return self.default
        return self.codec.decode(self.store.get(self.key))

    def set(self, value: T):
        """Store a new value."""
        self.store.set(self.key, self.codec.encode(value))

    def observe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Call callback with each new decoded value; returns an unsubscribe function."""

        def _on_change(raw):
            callback(self.default if raw is None else self.codec.decode(raw))

        return self.store.observe(self.key, _on_change)
