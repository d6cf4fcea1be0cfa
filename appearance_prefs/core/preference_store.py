"""Key/value preference stores for small user settings.

Every store accepts only primitive values (str, int, float, bool) and lets
any number of observers follow a key. Observers only see writes made through
the same store instance.
"""

import json
import os
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from PyQt5 import QtCore

from ..constants import DEFAULT_SETTINGS_FILE, SETTINGS_APPLICATION, SETTINGS_ORGANIZATION
from .exceptions import InvalidSettingError, SettingsLoadError, SettingsSaveError

PRIMITIVE_TYPES = (str, int, float, bool)

Observer = Callable[[Any], None]


def _validate_entry(key: str, value: Any):
    """Reject keys and values a preference store cannot hold."""
    if not isinstance(key, str) or not key:
        raise InvalidSettingError(str(key), value, "key must be a non-empty string")
    if not isinstance(value, PRIMITIVE_TYPES):
        raise InvalidSettingError(
            key, value, f"unsupported type {type(value).__name__}, expected str, int, float or bool"
        )


class PreferenceStore(ABC):
    """Base class for preference stores."""

    def __init__(self):
        self._observers: Dict[str, List[Observer]] = {}

    # Backend hooks
    @abstractmethod
    def _contains(self, key: str) -> bool:
        ...

    @abstractmethod
    def _read(self, key: str) -> Any:
        ...

    @abstractmethod
    def _write(self, key: str, value: Any):
        ...

    @abstractmethod
    def _delete(self, key: str):
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        """Get all stored keys."""

    # Public interface
    def contains(self, key: str) -> bool:
        """Check whether a value is stored under key."""
        return self._contains(key)

    def get(self, key: str, default: Any = None) -> Any:
        """Get the value stored under key, or default when absent."""
        if not self._contains(key):
            return default
        return self._read(key)

    def set(self, key: str, value: Any):
        """Store a primitive value under key and notify observers."""
        _validate_entry(key, value)
        self._write(key, value)
        self._notify(key, value)

    def remove(self, key: str):
        """Remove key if present. Observers receive None."""
        if not self._contains(key):
            return
        self._delete(key)
        self._notify(key, None)

    def observe(self, key: str, callback: Observer) -> Callable[[], None]:
        """Call callback with each new value of key.

        Returns a function that stops the observation.
        """
        callbacks = self._observers.setdefault(key, [])
        callbacks.append(callback)

        def unsubscribe():
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def _notify(self, key: str, value: Any):
        """Deliver a change to every observer of key."""
        for callback in list(self._observers.get(key, [])):
            try:
                callback(value)
            except Exception:
                logging.exception(f"Preference observer failed for key {key!r}")


class InMemoryPreferenceStore(PreferenceStore):
    """Preference store held in a dict; nothing is persisted."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        super().__init__()
        self._values: Dict[str, Any] = {}
        for key, value in (initial or {}).items():
            _validate_entry(key, value)
            self._values[key] = value

    def _contains(self, key: str) -> bool:
        return key in self._values

    def _read(self, key: str) -> Any:
        return self._values[key]

    def _write(self, key: str, value: Any):
        self._values[key] = value

    def _delete(self, key: str):
        del self._values[key]

    def keys(self) -> List[str]:
        return list(self._values)


class JsonPreferenceStore(PreferenceStore):
    """Preference store persisted as a flat JSON object.

    Every write is saved immediately. Load and save failures are logged and
    never interrupt the caller; the in-memory values stay authoritative.
    """

    def __init__(self, settings_file: str = DEFAULT_SETTINGS_FILE):
        super().__init__()
        self.settings_file = settings_file
        self._values: Dict[str, Any] = {}
        self._load_settings()

    def _load_settings(self):
        """Load preferences, falling back to an empty store."""
        try:
            self.load()
        except SettingsLoadError as e:
            logging.warning(f"Could not load preferences: {e}")
            self._values = {}

    def load(self):
        """Replace the in-memory values with the file contents.

        Raises:
            SettingsLoadError: If the file cannot be read or is not a JSON object
        """
        if not os.path.exists(self.settings_file):
            logging.info("No preferences file found, using defaults")
            return

        try:
            with open(self.settings_file, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise SettingsLoadError(self.settings_file, e) from e

        if not isinstance(data, dict):
            raise SettingsLoadError(
                self.settings_file, ValueError(f"expected a JSON object, got {type(data).__name__}")
            )

        values = {}
        for key, value in data.items():
            if isinstance(value, PRIMITIVE_TYPES):
                values[key] = value
            else:
                logging.warning(f"Ignoring non-primitive preference {key!r} in {self.settings_file}")

        self._values = values
        logging.info(f"Preferences loaded from {self.settings_file}")

    def save(self):
        """Write all values to the preferences file.

        Raises:
            SettingsSaveError: If the file cannot be written
        """
        try:
            with open(self.settings_file, 'w') as f:
                json.dump(self._values, f, indent=2)
        except (OSError, TypeError, ValueError) as e:
            raise SettingsSaveError(self.settings_file, e) from e

        logging.debug(f"Preferences saved to {self.settings_file}")

    def save_settings(self) -> bool:
        """Save preferences, logging instead of raising on failure."""
        try:
            self.save()
            return True
        except SettingsSaveError as e:
            logging.warning(f"Could not save preferences: {e}")
            return False

    def _contains(self, key: str) -> bool:
        return key in self._values

    def _read(self, key: str) -> Any:
        return self._values[key]

    def _write(self, key: str, value: Any):
        self._values[key] = value
        self.save_settings()

    def _delete(self, key: str):
        del self._values[key]
        self.save_settings()

    def keys(self) -> List[str]:
        return list(self._values)


class QSettingsPreferenceStore(PreferenceStore):
    """Preference store backed by QSettings.

    Uses the platform's native location for organization/application, or
    an INI file when file_path is given. INI files return every value as
    text, so readers must accept strings.
    """

    def __init__(self, organization: str = SETTINGS_ORGANIZATION,
                 application: str = SETTINGS_APPLICATION,
                 file_path: Optional[str] = None):
        super().__init__()
        if file_path:
            self._settings = QtCore.QSettings(file_path, QtCore.QSettings.IniFormat)
        else:
            self._settings = QtCore.QSettings(organization, application)

    @property
    def file_name(self) -> str:
        """Get the backing file or registry path."""
        return self._settings.fileName()

    def _sync(self):
        self._settings.sync()
        if self._settings.status() != QtCore.QSettings.NoError:
            logging.warning(f"Could not write preferences to {self.file_name}")

    def _contains(self, key: str) -> bool:
        return self._settings.contains(key)

    def _read(self, key: str) -> Any:
        return self._settings.value(key)

    def _write(self, key: str, value: Any):
        self._settings.setValue(key, value)
        self._sync()

    def _delete(self, key: str):
        self._settings.remove(key)
        self._sync()

    def keys(self) -> List[str]:
        return list(self._settings.allKeys())
