"""Shared pytest fixtures for the appearance preferences test suite."""

from __future__ import annotations

import os

import pytest
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5 import QtWidgets

from appearance_prefs.core.preference_store import InMemoryPreferenceStore, JsonPreferenceStore
from appearance_prefs.core.scheme_preference import SchemePreference
from appearance_prefs.models.scheme_choice import SchemeChoice
from appearance_prefs.ui.styles.theme import apply_scheme_choice


@pytest.fixture(scope="session")
def qt_application() -> QtWidgets.QApplication:
    """Provide a QApplication instance configured for offscreen rendering."""
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
        created = True
    else:
        created = False

    yield app

    if created:
        app.quit()


@pytest.fixture
def clean_application(qt_application: QtWidgets.QApplication) -> QtWidgets.QApplication:
    """QApplication that is reset to the platform scheme after the test."""
    yield qt_application
    apply_scheme_choice(qt_application, SchemeChoice.AUTOMATIC)


@pytest.fixture
def memory_store() -> InMemoryPreferenceStore:
    """Empty in-memory preference store."""
    return InMemoryPreferenceStore()


@pytest.fixture
def settings_file(tmp_path) -> str:
    """Path for a preferences file that does not exist yet."""
    return str(tmp_path / "preferences.json")


@pytest.fixture
def json_store(settings_file: str) -> JsonPreferenceStore:
    """JSON preference store backed by a temporary file."""
    return JsonPreferenceStore(settings_file)


@pytest.fixture
def scheme_preference(memory_store: InMemoryPreferenceStore) -> SchemePreference:
    """Scheme preference over an empty in-memory store."""
    return SchemePreference(memory_store)
