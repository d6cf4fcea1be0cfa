"""Main window showing the stored appearance preferences."""

import logging
from typing import Optional
from PyQt5 import QtWidgets, QtCore

from ..constants import APP_WINDOW_TITLE, LAST_LAUNCH_KEY
from ..core.codecs import instant_codec
from ..core.preference_store import PreferenceStore, QSettingsPreferenceStore
from ..core.scheme_preference import SchemePreference
from ..core.stored_value import StoredValue
from ..models.instant import Instant
from ..models.scheme_choice import SchemeChoice
from .scheme_selector import SchemeSelectorToolBar, ToolbarPlacement


class MainWindow(QtWidgets.QMainWindow):
    """Main application window."""

    def __init__(self, store: Optional[PreferenceStore] = None,
                 placement: ToolbarPlacement = ToolbarPlacement.AUTOMATIC):
        super().__init__()

        self.store = store if store is not None else QSettingsPreferenceStore()
        self.scheme_preference = SchemePreference(self.store)
        self.last_launch = StoredValue(self.store, LAST_LAUNCH_KEY, instant_codec, Instant.epoch())

        self.previous_launch = self.last_launch.get()
        self.last_launch.set(Instant.now())

        self._setup_ui()
        self.scheme_selector = SchemeSelectorToolBar(self.scheme_preference, placement, self).add_to(self)

        self._show_scheme(self.scheme_preference.value)
        self._unsubscribe_scheme = self.scheme_preference.observe(self._show_scheme)

        logging.info("Main window initialized")

    def _setup_ui(self):
        """Setup the main UI layout."""
        self.setWindowTitle(APP_WINDOW_TITLE)
        self.setMinimumSize(420, 240)

        central_widget = QtWidgets.QWidget()
        self.setCentralWidget(central_widget)
        layout = QtWidgets.QVBoxLayout(central_widget)

        self.launch_label = QtWidgets.QLabel(self._launch_text())
        self.launch_label.setAlignment(QtCore.Qt.AlignCenter)
        layout.addWidget(self.launch_label)

        self.scheme_label = QtWidgets.QLabel()
        self.scheme_label.setAlignment(QtCore.Qt.AlignCenter)
        layout.addWidget(self.scheme_label)

    def _launch_text(self) -> str:
        """Describe the previous launch for the window."""
        if self.previous_launch == Instant.epoch():
            return "First launch"

        try:
            stamp = f"{self.previous_launch.to_datetime():%Y-%m-%d %H:%M:%S} UTC"
        except (OverflowError, ValueError, OSError) as e:
            logging.warning(f"Stored launch time cannot be shown as a date: {e}")
            stamp = f"{self.previous_launch.offset!r} s after 2001-01-01 UTC"
        return f"Previous launch: {stamp}"

    def _show_scheme(self, choice: SchemeChoice):
        """Reflect the current choice in the window."""
        self.scheme_label.setText(f"Appearance: {choice.label}")
        self.statusBar().showMessage(f"Appearance set to {choice.label}", 3000)

    def closeEvent(self, event):
        """Stop following the preference when the window closes."""
        self._unsubscribe_scheme()
        logging.info("Application closed")
        super().closeEvent(event)
