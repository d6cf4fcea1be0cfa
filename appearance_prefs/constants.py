"""Application-wide constants for the appearance preference helpers."""

from datetime import datetime, timezone

# --- Preference keys ---
COLOR_SCHEME_AUTOMATIC_KEY = "ColorSchemeAutomatic"
LAST_LAUNCH_KEY = "LastLaunch"

# --- Storage ---
DEFAULT_SETTINGS_FILE = "appearance_preferences.json"
SETTINGS_ORGANIZATION = "AppearancePrefs"
SETTINGS_APPLICATION = "AppearancePrefs"

# Offsets stored by Instant are measured from this point.
REFERENCE_EPOCH = datetime(2001, 1, 1, tzinfo=timezone.utc)

# --- UI ---
APP_WINDOW_TITLE = "Appearance Preferences"
SCHEME_MENU_TITLE = "Appearance"
SCHEME_TOOLBAR_TITLE = "Appearance"
SCHEME_ICON_SIZE = 16
