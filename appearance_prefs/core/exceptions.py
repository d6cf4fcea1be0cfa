"""Custom exception hierarchy for the appearance preference helpers."""

from typing import Optional, Any


class AppearancePrefsError(Exception):
    """Base exception for all appearance preference errors."""
    
    def __init__(self, message: str, details: Optional[str] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.cause = cause
    
    def __str__(self) -> str:
        result = self.message
        if self.details:
            result += f"\nDetails: {self.details}"
        if self.cause:
            result += f"\nCaused by: {self.cause}"
        return result


# Settings and preference store errors
class SettingsError(AppearancePrefsError):
    """Base class for preference store errors."""
    pass


class SettingsLoadError(SettingsError):
    """Error loading preferences from file."""
    
    def __init__(self, file_path: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Failed to load preferences from: {file_path}",
            "Preferences will be reset to defaults",
            cause
        )
        self.file_path = file_path


class SettingsSaveError(SettingsError):
    """Error saving preferences to file."""
    
    def __init__(self, file_path: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Failed to save preferences to: {file_path}",
            "Preference changes may be lost",
            cause
        )
        self.file_path = file_path


class InvalidSettingError(SettingsError):
    """Invalid preference key or value."""
    
    def __init__(self, setting_name: str, value: Any, reason: str):
        super().__init__(
            f"Invalid setting: {setting_name!r}",
            f"Value: {value!r}, Reason: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
