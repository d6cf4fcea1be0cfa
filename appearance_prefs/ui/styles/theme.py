"""Light and dark styling, and applying a SchemeChoice to an application."""

from typing import Callable, Optional
from PyQt5 import QtGui, QtWidgets

from ...core.scheme_preference import SchemePreference
from ...models.scheme_choice import SchemeChoice

# Color palette
class AppColors:
    """Application color scheme."""

    # Dark theme colors
    DARK_BACKGROUND = "#2d2d2d"
    DARK_FOREGROUND = "#cccccc"
    DARK_ACCENT = "#5a9bd5"
    DARK_SECONDARY = "#404040"
    DARK_SECONDARY_LIGHT = "#555555"

    # Light theme colors
    LIGHT_BACKGROUND = "#ffffff"
    LIGHT_FOREGROUND = "#333333"
    LIGHT_ACCENT = "#0078d4"
    LIGHT_SECONDARY = "#f3f2f1"
    LIGHT_SECONDARY_LIGHT = "#faf9f8"


class AppTheme:
    """A forced light or dark theme."""

    def __init__(self, theme_name: str = "dark"):
        if theme_name not in ("dark", "light"):
            raise ValueError(f"Unknown theme: {theme_name}")
        self.theme_name = theme_name
        self._setup_theme()

    def _setup_theme(self):
        """Setup theme colors."""
        if self.theme_name == "dark":
            self.colors = {
                'background': AppColors.DARK_BACKGROUND,
                'foreground': AppColors.DARK_FOREGROUND,
                'accent': AppColors.DARK_ACCENT,
                'secondary': AppColors.DARK_SECONDARY,
                'secondary_light': AppColors.DARK_SECONDARY_LIGHT
            }
        else:  # light theme
            self.colors = {
                'background': AppColors.LIGHT_BACKGROUND,
                'foreground': AppColors.LIGHT_FOREGROUND,
                'accent': AppColors.LIGHT_ACCENT,
                'secondary': AppColors.LIGHT_SECONDARY,
                'secondary_light': AppColors.LIGHT_SECONDARY_LIGHT
            }

    def build_palette(self) -> QtGui.QPalette:
        """Build a QPalette so unstyled widgets follow the theme too."""
        background = QtGui.QColor(self.colors['background'])
        foreground = QtGui.QColor(self.colors['foreground'])
        secondary = QtGui.QColor(self.colors['secondary'])
        accent = QtGui.QColor(self.colors['accent'])

        palette = QtGui.QPalette()
        palette.setColor(QtGui.QPalette.Window, background)
        palette.setColor(QtGui.QPalette.WindowText, foreground)
        palette.setColor(QtGui.QPalette.Base, background)
        palette.setColor(QtGui.QPalette.AlternateBase, secondary)
        palette.setColor(QtGui.QPalette.Text, foreground)
        palette.setColor(QtGui.QPalette.Button, secondary)
        palette.setColor(QtGui.QPalette.ButtonText, foreground)
        palette.setColor(QtGui.QPalette.ToolTipBase, secondary)
        palette.setColor(QtGui.QPalette.ToolTipText, foreground)
        palette.setColor(QtGui.QPalette.Highlight, accent)
        palette.setColor(QtGui.QPalette.HighlightedText, QtGui.QColor("#ffffff"))
        return palette

    def get_stylesheet(self) -> str:
        """Get complete application stylesheet."""
        return f"""
        QMainWindow {{
            background-color: {self.colors['background']};
            color: {self.colors['foreground']};
        }}

        QLabel {{
            color: {self.colors['foreground']};
        }}

        /* Tool bars */
        QToolBar {{
            background-color: {self.colors['secondary']};
            border: none;
            spacing: 4px;
        }}

        QToolButton {{
            background-color: transparent;
            color: {self.colors['foreground']};
            border-radius: 4px;
            padding: 4px;
        }}

        QToolButton:hover {{
            background-color: {self.colors['secondary_light']};
        }}

        /* Menus */
        QMenu {{
            background-color: {self.colors['secondary']};
            color: {self.colors['foreground']};
            border: 1px solid {self.colors['secondary_light']};
            border-radius: 4px;
        }}

        QMenu::item {{
            padding: 6px 20px;
        }}

        QMenu::item:selected {{
            background-color: {self.colors['accent']};
        }}

        /* Status bar */
        QStatusBar {{
            background-color: {self.colors['secondary']};
            color: {self.colors['foreground']};
            border-top: 1px solid {self.colors['secondary_light']};
        }}

        QToolTip {{
            background-color: {self.colors['secondary']};
            color: {self.colors['foreground']};
            border: 1px solid {self.colors['secondary_light']};
            padding: 4px;
        }}
        """


def apply_scheme_choice(app: QtWidgets.QApplication, choice: SchemeChoice) -> Optional[AppTheme]:
    """Apply a choice to the application.

    Light and dark force the matching theme. Automatic clears any forced
    theme so the platform's own scheme shows through.
    """
    scheme = SchemeChoice(choice).preferred_color_scheme
    if scheme is None:
        app.setStyleSheet("")
        app.setPalette(app.style().standardPalette())
        return None

    theme = AppTheme(scheme)
    app.setStyleSheet(theme.get_stylesheet())
    app.setPalette(theme.build_palette())
    return theme


def bind_application_scheme(app: QtWidgets.QApplication,
                            preference: SchemePreference) -> Callable[[], None]:
    """Apply the stored choice now and again whenever it changes."""
    apply_scheme_choice(app, preference.value)
    return preference.observe(lambda choice: apply_scheme_choice(app, choice))
