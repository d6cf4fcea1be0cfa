import pytest
from PyQt5 import QtGui

from appearance_prefs.models.scheme_choice import SchemeChoice
from appearance_prefs.ui.styles.theme import (
    AppColors,
    AppTheme,
    apply_scheme_choice,
    bind_application_scheme
)


def test_theme_colors():
    assert AppTheme("dark").colors["background"] == AppColors.DARK_BACKGROUND
    assert AppTheme("light").colors["background"] == AppColors.LIGHT_BACKGROUND
    assert set(AppTheme("light").colors) == {"background", "foreground", "accent", "secondary", "secondary_light"}


def test_unknown_theme_rejected():
    with pytest.raises(ValueError):
        AppTheme("automatic")


def test_palette_matches_colors(qt_application):
    palette = AppTheme("dark").build_palette()

    assert palette.color(QtGui.QPalette.Window).name() == AppColors.DARK_BACKGROUND


@pytest.mark.parametrize("choice, background", [
    (SchemeChoice.LIGHT, AppColors.LIGHT_BACKGROUND),
    (SchemeChoice.DARK, AppColors.DARK_BACKGROUND),
])
def test_forced_choice_applies_theme(clean_application, choice, background):
    theme = apply_scheme_choice(clean_application, choice)

    assert theme.theme_name == choice.preferred_color_scheme
    assert background in clean_application.styleSheet()
    assert clean_application.palette().color(QtGui.QPalette.Window).name() == background


def test_automatic_restores_platform_style(clean_application):
    apply_scheme_choice(clean_application, SchemeChoice.DARK)

    theme = apply_scheme_choice(clean_application, SchemeChoice.AUTOMATIC)

    standard = clean_application.style().standardPalette()
    assert theme is None
    assert clean_application.styleSheet() == ""
    assert clean_application.palette().color(QtGui.QPalette.Window) == standard.color(QtGui.QPalette.Window)


def test_bind_application_scheme_follows_preference(clean_application, scheme_preference):
    scheme_preference.select(SchemeChoice.LIGHT)

    unsubscribe = bind_application_scheme(clean_application, scheme_preference)
    assert AppColors.LIGHT_BACKGROUND in clean_application.styleSheet()

    scheme_preference.select(SchemeChoice.DARK)
    assert AppColors.DARK_BACKGROUND in clean_application.styleSheet()

    scheme_preference.select(SchemeChoice.AUTOMATIC)
    assert clean_application.styleSheet() == ""

    unsubscribe()
    scheme_preference.select(SchemeChoice.DARK)
    assert clean_application.styleSheet() == ""
