"""Tool bar control for switching among automatic, light and dark schemes."""

from enum import Enum
from typing import Dict, Optional
from PyQt5 import QtWidgets, QtCore, QtGui

from ..constants import SCHEME_ICON_SIZE, SCHEME_MENU_TITLE, SCHEME_TOOLBAR_TITLE
from ..core.scheme_preference import SchemePreference
from ..models.scheme_choice import MENU_ORDER, SchemeChoice


class ToolbarPlacement(Enum):
    """Where the selector's tool bar sits in its window."""

    AUTOMATIC = "automatic"
    TOP = "top"
    BOTTOM = "bottom"
    LEADING = "leading"
    TRAILING = "trailing"

    @property
    def tool_bar_area(self) -> QtCore.Qt.ToolBarArea:
        """Get the Qt tool bar area for this placement."""
        return _TOOL_BAR_AREAS[self]


# AUTOMATIC takes Qt's default area for new tool bars
_TOOL_BAR_AREAS = {
    ToolbarPlacement.AUTOMATIC: QtCore.Qt.TopToolBarArea,
    ToolbarPlacement.TOP: QtCore.Qt.TopToolBarArea,
    ToolbarPlacement.BOTTOM: QtCore.Qt.BottomToolBarArea,
    ToolbarPlacement.LEADING: QtCore.Qt.LeftToolBarArea,
    ToolbarPlacement.TRAILING: QtCore.Qt.RightToolBarArea,
}


def half_filled_circle_icon(color: QtGui.QColor, size: int = SCHEME_ICON_SIZE) -> QtGui.QIcon:
    """Draw the appearance icon: a circle outline with its right half filled."""
    pixmap = QtGui.QPixmap(size, size)
    pixmap.fill(QtCore.Qt.transparent)

    painter = QtGui.QPainter(pixmap)
    try:
        painter.setRenderHint(QtGui.QPainter.Antialiasing)
        rect = QtCore.QRectF(1.0, 1.0, size - 2.0, size - 2.0)

        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(QtGui.QBrush(color))
        # Angles are in 1/16 degree, counter-clockwise from 3 o'clock
        painter.drawPie(rect, 90 * 16, -180 * 16)

        pen = QtGui.QPen(color)
        pen.setWidthF(1.5)
        painter.setPen(pen)
        painter.setBrush(QtCore.Qt.NoBrush)
        painter.drawEllipse(rect)
    finally:
        painter.end()

    return QtGui.QIcon(pixmap)


class SchemeSelectorToolBar(QtWidgets.QToolBar):
    """Tool bar holding a menu button that picks the color scheme.

    Choosing a menu entry writes the choice to the preference. The checked
    entry follows the stored value, so several selectors sharing a store
    stay in step.
    """

    def __init__(self, preference: SchemePreference,
                 placement: ToolbarPlacement = ToolbarPlacement.AUTOMATIC,
                 parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(SCHEME_TOOLBAR_TITLE, parent)
        self.setObjectName("schemeSelectorToolBar")

        self.preference = preference
        self.placement = ToolbarPlacement(placement)
        self.choice_actions: Dict[SchemeChoice, QtWidgets.QAction] = {}

        self._setup_ui()
        self._sync_checked(self.preference.value)

        unsubscribe = self.preference.observe(self._sync_checked)
        self.destroyed.connect(lambda *_: unsubscribe())

    def _setup_ui(self):
        """Build the menu and its tool button."""
        self.menu = QtWidgets.QMenu(SCHEME_MENU_TITLE, self)
        self.action_group = QtWidgets.QActionGroup(self)
        self.action_group.setExclusive(True)

        for choice in MENU_ORDER:
            action = QtWidgets.QAction(choice.label, self)
            action.setCheckable(True)
            action.setData(int(choice))
            action.triggered.connect(lambda checked=False, c=choice: self._select(c))
            self.action_group.addAction(action)
            self.menu.addAction(action)
            self.choice_actions[choice] = action

        self.button = QtWidgets.QToolButton(self)
        self.button.setIcon(half_filled_circle_icon(self.palette().color(QtGui.QPalette.ButtonText)))
        self.button.setToolTip(SCHEME_MENU_TITLE)
        self.button.setMenu(self.menu)
        self.button.setPopupMode(QtWidgets.QToolButton.InstantPopup)
        self.addWidget(self.button)

    def _select(self, choice: SchemeChoice):
        self.preference.select(choice)

    def _sync_checked(self, choice: SchemeChoice):
        """Check the action for the stored choice."""
        self.choice_actions[SchemeChoice(choice)].setChecked(True)

    def add_to(self, window: QtWidgets.QMainWindow) -> "SchemeSelectorToolBar":
        """Install this tool bar in window at its placement."""
        window.addToolBar(self.placement.tool_bar_area, self)
        return self
