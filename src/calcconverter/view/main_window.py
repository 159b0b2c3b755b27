"""
Main Application Window
=======================
The primary GUI container that holds the header, the Tab Bar and the Panels.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global input (theme toggle, tab bar, keyboard) to the
   appropriate controllers.
"""
import logging
from typing import Callable, Dict, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QTabBar, QStackedWidget
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication, QKeyEvent

from calcconverter.config import VISIBLE_APP_NAME, WINDOW_WIDTH, WINDOW_HEIGHT
from calcconverter.model.state import AppState
from calcconverter.model.tabs import Tab, TabController
from calcconverter.model.theme import PreferenceStore, ThemeController
from calcconverter.view.tabs.tab_calculator import CalculatorPanel
from calcconverter.view.tabs.tab_converter import ConverterPanel
from calcconverter.view.theme import (
    QSettingsPreferenceStore, STYLE_SHEETS, is_dark_scheme, system_prefers_dark
)

logger = logging.getLogger(__name__)

TAB_LABELS: Dict[Tab, str] = {
    Tab.CALCULATOR: "الآلة الحاسبة / Calculator",
    Tab.CONVERTER: "محول الوحدات / Converter",
}


def key_name(event: QKeyEvent) -> str:
    """Key name in the calculator's vocabulary ("Enter", "5", "*", ...)."""
    key = event.key()
    if key in (Qt.Key_Return, Qt.Key_Enter):
        return "Enter"
    if key == Qt.Key_Backspace:
        return "Backspace"
    if key == Qt.Key_Escape:
        return "Escape"
    return event.text()


class MainWindow(QMainWindow):
    def __init__(
        self,
        state: AppState,
        preference_store: Optional[PreferenceStore] = None,
        prefers_dark: Optional[Callable[[], bool]] = None,
    ) -> None:
        super().__init__()
        self.state: AppState = state

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)

        # --- 1. HEADER (title + theme toggle) ---
        header = QHBoxLayout()
        title = QLabel(VISIBLE_APP_NAME)
        title.setObjectName("appTitle")
        header.addWidget(title)
        header.addStretch()

        self.btn_theme = QPushButton()
        self.btn_theme.setObjectName("themeToggle")
        self.btn_theme.setFocusPolicy(Qt.NoFocus)
        self.btn_theme.setToolTip("Dark / Light")
        header.addWidget(self.btn_theme)
        main_layout.addLayout(header)

        # --- 2. TAB BAR ---
        self.tab_bar = QTabBar()
        self.tab_bar.setExpanding(True)
        self.tab_bar.setDrawBase(True)
        self.tab_bar.setFocusPolicy(Qt.NoFocus)
        for tab in Tab:
            index = self.tab_bar.addTab(TAB_LABELS[tab])
            self.tab_bar.setTabData(index, tab.value)
        main_layout.addWidget(self.tab_bar)

        # --- 3. PANELS (Stacked, order must match Tab Bar order) ---
        self.panels_stack = QStackedWidget()
        self.calculator_panel = CalculatorPanel(self.state.calculator)
        self.converter_panel = ConverterPanel(self.state.converter)
        self.panels: Dict[Tab, QWidget] = {
            Tab.CALCULATOR: self.calculator_panel,
            Tab.CONVERTER: self.converter_panel,
        }
        for tab in Tab:
            self.panels_stack.addWidget(self.panels[tab])
        main_layout.addWidget(self.panels_stack)

        # --- CONTROLLERS ---
        self.tabs = TabController(sink=self, initial=self.state.active_tab)
        self.theme = ThemeController(
            store=preference_store if preference_store is not None else QSettingsPreferenceStore(),
            sink=self,
            system_prefers_dark=prefers_dark if prefers_dark is not None else system_prefers_dark,
        )

        # --- SIGNAL CONNECTIONS ---
        self.tab_bar.currentChanged.connect(self.on_tab_changed)
        self.btn_theme.clicked.connect(self.theme.toggle)
        QGuiApplication.styleHints().colorSchemeChanged.connect(self.on_color_scheme_changed)

        # Initial Render
        self.theme.initialize()
        self.tabs.select(self.state.active_tab)

    # --- ThemeSink ---

    def apply_theme(self, dark: bool, icon: str) -> None:
        self.setProperty("darkMode", dark)
        self.setStyleSheet(STYLE_SHEETS[dark])
        self.btn_theme.setText(icon)

    # --- PanelSink ---

    def show_tab(self, tab: Tab) -> None:
        self.state.active_tab = tab
        self.panels_stack.setCurrentWidget(self.panels[tab])
        index = list(Tab).index(tab)
        if self.tab_bar.currentIndex() != index:
            self.tab_bar.blockSignals(True)
            try:
                self.tab_bar.setCurrentIndex(index)
            finally:
                self.tab_bar.blockSignals(False)

    # --- SLOTS ---

    def on_tab_changed(self, index: int) -> None:
        self.tabs.select(self.tab_bar.tabData(index))

    def on_color_scheme_changed(self, scheme: Qt.ColorScheme) -> None:
        self.theme.on_system_scheme_changed(is_dark_scheme(scheme))

    def keyPressEvent(self, event: QKeyEvent, /) -> None:
        """Keyboard input drives the calculator while its tab is active."""
        if self.tabs.is_active(Tab.CALCULATOR):
            key = key_name(event)
            if key and self.calculator_panel.calculator.handle_key(key):
                logger.debug(f"Key '{key}' handled by calculator.")
                event.accept()
                return
        super().keyPressEvent(event)
