"""
Theme Adapter (Qt)
==================
Connects the ThemeController to Qt.

1. QSettingsPreferenceStore persists the explicit choice under one key.
2. system_prefers_dark() reads the OS color scheme from QStyleHints.
3. The style sheets replace the 'dark-mode' CSS class of a web page.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import QSettings, Qt
from PySide6.QtGui import QGuiApplication

from calcconverter.config import THEME_SETTINGS_KEY
from calcconverter.model.theme import ThemePreference

logger = logging.getLogger(__name__)


class QSettingsPreferenceStore:
    def __init__(self, settings: Optional[QSettings] = None) -> None:
        # Default constructed QSettings uses the organization/app names from create_app()
        self.settings = settings if settings is not None else QSettings()

    def load(self) -> ThemePreference:
        value = self.settings.value(THEME_SETTINGS_KEY, "", type=str)
        return ThemePreference.from_stored(value)

    def save(self, preference: ThemePreference) -> None:
        if preference is ThemePreference.UNSET:
            self.settings.remove(THEME_SETTINGS_KEY)
        else:
            self.settings.setValue(THEME_SETTINGS_KEY, preference.value)
        self.settings.sync()
        if self.settings.status() != QSettings.Status.NoError:
            logger.warning(f"Could not write theme preference to '{self.settings.fileName()}'.")


def is_dark_scheme(scheme: Qt.ColorScheme) -> bool:
    return scheme == Qt.ColorScheme.Dark


def system_prefers_dark() -> bool:
    app = QGuiApplication.instance()
    if app is None:
        return False
    return is_dark_scheme(QGuiApplication.styleHints().colorScheme())


LIGHT_STYLE = """
    QWidget { background-color: #f5f5f7; color: #1d1d1f; }
    QLabel#previousOperand { color: #6e6e73; font-size: 16px; }
    QLabel#currentOperand { font-size: 34px; font-weight: bold; }
    QLabel#conversionResult { font-size: 24px; font-weight: bold; }
    QPushButton { background-color: #ffffff; border: 1px solid #d2d2d7; border-radius: 8px; min-height: 40px; }
    QPushButton:hover { background-color: #e8e8ed; }
    QPushButton[kind="operator"] { background-color: #ff9f0a; color: white; }
    QPushButton[action="equals"] { background-color: #0071e3; color: white; }
    QComboBox, QLineEdit { background-color: #ffffff; border: 1px solid #d2d2d7; border-radius: 6px; padding: 4px; }
    QTabBar::tab { height: 32px; min-width: 100px; }
    QTabBar::tab:selected { font-weight: bold; }
"""

DARK_STYLE = """
    QWidget { background-color: #1c1c1e; color: #f5f5f7; }
    QLabel#previousOperand { color: #98989d; font-size: 16px; }
    QLabel#currentOperand { font-size: 34px; font-weight: bold; }
    QLabel#conversionResult { font-size: 24px; font-weight: bold; }
    QPushButton { background-color: #2c2c2e; border: 1px solid #3a3a3c; border-radius: 8px; min-height: 40px; }
    QPushButton:hover { background-color: #3a3a3c; }
    QPushButton[kind="operator"] { background-color: #ff9f0a; color: white; }
    QPushButton[action="equals"] { background-color: #0a84ff; color: white; }
    QComboBox, QLineEdit { background-color: #2c2c2e; border: 1px solid #3a3a3c; border-radius: 6px; padding: 4px; }
    QTabBar::tab { height: 32px; min-width: 100px; }
    QTabBar::tab:selected { font-weight: bold; }
"""

STYLE_SHEETS: Dict[bool, str] = {True: DARK_STYLE, False: LIGHT_STYLE}
