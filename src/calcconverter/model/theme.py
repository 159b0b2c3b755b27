"""
Theme Controller
================
Decides between the dark and the light theme.

Logic:
1. An explicit choice stored under the 'theme' key always wins.
2. Without one, the OS color scheme is followed, including live changes.
3. toggle() stores an explicit choice, so OS changes are ignored from then on.
"""
from __future__ import annotations

from enum import StrEnum
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

DARK_ICON = "☀️"
LIGHT_ICON = "🌙"


class ThemePreference(StrEnum):
    DARK = "dark"
    LIGHT = "light"
    UNSET = ""

    @staticmethod
    def from_stored(value: Optional[str]) -> ThemePreference:
        if not value:
            return ThemePreference.UNSET
        if value == ThemePreference.DARK:
            return ThemePreference.DARK
        if value != ThemePreference.LIGHT:
            logger.warning(f"Unknown stored theme '{value}', treating it as light.")
        return ThemePreference.LIGHT


class PreferenceStore(Protocol):
    def load(self) -> ThemePreference: ...
    def save(self, preference: ThemePreference) -> None: ...


class ThemeSink(Protocol):
    def apply_theme(self, dark: bool, icon: str) -> None: ...


class MemoryPreferenceStore:
    """Non-persistent store for headless use and tests."""

    def __init__(self, value: Optional[str] = None) -> None:
        self.value = value

    def load(self) -> ThemePreference:
        return ThemePreference.from_stored(self.value)

    def save(self, preference: ThemePreference) -> None:
        self.value = preference.value or None


def theme_icon(dark: bool) -> str:
    """The toggle shows the sun in dark mode (click for light) and vice versa."""
    return DARK_ICON if dark else LIGHT_ICON


class ThemeController:
    def __init__(
        self,
        store: PreferenceStore,
        sink: Optional[ThemeSink] = None,
        system_prefers_dark: Callable[[], bool] = lambda: False,
    ) -> None:
        self.store = store
        self.sink = sink
        self.system_prefers_dark = system_prefers_dark
        self.is_dark: bool = False

    def initialize(self) -> None:
        preference = self.store.load()
        if preference is ThemePreference.UNSET:
            dark = self.system_prefers_dark()
        else:
            dark = preference is ThemePreference.DARK
        logger.info(f"Theme initialized: {'dark' if dark else 'light'} (stored: '{preference}').")
        self._apply(dark)

    def toggle(self) -> None:
        dark = not self.is_dark
        self.store.save(ThemePreference.DARK if dark else ThemePreference.LIGHT)
        self._apply(dark)

    def on_system_scheme_changed(self, prefers_dark: bool) -> None:
        """Follow the OS only while the user has not picked a theme."""
        if self.store.load() is not ThemePreference.UNSET:
            logger.debug("OS color scheme changed, explicit preference kept.")
            return
        self._apply(prefers_dark)

    def _apply(self, dark: bool) -> None:
        self.is_dark = dark
        if self.sink is not None:
            self.sink.apply_theme(dark, theme_icon(dark))
