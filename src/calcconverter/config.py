"""
Configuration
=============
This module serves as the central registry for application-wide constants.

Why is this file needed?
------------------------
1. Identity: Organization/application names decide where QSettings stores
   the user's preferences.
2. Abstraction: It prevents settings keys and window sizes from being
   hardcoded throughout the view layer.

Exports:
    THEME_SETTINGS_KEY (str): The single persisted preference.
"""
ORG_ID: str = "calcconverter"
ORG_DOMAIN: str = "calcconverter.local"
APP_ID: str = "calcconverter"

VISIBLE_APP_NAME: str = "آلة حاسبة / Calculator"

# "dark" or "light"; absence means "follow the OS color scheme"
THEME_SETTINGS_KEY: str = "theme"

WINDOW_WIDTH: int = 420
WINDOW_HEIGHT: int = 640
