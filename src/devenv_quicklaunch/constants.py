# -*- coding: utf-8 -*-
"""
Constants and configuration values for Development Environment Quicklaunch.

This module contains all application-wide constants including:
- Application metadata
- Settings file location
- Startup shortcut naming
- Error dialog titles
- Color schemes and fonts
"""

from __future__ import annotations

import os
from pathlib import Path


# Application metadata
APP_NAME: str = "Development Environment Quicklaunch"
APP_ID: str = "DevelopmentEnvironmentQuicklaunch"
APP_VERSION: str = "1.0.0"
APP_AUTHOR: str = "Development Environment Quicklaunch contributors"


def _app_data_dir() -> Path:
    """Return the per-user roaming application-data directory."""
    app_data = os.environ.get("APPDATA")
    if app_data:
        return Path(app_data)
    return Path.home() / "AppData" / "Roaming"


# Settings paths
SETTINGS_DIR: Path = _app_data_dir() / APP_ID
SETTINGS_FILE: Path = SETTINGS_DIR / "usersettings.json"

# Startup registration
STARTUP_DIR: Path = (
    _app_data_dir() / "Microsoft" / "Windows" / "Start Menu" / "Programs" / "Startup"
)
SHORTCUT_NAME: str = f"{APP_ID}.lnk"

# ShellExecute verbs
VERB_OPEN: str = "open"
VERB_RUNAS: str = "runas"

# Error dialog titles
TITLE_SAVE_ERROR: str = "Error Saving Settings"
TITLE_SHORTCUT_ERROR: str = "Startup Shortcut Error"
TITLE_SOLUTION_ERROR: str = "Error Launching Solution"
TITLE_SSMS_ERROR: str = "Error Launching SSMS"
TITLE_TEXT_EDITOR_ERROR: str = "Error Launching Text Editor"
TITLE_ADDITIONAL_APP_ERROR: str = "Error Launching Additional Application"

# File dialog filters
SOLUTION_FILETYPES: list[tuple[str, str]] = [("Visual Studio Solution", "*.sln")]
EXECUTABLE_FILETYPES: list[tuple[str, str]] = [("Executable", "*.exe")]

# UI Color scheme
COLORS: dict[str, str] = {
    'primary': '#2563eb',
    'primary_hover': '#1d4ed8',
    'success': '#16a34a',
    'success_hover': '#15803d',
    'warning': '#d97706',
    'danger': '#dc2626',
    'danger_hover': '#b91c1c',
    'slate': '#475569',
    'bg_dark': '#0f172a',
    'bg_light': '#f8fafc',
    'text_muted': '#64748b',
}

# Font sizes
FONTS: dict[str, int] = {
    'title': 20,
    'heading': 14,
    'body': 13,
    'body_small': 12,
    'small': 10,
}
