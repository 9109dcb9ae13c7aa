# -*- coding: utf-8 -*-
"""
UI components for Development Environment Quicklaunch.

This package contains the graphical user interface
built with CustomTkinter.
"""

from .app import QuicklaunchApp
from .dialogs import MessageBoxNotifier
from .settings_dialog import SettingsDialog

__all__ = [
    'QuicklaunchApp',
    'MessageBoxNotifier',
    'SettingsDialog',
]
