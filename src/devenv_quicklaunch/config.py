# -*- coding: utf-8 -*-
"""
Settings persistence for Development Environment Quicklaunch.

This module provides the SettingsStore class that handles:
- Loading the settings record, falling back to defaults
- Saving the settings record as indented JSON
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from .constants import SETTINGS_FILE, TITLE_SAVE_ERROR
from .models import SettingsFormatError, UserSettings
from .notifier import LogNotifier, Notifier

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Reads and writes the user settings file.

    Single writer, last write wins. Neither operation raises: load
    falls back to defaults and save reports through the notifier.

    Attributes:
        path: Location of the settings file.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        notifier: Optional[Notifier] = None
    ) -> None:
        """
        Initialize the store.

        Args:
            path: Settings file location. Defaults to SETTINGS_FILE.
            notifier: Receives save errors. Defaults to logging only.
        """
        self.path = Path(path) if path is not None else SETTINGS_FILE
        self._notifier = notifier or LogNotifier()

    def load(self) -> UserSettings:
        """
        Load settings from disk.

        Returns:
            The stored settings, or a default record if the file is
            missing or cannot be parsed.
        """
        try:
            if not self.path.is_file():
                logger.debug("No settings file at %s, using defaults", self.path)
                return UserSettings()
            content = self.path.read_text(encoding='utf-8')
            settings = UserSettings.from_dict(json.loads(content))
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in settings file: %s", e)
            return UserSettings()
        except SettingsFormatError as e:
            logger.error("Unexpected settings layout: %s", e)
            return UserSettings()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read settings file: %s", e)
            return UserSettings()

        logger.debug(
            "Loaded settings with %d solutions and %d additional applications",
            len(settings.solution_files),
            len(settings.additional_applications)
        )
        return settings

    def save(self, settings: UserSettings) -> bool:
        """
        Save settings to disk, overwriting the file.

        Args:
            settings: The record to persist.

        Returns:
            True on success, False if the error was reported instead.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            content = json.dumps(settings.to_dict(), indent=2, ensure_ascii=False)
            self.path.write_text(content, encoding='utf-8')
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save settings file: %s", e)
            self._notifier.notify_error(TITLE_SAVE_ERROR, str(e))
            return False

        logger.debug("Saved settings to %s", self.path)
        return True
