# -*- coding: utf-8 -*-
"""
Data models for Development Environment Quicklaunch.

This module contains the data structures used throughout the application:
- The persisted user settings record
- Launch steps and their error titles
- The launch report returned by the orchestrator
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

from .constants import (
    TITLE_ADDITIONAL_APP_ERROR,
    TITLE_SOLUTION_ERROR,
    TITLE_SSMS_ERROR,
    TITLE_TEXT_EDITOR_ERROR,
)


class SettingsFormatError(ValueError):
    """Raised when a settings document does not have the expected shape."""


# JSON key -> attribute name
_PATH_KEYS: dict[str, str] = {
    'visualStudioPath': 'visual_studio_path',
    'sqlServerManagementStudioPath': 'sql_server_management_studio_path',
    'textEditorPath': 'text_editor_path',
}

_BOOL_KEYS: dict[str, str] = {
    'launchTextEditor': 'launch_text_editor',
    'disableSSMSIfOpen': 'disable_ssms_if_open',
    'launchOnStartup': 'launch_on_startup',
    'launchAsAdministrator': 'launch_as_administrator',
}

_LIST_KEYS: dict[str, str] = {
    'solutionFiles': 'solution_files',
    'additionalApplications': 'additional_applications',
}


@dataclass
class UserSettings:
    """
    The single persisted settings record.

    Lists keep insertion order, which is also display and launch order.
    Path fields are ``None`` or empty when unset.
    """
    solution_files: list[str] = field(default_factory=list)
    visual_studio_path: Optional[str] = None
    sql_server_management_studio_path: Optional[str] = None
    text_editor_path: Optional[str] = None
    launch_text_editor: bool = False
    disable_ssms_if_open: bool = False
    launch_on_startup: bool = False
    additional_applications: list[str] = field(default_factory=list)
    launch_as_administrator: bool = False

    def add_solution_file(self, path: str) -> bool:
        """
        Append a solution file unless it is already listed.

        Args:
            path: Solution file path.

        Returns:
            True if the list changed.
        """
        return _append_unique(self.solution_files, path)

    def remove_solution_files(self, paths: Iterable[str]) -> None:
        """Remove every given path from the solution list."""
        for path in list(paths):
            if path in self.solution_files:
                self.solution_files.remove(path)

    def add_additional_application(self, path: str) -> bool:
        """
        Append an additional application unless it is already listed.

        Args:
            path: Executable path.

        Returns:
            True if the list changed.
        """
        return _append_unique(self.additional_applications, path)

    def remove_additional_application(self, path: str) -> None:
        if path in self.additional_applications:
            self.additional_applications.remove(path)

    def copy(self) -> 'UserSettings':
        """Return an independent field-by-field clone of this record."""
        return UserSettings(
            solution_files=list(self.solution_files),
            visual_studio_path=self.visual_studio_path,
            sql_server_management_studio_path=self.sql_server_management_studio_path,
            text_editor_path=self.text_editor_path,
            launch_text_editor=self.launch_text_editor,
            disable_ssms_if_open=self.disable_ssms_if_open,
            launch_on_startup=self.launch_on_startup,
            additional_applications=list(self.additional_applications),
            launch_as_administrator=self.launch_as_administrator,
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to the JSON document layout.

        Returns:
            Dictionary keyed by the camelCase settings-file keys.
        """
        data: dict[str, Any] = {}
        for key, attr in _LIST_KEYS.items():
            data[key] = list(getattr(self, attr))
        for key, attr in _PATH_KEYS.items():
            data[key] = getattr(self, attr)
        for key, attr in _BOOL_KEYS.items():
            data[key] = getattr(self, attr)
        return data

    @classmethod
    def from_dict(cls, data: Any) -> 'UserSettings':
        """
        Build a record from a decoded settings document.

        Missing keys take their defaults. Any value of the wrong type
        rejects the whole document.

        Args:
            data: Decoded JSON value.

        Returns:
            A new UserSettings.

        Raises:
            SettingsFormatError: If the document has the wrong shape.
        """
        if not isinstance(data, dict):
            raise SettingsFormatError(
                f"Settings document must be an object, got {type(data).__name__}"
            )

        values: dict[str, Any] = {}

        for key, attr in _LIST_KEYS.items():
            value = data.get(key)
            if value is None:
                continue
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise SettingsFormatError(f"'{key}' must be a list of strings")
            values[attr] = list(value)

        for key, attr in _PATH_KEYS.items():
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise SettingsFormatError(f"'{key}' must be a string or null")
            values[attr] = value

        for key, attr in _BOOL_KEYS.items():
            value = data.get(key, False)
            if not isinstance(value, bool):
                raise SettingsFormatError(f"'{key}' must be a boolean")
            values[attr] = value

        return cls(**values)


def _append_unique(items: list[str], path: str) -> bool:
    if path in items:
        return False
    items.append(path)
    return True


def is_set(path: Optional[str]) -> bool:
    """Return True if a path field holds a non-blank value."""
    return bool(path and path.strip())


class LaunchStep(Enum):
    """
    Ordered steps of a launch batch.

    Each step carries the title of the error dialog shown when a
    spawn in that step fails.
    """
    SOLUTION = ("Solution", TITLE_SOLUTION_ERROR)
    DATABASE_TOOL = ("SQL Server Management Studio", TITLE_SSMS_ERROR)
    TEXT_EDITOR = ("Text Editor", TITLE_TEXT_EDITOR_ERROR)
    ADDITIONAL_APPLICATION = ("Additional Application", TITLE_ADDITIONAL_APP_ERROR)

    def __init__(self, label: str, error_title: str) -> None:
        self.label = label
        self.error_title = error_title


@dataclass
class LaunchFailure:
    """A spawn that raised during a batch."""
    step: LaunchStep
    path: str
    message: str


@dataclass
class LaunchReport:
    """Outcome of a launch batch."""
    launched: list[tuple[LaunchStep, str]] = field(default_factory=list)
    skipped: list[tuple[LaunchStep, str, str]] = field(default_factory=list)
    failures: list[LaunchFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures

    def summary(self) -> str:
        """Return a one-line human-readable summary."""
        return (
            f"{len(self.launched)} launched, "
            f"{len(self.skipped)} skipped, "
            f"{len(self.failures)} failed"
        )
