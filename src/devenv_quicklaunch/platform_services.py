# -*- coding: utf-8 -*-
"""
Operating-system services used by the launcher.

The orchestrator, store and startup registration only talk to the
PlatformServices interface. WindowsPlatformServices is the single
real implementation:
- ShellExecute through os.startfile, with the "runas" verb for elevation
- Process lookup through psutil
- Startup-folder shortcuts through the WScript.Shell COM object (pywin32)
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path, PureWindowsPath
from typing import Optional

import psutil

from .constants import SHORTCUT_NAME, STARTUP_DIR, VERB_OPEN, VERB_RUNAS

logger = logging.getLogger(__name__)


class PlatformError(Exception):
    """Base class for platform service failures."""


class LaunchError(PlatformError):
    """Raised when a process could not be started."""


class ShortcutError(PlatformError):
    """Raised when the startup shortcut could not be written or removed."""


def process_base_name(path: str) -> str:
    """
    Return the executable's file name without extension.

    Args:
        path: Executable path.

    Returns:
        Base name used to match running processes.
    """
    return PureWindowsPath(path).stem


def quote_argument(path: str) -> str:
    """Wrap a path in double quotes for the command line."""
    return f'"{path}"'


class PlatformServices(ABC):
    """Interface to the OS operations the launcher needs."""

    def path_exists(self, path: Optional[str]) -> bool:
        """
        Check that a path is set and names an existing file.

        Args:
            path: Path to check, may be None or blank.

        Returns:
            True if the file exists.
        """
        if not path or not path.strip():
            return False
        return os.path.isfile(path)

    @abstractmethod
    def is_process_running(self, name: str) -> bool:
        """Return True if any running process has the given base name."""

    @abstractmethod
    def spawn(
        self,
        path: str,
        argument: Optional[str] = None,
        elevated: bool = False
    ) -> None:
        """
        Start an executable and return without waiting.

        Args:
            path: Executable path.
            argument: Optional single command-line argument.
            elevated: Request administrative rights.

        Raises:
            LaunchError: If the OS refused to start the process.
        """

    @abstractmethod
    def create_startup_shortcut(
        self,
        target: str,
        arguments: str = "",
        working_dir: Optional[str] = None
    ) -> Path:
        """Create or overwrite the startup shortcut and return its path."""

    @abstractmethod
    def remove_startup_shortcut(self) -> bool:
        """Remove the startup shortcut. Returns True if one was deleted."""


class WindowsPlatformServices(PlatformServices):
    """
    PlatformServices backed by the Windows shell.

    Attributes:
        startup_dir: Folder holding the startup shortcut.
    """

    def __init__(self, startup_dir: Path = STARTUP_DIR) -> None:
        self.startup_dir = startup_dir

    @property
    def shortcut_path(self) -> Path:
        return self.startup_dir / SHORTCUT_NAME

    def is_process_running(self, name: str) -> bool:
        wanted = name.lower()
        # Denied or vanished processes come back with name None
        for proc in psutil.process_iter(['name']):
            proc_name = proc.info.get('name')
            if proc_name and PureWindowsPath(proc_name).stem.lower() == wanted:
                logger.debug("Found running process %s (pid %s)", proc_name, proc.pid)
                return True
        return False

    def spawn(
        self,
        path: str,
        argument: Optional[str] = None,
        elevated: bool = False
    ) -> None:
        verb = VERB_RUNAS if elevated else VERB_OPEN
        logger.info("Starting %s %s (verb=%s)", path, argument or "", verb)

        try:
            if argument:
                os.startfile(path, verb, argument)
            else:
                os.startfile(path, verb)
        except AttributeError as e:
            # os.startfile only exists on Windows
            raise LaunchError("Launching processes is only supported on Windows") from e
        except (OSError, ValueError) as e:
            # ValueError: embedded NUL in the path or argument
            raise LaunchError(str(e)) from e

    def create_startup_shortcut(
        self,
        target: str,
        arguments: str = "",
        working_dir: Optional[str] = None
    ) -> Path:
        try:
            import win32com.client
        except ImportError as e:
            raise ShortcutError("pywin32 is required to create shortcuts") from e

        shortcut_path = self.shortcut_path
        try:
            self.startup_dir.mkdir(parents=True, exist_ok=True)
            shell = win32com.client.Dispatch("WScript.Shell")
            shortcut = shell.CreateShortCut(str(shortcut_path))
            shortcut.TargetPath = target
            shortcut.Arguments = arguments
            shortcut.WorkingDirectory = working_dir or str(Path(target).parent)
            shortcut.Save()
        except Exception as e:
            # COM errors do not share a base class with OSError
            raise ShortcutError(f"Failed to create {shortcut_path}: {e}") from e

        logger.info("Created startup shortcut %s -> %s", shortcut_path, target)
        return shortcut_path

    def remove_startup_shortcut(self) -> bool:
        shortcut_path = self.shortcut_path
        if not shortcut_path.exists():
            return False

        try:
            shortcut_path.unlink()
        except OSError as e:
            raise ShortcutError(f"Failed to remove {shortcut_path}: {e}") from e

        logger.info("Removed startup shortcut %s", shortcut_path)
        return True
