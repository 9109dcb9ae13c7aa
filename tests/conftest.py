# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures for Development Environment Quicklaunch tests.
"""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path
from typing import Generator, Optional

import pytest

# Add src to path for imports - ensure our src package takes precedence
src_path = str(Path(__file__).parent.parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from devenv_quicklaunch.notifier import Notifier  # noqa: E402
from devenv_quicklaunch.platform_services import (  # noqa: E402
    LaunchError,
    PlatformServices,
    ShortcutError,
)


class RecordingNotifier(Notifier):
    """Notifier that keeps every (title, message) pair."""

    def __init__(self) -> None:
        self.errors: list[tuple[str, str]] = []

    def notify_error(self, title: str, message: str) -> None:
        self.errors.append((title, message))

    @property
    def titles(self) -> list[str]:
        return [title for title, _ in self.errors]


class FakePlatformServices(PlatformServices):
    """
    In-memory PlatformServices.

    Attributes:
        existing: Paths reported as existing files.
        running: Process base names reported as running.
        failing: Paths whose spawn raises LaunchError.
        spawned: Recorded (path, argument, elevated) spawn calls.
    """

    def __init__(self) -> None:
        self.existing: set[str] = set()
        self.running: set[str] = set()
        self.failing: set[str] = set()
        self.spawned: list[tuple[str, Optional[str], bool]] = []
        self.shortcut: Optional[tuple[str, str, Optional[str]]] = None
        self.shortcut_error: Optional[str] = None

    def path_exists(self, path: Optional[str]) -> bool:
        return bool(path) and path in self.existing

    def is_process_running(self, name: str) -> bool:
        return name.lower() in {n.lower() for n in self.running}

    def spawn(self, path, argument=None, elevated=False) -> None:
        if path in self.failing:
            raise LaunchError(f"cannot start {path}")
        self.spawned.append((path, argument, elevated))

    def create_startup_shortcut(self, target, arguments="", working_dir=None) -> Path:
        if self.shortcut_error:
            raise ShortcutError(self.shortcut_error)
        self.shortcut = (target, arguments, working_dir)
        return Path("startup.lnk")

    def remove_startup_shortcut(self) -> bool:
        if self.shortcut_error:
            raise ShortcutError(self.shortcut_error)
        removed = self.shortcut is not None
        self.shortcut = None
        return removed


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for tests.

    Yields:
        Path to temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def settings_file(temp_dir: Path) -> Path:
    """Path of a settings file inside a not-yet-created directory."""
    return temp_dir / "DevelopmentEnvironmentQuicklaunch" / "usersettings.json"


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def fake_services() -> FakePlatformServices:
    return FakePlatformServices()
