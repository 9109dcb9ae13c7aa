# -*- coding: utf-8 -*-
"""
Startup-folder registration.

Keeps the login shortcut in line with the launch_on_startup setting.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from .constants import TITLE_SHORTCUT_ERROR
from .notifier import LogNotifier, Notifier
from .platform_services import PlatformError, PlatformServices

logger = logging.getLogger(__name__)


def resolve_launch_command(script: Optional[str] = None) -> tuple[str, str]:
    """
    Work out what the startup shortcut should run.

    A frozen build points at its own executable. Otherwise the shortcut
    runs the interpreter on the launcher script.

    Args:
        script: Launcher script path. Defaults to sys.argv[0].

    Returns:
        Tuple of (target, arguments).
    """
    if getattr(sys, 'frozen', False):
        return sys.executable, ""

    script_path = Path(script or sys.argv[0]).resolve()
    if script_path.name == "__main__.py":
        return sys.executable, f"-m {__package__}"
    return sys.executable, f'"{script_path}"'


def update_startup_shortcut(
    services: PlatformServices,
    enable: bool,
    notifier: Optional[Notifier] = None,
    script: Optional[str] = None
) -> bool:
    """
    Create or remove the startup shortcut.

    Args:
        services: Platform services doing the file work.
        enable: Create the shortcut when True, remove it otherwise.
        notifier: Receives errors. Defaults to logging only.
        script: Launcher script the shortcut should run.

    Returns:
        True on success, False if the error was reported instead.
    """
    notifier = notifier or LogNotifier()

    try:
        if enable:
            target, arguments = resolve_launch_command(script)
            working_dir = None
            if arguments.startswith('"'):
                working_dir = str(Path(arguments.strip('"')).parent)
            services.create_startup_shortcut(target, arguments, working_dir)
        else:
            services.remove_startup_shortcut()
    except PlatformError as e:
        logger.error("Startup shortcut update failed: %s", e)
        notifier.notify_error(TITLE_SHORTCUT_ERROR, str(e))
        return False

    return True
