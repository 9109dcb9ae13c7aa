# -*- coding: utf-8 -*-
"""
Native dialogs: error message boxes and file pickers.
"""

from __future__ import annotations

import logging
from tkinter import filedialog, messagebox
from typing import Any, Optional

from ..constants import EXECUTABLE_FILETYPES, SOLUTION_FILETYPES
from ..notifier import Notifier

logger = logging.getLogger(__name__)


class MessageBoxNotifier(Notifier):
    """Shows each error in a modal message box owned by a window."""

    def __init__(self, parent: Any = None) -> None:
        self._parent = parent

    def notify_error(self, title: str, message: str) -> None:
        logger.error("%s: %s", title, message)
        messagebox.showerror(title, message, parent=self._parent)


def ask_solution_files(parent: Any) -> list[str]:
    """Ask for one or more solution files. Returns an empty list on cancel."""
    paths = filedialog.askopenfilenames(
        parent=parent,
        title="Add Solution",
        filetypes=SOLUTION_FILETYPES
    )
    return list(paths or ())


def ask_executable(parent: Any, title: str = "Select Executable") -> Optional[str]:
    """Ask for a single executable. Returns None on cancel."""
    path = filedialog.askopenfilename(
        parent=parent,
        title=title,
        filetypes=EXECUTABLE_FILETYPES
    )
    return path or None
