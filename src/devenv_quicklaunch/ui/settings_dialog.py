# -*- coding: utf-8 -*-
"""
Settings dialog for Development Environment Quicklaunch.

Edits a clone of the settings record. The caller only sees the
changes when the user confirms with OK.
"""

from __future__ import annotations

import logging
import tkinter as tk
from typing import Any, Optional

import customtkinter as ctk

from ..constants import COLORS, FONTS
from ..models import UserSettings
from .dialogs import ask_executable

logger = logging.getLogger(__name__)


class SettingsDialog(ctk.CTkToplevel):
    """
    Modal settings editor.

    Attributes:
        settings: The edited clone, populated when OK is pressed.
        confirmed: Whether the user accepted the changes.
    """

    def __init__(self, master: Any, settings: UserSettings, **kwargs: Any) -> None:
        """
        Initialize the dialog.

        Args:
            master: Owning window.
            settings: Record to edit. It is cloned, never mutated.
        """
        super().__init__(master, **kwargs)

        self.settings = settings.copy()
        self.confirmed = False

        self.title("Settings")
        self.geometry("640x560")
        self.minsize(560, 480)
        self.transient(master)

        self._setup_ui()

        self.protocol("WM_DELETE_WINDOW", self._on_cancel)
        self.after(50, self.grab_set)

    def _setup_ui(self) -> None:
        self.grid_columnconfigure(0, weight=1)

        # Tool paths
        paths_frame = ctk.CTkFrame(self, fg_color=COLORS['bg_light'])
        paths_frame.grid(row=0, column=0, sticky="ew", padx=15, pady=(15, 8))
        paths_frame.grid_columnconfigure(1, weight=1)

        self.vs_entry = self._add_path_row(
            paths_frame, 0, "Visual Studio:", self.settings.visual_studio_path
        )
        self.ssms_entry = self._add_path_row(
            paths_frame, 1, "SQL Server Management Studio:",
            self.settings.sql_server_management_studio_path
        )
        self.editor_entry = self._add_path_row(
            paths_frame, 2, "Text Editor:", self.settings.text_editor_path
        )

        # Options
        options_frame = ctk.CTkFrame(self, fg_color="transparent")
        options_frame.grid(row=1, column=0, sticky="ew", padx=15, pady=8)

        self.disable_ssms_var = tk.BooleanVar(value=self.settings.disable_ssms_if_open)
        self.launch_editor_var = tk.BooleanVar(value=self.settings.launch_text_editor)
        self.startup_var = tk.BooleanVar(value=self.settings.launch_on_startup)
        self.admin_var = tk.BooleanVar(value=self.settings.launch_as_administrator)

        for text, var in (
            ("Don't launch SSMS if it is already open", self.disable_ssms_var),
            ("Launch text editor", self.launch_editor_var),
            ("Launch on Windows startup", self.startup_var),
            ("Launch as administrator", self.admin_var),
        ):
            ctk.CTkCheckBox(
                options_frame,
                text=text,
                variable=var,
                font=ctk.CTkFont(size=FONTS['body'])
            ).pack(anchor="w", pady=3)

        # Additional applications
        ctk.CTkLabel(
            self,
            text="Additional Applications",
            font=ctk.CTkFont(size=FONTS['heading'], weight="bold")
        ).grid(row=2, column=0, sticky="w", padx=15, pady=(8, 2))

        apps_frame = ctk.CTkFrame(self, fg_color="transparent")
        apps_frame.grid(row=3, column=0, sticky="nsew", padx=15, pady=(0, 8))
        apps_frame.grid_columnconfigure(0, weight=1)
        apps_frame.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)

        self.apps_listbox = tk.Listbox(apps_frame, activestyle="none", height=6)
        self.apps_listbox.grid(row=0, column=0, rowspan=2, sticky="nsew")
        for app in self.settings.additional_applications:
            self.apps_listbox.insert("end", app)

        ctk.CTkButton(
            apps_frame, text="Add...", width=90, command=self._add_app
        ).grid(row=0, column=1, sticky="n", padx=(8, 0))
        ctk.CTkButton(
            apps_frame,
            text="Remove",
            width=90,
            fg_color=COLORS['danger'],
            hover_color=COLORS['danger_hover'],
            command=self._remove_app
        ).grid(row=1, column=1, sticky="n", padx=(8, 0), pady=(6, 0))

        # OK / Cancel
        buttons = ctk.CTkFrame(self, fg_color="transparent")
        buttons.grid(row=4, column=0, sticky="e", padx=15, pady=(8, 15))

        ctk.CTkButton(
            buttons,
            text="Cancel",
            width=90,
            fg_color=COLORS['slate'],
            command=self._on_cancel
        ).pack(side="right")
        ctk.CTkButton(
            buttons,
            text="OK",
            width=90,
            fg_color=COLORS['success'],
            hover_color=COLORS['success_hover'],
            command=self._on_ok
        ).pack(side="right", padx=(0, 8))

    def _add_path_row(
        self,
        parent: Any,
        row: int,
        label: str,
        value: Optional[str]
    ) -> ctk.CTkEntry:
        """Add a label, entry and Browse button. Returns the entry."""
        ctk.CTkLabel(
            parent, text=label, font=ctk.CTkFont(size=FONTS['body_small'])
        ).grid(row=row, column=0, sticky="w", padx=(10, 6), pady=6)

        entry = ctk.CTkEntry(parent)
        entry.grid(row=row, column=1, sticky="ew", pady=6)
        if value:
            entry.insert(0, value)

        ctk.CTkButton(
            parent,
            text="Browse...",
            width=80,
            command=lambda: self._browse_into(entry)
        ).grid(row=row, column=2, padx=(6, 10), pady=6)
        return entry

    def _browse_into(self, entry: ctk.CTkEntry) -> None:
        path = ask_executable(self)
        if path:
            entry.delete(0, "end")
            entry.insert(0, path)

    def _add_app(self) -> None:
        path = ask_executable(self, title="Add Application")
        if path and self.settings.add_additional_application(path):
            self.apps_listbox.insert("end", path)

    def _remove_app(self) -> None:
        selection = self.apps_listbox.curselection()
        if not selection:
            return
        index = selection[0]
        self.settings.remove_additional_application(self.apps_listbox.get(index))
        self.apps_listbox.delete(index)

    def _on_ok(self) -> None:
        self.settings.visual_studio_path = self.vs_entry.get()
        self.settings.sql_server_management_studio_path = self.ssms_entry.get()
        self.settings.text_editor_path = self.editor_entry.get()
        self.settings.disable_ssms_if_open = self.disable_ssms_var.get()
        self.settings.launch_text_editor = self.launch_editor_var.get()
        self.settings.launch_on_startup = self.startup_var.get()
        self.settings.launch_as_administrator = self.admin_var.get()

        self.confirmed = True
        logger.debug("Settings dialog confirmed")
        self.grab_release()
        self.destroy()

    def _on_cancel(self) -> None:
        self.confirmed = False
        self.grab_release()
        self.destroy()

    def show(self) -> Optional[UserSettings]:
        """
        Block until the dialog closes.

        Returns:
            The edited settings if confirmed, otherwise None.
        """
        self.wait_window()
        return self.settings if self.confirmed else None
