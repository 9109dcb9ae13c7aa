# -*- coding: utf-8 -*-
"""
Main application window for Development Environment Quicklaunch.

This module contains the main window that ties the settings store,
the launch orchestrator and startup registration to the UI.
"""

from __future__ import annotations

import logging
import time
import tkinter as tk
from typing import Optional

import customtkinter as ctk

from ..config import SettingsStore
from ..constants import APP_NAME, APP_VERSION, COLORS, FONTS
from ..models import UserSettings
from ..orchestrator import LaunchOrchestrator
from ..platform_services import PlatformServices, WindowsPlatformServices
from ..startup import update_startup_shortcut
from .dialogs import MessageBoxNotifier, ask_solution_files
from .settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class QuicklaunchApp(ctk.CTk):
    """
    Main application window.

    Orchestrates all components:
    - Settings store
    - Launch orchestrator
    - Startup shortcut registration
    - Solution list UI
    """

    def __init__(
        self,
        services: Optional[PlatformServices] = None,
        store: Optional[SettingsStore] = None,
        auto_start: bool = False
    ) -> None:
        """
        Initialize the application.

        Args:
            services: Platform services. Defaults to the Windows shell.
            store: Settings store. Defaults to the per-user settings file.
            auto_start: Launch everything as soon as the window is up.
        """
        super().__init__()

        logger.info("Starting %s v%s", APP_NAME, APP_VERSION)

        self.title(APP_NAME)
        self.geometry("720x520")
        self.minsize(560, 400)

        ctk.set_appearance_mode("light")
        ctk.set_default_color_theme("blue")

        # Core components
        self.notifier = MessageBoxNotifier(self)
        self.services = services or WindowsPlatformServices()
        self.store = store or SettingsStore(notifier=self.notifier)
        self.orchestrator = LaunchOrchestrator(self.services, self.notifier)
        self.settings: UserSettings = self.store.load()

        self._setup_ui()
        self._refresh_solution_list()

        update_startup_shortcut(self.services, self.settings.launch_on_startup, self.notifier)

        if auto_start:
            self.after(300, self._start_all)

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _setup_ui(self) -> None:
        """Set up the main UI layout."""
        self._create_header()
        self._create_footer()
        self._create_main_content()

    def _create_header(self) -> None:
        header = ctk.CTkFrame(self, height=56, fg_color=COLORS['bg_dark'])
        header.pack(fill="x")
        header.pack_propagate(False)

        ctk.CTkLabel(
            header,
            text=APP_NAME,
            font=ctk.CTkFont(size=FONTS['title'], weight="bold"),
            text_color="white"
        ).pack(side="left", padx=20, pady=12)

        ctk.CTkButton(
            header,
            text="Settings",
            width=100,
            height=32,
            fg_color="transparent",
            hover_color="#1e293b",
            text_color="#94a3b8",
            command=self._open_settings
        ).pack(side="right", padx=15)

    def _create_main_content(self) -> None:
        """Create the solution list and action buttons."""
        main = ctk.CTkFrame(self, fg_color="#f1f5f9")
        main.pack(fill="both", expand=True)
        main.grid_columnconfigure(0, weight=1)
        main.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(
            main,
            text="Solutions",
            font=ctk.CTkFont(size=FONTS['heading'], weight="bold"),
            text_color="#1e293b"
        ).grid(row=0, column=0, sticky="w", padx=15, pady=(12, 4))

        self.solution_listbox = tk.Listbox(main, selectmode="extended", activestyle="none")
        self.solution_listbox.grid(row=1, column=0, sticky="nsew", padx=(15, 8), pady=(0, 12))
        self.solution_listbox.bind("<Button-3>", self._show_context_menu)
        self.solution_listbox.bind("<Double-Button-1>", lambda e: self._launch_selected())

        self.context_menu = tk.Menu(self, tearoff=0)
        self.context_menu.add_command(label="Launch", command=self._launch_selected)

        actions = ctk.CTkFrame(main, fg_color="transparent")
        actions.grid(row=1, column=1, sticky="n", padx=(0, 15))

        ctk.CTkButton(
            actions, text="Add Solution...", width=140, command=self._add_solutions
        ).pack(pady=(0, 6))
        ctk.CTkButton(
            actions,
            text="Remove Selected",
            width=140,
            fg_color=COLORS['danger'],
            hover_color=COLORS['danger_hover'],
            command=self._remove_selected
        ).pack(pady=(0, 18))
        ctk.CTkButton(
            actions,
            text="Start",
            width=140,
            height=44,
            font=ctk.CTkFont(size=FONTS['heading'], weight="bold"),
            fg_color=COLORS['success'],
            hover_color=COLORS['success_hover'],
            command=self._start_all
        ).pack()

    def _create_footer(self) -> None:
        """Create the status bar footer."""
        footer = ctk.CTkFrame(self, height=32, fg_color="#e2e8f0")
        footer.pack(fill="x", side="bottom")
        footer.pack_propagate(False)

        self.status_bar = ctk.CTkLabel(
            footer,
            text="Ready.",
            font=ctk.CTkFont(size=FONTS['body_small']),
            text_color="#475569"
        )
        self.status_bar.pack(side="left", padx=15, pady=6)

        self.status_time = ctk.CTkLabel(
            footer,
            text="",
            font=ctk.CTkFont(size=FONTS['small']),
            text_color="#94a3b8"
        )
        self.status_time.pack(side="right", padx=15, pady=6)

    def _update_status(self, message: str) -> None:
        self.status_bar.configure(text=message)
        self.status_time.configure(text=time.strftime("%H:%M:%S"))
        logger.debug("Status: %s", message)

    def _refresh_solution_list(self) -> None:
        self.solution_listbox.delete(0, "end")
        for path in self.settings.solution_files:
            self.solution_listbox.insert("end", path)

    def _selected_solutions(self) -> list[str]:
        return [self.solution_listbox.get(i) for i in self.solution_listbox.curselection()]

    def _add_solutions(self) -> None:
        paths = ask_solution_files(self)
        if not paths:
            return

        added = [path for path in paths if self.settings.add_solution_file(path)]
        self._refresh_solution_list()
        self.store.save(self.settings)
        self._update_status(f"Added {len(added)} solution(s)")

    def _remove_selected(self) -> None:
        selected = self._selected_solutions()
        if not selected:
            return

        self.settings.remove_solution_files(selected)
        self._refresh_solution_list()
        self.store.save(self.settings)
        self._update_status(f"Removed {len(selected)} solution(s)")

    def _show_context_menu(self, event: tk.Event) -> None:
        index = self.solution_listbox.nearest(event.y)
        if index < 0:
            return
        if index not in self.solution_listbox.curselection():
            self.solution_listbox.selection_clear(0, "end")
            self.solution_listbox.selection_set(index)
        try:
            self.context_menu.tk_popup(event.x_root, event.y_root)
        finally:
            self.context_menu.grab_release()

    def _launch_selected(self) -> None:
        selected = self._selected_solutions()
        if not selected:
            return
        if self.orchestrator.launch_solution(self.settings, selected[0]):
            self._update_status(f"Opened {selected[0]}")

    def _start_all(self) -> None:
        report = self.orchestrator.launch_all(self.settings)
        self._update_status(report.summary().capitalize())

    def _open_settings(self) -> None:
        dialog = SettingsDialog(self, self.settings)
        edited = dialog.show()
        if edited is None:
            return

        # The main list owns solution_files while the dialog was open
        edited.solution_files = list(self.settings.solution_files)
        self.settings = edited
        self.store.save(self.settings)
        update_startup_shortcut(self.services, self.settings.launch_on_startup, self.notifier)
        self._update_status("Settings saved")

    def _on_close(self) -> None:
        logger.info("Application closing")
        self.destroy()
