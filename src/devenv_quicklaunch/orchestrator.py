# -*- coding: utf-8 -*-
"""
Launch orchestration for Development Environment Quicklaunch.

Starts the configured tools in a fixed order:
1. The IDE, once per solution file
2. The database management studio, unless already open and disabled
3. The text editor, when enabled
4. Every additional application

A failure in one spawn is reported and the batch moves on.
"""

from __future__ import annotations

import logging
from typing import Optional

from .models import LaunchFailure, LaunchReport, LaunchStep, UserSettings, is_set
from .notifier import LogNotifier, Notifier
from .platform_services import (
    LaunchError,
    PlatformServices,
    process_base_name,
    quote_argument,
)

logger = logging.getLogger(__name__)


class LaunchOrchestrator:
    """
    Runs a launch batch against a PlatformServices implementation.

    Synchronous and fire-and-forget: nothing is tracked once a process
    has been handed to the OS.
    """

    def __init__(
        self,
        services: PlatformServices,
        notifier: Optional[Notifier] = None
    ) -> None:
        self._services = services
        self._notifier = notifier or LogNotifier()

    def launch_all(self, settings: UserSettings) -> LaunchReport:
        """
        Launch every configured target.

        Args:
            settings: Current settings record. Not modified.

        Returns:
            What was launched, skipped and failed.
        """
        report = LaunchReport()
        elevated = settings.launch_as_administrator

        self._launch_solutions(settings, elevated, report)
        self._launch_database_tool(settings, elevated, report)
        self._launch_text_editor(settings, elevated, report)
        self._launch_additional_applications(settings, elevated, report)

        logger.info("Launch batch finished: %s", report.summary())
        return report

    def launch_solution(self, settings: UserSettings, solution: str) -> bool:
        """
        Open a single solution in the IDE.

        Args:
            settings: Current settings record.
            solution: Solution file path.

        Returns:
            True if the IDE was started.
        """
        if not self._services.path_exists(settings.visual_studio_path):
            logger.warning("IDE path is not set or missing, cannot open %s", solution)
            return False
        if not self._services.path_exists(solution):
            logger.warning("Solution file not found: %s", solution)
            return False

        report = LaunchReport()
        self._try_spawn(
            LaunchStep.SOLUTION,
            settings.visual_studio_path,
            quote_argument(solution),
            settings.launch_as_administrator,
            report
        )
        return report.success

    def _launch_solutions(
        self,
        settings: UserSettings,
        elevated: bool,
        report: LaunchReport
    ) -> None:
        ide = settings.visual_studio_path
        if not self._services.path_exists(ide):
            if is_set(ide):
                report.skipped.append((LaunchStep.SOLUTION, ide, "executable not found"))
            return

        for solution in settings.solution_files:
            self._try_spawn(
                LaunchStep.SOLUTION, ide, quote_argument(solution), elevated, report
            )

    def _launch_database_tool(
        self,
        settings: UserSettings,
        elevated: bool,
        report: LaunchReport
    ) -> None:
        path = settings.sql_server_management_studio_path
        if not self._services.path_exists(path):
            if is_set(path):
                report.skipped.append((LaunchStep.DATABASE_TOOL, path, "executable not found"))
            return

        already_open = self._services.is_process_running(process_base_name(path))
        if settings.disable_ssms_if_open and already_open:
            logger.info("%s is already running, not starting another", path)
            report.skipped.append((LaunchStep.DATABASE_TOOL, path, "already running"))
            return

        self._try_spawn(LaunchStep.DATABASE_TOOL, path, None, elevated, report)

    def _launch_text_editor(
        self,
        settings: UserSettings,
        elevated: bool,
        report: LaunchReport
    ) -> None:
        if not settings.launch_text_editor:
            return

        path = settings.text_editor_path
        if not self._services.path_exists(path):
            if is_set(path):
                report.skipped.append((LaunchStep.TEXT_EDITOR, path, "executable not found"))
            return

        self._try_spawn(LaunchStep.TEXT_EDITOR, path, None, elevated, report)

    def _launch_additional_applications(
        self,
        settings: UserSettings,
        elevated: bool,
        report: LaunchReport
    ) -> None:
        for path in settings.additional_applications:
            if not self._services.path_exists(path):
                report.skipped.append(
                    (LaunchStep.ADDITIONAL_APPLICATION, path, "executable not found")
                )
                continue
            self._try_spawn(LaunchStep.ADDITIONAL_APPLICATION, path, None, elevated, report)

    def _try_spawn(
        self,
        step: LaunchStep,
        path: str,
        argument: Optional[str],
        elevated: bool,
        report: LaunchReport
    ) -> None:
        """Spawn one target, reporting a failure instead of raising."""
        try:
            self._services.spawn(path, argument, elevated)
        except LaunchError as e:
            logger.error("%s failed for %s: %s", step.label, path, e)
            report.failures.append(LaunchFailure(step, path, str(e)))
            self._notifier.notify_error(step.error_title, str(e))
            return

        report.launched.append((step, path))
