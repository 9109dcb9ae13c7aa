# -*- coding: utf-8 -*-
"""
Tests for the launch orchestrator.
"""

from __future__ import annotations

import pytest

from devenv_quicklaunch.constants import (
    TITLE_ADDITIONAL_APP_ERROR,
    TITLE_SOLUTION_ERROR,
    TITLE_SSMS_ERROR,
)
from devenv_quicklaunch.models import LaunchStep, UserSettings
from devenv_quicklaunch.orchestrator import LaunchOrchestrator

IDE = "C:/VS/Common7/IDE/devenv.exe"
SSMS = "C:/SSMS/Common7/IDE/Ssms.exe"
EDITOR = "C:/Notepad++/notepad++.exe"
TOOL = "C:/Tools/tool.exe"
OTHER = "C:/Tools/other.exe"


@pytest.fixture
def orchestrator(fake_services, notifier) -> LaunchOrchestrator:
    return LaunchOrchestrator(fake_services, notifier)


class TestSolutions:
    """Tests for the IDE step."""

    def test_one_spawn_per_solution_in_order(self, orchestrator, fake_services) -> None:
        """Two solutions give exactly two quoted spawns in list order."""
        fake_services.existing = {IDE}
        settings = UserSettings(solution_files=["A.sln", "B.sln"], visual_studio_path=IDE)

        orchestrator.launch_all(settings)

        assert fake_services.spawned == [
            (IDE, '"A.sln"', False),
            (IDE, '"B.sln"', False),
        ]

    def test_missing_ide_spawns_nothing(self, orchestrator, fake_services) -> None:
        settings = UserSettings(solution_files=["A.sln"], visual_studio_path=IDE)

        report = orchestrator.launch_all(settings)

        assert fake_services.spawned == []
        assert report.skipped == [(LaunchStep.SOLUTION, IDE, "executable not found")]

    def test_unset_ide_is_not_reported(self, orchestrator, fake_services) -> None:
        report = orchestrator.launch_all(UserSettings(solution_files=["A.sln"]))

        assert fake_services.spawned == []
        assert report.skipped == []

    def test_elevation_flag_is_passed(self, orchestrator, fake_services) -> None:
        fake_services.existing = {IDE, EDITOR}
        settings = UserSettings(
            solution_files=["A.sln"],
            visual_studio_path=IDE,
            text_editor_path=EDITOR,
            launch_text_editor=True,
            launch_as_administrator=True,
        )

        orchestrator.launch_all(settings)

        assert all(elevated for _, _, elevated in fake_services.spawned)
        assert len(fake_services.spawned) == 2


class TestDatabaseTool:
    """Tests for the database management studio step."""

    def test_spawned_without_arguments(self, orchestrator, fake_services) -> None:
        fake_services.existing = {SSMS}
        orchestrator.launch_all(UserSettings(sql_server_management_studio_path=SSMS))

        assert fake_services.spawned == [(SSMS, None, False)]

    def test_skipped_when_running_and_disabled(self, orchestrator, fake_services) -> None:
        """An open instance suppresses the spawn but later steps still run."""
        fake_services.existing = {SSMS, EDITOR, TOOL}
        fake_services.running = {"Ssms"}
        settings = UserSettings(
            sql_server_management_studio_path=SSMS,
            disable_ssms_if_open=True,
            text_editor_path=EDITOR,
            launch_text_editor=True,
            additional_applications=[TOOL],
        )

        report = orchestrator.launch_all(settings)

        assert [path for path, _, _ in fake_services.spawned] == [EDITOR, TOOL]
        assert (LaunchStep.DATABASE_TOOL, SSMS, "already running") in report.skipped

    def test_running_but_not_disabled_still_spawns(self, orchestrator, fake_services) -> None:
        fake_services.existing = {SSMS}
        fake_services.running = {"ssms"}
        orchestrator.launch_all(UserSettings(sql_server_management_studio_path=SSMS))

        assert fake_services.spawned == [(SSMS, None, False)]

    def test_disabled_but_not_running_spawns(self, orchestrator, fake_services) -> None:
        fake_services.existing = {SSMS}
        fake_services.running = {"devenv"}
        settings = UserSettings(
            sql_server_management_studio_path=SSMS,
            disable_ssms_if_open=True,
        )

        orchestrator.launch_all(settings)

        assert fake_services.spawned == [(SSMS, None, False)]


class TestTextEditor:
    """Tests for the text editor step."""

    def test_not_launched_when_flag_off(self, orchestrator, fake_services) -> None:
        fake_services.existing = {EDITOR}
        orchestrator.launch_all(UserSettings(text_editor_path=EDITOR))

        assert fake_services.spawned == []

    def test_launched_when_flag_on(self, orchestrator, fake_services) -> None:
        fake_services.existing = {EDITOR}
        settings = UserSettings(text_editor_path=EDITOR, launch_text_editor=True)

        orchestrator.launch_all(settings)

        assert fake_services.spawned == [(EDITOR, None, False)]


class TestAdditionalApplications:
    """Tests for the additional applications step."""

    def test_missing_entries_are_skipped(self, orchestrator, fake_services) -> None:
        fake_services.existing = {OTHER}
        settings = UserSettings(additional_applications=[TOOL, OTHER])

        report = orchestrator.launch_all(settings)

        assert fake_services.spawned == [(OTHER, None, False)]
        assert report.skipped == [
            (LaunchStep.ADDITIONAL_APPLICATION, TOOL, "executable not found")
        ]


class TestOrderingAndFailures:
    """Tests for batch order and failure isolation."""

    @pytest.fixture
    def full_settings(self) -> UserSettings:
        return UserSettings(
            solution_files=["A.sln"],
            visual_studio_path=IDE,
            sql_server_management_studio_path=SSMS,
            text_editor_path=EDITOR,
            launch_text_editor=True,
            additional_applications=[TOOL, OTHER],
        )

    def test_fixed_order(self, orchestrator, fake_services, full_settings) -> None:
        fake_services.existing = {IDE, SSMS, EDITOR, TOOL, OTHER}

        report = orchestrator.launch_all(full_settings)

        assert [path for path, _, _ in fake_services.spawned] == [IDE, SSMS, EDITOR, TOOL, OTHER]
        assert [step for step, _ in report.launched] == [
            LaunchStep.SOLUTION,
            LaunchStep.DATABASE_TOOL,
            LaunchStep.TEXT_EDITOR,
            LaunchStep.ADDITIONAL_APPLICATION,
            LaunchStep.ADDITIONAL_APPLICATION,
        ]
        assert report.success

    def test_failure_does_not_stop_next_step(
        self, orchestrator, fake_services, notifier, full_settings
    ) -> None:
        fake_services.existing = {IDE, SSMS, EDITOR, TOOL, OTHER}
        fake_services.failing = {SSMS, TOOL}

        report = orchestrator.launch_all(full_settings)

        assert [path for path, _, _ in fake_services.spawned] == [IDE, EDITOR, OTHER]
        assert notifier.titles == [TITLE_SSMS_ERROR, TITLE_ADDITIONAL_APP_ERROR]
        assert [failure.path for failure in report.failures] == [SSMS, TOOL]
        assert not report.success

    def test_each_failing_solution_is_reported(self, orchestrator, fake_services, notifier) -> None:
        fake_services.existing = {IDE}
        fake_services.failing = {IDE}
        settings = UserSettings(solution_files=["A.sln", "B.sln"], visual_studio_path=IDE)

        report = orchestrator.launch_all(settings)

        assert notifier.titles == [TITLE_SOLUTION_ERROR, TITLE_SOLUTION_ERROR]
        assert len(report.failures) == 2

    def test_settings_not_modified(self, orchestrator, fake_services, full_settings) -> None:
        fake_services.existing = {IDE, SSMS, EDITOR, TOOL, OTHER}
        before = full_settings.copy()

        orchestrator.launch_all(full_settings)

        assert full_settings == before


class TestLaunchSolution:
    """Tests for opening a single solution."""

    def test_opens_existing_solution(self, orchestrator, fake_services) -> None:
        fake_services.existing = {IDE, "A.sln"}
        settings = UserSettings(visual_studio_path=IDE, launch_as_administrator=True)

        assert orchestrator.launch_solution(settings, "A.sln") is True
        assert fake_services.spawned == [(IDE, '"A.sln"', True)]

    def test_missing_solution(self, orchestrator, fake_services) -> None:
        fake_services.existing = {IDE}
        settings = UserSettings(visual_studio_path=IDE)

        assert orchestrator.launch_solution(settings, "A.sln") is False
        assert fake_services.spawned == []

    def test_missing_ide(self, orchestrator, fake_services) -> None:
        fake_services.existing = {"A.sln"}

        assert orchestrator.launch_solution(UserSettings(), "A.sln") is False

    def test_spawn_failure_is_reported(self, orchestrator, fake_services, notifier) -> None:
        fake_services.existing = {IDE, "A.sln"}
        fake_services.failing = {IDE}

        assert orchestrator.launch_solution(UserSettings(visual_studio_path=IDE), "A.sln") is False
        assert notifier.titles == [TITLE_SOLUTION_ERROR]
