"""Tests for display and prompt services"""

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from gwt.models.worktree import RemoteSyncStatus
from gwt.services.display_service import DisplayService
from gwt.services.prompt_service import PromptService


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


def output(console: Console) -> str:
    return console.file.getvalue()


class TestDisplayService:
    """Test rendering."""

    def test_default_console_is_stderr(self):
        assert DisplayService().console.stderr is True

    def test_messages_are_escaped(self, console):
        DisplayService(console).info("branch [feature]")
        assert "branch [feature]" in output(console)

    def test_debug_only_in_debug_mode(self, console):
        display = DisplayService(console)
        display.debug("hidden")
        display.debug_mode = True
        display.debug("shown")

        assert "hidden" not in output(console)
        assert "shown" in output(console)

    def test_worktree_table(self, console, main_worktree, feature_worktree):
        feature_worktree.has_changes = True
        feature_worktree.sync_status = RemoteSyncStatus.DIVERGED
        feature_worktree.last_commit_relative = "2 days ago"
        feature_worktree.last_commit_message = "Add login form\n\nLong body"

        DisplayService(console).display_worktrees([main_worktree, feature_worktree])

        text = output(console)
        assert "/src/project (main)" in text
        assert "feature/x" in text
        assert "↕ diverged" in text
        assert "2 days ago" in text
        assert "Add login form" in text
        assert "Long body" not in text
        assert "Legend:" in text

    def test_table_without_legend(self, console, main_worktree):
        DisplayService(console).display_worktrees([main_worktree], show_legend=False)
        assert "Legend:" not in output(console)


class TestPromptService:
    """Test prompts without a terminal."""

    CHOICES = [("first", "/a"), ("second", "/b")]

    def test_select_returns_value(self, console):
        with patch("gwt.services.prompt_service.IntPrompt.ask", return_value=2):
            assert PromptService(console).select("Pick one:", self.CHOICES) == "/b"

        assert "first" in output(console)
        assert "Cancel" in output(console)

    def test_select_zero_cancels(self, console):
        with patch("gwt.services.prompt_service.IntPrompt.ask", return_value=0):
            assert PromptService(console).select("Pick one:", self.CHOICES) is None

    def test_select_end_of_input_cancels(self, console):
        with patch("gwt.services.prompt_service.IntPrompt.ask", side_effect=EOFError):
            assert PromptService(console).select("Pick one:", self.CHOICES) is None

    def test_select_without_choices(self, console):
        assert PromptService(console).select("Pick one:", []) is None

    def test_confirm(self, console):
        with patch("gwt.services.prompt_service.Confirm.ask", return_value=True) as ask:
            assert PromptService(console).confirm("Delete?") is True

        assert ask.call_args.kwargs["default"] is False

    def test_confirm_end_of_input_uses_default(self, console):
        with patch("gwt.services.prompt_service.Confirm.ask", side_effect=EOFError):
            assert PromptService(console).confirm("Delete?", default=True) is True
