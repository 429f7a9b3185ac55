"""Tests for conflict detection and resolution."""

import pathlib as _pathlib

import pytest as _pytest

import agent_os.core.conflicts as conflicts
import agent_os.core.errors as errors
import agent_os.ui as ui


@_pytest.fixture
def dest(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """Destination with `beta` and `delta` already imported."""
    root = tmp_path / "dest"
    (root / "beta").mkdir(parents=True)
    (root / "delta").mkdir()
    return root


class TestFindConflicts:
    """Tests for find_conflicts."""

    def test_finds_existing_directories(self, dest: _pathlib.Path) -> None:
        selected = ["alpha", "beta", "gamma", "delta"]
        assert conflicts.find_conflicts(selected, dest) == ["beta", "delta"]

    def test_plain_file_is_not_a_conflict(self, dest: _pathlib.Path) -> None:
        """Only directories collide."""
        (dest / "alpha").write_text("")
        assert conflicts.find_conflicts(["alpha"], dest) == []

    def test_missing_destination_has_no_conflicts(self, tmp_path: _pathlib.Path) -> None:
        assert conflicts.find_conflicts(["alpha"], tmp_path / "missing") == []


class TestSkipConflicts:
    """Tests for skip_conflicts."""

    def test_removes_exactly_the_conflicts(self) -> None:
        """Non-conflicting identifiers are never removed."""
        selected = ["alpha", "beta", "gamma", "delta"]
        assert conflicts.skip_conflicts(selected, ["beta", "delta"]) == ["alpha", "gamma"]

    def test_can_empty_the_selection(self) -> None:
        assert conflicts.skip_conflicts(["beta"], ["beta"]) == []


class TestParseConflictChoice:
    """Tests for parse_conflict_choice."""

    @_pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1", conflicts.ConflictChoice.OVERWRITE),
            ("2", conflicts.ConflictChoice.SKIP),
            (" 3 ", conflicts.ConflictChoice.CANCEL),
        ],
    )
    def test_valid_choices(self, raw: str, expected: conflicts.ConflictChoice) -> None:
        assert conflicts.parse_conflict_choice(raw) is expected

    @_pytest.mark.parametrize("raw", ["", "0", "4", "o", "overwrite"])
    def test_invalid_choices(self, raw: str) -> None:
        assert conflicts.parse_conflict_choice(raw) is None


class TestResolveConflicts:
    """Tests for resolve_conflicts."""

    def test_no_conflicts_means_no_prompt(self, dest: _pathlib.Path) -> None:
        """Without conflicts the selection passes through unprompted."""
        renderer = ui.CaptureRenderer()
        result = conflicts.resolve_conflicts(["alpha", "gamma"], dest, renderer)
        assert result == ["alpha", "gamma"]
        assert renderer.prompts == []

    def test_overwrite_flag_means_no_prompt(self, dest: _pathlib.Path) -> None:
        renderer = ui.CaptureRenderer(verbose=True)
        result = conflicts.resolve_conflicts(["alpha", "beta"], dest, renderer, overwrite=True)
        assert result == ["alpha", "beta"]
        assert renderer.prompts == []
        assert "Overwriting 1 existing skill(s)" in renderer.get_output()

    def test_lists_conflicts_before_prompting(self, dest: _pathlib.Path) -> None:
        renderer = ui.CaptureRenderer(["1"])
        conflicts.resolve_conflicts(["alpha", "beta", "delta"], dest, renderer)
        output = renderer.get_output()
        assert "2 skill(s) already exist at destination:" in output
        assert "    - beta\n" in output
        assert "    - delta\n" in output
        assert "    - alpha\n" not in output

    def test_overwrite_choice_keeps_selection(self, dest: _pathlib.Path) -> None:
        renderer = ui.CaptureRenderer(["1"])
        result = conflicts.resolve_conflicts(["alpha", "beta"], dest, renderer)
        assert result == ["alpha", "beta"]

    def test_skip_choice_removes_conflicts(self, dest: _pathlib.Path) -> None:
        renderer = ui.CaptureRenderer(["2"])
        result = conflicts.resolve_conflicts(["alpha", "beta", "delta"], dest, renderer)
        assert result == ["alpha"]

    def test_skip_choice_may_leave_nothing(self, dest: _pathlib.Path) -> None:
        renderer = ui.CaptureRenderer(["2"])
        assert conflicts.resolve_conflicts(["beta"], dest, renderer) == []

    def test_cancel_choice_raises(self, dest: _pathlib.Path) -> None:
        renderer = ui.CaptureRenderer(["3"])
        with _pytest.raises(errors.ImportCancelledError, match="Cancelled."):
            conflicts.resolve_conflicts(["beta"], dest, renderer)

    def test_invalid_choice_reprompts(self, dest: _pathlib.Path) -> None:
        """Unrecognised answers print a notice and ask again."""
        renderer = ui.CaptureRenderer(["x", "9", "2"])
        result = conflicts.resolve_conflicts(["alpha", "beta"], dest, renderer)
        assert result == ["alpha"]
        assert renderer.prompts == [conflicts.CONFLICT_PROMPT] * 3
        assert renderer.get_output().count("Invalid choice.") == 2

    def test_closed_input_cancels(self, dest: _pathlib.Path) -> None:
        renderer = ui.CaptureRenderer([])
        with _pytest.raises(errors.ImportCancelledError):
            conflicts.resolve_conflicts(["beta"], dest, renderer)
