"""
Conflict detection and resolution.

A conflict is a selected skill whose directory already exists at the
destination. Resolution happens once, before anything is copied.
"""

from __future__ import annotations

import enum as _enum
import pathlib as _pathlib
import typing as _typing

import agent_os.core.errors as errors
import agent_os.ui.base as ui_base

CONFLICT_PROMPT = "Choice (1-3): "


class ConflictChoice(_enum.Enum):
    """Operator answers to the conflict prompt."""

    OVERWRITE = "1"
    SKIP = "2"
    CANCEL = "3"


_CHOICE_LABELS = {
    ConflictChoice.OVERWRITE: "Overwrite (replace existing)",
    ConflictChoice.SKIP: "Skip existing skills",
    ConflictChoice.CANCEL: "Cancel",
}


def find_conflicts(
    selected: _typing.Sequence[str],
    dest_root: _pathlib.Path,
) -> list[str]:
    """Selected identifiers that already exist as directories under dest_root."""
    return [identifier for identifier in selected if (dest_root / identifier).is_dir()]


def parse_conflict_choice(raw: str) -> ConflictChoice | None:
    """Parse an answer to the conflict prompt, or None if unrecognised."""
    try:
        return ConflictChoice(raw.strip())
    except ValueError:
        return None


def skip_conflicts(
    selected: _typing.Sequence[str],
    conflicts: _typing.Collection[str],
) -> list[str]:
    """Remove exactly the conflicting identifiers, keeping selection order."""
    conflict_set = set(conflicts)
    return [identifier for identifier in selected if identifier not in conflict_set]


def prompt_conflict_choice(renderer: ui_base.Renderer) -> ConflictChoice:
    """
    Ask the operator how to handle conflicts, re-prompting until valid.

    Raises:
        ImportCancelledError: If input closes before a valid answer.
    """
    while True:
        renderer.show_info("What do you want to do?")
        for choice, label in _CHOICE_LABELS.items():
            renderer.show_info(f"  {choice.value}) {label}")
        renderer.show_info("")

        try:
            raw = renderer.prompt(CONFLICT_PROMPT)
        except EOFError:
            raise errors.ImportCancelledError("Cancelled.") from None

        choice = parse_conflict_choice(raw)
        if choice is not None:
            return choice
        renderer.show_info("Invalid choice.")


def resolve_conflicts(
    selected: _typing.Sequence[str],
    dest_root: _pathlib.Path,
    renderer: ui_base.Renderer,
    *,
    overwrite: bool = False,
) -> list[str]:
    """
    Settle name collisions between the selection and the destination.

    Args:
        selected: Identifiers chosen for import.
        dest_root: Destination skills directory.
        renderer: Where conflicts are reported and the choice is read.
        overwrite: Replace conflicting skills without asking.

    Returns:
        Identifiers to copy. Empty only if the operator skipped every one.

    Raises:
        ImportCancelledError: If the operator cancels.
    """
    conflicts = find_conflicts(selected, dest_root)
    if not conflicts:
        return list(selected)

    if overwrite:
        renderer.show_verbose(f"Overwriting {len(conflicts)} existing skill(s)")
        return list(selected)

    renderer.show_info("")
    renderer.show_warning(f"{len(conflicts)} skill(s) already exist at destination:")
    for identifier in conflicts:
        renderer.show_info(f"    - {identifier}")
    renderer.show_info("")

    choice = prompt_conflict_choice(renderer)
    if choice is ConflictChoice.CANCEL:
        raise errors.ImportCancelledError("Cancelled.")
    if choice is ConflictChoice.SKIP:
        return skip_conflicts(selected, conflicts)
    return list(selected)
