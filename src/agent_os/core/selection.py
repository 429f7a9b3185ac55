"""
Selection state machine for the interactive skill menu.

Pure state and transitions, with no terminal I/O, so a scripted token
sequence can drive it in tests exactly as an operator would.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import typing as _typing

import agent_os.skills.registry as registry_module


@_dataclasses.dataclass(frozen=True)
class SelectionState:
    """One selected/unselected flag per registry entry, index-aligned."""

    flags: tuple[bool, ...]

    @classmethod
    def empty(cls, size: int) -> SelectionState:
        """State with nothing selected."""
        return cls(flags=(False,) * size)

    @classmethod
    def full(cls, size: int) -> SelectionState:
        """State with everything selected."""
        return cls(flags=(True,) * size)

    def __len__(self) -> int:
        return len(self.flags)

    @property
    def count(self) -> int:
        """Number of selected entries."""
        return sum(self.flags)

    def is_selected(self, index: int) -> bool:
        return self.flags[index]

    def toggle(self, index: int) -> SelectionState:
        """Flip the flag at a 0-based index."""
        if not 0 <= index < len(self.flags):
            raise IndexError(f"Selection index out of range: {index}")
        flags = list(self.flags)
        flags[index] = not flags[index]
        return SelectionState(flags=tuple(flags))

    def select_all(self) -> SelectionState:
        return SelectionState.full(len(self.flags))

    def select_none(self) -> SelectionState:
        return SelectionState.empty(len(self.flags))

    def selected_indices(self) -> list[int]:
        """0-based indices of selected entries, in order."""
        return [i for i, flag in enumerate(self.flags) if flag]


class MenuAction(_enum.Enum):
    """Menu commands other than toggling a single entry."""

    SELECT_ALL = "a"
    SELECT_NONE = "n"
    DONE = "d"


@_dataclasses.dataclass(frozen=True)
class Toggle:
    """Toggle the entry at a 0-based index."""

    index: int


Command = _typing.Union[Toggle, MenuAction]


def parse_token(raw: str, size: int) -> Command | None:
    """
    Parse one line of operator input.

    Args:
        raw: The line as typed (surrounding whitespace is ignored).
        size: Number of entries in the menu.

    Returns:
        The command, or None for anything unrecognised (including numbers
        outside 1..size).
    """
    token = raw.strip()
    if token.isdecimal() and token.isascii():
        number = int(token)
        if 1 <= number <= size:
            return Toggle(number - 1)
        return None

    try:
        return MenuAction(token.lower())
    except ValueError:
        return None


def apply(state: SelectionState, command: Command | None) -> SelectionState:
    """Apply a command to a state, returning the new state."""
    if isinstance(command, Toggle):
        return state.toggle(command.index)
    if command is MenuAction.SELECT_ALL:
        return state.select_all()
    if command is MenuAction.SELECT_NONE:
        return state.select_none()
    # DONE and unrecognised input leave the flags alone
    return state


def run_script(size: int, tokens: _typing.Iterable[str]) -> SelectionState:
    """
    Drive the state machine with a sequence of input lines.

    Stops at the first DONE, or when the tokens run out.
    """
    state = SelectionState.empty(size)
    for raw in tokens:
        command = parse_token(raw, size)
        if command is MenuAction.DONE:
            break
        state = apply(state, command)
    return state


def selected_identifiers(
    registry: registry_module.SkillRegistry,
    state: SelectionState,
) -> list[str]:
    """Identifiers of the selected bundles, in registry order."""
    if len(state) != len(registry):
        raise ValueError(
            f"Selection has {len(state)} entries but registry has {len(registry)}"
        )
    return [registry[i].identifier for i in state.selected_indices()]


def select_all_identifiers(registry: registry_module.SkillRegistry) -> list[str]:
    """Selection used when interactive choice is bypassed."""
    return selected_identifiers(registry, SelectionState.full(len(registry)))
