"""
Interactive skill picker.

Connects the selection state machine to a renderer: draw the menu, read
one line, apply it, redraw in place, until the operator is done.
"""

import logging as _logging

import agent_os.core.errors as errors
import agent_os.core.selection as selection
import agent_os.skills.registry as registry_module
import agent_os.ui.base as base
import agent_os.ui.menu as menu

_logger = _logging.getLogger(__name__)


def pick_interactively(
    registry: registry_module.SkillRegistry,
    renderer: base.Renderer,
) -> selection.SelectionState:
    """
    Run the menu loop until the operator enters `d`.

    Before each redraw after the first, the previous block and the echoed
    prompt line are erased so the menu updates in place.

    Raises:
        ImportCancelledError: If input closes before the operator is done.
    """
    size = len(registry)
    state = selection.SelectionState.empty(size)
    prompt_text = menu.menu_prompt(size)
    previous_height: int | None = None

    while True:
        if previous_height is not None:
            renderer.erase_lines(previous_height + 1)

        lines = menu.render_menu(registry, state)
        renderer.show_menu(lines)
        previous_height = len(lines)

        try:
            raw = renderer.prompt(prompt_text)
        except EOFError:
            raise errors.ImportCancelledError(
                "Input closed before skill selection was finished."
            ) from None

        command = selection.parse_token(raw, size)
        _logger.debug("Menu input %r -> %r", raw, command)
        if command is selection.MenuAction.DONE:
            return state
        state = selection.apply(state, command)


def choose_skills(
    registry: registry_module.SkillRegistry,
    renderer: base.Renderer,
    *,
    import_all: bool = False,
) -> list[str]:
    """
    Decide which skills to import.

    Args:
        registry: Discovered skills.
        renderer: Where the menu is shown and input is read.
        import_all: Select every skill without showing the menu.

    Returns:
        Selected identifiers in registry order.

    Raises:
        EmptySelectionError: If the operator selects nothing.
        ImportCancelledError: If input closes during the menu.
    """
    if import_all:
        chosen = selection.select_all_identifiers(registry)
        renderer.show_verbose(f"Selected all {len(chosen)} skills")
        return chosen

    state = pick_interactively(registry, renderer)
    chosen = selection.selected_identifiers(registry, state)
    if not chosen:
        raise errors.EmptySelectionError("No skills selected.")

    renderer.show_verbose(f"Selected {len(chosen)} skills")
    return chosen
