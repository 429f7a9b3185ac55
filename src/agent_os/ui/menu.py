"""
Rendering for the interactive skill menu.

Produces plain lines from a registry and a selection state. No terminal
I/O happens here; renderers decide how the lines are displayed.
"""

import agent_os.constants as constants
import agent_os.core.selection as selection
import agent_os.skills.registry as registry_module

MENU_TITLE = "Select skills to import:"
MENU_HELP = "  Enter number to toggle   a) All   n) None   d) Done"


def truncate_description(
    text: str,
    width: int = constants.DESCRIPTION_DISPLAY_WIDTH,
) -> str:
    """Shorten text to at most `width` characters, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    return text[: width - len(constants.ELLIPSIS)] + constants.ELLIPSIS


def render_entry(number: int, name: str, description: str, *, selected: bool) -> str:
    """Render one numbered menu entry."""
    mark = "x" if selected else " "
    line = f"  {number:2d}) [{mark}] {name}"
    description = truncate_description(description)
    if description:
        line += constants.DESCRIPTION_SEPARATOR + description
    return line


def render_menu(
    registry: registry_module.SkillRegistry,
    state: selection.SelectionState,
) -> list[str]:
    """
    Render the full menu block.

    Args:
        registry: Bundles to list, in display order.
        state: Selection flags, index-aligned with the registry.

    Returns:
        Lines of the block: a title, one entry per bundle numbered from 1,
        and the key help.
    """
    if len(state) != len(registry):
        raise ValueError(
            f"Selection has {len(state)} entries but registry has {len(registry)}"
        )

    lines = ["", MENU_TITLE, ""]
    for i, bundle in enumerate(registry):
        lines.append(
            render_entry(
                i + 1,
                bundle.display_name,
                bundle.description,
                selected=state.is_selected(i),
            )
        )
    lines.extend(["", "", MENU_HELP, ""])
    return lines


def menu_prompt(size: int) -> str:
    """Prompt shown under the menu."""
    return f"Toggle (1-{size}), a, n, or d: "
