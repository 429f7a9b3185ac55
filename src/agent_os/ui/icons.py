"""
Icon utilities for consistent terminal display.

Unicode icons render at different widths across terminals and fonts.
The padding helpers use Rich's cell_len so text after an icon lines up.
"""

import rich.cells as _rich_cells

# =============================================================================
# Icon Constants
# =============================================================================

ICON_ARROW = "→"         # Status line
ICON_WARNING = "⚠️"      # Warning, conflicts
ICON_SUCCESS = "✓"       # Success
ICON_FAILURE = "✗"       # Failure

# Default target width for icon + padding (in terminal cells)
DEFAULT_ICON_WIDTH = 3


def cell_ljust(text: str, width: int) -> str:
    """Left-justify text to a cell width (pad on right).

    Like str.ljust() but uses terminal cell width instead of character count.
    """
    current = _rich_cells.cell_len(text)
    return text + " " * max(0, width - current)


def icon_arrow() -> str:
    """Padded arrow icon (→) for status lines."""
    return cell_ljust(ICON_ARROW, DEFAULT_ICON_WIDTH)


def icon_warning() -> str:
    """Padded warning icon (⚠️) for warnings."""
    return cell_ljust(ICON_WARNING, DEFAULT_ICON_WIDTH)


def icon_success() -> str:
    """Padded success icon (✓) for completed imports."""
    return cell_ljust(ICON_SUCCESS, DEFAULT_ICON_WIDTH)


def icon_failure() -> str:
    """Padded failure icon (✗) for errors."""
    return cell_ljust(ICON_FAILURE, DEFAULT_ICON_WIDTH)
