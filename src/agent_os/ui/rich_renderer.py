"""
Rich console renderer (Layer 2).

Outputs colored text using the Rich library and redraws the selection
menu in place with cursor control codes.
"""

import rich.console as _rich_console
import rich.control as _rich_control
import rich.markup as _rich_markup
import rich.segment as _rich_segment
import rich.text as _rich_text

import agent_os.ui.base as base
import agent_os.ui.icons as icons
import agent_os.ui.menu as menu

# Move to the start of the previous line and clear it
_ERASE_PREVIOUS_LINE = _rich_control.Control(
    (_rich_segment.ControlType.CURSOR_UP, 1),
    _rich_segment.ControlType.CARRIAGE_RETURN,
    (_rich_segment.ControlType.ERASE_IN_LINE, 2),
)


class RichConsoleRenderer(base.Renderer):
    """
    Rich console renderer with colors and in-place menu updates.
    """

    def __init__(
        self,
        console: _rich_console.Console | None = None,
        error_console: _rich_console.Console | None = None,
        *,
        verbose: bool = False,
        force_terminal: bool | None = None,
        no_color: bool = False,
    ) -> None:
        """
        Initialize the Rich renderer.

        Args:
            console: Rich Console for normal output (created if not provided).
            error_console: Rich Console for errors (stderr if not provided).
            verbose: If True, show_verbose() prints.
            force_terminal: Force terminal mode even if not detected.
            no_color: Disable all colors.
        """
        self._console = console or _rich_console.Console(
            force_terminal=force_terminal,
            no_color=no_color,
        )
        self._error_console = error_console or _rich_console.Console(
            stderr=True,
            force_terminal=force_terminal,
            no_color=no_color,
        )
        self.verbose = verbose

    def show_section(self, title: str) -> None:
        """Display a section heading as a rule."""
        self._console.print()
        self._console.rule(f"[bold]{_rich_markup.escape(title)}[/bold]")

    def show_status(self, message: str) -> None:
        """Display a status line."""
        self._console.print(f"[cyan]{icons.icon_arrow()}[/cyan]{_rich_markup.escape(message)}")

    def show_info(self, message: str) -> None:
        """Display an undecorated line."""
        self._console.print(message, markup=False, highlight=False)

    def show_warning(self, message: str) -> None:
        """Display a warning."""
        self._console.print(
            f"[bold yellow]{icons.icon_warning()}[/bold yellow]"
            f"[yellow]{_rich_markup.escape(message)}[/yellow]"
        )

    def show_error(self, error: str) -> None:
        """Display an error message."""
        self._error_console.print(
            f"[bold red]{icons.icon_failure()}Error:[/bold red] {_rich_markup.escape(error)}"
        )

    def show_success(self, message: str) -> None:
        """Display a success message."""
        self._console.print(
            f"[bold green]{icons.icon_success()}[/bold green]"
            f"[green]{_rich_markup.escape(message)}[/green]"
        )

    def show_menu(self, lines: list[str]) -> None:
        """Display the menu block, highlighting the title and selected entries."""
        for line in lines:
            text = _rich_text.Text(line)
            if line == menu.MENU_TITLE:
                text.stylize("bold")
            elif line == menu.MENU_HELP:
                text.stylize("dim")
            elif "[x]" in line:
                text.stylize("green")
            self._console.print(text, highlight=False)

    def erase_lines(self, count: int) -> None:
        """Move the cursor up `count` lines, clearing each one."""
        if count <= 0 or not self._console.is_terminal:
            return
        self._console.control(*([_ERASE_PREVIOUS_LINE] * count))

    def prompt(self, text: str) -> str:
        """Show a prompt and read one line of input."""
        return self._console.input(_rich_markup.escape(text))
