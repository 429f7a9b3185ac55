"""
Base classes for UI rendering.

Implements a layered rendering system:
- Layer 1: PlainTextRenderer - Just strings, fully testable
- Layer 2: RichConsoleRenderer - Colors and in-place menu redraw

All renderers implement the same interface, allowing injection for testing.
"""

import abc as _abc


class Renderer(_abc.ABC):
    """
    Abstract base class for all UI renderers.

    Renderers own every terminal read and write of an import run. By
    using different implementations we can:
    - Drive the workflow from scripted input in tests
    - Switch between plain and rich output
    """

    verbose: bool = False
    """Whether show_verbose() produces output."""

    @_abc.abstractmethod
    def show_section(self, title: str) -> None:
        """Display a section heading."""
        ...

    @_abc.abstractmethod
    def show_status(self, message: str) -> None:
        """Display a status line."""
        ...

    @_abc.abstractmethod
    def show_info(self, message: str) -> None:
        """Display an undecorated line (empty string for a blank line)."""
        ...

    @_abc.abstractmethod
    def show_warning(self, message: str) -> None:
        """Display a warning."""
        ...

    @_abc.abstractmethod
    def show_error(self, error: str) -> None:
        """Display an error message."""
        ...

    @_abc.abstractmethod
    def show_success(self, message: str) -> None:
        """Display a success message."""
        ...

    @_abc.abstractmethod
    def show_menu(self, lines: list[str]) -> None:
        """Display a rendered menu block, one entry per line."""
        ...

    @_abc.abstractmethod
    def prompt(self, text: str) -> str:
        """
        Show a prompt and read one line of input.

        Returns:
            The line without its trailing newline.

        Raises:
            EOFError: If input is closed.
        """
        ...

    def show_verbose(self, message: str) -> None:
        """Display a progress notice when verbose output is on."""
        if self.verbose:
            self.show_status(message)

    def erase_lines(self, count: int) -> None:  # noqa: B027
        """
        Erase the last `count` lines written to the terminal.

        Optional - renderers that cannot move the cursor leave output as is.
        """
