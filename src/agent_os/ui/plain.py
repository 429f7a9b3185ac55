"""
Plain text renderer (Layer 1).

Outputs simple text with no formatting or escape codes.
Fully testable and works with piped input and output.
"""

import collections as _collections
import io as _io
import sys as _sys
import typing as _typing

import agent_os.ui.base as base
import agent_os.ui.icons as icons


class PlainTextRenderer(base.Renderer):
    """
    Simple plain text renderer.

    Writes to stdout/stderr (or custom streams) and reads from stdin (or a
    custom stream). Menus are reprinted rather than redrawn in place.
    """

    def __init__(
        self,
        output: _typing.TextIO | None = None,
        error: _typing.TextIO | None = None,
        input: _typing.TextIO | None = None,  # noqa: A002
        *,
        verbose: bool = False,
    ) -> None:
        """
        Initialize the plain text renderer.

        Args:
            output: Stream for normal output (default: sys.stdout).
            error: Stream for error output (default: sys.stderr).
            input: Stream prompts read from (default: sys.stdin).
            verbose: If True, show_verbose() prints.
        """
        self._output = output or _sys.stdout
        self._error = error or _sys.stderr
        self._input = input or _sys.stdin
        self.verbose = verbose

    def _write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def show_section(self, title: str) -> None:
        """Display a section heading."""
        self._write(f"\n=== {title} ===\n")

    def show_status(self, message: str) -> None:
        """Display a status line."""
        self._write(f"{icons.icon_arrow()}{message}\n")

    def show_info(self, message: str) -> None:
        """Display an undecorated line."""
        self._write(f"{message}\n")

    def show_warning(self, message: str) -> None:
        """Display a warning."""
        self._write(f"{icons.icon_warning()}Warning: {message}\n")

    def show_error(self, error: str) -> None:
        """Display an error message."""
        self._error.write(f"{icons.icon_failure()}Error: {error}\n")
        self._error.flush()

    def show_success(self, message: str) -> None:
        """Display a success message."""
        self._write(f"{icons.icon_success()}{message}\n")

    def show_menu(self, lines: list[str]) -> None:
        """Display a rendered menu block."""
        self._write("".join(f"{line}\n" for line in lines))

    def _read_line(self) -> str:
        return self._input.readline()

    def prompt(self, text: str) -> str:
        """Show a prompt and read one line of input."""
        self._write(text)
        line = self._read_line()
        if not line:
            # readline() returns "" only at end of input
            raise EOFError("Input closed")
        return line.rstrip("\r\n")


class CaptureRenderer(PlainTextRenderer):
    """
    A renderer that captures output and replays scripted input, for testing.

    All output is written to internal StringIO buffers that can be inspected.
    Each prompt consumes the next scripted line; when none are left,
    prompt() raises EOFError.
    """

    def __init__(
        self,
        inputs: _typing.Iterable[str] = (),
        *,
        verbose: bool = False,
    ) -> None:
        """Initialize with internal capture buffers and scripted input."""
        self._captured_output = _io.StringIO()
        self._captured_error = _io.StringIO()
        self._inputs: _collections.deque[str] = _collections.deque(inputs)
        self.prompts: list[str] = []
        self.menus: list[list[str]] = []
        self.erased: list[int] = []
        super().__init__(
            output=self._captured_output,
            error=self._captured_error,
            input=_io.StringIO(),
            verbose=verbose,
        )

    def _read_line(self) -> str:
        if not self._inputs:
            return ""
        return self._inputs.popleft() + "\n"

    def prompt(self, text: str) -> str:
        """Record the prompt, then answer it from the script."""
        self.prompts.append(text)
        answer = super().prompt(text)
        # Echo the answer the way a terminal would
        self._write(f"{answer}\n")
        return answer

    def show_menu(self, lines: list[str]) -> None:
        """Record and display a menu block."""
        self.menus.append(list(lines))
        super().show_menu(lines)

    def erase_lines(self, count: int) -> None:
        """Record the erase request."""
        self.erased.append(count)

    @property
    def remaining_inputs(self) -> list[str]:
        """Scripted lines not yet consumed."""
        return list(self._inputs)

    def get_output(self) -> str:
        """Get all captured standard output."""
        return self._captured_output.getvalue()

    def get_error(self) -> str:
        """Get all captured error output."""
        return self._captured_error.getvalue()

    def clear(self) -> None:
        """Clear captured output."""
        self._captured_output = _io.StringIO()
        self._captured_error = _io.StringIO()
        self._output = self._captured_output
        self._error = self._captured_error
