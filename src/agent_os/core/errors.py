"""
Errors raised by the import workflow.

Every error is fatal to the run. The CLI reports the message and exits
with the error's exit code.
"""


class ImporterError(Exception):
    """Base class for errors that end an import run."""

    exit_code: int = 1


class SkillSourceError(ImporterError):
    """Raised when the skills source is missing or holds no skills."""

    pass


class EmptySelectionError(ImporterError):
    """Raised when the operator finishes the menu with nothing selected."""

    pass


class ImportCancelledError(ImporterError):
    """Raised when the operator cancels, or input closes, at a prompt."""

    pass


class SkillCopyError(ImporterError):
    """Raised when writing to the destination fails.

    Bundles copied before the failure are left in place.
    """

    def __init__(self, message: str, *, identifier: str | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier
