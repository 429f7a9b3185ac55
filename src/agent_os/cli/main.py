"""
Main CLI entry point for the skill importer.

Provides the command-line interface using Click.
"""

import sys as _sys
import typing as _typing

import click as _click
import pydantic as _pydantic

import agent_os
import agent_os.config as config
import agent_os.core.errors as errors
import agent_os.core.importer as importer
import agent_os.ui as ui

PROG_NAME = "agent-os-import-skills"

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _create_renderer(settings: config.Settings) -> ui.Renderer:
    """Pick a renderer: rich on a terminal, plain text otherwise."""
    if _sys.stdout.isatty():
        return ui.RichConsoleRenderer(verbose=settings.verbose)
    return ui.PlainTextRenderer(verbose=settings.verbose)


@_click.command(context_settings=CONTEXT_SETTINGS)
@_click.version_option(agent_os.__version__, "--version", prog_name=PROG_NAME)
@_click.option(
    "--all",
    "import_all",
    is_flag=True,
    help="Import all available skills (skip selection)",
)
@_click.option(
    "--overwrite",
    is_flag=True,
    help="Overwrite existing skills without prompting",
)
@_click.option(
    "--verbose",
    is_flag=True,
    help="Show detailed output",
)
def cli(import_all: bool, overwrite: bool, verbose: bool) -> None:
    """
    Import Claude skills from Agent OS to the current project.

    Skills are read from ~/agent-os/.claude/skills (set AGENT_OS_HOME to
    change the install location) and copied into .claude/skills in the
    current directory.

    \b
    Examples:
        agent-os-import-skills
        agent-os-import-skills --all
        agent-os-import-skills --all --overwrite
    """
    # Load settings from environment, then override with CLI args
    try:
        settings = config.Settings()
    except _pydantic.ValidationError as e:
        raise _click.ClickException(f"Invalid configuration: {e}") from None
    if overwrite:
        settings.overwrite = overwrite
    if verbose:
        settings.verbose = verbose

    renderer = _create_renderer(settings)
    skill_importer = importer.SkillImporter(settings, renderer)

    try:
        skill_importer.run(import_all=import_all)
    except errors.ImporterError as e:
        renderer.show_error(str(e))
        raise SystemExit(e.exit_code) from None


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
