"""
Skill bundle definition.

A bundle is a directory holding one skill. Its directory name is the
stable identifier used for collision checks and copying; the display
name and description come from the SKILL.md frontmatter when present.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import pathlib as _pathlib

import agent_os.constants as constants
import agent_os.skills.frontmatter as frontmatter

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass(frozen=True)
class SkillBundle:
    """A skill directory available for import."""

    identifier: str
    """Directory name (unique within a source)."""

    display_name: str
    """Name shown in the menu (frontmatter name, else the identifier)."""

    description: str
    """One-line description (frontmatter description, else empty)."""

    path: _pathlib.Path
    """Path to the bundle directory."""


def read_skill_header(skill_file: _pathlib.Path) -> frontmatter.SkillHeader | None:
    """
    Read and parse the frontmatter of a SKILL.md file.

    Missing or unreadable files yield None; they never abort discovery.
    """
    try:
        if not skill_file.is_file():
            return None
        content = skill_file.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        _logger.warning("Could not read %s: %s", skill_file, e)
        return None

    return frontmatter.parse_skill_header(content)


def load_bundle(directory: _pathlib.Path) -> SkillBundle:
    """
    Load display metadata for a bundle directory.

    Args:
        directory: Path to the bundle directory.

    Returns:
        SkillBundle with defaults filled in where the header is silent.
    """
    identifier = directory.name
    header = read_skill_header(directory / constants.SKILL_FILE_NAME)

    display_name = identifier
    description = ""
    if header is not None:
        display_name = header.name or identifier
        description = header.description or ""

    return SkillBundle(
        identifier=identifier,
        display_name=display_name,
        description=description,
        path=directory,
    )
