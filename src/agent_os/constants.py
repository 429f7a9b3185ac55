"""
Shared constants for the skill importer.

This module provides a single source of truth for names and limits
that are used across multiple modules.
"""

# Filesystem layout
DEFAULT_HOME_DIR_NAME = "agent-os"
"""Directory under the user's home holding the global Agent OS install."""

SKILLS_SUBPATH = (".claude", "skills")
"""Skills folder, relative to both the install and the project."""

SKILL_FILE_NAME = "SKILL.md"
"""File inside a bundle whose frontmatter supplies display metadata."""

# Frontmatter
FRONTMATTER_DELIMITER = "---"
"""Line that opens and closes a frontmatter block."""

# Menu display
DESCRIPTION_DISPLAY_WIDTH = 60
"""Maximum characters of a description shown in the selection menu."""

ELLIPSIS = "..."
"""Marker appended to a truncated description."""

DESCRIPTION_SEPARATOR = " — "
"""Text between a skill's name and its description in the menu."""
