"""
Frontmatter parsing for SKILL.md files.

A frontmatter block is a run of ``key: value`` lines between two lines
consisting of exactly ``---``, at the top of the file. Only flat string
values are recognised; nested YAML structures are not interpreted.
"""

from __future__ import annotations

import re as _re

import pydantic as _pydantic

import agent_os.constants as constants

_KEY_VALUE_RE = _re.compile(r"^([A-Za-z0-9_-]+):(.*)$")


class SkillHeader(_pydantic.BaseModel):
    """
    Display metadata taken from a SKILL.md frontmatter block.

    Both fields are optional. Unknown keys are preserved as extras so
    callers can inspect them, but the importer only uses these two.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    name: str | None = None
    description: str | None = None

    @_pydantic.field_validator("name", "description", mode="after")
    @classmethod
    def _blank_is_absent(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == constants.FRONTMATTER_DELIMITER


def parse_frontmatter(text: str) -> dict[str, str] | None:
    """
    Extract the frontmatter mapping from markdown text.

    Args:
        text: Raw file content.

    Returns:
        Mapping of keys to stripped values (last occurrence wins), an
        empty dict for a header with no keys, or None if the text has
        no frontmatter or the block is never closed.
    """
    lines = iter(text.splitlines())

    for line in lines:
        if not line.strip():
            continue
        if not _is_delimiter(line):
            return None
        break
    else:
        return None

    fields: dict[str, str] = {}
    for line in lines:
        if _is_delimiter(line):
            return fields
        match = _KEY_VALUE_RE.match(line)
        if match:
            fields[match.group(1)] = match.group(2).strip()

    # Unterminated block
    return None


def parse_skill_header(text: str) -> SkillHeader | None:
    """
    Parse SKILL.md content into a SkillHeader.

    Returns:
        The header, or None if the file has no usable frontmatter.
    """
    fields = parse_frontmatter(text)
    if fields is None:
        return None
    return SkillHeader.model_validate(fields)
