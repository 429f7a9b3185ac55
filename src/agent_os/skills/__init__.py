"""
Skill bundles for the Agent OS importer.

A skill bundle is a directory under .claude/skills/ whose name identifies
it. An optional SKILL.md with frontmatter supplies the name and
description shown when choosing what to import.
"""

from agent_os.skills.bundle import SkillBundle, load_bundle, read_skill_header
from agent_os.skills.discovery import discover_skills, list_bundle_dirs
from agent_os.skills.frontmatter import SkillHeader, parse_frontmatter, parse_skill_header
from agent_os.skills.registry import SkillRegistry

__all__ = [
    # Core
    "SkillBundle",
    "SkillHeader",
    "SkillRegistry",
    # Parsing
    "load_bundle",
    "parse_frontmatter",
    "parse_skill_header",
    "read_skill_header",
    # Discovery
    "discover_skills",
    "list_bundle_dirs",
]
