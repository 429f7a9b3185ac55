"""
Skill discovery from the Agent OS install.

Every visible subdirectory of the source root is a candidate bundle,
whether or not it contains a SKILL.md.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib

import agent_os.core.errors as errors
import agent_os.skills.bundle as bundle_module
import agent_os.skills.registry as registry_module

_logger = _logging.getLogger(__name__)


def list_bundle_dirs(source_root: _pathlib.Path) -> list[_pathlib.Path]:
    """
    List candidate bundle directories under a source root.

    Hidden entries and plain files are skipped. The result is sorted by
    name so menu numbering does not depend on filesystem order.
    """
    return sorted(
        (
            entry
            for entry in source_root.iterdir()
            if entry.is_dir() and not entry.name.startswith(".")
        ),
        key=lambda entry: entry.name,
    )


def discover_skills(source_root: _pathlib.Path) -> registry_module.SkillRegistry:
    """
    Discover skill bundles under a source root.

    Args:
        source_root: Directory whose subdirectories are skill bundles.

    Returns:
        Registry of bundles in display order.

    Raises:
        SkillSourceError: If the source root is missing, unreadable, or has
            no bundles.
    """
    try:
        if not source_root.is_dir():
            raise errors.SkillSourceError(f"Skills source not found: {source_root}")
        bundle_dirs = list_bundle_dirs(source_root)
    except OSError as e:
        raise errors.SkillSourceError(f"Cannot read skills source {source_root}: {e}") from e

    if not bundle_dirs:
        raise errors.SkillSourceError(f"No skills found in {source_root}")

    bundles = []
    for bundle_dir in bundle_dirs:
        bundle = bundle_module.load_bundle(bundle_dir)
        _logger.debug("Discovered skill %s (%s)", bundle.identifier, bundle.display_name)
        bundles.append(bundle)

    return registry_module.SkillRegistry(bundles)
