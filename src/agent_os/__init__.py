"""
Agent OS - skill importer

Copies skill bundles from a global Agent OS install into the current
project's .claude/skills/ folder.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("agent-os-skills")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "Agent OS Contributors"

from agent_os.config import Settings  # noqa: E402
from agent_os.core.importer import ImportResult, ImportStatus, SkillImporter  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "ImportResult",
    "ImportStatus",
    "Settings",
    "SkillImporter",
]
