"""
Core import workflow for Agent OS skills.

The selection state machine, conflict resolution and copy steps live
here, independent of any particular terminal renderer.
"""

from agent_os.core.errors import (
    EmptySelectionError,
    ImportCancelledError,
    ImporterError,
    SkillCopyError,
    SkillSourceError,
)

__all__ = [
    "EmptySelectionError",
    "ImportCancelledError",
    "ImporterError",
    "SkillCopyError",
    "SkillSourceError",
]
