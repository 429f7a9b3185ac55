"""
The skill import workflow.

Runs the steps of an import in order: discover, choose, resolve
conflicts, copy. Every step reports through a renderer, and every
failure is raised as an ImporterError for the caller to report.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import logging as _logging

import agent_os.config as config
import agent_os.constants as constants
import agent_os.core.conflicts as conflicts
import agent_os.core.copier as copier
import agent_os.skills.discovery as discovery
import agent_os.ui.base as ui_base
import agent_os.ui.picker as picker

_logger = _logging.getLogger(__name__)


class ImportStatus(_enum.Enum):
    """How an import run finished."""

    IMPORTED = "imported"
    NOTHING_TO_DO = "nothing_to_do"


@_dataclasses.dataclass
class ImportResult:
    """Outcome of a successful import run."""

    status: ImportStatus
    imported: list[str] = _dataclasses.field(default_factory=list)
    skipped: list[str] = _dataclasses.field(default_factory=list)


class SkillImporter:
    """
    Imports skills from the Agent OS install into a project.

    The importer holds no state between runs; all selection and
    conflict decisions are made within run().
    """

    def __init__(self, settings: config.Settings, renderer: ui_base.Renderer) -> None:
        """
        Initialize the importer.

        Args:
            settings: Source and destination locations.
            renderer: Output and prompt handling.
        """
        self._settings = settings
        self._renderer = renderer

    @property
    def settings(self) -> config.Settings:
        return self._settings

    def run(
        self,
        *,
        import_all: bool = False,
        overwrite: bool | None = None,
    ) -> ImportResult:
        """
        Run a full import.

        Args:
            import_all: Skip the menu and import every skill.
            overwrite: Replace existing skills without asking.
                Defaults to the settings value.

        Returns:
            ImportResult describing what was copied.

        Raises:
            ImporterError: If the source is unusable, the operator aborts,
                or a copy fails.
        """
        if overwrite is None:
            overwrite = self._settings.overwrite

        renderer = self._renderer
        source = self._settings.skills_source
        dest = self._settings.skills_dest

        renderer.show_section("Agent OS Import Skills")

        registry = discovery.discover_skills(source)
        renderer.show_verbose(f"Discovered {len(registry)} skills")

        renderer.show_info("")
        renderer.show_status(f"Source: {source}")
        renderer.show_status(f"Destination: {dest}")
        renderer.show_info("")
        renderer.show_status(f"Available skills: {len(registry)}")

        selected = picker.choose_skills(registry, renderer, import_all=import_all)

        renderer.show_info("")
        renderer.show_status("Import summary:")
        renderer.show_info(f"  Skills to import: {len(selected)}")

        to_copy = conflicts.resolve_conflicts(selected, dest, renderer, overwrite=overwrite)
        skipped = [identifier for identifier in selected if identifier not in to_copy]
        if not to_copy:
            renderer.show_warning("No skills left to import after skipping conflicts.")
            return ImportResult(status=ImportStatus.NOTHING_TO_DO, skipped=skipped)

        imported = copier.copy_skills(
            to_copy,
            source,
            dest,
            on_copied=lambda identifier: renderer.show_verbose(f"Imported: {identifier}"),
        )
        _logger.debug("Imported %d skill(s) into %s", len(imported), dest)

        renderer.show_info("")
        renderer.show_success(
            f"Imported {len(imported)} skill(s) to {'/'.join(constants.SKILLS_SUBPATH)}/"
        )
        return ImportResult(status=ImportStatus.IMPORTED, imported=imported, skipped=skipped)
