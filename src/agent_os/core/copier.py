"""
Copying skill bundles into the destination.

Bundles are copied one at a time, in order. A failure stops the run
immediately; bundles already copied are left in place.
"""

from __future__ import annotations

import logging as _logging
import os as _os
import pathlib as _pathlib
import shutil as _shutil
import typing as _typing

import agent_os.core.errors as errors

_logger = _logging.getLogger(__name__)


def _unlink_replaced_links(source: _pathlib.Path, dest: _pathlib.Path) -> None:
    """
    Remove destination entries that a symlink in the source will replace.

    copytree recreates links with os.symlink, which refuses to overwrite
    an existing entry. Only links and files are removed; anything else is
    left for copytree to report.
    """
    if not dest.is_dir():
        return
    for dirpath, dirnames, filenames in _os.walk(source):
        relative = _pathlib.Path(dirpath).relative_to(source)
        for name in dirnames + filenames:
            if not (_pathlib.Path(dirpath) / name).is_symlink():
                continue
            target = dest / relative / name
            if target.is_symlink() or target.is_file():
                target.unlink()


def copy_bundle(
    identifier: str,
    source_root: _pathlib.Path,
    dest_root: _pathlib.Path,
) -> _pathlib.Path:
    """
    Recursively copy one bundle directory.

    Files already at the destination are overwritten in place; files
    that exist only at the destination are kept. Symlinks are copied as
    links and replace whatever link or file sits at the same path.

    Returns:
        Path to the copied bundle.

    Raises:
        SkillCopyError: If the copy fails.
    """
    source = source_root / identifier
    dest = dest_root / identifier
    try:
        _unlink_replaced_links(source, dest)
        _shutil.copytree(source, dest, symlinks=True, dirs_exist_ok=True)
    except OSError as e:
        # shutil.Error is an OSError subclass
        raise errors.SkillCopyError(
            f"Failed to import {identifier}: {e}", identifier=identifier
        ) from e

    _logger.debug("Copied %s -> %s", source, dest)
    return dest


def copy_skills(
    selected: _typing.Sequence[str],
    source_root: _pathlib.Path,
    dest_root: _pathlib.Path,
    *,
    on_copied: _typing.Callable[[str], None] | None = None,
) -> list[str]:
    """
    Copy the selected bundles from source_root into dest_root.

    Args:
        selected: Identifiers to copy, in order.
        source_root: Skills source directory.
        dest_root: Skills destination directory (created if missing).
        on_copied: Called with each identifier once its copy completes.

    Returns:
        Identifiers copied.

    Raises:
        SkillCopyError: On the first filesystem failure.
    """
    try:
        dest_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise errors.SkillCopyError(f"Cannot create {dest_root}: {e}") from e

    copied: list[str] = []
    for identifier in selected:
        copy_bundle(identifier, source_root, dest_root)
        copied.append(identifier)
        if on_copied is not None:
            on_copied(identifier)
    return copied
