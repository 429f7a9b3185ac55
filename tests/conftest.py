"""
Shared pytest fixtures for skill importer tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest

import agent_os.config as config

ENV_PREFIX = "AGENT_OS_"


def write_skill(
    parent: _pathlib.Path,
    identifier: str,
    *,
    name: str | None = None,
    description: str | None = None,
    skill_md: str | None = None,
    files: dict[str, str] | None = None,
) -> _pathlib.Path:
    """
    Create a skill bundle directory.

    Args:
        parent: Skills directory to create the bundle in.
        identifier: Bundle directory name.
        name: Frontmatter name (SKILL.md is written if name or description is set).
        description: Frontmatter description.
        skill_md: Raw SKILL.md content (overrides name/description).
        files: Extra files, relative path -> content.
    """
    bundle = parent / identifier
    bundle.mkdir(parents=True)

    if skill_md is None and (name is not None or description is not None):
        header = ["---"]
        if name is not None:
            header.append(f"name: {name}")
        if description is not None:
            header.append(f"description: {description}")
        header.append("---")
        skill_md = "\n".join(header) + f"\n\n# {name or identifier}\n\nInstructions.\n"

    if skill_md is not None:
        (bundle / "SKILL.md").write_text(skill_md, encoding="utf-8")

    for rel_path, content in (files or {}).items():
        target = bundle / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    return bundle


def snapshot_tree(root: _pathlib.Path) -> dict[str, str]:
    """Map every file under root (relative path) to its content."""
    if not root.exists():
        return {}
    return {
        str(path.relative_to(root)): path.read_text(encoding="utf-8")
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """Return environment dict with AGENT_OS_ keys removed."""
    return {k: v for k, v in _os.environ.items() if not k.startswith(ENV_PREFIX)}


@_pytest.fixture
def isolated_env(clean_env: dict[str, str]):
    """
    Context manager that isolates tests from AGENT_OS_ environment variables.

    Usage:
        def test_something(isolated_env):
            with isolated_env:
                settings = config.Settings()
    """
    return _mock.patch.dict(_os.environ, clean_env, clear=True)


@_pytest.fixture
def make_skill() -> _typing.Callable[..., _pathlib.Path]:
    """The write_skill helper, as a fixture."""
    return write_skill


@_pytest.fixture
def agent_os_home(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """A global Agent OS install with an empty skills folder."""
    home = tmp_path / "agent-os"
    (home / ".claude" / "skills").mkdir(parents=True)
    return home


@_pytest.fixture
def skills_source(agent_os_home: _pathlib.Path) -> _pathlib.Path:
    """Skills folder of the Agent OS install."""
    return agent_os_home / ".claude" / "skills"


@_pytest.fixture
def project_dir(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """An empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@_pytest.fixture
def skills_dest(project_dir: _pathlib.Path) -> _pathlib.Path:
    """Skills folder of the project (not created)."""
    return project_dir / ".claude" / "skills"


@_pytest.fixture
def settings(
    isolated_env,
    agent_os_home: _pathlib.Path,
    project_dir: _pathlib.Path,
) -> config.Settings:
    """Settings pointing at the temporary install and project."""
    with isolated_env:
        return config.Settings(home=agent_os_home, project_dir=project_dir)
