"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with AGENT_OS_ prefix
3. Built-in defaults

Examples:
  AGENT_OS_HOME=/opt/agent-os
  AGENT_OS_PROJECT_DIR=~/src/my-project
  AGENT_OS_VERBOSE=true
"""

import pathlib as _pathlib

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import agent_os.constants as constants


def get_default_home() -> _pathlib.Path:
    """Get the default location of the global Agent OS install."""
    return _pathlib.Path.home() / constants.DEFAULT_HOME_DIR_NAME


class Settings(_pydantic_settings.BaseSettings):
    """
    Skill importer configuration settings.

    All settings can be overridden via environment variables with AGENT_OS_ prefix.
    Command-line flags are applied on top of these by the CLI.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="AGENT_OS_",
        extra="ignore",
    )

    home: _pathlib.Path = _pydantic.Field(
        default_factory=get_default_home,
        description="Global Agent OS install holding .claude/skills",
    )

    project_dir: _pathlib.Path = _pydantic.Field(
        default_factory=_pathlib.Path.cwd,
        description="Project that skills are imported into",
    )

    verbose: bool = _pydantic.Field(
        default=False,
        description="Show per-step and per-skill progress",
    )

    overwrite: bool = _pydantic.Field(
        default=False,
        description="Overwrite existing skills without prompting",
    )

    @_pydantic.field_validator("home", "project_dir", mode="after")
    @classmethod
    def _expand_user(cls, value: _pathlib.Path) -> _pathlib.Path:
        return value.expanduser()

    @property
    def skills_source(self) -> _pathlib.Path:
        """Directory the skills are imported from."""
        return self.home.joinpath(*constants.SKILLS_SUBPATH)

    @property
    def skills_dest(self) -> _pathlib.Path:
        """Directory the skills are imported into."""
        return self.project_dir.joinpath(*constants.SKILLS_SUBPATH)
