"""
Configuration module for the skill importer.

Uses pydantic-settings for environment variable loading.
"""

from agent_os.config.settings import Settings, get_default_home

__all__ = ["Settings", "get_default_home"]
