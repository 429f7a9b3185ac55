"""
CLI module for the skill importer.

Provides the command-line interface using Click.
"""

from agent_os.cli.main import cli, main

__all__ = ["main", "cli"]
