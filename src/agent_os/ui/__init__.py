"""
UI module for the skill importer.

Provides terminal UI components built in testable layers:
- Layer 1: PlainTextRenderer - Just strings, fully testable
- Layer 2: RichConsoleRenderer - Colors and in-place menu redraw
"""

from agent_os.ui.base import Renderer
from agent_os.ui.menu import menu_prompt, render_menu, truncate_description
from agent_os.ui.picker import choose_skills, pick_interactively
from agent_os.ui.plain import CaptureRenderer, PlainTextRenderer
from agent_os.ui.rich_renderer import RichConsoleRenderer

__all__ = [
    # Base
    "Renderer",
    # Menu rendering
    "menu_prompt",
    "render_menu",
    "truncate_description",
    # Picker
    "choose_skills",
    "pick_interactively",
    # Renderers
    "PlainTextRenderer",
    "CaptureRenderer",
    "RichConsoleRenderer",
]
