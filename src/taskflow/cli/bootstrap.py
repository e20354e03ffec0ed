# src/taskflow/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings object,
- wires the in-memory store, the prompt_toolkit terminal adapters and the controller.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..connectors.console_renderer import ConsoleRenderer
from ..connectors.terminal_input import TerminalKeySource
from ..core.controller import InteractionController
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_controller(*, settings: Settings | None = None) -> InteractionController:
    """
    Build a ready-to-run controller.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    renderer = ConsoleRenderer(app_name=settings.app_name, color=settings.color)
    keys = TerminalKeySource(escape_timeout=settings.escape_timeout)

    logger.debug(
        "Controller wired (color=%s escape_timeout=%.3f)",
        settings.color,
        settings.escape_timeout,
    )
    return InteractionController(TaskStore(), renderer, keys)


def show_intro(controller: InteractionController, settings: Settings) -> None:
    """Clear the screen and print banner/tool info, as configured."""
    renderer = controller.renderer
    if settings.clear_screen:
        renderer.clear_screen()
    if settings.show_banner:
        renderer.show_banner()
