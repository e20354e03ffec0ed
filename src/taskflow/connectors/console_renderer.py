# src/taskflow/connectors/console_renderer.py

from __future__ import annotations

from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.output import ColorDepth, Output, create_output
from prompt_toolkit.styles import Style

from ..tasks.task_models import Task, TitleError

BANNER = r"""
 _____         _    _____ _
|_   _|_ _ ___| | _|  ___| | _____      __
  | |/ _` / __| |/ / |_  | |/ _ \ \ /\ / /
  | | (_| \__ \   <|  _| | | (_) \ V  V /
  |_|\__,_|___/_|\_\_|   |_|\___/ \_/\_/
"""

STYLE = Style.from_dict(
    {
        "banner": "ansicyan bold",
        "title": "ansigreen bold",
        "rule": "ansiwhite",
        "heading": "ansiyellow",
        "label": "ansiblue",
        "menu": "ansicyan",
        "prompt": "ansiwhite",
        "title-prompt": "ansiyellow",
        "ok": "ansigreen",
        "error": "ansired",
        "muted": "ansibrightblack",
        "task-id": "ansigreen bold",
    }
)


def _app_version() -> str:
    try:
        return version("taskflow")
    except PackageNotFoundError:
        return "unknown"


class ConsoleRenderer:
    """
    prompt_toolkit renderer for the interactive loop.

    Works while the terminal is in raw mode: prompt_toolkit leaves output
    post-processing on, so plain "\\n" still returns the carriage.
    """

    def __init__(
        self,
        output: Output | None = None,
        *,
        app_name: str = "TaskFlow",
        color: bool = True,
    ) -> None:
        self._output = output if output is not None else create_output()
        self._app_name = app_name
        self._color_depth = None if color else ColorDepth.DEPTH_1_BIT

    def _print(self, *fragments: tuple[str, str], end: str = "\n") -> None:
        print_formatted_text(
            FormattedText([(f"class:{style}" if style else "", text) for style, text in fragments]),
            end=end,
            style=STYLE,
            output=self._output,
            color_depth=self._color_depth,
        )
        self._output.flush()

    # ---- startup ----

    def clear_screen(self) -> None:
        self._output.erase_screen()
        self._output.cursor_goto(0, 0)
        self._output.flush()

    def show_banner(self) -> None:
        self._print(("banner", BANNER))
        self._print(("title", f"{self._app_name} - Terminal Task Manager"))
        self._print(("rule", "=" * 35))
        self._print(("heading", "Tool Information:"))
        self._print(("", f"   Name: {self._app_name}"))
        self._print(("", f"   Version: {_app_version()}"))
        self._print(("", "   Description: A simple task manager with validation"))
        self._print(("label", "Features: "), ("", "Add tasks, List tasks, Input validation"))
        self._print(
            ("label", "Validation: "),
            ("", "Prevents empty titles and whitespace-only titles"),
        )

    def show_menu(self, entries: Sequence[tuple[str, str]]) -> None:
        self._print(("menu", "\nTask Manager Commands:"))
        for key, help_text in entries:
            self._print(("menu", f"  [{key}] {help_text}"))

    # ---- command level ----

    def command_prompt(self, keys: Sequence[str]) -> None:
        self._print(("prompt", f"Enter command ({'/'.join(keys)}): "), end="")

    def echo_command(self, key: str) -> None:
        self._print(("", key))

    def invalid_command(self, keys: Sequence[str]) -> None:
        self._print(("error", f"\nInvalid command. Use {'/'.join(keys)}\n"))

    def goodbye(self) -> None:
        self._print(("ok", f"Goodbye! Thanks for using {self._app_name}!"))

    # ---- title editing ----

    def title_prompt(self) -> None:
        self._print(("title-prompt", "Enter task title: "), end="")

    def echo_char(self, char: str) -> None:
        self._output.write(char)
        self._output.flush()

    def erase_char(self) -> None:
        self._output.cursor_backward(1)
        self._output.erase_end_of_line()
        self._output.flush()

    def task_added(self, task_id: int) -> None:
        self._print(("", "\n"), ("ok", f"Task #{task_id} added successfully!"))

    def task_rejected(self, error: TitleError) -> None:
        self._print(("", "\n"), ("error", f"Error: {error.message}"))

    def task_cancelled(self) -> None:
        self._print(("", "\n"), ("muted", "Task creation cancelled."))

    # ---- listing ----

    def show_tasks(self, tasks: Sequence[Task]) -> None:
        self._print(("menu", "Task List:"))
        self._print(("menu", "-" * 12))
        if not tasks:
            self._print(("muted", "No tasks found. Press 'a' to add your first task."))
            return
        for task in tasks:
            self._print(("task-id", f"#{task.id}: "), ("", task.title))
