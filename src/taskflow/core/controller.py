# src/taskflow/core/controller.py

"""
Interactive controller: one key event at a time through an explicit state machine.

    AWAITING_COMMAND --a--> EDITING_NEW_TASK_TITLE --enter(ok)/escape--> AWAITING_COMMAND
    AWAITING_COMMAND --q--> TERMINATED

A failed submit keeps the user in EDITING_NEW_TASK_TITLE with an empty buffer.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from .commands import CommandRegistry
from .keys import KeyCode, KeyEvent
from .ports import KeySource, Renderer, TaskRepo

logger = logging.getLogger(__name__)


class State(StrEnum):
    AWAITING_COMMAND = "awaiting_command"
    EDITING_NEW_TASK_TITLE = "editing_new_task_title"
    TERMINATED = "terminated"


class InteractionController:
    def __init__(self, store: TaskRepo, renderer: Renderer, keys: KeySource | None = None) -> None:
        self.store = store
        self.renderer = renderer
        self.keys = keys

        self.state = State.AWAITING_COMMAND
        self.buffer: list[str] = []
        self._prompt_pending = True

        self.commands = CommandRegistry()
        self.commands.register("a", "add", self._cmd_add, help_text="Add task")
        self.commands.register("l", "list", self._cmd_list, help_text="List tasks")
        self.commands.register("q", "quit", self._cmd_quit, help_text="Quit")

    @property
    def buffer_text(self) -> str:
        return "".join(self.buffer)

    def run(self) -> None:
        """
        Blocking read/dispatch loop; returns after the quit command.

        Raw mode is held for the whole loop and restored on every way out,
        including I/O errors raised by the key source or the renderer.
        """
        if self.keys is None:
            raise RuntimeError("InteractionController.run() needs a key source")

        self.renderer.show_menu(self.commands.menu())
        logger.info("Interactive loop started.")

        with self.keys.raw_mode():
            while self.state is not State.TERMINATED:
                if self.state is State.AWAITING_COMMAND and self._prompt_pending:
                    self.renderer.command_prompt(self.commands.keys())
                    self._prompt_pending = False
                self.handle_key(self.keys.read_key())

        logger.info("Interactive loop finished.")

    # ---- dispatch ----

    def handle_key(self, event: KeyEvent) -> State:
        if not event.is_press:
            return self.state

        previous = self.state
        if self.state is State.AWAITING_COMMAND:
            self._on_command_key(event)
        elif self.state is State.EDITING_NEW_TASK_TITLE:
            self._on_edit_key(event)

        if self.state is not previous:
            logger.debug("State %s -> %s", previous.value, self.state.value)
        return self.state

    def _on_command_key(self, event: KeyEvent) -> None:
        self._prompt_pending = True
        if event.code is KeyCode.CHAR and self.commands.handle(event.char):
            return
        self.renderer.invalid_command(self.commands.keys())

    def _on_edit_key(self, event: KeyEvent) -> None:
        if event.code is KeyCode.ENTER:
            self._submit()
        elif event.code is KeyCode.ESCAPE:
            self.renderer.task_cancelled()
            self.buffer = []
            self.state = State.AWAITING_COMMAND
        elif event.code is KeyCode.BACKSPACE:
            if self.buffer:
                self.buffer.pop()
                self.renderer.erase_char()
        elif event.is_printable:
            self.buffer.append(event.char)
            self.renderer.echo_char(event.char)

    def _submit(self) -> None:
        result = self.store.add_task(self.buffer_text)
        if result.error is not None:
            self.renderer.task_rejected(result.error)
            self.renderer.title_prompt()
            self.buffer = []
            return

        if result.task_id is not None:
            self.renderer.task_added(result.task_id)
        self.buffer = []
        self.state = State.AWAITING_COMMAND

    # ---- commands ----

    def _cmd_add(self) -> None:
        self.renderer.echo_command("a")
        self.buffer = []
        self.state = State.EDITING_NEW_TASK_TITLE
        self.renderer.title_prompt()

    def _cmd_list(self) -> None:
        self.renderer.echo_command("l")
        self.renderer.show_tasks(self.store.list_tasks())

    def _cmd_quit(self) -> None:
        self.renderer.echo_command("q")
        self.renderer.goodbye()
        self.state = State.TERMINATED
