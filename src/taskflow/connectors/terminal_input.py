# src/taskflow/connectors/terminal_input.py

from __future__ import annotations

import logging
import select
from collections import deque
from collections.abc import Callable
from contextlib import AbstractContextManager

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from ..core.keys import BACKSPACE, ENTER, ESCAPE, KeyCode, KeyEvent

logger = logging.getLogger(__name__)

_ENTER_KEYS = {Keys.Enter, Keys.ControlJ}
_OTHER = KeyEvent(KeyCode.OTHER)


def translate_key_press(press: KeyPress) -> KeyEvent:
    """Map a prompt_toolkit KeyPress onto the controller's KeyEvent."""
    key = press.key
    if key in _ENTER_KEYS:
        return ENTER
    if key == Keys.Backspace:
        return BACKSPACE
    if key == Keys.Escape:
        return ESCAPE
    if isinstance(key, Keys):
        return _OTHER
    if len(key) == 1:
        return KeyEvent.of_char(key)
    return _OTHER


class TerminalKeySource:
    """
    Blocking key reader on top of a prompt_toolkit Input.

    prompt_toolkit's read_keys() never blocks, so we wait on the input fd with
    select(). A lone ESC byte stays inside the vt100 parser until more bytes
    arrive; if none come within `escape_timeout` we flush it as Escape.
    POSIX terminals only.
    """

    def __init__(
        self,
        inp: Input | None = None,
        *,
        escape_timeout: float = 0.05,
        wait: Callable[[float | None], bool] | None = None,
    ) -> None:
        self._input = inp if inp is not None else create_input()
        self._escape_timeout = escape_timeout
        self._wait = wait or self._wait_readable
        self._pending: deque[KeyPress] = deque()

    def raw_mode(self) -> AbstractContextManager[None]:
        return self._input.raw_mode()

    def _wait_readable(self, timeout: float | None) -> bool:
        ready, _, _ = select.select([self._input.fileno()], [], [], timeout)
        return bool(ready)

    def read_key(self) -> KeyEvent:
        """Block until one key press is available. Raises EOFError once input is closed."""
        partial = False
        while not self._pending:
            if self._input.closed:
                raise EOFError("terminal input closed")

            if self._wait(self._escape_timeout if partial else None):
                presses = self._input.read_keys()
                # Bytes consumed but no key produced: parser holds an escape prefix.
                partial = not presses
            else:
                presses = self._input.flush_keys()
                partial = False
            self._pending.extend(presses)

        press = self._pending.popleft()
        event = translate_key_press(press)
        logger.debug("Key %r -> %s", press.key, event.code.value)
        return event

    def close(self) -> None:
        self._input.close()
