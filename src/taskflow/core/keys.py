# src/taskflow/core/keys.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class KeyCode(StrEnum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    ESCAPE = "escape"
    OTHER = "other"


class KeyKind(StrEnum):
    """
    Press/repeat/release, for terminals that report them.

    Only PRESS events drive the controller.
    """

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    code: KeyCode
    char: str = ""
    kind: KeyKind = KeyKind.PRESS

    @classmethod
    def of_char(cls, char: str, kind: KeyKind = KeyKind.PRESS) -> "KeyEvent":
        return cls(code=KeyCode.CHAR, char=char, kind=kind)

    @property
    def is_press(self) -> bool:
        return self.kind is KeyKind.PRESS

    @property
    def is_printable(self) -> bool:
        return self.code is KeyCode.CHAR and len(self.char) == 1 and self.char.isprintable()


ENTER = KeyEvent(KeyCode.ENTER)
BACKSPACE = KeyEvent(KeyCode.BACKSPACE)
ESCAPE = KeyEvent(KeyCode.ESCAPE)
