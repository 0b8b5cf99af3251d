# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional


class IOAdapter:
    """Line-oriented input/output used by the session (console, tests, scripts)."""

    def read_line(self, prompt: str = "") -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        raise NotImplementedError

    def write(self, text: str = "") -> None:
        raise NotImplementedError


class ConsoleIO(IOAdapter):
    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return input(prompt)
        except (KeyboardInterrupt, EOFError):
            print()
            return None

    def write(self, text: str = "") -> None:
        print(text)


@dataclass
class ScriptedIO(IOAdapter):
    """Feeds predefined lines and records everything written."""

    lines: List[str] = field(default_factory=list)
    output: List[str] = field(default_factory=list)
    prompts: int = 0

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "ScriptedIO":
        return cls(lines=list(lines))

    def read_line(self, prompt: str = "") -> Optional[str]:
        self.prompts += 1
        if not self.lines:
            return None
        return self.lines.pop(0)

    def write(self, text: str = "") -> None:
        self.output.extend(text.split("\n"))

    @property
    def text(self) -> str:
        return "\n".join(self.output)
