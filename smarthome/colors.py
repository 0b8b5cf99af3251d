# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
BOLD = "\033[1m"


@dataclass(frozen=True)
class Palette:
    """ANSI styling for console output. ``enabled=False`` returns text unchanged."""

    enabled: bool = True

    def paint(self, text: str, code: str) -> str:
        if not self.enabled or not text:
            return text
        return f"{code}{text}{RESET}"

    def red(self, text: str) -> str:
        return self.paint(text, RED)

    def green(self, text: str) -> str:
        return self.paint(text, GREEN)

    def yellow(self, text: str) -> str:
        return self.paint(text, YELLOW)

    def cyan(self, text: str) -> str:
        return self.paint(text, CYAN)

    def bold(self, text: str) -> str:
        return self.paint(text, BOLD)


PLAIN = Palette(enabled=False)
