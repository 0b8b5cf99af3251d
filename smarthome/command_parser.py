# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MAX_ARGS = 2


@dataclass(frozen=True)
class ParsedCommand:
    name: str
    args: Tuple[str, ...]
    raw: str

    def arg(self, index: int) -> str:
        return self.args[index] if index < len(self.args) else ""


def parse_cmd_line(line: str) -> ParsedCommand:
    """Split ``line`` into a command word and exactly two positional args.

    Tokens past the second argument are dropped; missing ones become "".
    """
    tokens = (line or "").split()
    if not tokens:
        raise ValueError("Empty command line")

    name = tokens[0]
    args = tokens[1 : 1 + MAX_ARGS]
    args += [""] * (MAX_ARGS - len(args))
    return ParsedCommand(name=name, args=tuple(args), raw=line)
