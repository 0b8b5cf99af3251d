# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..colors import PLAIN, Palette
from ..command_parser import ParsedCommand
from ..factory import DeviceFactory
from ..history import ActionHistory
from ..io_adapter import IOAdapter
from ..registry import DeviceRegistry


@dataclass
class CommandContext:
    registry: DeviceRegistry
    history: ActionHistory
    factory: DeviceFactory
    palette: Palette = PLAIN
    # filled by the executor, used by `help`
    commands: List["Command"] = field(default_factory=list)


@dataclass
class CommandResult:
    stop: bool = False


class Command:
    name: str = ""
    usage: str = ""
    description: str = ""

    def run(self, ctx: CommandContext, cmd: ParsedCommand, io: IOAdapter) -> CommandResult:
        raise NotImplementedError

    def usage_for(self, ctx: CommandContext) -> str:
        return self.usage or self.name

    def help_line(self, ctx: CommandContext) -> str:
        return f"  {self.usage_for(ctx):<22} - {self.description}"
