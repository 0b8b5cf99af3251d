# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .command_parser import parse_cmd_line
from .commands.base import Command, CommandContext, CommandResult
from .errors import UnknownCommandError
from .io_adapter import IOAdapter


@dataclass
class CommandRegistry:
    commands: Dict[str, Command] = field(default_factory=dict)

    @classmethod
    def from_commands(cls, commands: Iterable[Command]) -> "CommandRegistry":
        registry = cls()
        for command in commands:
            registry.register(command)
        return registry

    def register(self, command: Command) -> None:
        name = getattr(command, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Command {command!r} has invalid .name")
        self.commands[name] = command

    def get(self, name: str) -> Command:
        # command words are case-sensitive
        if name not in self.commands:
            raise UnknownCommandError(name)
        return self.commands[name]

    def list_commands(self) -> List[Command]:
        return list(self.commands.values())


@dataclass
class CommandExecutor:
    registry: CommandRegistry
    context: CommandContext
    io: IOAdapter

    def __post_init__(self) -> None:
        self.context.commands = self.registry.list_commands()

    def run_line(self, line: str) -> CommandResult:
        cmd = parse_cmd_line(line)
        command = self.registry.get(cmd.name)
        return command.run(self.context, cmd, self.io)
