# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from typing import List

from ..actions import Action, TurnOffAction, TurnOnAction
from ..command_parser import ParsedCommand
from ..errors import (
    DeviceExistsError,
    DeviceNotFoundError,
    UnknownDeviceTypeError,
    UsageError,
)
from ..io_adapter import IOAdapter
from .base import Command, CommandContext, CommandResult

logger = logging.getLogger(__name__)


class AddCommand(Command):
    name = "add"
    description = "Add a new device"

    def usage_for(self, ctx: CommandContext) -> str:
        return f"add [{'|'.join(ctx.factory.types())}] [name]"

    def run(self, ctx: CommandContext, cmd: ParsedCommand, io: IOAdapter) -> CommandResult:
        type_tag, device_name = cmd.arg(0), cmd.arg(1)
        if not type_tag or not device_name:
            raise UsageError("add [type] [name]")
        # the registry would silently overwrite, so duplicates are refused here
        if ctx.registry.exists(device_name):
            raise DeviceExistsError(device_name)

        device = ctx.factory.create(type_tag, device_name)
        if device is None:
            raise UnknownDeviceTypeError(type_tag, ctx.factory.types())

        ctx.registry.add(device)
        io.write(ctx.palette.green(f"[OK] Device '{device_name}' added."))
        return CommandResult()


class _PowerCommand(Command):
    def make_action(self, device_name: str) -> Action:
        raise NotImplementedError

    def run(self, ctx: CommandContext, cmd: ParsedCommand, io: IOAdapter) -> CommandResult:
        device_name = cmd.arg(0)
        if not ctx.registry.exists(device_name):
            raise DeviceNotFoundError(device_name)

        event = ctx.history.run(self.make_action(device_name))
        io.write(event.render(ctx.palette))
        return CommandResult()


class OnCommand(_PowerCommand):
    name = "on"
    usage = "on [name]"
    description = "Turn a device on"

    def make_action(self, device_name: str) -> Action:
        return TurnOnAction(device_name)


class OffCommand(_PowerCommand):
    name = "off"
    usage = "off [name]"
    description = "Turn a device off"

    def make_action(self, device_name: str) -> Action:
        return TurnOffAction(device_name)


class UndoCommand(Command):
    name = "undo"
    description = "Undo the last action"

    def run(self, ctx: CommandContext, cmd: ParsedCommand, io: IOAdapter) -> CommandResult:
        if not ctx.history.can_undo:
            io.write(ctx.palette.yellow("[INFO] Nothing to undo."))
            return CommandResult()

        io.write(ctx.palette.yellow("[UNDO] Undoing last action..."))
        event = ctx.history.undo()
        if event is not None:
            io.write(event.render(ctx.palette))
        return CommandResult()


class StatusCommand(Command):
    name = "status"
    description = "Show the status of all devices"

    def run(self, ctx: CommandContext, cmd: ParsedCommand, io: IOAdapter) -> CommandResult:
        io.write()
        io.write(ctx.palette.bold("--- HOME STATUS ---"))
        for line in ctx.registry.list_statuses(ctx.palette):
            io.write(line)
        io.write("-" * 19)
        return CommandResult()


class HelpCommand(Command):
    name = "help"
    description = "Show this command reference"

    def run(self, ctx: CommandContext, cmd: ParsedCommand, io: IOAdapter) -> CommandResult:
        io.write("\nAvailable commands:")
        for command in ctx.commands:
            io.write(command.help_line(ctx))
        io.write()
        return CommandResult()


class ExitCommand(Command):
    name = "exit"
    description = "Quit"

    def run(self, ctx: CommandContext, cmd: ParsedCommand, io: IOAdapter) -> CommandResult:
        logger.debug("Exit requested")
        return CommandResult(stop=True)


def default_commands() -> List[Command]:
    return [
        AddCommand(),
        OnCommand(),
        OffCommand(),
        UndoCommand(),
        StatusCommand(),
        HelpCommand(),
        ExitCommand(),
    ]
