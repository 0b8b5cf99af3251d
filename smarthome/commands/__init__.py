from .base import Command, CommandContext, CommandResult
from .builtins import (
    AddCommand,
    ExitCommand,
    HelpCommand,
    OffCommand,
    OnCommand,
    StatusCommand,
    UndoCommand,
    default_commands,
)

__all__ = [
    "AddCommand",
    "Command",
    "CommandContext",
    "CommandResult",
    "ExitCommand",
    "HelpCommand",
    "OffCommand",
    "OnCommand",
    "StatusCommand",
    "UndoCommand",
    "default_commands",
]
