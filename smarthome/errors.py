# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Iterable


class SmartHomeError(Exception):
    """Base class for recoverable session errors. The message is shown to the user."""


class ConfigError(SmartHomeError):
    pass


class UsageError(SmartHomeError):
    def __init__(self, usage: str) -> None:
        super().__init__(f"Usage: {usage}")
        self.usage = usage


class DeviceExistsError(SmartHomeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Device '{name}' already exists!")
        self.name = name


class UnknownDeviceTypeError(SmartHomeError):
    def __init__(self, type_tag: str, available: Iterable[str]) -> None:
        self.type_tag = type_tag
        self.available = list(available)
        super().__init__(
            f"Unknown device type '{type_tag}'. Available: {', '.join(self.available)}"
        )


class DeviceNotFoundError(SmartHomeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Device '{name}' not found.")
        self.name = name


class UnknownCommandError(SmartHomeError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command '{command}'. Type 'help'.")
        self.command = command
