# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .colors import Palette
from .commands import CommandContext, default_commands
from .config import AppConfig
from .errors import SmartHomeError
from .executor import CommandExecutor, CommandRegistry
from .factory import DeviceFactory
from .history import ActionHistory
from .io_adapter import ConsoleIO, IOAdapter
from .registry import DeviceRegistry

logger = logging.getLogger(__name__)

WELCOME = "=== SMART HOME CONTROL SYSTEM ==="


@dataclass
class SmartHomeSession:
    """Interactive session: owns the device registry and the action history."""

    io: IOAdapter = field(default_factory=ConsoleIO)
    config: AppConfig = field(default_factory=AppConfig)
    factory: DeviceFactory = field(default_factory=DeviceFactory)
    registry: DeviceRegistry = field(default_factory=DeviceRegistry)
    history: Optional[ActionHistory] = None

    def __post_init__(self) -> None:
        if self.history is None:
            self.history = ActionHistory(self.registry)
        self.palette = Palette(enabled=self.config.use_color)
        self.executor = CommandExecutor(
            registry=CommandRegistry.from_commands(default_commands()),
            context=CommandContext(
                registry=self.registry,
                history=self.history,
                factory=self.factory,
                palette=self.palette,
            ),
            io=self.io,
        )

    def handle_line(self, line: str) -> bool:
        """Run one input line. Returns False when the session should end."""
        if not line.strip():
            return True
        try:
            result = self.executor.run_line(line)
        except SmartHomeError as exc:
            logger.debug("Command %r failed: %s", line, exc)
            self.io.write(self.palette.red(f"[ERROR] {exc}"))
            return True
        return not result.stop

    def run(self) -> None:
        if self.config.show_welcome:
            self.io.write(self.palette.bold(WELCOME))
            self.io.write("Type 'help' for the list of commands.")

        prompt = self.palette.bold(self.config.prompt)
        while True:
            line = self.io.read_line(prompt)
            if line is None:
                logger.debug("End of input")
                break
            if not self.handle_line(line):
                break
        logger.info("Session finished with %d device(s)", len(self.registry))
