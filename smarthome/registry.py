# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .colors import PLAIN, Palette
from .devices import BaseDevice

logger = logging.getLogger(__name__)

NO_DEVICES = "(no devices)"


@dataclass
class DeviceRegistry:
    """Owns every device of the session, keyed by its unique name."""

    devices: Dict[str, BaseDevice] = field(default_factory=dict)

    def add(self, device: BaseDevice) -> None:
        """Store ``device`` under its name. An entry with the same name is replaced."""
        if device.name in self.devices:
            logger.warning("Replacing device %r in registry", device.name)
        self.devices[device.name] = device
        logger.debug("Registered %r", device)

    def get(self, name: str) -> Optional[BaseDevice]:
        return self.devices.get(name)

    def exists(self, name: str) -> bool:
        return name in self.devices

    def names(self) -> List[str]:
        return sorted(self.devices)

    def list_statuses(self, palette: Palette = PLAIN) -> List[str]:
        """One status line per device ordered by name, or a placeholder line."""
        if not self.devices:
            return [NO_DEVICES]
        return [self.devices[name].status(palette) for name in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self.devices

    def __len__(self) -> int:
        return len(self.devices)
