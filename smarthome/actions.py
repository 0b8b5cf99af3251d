# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass

from .devices import BaseDevice, DeviceEvent
from .errors import DeviceNotFoundError
from .registry import DeviceRegistry


@dataclass(frozen=True)
class Action:
    """Reversible power change bound to one device.

    Only the device name is kept; the device itself stays owned by the
    registry and is looked up on every execute/undo.
    """

    device_name: str
    verb: str = ""

    def _device(self, registry: DeviceRegistry) -> BaseDevice:
        device = registry.get(self.device_name)
        if device is None:
            raise DeviceNotFoundError(self.device_name)
        return device

    def execute(self, registry: DeviceRegistry) -> DeviceEvent:
        raise NotImplementedError

    def undo(self, registry: DeviceRegistry) -> DeviceEvent:
        raise NotImplementedError


@dataclass(frozen=True)
class TurnOnAction(Action):
    verb: str = "turn-on"

    def execute(self, registry: DeviceRegistry) -> DeviceEvent:
        return self._device(registry).turn_on()

    def undo(self, registry: DeviceRegistry) -> DeviceEvent:
        return self._device(registry).turn_off()


@dataclass(frozen=True)
class TurnOffAction(Action):
    verb: str = "turn-off"

    def execute(self, registry: DeviceRegistry) -> DeviceEvent:
        return self._device(registry).turn_off()

    def undo(self, registry: DeviceRegistry) -> DeviceEvent:
        return self._device(registry).turn_on()
