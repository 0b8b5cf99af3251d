# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import colors
from .colors import PLAIN, Palette


@dataclass(frozen=True)
class DeviceEvent:
    """Human-readable effect of a power transition."""

    message: str
    highlight: Optional[str] = None

    def render(self, palette: Palette = PLAIN) -> str:
        if self.highlight is None:
            return self.message
        return palette.paint(self.message, self.highlight)


class BaseDevice:
    """Named on/off appliance. Devices start switched off."""

    type_tag: str = ""

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Device name must not be empty")
        self._name = name
        self.is_on = False

    @property
    def name(self) -> str:
        return self._name

    def turn_on(self) -> DeviceEvent:
        raise NotImplementedError

    def turn_off(self) -> DeviceEvent:
        raise NotImplementedError

    def status(self, palette: Palette = PLAIN) -> str:
        badge = palette.green("[ON]") if self.is_on else palette.red("[OFF]")
        return f"{self.name}\t: {badge}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, is_on={self.is_on})"


class Light(BaseDevice):
    type_tag = "light"

    def turn_on(self) -> DeviceEvent:
        self.is_on = True
        return DeviceEvent(f">>> Light ({self.name}) shines brightly.", colors.YELLOW)

    def turn_off(self) -> DeviceEvent:
        self.is_on = False
        return DeviceEvent(f">>> Light ({self.name}) goes dark.")


class AirConditioner(BaseDevice):
    type_tag = "ac"

    def turn_on(self) -> DeviceEvent:
        self.is_on = True
        return DeviceEvent(f">>> Air conditioner ({self.name}) cools the air.", colors.CYAN)

    def turn_off(self) -> DeviceEvent:
        self.is_on = False
        return DeviceEvent(f">>> Air conditioner ({self.name}) is switched off.")
