# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type

from .devices import AirConditioner, BaseDevice, Light


def _default_types() -> Dict[str, Type[BaseDevice]]:
    return {"light": Light, "ac": AirConditioner}


@dataclass
class DeviceFactory:
    """Maps a type tag to a device class. New variants only need ``register``."""

    device_types: Dict[str, Type[BaseDevice]] = field(default_factory=_default_types)

    def register(self, type_tag: str, device_cls: Type[BaseDevice]) -> None:
        if not isinstance(type_tag, str) or not type_tag.strip():
            raise ValueError(f"Device class {device_cls!r} needs a non-empty type tag")
        self.device_types[type_tag] = device_cls

    def create(self, type_tag: str, name: str) -> Optional[BaseDevice]:
        device_cls = self.device_types.get(type_tag)
        if device_cls is None:
            return None
        return device_cls(name)

    def types(self) -> List[str]:
        return list(self.device_types.keys())
