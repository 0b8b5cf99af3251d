"""Interactive smart home simulator: devices, undoable actions and a command loop."""

__all__ = [
    "ActionHistory",
    "AirConditioner",
    "AppConfig",
    "DeviceFactory",
    "DeviceRegistry",
    "Light",
    "SmartHomeSession",
    "TurnOffAction",
    "TurnOnAction",
]

from .actions import TurnOffAction, TurnOnAction
from .config import AppConfig
from .devices import AirConditioner, Light
from .factory import DeviceFactory
from .history import ActionHistory
from .registry import DeviceRegistry
from .session import SmartHomeSession
