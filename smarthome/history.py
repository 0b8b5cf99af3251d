# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .actions import Action
from .devices import DeviceEvent
from .registry import DeviceRegistry

logger = logging.getLogger(__name__)


@dataclass
class ActionHistory:
    """Last-in-first-out record of executed actions."""

    registry: DeviceRegistry
    actions: List[Action] = field(default_factory=list)

    def run(self, action: Action) -> DeviceEvent:
        """Execute ``action`` now and remember it for undo.

        Failed actions are not recorded.
        """
        event = action.execute(self.registry)
        self.actions.append(action)
        logger.info("Executed %s on %r (history=%d)", action.verb, action.device_name, len(self.actions))
        return event

    def undo(self) -> Optional[DeviceEvent]:
        """Reverse the most recent action. Returns None when there is nothing to undo."""
        if not self.actions:
            return None
        action = self.actions.pop()
        logger.info("Undoing %s on %r", action.verb, action.device_name)
        return action.undo(self.registry)

    @property
    def can_undo(self) -> bool:
        return bool(self.actions)

    def __len__(self) -> int:
        return len(self.actions)
