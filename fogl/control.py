"""The task interface and joystick input shaping."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

DEFAULT_DEADZONE = 0.125


def deadzone(x, y, r_dead=DEFAULT_DEADZONE):
    """Zero a stick position inside the dead radius, rescale it outside.

    Returns the new (x, y) pair.
    """
    r = math.hypot(x, y)
    if r < r_dead:
        return 0.0, 0.0
    return (x / r - r_dead) / (1 - r_dead), (y / r - r_dead) / (1 - r_dead)


class Task(ABC):
    """Something that is initialised, polled and run; alive False means stop."""

    alive: bool = False

    @abstractmethod
    def init(self):
        """Set up what the constructor deferred; return False on failure."""

    @abstractmethod
    def poll(self):
        """Check for changes since the last poll; return False to stop."""

    @abstractmethod
    def run(self):
        """Run the task; return False when it ends or fails."""