"""
Drawing actions handed to a rendering backend.

The geometry code only forwards an ``Action`` with a finished outline; it
never looks at which action was requested.
"""

from enum import Enum
from typing import Protocol, Union, runtime_checkable

import numpy as np


class Action(Enum):
    NONE = "none"
    FILL = "fill"
    STROKE = "stroke"
    FILLSTROKE = "fillstroke"
    FILLPRESERVE = "fillpreserve"
    STROKEPRESERVE = "strokepreserve"
    CLIP = "clip"
    PATH = "path"

    @classmethod
    def coerce(cls, action: Union["Action", str, None]) -> "Action":
        """Accept an Action, its name or value (``"stroke"``, ``":stroke"``), or None."""
        if action is None:
            return cls.NONE
        if isinstance(action, cls):
            return action
        key = str(action).lstrip(":").lower()
        if key == "nothing":
            return cls.NONE
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown drawing action: {action!r}")


@runtime_checkable
class Renderer(Protocol):
    """Anything that can turn an outline plus an action into marks."""

    def draw(self, points: np.ndarray, action: Action, close: bool = True) -> None:
        ...
