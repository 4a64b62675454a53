"""Rectangle model: width, height and area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """An axis-aligned rectangle described only by its size."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height
