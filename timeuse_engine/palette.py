"""Deterministic fallback color assignment."""

from __future__ import annotations

from typing import Iterable

from timeuse_engine.config import PRESET_COLORS
from timeuse_engine.schema import Category


class ColorAssigner:
    """Hand out palette colors to uncolored categories in first-seen order.

    Colors already claimed by ``reserved`` categories are skipped until the
    palette runs out, after which assignment cycles over the full palette.
    """

    def __init__(self, reserved: Iterable[Category] = (), palette: tuple[str, ...] = PRESET_COLORS):
        self._palette = palette
        self._claimed = {c.color.lower() for c in reserved if c.color}
        self._assigned: dict[str, str] = {}
        self._cursor = 0

    def color_for(self, category: Category) -> str:
        if category.color:
            return category.color
        if category.id not in self._assigned:
            self._assigned[category.id] = self._next_color()
        return self._assigned[category.id]

    def _next_color(self) -> str:
        free = [c for c in self._palette if c.lower() not in self._claimed]
        if free:
            color = free[0]
        else:
            color = self._palette[self._cursor % len(self._palette)]
            self._cursor += 1
        self._claimed.add(color.lower())
        return color
