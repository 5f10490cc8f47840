from __future__ import annotations

import math

from typing import Iterable, Tuple

from ..utils import Color, Point, assert_type, logger


MIN_DEPTH = 0.0
MAX_DEPTH = 5.0
DEFAULT_DEPTH = 2.0

# The unit square centered at the origin, counter-clockwise from the bottom-left.
DEFAULT_CORNERS = (
    Point(-0.5, -0.5),
    Point(0.5, -0.5),
    Point(0.5, 0.5),
    Point(-0.5, 0.5),
)


class MoveResult:
    """The outcome of ``Square.translate()``.

    A move always applies its x and y offset. The z offset is only applied
    when the resulting depth stays within the allowed range; otherwise
    ``accepted`` is False and ``notice`` holds a message for the user.
    A MoveResult evaluates as True when the move was accepted.
    """

    __slots__ = ["accepted", "depth", "notice"]

    def __init__(self, accepted: bool, depth: float, notice: str | None = None):
        self.accepted = bool(accepted)
        self.depth = depth
        self.notice = notice

    def __repr__(self):
        status = "accepted" if self.accepted else "rejected"
        return f"<MoveResult {status} depth={self.depth:0.1f} at {hex(id(self))}>"

    def __bool__(self):
        return self.accepted


class Square:
    """An axis-aligned quad with a color and a depth.

    The depth is a proximity value: lower values are closer to the viewer,
    and win the depth test. It always stays within ``MIN_DEPTH`` and
    ``MAX_DEPTH`` (inclusive).

    Parameters
    ----------
    name : str
        The name to identify this square with, e.g. in reports.
    color : Color | str | tuple
        The color of this square. Anything that ``Color`` accepts.
    corners : list | None
        Four (x, y) points in normalized object space. Default the unit
        square centered at the origin.
    depth : float
        The initial depth. Default 2.

    """

    def __init__(
        self,
        name: str,
        color,
        *,
        corners: Iterable | None = None,
        depth: float = DEFAULT_DEPTH,
    ):
        assert_type("name", name, str)
        self._name = name
        self._color = color if isinstance(color, Color) else Color(color)

        if corners is None:
            corners = DEFAULT_CORNERS
        corners = tuple(c if isinstance(c, Point) else Point(*c) for c in corners)
        if len(corners) != 4:
            raise ValueError(f"A square needs 4 corners, got {len(corners)}.")
        self._corners = corners

        depth = float(depth)
        if not (MIN_DEPTH <= depth <= MAX_DEPTH):
            raise ValueError(
                f"Square depth must be between {MIN_DEPTH} and {MAX_DEPTH}, got {depth}."
            )
        self._depth = depth

        self._x_min = self._x_max = self._y_min = self._y_max = 0.0
        self._update_extents()

    def __repr__(self):
        return f"<Square '{self._name}' depth={self._depth:0.1f} at {hex(id(self))}>"

    @property
    def name(self) -> str:
        """The name of this square."""
        return self._name

    @property
    def color(self) -> Color:
        """The color of this square."""
        return self._color

    @property
    def corners(self) -> Tuple[Point, ...]:
        """The four corners of this square, in normalized object space."""
        return self._corners

    @property
    def depth(self) -> float:
        """The depth of this square. Lower is closer."""
        return self._depth

    @property
    def x_min(self) -> float:
        return self._x_min

    @property
    def x_max(self) -> float:
        return self._x_max

    @property
    def y_min(self) -> float:
        return self._y_min

    @property
    def y_max(self) -> float:
        return self._y_max

    @property
    def extents(self) -> Tuple[float, float, float, float]:
        """The tuple (x_min, x_max, y_min, y_max)."""
        return self._x_min, self._x_max, self._y_min, self._y_max

    def translate(self, dx: float, dy: float, dz: float = 0.0) -> MoveResult:
        """Move the square by dx, dy and dz.

        The x and y offset are always applied. The z offset is rejected
        when the new depth falls outside the allowed range, in which case
        the depth is left unchanged. The returned ``MoveResult`` tells
        the caller which of the two happened. Offsets must be finite.
        """
        for key, value in (("dx", dx), ("dy", dy), ("dz", dz)):
            if not math.isfinite(value):
                raise ValueError(f"Square offset {key} must be finite, not {value}")

        self._corners = tuple(c.shift(dx, dy) for c in self._corners)

        new_depth = self._depth + dz
        if MIN_DEPTH <= new_depth <= MAX_DEPTH:
            self._depth = new_depth
            result = MoveResult(True, self._depth)
        else:
            notice = (
                f"{self._name} cannot move there: depth {new_depth:0.1f} "
                f"is outside {MIN_DEPTH:0.1f}..{MAX_DEPTH:0.1f}"
            )
            logger.debug(f"Rejected depth move of {self._name} by {dz}")
            result = MoveResult(False, self._depth, notice)

        self._update_extents()
        return result

    def _update_extents(self):
        # Seed with corner 0, then fold in the others
        x1 = x2 = self._corners[0].x
        y1 = y2 = self._corners[0].y
        for corner in self._corners[1:]:
            if corner.x < x1:
                x1 = corner.x
            if corner.x > x2:
                x2 = corner.x
            if corner.y < y1:
                y1 = corner.y
            if corner.y > y2:
                y2 = corner.y
        self._x_min, self._x_max = x1, x2
        self._y_min, self._y_max = y1, y2

    def report(self) -> str:
        """Get a fixed-width line with the name and depth of this square."""
        label = f" [{self._name}]".ljust(16)
        return f"{label} depth = {self._depth:0.1f}"
