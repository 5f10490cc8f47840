from __future__ import annotations

from typing import Tuple

import numpy as np

from ..renderers._zbuffer import ZBufferRasterizer
from ..utils import Color, assert_type, logger
from ._square import MoveResult, Square


class Scene:
    """A session that holds the squares to draw and the rasterizer that
    resolves them.

    The squares keep the order in which they were added; reports list them
    in that order. Every ``move()`` is followed by a full resolve pass, so
    ``positions`` and ``colors`` always reflect the current squares.

    Parameters
    ----------
    size : int
        The width (and height) of the target surface in pixels. The pixel
        scale of the rasterizer is half of this, so it must be even.
    squares : list | None
        Squares to add to the scene.

    """

    def __init__(self, size: int = 400, squares=None):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"Scene size must be an int, not {size.__class__.__name__}")
        if size <= 0 or size % 2:
            raise ValueError(f"Scene size must be a positive even number, got {size}")
        self._size = int(size)
        self._rasterizer = ZBufferRasterizer(self._size // 2)
        self._squares = []
        for square in squares or ():
            self.add(square)

    def __repr__(self):
        return f"<Scene {self._size}px with {len(self._squares)} squares at {hex(id(self))}>"

    def __len__(self):
        return len(self._squares)

    def __iter__(self):
        return iter(self._squares)

    @property
    def size(self) -> int:
        """The width (and height) of the target surface in pixels."""
        return self._size

    @property
    def rasterizer(self) -> ZBufferRasterizer:
        return self._rasterizer

    @property
    def squares(self) -> Tuple[Square, ...]:
        """The squares in this scene, in the order they were added."""
        return tuple(self._squares)

    @property
    def positions(self) -> np.ndarray:
        """The visible pixel positions of the last resolve pass (flat x, y pairs)."""
        return self._rasterizer.pixel_positions

    @property
    def colors(self) -> np.ndarray:
        """The visible pixel colors of the last resolve pass (Nx4)."""
        return self._rasterizer.pixel_colors

    def add(self, *squares: Square):
        """Add one or more squares to the scene."""
        for square in squares:
            assert_type("square", square, Square)
            if any(s.name == square.name for s in self._squares):
                raise ValueError(f"Scene already has a square named '{square.name}'")
            self._squares.append(square)
        return self

    def get(self, key) -> Square:
        """Get a square by name or by index."""
        if isinstance(key, str):
            for square in self._squares:
                if square.name == key:
                    return square
            raise ValueError(f"Scene has no square named '{key}'")
        try:
            return self._squares[key]
        except IndexError:
            raise ValueError(f"Scene has no square at index {key}") from None

    def resolve(self) -> int:
        """Run the rasterizer over all squares. Returns the number of visible pixels."""
        return self._rasterizer.resolve(self._squares)

    def move(self, key, dx: float, dy: float, dz: float = 0.0) -> MoveResult:
        """Translate a square (by name or index) and resolve the scene again.

        A rejected depth change is logged as a warning and reflected in the
        returned ``MoveResult``.
        """
        square = self.get(key)
        result = square.translate(dx, dy, dz)
        if not result.accepted:
            logger.warning(result.notice)
        self.resolve()
        return result

    def report(self):
        """Get the depth report lines of all squares."""
        return self._rasterizer.report(self._squares)

    def log_report(self):
        """Write the depth report to the zbuf logger, at info level."""
        for line in self.report():
            logger.info(line)


def default_scene(size: int = 400) -> Scene:
    """Create the demo scene: a red, blue and green square that partially overlap.

    The red square is moved right, down and back, the green square left, up
    and forward, so that green covers blue, which covers red. The scene is
    resolved before it is returned.
    """
    scene = Scene(size)
    scene.add(
        Square("Red Square", Color(1.0, 0.0, 0.0, 1.0)),
        Square("Blue Square", Color(0.0, 0.0, 1.0, 1.0)),
        Square("Green Square", Color(0.0, 1.0, 0.0, 1.0)),
    )
    scene.get(0).translate(0.3, -0.3, 0.5)
    scene.get(2).translate(-0.3, 0.3, -0.5)
    scene.resolve()
    return scene
