"""
The z-buffer rasterizer resolves the visibility of overlapping squares in
host memory. It turns a model (a sequence of squares) into two flat arrays,
the positions and colors of the visible pixels, that any point-drawing
surface can display as-is.

The depth grid is indexed ``[x, y]`` and has ``2 * pixel_scale`` cells in
each direction. A cell holding ``SENTINEL`` has not been written yet. A
square wins a cell when the cell is empty, or when its depth is strictly
less than the stored depth. Ties keep the square that came first.

"""

import math

import numpy as np

from ..objects._square import Square
from ..utils import assert_type, logger


SENTINEL = -1.0


def round_half_up(value):
    """Round to the nearest integer, with halves rounding up (towards +inf)."""
    return int(math.floor(value + 0.5))


class ZBufferRasterizer:
    """Resolve which square is visible at each pixel, using a depth grid.

    Parameters
    ----------
    pixel_scale : int
        The number of pixels per unit of normalized object space, i.e.
        half the width of the target surface in pixels.

    """

    def __init__(self, pixel_scale):
        self._scale = 1
        self._grid = None
        self.configure(pixel_scale)

    def __repr__(self):
        return f"<ZBufferRasterizer {self.size}x{self.size} with {self.pixel_count} pixels at {hex(id(self))}>"

    def configure(self, pixel_scale):
        """Set the pixel scale and (re)allocate the depth grid.

        This also clears the output arrays.
        """
        if isinstance(pixel_scale, bool) or not isinstance(
            pixel_scale, (int, float, np.integer, np.floating)
        ):
            raise TypeError(
                f"pixel_scale must be a number, not {pixel_scale.__class__.__name__}"
            )
        if not (pixel_scale > 0 and int(pixel_scale) == pixel_scale):
            raise ValueError(f"pixel_scale must be a positive integer, got {pixel_scale}")
        self._scale = int(pixel_scale)
        size = 2 * self._scale
        self._grid = np.full((size, size), SENTINEL, np.float64)
        self._clear()

    @property
    def pixel_scale(self) -> int:
        """The number of pixels per unit of normalized object space."""
        return self._scale

    @property
    def size(self) -> int:
        """The number of cells of the depth grid, in each dimension."""
        return 2 * self._scale

    @property
    def depth_grid(self) -> np.ndarray:
        """A read-only view of the depth grid, indexed ``[x, y]``."""
        grid = self._grid.view()
        grid.flags.writeable = False
        return grid

    @property
    def pixel_positions(self) -> np.ndarray:
        """The flat float32 array of x, y pairs of the visible pixels,
        in normalized object space.
        """
        positions = self._positions.view()
        positions.flags.writeable = False
        return positions

    @property
    def pixel_colors(self) -> np.ndarray:
        """The Nx4 float32 array of RGBA colors, one per visible pixel."""
        colors = self._colors.view()
        colors.flags.writeable = False
        return colors

    @property
    def pixel_count(self) -> int:
        """The number of pixels emitted by the last resolve pass."""
        return len(self._colors)

    def to_pixel(self, coord):
        """Convert a normalized object-space coordinate to a pixel coordinate."""
        return round_half_up((1 + coord) * self._scale)

    def to_object(self, pixel):
        """Convert a pixel coordinate to a normalized object-space coordinate."""
        return (pixel / self._scale) - 1

    def pixel_box(self, square):
        """Get the inclusive pixel box (x1, x2, y1, y2) of the given square.

        The box is not clipped to the grid.
        """
        return (
            self.to_pixel(square.x_min),
            self.to_pixel(square.x_max),
            self.to_pixel(square.y_min),
            self.to_pixel(square.y_max),
        )

    def _clear(self):
        self._grid.fill(SENTINEL)
        self._positions = np.zeros((0,), np.float32)
        self._colors = np.zeros((0, 4), np.float32)

    def resolve(self, model):
        """Run a full resolve pass over the given squares.

        The depth grid and the output arrays are reset first, so the result
        only depends on the current state of the model. Returns the number
        of emitted pixels.

        Cells are visited per square, rows (y) in the outer loop and columns
        (x) in the inner loop, over the closed box of the square. Parts of a
        box that fall outside the grid are skipped.
        """
        model = list(model)
        for square in model:
            assert_type("square", square, Square)

        self._clear()

        grid = self._grid
        size = self.size
        position_chunks = []
        color_chunks = []

        for square in model:
            x1, x2, y1, y2 = self.pixel_box(square)
            x1, y1 = max(x1, 0), max(y1, 0)
            x2, y2 = min(x2, size - 1), min(y2, size - 1)
            if x1 > x2 or y1 > y2:
                logger.debug(f"{square.name} is outside the depth grid")
                continue

            # Transposed, so that nonzero() yields the cells row by row
            stored = grid[x1 : x2 + 1, y1 : y2 + 1].T
            visible = (stored == SENTINEL) | (square.depth < stored)
            ys, xs = np.nonzero(visible)
            if not len(xs):
                continue
            xs += x1
            ys += y1

            grid[xs, ys] = square.depth

            positions = np.empty((len(xs), 2), np.float32)
            positions[:, 0] = self.to_object(xs)
            positions[:, 1] = self.to_object(ys)
            position_chunks.append(positions.reshape(-1))
            color = np.asarray(square.color, np.float32)
            color_chunks.append(np.tile(color, (len(xs), 1)))

        if position_chunks:
            self._positions = np.concatenate(position_chunks)
            self._colors = np.concatenate(color_chunks)

        logger.debug(
            f"Resolved {len(model)} squares into {self.pixel_count} pixels"
        )
        return self.pixel_count

    def report(self, model):
        """Get the report lines of the given squares, in model order."""
        return [square.report() for square in model]
