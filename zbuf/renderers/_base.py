import numpy as np


class Surface:
    """Base (abstract) surface class that all surfaces inherit from.

    A surface draws the output of a resolve pass. It receives the flat array
    of x, y positions and the Nx4 array of colors, and never feeds anything
    back into the rasterizer.
    """

    def render(self, positions, colors):
        """The method to call to draw the visible pixels."""
        raise NotImplementedError()


def check_pixel_arrays(positions, colors):
    """Validate the arrays of a resolve pass and return them as (N, 2) and (N, 4)."""
    positions = np.asarray(positions, np.float32).reshape(-1)
    colors = np.asarray(colors, np.float32).reshape(-1, 4)
    if len(positions) % 2:
        raise ValueError("Expected an even number of position values (x, y pairs).")
    positions = positions.reshape(-1, 2)
    if len(positions) != len(colors):
        raise ValueError(
            f"Got {len(positions)} positions but {len(colors)} colors; these must match."
        )
    return positions, colors
