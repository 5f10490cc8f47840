import io
import os

from .._base import Surface, check_pixel_arrays
from .._zbuffer import round_half_up


def _fill_style(rgba):
    r, g, b, a = (max(0.0, min(1.0, float(v))) for v in rgba)
    fill = f"rgb({int(255 * r + 0.5)},{int(255 * g + 0.5)},{int(255 * b + 0.5)})"
    if a < 1:
        return f"fill='{fill}' fill-opacity='{a:0.3f}'"
    return f"fill='{fill}'"


class SvgSurface(Surface):
    """Writes the visible pixels to an SVG image.

    Each pixel becomes a 1x1 rect, in the order in which the rasterizer
    emitted them. Normalized positions in -1..1 are mapped onto the image,
    with y pointing up as it does in object space.

    Parameters
    ----------
    width : int
        The width of the resulting image.
    height : int
        The height of the resulting image.
    filename : str
        The name of the location to which to write the image.
    background : str
        The fill of the background. Default white.

    """

    def __init__(self, width, height, filename, background="white"):
        self._width = int(width)
        self._height = int(height)
        self._background = background

        if filename.startswith("~"):
            filename = os.path.expanduser(filename)
        self._filename = filename

    @property
    def filename(self):
        return self._filename

    def to_svg(self, positions, colors):
        """Get the SVG document for the given pixels, as a string."""
        positions, colors = check_pixel_arrays(positions, colors)
        half_w = self._width / 2
        half_h = self._height / 2

        f = io.StringIO()
        f.write(
            f"<svg width='{self._width}' height='{self._height}' xmlns='http://www.w3.org/2000/svg'>\n"
        )
        f.write(
            f"<rect x='0' y='0' width='{self._width}' height='{self._height}' fill='{self._background}' />\n"
        )
        for (x, y), rgba in zip(positions, colors):
            col = round_half_up((1 + float(x)) * half_w)
            row = self._height - 1 - round_half_up((1 + float(y)) * half_h)
            f.write(
                f"<rect x='{col}' y='{row}' width='1' height='1' {_fill_style(rgba)} />\n"
            )
        f.write("</svg>\n")
        return f.getvalue()

    def render(self, positions, colors):
        """Render the pixels to the file."""
        text = self.to_svg(positions, colors)
        with open(self._filename, "wb") as f:
            f.write(text.encode())
