"""
The rasterizer resolves a model of squares into visible pixels, and surfaces
draw those pixels.

Classes
-------

.. autoclass:: zbuf.renderers.ZBufferRasterizer
    :members:

.. autoclass:: zbuf.renderers.Surface
    :members:

Details
-------

The depth test happens entirely in host memory. The rasterizer produces two
arrays, and any surface consumes them::

               ______________
              |  depth grid  |
    [model] --|  resolve()   |-- positions, colors --> [surface]
              |______________|

The ``SvgSurface`` writes the pixels to an SVG file. The pygfx based viewer
in ``zbuf.utils.show`` draws them as points in a window.

"""

# flake8: noqa

from ._base import Surface, check_pixel_arrays
from ._zbuffer import ZBufferRasterizer, SENTINEL, round_half_up
from .svg import SvgSurface
