"""
Show the Squares
================

Show the demo scene in a window. The depth test runs on the host, and
pygfx draws the visible pixels as points.

Use the up and down arrow keys to move the blue square in depth.
"""

import logging

import zbuf
from zbuf.utils.show import Viewer


zbuf.logger.setLevel(logging.INFO)
zbuf.logger.addHandler(logging.StreamHandler())

scene = zbuf.default_scene(400)
viewer = Viewer(scene, target="Blue Square")


if __name__ == "__main__":
    viewer.show()
