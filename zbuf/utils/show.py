"""
Show a resolved scene in a window, using pygfx to draw the visible pixels
as points. The depth test has already happened on the host; pygfx only
draws what the rasterizer emitted.
"""

import numpy as np
import pygfx as gfx

from . import logger


# Key -> depth offset. Lower depth is closer to the viewer.
DEPTH_KEYS = {
    "ArrowUp": -1,
    "ArrowDown": 1,
}


def points_from_arrays(positions, colors, size=1.0):
    """Create a ``gfx.Points`` object from the output arrays of a resolve pass."""
    points = gfx.Points(
        geometry_from_arrays(positions, colors),
        gfx.PointsMaterial(size=size, color_mode="vertex"),
    )
    return points


def geometry_from_arrays(positions, colors):
    """Create a ``gfx.Geometry`` with 3D positions (z=0) and RGBA colors."""
    positions = np.asarray(positions, np.float32).reshape(-1, 2)
    colors = np.asarray(colors, np.float32).reshape(-1, 4)
    if not len(positions):
        # Buffers cannot be empty, use a single invisible point
        positions = np.zeros((1, 2), np.float32)
        colors = np.zeros((1, 4), np.float32)
    positions3d = np.zeros((len(positions), 3), np.float32)
    positions3d[:, :2] = positions
    return gfx.Geometry(positions=positions3d, colors=np.ascontiguousarray(colors))


class Viewer:
    """Display a zbuf scene in a window.

    The up and down arrow keys change the depth of the ``target`` square,
    after which the scene is resolved and drawn again, and the depth
    report is logged.

    Parameters
    ----------
    scene : zbuf.Scene
        The scene to display. Its size determines the window size.
    target : str | int
        The square that the arrow keys move. Default the second square.
    canvas : RenderCanvas | None
        The canvas to draw to. If not given, one is created when ``show()``
        is called.

    """

    def __init__(self, scene, target=1, canvas=None):
        self.scene = scene
        self.target = target
        self.canvas = canvas
        self.renderer = None
        self.camera = gfx.NDCCamera()
        self.gfx_scene = gfx.Scene()
        self.gfx_scene.add(gfx.Background.from_color((1, 1, 1, 1)))
        self.points = points_from_arrays(scene.positions, scene.colors)
        self.gfx_scene.add(self.points)

    def update(self):
        """Replace the points geometry with the current output of the scene."""
        self.points.geometry = geometry_from_arrays(
            self.scene.positions, self.scene.colors
        )

    def move_target(self, dz):
        """Move the target square in depth, and refresh the points."""
        result = self.scene.move(self.target, 0, 0, dz)
        self.update()
        self.scene.log_report()
        return result

    def handle_event(self, event):
        dz = DEPTH_KEYS.get(getattr(event, "key", None))
        if dz is None:
            return
        self.move_target(dz)
        if self.canvas is not None:
            self.canvas.request_draw()

    def draw(self):
        self.renderer.render(self.gfx_scene, self.camera)

    def show(self):
        """Open a window and run the event loop until it is closed."""
        from rendercanvas.auto import RenderCanvas, loop

        if self.canvas is None:
            size = self.scene.size
            self.canvas = RenderCanvas(size=(size, size), title="zbuf")
        self.renderer = gfx.WgpuRenderer(self.canvas)
        self.renderer.add_event_handler(self.handle_event, "key_down")

        self.scene.log_report()
        logger.info("Use the up and down arrow keys to change the depth.")

        self.canvas.request_draw(self.draw)
        loop.run()
