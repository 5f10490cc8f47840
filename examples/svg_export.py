"""
Export to SVG
=============

Resolve a scene with four squares and write the visible pixels to an SVG
file, once for every depth of the blue square.
"""

import zbuf


scene = zbuf.Scene(200)
scene.add(
    zbuf.Square("Red Square", "red"),
    zbuf.Square("Blue Square", "blue", depth=0),
    zbuf.Square("Green Square", "green"),
    zbuf.Square("Orange Square", "orange", depth=3),
)
scene.move("Red Square", 0.3, -0.3, 0.5)
scene.move("Green Square", -0.3, 0.3, -0.5)
scene.move("Orange Square", 0.4, 0.4)


if __name__ == "__main__":
    for i in range(6):
        surface = zbuf.SvgSurface(scene.size, scene.size, f"squares_{i}.svg")
        surface.render(scene.positions, scene.colors)
        print("\n".join(scene.report()))
        print()
        result = scene.move("Blue Square", 0, 0, 1)
        if not result:
            print(result.notice)
