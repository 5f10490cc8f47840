import logging

import numpy as np
from pytest import raises, approx

from zbuf import Scene, Square, default_scene, ZBufferRasterizer


def test_scene_basics():
    scene = Scene(8)
    assert scene.size == 8
    assert len(scene) == 0
    assert isinstance(scene.rasterizer, ZBufferRasterizer)
    assert scene.rasterizer.pixel_scale == 4

    a = Square("a", "red")
    b = Square("b", "blue")
    scene.add(a, b)
    assert scene.squares == (a, b)
    assert list(scene) == [a, b]
    assert scene.get("b") is b
    assert scene.get(0) is a
    assert scene.get(-1) is b


def test_scene_invalid():
    for size in (0, -2, 401):
        with raises(ValueError):
            Scene(size)
    with raises(TypeError):
        Scene("400")
    with raises(TypeError):
        Scene(400.0)

    scene = Scene(8, [Square("a", "red")])
    with raises(ValueError):
        scene.add(Square("a", "blue"))
    with raises(TypeError):
        scene.add("a")
    with raises(ValueError):
        scene.get("nope")
    with raises(ValueError):
        scene.get(5)


def test_empty_scene_resolves_to_nothing():
    scene = Scene(8)
    assert scene.resolve() == 0
    assert scene.positions.shape == (0,)
    assert scene.colors.shape == (0, 4)
    assert scene.report() == []


def test_default_scene():
    scene = default_scene(400)
    names = [s.name for s in scene]
    assert names == ["Red Square", "Blue Square", "Green Square"]
    assert [s.depth for s in scene] == [2.5, 2.0, 1.5]
    assert scene.report() == [
        " [Red Square]    depth = 2.5",
        " [Blue Square]   depth = 2.0",
        " [Green Square]  depth = 1.5",
    ]

    # Already resolved
    assert scene.rasterizer.pixel_count > 0
    assert len(scene.positions) == 2 * len(scene.colors)

    grid = scene.rasterizer.depth_grid
    assert grid[200, 200] == 1.5  # all three overlap, green is closest
    assert grid[340, 60] == 2.5  # only red
    assert grid[280, 280] == 2.0  # only blue
    assert grid[280, 200] == 2.0  # blue over red
    assert grid[5, 5] == -1  # nothing


def test_move_resolves_again():
    scene = default_scene(400)
    before = scene.positions.copy()

    result = scene.move("Blue Square", 0, 0, -1)
    assert result.accepted
    assert scene.get("Blue Square").depth == 1
    assert scene.rasterizer.depth_grid[200, 200] == 1.0
    assert not np.array_equal(before, scene.positions)

    # Moving a square in x, y changes what is drawn as well
    scene.move(2, 0.5, 0)
    assert scene.rasterizer.depth_grid[200, 200] == 1.0
    assert scene.get(2).x_min == approx(-0.3)


def test_rejected_move_is_logged(caplog):
    scene = default_scene(40)
    scene.move("Blue Square", 0, 0, -2)
    assert scene.get("Blue Square").depth == 0

    with caplog.at_level(logging.WARNING, logger="zbuf"):
        result = scene.move("Blue Square", 0, 0, -1)
    assert not result
    assert scene.get("Blue Square").depth == 0
    assert "Blue Square cannot move there" in caplog.text


def test_log_report(caplog):
    scene = default_scene(40)
    with caplog.at_level(logging.INFO, logger="zbuf"):
        scene.log_report()
    assert " [Green Square]  depth = 1.5" in caplog.text
    assert caplog.text.index("Red Square") < caplog.text.index("Green Square")
