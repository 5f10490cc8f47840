import itertools

import numpy as np
from pytest import raises

from zbuf import Square, Color, ZBufferRasterizer, SENTINEL, round_half_up


def box_square(name, color, x1, x2, y1, y2, depth):
    corners = [(x1, y1), (x2, y1), (x2, y2), (x1, y2)]
    return Square(name, color, corners=corners, depth=depth)


def visible_map(rasterizer):
    """Map each pixel (in pixel coords) to the color written to it last."""
    positions = rasterizer.pixel_positions.reshape(-1, 2)
    result = {}
    for (x, y), color in zip(positions, rasterizer.pixel_colors):
        key = rasterizer.to_pixel(float(x)), rasterizer.to_pixel(float(y))
        result[key] = tuple(float(c) for c in color)
    return result


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(-0.5) == 0
    assert round_half_up(3.0) == 3


def test_configure():
    r = ZBufferRasterizer(2)
    assert r.pixel_scale == 2
    assert r.size == 4
    assert r.depth_grid.shape == (4, 4)
    assert np.all(r.depth_grid == SENTINEL)
    assert r.pixel_count == 0

    r.configure(200)
    assert r.depth_grid.shape == (400, 400)

    # Integral floats are fine
    assert ZBufferRasterizer(3.0).pixel_scale == 3


def test_configure_invalid():
    for scale in (0, -1, 1.5):
        with raises(ValueError):
            ZBufferRasterizer(scale)
    for scale in ("2", None, True):
        with raises(TypeError):
            ZBufferRasterizer(scale)


def test_coordinate_round_trip():
    for s in (1, 2, 3, 7, 200):
        r = ZBufferRasterizer(s)
        for p in range(2 * s):
            assert r.to_pixel(r.to_object(p)) == p


def test_single_square():
    r = ZBufferRasterizer(2)
    red = Square("Red Square", Color(1, 0, 0, 1))
    assert r.pixel_box(red) == (1, 3, 1, 3)

    count = r.resolve([red])
    assert count == 9
    assert r.pixel_count == 9
    assert r.pixel_positions.shape == (18,)
    assert r.pixel_positions.dtype == np.float32
    assert r.pixel_colors.shape == (9, 4)
    assert r.pixel_colors.dtype == np.float32

    # Closed range on both ends, rows in the outer loop
    expected = [[x / 2 - 1, y / 2 - 1] for y in (1, 2, 3) for x in (1, 2, 3)]
    assert r.pixel_positions.reshape(-1, 2).tolist() == expected
    assert np.all(r.pixel_colors == (1, 0, 0, 1))

    grid = r.depth_grid
    assert np.all(grid[1:4, 1:4] == 2)
    mask = np.ones((4, 4), bool)
    mask[1:4, 1:4] = False
    assert np.all(grid[mask] == SENTINEL)


def test_half_up_rounding_of_boxes():
    # At scale 1 the default square spans 0.5 .. 1.5 pixels
    r = ZBufferRasterizer(1)
    s = Square("s", "red")
    assert r.pixel_box(s) == (1, 2, 1, 2)
    # Only cell (1, 1) is inside the 2x2 grid
    assert r.resolve([s]) == 1
    assert r.depth_grid[1, 1] == 2
    assert r.pixel_positions.tolist() == [0.0, 0.0]


def test_empty_model():
    r = ZBufferRasterizer(2)
    r.resolve([Square("s", "red")])
    assert r.resolve([]) == 0
    assert r.pixel_positions.shape == (0,)
    assert r.pixel_colors.shape == (0, 4)
    assert np.all(r.depth_grid == SENTINEL)


def test_output_lengths_match():
    r = ZBufferRasterizer(20)
    model = [Square(str(i), "red") for i in range(3)]
    for i, s in enumerate(model):
        s.translate(0.1 * i, -0.1 * i, i)
    r.resolve(model)
    assert len(r.pixel_colors) == len(r.pixel_positions) / 2


def test_overlap_lower_depth_wins():
    a = box_square("A", "red", -0.5, 0.0, -0.5, 0.0, 1)
    b = box_square("B", "blue", 0.0, 0.5, 0.0, 0.5, 3)

    for model in ([a, b], [b, a]):
        r = ZBufferRasterizer(2)
        r.resolve(model)
        grid = r.depth_grid
        assert grid[2, 2] == 1
        assert visible_map(r)[(2, 2)] == (1, 0, 0, 1)
        assert grid[1, 1] == 1
        assert grid[3, 3] == 3
        assert visible_map(r)[(3, 3)] == (0, 0, 1, 1)
        assert grid[0, 0] == SENTINEL

    # The number of writes depends on the order, the result does not
    r = ZBufferRasterizer(2)
    assert r.resolve([a, b]) == 4 + 3
    assert r.resolve([b, a]) == 4 + 4


def test_ties_keep_the_first_square():
    red = Square("red", "red")
    blue = Square("blue", "blue")

    r = ZBufferRasterizer(2)
    assert r.resolve([red, blue]) == 9
    assert np.all(r.pixel_colors == (1, 0, 0, 1))

    assert r.resolve([blue, red]) == 9
    assert np.all(r.pixel_colors == (0, 0, 1, 1))


def test_final_result_is_order_independent():
    model = [
        Square("Red Square", "red"),
        Square("Blue Square", "blue"),
        Square("Green Square", "green"),
        box_square("Gray", "gray", -0.9, 0.1, -0.1, 0.3, 0.2),
    ]
    model[0].translate(0.3, -0.3, 0.5)
    model[2].translate(-0.3, 0.3, -0.5)

    r = ZBufferRasterizer(20)
    r.resolve(model)
    ref_map = visible_map(r)
    ref_grid = r.depth_grid.copy()

    for order in itertools.permutations(model):
        r.resolve(order)
        assert visible_map(r) == ref_map
        assert np.array_equal(r.depth_grid, ref_grid)


def test_unvisited_cells_emit_nothing():
    r = ZBufferRasterizer(10)
    a = box_square("a", "red", -1.0, -0.5, -1.0, -0.5, 1)
    b = box_square("b", "blue", 0.5, 0.9, 0.5, 0.9, 2)
    r.resolve([a, b])
    written = set(visible_map(r))
    assert len(written) == r.pixel_count
    for x in range(r.size):
        for y in range(r.size):
            if (x, y) not in written:
                assert r.depth_grid[x, y] == SENTINEL
            else:
                assert r.depth_grid[x, y] != SENTINEL


def test_resolve_is_idempotent():
    model = [Square("a", "red"), Square("b", "blue", depth=1)]
    model[0].translate(0.2, 0.1)
    r = ZBufferRasterizer(16)
    r.resolve(model)
    positions = r.pixel_positions.copy()
    colors = r.pixel_colors.copy()
    grid = r.depth_grid.copy()
    r.resolve(model)
    assert np.array_equal(positions, r.pixel_positions)
    assert np.array_equal(colors, r.pixel_colors)
    assert np.array_equal(grid, r.depth_grid)


def test_squares_off_the_grid_are_clipped():
    r = ZBufferRasterizer(2)
    s = Square("s", "red")
    s.translate(0.8, 0, 0)
    assert r.pixel_box(s) == (3, 5, 1, 3)
    assert r.resolve([s]) == 3
    assert np.all(r.depth_grid[3, 1:4] == 2)

    s.translate(5, 0, 0)
    assert r.resolve([s]) == 0
    assert np.all(r.depth_grid == SENTINEL)

    s = Square("s", "red")
    s.translate(-1.4, -1.4)
    assert r.resolve([s]) == 1
    assert r.depth_grid[0, 0] == 2


def test_zero_area_square():
    r = ZBufferRasterizer(2)
    s = Square("dot", "red", corners=[(0, 0)] * 4)
    assert s.extents == (0, 0, 0, 0)
    assert r.resolve([s]) == 1
    assert r.depth_grid[2, 2] == 2


def test_outputs_are_read_only():
    r = ZBufferRasterizer(2)
    r.resolve([Square("s", "red")])
    with raises(ValueError):
        r.depth_grid[0, 0] = 3
    with raises(ValueError):
        r.pixel_positions[0] = 3
    with raises(ValueError):
        r.pixel_colors[0] = 3


def test_resolve_checks_types():
    r = ZBufferRasterizer(2)
    with raises(TypeError):
        r.resolve([Square("s", "red"), "not a square"])


def test_report():
    r = ZBufferRasterizer(2)
    model = [Square("Red Square", "red"), Square("Blue Square", "blue", depth=3)]
    assert r.report(model) == [
        " [Red Square]    depth = 2.0",
        " [Blue Square]   depth = 3.0",
    ]
    assert r.report([]) == []
