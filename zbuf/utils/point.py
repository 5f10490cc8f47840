class Point:
    """An immutable 2D point in normalized object space."""

    __slots__ = ["_x", "_y"]

    def __init__(self, x, y):
        object.__setattr__(self, "_x", float(x))
        object.__setattr__(self, "_y", float(y))

    def __repr__(self):
        return f"Point({self._x:0.5g}, {self._y:0.5g})"

    def __setattr__(self, name, value):
        raise AttributeError("Point objects are immutable.")

    def __len__(self):
        return 2

    def __getitem__(self, index):
        return (self._x, self._y)[index]

    def __iter__(self):
        return iter((self._x, self._y))

    def __eq__(self, other):
        if not isinstance(other, Point):
            try:
                other = Point(*other)
            except (TypeError, ValueError):
                return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x, self._y))

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def shift(self, dx, dy):
        """Get a new point, moved by dx and dy."""
        return Point(self._x + dx, self._y + dy)
