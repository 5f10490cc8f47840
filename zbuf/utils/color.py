"""Provides an immutable RGBA color value."""

import ctypes

F4 = ctypes.c_float * 4


class Color:
    """An immutable RGBA color, with four channels between 0 and 1.

    Internally the color is stored using 4 32-bit floats (rgba). It can be
    instantiated by providing the color components as values between 0 and 1:

        * `Color(r, g, b, a)` providing rgba values.
        * `Color(r, g, b)` providing rgb, alpha is 1.
        * `Color(gray, a)` grayscale intensity and alpha.
        * `Color(gray)` grayscale intensity.

    The above variations can also be supplied as a single tuple/list, or
    anything that is iterable, e.g. `Color((r, g, b))`. A color name from
    ``NAMED_COLORS`` works too, e.g. `Color("red")`.

    Channel values are clipped to the range 0..1. A color cannot be modified
    after it is created, so it can be shared between squares and used as a
    dict key.

    Parameters
    ----------
    args : tuple, int, str
        The color specification, see above.

    """

    # Internally, the color is a ctypes float array
    __slots__ = ["_val"]

    def __init__(self, *args):
        if len(args) == 1:
            color = args[0]
            if isinstance(color, (int, float)):
                self._set_from_tuple(args)
            elif isinstance(color, str):
                self._set_from_str(color)
            else:
                # Assume it's an iterable,
                # may raise TypeError 'object is not iterable'
                self._set_from_tuple(color)
        else:
            self._set_from_tuple(args)

    def __repr__(self):
        # A precision of 4 decimals, i.e. 10001 possible values for each color.
        # We truncate zeros, but make sure the value does not end with a dot.
        f = lambda v: f"{v:0.4f}".rstrip("0").ljust(3, "0")  # noqa: E731
        return f"Color({f(self.r)}, {f(self.g)}, {f(self.b)}, {f(self.a)})"

    @property
    def __array_interface__(self):
        # Numpy can wrap our memory in an array without copying
        readonly = True
        ptr = ctypes.addressof(self._val)
        x = dict(version=3, shape=(4,), typestr="<f4", data=(ptr, readonly))
        return x

    def __len__(self):
        return 4

    def __getitem__(self, index):
        return self._val[index]

    def __iter__(self):
        return self.rgba.__iter__()

    def __eq__(self, other):
        if not isinstance(other, Color):
            try:
                other = Color(other)
            except (TypeError, ValueError):
                return NotImplemented
        return all(self._val[i] == other._val[i] for i in range(4))

    def __hash__(self):
        return hash(self.rgba)

    def __setattr__(self, name, value):
        if name == "_val" and not hasattr(self, "_val"):
            object.__setattr__(self, name, value)
        else:
            raise AttributeError("Color objects are immutable.")

    def _set_from_rgba(self, r, g, b, a):
        r, g, b, a = (max(0.0, min(1.0, float(v))) for v in (r, g, b, a))
        self._val = F4(r, g, b, a)

    def _set_from_tuple(self, color):
        color = tuple(float(c) for c in color)
        if len(color) == 4:
            self._set_from_rgba(*color)
        elif len(color) == 3:
            self._set_from_rgba(*color, 1)
        elif len(color) == 2:
            self._set_from_rgba(color[0], color[0], color[0], color[1])
        elif len(color) == 1:
            self._set_from_rgba(color[0], color[0], color[0], 1)
        else:
            raise ValueError(f"Cannot parse color tuple with {len(color)} values")

    def _set_from_str(self, color):
        try:
            rgba = NAMED_COLORS[color.lower().strip()]
        except KeyError:
            raise ValueError(f"Unknown color: '{color}'") from None
        self._set_from_rgba(*rgba)

    @property
    def rgba(self):
        """The RGBA tuple (values between 0 and 1)."""
        return self._val[0], self._val[1], self._val[2], self._val[3]

    @property
    def rgb(self):
        """The RGB tuple (values between 0 and 1)."""
        return self._val[0], self._val[1], self._val[2]

    @property
    def r(self):
        """The red value."""
        return self._val[0]

    @property
    def g(self):
        """The green value."""
        return self._val[1]

    @property
    def b(self):
        """The blue value."""
        return self._val[2]

    @property
    def a(self):
        """The alpha (transparency) value, between 0 and 1."""
        return self._val[3]


# The pure primaries used for the squares, plus a few mixes.
NAMED_COLORS = {
    "red": (1.0, 0.0, 0.0, 1.0),
    "green": (0.0, 1.0, 0.0, 1.0),
    "blue": (0.0, 0.0, 1.0, 1.0),
    "black": (0.0, 0.0, 0.0, 1.0),
    "white": (1.0, 1.0, 1.0, 1.0),
    "gray": (0.5, 0.5, 0.5, 1.0),
    "yellow": (1.0, 1.0, 0.0, 1.0),
    "cyan": (0.0, 1.0, 1.0, 1.0),
    "magenta": (1.0, 0.0, 1.0, 1.0),
    "orange": (1.0, 0.65, 0.0, 1.0),
    "transparent": (0.0, 0.0, 0.0, 0.0),
}
