"""Resolve the visibility of overlapping colored squares with a z-buffer."""

# ruff: noqa: F401, F403

from ._version import __version__, version_info
from . import utils

from .objects import *
from .renderers import *

from .utils import Color, Point, logger
