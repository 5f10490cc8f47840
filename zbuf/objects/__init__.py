"""Squares and the scene that holds them.

.. currentmodule:: zbuf.objects

.. autosummary::
    :toctree: objects/

    Square
    MoveResult
    Scene
    default_scene

"""

# ruff: noqa: F401

from ._square import Square, MoveResult, MIN_DEPTH, MAX_DEPTH, DEFAULT_DEPTH
from ._scene import Scene, default_scene
