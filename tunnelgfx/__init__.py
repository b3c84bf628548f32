"""Scene math, cameras, input state, prefab meshes, assets and a scrolling tunnel for a 3D scene."""

__version__ = "0.1.0"
__all__ = ["mathlib", "util", "inputs", "clock", "camera", "mesh", "assets", "tube"]