"""Camera, noise, geometry, vertex data and CPU shading maths for small real-time rendering demos."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "geometry",
    "noise",
    "options",
    "scene",
    "shading",
    "vecmath",
]