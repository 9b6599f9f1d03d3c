"""Scene, physics, gameplay, mesh and input building blocks for small 3D games."""

__version__ = "0.1.0"