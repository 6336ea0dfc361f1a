"""Build 2D vertex and index buffers for rectangles, quads and lines."""

__version__ = "0.1.0"