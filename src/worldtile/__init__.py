"""worldtile: geometry kernel for turning map features into tiled geometry."""

__version__ = "0.1.0"
