"""A small GUI toolkit: layouts, text, buttons, font atlases, quad draw requests and their shaders."""

__version__ = "1.0.0"