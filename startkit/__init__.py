"""A small toolkit for 2D games on pygame: windows, textures, text, clocks,
cameras, animations, states, input, a resource table and a widget base class."""

__version__ = "0.1.0"