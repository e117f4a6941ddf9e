"""A grid-based Snake arcade game: game rules, a pygame renderer and a playable window."""

__version__ = "0.1.0"