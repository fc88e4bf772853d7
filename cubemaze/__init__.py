"""Building blocks for a raycasting maze: colours, images, XPM reading, map checks, player movement and ray casting."""

__version__ = "0.1.0"