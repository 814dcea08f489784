"""Grid ray-casting renderer with a minimap, map file readers and a flood-fill explorer."""

__version__ = "0.1.0"