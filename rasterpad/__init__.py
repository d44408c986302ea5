"""Raster drawing pad: line and circle rasterisers, polygon transforms, an editor and a Tk front end."""

__version__ = "0.1.0"
__all__ = ["canvas", "editor", "app"]