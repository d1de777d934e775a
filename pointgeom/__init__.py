"""Geometry routines for spatial point patterns, segments, polygons, rasters and graphs."""

__version__ = "0.1.0"