"""Raster surface, shape fills and snapshot export."""
