"""Spatial grid inventory: item manifests, fragments, stacking, grids and their widget state."""

__version__ = "0.1.0"