"""
Visualization utilities.
"""

from .plotting import MatplotlibRenderer, plot_polygon, plot_polygons

__all__ = ['MatplotlibRenderer', 'plot_polygon', 'plot_polygons']
