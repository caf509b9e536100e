"""
Visualization utilities for polygon plotting.

Contains:
- A matplotlib renderer that carries out drawing actions
- Diagnostic plots of a polygon, optional test points and triangulations
"""

from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as MplPolygon

from ..core.actions import Action
from ..polygons.metrics import as_polygon, contains, polystats

_FILLS = (Action.FILL, Action.FILLSTROKE, Action.FILLPRESERVE)
_STROKES = (Action.STROKE, Action.FILLSTROKE, Action.STROKEPRESERVE)
_KEEPS_PATH = (Action.FILLPRESERVE, Action.STROKEPRESERVE, Action.PATH)


class MatplotlibRenderer:
    """
    Draws outlines on a matplotlib Axes.

    ``CLIP`` installs the outline as the clip region for everything drawn
    afterwards. The preserve variants and ``PATH`` keep the outline in
    ``pending`` for the caller; ``NONE`` draws nothing.

    Parameters
    ----------
    ax : plt.Axes, optional
        Matplotlib axes to draw on. Creates new figure if None.
    facecolor, edgecolor : str
        Fill and stroke colours.
    linewidth : float
        Stroke width.
    alpha : float
        Fill opacity.
    """

    def __init__(self, ax: Optional[plt.Axes] = None,
                 facecolor: str = 'steelblue', edgecolor: str = 'black',
                 linewidth: float = 1.5, alpha: float = 0.4):
        if ax is None:
            fig, ax = plt.subplots(1, 1, figsize=(8, 8))
        self.ax = ax
        self.facecolor = facecolor
        self.edgecolor = edgecolor
        self.linewidth = linewidth
        self.alpha = alpha
        self.artists: List = []
        self.pending: Optional[np.ndarray] = None
        self._clip: Optional[MplPolygon] = None

    def _clipped(self, artists):
        for artist in artists:
            if self._clip is not None:
                artist.set_clip_path(self._clip)
            self.artists.append(artist)

    def draw(self, points, action=Action.STROKE, close: bool = True) -> None:
        action = Action.coerce(action)
        pts = as_polygon(points)
        if len(pts) == 0:
            return

        if action in _FILLS:
            self._clipped(self.ax.fill(pts[:, 0], pts[:, 1], color=self.facecolor,
                                       alpha=self.alpha, zorder=1))
        if action in _STROKES:
            line = np.vstack([pts, pts[:1]]) if close else pts
            self._clipped(self.ax.plot(line[:, 0], line[:, 1], '-', color=self.edgecolor,
                                       linewidth=self.linewidth, zorder=3))
        if action is Action.CLIP:
            self._clip = MplPolygon(pts, closed=True, transform=self.ax.transData)

        self.pending = pts if action in _KEEPS_PATH else None

    def resetclip(self) -> None:
        self._clip = None


def plot_polygon(
    poly: np.ndarray,
    points: Optional[np.ndarray] = None,
    ax: Optional[plt.Axes] = None,
    title: str = "Polygon",
    show_vertices: bool = True,
    show_stats: bool = True
) -> plt.Axes:
    """
    Visualize a polygon and, optionally, points classified against it.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).
    points : np.ndarray, optional
        Data points of shape (N, 2), coloured by containment.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    title : str
        Plot title.
    show_vertices : bool
        Whether to mark the vertices.
    show_stats : bool
        Whether to show polygon statistics.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    poly = as_polygon(poly)
    renderer = MatplotlibRenderer(ax, facecolor='green', alpha=0.15)
    renderer.draw(poly, Action.FILLSTROKE)

    if points is not None:
        points = np.atleast_2d(points)
        inside_mask = contains(poly, points)
        ax.scatter(
            points[inside_mask, 0], points[inside_mask, 1],
            c='steelblue', alpha=0.6, s=20, label='Inside', zorder=2
        )
        ax.scatter(
            points[~inside_mask, 0], points[~inside_mask, 1],
            c='coral', alpha=0.6, s=20, label='Outside', zorder=2
        )

    if show_vertices:
        ax.scatter(poly[:, 0], poly[:, 1], c='black', s=30, marker='s', zorder=4)

    if show_stats:
        stats = polystats(poly, points)
        stats_text = (
            f"Vertices: {stats['num_vertices']}\n"
            f"Area: {stats['area']:.2f}\n"
            f"Perimeter: {stats['perimeter']:.2f}\n"
            f"Winding: {stats['orientation']}"
        )
        ax.text(
            0.02, 0.98, stats_text,
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    if points is not None:
        ax.legend(loc='upper right')
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    return ax


def plot_polygons(
    polygons: Sequence[np.ndarray],
    ax: Optional[plt.Axes] = None,
    title: str = "Polygons",
    cmap: str = 'tab20'
) -> plt.Axes:
    """
    Fill and outline several polygons (pieces of a split, an overlap,
    triangles) in distinct colours.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    colours = plt.get_cmap(cmap)
    for i, piece in enumerate(polygons):
        renderer = MatplotlibRenderer(ax, facecolor=colours(i % colours.N),
                                      linewidth=0.8, alpha=0.6)
        renderer.draw(piece, Action.FILLSTROKE)

    ax.set_title(title)
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)
    return ax
