"""
Visualisation of a triangulation: polygon boundary plus clipped triangles.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.collections import PatchCollection  # noqa: E402
from matplotlib.patches import Polygon as MplPolygon  # noqa: E402

from .earclipper import EarClipper  # noqa: E402
from .validate import as_arrays  # noqa: E402

COLOR = '#377eb8'


def plot_triangulation(clipper: EarClipper, ax, title: Optional[str] = None,
                       color: str = COLOR):
    """Plot a single triangulation on ``ax``."""
    vertices, tris = as_arrays(clipper)

    patches = [MplPolygon(tri, closed=True) for tri in tris]
    p = PatchCollection(patches, alpha=0.4, facecolor=color,
                        edgecolor='#333333', linewidth=0.5)
    ax.add_collection(p)

    poly_closed = np.vstack([vertices, vertices[0]])
    ax.plot(poly_closed[:, 0], poly_closed[:, 1], 'k-', linewidth=1.5)
    ax.scatter(vertices[:, 0], vertices[:, 1], c='black', s=20, zorder=5)

    ax.set_aspect('equal')
    if title is None:
        title = f'{len(tris)} triangles ({clipper.arithmetic.name} point)'
    ax.set_title(title)
    return p


def save_triangulation(clipper: EarClipper, output: Union[str, Path],
                       title: Optional[str] = None, dpi: int = 150) -> Path:
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        plot_triangulation(clipper, ax, title)
        fig.tight_layout()
        fig.savefig(output, dpi=dpi, bbox_inches='tight')
    finally:
        plt.close(fig)
    return output
