"""Raster preview of a scene via matplotlib (Agg canvas, no GUI backend)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import Circle as CirclePatch
from matplotlib.patches import FancyArrowPatch

from .config import RenderConfig, get_render_config
from .geometry import EdgeSegment
from .scene import Circle, DrawPrimitive, Label
from .svg_codegen import FILL_COLORS
from .svg_codegen.generator import EDGE_COLOR, NODE_STROKE, NODE_STROKE_WIDTH

logger = logging.getLogger(__name__)

_ARROW_STYLES = {
    (False, False): "-",
    (False, True): "-|>",
    (True, False): "<|-",
    (True, True): "<|-|>",
}


def plot_scene(
    primitives: Iterable[DrawPrimitive],
    path: Union[str, Path],
    config: Optional[RenderConfig] = None,
    title: Optional[str] = None,
    dpi: int = 100,
) -> Path:
    cfg = config or get_render_config()
    path = Path(path)

    fig = Figure(figsize=(cfg.canvas_width / dpi, cfg.canvas_height / dpi), dpi=dpi)
    FigureCanvasAgg(fig)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_xlim(0.0, cfg.canvas_width)
    # screen coordinates: y grows downwards
    ax.set_ylim(cfg.canvas_height, 0.0)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")

    for z, primitive in enumerate(primitives):
        if isinstance(primitive, EdgeSegment):
            style = _ARROW_STYLES[(primitive.start_arrow, primitive.end_arrow)]
            ax.add_patch(
                FancyArrowPatch(
                    primitive.anchor,
                    primitive.end_point,
                    arrowstyle=style,
                    mutation_scale=12,
                    color=EDGE_COLOR,
                    linewidth=2,
                    shrinkA=0,
                    shrinkB=0,
                    zorder=z,
                )
            )
        elif isinstance(primitive, Circle):
            ax.add_patch(
                CirclePatch(
                    (primitive.cx, primitive.cy),
                    primitive.r,
                    facecolor=FILL_COLORS[primitive.fill_kind],
                    edgecolor=NODE_STROKE,
                    linewidth=NODE_STROKE_WIDTH,
                    zorder=z,
                )
            )
        elif isinstance(primitive, Label):
            ax.text(
                primitive.x,
                primitive.y,
                primitive.text,
                ha="center",
                va="center",
                fontsize=7,
                color="black",
                zorder=z,
            )
        else:
            raise TypeError(f"unsupported draw primitive {primitive!r}")

    if title:
        ax.set_title(title)

    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path)
    logger.debug("Scene preview written to %s", path)
    return path


__all__ = ["plot_scene"]
