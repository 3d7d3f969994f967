"""Canvas and sizing parameters shared by layout, scene and renderers."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Tuple


@dataclass
class RenderConfig:
    canvas_width: float = 500.0
    canvas_height: float = 500.0
    center: Tuple[float, float] = (250.0, 250.0)
    layout_radius: float = 200.0
    node_radius: float = 10.0
    # gap between a node circle and the start of the arrowhead marker
    arrow_clearance: float = 15.0

    def __post_init__(self) -> None:
        self.center = (float(self.center[0]), float(self.center[1]))
        for name in ("canvas_width", "canvas_height", "layout_radius", "node_radius"):
            value = float(getattr(self, name))
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive number, got {value!r}")
            setattr(self, name, value)
        clearance = float(self.arrow_clearance)
        if not math.isfinite(clearance) or clearance < 0:
            raise ValueError(f"arrow_clearance must be non-negative, got {clearance!r}")
        self.arrow_clearance = clearance

    @property
    def trim(self) -> float:
        return self.node_radius + self.arrow_clearance


_RENDER_CONFIG = RenderConfig()


def get_render_config() -> RenderConfig:
    return copy.deepcopy(_RENDER_CONFIG)


def set_render_config(config: RenderConfig) -> None:
    global _RENDER_CONFIG
    _RENDER_CONFIG = copy.deepcopy(config)


__all__ = ["RenderConfig", "get_render_config", "set_render_config"]
