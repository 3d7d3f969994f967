from .graph import (
    Graph,
    Node,
    Edge,
    NodeKind,
    EdgeDirection,
    GraphError,
    NotFoundError,
    InvalidEndpointError,
)
from .config import RenderConfig, get_render_config, set_render_config
from .layout import circular_layout
from .geometry import EdgeSegment, arrow_flags, resolve_edge
from .scene import Circle, Label, FillKind, DrawPrimitive, assemble, render_scene
from .validate import validate_positions, LayoutValidationError
from .printer import print_scene, format_primitive, format_graph
from .svg_codegen import generate_svg, generate_svg_document
from .demo import create_demo_graph

__all__ = [
    'Graph',
    'Node',
    'Edge',
    'NodeKind',
    'EdgeDirection',
    'GraphError',
    'NotFoundError',
    'InvalidEndpointError',
    'RenderConfig',
    'get_render_config',
    'set_render_config',
    'circular_layout',
    'EdgeSegment',
    'arrow_flags',
    'resolve_edge',
    'Circle',
    'Label',
    'FillKind',
    'DrawPrimitive',
    'assemble',
    'render_scene',
    'validate_positions',
    'LayoutValidationError',
    'print_scene',
    'format_primitive',
    'format_graph',
    'generate_svg',
    'generate_svg_document',
    'create_demo_graph',
]
