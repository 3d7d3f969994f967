import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence, Tuple

from relgraph_ir import (
    Graph,
    GraphError,
    LayoutValidationError,
    assemble,
    circular_layout,
    create_demo_graph,
    format_graph,
    generate_svg_document,
    get_render_config,
    print_scene,
    validate_positions,
)
from relgraph_ir.preview import plot_scene

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_center(value: str) -> Tuple[float, float]:
    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"center must be X,Y (got {value!r})")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"center must be numeric X,Y (got {value!r})") from exc


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out and render a value/relationship graph")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--empty",
        action="store_true",
        help="Render an empty graph instead of the demo graph",
    )
    parser.add_argument("--radius", type=float, help="Layout circle radius")
    parser.add_argument("--center", type=_parse_center, help="Layout circle center, e.g. 250,250")
    parser.add_argument("--node-radius", type=float, help="Node circle radius")
    parser.add_argument(
        "--clearance",
        type=float,
        help="Gap between node circle and arrowhead",
    )
    parser.add_argument(
        "--svg-output-path",
        help="Write a standalone HTML page with the SVG diagram to the given path",
    )
    parser.add_argument(
        "--png-output-path",
        help="Write a matplotlib PNG preview to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    overrides = {}
    if args.radius is not None:
        overrides["layout_radius"] = args.radius
    if args.center is not None:
        overrides["center"] = args.center
    if args.node_radius is not None:
        overrides["node_radius"] = args.node_radius
    if args.clearance is not None:
        overrides["arrow_clearance"] = args.clearance
    try:
        config = replace(get_render_config(), **overrides)
    except ValueError as exc:
        logger.error("Invalid render settings: %s", exc)
        raise SystemExit(1)

    graph = Graph() if args.empty else create_demo_graph()
    logger.info("Graph: %d node(s), %d edge(s)", graph.node_count(), graph.edge_count())

    try:
        positions = circular_layout(graph, config.center, config.layout_radius)
        validate_positions(graph, positions)
    except (GraphError, LayoutValidationError) as exc:
        logger.error("Layout failed: %s", exc)
        raise SystemExit(1)

    primitives = assemble(graph, positions, config=config)
    logger.info("Assembled %d primitive(s)", len(primitives))

    print(f"Graph:\n{format_graph(graph)}")
    print("Positions:")
    for node_id, (x, y) in positions.items():
        print(f"  {node_id}: ({x:.6f}, {y:.6f})")
    print(f"Scene:\n{print_scene(primitives)}")

    if args.svg_output_path:
        output_path = Path(args.svg_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG document to %s", output_path)
        document = generate_svg_document(primitives, config)
        output_path.write_text(document, encoding="utf-8")
        print(f"SVG document written to {output_path}")

    if args.png_output_path:
        logger.info("Writing preview to %s", args.png_output_path)
        written = plot_scene(primitives, args.png_output_path, config)
        print(f"Preview written to {written}")


if __name__ == "__main__":
    main(sys.argv[1:])
