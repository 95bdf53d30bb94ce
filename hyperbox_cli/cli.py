"""
hyperbox CLI - Main entry point.

Measure, combine and compare shapes from the command line.
"""

import argparse
import sys
from typing import List, Optional

from hyperbox_geometry import (
    DimensionMismatchError,
    HyperboxConfig,
    Point,
    Point2D,
    Rectangle,
    RenderConfig,
    TextRenderer,
    Volume,
    encapsulate_all,
)
from hyperbox_geometry.logging import LogEvent, configure_logging, create_logger

from .parsing import parse_shape

logger = create_logger("cli")

EXIT_ERROR = 1
EXIT_DIMENSION_MISMATCH = 2


def run_demo(renderer: TextRenderer) -> None:
    """
    Print the reference scenarios.

    Args:
        renderer: Renderer fixing output precision
    """
    pairs = [
        ("Point2D + Point2D", Point2D(0, 0), Point2D(4, 3)),
        ("Rectangle + Point2D", Rectangle(Point2D(0, 0), Point2D(2, 2)), Point2D(5, 5)),
        ("Point + Point", Point.of(0, 0, 0), Point.of(2, 3, 4)),
        ("Volume + Point", Volume(Point.of(0, 0, 0), Point.of(2, 2, 2)), Point.of(3, 3, 3)),
        ("Point2D + Point (3D)", Point2D(1, 1), Point.of(0, 0, 0)),
    ]

    print("=== hyperbox encapsulation demo ===")
    for label, left, right in pairs:
        print(f"\n{label}")
        try:
            result = left.encapsulate(right)
        except DimensionMismatchError as e:
            print(f"  rejected: {e}")
            continue
        print(f"  {renderer.render_encapsulation(left, right, result)}")

    small = Rectangle(Point2D(0, 0), Point2D(2, 2))
    large = Rectangle(Point2D(0, 0), Point2D(3, 3))
    print("\nOrdering by hypervolume")
    for left, right in ((small, large), (large, small), (small, small)):
        print(f"  {renderer.render_comparison(left, right, left.compare_to(right))}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="hyperbox CLI - Axis-aligned shape algebra",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Shapes:
  point2d:X,Y                 2D point
  point:C0,C1,...             n-dimensional point (>= 2 coordinates)
  rect:X1,Y1:X2,Y2            rectangle from two corners (any order)
  volume:A0,A1,...:B0,B1,...  n-dimensional box from two corners

Examples:
  hyperbox volume rect:0,0:4,3
  hyperbox encapsulate point2d:0,0 point2d:4,3
  hyperbox encapsulate volume:0,0,0:2,2,2 point:3,3,3
  hyperbox compare rect:0,0:2,2 rect:0,0:3,3
  hyperbox --decimals 3 demo
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        help="Path to YAML configuration (render precision, logging level)"
    )
    parser.add_argument(
        "--decimals",
        type=int,
        help="Digits after the decimal point (overrides config)"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    volume = subparsers.add_parser('volume', help='Print a shape and its hypervolume')
    volume.add_argument('shape', help='Shape to measure')

    encapsulate = subparsers.add_parser('encapsulate', help='Bounding box of two or more shapes')
    encapsulate.add_argument('shapes', nargs='+', help='Shapes to combine (at least 2)')

    compare = subparsers.add_parser('compare', help='Compare two shapes by hypervolume')
    compare.add_argument('left', help='First shape')
    compare.add_argument('right', help='Second shape')

    subparsers.add_parser('demo', help='Run the reference scenarios')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(EXIT_ERROR)

    try:
        config = HyperboxConfig.from_yaml(args.config) if args.config else HyperboxConfig()
        configure_logging(config.logging)
        render = RenderConfig(decimals=args.decimals) if args.decimals is not None else config.render
        decimals = render.decimals
        renderer = TextRenderer(decimals=decimals)

        logger.info(
            event=LogEvent.CLI_COMMAND,
            message=f"Running {args.command}",
            metadata={'command': args.command, 'decimals': decimals}
        )

        if args.command == 'volume':
            shape = parse_shape(args.shape)
            print(renderer.render_measure(shape))

        elif args.command == 'encapsulate':
            if len(args.shapes) < 2:
                raise ValueError("encapsulate needs at least 2 shapes")
            shapes = [parse_shape(text) for text in args.shapes]
            try:
                result = encapsulate_all(*shapes)
            except DimensionMismatchError as e:
                logger.error(
                    event=LogEvent.CLI_ERROR,
                    message="Encapsulation rejected",
                    metadata={'expected': e.expected, 'actual': e.actual},
                    exc_info=e
                )
                print(f"Error: {e}", file=sys.stderr)
                sys.exit(EXIT_DIMENSION_MISMATCH)
            print(renderer.render(result))

        elif args.command == 'compare':
            left = parse_shape(args.left)
            right = parse_shape(args.right)
            print(renderer.render_comparison(left, right, left.compare_to(right)))

        elif args.command == 'demo':
            run_demo(renderer)

    except (ValueError, FileNotFoundError) as e:
        logger.error(
            event=LogEvent.CLI_ERROR,
            message=f"{args.command} failed",
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == '__main__':
    main()
