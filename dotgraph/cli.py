import argparse
import logging
import os
import sys

from . import config as cfg
from .errors import RenderFailure
from .renderer import Renderer


def run() -> int:
    """
    Render DOT source files with GraphViz.
    Args:
        paths: A list of paths to DOT files.

    Returns:
        The exit code.
    """
    parser = argparse.ArgumentParser(
        description="Render DOT source files with GraphViz.",
    )
    parser.add_argument(
        "paths",
        metavar="path",
        type=str,
        nargs="+",
        help="a DOT source file",
    )
    parser.add_argument(
        "-T",
        "--format",
        default=cfg.DEFAULT_FORMAT,
        help=f"output format (default: {cfg.DEFAULT_FORMAT})",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="output file; defaults to the source path with the format as suffix",
    )
    parser.add_argument(
        "--path",
        default="",
        help="directory containing the dot executable, if it is not on the PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log every dot invocation",
    )
    args = parser.parse_args()

    if args.output and len(args.paths) > 1:
        parser.error("--output can only be used with a single path")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    renderer = Renderer(args.path)
    for path in args.paths:
        with open(path, encoding="utf-8") as f:
            source = f.read()
        output = args.output or f"{os.path.splitext(path)[0]}.{args.format}"
        try:
            renderer.export(source, args.format, output)
        except RenderFailure as e:
            print(f"{path}: {e}", file=sys.stderr)
            return 1

    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
