#!/usr/bin/env python3
"""
godepgraph - Go package dependency diagrams

Clones a Go repository over ssh, reads its imports and draws the package
dependency graph with Graphviz.

Usage:
    godepgraph https://github.com/owner/repo
    godepgraph https://github.com/owner/repo --branch develop --format svg
"""

import argparse
import sys

from .config import settings
from .errors import GoDepGraphError
from .pipeline import DependencyGraphPipeline
from .utils.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="godepgraph",
        description="Draw the package dependency graph of a Go repository",
    )
    parser.add_argument("repository", help="https:// link to the repository")
    parser.add_argument("--branch", action="append", dest="branches",
                        help="Branch to clone; repeat to set the fallback order")
    parser.add_argument("--format", dest="output_format", default=settings.output_format,
                        help="Diagram format passed to Graphviz")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level, settings.log_file).bind(component="cli")

    try:
        pipeline = DependencyGraphPipeline(
            branches=args.branches,
            output_format=args.output_format,
        )
        result = pipeline.run(args.repository)
    except GoDepGraphError as e:
        logger.error(str(e))
        return e.exit_code

    logger.info(
        f"Wrote {result.diagram_file} ({result.node_count} packages, {result.edge_count} imports)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
