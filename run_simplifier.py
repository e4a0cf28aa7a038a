#!/usr/bin/env python3
# run_simplifier.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Command-line interface for expression simplification with configurable logging levels

import sys
import argparse
from pathlib import Path

from core.engine import RewriteEngine, Strategy, DEFAULT_MAX_REWRITES, DEFAULT_MAX_NODES
from core.exceptions import RewriteLimitExceeded
from core.handle import (
    StepHandle,
    evaluate_expression,
    evaluate_multiple_expressions,
    step_count,
    step_at,
    free_steps,
)
from parser.exceptions import ParseError
from utils.lec_reader import read_lec_file, write_steps, LecFormatError
from utils.logger import configure_logging, get_logger


def build_engine(args: argparse.Namespace) -> RewriteEngine:
    """Create the rewrite engine selected by the command line.

    Args:
        args: Parsed command line arguments

    Returns:
        Configured RewriteEngine instance
    """
    return RewriteEngine(
        strategy=Strategy(args.strategy),
        max_rewrites=args.max_rewrites,
        max_nodes=args.max_nodes,
    )


def run_session(args: argparse.Namespace) -> StepHandle:
    """Evaluate the input file and return the handle holding the output lines.

    Args:
        args: Parsed command line arguments

    Returns:
        Step handle with one output line per entry
    """
    logger = get_logger()
    content = read_lec_file(args.input)
    engine = build_engine(args)

    if args.single:
        logger.info(f"📋 Expression loaded: {content.strip()}")
        return evaluate_expression(content, engine)

    return evaluate_multiple_expressions(content, engine, max_workers=args.workers)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="LEC logical expression simplifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_simplifier.py input.lec
  python run_simplifier.py input.lec -o steps.txt -v
  python run_simplifier.py input.lec --single --debug
  python run_simplifier.py input.lec --workers 4

Input file format:
  One expression per line (or separated by ';'), '#' starts a comment line,
  NAME = TRUE / NAME = FALSE assigns a value used to compute results.

  input.lec:
    A = TRUE
    !(A & B)
    A & true
        """,
    )

    parser.add_argument("input", type=Path, help="Path to .lec input file")

    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("output.txt"),
        help="Path of the step output file (default: output.txt)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--single",
        action="store_true",
        help="Treat the whole file as one expression",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used to evaluate a batch (default: 1)",
    )

    parser.add_argument(
        "--max-rewrites",
        type=int,
        default=DEFAULT_MAX_REWRITES,
        help=f"Rewrite budget per expression (default: {DEFAULT_MAX_REWRITES})",
    )

    parser.add_argument(
        "--max-nodes",
        type=int,
        default=DEFAULT_MAX_NODES,
        help=f"Largest tree size, in nodes, before giving up (default: {DEFAULT_MAX_NODES})",
    )

    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in Strategy],
        default=Strategy.LAW_FIRST.value,
        help="Tie-break policy between laws and positions",
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the simplifier.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        handle = run_session(args)
        try:
            lines = [step_at(handle, i) for i in range(step_count(handle))]
        finally:
            free_steps(handle)

        written = write_steps(args.output, lines)
        logger.info(f"✅ {written} line(s) written to {args.output}")
        return 0

    except LecFormatError as e:
        logger.error(f"Input file error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Expression parsing error: {e}")
        return 2

    except RewriteLimitExceeded as e:
        logger.error(f"Rewrite error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Simplification interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
