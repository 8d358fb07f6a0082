#!/usr/bin/env python3
# run_engine.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Command-line interface for formula evaluation, normalization and search

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from rpn import parse, parse_and_cnf, parse_and_nnf, to_rpn
from rpn.exceptions import ParseError
from logic import eval_formula, find_satisfying_assignment, truth_table
from utils.limits import DEFAULT_LIMITS, EngineLimits, LimitExceededError
from utils.logger import get_logger, configure_logging


def read_formula(args: argparse.Namespace) -> str:
    """Return the formula given on the command line or in a file.

    Args:
        args: Parsed arguments with either `formula` or `file` set

    Returns:
        Formula text as given; a formula file loses only its trailing line breaks

    Raises:
        OSError: If the formula file cannot be read
        ValueError: If the formula file is empty
    """
    if args.file is None:
        return args.formula

    with open(args.file, "r", encoding="utf-8") as f:
        content = f.read().rstrip("\r\n")

    if not content:
        raise ValueError(f"Formula file is empty: {args.file}")

    return content


def build_limits(args: argparse.Namespace) -> EngineLimits:
    """Apply the --max-* flags on top of the default limits."""
    return DEFAULT_LIMITS.with_overrides(
        max_depth=args.max_depth,
        max_variables=args.max_variables,
        max_clauses=args.max_clauses,
    )


def run_command(args: argparse.Namespace, formula: str, limits: EngineLimits) -> str:
    """Execute the selected subcommand and return its printable result.

    Args:
        args: Parsed arguments
        formula: RPN formula to process
        limits: Resource bounds for this run

    Returns:
        Text to print on standard output
    """
    style = "unicode" if getattr(args, "unicode", False) else "ascii"

    if args.command == "eval":
        return str(eval_formula(formula, limits)).lower()

    if args.command == "nnf":
        return to_rpn(parse_and_nnf(formula, limits), style)

    if args.command == "cnf":
        return to_rpn(parse_and_cnf(formula, limits), style)

    if args.command == "sat":
        model = find_satisfying_assignment(parse(formula, limits), limits)
        answer = str(model is not None).lower()
        if args.model and model is not None:
            answer += "\n" + ("".join(sorted(model)) or "(all variables false)")
        return answer

    if args.command == "table":
        return truth_table(parse(formula, limits), limits).to_markdown()

    raise ValueError(f"Unknown command: {args.command}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Veritas propositional logic engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_engine.py eval "10&"
  python run_engine.py nnf "AB&!"
  python run_engine.py cnf "ABC&|" --unicode
  python run_engine.py sat "AB&C|" --model
  python run_engine.py table "AB>" -v
  python run_engine.py sat -f formula.rpn --max-variables 24

Formula syntax (reverse-Polish, one character per token):
  0 1         false, true
  A..Z a..z   variables
  !           not
  & | ^ > =   and, or, xor, implies, iff
        """,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )
    parser.add_argument(
        "--max-depth", type=int, default=None, help="Maximum formula nesting depth"
    )
    parser.add_argument(
        "--max-variables",
        type=int,
        default=None,
        help="Maximum distinct variables for sat and table",
    )
    parser.add_argument(
        "--max-clauses", type=int, default=None, help="Maximum clauses produced by cnf"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    commands = {
        "eval": "Evaluate a formula made of constants only",
        "nnf": "Print the negation normal form",
        "cnf": "Print the conjunctive normal form",
        "sat": "Decide satisfiability by exhaustive search",
        "table": "Print the truth table",
    }
    for name, help_text in commands.items():
        sub = subparsers.add_parser(name, help=help_text)
        source = sub.add_mutually_exclusive_group(required=True)
        source.add_argument("formula", nargs="?", help="RPN formula")
        source.add_argument("-f", "--file", type=Path, help="Read the formula from a file")

        if name in ("nnf", "cnf"):
            sub.add_argument(
                "--unicode", action="store_true", help="Print logic symbols instead of ASCII"
            )
        if name == "sat":
            sub.add_argument(
                "--model",
                action="store_true",
                help="Also print the true variables of the first satisfying assignment",
            )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the formula engine.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        formula = read_formula(args)
        logger.info(f"Formula loaded: {formula}")

        limits = build_limits(args)
        print(run_command(args, formula, limits))
        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except LimitExceededError as e:
        logger.limit_hit(e.limit, e.value, e.bound)
        return 3

    except (OSError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 4

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
