from __future__ import annotations

import argparse
import json
import random
import sys

from .config import DIGIT_COUNT, TARGET, VERSION
from .corpus import DigitCorpus
from .game import format_prompt, generate_digits, play_round
from .logging_config import get_logger
from .types import RoundResult, ValidationError

logger = get_logger("cli")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running twentyfour health check...")
    print("-" * 50)

    # Check SymPy import
    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    # Check basic evaluation
    try:
        from .api import evaluate

        result = evaluate([8, 8, 7, 4], "(7 - (8 / 8)) * 4")
        if result.ok and result.value == 24.0:
            print("[OK] Expression evaluation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Evaluation check failed: {result!r}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Evaluation check failed: {e}")
        checks_failed += 1

    # Check rule enforcement
    try:
        from .api import evaluate

        result = evaluate([1, 2, 3, 4], "4 * 3 * (1 + 1)")
        if not result.ok:
            print("[OK] Digit reuse is rejected")
            checks_passed += 1
        else:
            print(f"[FAIL] Digit reuse accepted: {result!r}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Rule check failed: {e}")
        checks_failed += 1

    # Check exact arithmetic agrees where floats round
    try:
        from .exact import is_exact_target

        if is_exact_target("8 / (3 - 8 / 3)", 24):
            print("[OK] Exact rational evaluation works")
            checks_passed += 1
        else:
            print("[FAIL] Exact evaluation of 8 / (3 - 8 / 3) is not 24")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Exact evaluation check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: RoundResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Judged round
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    print(res.message)


def _read_expression() -> str | None:
    """Read one line from stdin; None when stdin is exhausted."""
    try:
        return input()
    except EOFError:
        return None


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the twentyfour CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 when the expression equals 24, non-zero otherwise)
    """
    parser = argparse.ArgumentParser(
        prog="twentyfour",
        description=f"Make {TARGET} from {DIGIT_COUNT} digits using + - * / and parentheses.",
    )
    parser.add_argument(
        "-d",
        "--digits",
        type=int,
        nargs=DIGIT_COUNT,
        metavar="D",
        help="Play with these digits instead of random ones",
    )
    parser.add_argument(
        "-s", "--seed", type=int, help="Seed the digit generator for a reproducible round"
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Judge this expression instead of reading one from stdin",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    if args.digits:
        digits = list(args.digits)
        try:
            DigitCorpus(digits)
        except ValidationError as e:
            print(f"Error: {e}")
            return 2
    else:
        rng = random.Random(args.seed) if args.seed is not None else None
        digits = generate_digits(rng=rng)

    # Keep stdout a single JSON document in json mode
    prompt_stream = sys.stderr if args.format == "json" else sys.stdout
    print(format_prompt(digits), file=prompt_stream, flush=True)

    expression = args.eval_expr if args.eval_expr is not None else _read_expression()
    result = play_round(digits, expression)
    logger.debug("Round result: %r", result)

    print_result_pretty(result, output_format=args.format)
    return result.exit_code


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m twentyfour_pkg.cli"""
    sys.exit(main_entry())
