"""Project CLI entrypoint.

Provides CLI commands for ordstat:
- ordstat select: k-th smallest of the given values
- ordstat find: index of the first value equal to a target
- ordstat bench: compare pivot strategies (development checkout only)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

_VALUE_TYPES: dict[str, Any] = {"int": int, "float": float, "str": str}


def _pkg_version() -> str:
    try:
        return version("ordstat")
    except PackageNotFoundError:
        return "0.0.0"


def _run_script(module: str, argv: list[str]) -> int:
    """Import a script module and call its main() with argv."""
    mod = __import__(module, fromlist=["main"])
    main = getattr(mod, "main", None)
    if main is None:
        print(f"ERROR: {module} has no main()", file=sys.stderr)
        return 2

    old_argv = sys.argv
    try:
        sys.argv = [module, *argv]
        main()
    finally:
        sys.argv = old_argv
    return 0


def _parse_values(raw: list[str], type_name: str) -> list[Any]:
    conv = _VALUE_TYPES[type_name]
    try:
        return [conv(v) for v in raw]
    except ValueError as e:
        print(f"Invalid {type_name} value: {e}", file=sys.stderr)
        raise SystemExit(2) from None


def _cmd_select(args: argparse.Namespace) -> None:
    """Run select command."""
    from ordstat.config import SelectorConfig  # noqa: PLC0415 - lazy import for fast CLI startup
    from ordstat.core import PivotStrategy  # noqa: PLC0415
    from ordstat.env_parse import ConfigError  # noqa: PLC0415
    from ordstat.selection import select_with_stats  # noqa: PLC0415

    values = _parse_values(args.values, args.type)
    try:
        config = SelectorConfig(
            pivot=PivotStrategy(args.pivot),
            seed=args.seed,
            check_invariants=args.check_invariants,
        )
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        raise SystemExit(2) from None
    result = select_with_stats(args.k, values, config=config)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w") as f:
            json.dump(result.to_dict(), f, indent=2)

    if not result.found:
        print(f"No result: k={args.k} with {result.size} values", file=sys.stderr)
        raise SystemExit(1)

    if args.stats:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(f"k={args.k} value={result.value}")


def _cmd_find(args: argparse.Namespace) -> None:
    """Run find command."""
    from ordstat.search import find_first_equal  # noqa: PLC0415 - lazy import for fast CLI startup

    values = _parse_values(args.values, args.type)
    target = _parse_values([args.target], args.type)[0]
    index = find_first_equal(target, values)
    if index is None:
        print(f"Not found: {args.target}", file=sys.stderr)
        raise SystemExit(1)
    print(f"index={index}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ordstat", description="ordstat CLI")
    parser.add_argument("--version", action="version", version=f"ordstat {_pkg_version()}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_select = sub.add_parser("select", help="Print the k-th smallest of the given values")
    p_select.add_argument("-k", type=int, required=True, help="1-based rank (1 = minimum)")
    p_select.add_argument("values", nargs="*", help="Values to select from")
    p_select.add_argument("--type", choices=sorted(_VALUE_TYPES), default="int")
    p_select.add_argument(
        "--pivot",
        choices=["LEFTMOST", "RANDOM", "MEDIAN_OF_THREE"],
        default="LEFTMOST",
        help="Pivot strategy",
    )
    p_select.add_argument("--seed", type=int, help="Seed for the RANDOM pivot strategy")
    p_select.add_argument(
        "--check-invariants", action="store_true", help="Verify every partition pass"
    )
    p_select.add_argument("--stats", action="store_true", help="Print result and work as JSON")
    p_select.add_argument("--out", help="Output path for result JSON (optional)")

    p_find = sub.add_parser("find", help="Print the index of the first value equal to a target")
    p_find.add_argument("--target", required=True, help="Value to look for")
    p_find.add_argument("values", nargs="*", help="Values to search")
    p_find.add_argument("--type", choices=sorted(_VALUE_TYPES), default="int")

    p_bench = sub.add_parser("bench", help="Compare pivot strategies on generated inputs")
    p_bench.add_argument("--size", type=int, default=2000, help="Input length")
    p_bench.add_argument("--seed", type=int, default=42, help="Random seed")
    p_bench.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "select":
        _cmd_select(args)
        return

    if args.cmd == "find":
        _cmd_find(args)
        return

    if args.cmd == "bench":
        argv = ["--size", str(args.size), "--seed", str(args.seed)]
        if args.json:
            argv.append("--json")
        raise SystemExit(_run_script("scripts.bench_select", argv))

    raise SystemExit(2)
