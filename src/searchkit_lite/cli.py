"""searchkit-lite CLI entry point.

Usage: uv run searchkit-lite [command]
"""
import argparse
import logging
import sys

from searchkit_lite.codec.hex import HexDecodeError, hexlify, unhexlify
from searchkit_lite.profiling.load_generator import KINDS
from searchkit_lite.strings.search import ALGORITHMS, make_matcher


def _add_search_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "search",
        help="Find a pattern in a file (or stdin) and print its offset.",
    )
    p.add_argument("pattern", help="Pattern to search for.")
    p.add_argument(
        "file", nargs="?", default=None,
        help="File to search (default: read stdin).",
    )
    p.add_argument(
        "--algorithm", "-a", choices=sorted(ALGORITHMS), default="bm",
        help="Matcher to use (default: bm)",
    )
    p.add_argument(
        "--all", action="store_true",
        help="Print every match offset, overlapping matches included.",
    )
    p.add_argument(
        "--bytes", action="store_true",
        help="Search raw bytes instead of decoded text (offsets are byte offsets).",
    )


def _add_hex_parsers(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("hex", help="Hex-encode text (UTF-8).")
    p.add_argument("text", nargs="?", default=None, help="Text (default: stdin).")
    p = subparsers.add_parser("unhex", help="Decode hex digits back to text.")
    p.add_argument("text", nargs="?", default=None, help="Hex digits (default: stdin).")


def _add_profile_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "profile",
        help="Benchmark every matcher on a generated workload.",
    )
    p.add_argument(
        "--corpus-size", type=int, default=100_000,
        help="Corpus length in symbols (default: 100000)",
    )
    p.add_argument(
        "--pattern-size", type=int, default=16,
        help="Pattern length in symbols (default: 16)",
    )
    p.add_argument(
        "--kind", choices=KINDS, default="random",
        help="Corpus kind (default: random)",
    )
    p.add_argument(
        "--searches", type=int, default=100,
        help="Number of patterns to search for (default: 100)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )


def _read_input(path: str | None, binary: bool) -> str | bytes:
    if path is None:
        return sys.stdin.buffer.read() if binary else sys.stdin.read()
    if binary:
        with open(path, "rb") as f:
            return f.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _run_search(args: argparse.Namespace) -> int:
    try:
        corpus = _read_input(args.file, args.bytes)
    except UnicodeDecodeError as exc:
        print(
            f"searchkit-lite: input is not valid UTF-8 ({exc.reason} at byte "
            f"{exc.start}); use --bytes to search raw bytes",
            file=sys.stderr,
        )
        return 2
    except OSError as exc:
        print(f"searchkit-lite: {exc}", file=sys.stderr)
        return 2
    pattern = args.pattern.encode("utf-8") if args.bytes else args.pattern
    matcher = make_matcher(args.algorithm, pattern)

    if args.all:
        found = False
        for pos in matcher.find_all(corpus):
            print(pos)
            found = True
        return 0 if found else 1

    pos = matcher.search(corpus)
    if pos < 0:
        return 1
    print(pos)
    return 0


def _run_hex(args: argparse.Namespace) -> int:
    if args.text is not None:
        text = args.text
    else:
        text = sys.stdin.read()
        if text.endswith("\n"):
            text = text[:-1]
    print(hexlify(text))
    return 0


def _run_unhex(args: argparse.Namespace) -> int:
    text = args.text if args.text is not None else sys.stdin.read()
    try:
        data = unhexlify(text.strip())
    except HexDecodeError as exc:
        print(f"searchkit-lite: {exc}", file=sys.stderr)
        return 2
    print(data.decode("utf-8", errors="backslashreplace"))
    return 0


def _run_profile(args: argparse.Namespace) -> int:
    from searchkit_lite.profiling.harness import run_benchmark
    from searchkit_lite.profiling.report import format_comparison, format_report

    try:
        results = run_benchmark(
            corpus_size=args.corpus_size,
            pattern_size=args.pattern_size,
            kind=args.kind,
            searches=args.searches,
            seed=args.seed,
            profile=args.cprofile,
        )
    except ValueError as exc:
        print(f"searchkit-lite: {exc}", file=sys.stderr)
        return 2
    for result in results:
        print(format_report(result))
        print()
        if result.cprofile_stats:
            print("--- cProfile top functions ---")
            print(result.cprofile_stats)
    print(format_comparison(results))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="searchkit-lite",
        description="Boyer-Moore, Horspool and KMP substring search -- pure Python.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log table construction and benchmark progress at DEBUG level.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_search_parser(subparsers)
    _add_hex_parsers(subparsers)
    _add_profile_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    handlers = {
        "search": _run_search,
        "hex": _run_hex,
        "unhex": _run_unhex,
        "profile": _run_profile,
    }
    code = handlers[args.command](args)
    if code:
        sys.exit(code)
