"""CLI entry point for argtok."""

import sys
import json
import argparse
from pathlib import Path
from typing import List, Optional

from .config import FuzzConfig, OutputFormat
from .errors import MalformedArguments
from .fuzzer import FuzzGenerator
from .scanner import Scanner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='argtok',
        description='Tokenize POSIX/GNU style argument vectors',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show how an argument vector is classified
  python -m argtok tokenize -r o -a e -- -vo out.txt -eAES --level=3 input -

  # Generate 500 command lines, 20% of them malformed, and check them
  python -m argtok fuzz -n 500 --malformed-ratio 0.2 --check -o corpus.txt

  # Tokenize every line of a corpus as JSON lines
  python -m argtok scan corpus.txt -f json
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    tokenize = subparsers.add_parser(
        'tokenize', help='Tokenize the arguments given after "--"')
    _add_key_options(tokenize)

    fuzz = subparsers.add_parser('fuzz', help='Generate a corpus of argument vectors')
    fuzz.add_argument('-p', '--profile', type=Path, default=None,
                      help='Path to fuzzing profile JSON file (default: built-in profile)')
    fuzz.add_argument('-n', '--num-generations', type=int, default=100,
                      help='Number of test cases to generate (default: 100)')
    fuzz.add_argument('--malformed-ratio', type=float, default=0.0,
                      help='Ratio of malformed test cases (0.0-1.0, default: 0.0)')
    fuzz.add_argument('-f', '--format', choices=['file', 'directory'],
                      default='file', help='Output format (default: file)')
    fuzz.add_argument('-o', '--output', type=Path, default=Path('corpus.txt'),
                      help='Output path (file or directory, default: corpus.txt)')
    fuzz.add_argument('--seed', type=int, default=None,
                      help='Random seed for reproducibility')
    fuzz.add_argument('--check', action='store_true',
                      help='Run each case through the tokenizer and report mismatches')
    fuzz.add_argument('-q', '--quiet', action='store_true',
                      help='Suppress progress output')

    scan = subparsers.add_parser('scan', help='Tokenize every line of a corpus file')
    scan.add_argument('corpus', type=Path, help='Corpus file, one command line per line')
    _add_key_options(scan)
    scan.add_argument('-q', '--quiet', action='store_true',
                      help='Suppress progress output')

    return parser


def _add_key_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('-r', '--requires-value', action='append', default=[],
                        metavar='KEY', help='Key that takes a value (repeatable)')
    parser.add_argument('-a', '--accepts-value', action='append', default=[],
                        metavar='KEY', help='Key that takes an attached value only (repeatable)')
    parser.add_argument('-f', '--format', choices=['text', 'json'], default='text',
                        help='Output format (default: text)')


def split_raw(argv: List[str]) -> tuple:
    """Split off the raw arguments following the first "--" of a tokenize call.

    Other subcommands leave "--" to argparse.
    """
    if argv and argv[0] == 'tokenize' and '--' in argv:
        idx = argv.index('--')
        return argv[:idx], argv[idx + 1:]
    return argv, []


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    argv, raw = split_raw(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(argv)

    if args.command == 'tokenize':
        sys.exit(run_tokenize(args, raw))
    if args.command == 'fuzz':
        sys.exit(run_fuzz(args))
    sys.exit(run_scan(args))


def run_tokenize(args, raw: List[str]) -> int:
    scanner = Scanner(args.requires_value, args.accepts_value)
    try:
        events = scanner.scan(raw)
    except MalformedArguments as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for event in events:
        if args.format == 'json':
            print(json.dumps(event.to_dict()))
        else:
            print(event)
    return 0


def run_fuzz(args) -> int:
    if args.profile is not None and not args.profile.exists():
        print(f"ERROR: Profile file not found: {args.profile}", file=sys.stderr)
        return 1

    if not 0.0 <= args.malformed_ratio <= 1.0:
        print("ERROR: Malformed ratio must be between 0.0 and 1.0", file=sys.stderr)
        return 1

    fuzz_config = FuzzConfig(
        num_generations=args.num_generations,
        malformed_ratio=args.malformed_ratio,
        output_format=OutputFormat(args.format),
        output_path=args.output,
        seed=args.seed,
        check=args.check,
        verbose=not args.quiet and sys.stdout.isatty(),
    )

    try:
        stats = FuzzGenerator(args.profile, fuzz_config).run()
    except (ValueError, IOError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if stats.mismatches:
        print(f"ERROR: {stats.mismatches} case(s) disagreed with the tokenizer",
              file=sys.stderr)
        return 1
    return 0 if stats.total > 0 else 1


def run_scan(args) -> int:
    if not args.corpus.exists():
        print(f"ERROR: Corpus file not found: {args.corpus}", file=sys.stderr)
        return 1

    scanner = Scanner(args.requires_value, args.accepts_value,
                      verbose=not args.quiet and sys.stdout.isatty() and args.format == 'text')
    try:
        with open(args.corpus, 'r', encoding='utf-8') as f:
            report = scanner.scan_corpus(f)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for result in report.results:
        if args.format == 'json':
            record = {
                'line': result.line,
                'events': [event.to_dict() for event in result.events],
                'error': result.error,
            }
            print(json.dumps(record))
        elif not scanner.verbose:
            status = 'ok' if result.ok else f"ERROR: {result.error}"
            print(f"{result.line}\t{status}")

    print(f"Scanned {len(report.results)} line(s): {report.ok_count} ok, "
          f"{report.malformed_count} malformed", file=sys.stderr)
    return 0


if __name__ == '__main__':
    main()
