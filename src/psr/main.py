from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .config import Config, load_config
from .errors import ConfigError, PsrError
from .generator import Generator
from .rules import RuleStore

LOG = logging.getLogger(__name__)

STDIN_NAME = "-"


def _read_source(name: str, stdin: Optional[TextIO]) -> str:
    if name == STDIN_NAME:
        return (stdin if stdin is not None else sys.stdin).read()
    return Path(name).read_text(encoding="utf-8")


def read_sources(names: Sequence[str], store: RuleStore, stdin: Optional[TextIO] = None) -> int:
    """Parse each named file (or stdin for ``-``) into the store.

    Returns the number of sources that could not be read; every source is
    attempted even after a failure.
    """
    errors_found = 0
    for name in names:
        try:
            text = _read_source(name, stdin)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error reading {name}:  {exc}", file=sys.stderr)
            errors_found += 1
            continue
        LOG.debug("parsing %s", "stdin" if name == STDIN_NAME else name)
        store.parse(text)
    return errors_found


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="psr",
        description="Process PSR files or read from stdin, then print a generated phrase.",
    )
    parser.add_argument("files", nargs="*", help="PSR files to load, '-' for stdin.")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="Dump the parsed rules instead of generating.")
    parser.add_argument("-r", "--rule", default=None,
                        help="Rule to generate from (defaults to the first rule defined).")
    parser.add_argument("-n", "--count", type=int, default=None,
                        help="Number of phrases to generate.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random generator.")
    parser.add_argument("--recursion-limit", type=int, default=None,
                        help="Fail when rule expansion nests deeper than this.")
    parser.add_argument("--config", type=Path, default=None, help="Path to a TOML config file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config is not None else Config()
    except (ConfigError, OSError) as exc:
        print(f"Error loading config: {exc}", file=sys.stderr)
        return 1
    settings = config.psr

    names = list(args.files) or [str(path) for path in settings.files] or [STDIN_NAME]
    store = RuleStore()
    if read_sources(names, store):
        return 1

    if args.debug:
        print(store.dump())
        return 0

    count = args.count if args.count is not None else settings.count
    if count < 1:
        parser.error("--count must be at least 1")
    seed = args.seed if args.seed is not None else settings.seed
    limit = args.recursion_limit if args.recursion_limit is not None else settings.recursion_limit
    rule = args.rule if args.rule is not None else settings.rule

    try:
        generator = Generator(store, rng=random.Random(seed), recursion_limit=limit)
        for _ in range(count):
            print(generator.generate(rule))
    except (PsrError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except RecursionError:
        print("Error: rule expansion recursed too deeply; set --recursion-limit to bound it.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
