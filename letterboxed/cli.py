"""
Letter Boxed helper.

Usage:
    letterboxed --letters ABC,DEF,GHI,JKL [--dictionary PATH] [--trie]

Loads the dictionary, prints the number of three-word solutions for the box
and drops into an interactive prompt. Type a single letter to list the words
that start with it, ``trie`` to explore the dictionary, ``help`` for the rest.
"""
import argparse
import logging
import sys

from letterboxed.box import BoxLayoutError, parse_box
from letterboxed.metrics import SearchMetrics
from letterboxed.settings import settings
from letterboxed.shell import Shell
from letterboxed.solver import count_solutions
from letterboxed.trie import DictionaryLoadError, load_trie

logger = logging.getLogger("letterboxed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="letterboxed", description="Letter Boxed puzzle helper")
    parser.add_argument("--letters", default="",
                        help="comma-separated list of letters on each side of the box")
    parser.add_argument("--dictionary", default=str(settings.DICTIONARY_PATH),
                        help="Path to dictionary file with one word per line")
    parser.add_argument("--trie", action="store_true",
                        help="Start the prompt in dictionary exploration mode")
    parser.add_argument("--count-only", action="store_true",
                        help="Print the number of solutions and exit")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every solution found")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.DEBUG else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        box = parse_box(args.letters)
    except BoxLayoutError as e:
        parser.error(str(e))

    metrics = SearchMetrics(str(box))
    try:
        with metrics.stage("load_dictionary"):
            trie = load_trie(args.dictionary)
    except DictionaryLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    with metrics.stage("count_solutions"):
        solutions = metrics.record("solutions", count_solutions(trie, box))

    print(f"Letterboxed helper initiated!\n - Letters: {box}\n - Solutions: {solutions}")
    if args.count_only:
        return 0

    shell = Shell(trie, box, limit=settings.MAX_RESULTS)
    shell.trie_mode = args.trie
    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
