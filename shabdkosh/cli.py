import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

if __package__ in {None, ""}:
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
    __package__ = "shabdkosh"

from . import dictionary
from .expander import expand_search_query
from .matcher import matches_product
from .suggester import MAX_SUGGESTIONS, get_suggested_aliases


def _emit(data: object) -> None:
    print(json.dumps(data, ensure_ascii=False))


def related(args: argparse.Namespace) -> None:
    """Print the terms related to a single word."""

    if args.term not in dictionary.default_dictionary():
        logging.info("%s is not a dictionary term", args.term)
    _emit(dictionary.related_terms(args.term))


def expand(args: argparse.Namespace) -> None:
    """Print the expanded form of a search query."""

    print(expand_search_query(args.query))


def suggest(args: argparse.Namespace) -> None:
    """Print alias suggestions for a product name."""

    suggestions = get_suggested_aliases(args.name, limit=args.limit)
    logging.info("%s -> %s", args.name, ", ".join(suggestions))
    _emit(suggestions)


def match(args: argparse.Namespace) -> None:
    """Check a query against one product; exit status 1 on no match."""

    product = {"name": args.name, "aliases": args.alias or []}
    result = matches_product(args.query, product)
    print("match" if result else "no match")
    if not result:
        raise SystemExit(1)


def stats(args: argparse.Namespace) -> None:
    """Show statistics about the dictionary."""

    counts = dictionary.dictionary_stats()
    print(f"Canonical terms: {counts['canonical_terms']}")
    print(f"Equivalents: {counts['equivalents']}")
    print(f"Reverse keys: {counts['reverse_keys']}")
    print(f"All terms: {counts['all_terms']}")


def export(args: argparse.Namespace) -> None:
    """Export the forward table as JSON."""

    if args.output is None or args.output == Path("-"):
        print(dictionary.export_dictionary())
    else:
        dictionary.export_dictionary(args.output)
        logging.info("Dictionary written to %s", args.output)


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Hindi/English kirana term dictionary")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("related", help="show related terms for a word")
    p.add_argument("term")
    p.set_defaults(func=related)

    p = sub.add_parser("expand", help="expand a search query")
    p.add_argument("query")
    p.set_defaults(func=expand)

    p = sub.add_parser("suggest", help="suggest aliases for a product name")
    p.add_argument("name")
    p.add_argument(
        "--limit",
        type=int,
        default=MAX_SUGGESTIONS,
        help="maximum number of suggestions",
    )
    p.set_defaults(func=suggest)

    p = sub.add_parser("match", help="check whether a query matches a product")
    p.add_argument("query")
    p.add_argument("name")
    p.add_argument("--alias", action="append", help="product alias (repeatable)")
    p.set_defaults(func=match)

    p = sub.add_parser("stats", help="show statistics")
    p.set_defaults(func=stats)

    p = sub.add_parser("export", help="export the dictionary as JSON")
    p.add_argument(
        "--output",
        type=Path,
        default=None,
        help="output file (defaults to stdout)",
    )
    p.set_defaults(func=export)

    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase verbosity")
    parser.add_argument("--log-file", type=Path, default=None, help="write logs to this file")

    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", handlers=handlers)

    args.func(args)


if __name__ == "__main__":
    main()
