from __future__ import annotations

import argparse
import logging
import sys

from wordcount.config import settings
from wordcount.counting.word_counter import WordCounter
from wordcount.execution.executors import build_executor
from wordcount.models.storage import CountStore
from wordcount.ranking.top_words import by_count


def parse_book(value: str) -> tuple[str, str]:
    title, sep, path = value.partition("=")
    if not sep or not title.strip() or not path.strip():
        raise argparse.ArgumentTypeError(f"expected TITLE=PATH, got '{value}'")
    return title, path


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordcount", description="Count the most frequent words in plain-text books")
    parser.add_argument("--book", action="append", type=parse_book, default=[], metavar="TITLE=PATH", help="Book to count")
    parser.add_argument("--top", type=int, default=settings.default_top_n, help="Number of words to report")
    parser.add_argument("--query-book", action="append", default=[], metavar="TITLE", help="Also report top words for this book")
    parser.add_argument("--load", metavar="PATH", help="Load saved counts before counting")
    parser.add_argument("--save", metavar="PATH", help="Save counts after counting")
    parser.add_argument("--executor", default=settings.executor, choices=["sequential", "threaded"])
    parser.add_argument("--workers", type=positive_int, default=settings.max_workers, help="Thread pool size for --executor threaded")
    return parser


def print_words(heading: str, words: dict[str, int]) -> None:
    print(heading)
    for word, count in sorted(words.items(), key=by_count, reverse=True):
        print(f"{word} : {count}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if any(not title.strip() for title in args.query_book):
        parser.error("--query-book needs a non-empty title")
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))

    try:
        executor = build_executor(args.executor, args.workers)
    except ValueError as exc:
        parser.error(str(exc))
    counter = WordCounter(CountStore(), executor=executor)

    if args.load and not counter.load_counts(args.load):
        print(f"Could not load counts from {args.load}", file=sys.stderr)
        return 1

    for title, path in args.book:
        try:
            counter.count_book_file(title, path)
        except OSError as exc:
            print(f"Could not read {path}: {exc}", file=sys.stderr)
            return 1

    print_words("Top Words - All Books:", counter.top_words(args.top))
    for title in args.query_book:
        print_words(f"Top Words for {title}:", counter.top_words(args.top, book_title=title))

    if args.save and not counter.save_counts(args.save):
        print(f"Could not save counts to {args.save}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
