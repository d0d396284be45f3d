"""Small exercises on sequences and lookups, with a command-line front end."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Sequence

NOT_FOUND = "Not found"
SAMPLE = (1, 2, 3, 4, 5)


def sums_before_after(values: Iterable[int], shared: bool) -> tuple[int, int]:
    """Sum the values, zero the last one in a callee, and sum again.

    With ``shared`` the callee works on the caller's data, so the change is
    seen by the second sum; otherwise it works on a copy.
    """
    data = list(values)
    if not data:
        raise ValueError("at least one value is required")
    before = sum(data)
    target = data if shared else list(data)
    target[-1] = 0
    return before, sum(data)


def reverse_sequence(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order of arrival."""
    result: list[int] = []
    for value in values:
        result.insert(0, value)
    return result


def lookup_all(pairs: Iterable[tuple[str, str]], queries: Iterable[str]) -> list[str]:
    """Answer each query with the first matching definition, or ``Not found``."""
    definitions: dict[str, str] = {}
    for word, definition in pairs:
        definitions.setdefault(word, definition)
    return [definitions.get(query, NOT_FOUND) for query in queries]


def filter_below(values: Iterable[int], limit: int) -> list[int]:
    """Return the values smaller than ``limit``, keeping their order."""
    return [value for value in values if value < limit]


def _count(tokens: Iterator[str]) -> int:
    count = int(next(tokens))
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return count


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def _run(command: str, by_value: bool, tokens: Iterator[str]) -> None:
    if command == "sums":
        before, after = sums_before_after(SAMPLE, shared=not by_value)
        print(f"Sum1: {before}")
        print(f"Sum2: {after}")
    elif command == "reverse":
        values = _ints(tokens, _count(tokens))
        print("".join(f"{value} " for value in reverse_sequence(values)))
    elif command == "lookup":
        count = _count(tokens)
        pairs = [(next(tokens), next(tokens)) for _ in range(count)]
        for answer in lookup_all(pairs, tokens):
            print(answer)
    elif command == "filter":
        values = _ints(tokens, _count(tokens))
        limit = int(next(tokens))
        print("".join(f"{value} " for value in filter_below(values, limit)), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one exercise, reading whitespace-separated input from standard input."""
    parser = argparse.ArgumentParser(prog="rpnkit-practice", description="Sequence exercises.")
    commands = parser.add_subparsers(dest="command", required=True)
    sums = commands.add_parser("sums", help="sum before and after zeroing the last value")
    sums.add_argument("--by-value", action="store_true", help="let the callee work on a copy")
    commands.add_parser("reverse", help="read N and N integers, print them reversed")
    commands.add_parser("lookup", help="read N word/definition pairs, then answer queries")
    commands.add_parser("filter", help="read N integers and a limit, print those below it")
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split()) if args.command != "sums" else iter(())
    try:
        _run(args.command, getattr(args, "by_value", False), tokens)
    except StopIteration:
        print("unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return 1
    return 0