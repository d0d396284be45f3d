"""Conversion of infix expressions to reverse Polish notation."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from rpnkit.stack import Stack

LINE_LIMIT = 128
RESULT_LABEL = "Обратная польская запись: "

_PRIORITIES = {"+": 1, "-": 1, "*": 2, "/": 2, "(": 0, ")": 0}


def priority(symbol: str) -> int:
    """Return the precedence of an operator: 1 for + -, 2 for * /, 0 for brackets, -1 otherwise."""
    return _PRIORITIES.get(symbol, -1)


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalpha()


def to_rpn(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix.

    Characters that are neither letters, brackets nor operators are ignored.
    Unmatched opening brackets end up in the output.
    """
    output: list[str] = []
    operators = Stack()
    for symbol in expression:
        if _is_operand(symbol):
            output.append(symbol)
        elif symbol == "(":
            operators.push(symbol)
        elif symbol == ")":
            while operators and operators.peek() != "(":
                output.append(operators.pop())
            if operators:
                operators.pop()
        elif priority(symbol) > 0:
            while operators and priority(operators.peek()) >= priority(symbol):
                output.append(operators.pop())
            operators.push(symbol)
    output.extend(operators)
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the postfix form of the first line of the given file."""
    parser = argparse.ArgumentParser(
        prog="rpnkit", description="Convert an infix expression to reverse Polish notation."
    )
    parser.add_argument("path", help="file whose first line holds the expression")
    args = parser.parse_args(argv)

    try:
        handle = open(args.path, encoding="utf-8")
    except OSError as exc:
        print(f"Ошибка открытия файла: {exc.strerror}", file=sys.stderr)
        return 1

    with handle:
        line = handle.readline(LINE_LIMIT - 1)

    if not line:
        print("Error open file?", end="")
        return 0

    print(f"{RESULT_LABEL}{to_rpn(line)}")
    return 0