#!/usr/bin/env python3

import sys
from typing import Iterator

LIMIT = 100

# Index 0 is never printed, the number takes its place
TABLE = ("", "Fizz", "Buzz", "FizzBuzz")


def divisibility_index(n: int) -> int:
    div3 = 1 if n % 3 == 0 else 0
    div5 = 2 if n % 5 == 0 else 0
    return div3 | div5


def label(n: int) -> str:
    idx = divisibility_index(n)
    if idx == 0:
        return str(n)
    return TABLE[idx]


def fizzbuzz(limit: int = LIMIT) -> Iterator[str]:
    for n in range(1, limit + 1):
        yield label(n)


def expected(limit: int = LIMIT) -> list:
    """Reference labels for 1..limit using plain modulo branching."""
    labels = []
    for n in range(1, limit + 1):
        if n % 15 == 0:
            labels.append("FizzBuzz")
        elif n % 3 == 0:
            labels.append("Fizz")
        elif n % 5 == 0:
            labels.append("Buzz")
        else:
            labels.append(str(n))
    return labels


def parse_limit(value: str) -> int:
    try:
        limit = int(value)
    except ValueError:
        raise ValueError(f"limit must be an integer, got {value!r}") from None
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    return limit


def run(limit: int = LIMIT, variant: str = "lookup", out=None):
    # Imported here, variants imports this module for the lookup variant
    from variants import get_variant

    out = sys.stdout if out is None else out
    for line in get_variant(variant)(limit):
        print(line, file=out)


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    variant = args[0] if len(args) >= 1 else "lookup"
    try:
        if len(args) > 2:
            raise ValueError(f"too many arguments: {' '.join(args[2:])}")
        limit = parse_limit(args[1]) if len(args) >= 2 else LIMIT
        if variant == "table":
            from variants import table

            for row in table(limit):
                print(row)
        else:
            run(limit, variant)
    except ValueError as e:
        print(f"fizz: {e}", file=sys.stderr)
        print("usage: fizz.py [variant|table [limit]]", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
