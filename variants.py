#!/usr/bin/env python3

"""Alternative renditions of the FizzBuzz sequence.

Each variant takes a limit and yields the labels for 1..limit, so every one
of them can be checked against ``fizz.expected`` and timed by ``score.py``.
"""

import queue
import threading
from itertools import count, cycle, islice

import numpy as np
from numba import njit

from fizz import LIMIT, TABLE, fizzbuzz

WORD = "FizzBuzz"
CHUNK = 8192
MAX_RECURSION = 500

# Format keys selected by start // end
KEY = ("{word}", "{num}")


def shift(limit):
    for num in range(1, limit + 1):
        flags = ((1 >> (num % 3)) << 1) | (1 >> (num % 5))
        if flags == 0:
            yield str(num)
            continue

        start = (0x0C >> flags) & 0x04
        end = (0x50 >> flags) & 0x0C
        yield WORD[start:end]


def shift2(limit):
    for num in range(1, limit + 1):
        # start is 0 or 4, end is 4 or 8, equal when neither divides
        start = (0x18 >> (num % 3)) & 0x04
        end = 0x04 << (0x01 >> (num % 5))
        if start == end:
            yield str(num)
            continue

        yield WORD[start:end]


def branchless(limit):
    for num in range(1, limit + 1):
        start = (0x18 >> (num % 3)) & 0x04
        end = 0x04 << (0x01 >> (num % 5))
        yield KEY[start // end].format(num=num, word=WORD[start:end])


def slice_word(limit):
    for num in range(1, limit + 1):
        d3 = 1 >> (num % 3)
        d5 = 1 >> (num % 5)
        if d3 | d5:
            # F I Z Z B U Z Z, first half, second half or all of it
            yield WORD[4 - d3 * 4:4 + d5 * 4]
            continue

        yield str(num)


def recursion(limit):
    if limit > MAX_RECURSION:
        raise ValueError(f"recursion variant supports limits up to {MAX_RECURSION}, got {limit}")

    lines = []

    def step(num):
        start = (0x18 >> (num % 3)) & 0x04
        end = 0x04 << (0x01 >> (num % 5))
        lines.append(KEY[start // end].format(num=num, word=WORD[start:end]))

        # num // limit is 0 until the last number, then selects the no-op
        steps[num // limit](num + 1)

    steps = (step, lambda _: None)

    if limit > 0:
        steps[0](1)
    return lines


def channel(limit):
    numbers = queue.Queue()

    def produce():
        for num in range(1, limit + 1):
            d3 = 1 >> (num % 3)
            d5 = 1 >> (num % 5)
            numbers.put((num << 2) | (d5 << 1) | d3)
        numbers.put(None)

    producer = threading.Thread(target=produce, daemon=True)
    producer.start()

    while True:
        value = numbers.get()
        if value is None:
            break

        flags = value & 0x03
        if flags:
            yield WORD[4 - ((flags & 0x01) << 2):4 + ((flags & 0x02) << 1)]
        else:
            yield str(value >> 2)

    producer.join()


def _carousel_label(counter, carousel):
    if not carousel:
        return counter
    return carousel


def carousel(limit):
    labels = cycle([0, 0, "Fizz", 0, "Buzz", "Fizz", 0, 0, "Fizz", "Buzz", 0, "Fizz", 0, 0, "FizzBuzz"])
    counter = map(str, count(1))
    return islice(map(_carousel_label, counter, labels), limit)


def chunked(limit, chunk=CHUNK):
    table = np.array(TABLE)
    for start in range(1, limit + 1, chunk):
        numbers = np.arange(start, min(start + chunk, limit + 1))
        div3 = (numbers % 3 == 0).astype(np.int64)
        div5 = (numbers % 5 == 0).astype(np.int64) << 1
        idx = div3 | div5
        yield from np.where(idx == 0, numbers.astype(str), table[idx]).tolist()


@njit
def _indices(start, stop):
    out = np.empty(stop - start, dtype=np.int64)
    for i in range(stop - start):
        n = start + i
        div3 = 1 if n % 3 == 0 else 0
        div5 = 2 if n % 5 == 0 else 0
        out[i] = div3 | div5
    return out


def jit(limit, chunk=CHUNK):
    for start in range(1, limit + 1, chunk):
        stop = min(start + chunk, limit + 1)
        for num, idx in zip(range(start, stop), _indices(start, stop)):
            yield TABLE[idx] if idx else str(num)


VARIANTS = {
    "lookup": fizzbuzz,
    "shift": shift,
    "shift2": shift2,
    "branchless": branchless,
    "slice": slice_word,
    "recursion": recursion,
    "channel": channel,
    "cycle": carousel,
    "chunked": chunked,
    "jit": jit,
}


def get_variant(name):
    try:
        return VARIANTS[name]
    except KeyError:
        known = ", ".join(VARIANTS)
        raise ValueError(f"unknown variant {name!r}, expected one of: {known}") from None


def table(limit=LIMIT):
    """Rows of numbers next to their remainders, in decimal and binary.

    Rows divisible by 3 or 5 are marked with ``*``.
    """
    for num in range(1, limit + 1):
        div3 = num % 3
        div5 = num % 5
        div15 = num % 15

        # space plus 0x0a is a star
        flag = (1 >> div3) | (1 >> div5)
        star = chr(0x20 + flag * 0x0A)

        yield (
            f"{star} {num:3d} - {num:08b} |  {div3:2d} - {div3:04b}"
            f" | {div5:2d} - {div5:04b} | {div15:2d} - {div15:04b}"
        )
