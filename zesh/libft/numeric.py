"""Number parsing, formatting and an in-place integer quicksort.

The integer parsers follow fixed-width machine arithmetic: ``atoi``
wraps to a signed 32-bit value and ``atol`` to a signed 64-bit value,
just as an overflowing accumulator would.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from zesh.libft.charclass import is_digit, is_space, sign_of


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's complement signed integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse_integer(s: str, bits: int) -> int:
    pos = 0
    length = len(s)
    while pos < length and is_space(s[pos]):
        pos += 1
    sign = 1
    if pos < length and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    mask = (1 << bits) - 1
    number = 0
    while pos < length and is_digit(s[pos]):
        number = (number * 10 + int(s[pos])) & mask
        pos += 1
    return _wrap(number * sign, bits)


def atoi(s: str) -> int:
    """Parse the leading integer of ``s`` as a signed 32-bit value.

    Leading white space is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Overflow wraps around.
    """
    return _parse_integer(s, 32)


def atol(s: str) -> int:
    """Parse the leading integer of ``s`` as a signed 64-bit value."""
    return _parse_integer(s, 64)


def atof(s: str) -> float:
    """Parse the leading decimal number of ``s``, with an optional fraction.

    Exponents are not recognised; parsing stops at the first character
    that cannot continue the number.
    """
    pos = 0
    length = len(s)
    while pos < length and is_space(s[pos]):
        pos += 1
    sign = 1.0
    if pos < length and s[pos] in "+-":
        sign = float(sign_of(s[pos]))
        pos += 1
    number = 0.0
    while pos < length and is_digit(s[pos]):
        number = number * 10 + int(s[pos])
        pos += 1
    if pos < length and s[pos] == ".":
        pos += 1
    fraction_digits = 0
    while pos < length and is_digit(s[pos]):
        number = number * 10 + int(s[pos])
        fraction_digits += 1
        pos += 1
    for _ in range(fraction_digits):
        number *= 0.10
    return number * sign


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def nbrlen(n: int, base: int) -> int:
    """Count the digits of ``n`` in ``base``; zero has no digits.

    Division truncates toward zero, so the sign of ``n`` or ``base``
    does not change the count.
    """
    if abs(base) < 2:
        raise ValueError(f"base must have a magnitude of at least 2, got {base}")
    n = abs(n)
    base = abs(base)
    length = 0
    while n:
        n //= base
        length += 1
    return length


def _partition(items: MutableSequence[int], begin: int, end: int) -> int:
    pivot = items[end]
    store = begin
    for j in range(begin, end):
        if items[j] <= pivot:
            items[j], items[store] = items[store], items[j]
            store += 1
    items[store], items[end] = items[end], items[store]
    return store


def quicksort(items: MutableSequence[int], begin: int, end: int) -> None:
    """Sort ``items[begin:end + 1]`` in place; ``end`` is inclusive.

    Uses Lomuto partitioning with the last element as pivot.
    """
    pending = [(begin, end)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))