"""Character classification and ASCII case conversion.

Every predicate accepts either a one-character string or an integer
character code. Case conversion only touches the ASCII letters; every
other character is returned unchanged.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_CASE_OFFSET = ord("a") - ord("A")

_UPPER_TABLE = {code: code - _CASE_OFFSET for code in range(ord("a"), ord("z") + 1)}
_LOWER_TABLE = {code: code + _CASE_OFFSET for code in range(ord("A"), ord("Z") + 1)}


def _code(c: Char) -> int:
    """Return the integer code of a character given as a string or an int."""
    if isinstance(c, bool):
        raise TypeError("a character must be a one-character string or an int")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError("a character must be a one-character string or an int")


def is_alpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for the decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or a decimal digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: Char) -> bool:
    """True for any code between 0 and 127 inclusive."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for the printable ASCII characters, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def is_space(c: Char) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; other input comes back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; other input comes back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def sign_of(c: Char) -> int:
    """Return 1 for '+', -1 for '-' and 0 for anything else."""
    code = _code(c)
    if code == ord("+"):
        return 1
    if code == ord("-"):
        return -1
    return 0


def str_upper(s: str) -> str:
    """Return ``s`` with its ASCII lower-case letters upper-cased."""
    return s.translate(_UPPER_TABLE)


def str_lower(s: str) -> str:
    """Return ``s`` with its ASCII upper-case letters lower-cased."""
    return s.translate(_LOWER_TABLE)