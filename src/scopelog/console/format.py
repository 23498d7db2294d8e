"""printf-style template substitution for console output.

Semantics follow Node's `util.format`, which the console backend's templates
are written against:

    %s  string (containers rendered with repr)
    %d  number          %i  integer          %f  float
    %j  JSON            %o  verbose object   %O  object
    %c  consumed, renders nothing            %%  literal percent

A mismatched template never raises: placeholders without an argument are left
as written and surplus arguments are appended, separated by spaces.
"""

from __future__ import annotations

import math
import pprint
import re
from typing import Callable

import orjson

_TOKEN = re.compile(r"%[sdifjoOc%]")
_CONTAINERS = (dict, list, tuple, set, frozenset)


def _to_number(value: object) -> int | float | None:
    match value:
        case bool(): return int(value)
        case int() | float(): return value
        case str():
            for parse in (int, float):
                try:
                    return parse(value.strip())
                except ValueError:
                    continue
    return None


def _fmt_str(value: object) -> str:
    return repr(value) if isinstance(value, _CONTAINERS) else str(value)


def _fmt_number(value: object) -> str:
    return "NaN" if (n := _to_number(value)) is None else str(n)


def _fmt_int(value: object) -> str:
    n = _to_number(value)
    if n is None or (isinstance(n, float) and not math.isfinite(n)):
        return "NaN"
    return str(int(n))


def _fmt_float(value: object) -> str:
    if (n := _to_number(value)) is None:
        return "NaN"
    try:
        return str(float(n))
    except OverflowError:
        return "Infinity" if n > 0 else "-Infinity"


def to_json(value: object) -> str:
    """Compact JSON for a value; `[Circular]` for self-references, repr when orjson can't encode it."""
    try:
        return orjson.dumps(value, default=repr, option=orjson.OPT_NON_STR_KEYS).decode()
    except orjson.JSONEncodeError as e:
        # orjson reports cycles as exceeding its recursion limit
        return "[Circular]" if "Recursion limit" in str(e) else repr(value)


_CONVERTERS: dict[str, Callable[[object], str]] = {
    "s": _fmt_str,
    "d": _fmt_number,
    "i": _fmt_int,
    "f": _fmt_float,
    "j": to_json,
    "o": lambda v: pprint.pformat(v, sort_dicts=False),
    "O": repr,
    "c": lambda _: "",
}


def inspect_value(value: object) -> str:
    """Render a trailing argument: strings verbatim, everything else via repr."""
    return value if isinstance(value, str) else repr(value)


def format_message(template: str, *args: object) -> str:
    """Substitute `args` into `template`.
    
    Example:
        >>> format_message("%s: %s (%O)", "INFO", "Hello world!", {})
        'INFO: Hello world! ({})'
        >>> format_message("%d%% done", 50, "extra")
        '50% done extra'
    """
    if not args:
        return template
    used = 0
    
    def substitute(match: re.Match[str]) -> str:
        nonlocal used
        token = match.group()
        if token == "%%":
            return "%"
        if used >= len(args):
            return token
        value, used = args[used], used + 1
        return _CONVERTERS[token[1]](value)
    
    out = _TOKEN.sub(substitute, template)
    return " ".join([out, *map(inspect_value, args[used:])]) if used < len(args) else out
