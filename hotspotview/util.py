"""Formatting helpers for costs, times, frequencies and symbols."""

from __future__ import annotations

import math
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hotspotview.settings import Settings

LIBEXEC_REL_PATH = "../libexec"

_UINT_MASK = 0xFFFFFFFF
_FREQUENCY_UNITS = ("Hz", "KHz", "MHz", "GHz", "THz")


@dataclass(frozen=True)
class Symbol:
    """A resolved symbol together with the binary it belongs to."""

    symbol: str = ""
    binary: str = ""
    path: str = ""
    pretty_symbol: str = ""

    @property
    def is_valid(self) -> bool:
        return bool(self.symbol or self.binary)


def _format_g(value: float, precision: int) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{precision}G}"


def _zero_pad(fragment: int, width: int) -> str:
    return str(fragment).rjust(width, "0")


def format_string(text: str, replace_empty_string: bool = True) -> str:
    """Return ``text``, or ``"??"`` when it is empty and replacement is requested."""
    if not text and replace_empty_string:
        return "??"
    return text


def format_symbol(symbol: Symbol, replace_empty_string: bool = True) -> str:
    """Format a symbol name honouring the prettify-symbols preference."""
    name = symbol.pretty_symbol if Settings.instance().prettify_symbols else symbol.symbol
    return format_string(name, replace_empty_string)


def format_cost(cost: int) -> str:
    """Format a cost with four significant digits, e.g. ``1.234E+56``."""
    return _format_g(float(cost), 4)


def format_cost_relative(
    self_cost: int, total_cost: int, add_percent_sign: bool = False
) -> str:
    """Format ``self_cost`` as a percentage of ``total_cost``; empty if the total is zero."""
    if not total_cost:
        return ""
    text = _format_g(self_cost * 100.0 / total_cost, 3)
    return text + "%" if add_percent_sign else text


def format_time_string(nanoseconds: int, short_form: bool = False) -> str:
    """Format a duration given in nanoseconds for display."""
    if nanoseconds < 0:
        raise ValueError("nanoseconds must not be negative")

    if nanoseconds < 1000:
        return f"{nanoseconds}ns"

    microseconds = nanoseconds // 1000
    if nanoseconds < 1_000_000:
        if short_form:
            return f"{microseconds}µs"
        nanos = nanoseconds % 1000
        return f"{_zero_pad(microseconds, 3)}.{_zero_pad(nanos, 3)}µs"

    milliseconds = (nanoseconds // 1_000_000) % 1000
    if nanoseconds < 1_000_000_000:
        if short_form:
            return f"{milliseconds}ms"
        return f"{_zero_pad(milliseconds, 3)}.{_zero_pad(microseconds, 3)}ms"

    total_seconds = nanoseconds // 1_000_000_000
    days = total_seconds // 60 // 60 // 24
    hours = (total_seconds // 60 // 60) % 24
    minutes = (total_seconds // 60) % 60
    seconds = total_seconds % 60

    def optional(fragment: int, unit: str) -> str:
        return f"{fragment}{unit} " if fragment > 0 else ""

    prefix = optional(days, "d") + optional(hours, "h") + optional(minutes, "min")
    if short_form:
        return f"{prefix}{seconds}s"
    return f"{prefix}{_zero_pad(seconds, 2)}.{_zero_pad(milliseconds, 3)}s"


def format_frequency(occurrences: int, nanoseconds: int) -> str:
    """Format how often something happened within ``nanoseconds`` as a frequency."""
    if occurrences < 0 or nanoseconds < 0:
        raise ValueError("occurrences and nanoseconds must not be negative")
    if nanoseconds:
        hz = 1e9 * occurrences / nanoseconds
    else:
        hz = math.inf if occurrences else math.nan

    unit = _FREQUENCY_UNITS[0]
    for next_unit in _FREQUENCY_UNITS[1:]:
        if not hz > 1000.0:
            break
        hz /= 1000.0
        unit = next_unit
    return _format_g(hz, 4) + unit


def hash_combine(seed: int, value_hash: int) -> int:
    """Combine ``value_hash`` into ``seed`` as 32-bit unsigned hashes."""
    seed &= _UINT_MASK
    value_hash &= _UINT_MASK
    mixed = (value_hash + 0x9E3779B9 + ((seed << 6) & _UINT_MASK) + (seed >> 2)) & _UINT_MASK
    return seed ^ mixed


def find_libexec_binary(
    name: str,
    application_dir: Optional[str] = None,
    libexec_rel_path: Optional[str] = None,
) -> Optional[str]:
    """Find an executable ``name`` in the application's libexec directory.

    Returns its absolute path, or ``None`` if it does not exist, is not a
    regular file or is not executable.
    """
    if application_dir is None:
        application_dir = str(Path(sys.argv[0] or ".").resolve().parent)
    if libexec_rel_path is None:
        libexec_rel_path = LIBEXEC_REL_PATH

    libexec_dir = Path(application_dir) / libexec_rel_path
    if not libexec_dir.is_dir():
        return None
    candidate = libexec_dir / name
    if not candidate.is_file() or not os.access(candidate, os.X_OK):
        return None
    return os.path.abspath(candidate)