"""Resolve ``file:line`` locations from a source map to files on disk."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterator

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class SourceMapLocation:
    """A resolved source location; false when nothing could be resolved."""

    path: str = ""
    line_number: int = -1

    def __bool__(self) -> bool:
        return bool(self.path)


def _parse_line_number(text: str) -> int:
    stripped = text.strip()
    if _INTEGER.fullmatch(stripped):
        return int(stripped)
    return 0


def _module_dir(module_path: str) -> str:
    directory = os.path.dirname(module_path)
    return (directory or ".") + "/"


@dataclass
class SourceMapResolver:
    """Find source files below a sysroot or an application directory.

    Candidates are tried in this order: the sysroot, the sysroot joined with
    the module's directory, the application path, and the application path
    joined with the module's directory. The prefixes are joined as plain
    strings, so they usually end in a slash.
    """

    sysroot: str = ""
    app_path: str = ""

    def _candidates(self, file_name: str, module_dir: str) -> Iterator[str]:
        yield self.sysroot + file_name
        yield self.sysroot + module_dir + file_name
        yield self.app_path + file_name
        yield self.app_path + module_dir + file_name

    def resolve(self, location: str, module_path: str = "") -> SourceMapLocation:
        """Resolve ``location`` (``file:line``) relative to the known roots.

        ``module_path`` is the path of the binary the current symbol belongs
        to; its directory is tried as an additional prefix. Returns an empty
        location if the text has no usable separator or no file exists.
        """
        separator = location.rfind(":")
        if separator <= 0:
            return SourceMapLocation()

        file_name = location[:separator]
        line_number = _parse_line_number(location[separator + 1:])
        module_dir = _module_dir(module_path)

        for candidate in self._candidates(file_name, module_dir):
            if os.path.exists(candidate):
                return SourceMapLocation(candidate, line_number)
        return SourceMapLocation()