"""Process information records."""

from __future__ import annotations

import functools
from dataclasses import dataclass


@functools.total_ordering
@dataclass(eq=False)
class ProcData:
    """One entry of a process listing.

    Ordering, equality and hashing consider only ``ppid``; :meth:`equals`
    compares every field.
    """

    ppid: str = ""
    name: str = ""
    state: str = ""
    user: str = ""

    def equals(self, other: "ProcData") -> bool:
        return (
            self.ppid == other.ppid
            and self.name == other.name
            and self.state == other.state
            and self.user == other.user
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProcData):
            return NotImplemented
        return self.ppid == other.ppid

    def __lt__(self, other: "ProcData") -> bool:
        if not isinstance(other, ProcData):
            return NotImplemented
        return self.ppid < other.ppid

    def __hash__(self) -> int:
        return hash(self.ppid)