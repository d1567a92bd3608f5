"""Helpers shared by the result views: empty columns and event sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

DEFAULT_TOOLTIP_TEMPLATE = "Show timeline for %1 events."


@dataclass(frozen=True)
class EventSourceEntry:
    """One selectable event source: a cost type with a display name."""

    type_id: int
    name: str
    tooltip: str = ""


def hidden_columns(total_costs: Sequence[int], num_base_columns: int) -> List[int]:
    """Return the view columns of cost types whose total cost is zero.

    Cost columns follow ``num_base_columns`` leading columns, one per type.
    """
    if num_base_columns < 0:
        raise ValueError("num_base_columns must not be negative")
    return [
        num_base_columns + type_id
        for type_id, total in enumerate(total_costs)
        if not total
    ]


def event_source_entries(
    type_names: Sequence[str],
    total_costs: Sequence[int],
    tooltip_template: str = DEFAULT_TOOLTIP_TEMPLATE,
) -> List[EventSourceEntry]:
    """List the cost types that have any cost, in type order.

    ``%1`` in ``tooltip_template`` is replaced by the type's name.
    """
    if len(type_names) != len(total_costs):
        raise ValueError("type_names and total_costs must have the same length")
    return [
        EventSourceEntry(type_id, name, tooltip_template.replace("%1", name))
        for type_id, (name, total) in enumerate(zip(type_names, total_costs))
        if total
    ]


def restore_selection(
    entries: Sequence[EventSourceEntry], previous_type_id: Optional[int]
) -> Optional[int]:
    """Return the position of the entry for ``previous_type_id``, or ``None``."""
    if previous_type_id is None:
        return None
    return next(
        (index for index, entry in enumerate(entries) if entry.type_id == previous_type_id),
        None,
    )